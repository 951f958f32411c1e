import pytest

from gh import InvalidURL, is_raw_url, parse_github_url, parse_raw_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://github.com/acme/widgets/tree/main/src", ("acme", "widgets", "src")),
        ("https://github.com/acme/widgets/tree/main/src/a/b", ("acme", "widgets", "src/a/b")),
        ("https://github.com/acme/widgets/blob/v1.2/docs/readme.md", ("acme", "widgets", "docs/readme.md")),
        ("https://github.com/acme/widgets/tree/main/src/", ("acme", "widgets", "src")),
        ("https://github.com/acme/widgets/tree/main", ("acme", "widgets", "")),
    ],
)
def test_parse_github_url(url, expected):
    location = parse_github_url(url)
    assert (location.owner, location.repo, location.path) == expected


def test_parse_github_url_keeps_ref():
    location = parse_github_url("https://github.com/acme/widgets/blob/dev/a.txt")
    assert location.ref == "dev"
    assert location.contents_endpoint == "/repos/acme/widgets/contents/a.txt"


def test_contents_endpoint_quotes_path():
    location = parse_github_url("https://github.com/acme/widgets/tree/main/my%20dir/a%23b")
    assert location.path == "my dir/a#b"
    assert location.contents_endpoint == "/repos/acme/widgets/contents/my%20dir/a%23b"


def test_parse_github_url_unquotes_segments():
    location = parse_github_url("https://github.com/acme/widgets/tree/main/my%20dir")
    assert location.path == "my dir"


@pytest.mark.parametrize(
    "url",
    [
        "ftp://github.com/a/b",
        "http://github.com/acme/widgets/tree/main/src",
        "https://gitlab.com/acme/widgets/tree/main/src",
        "https://www.github.com/acme/widgets/tree/main/src",
        "https://github.com/acme/widgets",
        "https://github.com/acme/widgets/tree",
        "not a url",
        "",
    ],
)
def test_parse_github_url_invalid(url):
    with pytest.raises(InvalidURL):
        parse_github_url(url)


def test_invalid_url_is_value_error():
    with pytest.raises(ValueError, match="scheme"):
        parse_github_url("ftp://github.com/a/b")


def test_parse_raw_url():
    location = parse_raw_url("https://raw.githubusercontent.com/acme/widgets/main/src/a.txt")
    assert (location.owner, location.repo, location.ref, location.path) == ("acme", "widgets", "main", "src/a.txt")


@pytest.mark.parametrize(
    "url",
    [
        "http://raw.githubusercontent.com/acme/widgets/main/a.txt",
        "https://github.com/acme/widgets/main/a.txt",
        "https://raw.githubusercontent.com/acme/widgets/main",
    ],
)
def test_parse_raw_url_invalid(url):
    with pytest.raises(InvalidURL):
        parse_raw_url(url)


def test_is_raw_url():
    assert is_raw_url("https://raw.githubusercontent.com/acme/widgets/main/a.txt")
    assert not is_raw_url("https://github.com/acme/widgets/blob/main/a.txt")
    assert not is_raw_url("./out")
