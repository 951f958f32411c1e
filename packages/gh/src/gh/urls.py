"""GitHub URL parsing."""

import logging
from dataclasses import dataclass
from urllib.parse import quote, unquote, urlsplit

from .exceptions import InvalidURL

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
RAW_HOST = "raw.githubusercontent.com"


@dataclass(frozen=True)
class GitHubLocation:
    """A path inside a repository at a given ref."""

    owner: str
    repo: str
    ref: str
    path: str = ""

    @property
    def contents_endpoint(self) -> str:
        return f"/repos/{self.owner}/{self.repo}/contents/{quote(self.path, safe='/')}"


def _split(url: str) -> tuple[str, str, list[str]]:
    try:
        parts = urlsplit(url.strip())
    except ValueError as e:
        raise InvalidURL(f"invalid URL: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise InvalidURL(f"invalid URL: {url!r}")
    segments = [unquote(s) for s in parts.path.strip("/").split("/") if s]
    return parts.scheme.lower(), parts.netloc.lower(), segments


def parse_github_url(url: str) -> GitHubLocation:
    """
    Parse a browser URL such as ``https://github.com/<owner>/<repo>/tree/<ref>/<path>``.

    Args:
        url: github.com URL pointing at a file (blob) or directory (tree)

    Returns:
        GitHubLocation; ``path`` is everything after the ref joined with ``/``

    Raises:
        InvalidURL: on a non-https scheme, a foreign host, or fewer than 4 path segments
    """
    scheme, host, segments = _split(url)
    if scheme != "https":
        raise InvalidURL("invalid URL scheme: must be https")
    if host != GITHUB_HOST:
        raise InvalidURL(f"invalid URL: must be a {GITHUB_HOST} URL")
    if len(segments) < 4:
        raise InvalidURL("invalid GitHub URL format")

    owner, repo, _, ref = segments[:4]
    location = GitHubLocation(
        owner=owner,
        repo=repo,
        ref=ref,
        path="/".join(segments[4:]),
    )
    logger.debug("Parsed %s -> %s", url, location)
    return location


def is_raw_url(url: str) -> bool:
    """Whether ``url`` points at the raw content host."""
    try:
        _, host, _ = _split(url)
    except InvalidURL:
        return False
    return host.startswith(RAW_HOST)


def parse_raw_url(url: str) -> GitHubLocation:
    """
    Parse ``https://raw.githubusercontent.com/<owner>/<repo>/<ref>/<path>``.

    Raises:
        InvalidURL: on a non-https scheme, a foreign host, or a missing file path
    """
    scheme, host, segments = _split(url)
    if scheme != "https":
        raise InvalidURL("invalid URL scheme: must be https")
    if not host.startswith(RAW_HOST):
        raise InvalidURL(f"invalid URL: must be a {RAW_HOST} URL")
    if len(segments) < 4:
        raise InvalidURL("invalid raw GitHub URL format")

    owner, repo, ref = segments[:3]
    return GitHubLocation(owner=owner, repo=repo, ref=ref, path="/".join(segments[3:]))
