from __future__ import annotations

from typing import Iterator

import httpx
import pytest

from gh import GitHubClient

from .utils import FakeGitHub


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def client(fake_github: FakeGitHub) -> Iterator[GitHubClient]:
    """GitHubClient whose traffic goes to ``fake_github``; network errors are not retried."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_github.handler))
    with GitHubClient(http_client=http_client, max_retries=1) as gh_client:
        yield gh_client
    http_client.close()
