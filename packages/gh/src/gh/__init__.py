"""GitHub API client utilities."""

from .client import GitHubClient
from .exceptions import DecodeError, GitHubError, InvalidURL, LocalIOError, RemoteError
from .models import EntryKind, GitHubContent, decode_listing
from .urls import GitHubLocation, is_raw_url, parse_github_url, parse_raw_url

__all__ = [
    "GitHubClient",
    "GitHubContent",
    "GitHubLocation",
    "EntryKind",
    "decode_listing",
    "parse_github_url",
    "parse_raw_url",
    "is_raw_url",
    "GitHubError",
    "InvalidURL",
    "RemoteError",
    "DecodeError",
    "LocalIOError",
]
