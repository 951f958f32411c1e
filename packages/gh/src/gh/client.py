"""GitHub API client."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, BinaryIO

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log,
)

from .exceptions import LocalIOError, RemoteError
from .models import GitHubContent, decode_listing
from .urls import GitHubLocation

logger = logging.getLogger(__name__)

# Retry configuration; a single attempt unless the caller opts in
DEFAULT_MAX_RETRIES = 1
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 10  # seconds
DEFAULT_TIMEOUT = 30.0  # seconds

# Retryable exceptions
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.WriteTimeout,
    httpx.PoolTimeout,
    httpx.NetworkError,
)


def create_retry_decorator(max_retries: int = DEFAULT_MAX_RETRIES):
    """Create a retry decorator with specified max retries."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        stop=stop_after_attempt(max(1, max_retries)),
        wait=wait_exponential(multiplier=1, min=DEFAULT_MIN_WAIT, max=DEFAULT_MAX_WAIT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


def _raise_for_status(response: httpx.Response, action: str) -> None:
    if response.is_success:
        return
    raise RemoteError(
        f"{action}: {response.status_code} {response.reason_phrase}",
        status_code=response.status_code,
        reason=response.reason_phrase,
        url=str(response.request.url),
    )


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class GitHubClient:
    """GitHub contents API client with retry support."""

    BASE_URL = "https://api.github.com"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            base_url: Custom base URL (defaults to GitHub API)
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts on network errors (default: 1, no retry)
            http_client: Pre-built httpx client; the caller keeps ownership of it
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "ghdl",
        }

        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=timeout, headers=self.headers, follow_redirects=True)
        else:
            http_client.headers.update(self.headers)
        self._client = http_client
        logger.info("GitHub client ready, base_url=%s, max_retries=%d", self.base_url, max_retries)

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def _get(self, url: str, action: str, **kwargs: Any) -> httpx.Response:
        """GET with retry on network errors; non-2xx raises RemoteError."""

        @create_retry_decorator(self.max_retries)
        def do_request() -> httpx.Response:
            logger.debug("Request: GET %s", url)
            response = self._client.get(url, **kwargs)
            logger.debug("Response: GET %s (status=%d)", url, response.status_code)
            return response

        try:
            response = do_request()
        except httpx.TransportError as e:
            raise RemoteError(f"{action}: {e}", url=url) from e
        _raise_for_status(response, action)
        return response

    def get_contents(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> list[GitHubContent]:
        """
        Get repository contents.

        A file path yields a one-element list. Directory listings that are
        split across pages are followed through the ``Link: rel="next"`` header.

        Args:
            owner: Repository owner
            repo: Repository name
            path: Path in repository (empty for root)
            ref: Branch/tag/commit (None for the default branch)

        Returns:
            List of GitHubContent items in server order

        Raises:
            RemoteError: on a non-success status
            DecodeError: if the body is neither a listing nor a single item
        """
        location = GitHubLocation(owner=owner, repo=repo, ref=ref or "", path=path.strip("/"))
        url: str | None = f"{self.base_url}{location.contents_endpoint}"
        params = {"ref": ref} if ref else None
        logger.info("Fetching contents: %s/%s path=%s ref=%s", owner, repo, path, ref)

        contents: list[GitHubContent] = []
        while url:
            response = self._get(url, "could not get content", params=params)
            page = decode_listing(response.content)
            logger.debug("Listing page: %d items", len(page))
            contents.extend(page)
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None

        return contents

    def _stream_to(self, url: str, out: BinaryIO) -> int:
        @create_retry_decorator(self.max_retries)
        def do_download() -> int:
            out.seek(0)
            out.truncate()
            logger.debug("Downloading: %s", url)
            with self._client.stream("GET", url) as response:
                _raise_for_status(response, "could not download file")
                written = 0
                for chunk in response.iter_bytes():
                    out.write(chunk)
                    written += len(chunk)
            return written

        try:
            return do_download()
        except httpx.TransportError as e:
            raise RemoteError(f"could not download file: {e}", url=url) from e

    def download_file(self, url: str, destination: str | os.PathLike) -> int:
        """
        Stream ``url`` into ``destination``, creating or replacing it.

        The body goes to a temporary file next to the destination which is
        renamed into place once complete, so a failed download never leaves
        a truncated file behind.

        Returns:
            Number of bytes written

        Raises:
            RemoteError: on a non-success status or exhausted network retries
            LocalIOError: if the destination cannot be created or written
        """
        destination = Path(destination)
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{destination.name}.", suffix=".part", dir=destination.parent
            )
        except OSError as e:
            raise LocalIOError(f"could not create {destination}: {e}", path=destination) from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as out:
                written = self._stream_to(url, out)
            os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, destination)
        except OSError as e:
            raise LocalIOError(f"could not write {destination}: {e}", path=destination) from e
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.debug("Saved %s (%d bytes)", destination, written)
        return written
