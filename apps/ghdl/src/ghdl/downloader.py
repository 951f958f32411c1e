"""Mirror GitHub files and directory trees to local disk."""

import logging
import os
from pathlib import Path
from typing import Iterator

from gh import (
    EntryKind,
    GitHubClient,
    GitHubContent,
    GitHubError,
    LocalIOError,
    parse_github_url,
    parse_raw_url,
)

from .models import DownloadSummary

logger = logging.getLogger(__name__)


class DownloadError(GitHubError):
    """A file or directory could not be downloaded; the underlying error is chained."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


def _is_single_component(name: str) -> bool:
    return name not in ("", ".", "..") and "/" not in name and Path(name).name == name


class TreeDownloader:
    """Downloads single files and whole directories through the contents API."""

    def __init__(self, client: GitHubClient):
        self.client = client

    def _list(
        self, owner: str, repo: str, path: str, ref: str | None
    ) -> Iterator[GitHubContent]:
        try:
            contents = self.client.get_contents(owner, repo, path, ref)
        except GitHubError as e:
            raise DownloadError(f"failed to list directory {path or '/'}: {e}", path) from e
        return iter(contents)

    def _fetch(self, entry: GitHubContent, output_path: Path, summary: DownloadSummary) -> None:
        if not entry.download_url:
            raise DownloadError(f"failed to download file {entry.name}: no download URL", entry.name)
        logger.info("Downloading %s -> %s", entry.path, output_path)
        try:
            written = self.client.download_file(entry.download_url, output_path)
        except GitHubError as e:
            raise DownloadError(f"failed to download file {entry.name}: {e}", entry.name) from e
        summary.files += 1
        summary.total_bytes += written

    def _make_dir(self, entry: GitHubContent, output_path: Path, summary: DownloadSummary) -> None:
        logger.info("Creating directory %s", output_path)
        try:
            output_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadError(f"failed to create directory {output_path}: {e}", entry.name) from e
        summary.directories += 1

    def download_tree(
        self,
        owner: str,
        repo: str,
        path: str,
        local_dir: str | os.PathLike,
        ref: str | None = None,
    ) -> DownloadSummary:
        """
        Recreate ``path`` of ``owner/repo`` under ``local_dir``.

        Entries are handled depth-first in listing order: a file is fetched
        into ``local_dir/<name>``, a directory is created and its own listing
        is walked before the next sibling. A file path produces just that file.
        The walk keeps its pending listings on an explicit stack, so tree depth
        is not bounded by the interpreter's recursion limit.

        Raises:
            DownloadError: on the first failure, naming the file or directory
        """
        summary = DownloadSummary()
        stack = [(self._list(owner, repo, path, ref), Path(local_dir))]

        while stack:
            entries, directory = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            if not _is_single_component(entry.name):
                raise DownloadError(
                    f"refusing entry name {entry.name!r}: not a single path component", entry.name
                )
            output_path = directory / entry.name
            if entry.kind is EntryKind.FILE:
                self._fetch(entry, output_path, summary)
            elif entry.kind is EntryKind.DIRECTORY:
                self._make_dir(entry, output_path, summary)
                stack.append((self._list(owner, repo, entry.path, ref), output_path))
            else:
                logger.warning("Skipping %s %s", entry.type, entry.path)
                summary.skipped.append(entry.path)

        logger.info("Downloaded %s/%s path=%s: %s", owner, repo, path, summary.describe())
        return summary

    def download_url(self, github_url: str, output_dir: str | os.PathLike) -> DownloadSummary:
        """Download the file or directory a github.com browser URL points at into ``output_dir``."""
        location = parse_github_url(github_url)
        output_dir = Path(output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LocalIOError(f"error creating output directory {output_dir}: {e}", path=output_dir) from e
        return self.download_tree(
            location.owner, location.repo, location.path, output_dir, ref=location.ref
        )

    def download_raw(self, raw_url: str, output_file: str | os.PathLike) -> DownloadSummary:
        """Download a raw.githubusercontent.com URL to ``output_file``."""
        location = parse_raw_url(raw_url)
        output_file = Path(output_file)
        logger.info("Downloading %s -> %s", raw_url, output_file)
        try:
            written = self.client.download_file(raw_url, output_file)
        except GitHubError as e:
            raise DownloadError(f"failed to download file {location.path}: {e}", location.path) from e
        return DownloadSummary(files=1, total_bytes=written)
