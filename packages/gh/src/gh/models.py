"""GitHub API data models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, TypeAdapter, ValidationError, model_validator

from .exceptions import DecodeError


class EntryKind(Enum):
    """What a content item becomes locally."""

    FILE = "file"
    DIRECTORY = "dir"
    OTHER = "other"


class GitHubContent(BaseModel):
    """GitHub content item (file or directory)."""

    type: Literal["file", "dir", "symlink", "submodule"]
    name: str
    path: str = ""
    download_url: str | None = None
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    html_url: str | None = None
    git_url: str | None = None

    @model_validator(mode="after")
    def _check_directory(self) -> "GitHubContent":
        # Directories are listed by path, never fetched.
        if self.type == "dir":
            if not self.path:
                raise ValueError(f"directory {self.name!r} has no path")
            self.download_url = None
        return self

    @property
    def kind(self) -> EntryKind:
        if self.type == "file":
            return EntryKind.FILE
        if self.type == "dir":
            return EntryKind.DIRECTORY
        return EntryKind.OTHER


_listing_adapter = TypeAdapter(list[GitHubContent] | GitHubContent)


def decode_listing(payload: bytes | str) -> list[GitHubContent]:
    """
    Decode a contents API body.

    The API answers a directory path with a JSON array and a file path with a
    single JSON object. Both shapes are tried against the same buffer; a single
    object is returned as a one-element list.

    Raises:
        DecodeError: if the body matches neither shape
    """
    try:
        data = _listing_adapter.validate_json(payload)
    except ValidationError as e:
        raise DecodeError(f"error decoding github api response: {e.error_count()} validation error(s)") from e
    if isinstance(data, GitHubContent):
        return [data]
    return data
