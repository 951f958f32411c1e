"""Download result models."""

from pydantic import BaseModel, Field


class DownloadSummary(BaseModel):
    """What a download run put on disk."""

    files: int = 0
    directories: int = 0
    total_bytes: int = 0
    skipped: list[str] = Field(default_factory=list)  # remote paths of symlinks/submodules

    def describe(self) -> str:
        text = f"{self.files} file(s), {self.directories} directory(ies), {self.total_bytes} bytes"
        if self.skipped:
            text += f", {len(self.skipped)} skipped"
        return text
