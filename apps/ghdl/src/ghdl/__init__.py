"""Download files and directories from GitHub."""

from .downloader import DownloadError, TreeDownloader
from .models import DownloadSummary

__all__ = [
    "TreeDownloader",
    "DownloadError",
    "DownloadSummary",
]
