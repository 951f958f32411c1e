"""GitHub client exceptions."""


class GitHubError(Exception):
    """Root exception for the GitHub client."""


class InvalidURL(GitHubError, ValueError):
    """URL has the wrong scheme, host or path shape."""


class RemoteError(GitHubError):
    """Remote endpoint answered with a non-success status, or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.url = url


class DecodeError(GitHubError):
    """Response body is neither a content listing nor a single content item."""


class LocalIOError(GitHubError, OSError):
    """Local file or directory could not be created or written."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
