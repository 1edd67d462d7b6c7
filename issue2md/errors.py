"""Errors raised while classifying URLs and fetching resources."""

from typing import Iterable


class Issue2MDError(Exception):
    """Base class for all issue2md errors."""

    pass


class URLError(Issue2MDError):
    """Raised when an input URL cannot be classified."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class InvalidURLError(URLError):
    """Input is not a URL at all (no scheme or host)."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        if reason:
            message = f"invalid URL {url!r}: {reason}"
        else:
            message = f"invalid URL: {url}"
        super().__init__(url, message)
        self.reason = reason


class UnsupportedURLError(URLError):
    """Input is a URL but not a GitHub issue, pull request or discussion."""

    def __init__(self, url: str, supported: Iterable[str] = ()) -> None:
        self.supported = [str(getattr(s, "value", s)) for s in supported]
        kinds = ", ".join(self.supported) or "issue, pr, discussion"
        super().__init__(url, f"unsupported URL type: {url} (supported: {kinds})")


class APIError(Issue2MDError):
    """GitHub API returned an error response."""

    def __init__(self, message: str, status_code: int = 0) -> None:
        self.message = message
        self.status_code = status_code
        if status_code > 0:
            super().__init__(f"API error (status {status_code}): {message}")
        else:
            super().__init__(f"API error: {message}")


class AuthRequiredError(APIError):
    """Authentication is required but missing or rejected."""

    def __init__(self, resource: str, status_code: int = 401) -> None:
        self.resource = resource
        super().__init__(
            f"authentication required for resource: {resource} (set GITHUB_TOKEN environment variable)",
            status_code,
        )


class ResourceNotFoundError(APIError):
    """Requested issue, pull request or discussion does not exist."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"resource not found: {url}", 404)


class RateLimitExceededError(APIError):
    """GitHub API rate limit exceeded."""

    def __init__(self, reset_time: int, status_code: int = 403) -> None:
        self.reset_time = reset_time
        super().__init__(f"rate limit exceeded, resets at {reset_time}", status_code)


class NetworkError(Issue2MDError):
    """Transport-level failure talking to GitHub."""

    def __init__(self, op: str, cause: Exception) -> None:
        self.op = op
        self.cause = cause
        super().__init__(f"network error during {op}: {cause}")


class InvalidResponseError(Issue2MDError):
    """GitHub response could not be decoded or had an unexpected shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid API response: {reason}")


class ConfigError(Issue2MDError):
    """Configuration file is missing required structure or is unreadable."""

    pass
