"""Classify GitHub URLs as issue, pull request or discussion.

Only three shapes are accepted, matched against the whole string:

    http(s)://github.com/{owner}/{repo}/issues/{number}
    http(s)://github.com/{owner}/{repo}/pull/{number}
    http(s)://github.com/{owner}/{repo}/discussions/{number}

Trailing slashes, extra path segments, query strings and fragments are
rejected rather than truncated.
"""

import re
from typing import List, Tuple
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict

from issue2md.errors import InvalidURLError, UnsupportedURLError
from issue2md.models import ResourceType


class URLPattern(BaseModel):
    """Compiled URL matcher and the resource type it identifies."""

    model_config = ConfigDict(frozen=True)

    pattern: re.Pattern
    type: ResourceType
    description: str


class ResourceURL(BaseModel):
    """Result of classifying a URL.

    When is_valid is False, owner/repo are empty, number is 0 and type is None.
    """

    model_config = ConfigDict(frozen=True)

    original_url: str
    owner: str = ""
    repo: str = ""
    number: int = 0
    type: ResourceType | None = None
    is_valid: bool = False

    @property
    def full_name(self) -> str:
        """Repository as owner/repo."""
        return f"{self.owner}/{self.repo}"


# Priority order: issue, pull request, discussion. Groups: owner, repo, number.
SUPPORTED_PATTERNS: Tuple[URLPattern, ...] = (
    URLPattern(
        pattern=re.compile(r"https?://github\.com/([^/]+)/([^/]+)/issues/([0-9]+)"),
        type=ResourceType.ISSUE,
        description="GitHub Issue URL",
    ),
    URLPattern(
        pattern=re.compile(r"https?://github\.com/([^/]+)/([^/]+)/pull/([0-9]+)"),
        type=ResourceType.PR,
        description="GitHub Pull Request URL",
    ),
    URLPattern(
        pattern=re.compile(r"https?://github\.com/([^/]+)/([^/]+)/discussions/([0-9]+)"),
        type=ResourceType.DISCUSSION,
        description="GitHub Discussion URL",
    ),
)


def supported_types() -> List[ResourceType]:
    """Resource types in pattern declaration order (for help text)."""
    return [p.type for p in SUPPORTED_PATTERNS]


def match(url: str) -> URLPattern | None:
    """Return the first pattern matching the whole url, or None."""
    for p in SUPPORTED_PATTERNS:
        if p.pattern.fullmatch(url):
            return p
    return None


def is_supported(url: str) -> bool:
    """True if url is one of the supported GitHub resource shapes."""
    return match(url) is not None


def classify(url: str) -> ResourceURL:
    """Classify url and extract owner, repo and number.

    Never raises: unrecognized input yields a ResourceURL with is_valid=False.
    """
    for p in SUPPORTED_PATTERNS:
        m = p.pattern.fullmatch(url)
        if m:
            owner, repo, number = m.groups()
            return ResourceURL(
                original_url=url,
                owner=owner,
                repo=repo,
                number=int(number),
                type=p.type,
                is_valid=True,
            )
    return ResourceURL(original_url=url)


def parse_url(url: str) -> ResourceURL:
    """Classify url, raising when it is not supported.

    Raises InvalidURLError if the input is not a URL at all and
    UnsupportedURLError if it is a URL of an unsupported shape.
    """
    result = classify(url)
    if result.is_valid:
        return result
    try:
        parts = urlsplit(url.strip())
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidURLError(url, "missing scheme or host")
    raise UnsupportedURLError(url, supported_types())
