"""Resource kinds and statuses."""

from enum import Enum


class ResourceType(str, Enum):
    """Kind of GitHub resource that can be converted."""

    ISSUE = "issue"
    PR = "pr"
    DISCUSSION = "discussion"


class ResourceStatus(str, Enum):
    """Current status of a resource (merged applies to pull requests only)."""

    OPEN = "open"
    CLOSED = "closed"
    MERGED = "merged"
