"""Resource adapters (base and GitHub implementation)."""

from issue2md.adapters.base import ResourceAdapter
from issue2md.adapters.github import GitHubAdapter

__all__ = ["ResourceAdapter", "GitHubAdapter"]
