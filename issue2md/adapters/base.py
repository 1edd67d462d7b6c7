"""Abstract base for resource adapters."""

from abc import ABC, abstractmethod

from issue2md.errors import UnsupportedURLError
from issue2md.models import Discussion, Issue, PullRequest, Resource, ResourceType
from issue2md.parser import ResourceURL, supported_types


class ResourceAdapter(ABC):
    """Fetches issues, pull requests and discussions from a hosting platform."""

    @abstractmethod
    def get_issue(self, owner: str, repo: str, number: int) -> Issue:
        """Fetch issue with its comments."""
        ...

    @abstractmethod
    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        """Fetch pull request with conversation and review comments."""
        ...

    @abstractmethod
    def get_discussion(self, owner: str, repo: str, number: int) -> Discussion:
        """Fetch discussion with its comments and replies."""
        ...

    def fetch(self, resource_url: ResourceURL) -> Resource:
        """Fetch the resource a classified URL points at."""
        if not resource_url.is_valid:
            raise UnsupportedURLError(resource_url.original_url, supported_types())
        args = (resource_url.owner, resource_url.repo, resource_url.number)
        if resource_url.type == ResourceType.ISSUE:
            return self.get_issue(*args)
        if resource_url.type == ResourceType.PR:
            return self.get_pull_request(*args)
        return self.get_discussion(*args)
