"""Shared capability surface of issues, pull requests and discussions."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from issue2md.models.comment import Comment
from issue2md.models.reactions import Reactions
from issue2md.models.types import ResourceStatus, ResourceType
from issue2md.models.user import User


class Resource(BaseModel):
    """Fields and accessors common to every resource kind.

    Subclasses pin the ``type`` discriminant. total_comments is the count
    reported upstream and is kept independent of ``len(comments)``: the API
    may return fewer comments than it counts.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    number: int
    title: str = ""
    body: str = ""
    author: User = Field(default_factory=User)
    state: ResourceStatus = ResourceStatus.OPEN
    created_at: datetime
    updated_at: datetime
    closed_at: datetime | None = None
    comments: List[Comment] = Field(default_factory=list)
    reactions: Reactions = Field(default_factory=Reactions)
    total_comments: int = 0
    url: str = ""
    repository_url: str = ""

    @property
    def resource_type(self) -> ResourceType:
        return ResourceType(self.type)

    @property
    def status(self) -> ResourceStatus:
        return self.state

    @property
    def comment_count(self) -> int:
        """Total comment count as reported upstream."""
        return self.total_comments
