"""Resource data model (Pydantic): issues, pull requests, discussions."""

from typing import Annotated, Union

from pydantic import Field, TypeAdapter

from issue2md.models.comment import Comment
from issue2md.models.discussion import Discussion
from issue2md.models.issue import Issue
from issue2md.models.labels import DiscussionCategory, Label, Milestone
from issue2md.models.pull_request import PullRequest
from issue2md.models.reactions import REACTION_NAMES, Reactions
from issue2md.models.resource import Resource
from issue2md.models.types import ResourceStatus, ResourceType
from issue2md.models.user import User

AnyResource = Annotated[Union[Issue, PullRequest, Discussion], Field(discriminator="type")]

# Validates a dumped resource (dict or JSON) back into the matching variant.
resource_adapter: TypeAdapter[AnyResource] = TypeAdapter(AnyResource)

__all__ = [
    "AnyResource",
    "Comment",
    "Discussion",
    "DiscussionCategory",
    "Issue",
    "Label",
    "Milestone",
    "PullRequest",
    "REACTION_NAMES",
    "Reactions",
    "Resource",
    "ResourceStatus",
    "ResourceType",
    "User",
    "resource_adapter",
]
