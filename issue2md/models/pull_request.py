"""GitHub pull request model."""

from datetime import datetime
from typing import List, Literal

from pydantic import Field

from issue2md.models.labels import Label, Milestone
from issue2md.models.resource import Resource


class PullRequest(Resource):
    """GitHub pull request (status open, closed or merged).

    comments holds both conversation comments and review comments.
    """

    type: Literal["pr"] = "pr"
    labels: List[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    merged_at: datetime | None = None
    is_draft: bool = False
    mergeable: bool = False
    additions: int = 0
    deletions: int = 0
