"""GitHub issue model."""

from typing import List, Literal

from pydantic import Field

from issue2md.models.labels import Label, Milestone
from issue2md.models.resource import Resource


class Issue(Resource):
    """GitHub issue (status open or closed)."""

    type: Literal["issue"] = "issue"
    labels: List[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
