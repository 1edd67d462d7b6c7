"""Labels, milestones and discussion categories."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Label(BaseModel):
    """Issue or pull request label."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    color: str = ""


class Milestone(BaseModel):
    """Milestone an issue or pull request belongs to."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    state: str = "open"
    due_date: datetime | None = None


class DiscussionCategory(BaseModel):
    """Discussion category (GraphQL node id, slug and display name)."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    slug: str = ""
    name: str = ""
    description: str = ""
