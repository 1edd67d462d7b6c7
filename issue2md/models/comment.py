"""Comment on an issue, pull request or discussion."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from issue2md.models.reactions import Reactions
from issue2md.models.user import User


class Comment(BaseModel):
    """Comment on an issue, pull request or discussion.

    is_answer and reply_to are only set for discussion comments. Replies are
    one level deep: reply_to points at a top-level comment id.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    author: User = Field(default_factory=User)
    body: str = ""
    created_at: datetime
    updated_at: datetime
    reactions: Reactions = Field(default_factory=Reactions)

    is_answer: bool = False
    reply_to: int | None = None
