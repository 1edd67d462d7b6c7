"""GitHub discussion model."""

from typing import Literal

from pydantic import Field

from issue2md.models.comment import Comment
from issue2md.models.labels import DiscussionCategory
from issue2md.models.resource import Resource


class Discussion(Resource):
    """GitHub discussion (status open or closed).

    answer_comment, when set by the fetch layer, is the entry of comments
    marked as the accepted answer.
    """

    type: Literal["discussion"] = "discussion"
    category: DiscussionCategory = Field(default_factory=DiscussionCategory)
    is_answered: bool = False
    answer_comment: Comment | None = None
