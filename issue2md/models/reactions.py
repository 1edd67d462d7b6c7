"""Reaction tally attached to resources and comments."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

# Order used for rendering; matches GitHub's reaction picker.
REACTION_NAMES = (
    "thumbs_up",
    "thumbs_down",
    "laugh",
    "hooray",
    "confused",
    "heart",
    "rocket",
    "eyes",
)


class Reactions(BaseModel):
    """Per-emoji reaction counters plus the upstream total.

    Values are copied verbatim from the API. total_count is expected to be at
    least the sum of the named counters but that is not enforced here.
    """

    model_config = ConfigDict(frozen=True)

    thumbs_up: int = 0
    thumbs_down: int = 0
    laugh: int = 0
    hooray: int = 0
    confused: int = 0
    heart: int = 0
    rocket: int = 0
    eyes: int = 0
    total_count: int = 0

    def items(self) -> List[Tuple[str, int]]:
        """Return (name, count) pairs for the eight named counters."""
        return [(name, getattr(self, name)) for name in REACTION_NAMES]

    def named_sum(self) -> int:
        """Sum of the eight named counters."""
        return sum(count for _, count in self.items())
