"""GitHub user model."""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """GitHub user (author of a resource or comment)."""

    model_config = ConfigDict(frozen=True)

    login: str = ""
    avatar_url: str = ""
    url: str = ""
