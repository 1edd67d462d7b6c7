"""Convert GitHub REST and GraphQL payloads to resource models."""

from datetime import datetime
from typing import Any, Dict, List

from issue2md.errors import InvalidResponseError
from issue2md.models import (
    Comment,
    Discussion,
    DiscussionCategory,
    Issue,
    Label,
    Milestone,
    PullRequest,
    Reactions,
    ResourceStatus,
    User,
)

# REST reaction keys -> model field
_REST_REACTIONS = {
    "+1": "thumbs_up",
    "-1": "thumbs_down",
    "laugh": "laugh",
    "hooray": "hooray",
    "confused": "confused",
    "heart": "heart",
    "rocket": "rocket",
    "eyes": "eyes",
}

# GraphQL ReactionContent enum -> model field
_GRAPHQL_REACTIONS = {
    "THUMBS_UP": "thumbs_up",
    "THUMBS_DOWN": "thumbs_down",
    "LAUGH": "laugh",
    "HOORAY": "hooray",
    "CONFUSED": "confused",
    "HEART": "heart",
    "ROCKET": "rocket",
    "EYES": "eyes",
}

GHOST = User(login="ghost", url="https://github.com/ghost")


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _parse_iso_opt(s: str | None) -> datetime | None:
    return _parse_iso(s) if s else None


def _status(value: str | None) -> ResourceStatus:
    try:
        return ResourceStatus(value or "open")
    except ValueError as e:
        raise InvalidResponseError(f"unknown state: {value!r}") from e


def _require(data: Dict[str, Any], *keys: str) -> None:
    missing = [k for k in keys if k not in data]
    if missing:
        raise InvalidResponseError(f"missing fields: {', '.join(missing)}")


def user_from_api(data: Dict[str, Any] | None) -> User:
    """REST "user" or GraphQL "author"; deleted accounts map to ghost."""
    if not data:
        return GHOST
    return User(
        login=data.get("login") or "",
        avatar_url=data.get("avatar_url") or data.get("avatarUrl") or "",
        url=data.get("html_url") or data.get("url") or "",
    )


def reactions_from_api(data: Dict[str, Any] | None) -> Reactions:
    data = data or {}
    counts = {field: int(data.get(key) or 0) for key, field in _REST_REACTIONS.items()}
    return Reactions(total_count=int(data.get("total_count") or 0), **counts)


def reactions_from_graphql(groups: List[Dict[str, Any]] | None) -> Reactions:
    """Build a tally from reactionGroups; GraphQL has no total so it is summed."""
    counts: Dict[str, int] = {}
    for group in groups or []:
        field = _GRAPHQL_REACTIONS.get(group.get("content", ""))
        if field:
            counts[field] = int((group.get("reactors") or {}).get("totalCount") or 0)
    return Reactions(total_count=sum(counts.values()), **counts)


def _labels_from_api(data: List[Any] | None) -> List[Label]:
    return [
        Label(
            name=lb["name"],
            description=lb.get("description") or "",
            color=lb.get("color") or "",
        )
        for lb in (data or [])
        if isinstance(lb, dict) and "name" in lb
    ]


def _milestone_from_api(data: Dict[str, Any] | None) -> Milestone | None:
    if not data:
        return None
    return Milestone(
        title=data.get("title") or "",
        description=data.get("description") or "",
        state=data.get("state") or "open",
        due_date=_parse_iso_opt(data.get("due_on")),
    )


def comment_from_api(data: Dict[str, Any]) -> Comment:
    """REST issue comment or pull request review comment."""
    _require(data, "id", "created_at")
    created = _parse_iso(data["created_at"])
    updated = _parse_iso(data.get("updated_at") or data["created_at"])
    return Comment(
        id=data["id"],
        author=user_from_api(data.get("user")),
        body=data.get("body") or "",
        created_at=created,
        updated_at=updated,
        reactions=reactions_from_api(data.get("reactions")),
    )


def issue_from_api(data: Dict[str, Any], comments: List[Comment]) -> Issue:
    _require(data, "number", "created_at", "updated_at")
    return Issue(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        author=user_from_api(data.get("user")),
        state=_status(data.get("state")),
        created_at=_parse_iso(data["created_at"]),
        updated_at=_parse_iso(data["updated_at"]),
        closed_at=_parse_iso_opt(data.get("closed_at")),
        comments=comments,
        reactions=reactions_from_api(data.get("reactions")),
        total_comments=int(data.get("comments") or 0),
        url=data.get("html_url") or "",
        repository_url=data.get("repository_url") or "",
        labels=_labels_from_api(data.get("labels")),
        milestone=_milestone_from_api(data.get("milestone")),
    )


def pull_request_from_api(
    data: Dict[str, Any],
    comments: List[Comment],
    reactions: Reactions,
) -> PullRequest:
    """Pull request from /pulls/{n}; reactions come from /issues/{n}."""
    _require(data, "number", "created_at", "updated_at")
    merged_at = _parse_iso_opt(data.get("merged_at"))
    if merged_at is not None:
        state = ResourceStatus.MERGED
    else:
        state = _status(data.get("state"))
    base = data.get("base") or {}
    repo = base.get("repo") or {}
    return PullRequest(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        author=user_from_api(data.get("user")),
        state=state,
        created_at=_parse_iso(data["created_at"]),
        updated_at=_parse_iso(data["updated_at"]),
        closed_at=_parse_iso_opt(data.get("closed_at")),
        comments=comments,
        reactions=reactions,
        total_comments=int(data.get("comments") or 0) + int(data.get("review_comments") or 0),
        url=data.get("html_url") or "",
        repository_url=repo.get("html_url") or "",
        labels=_labels_from_api(data.get("labels")),
        milestone=_milestone_from_api(data.get("milestone")),
        merged_at=merged_at,
        is_draft=bool(data.get("draft")),
        mergeable=bool(data.get("mergeable")),
        additions=int(data.get("additions") or 0),
        deletions=int(data.get("deletions") or 0),
    )


def discussion_comment_from_graphql(data: Dict[str, Any], reply_to: int | None = None) -> Comment:
    _require(data, "databaseId", "createdAt")
    return Comment(
        id=data["databaseId"],
        author=user_from_api(data.get("author")),
        body=data.get("body") or "",
        created_at=_parse_iso(data["createdAt"]),
        updated_at=_parse_iso(data.get("updatedAt") or data["createdAt"]),
        reactions=reactions_from_graphql(data.get("reactionGroups")),
        is_answer=bool(data.get("isAnswer")),
        reply_to=reply_to,
    )


def flatten_discussion_comments(nodes: List[Dict[str, Any]]) -> List[Comment]:
    """Top-level comments each followed by their direct replies."""
    comments: List[Comment] = []
    for node in nodes:
        parent = discussion_comment_from_graphql(node)
        comments.append(parent)
        for reply in (node.get("replies") or {}).get("nodes") or []:
            comments.append(discussion_comment_from_graphql(reply, reply_to=parent.id))
    return comments


def discussion_from_graphql(
    data: Dict[str, Any],
    comments: List[Comment],
    total_comments: int,
) -> Discussion:
    """Discussion node; answer_comment is taken from comments, not rebuilt."""
    _require(data, "number", "createdAt", "updatedAt")
    category = data.get("category") or {}
    answer = next((c for c in comments if c.is_answer), None)
    return Discussion(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        author=user_from_api(data.get("author")),
        state=ResourceStatus.CLOSED if data.get("closed") else ResourceStatus.OPEN,
        created_at=_parse_iso(data["createdAt"]),
        updated_at=_parse_iso(data["updatedAt"]),
        closed_at=_parse_iso_opt(data.get("closedAt")),
        comments=comments,
        reactions=reactions_from_graphql(data.get("reactionGroups")),
        total_comments=total_comments,
        url=data.get("url") or "",
        repository_url=(data.get("repository") or {}).get("url") or "",
        category=DiscussionCategory(
            id=str(category.get("id") or ""),
            slug=category.get("slug") or "",
            name=category.get("name") or "",
            description=category.get("description") or "",
        ),
        is_answered=bool(data.get("isAnswered")),
        answer_comment=answer,
    )
