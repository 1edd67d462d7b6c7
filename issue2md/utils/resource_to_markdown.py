"""Render an issue, pull request or discussion as a Markdown document."""

import re
from datetime import datetime, timezone
from typing import List

from issue2md.models import (
    Comment,
    Discussion,
    Issue,
    PullRequest,
    Reactions,
    Resource,
    ResourceType,
    User,
)

TYPE_LABELS = {
    ResourceType.ISSUE: "Issue",
    ResourceType.PR: "Pull Request",
    ResourceType.DISCUSSION: "Discussion",
}

REACTION_EMOJI = {
    "thumbs_up": "👍",
    "thumbs_down": "👎",
    "laugh": "😄",
    "hooray": "🎉",
    "confused": "😕",
    "heart": "❤️",
    "rocket": "🚀",
    "eyes": "👀",
}

# @login not preceded by a word char, slash, bracket or backtick (emails, paths, existing links)
_MENTION_RE = re.compile(r"(?<![\w/\[`@])@([A-Za-z0-9](?:[A-Za-z0-9-]{0,38}))\b")


def format_timestamp(value: datetime) -> str:
    """Format as UTC, e.g. 2024-01-15 10:00:00 UTC (naive values are assumed UTC)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_user(user: User, enable_user_links: bool = False) -> str:
    login = user.login or "ghost"
    if enable_user_links:
        return f"[@{login}](https://github.com/{login})"
    return f"@{login}"


def link_mentions(text: str) -> str:
    """Turn @login mentions into profile links."""
    return _MENTION_RE.sub(lambda m: f"[@{m.group(1)}](https://github.com/{m.group(1)})", text)


def format_reactions(reactions: Reactions) -> str:
    """One-line tally of non-zero reactions, empty when there are none."""
    parts = [f"{REACTION_EMOJI[name]} {count}" for name, count in reactions.items() if count > 0]
    return " · ".join(parts)


def _body(text: str, enable_user_links: bool) -> str:
    return link_mentions(text) if enable_user_links else text


def _metadata(resource: Resource, enable_user_links: bool) -> List[str]:
    lines = [
        f"- **Type:** {TYPE_LABELS[resource.resource_type]}",
        f"- **Number:** #{resource.number}",
    ]
    if resource.url:
        lines.append(f"- **URL:** {resource.url}")
    lines.append(f"- **Author:** {format_user(resource.author, enable_user_links)}")
    lines.append(f"- **Status:** {resource.status.value}")
    lines.append(f"- **Created:** {format_timestamp(resource.created_at)}")
    lines.append(f"- **Updated:** {format_timestamp(resource.updated_at)}")
    if resource.closed_at is not None:
        lines.append(f"- **Closed:** {format_timestamp(resource.closed_at)}")

    if isinstance(resource, (Issue, PullRequest)):
        if resource.labels:
            lines.append("- **Labels:** " + ", ".join(f"`{lb.name}`" for lb in resource.labels))
        if resource.milestone is not None:
            lines.append(f"- **Milestone:** {resource.milestone.title}")
    if isinstance(resource, PullRequest):
        if resource.merged_at is not None:
            lines.append(f"- **Merged:** {format_timestamp(resource.merged_at)}")
        lines.append(f"- **Draft:** {'yes' if resource.is_draft else 'no'}")
        lines.append(f"- **Mergeable:** {'yes' if resource.mergeable else 'no'}")
        lines.append(f"- **Changes:** +{resource.additions} / -{resource.deletions}")
    if isinstance(resource, Discussion):
        if resource.category.name:
            lines.append(f"- **Category:** {resource.category.name}")
        lines.append(f"- **Answered:** {'yes' if resource.is_answered else 'no'}")
    return lines


def _comment(comment: Comment, enable_reactions: bool, enable_user_links: bool) -> List[str]:
    heading = f"### {format_user(comment.author, enable_user_links)} · {format_timestamp(comment.created_at)}"
    tags = []
    if comment.is_answer:
        tags.append("✅ Accepted answer")
    if comment.reply_to is not None:
        tags.append(f"↳ reply to #{comment.reply_to}")
    if tags:
        heading += " (" + ", ".join(tags) + ")"
    lines = [heading, ""]
    lines.append(_body(comment.body, enable_user_links) or "(empty comment)")
    lines.append("")
    if enable_reactions and comment.reactions.total_count > 0:
        lines.append(f"**Reactions:** {format_reactions(comment.reactions)}")
        lines.append("")
    return lines


def resource_to_markdown(
    resource: Resource,
    enable_reactions: bool = False,
    enable_user_links: bool = False,
) -> str:
    """Convert a resource to a single Markdown document.

    Output: title, metadata list, description, then the comment thread. The
    comments heading shows the upstream comment count, which can be larger
    than the number of comments rendered.
    """
    lines = [f"# {resource.title or '(no title)'}", ""]
    lines.extend(_metadata(resource, enable_user_links))
    lines.append("")
    lines.append("## Description")
    lines.append("")
    lines.append(_body(resource.body, enable_user_links) or "(no description)")
    lines.append("")
    if enable_reactions and resource.reactions.total_count > 0:
        lines.append(f"**Reactions:** {format_reactions(resource.reactions)}")
        lines.append("")
    if resource.comments or resource.comment_count > 0:
        lines.append(f"## Comments ({resource.comment_count})")
        lines.append("")
        if not resource.comments:
            lines.append("(comments not included)")
            lines.append("")
        for comment in resource.comments:
            lines.extend(_comment(comment, enable_reactions, enable_user_links))
    return "\n".join(lines).strip() + "\n"
