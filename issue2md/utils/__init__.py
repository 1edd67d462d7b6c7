"""Shared utilities (Markdown rendering)."""

from issue2md.utils.resource_to_markdown import resource_to_markdown

__all__ = ["resource_to_markdown"]
