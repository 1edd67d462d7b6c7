"""GitHub URL classification."""

from issue2md.parser.url import (
    SUPPORTED_PATTERNS,
    ResourceURL,
    URLPattern,
    classify,
    is_supported,
    match,
    parse_url,
    supported_types,
)

__all__ = [
    "SUPPORTED_PATTERNS",
    "ResourceURL",
    "URLPattern",
    "classify",
    "is_supported",
    "match",
    "parse_url",
    "supported_types",
]
