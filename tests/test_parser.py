"""Tests for issue2md.parser (URL classification)."""

import pytest

from issue2md.errors import InvalidURLError, UnsupportedURLError
from issue2md.models import ResourceType
from issue2md.parser import (
    SUPPORTED_PATTERNS,
    ResourceURL,
    classify,
    is_supported,
    match,
    parse_url,
    supported_types,
)


class TestClassifyScenarios:
    """Concrete URLs from the golang/go repository."""

    def test_issue_url(self) -> None:
        """Issue URL yields owner, repo, number and ISSUE type."""
        r = classify("https://github.com/golang/go/issues/12345")
        assert r.is_valid
        assert r.owner == "golang"
        assert r.repo == "go"
        assert r.number == 12345
        assert r.type == ResourceType.ISSUE
        assert r.original_url == "https://github.com/golang/go/issues/12345"

    def test_pull_request_url(self) -> None:
        """/pull/ URL yields PR type."""
        r = classify("https://github.com/golang/go/pull/999")
        assert r.is_valid
        assert r.type == ResourceType.PR
        assert r.number == 999

    def test_discussion_url(self) -> None:
        """/discussions/ URL yields DISCUSSION type."""
        r = classify("https://github.com/golang/go/discussions/42")
        assert r.is_valid
        assert r.type == ResourceType.DISCUSSION
        assert r.number == 42

    def test_wiki_url_is_invalid(self) -> None:
        """Unsupported path segment does not match."""
        r = classify("https://github.com/golang/go/wiki/Home")
        assert not r.is_valid

    def test_query_string_is_invalid(self) -> None:
        """Trailing query string is rejected, not truncated."""
        r = classify("https://github.com/golang/go/issues/12345?tab=comments")
        assert not r.is_valid

    def test_ftp_scheme_is_invalid(self) -> None:
        """Only http and https are accepted."""
        assert not classify("ftp://github.com/golang/go/issues/1").is_valid


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "https://github.com/golang/go/issues/12345/",
        "https://github.com/golang/go/issues/12345#issuecomment-1",
        "https://github.com/golang/go/issues/12345/files",
        "https://github.com/golang/go/pull/1/files",
        "https://github.com/golang/go/issues/",
        "https://github.com/golang/go/issues/abc",
        "https://github.com/golang/issues/1",
        "https://gitlab.com/golang/go/issues/1",
        "https://www.github.com/golang/go/issues/1",
        "https://github.com/golang/go/Issues/1",
        "https://github.com/golang/go/PULL/1",
        "https://github.com/golang/go/pulls/1",
        "https://github.com/golang/go/issues/1\n",
        " https://github.com/golang/go/issues/1",
        "https://github.com/golang/go/issues/١٢",
        "prefix https://github.com/golang/go/issues/1",
    ],
)
def test_unsupported_shapes(url: str) -> None:
    """Anything but the three exact shapes is unsupported and invalid."""
    assert not is_supported(url)
    assert match(url) is None
    r = classify(url)
    assert r.is_valid is False
    assert r.owner == ""
    assert r.repo == ""
    assert r.number == 0
    assert r.type is None
    assert r.original_url == url


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("issues", ResourceType.ISSUE),
        ("pull", ResourceType.PR),
        ("discussions", ResourceType.DISCUSSION),
    ],
)
@pytest.mark.parametrize(
    ("owner", "repo", "number"),
    [
        ("octocat", "Hello-World", 1),
        ("Some.Org", "repo_name.js", 2147483648),
        ("a", "b", 7),
    ],
)
def test_valid_shapes_roundtrip_components(
    segment: str, expected: ResourceType, owner: str, repo: str, number: int
) -> None:
    """Owner, repo and number come back unchanged for every kind."""
    for scheme in ("http", "https"):
        url = f"{scheme}://github.com/{owner}/{repo}/{segment}/{number}"
        r = classify(url)
        assert r.is_valid
        assert (r.owner, r.repo, r.number, r.type) == (owner, repo, number, expected)
        assert is_supported(url)
        assert match(url).type == expected


def test_leading_zeros_parsed_as_integer() -> None:
    """Number is parsed as an integer."""
    assert classify("https://github.com/o/r/issues/007").number == 7


def test_owner_casing_not_validated() -> None:
    """Owner and repo casing is preserved as given."""
    r = classify("https://github.com/GoLang/GO/issues/1")
    assert r.owner == "GoLang"
    assert r.repo == "GO"


def test_supported_types_in_declaration_order() -> None:
    """supported_types lists issue, pr, discussion in pattern order."""
    assert supported_types() == [ResourceType.ISSUE, ResourceType.PR, ResourceType.DISCUSSION]
    assert [p.type for p in SUPPORTED_PATTERNS] == supported_types()


def test_patterns_have_descriptions() -> None:
    """Each pattern carries a human-readable label."""
    assert [p.description for p in SUPPORTED_PATTERNS] == [
        "GitHub Issue URL",
        "GitHub Pull Request URL",
        "GitHub Discussion URL",
    ]


def test_resource_url_is_immutable() -> None:
    """ResourceURL cannot be mutated after classification."""
    r = classify("https://github.com/golang/go/issues/1")
    with pytest.raises(Exception):
        r.number = 2  # type: ignore[misc]


def test_full_name() -> None:
    """full_name joins owner and repo."""
    assert classify("https://github.com/golang/go/pull/3").full_name == "golang/go"


class TestParseUrl:
    """parse_url raises with diagnostics instead of returning invalid results."""

    def test_valid_returns_resource_url(self) -> None:
        """Valid URL returns the same result as classify."""
        url = "https://github.com/golang/go/discussions/42"
        assert parse_url(url) == classify(url)

    def test_not_a_url_raises_invalid(self) -> None:
        """Plain text has no scheme or host."""
        with pytest.raises(InvalidURLError) as exc_info:
            parse_url("golang/go#1")
        assert "golang/go#1" in str(exc_info.value)

    def test_github_url_wrong_shape_raises_unsupported(self) -> None:
        """A URL of the wrong shape lists the supported kinds."""
        with pytest.raises(UnsupportedURLError) as exc_info:
            parse_url("https://github.com/golang/go/wiki/Home")
        msg = str(exc_info.value)
        assert "unsupported URL type" in msg
        assert "https://github.com/golang/go/wiki/Home" in msg
        assert "issue, pr, discussion" in msg
        assert exc_info.value.supported == ["issue", "pr", "discussion"]

    def test_wrong_scheme_is_unsupported(self) -> None:
        """ftp URL is a URL but not a supported one."""
        with pytest.raises(UnsupportedURLError):
            parse_url("ftp://github.com/golang/go/issues/1")

    def test_bad_ipv6_host_raises_invalid(self) -> None:
        """urlsplit failures surface as InvalidURLError."""
        with pytest.raises(InvalidURLError):
            parse_url("http://[::1/path")


def test_invalid_resource_url_defaults() -> None:
    """An invalid ResourceURL echoes the input and zeroes the rest."""
    r = ResourceURL(original_url="x")
    assert (r.owner, r.repo, r.number, r.type, r.is_valid) == ("", "", 0, None, False)
