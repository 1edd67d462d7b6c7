"""GitHub API adapter (REST for issues and pull requests, GraphQL for discussions)."""

import logging
from typing import Any, Dict, List

import requests

from issue2md.adapters.base import ResourceAdapter
from issue2md.adapters.converters import (
    comment_from_api,
    discussion_from_graphql,
    flatten_discussion_comments,
    issue_from_api,
    pull_request_from_api,
    reactions_from_api,
)
from issue2md.errors import (
    APIError,
    AuthRequiredError,
    InvalidResponseError,
    NetworkError,
    RateLimitExceededError,
    ResourceNotFoundError,
)
from issue2md.models import Comment, Discussion, Issue, PullRequest

LOG = logging.getLogger("issue2md.adapters.github")

DISCUSSION_QUERY = """
query($owner: String!, $repo: String!, $number: Int!, $first: Int!, $after: String) {
  repository(owner: $owner, name: $repo) {
    discussion(number: $number) {
      number
      title
      body
      url
      createdAt
      updatedAt
      closed
      closedAt
      isAnswered
      repository { url }
      author { login avatarUrl url }
      category { id slug name description }
      reactionGroups { content reactors { totalCount } }
      comments(first: $first, after: $after) {
        totalCount
        pageInfo { hasNextPage endCursor }
        nodes {
          ...CommentFields
          replies(first: 100) { nodes { ...CommentFields } }
        }
      }
    }
  }
}

fragment CommentFields on DiscussionComment {
  databaseId
  body
  createdAt
  updatedAt
  isAnswer
  author { login avatarUrl url }
  reactionGroups { content reactors { totalCount } }
}
"""


def _html_url(owner: str, repo: str, kind: str, number: int) -> str:
    return f"https://github.com/{owner}/{repo}/{kind}/{number}"


def _error_message(resp: requests.Response) -> str:
    msg = resp.text or resp.reason or str(resp.status_code)
    try:
        data = resp.json()
    except ValueError:
        return msg
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return msg


class GitHubAdapter(ResourceAdapter):
    """GitHub API implementation.

    A token is optional for public issues and pull requests but the GraphQL
    API (discussions) always requires one.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
        graphql_url: str = "https://api.github.com/graphql",
        timeout: int = 30,
        user_agent: str = "issue2md",
        per_page: int = 100,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._graphql_url = graphql_url
        self._timeout = timeout
        self._per_page = per_page
        self._token = token
        self._session = requests.Session()
        self._session.headers["Accept"] = "application/vnd.github+json"
        self._session.headers["User-Agent"] = user_agent
        if token:
            self._session.headers["Authorization"] = f"token {token}"

    def _request(
        self,
        method: str,
        url: str,
        resource: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        LOG.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise NetworkError(method, e) from e
        self._raise_for_status(resp, resource)
        return resp

    def _raise_for_status(self, resp: requests.Response, resource: str) -> None:
        status = resp.status_code
        if status < 400:
            return
        if status in (403, 429) and resp.headers.get("X-RateLimit-Remaining") == "0":
            try:
                reset = int(resp.headers.get("X-RateLimit-Reset") or 0)
            except ValueError:
                reset = 0
            raise RateLimitExceededError(reset, status)
        if status == 401:
            raise AuthRequiredError(resource, status)
        if status == 404:
            raise ResourceNotFoundError(resource)
        raise APIError(_error_message(resp), status)

    @staticmethod
    def _json(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise InvalidResponseError(f"body is not JSON: {e}") from e

    def _get(self, path: str, resource: str, params: Dict[str, Any] | None = None) -> Any:
        return self._json(self._request("GET", f"{self._api_url}{path}", resource, params=params))

    def _get_paginated(self, path: str, resource: str) -> List[Dict[str, Any]]:
        """GET every page of a list endpoint by following Link rel="next"."""
        items: List[Dict[str, Any]] = []
        url: str | None = f"{self._api_url}{path}"
        params: Dict[str, Any] | None = {"per_page": self._per_page}
        while url:
            resp = self._request("GET", url, resource, params=params)
            data = self._json(resp)
            if not isinstance(data, list):
                raise InvalidResponseError(f"expected a list from {path}")
            items.extend(data)
            url = (resp.links or {}).get("next", {}).get("url")
            # The next link already carries the query string.
            params = None
        return items

    def _comments(self, path: str, resource: str) -> List[Comment]:
        return [comment_from_api(d) for d in self._get_paginated(path, resource)]

    def get_issue(self, owner: str, repo: str, number: int) -> Issue:
        resource = _html_url(owner, repo, "issues", number)
        base = f"/repos/{owner}/{repo}/issues/{number}"
        data = self._get(base, resource)
        comments = self._comments(f"{base}/comments", resource)
        LOG.info("Fetched issue %s/%s#%d with %d comments", owner, repo, number, len(comments))
        return issue_from_api(data, comments)

    def get_pull_request(self, owner: str, repo: str, number: int) -> PullRequest:
        resource = _html_url(owner, repo, "pull", number)
        data = self._get(f"/repos/{owner}/{repo}/pulls/{number}", resource)
        # Reactions are only exposed on the issue view of a pull request.
        issue_data = self._get(f"/repos/{owner}/{repo}/issues/{number}", resource)
        comments = self._comments(f"/repos/{owner}/{repo}/issues/{number}/comments", resource)
        comments += self._comments(f"/repos/{owner}/{repo}/pulls/{number}/comments", resource)
        comments.sort(key=lambda c: c.created_at)
        LOG.info("Fetched pull request %s/%s#%d with %d comments", owner, repo, number, len(comments))
        return pull_request_from_api(data, comments, reactions_from_api(issue_data.get("reactions")))

    def _graphql(self, query: str, variables: Dict[str, Any], resource: str) -> Dict[str, Any]:
        if not self._token:
            raise AuthRequiredError(resource)
        resp = self._request("POST", self._graphql_url, resource, json={"query": query, "variables": variables})
        payload = self._json(resp)
        if not isinstance(payload, dict):
            raise InvalidResponseError("GraphQL response is not an object")
        errors = payload.get("errors") or []
        if errors:
            if any(e.get("type") == "NOT_FOUND" for e in errors):
                raise ResourceNotFoundError(resource)
            raise APIError("; ".join(str(e.get("message", e)) for e in errors))
        return payload.get("data") or {}

    def get_discussion(self, owner: str, repo: str, number: int) -> Discussion:
        resource = _html_url(owner, repo, "discussions", number)
        variables: Dict[str, Any] = {
            "owner": owner,
            "repo": repo,
            "number": number,
            "first": self._per_page,
            "after": None,
        }
        node: Dict[str, Any] | None = None
        nodes: List[Dict[str, Any]] = []
        total = 0
        while True:
            data = self._graphql(DISCUSSION_QUERY, variables, resource)
            page = (data.get("repository") or {}).get("discussion")
            if not page:
                raise ResourceNotFoundError(resource)
            node = node or page
            conn = page.get("comments") or {}
            total = int(conn.get("totalCount") or 0)
            nodes.extend(conn.get("nodes") or [])
            info = conn.get("pageInfo") or {}
            if not info.get("hasNextPage"):
                break
            variables["after"] = info.get("endCursor")
        comments = flatten_discussion_comments(nodes)
        LOG.info("Fetched discussion %s/%s#%d with %d comments", owner, repo, number, len(comments))
        return discussion_from_graphql(node, comments, total)
