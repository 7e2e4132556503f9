"""
GoPages — GitHub REST API client.

Base URL: https://api.github.com (GITHUB_API_URL for GHES)
Auth: bearer token on every request.

Endpoints used:
  GET  /repos/{owner}/{repo}                          — default branch lookup
  POST /repos/{owner}/{repo}/pulls                    — open a pull request
  POST /repos/{owner}/{repo}/issues/{number}/comments — post a comment
"""

from typing import Any

import httpx

from gopages.errors import GitHubAPIError
from gopages.github.models import (
    CreateIssueCommentParams,
    CreatePullRequestParams,
    PullRequest,
    Repository,
)
from gopages.utils.logging import logger, step_timer

API_VERSION = "2022-11-28"


class GitHubClient:
    """Thin async wrapper around the three GitHub REST calls GoPages needs."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        h = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    async def _request(
        self, api: str, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers(),
                json=payload,
            )
        if not resp.is_success:
            logger.error("  GitHub %s %s returned %d: %s", method, path, resp.status_code, resp.text)
            raise GitHubAPIError(api, resp.status_code, resp.text)
        return resp.json()

    async def get_repository(self, owner: str, repo: str) -> Repository:
        """Fetch repository metadata (only the default branch is used)."""
        data = await self._request("get repository", "GET", f"/repos/{owner}/{repo}")
        return Repository(
            owner=data.get("owner", {}).get("login", owner),
            repo=data.get("name", repo),
            default_branch=data["default_branch"],
        )

    async def create_pull_request(self, params: CreatePullRequestParams) -> PullRequest:
        with step_timer(f"GitHub — open pull request {params.head} → {params.base}"):
            data = await self._request(
                "create pull request",
                "POST",
                f"/repos/{params.owner}/{params.repo}/pulls",
                {"title": params.title, "head": params.head, "base": params.base},
            )
        pr = PullRequest(number=data["number"], html_url=data.get("html_url", ""))
        logger.info("  Opened pull request #%d %s", pr.number, pr.html_url)
        return pr

    async def create_issue_comment(self, params: CreateIssueCommentParams) -> None:
        with step_timer(f"GitHub — comment on {params.owner}/{params.repo_name}#{params.issue_number}"):
            await self._request(
                "create issue comment",
                "POST",
                f"/repos/{params.owner}/{params.repo_name}/issues/{params.issue_number}/comments",
                {"body": params.comment},
            )
