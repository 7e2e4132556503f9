"""
GoPages — Capability interfaces consumed by the services.

Production code binds the adapters in gopages.git, gopages.github,
gopages.go, gopages.env and gopages.pages.writer; tests bind recording fakes.
"""

from __future__ import annotations

from typing import Protocol

from gopages.github.models import (
    CreateIssueCommentParams,
    CreatePullRequestParams,
    PullRequest,
    Repository,
)
from gopages.models.payload import GoModInfo


class EnvironmentPort(Protocol):
    def get_github_repository(self) -> str | None: ...


class FileWritePort(Protocol):
    async def save_file(self, file_path: str, content: str) -> None: ...


class GitPort(Protocol):
    async def setup_account(self) -> None: ...

    async def switch_new_branch(self, branch_name: str) -> None: ...

    async def commit_all_changes(self, message: str) -> None: ...

    async def push_changes(self) -> None: ...

    async def check_diff(self) -> bool: ...


class GitHubPort(Protocol):
    async def get_repository(self, owner: str, repo: str) -> Repository: ...

    async def create_pull_request(self, params: CreatePullRequestParams) -> PullRequest: ...

    async def create_issue_comment(self, params: CreateIssueCommentParams) -> None: ...


class GoPort(Protocol):
    async def check_existence(self) -> bool: ...

    async def get_mod_info(self) -> GoModInfo: ...
