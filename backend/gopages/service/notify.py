"""
GoPages — Notification side-channel.

Run inside the module repository: lists the module with the Go toolchain and
posts the resulting payload as a comment on an issue in the pages repository,
where it can be picked up and fed to `gopages update`.
"""

from __future__ import annotations

from dataclasses import dataclass

from gopages.env.environment import split_repository_slug
from gopages.errors import ConfigurationError, ToolchainError
from gopages.github.models import CreateIssueCommentParams
from gopages.models.payload import Payload
from gopages.ports import EnvironmentPort, GitHubPort, GoPort
from gopages.utils.logging import logger


@dataclass(frozen=True)
class NotificationParams:
    owner: str
    repo_name: str
    issue_number: int


async def generate_payload(go: GoPort, env: EnvironmentPort) -> Payload:
    if not await go.check_existence():
        raise ToolchainError("Go environment does not exist")

    mod_info = await go.get_mod_info()

    current_repo = env.get_github_repository()
    if not current_repo:
        raise ConfigurationError("GITHUB_REPOSITORY is not defined")
    owner, repo_name = split_repository_slug(current_repo)

    return Payload(owner=owner, repo_name=repo_name, go_mod_info=mod_info)


async def notify(
    params: NotificationParams,
    go: GoPort,
    github: GitHubPort,
    env: EnvironmentPort,
) -> Payload:
    payload = await generate_payload(go, env)
    logger.info(
        "Notifying %s/%s#%d about %s (%d imports)",
        params.owner, params.repo_name, params.issue_number,
        payload.go_mod_info.module.path, len(payload.go_mod_info.imports),
    )
    await github.create_issue_comment(CreateIssueCommentParams(
        owner=params.owner,
        repo_name=params.repo_name,
        issue_number=params.issue_number,
        comment=payload.to_wire_json(indent=2),
    ))
    return payload
