"""
GoPages — Update workflow.

Writes the redirect pages and publishes them as a state machine:

  START → CHANGE_CHECKED → PUBLISHED_DIRECT | PUBLISHED_PR → DONE
                         ↘ DONE (working tree clean)

Git and GitHub calls are strictly sequential; each step depends on the side
effect of the previous one. Nothing is retried or rolled back: the first
failure marks the run FAILED and propagates unchanged.
"""

from __future__ import annotations

import time
from typing import Callable

from gopages.env.environment import split_repository_slug
from gopages.errors import ConfigurationError
from gopages.github.models import CreatePullRequestParams
from gopages.models.payload import Payload
from gopages.models.publish import (
    ChangeType,
    PublishDecision,
    PublishState,
    StepTiming,
    UpdateOptions,
    UpdateResult,
)
from gopages.pages.content import (
    TemplateConfig,
    build_page,
    module_path_tail,
    render_template,
)
from gopages.pages.suffix import ROOT_SUFFIX, resolve_import_suffixes
from gopages.ports import EnvironmentPort, FileWritePort, GitHubPort, GitPort
from gopages.utils.logging import logger

COMMIT_MESSAGE = "Update redirect files"
BRANCH_PREFIX = "update-redirect-files"

_TRANSITIONS: dict[PublishState, set[PublishState]] = {
    PublishState.START: {PublishState.CHANGE_CHECKED},
    PublishState.CHANGE_CHECKED: {
        PublishState.PUBLISHED_DIRECT,
        PublishState.PUBLISHED_PR,
        PublishState.DONE,
    },
    PublishState.PUBLISHED_DIRECT: {PublishState.DONE},
    PublishState.PUBLISHED_PR: {PublishState.DONE},
    PublishState.DONE: set(),
    PublishState.FAILED: set(),
}


def unix_millis() -> int:
    return int(time.time() * 1000)


def generate_branch_name(timestamp_ms: int) -> str:
    return f"{BRANCH_PREFIX}-{timestamp_ms}"


def pull_request_title(module_path: str) -> str:
    return f"{COMMIT_MESSAGE} {module_path_tail(module_path)}".rstrip()


class UpdateWorkflow:
    """
    Diff-gated publisher for one payload.

    Ports are injected so tests can record the exact call order; `clock`
    returns unix milliseconds and only feeds the branch name.
    """

    def __init__(
        self,
        options: UpdateOptions,
        payload: Payload,
        *,
        env: EnvironmentPort,
        fs: FileWritePort,
        git: GitPort,
        github: GitHubPort,
        clock: Callable[[], int] = unix_millis,
    ):
        self.options = options
        self.payload = payload
        self.env = env
        self.fs = fs
        self.git = git
        self.github = github
        self.clock = clock
        self.state = PublishState.START
        self.timings: list[StepTiming] = []
        self.written_files: list[str] = []
        self.suffixes: list[str] = []
        self.decision: PublishDecision | None = None
        self.pull_request_url: str | None = None

    def _advance(self, new_state: PublishState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"Illegal transition {self.state.value} → {new_state.value}")
        self.state = new_state

    def _record_step(self, name: str, start: float, status: str = "ok", detail: str = ""):
        ms = int((time.perf_counter() - start) * 1000)
        self.timings.append(StepTiming(step=name, duration_ms=ms, status=status, detail=detail))
        symbol = "✓" if status == "ok" else ("⊘" if status == "skipped" else "✗")
        logger.info("  %s %s — %dms %s", symbol, name, ms, detail)

    def _result(self) -> UpdateResult:
        return UpdateResult(
            state=self.state,
            suffixes=self.suffixes,
            written_files=self.written_files,
            decision=self.decision,
            pull_request_url=self.pull_request_url,
            timings=self.timings,
        )

    async def run(self) -> UpdateResult:
        module_path = self.payload.go_mod_info.module.path
        logger.info(
            "Updating redirect pages for %s (change_type=%s, pages_dir=%s)",
            module_path, self.options.change_type.value, self.options.pages_dir,
        )
        try:
            current_owner, current_repo = self._step_resolve_repository()
            await self._step_write_pages()
            has_changes = await self._step_check_diff()
            if not has_changes:
                self._advance(PublishState.DONE)
                return self._result()

            branch_name = await self._step_commit_and_push()
            if self.options.change_type is ChangeType.PR:
                await self._step_open_pull_request(current_owner, current_repo, branch_name)
            self._advance(PublishState.DONE)
        except Exception:
            self.state = PublishState.FAILED
            raise

        return self._result()

    def _step_resolve_repository(self) -> tuple[str, str]:
        t = time.perf_counter()
        slug = self.env.get_github_repository()
        if not slug:
            self._record_step("resolve_repository", t, "failed", "GITHUB_REPOSITORY unset")
            raise ConfigurationError("Current repository not found")
        owner, repo = split_repository_slug(slug)
        self._record_step("resolve_repository", t, detail=slug)
        return owner, repo

    async def _step_write_pages(self) -> None:
        t = time.perf_counter()
        mod = self.payload.go_mod_info
        self.suffixes = resolve_import_suffixes(mod.module.path, mod.imports)

        content = render_template(TemplateConfig(
            import_prefix=mod.module.path,
            owner=self.payload.owner,
            repo_name=self.payload.repo_name,
        ))
        tail = module_path_tail(mod.module.path)

        for suffix in [*self.suffixes, ROOT_SUFFIX]:
            page = build_page(self.options.pages_dir, tail, suffix, content)
            await self.fs.save_file(page.file_path, page.content)
            self.written_files.append(page.file_path)
            logger.debug("  Generated %s for import suffix %r", page.file_path, suffix)

        self._record_step("write_pages", t, detail=f"{len(self.written_files)} pages")

    async def _step_check_diff(self) -> bool:
        t = time.perf_counter()
        has_changes = await self.git.check_diff()
        self.decision = PublishDecision(
            has_changes=has_changes,
            change_type=self.options.change_type,
        )
        self._advance(PublishState.CHANGE_CHECKED)
        if not has_changes:
            self._record_step("check_diff", t, "skipped", "no changes")
        else:
            self._record_step("check_diff", t, detail="changes found")
        return has_changes

    async def _step_commit_and_push(self) -> str:
        t = time.perf_counter()
        branch_name = generate_branch_name(self.clock())
        is_pr = self.options.change_type is ChangeType.PR

        await self.git.setup_account()
        if is_pr:
            await self.git.switch_new_branch(branch_name)
            self.decision = self.decision.model_copy(update={"branch_name": branch_name})
        await self.git.commit_all_changes(COMMIT_MESSAGE)
        await self.git.push_changes()

        self._advance(PublishState.PUBLISHED_PR if is_pr else PublishState.PUBLISHED_DIRECT)
        self._record_step("commit_and_push", t, detail=branch_name if is_pr else "direct")
        return branch_name

    async def _step_open_pull_request(self, owner: str, repo: str, branch_name: str) -> None:
        t = time.perf_counter()
        repository = await self.github.get_repository(owner, repo)
        pr = await self.github.create_pull_request(CreatePullRequestParams(
            owner=owner,
            repo=repo,
            title=pull_request_title(self.payload.go_mod_info.module.path),
            head=branch_name,
            base=repository.default_branch,
        ))
        self.pull_request_url = getattr(pr, "html_url", None) or None
        self._record_step("open_pull_request", t, detail=f"{branch_name} → {repository.default_branch}")


async def update(
    options: UpdateOptions,
    payload: Payload,
    *,
    env: EnvironmentPort,
    fs: FileWritePort,
    git: GitPort,
    github: GitHubPort,
    clock: Callable[[], int] = unix_millis,
) -> UpdateResult:
    """Run one UpdateWorkflow and return its result."""
    workflow = UpdateWorkflow(options, payload, env=env, fs=fs, git=git, github=github, clock=clock)
    return await workflow.run()
