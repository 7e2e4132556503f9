"""GoPages — git plumbing for the publish workflow."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Sequence

from gopages.errors import GitCommandError
from gopages.utils.logging import logger

Runner = Callable[..., Awaitable[str]]

COMMITTER_NAME = "GitHub Action"
COMMITTER_EMAIL = "action@github.com"


class GitOperations:
    """Runs git in a working tree. Every non-zero exit raises GitCommandError."""

    def __init__(self, repo_path: str | Path = ".", runner: Runner | None = None) -> None:
        self.repo_path = Path(repo_path)
        self._runner = runner or self._default_runner

    # ------------------------------------------------------------------
    # Workflow-level operations

    async def setup_account(self) -> None:
        await self.add_config("user.name", COMMITTER_NAME)
        await self.add_config("user.email", COMMITTER_EMAIL)

    async def switch_new_branch(self, branch_name: str) -> None:
        await self.checkout_local_branch(branch_name)

    async def commit_all_changes(self, message: str) -> None:
        await self.add(".")
        await self.commit(message)

    async def push_changes(self) -> None:
        await self.push()

    async def check_diff(self) -> bool:
        return await self.has_changes()

    # ------------------------------------------------------------------
    # Primitives

    async def add_config(self, key: str, value: str) -> None:
        await self._run(["git", "config", key, value])

    async def has_changes(self) -> bool:
        status = await self._run(["git", "status", "--porcelain"])
        return bool(status.strip())

    async def add(self, pathspec: str) -> None:
        await self._run(["git", "add", pathspec])

    async def commit(self, message: str) -> None:
        await self._run(["git", "commit", "-m", message])

    async def push(self) -> None:
        await self._run(["git", "push", "origin", "HEAD"])

    async def checkout_local_branch(self, branch_name: str) -> None:
        await self._run(["git", "checkout", "-b", branch_name])

    # ------------------------------------------------------------------
    # Helpers

    async def _run(self, args: Sequence[str]) -> str:
        logger.debug("  $ %s", " ".join(args))
        return await self._runner(list(args), cwd=self.repo_path)

    @staticmethod
    async def _default_runner(args: list[str], *, cwd: Path) -> str:
        proc = await asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        if proc.returncode != 0:
            raise GitCommandError(args, proc.returncode, stderr.decode("utf-8", "replace"))
        return stdout.decode("utf-8", "replace")
