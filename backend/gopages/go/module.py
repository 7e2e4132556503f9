"""
GoPages — Go toolchain access.

Module information comes from `go list -json=Module,Imports .`, run in the
module root. Its output is validated into GoModInfo.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pydantic

from gopages.errors import ToolchainError
from gopages.models.payload import GoModInfo
from gopages.utils.logging import logger, step_timer


class GoToolchain:
    def __init__(self, module_dir: str | Path = ".", go_binary: str = "go"):
        self.module_dir = Path(module_dir)
        self.go_binary = go_binary

    async def _exec(self, *args: str) -> tuple[int, str, str]:
        proc = await asyncio.create_subprocess_exec(
            self.go_binary,
            *args,
            cwd=str(self.module_dir),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        return proc.returncode, stdout.decode("utf-8", "replace"), stderr.decode("utf-8", "replace")

    async def check_existence(self) -> bool:
        try:
            code, stdout, _ = await self._exec("version")
        except FileNotFoundError:
            logger.warning("  %s not found on PATH", self.go_binary)
            return False
        if code == 0:
            logger.debug("  %s", stdout.strip())
        return code == 0

    async def get_mod_info(self) -> GoModInfo:
        with step_timer("go list — module imports"):
            try:
                code, stdout, stderr = await self._exec("list", "-json=Module,Imports", ".")
            except FileNotFoundError as exc:
                raise ToolchainError(f"{self.go_binary} executable not found") from exc
            if code != 0:
                raise ToolchainError(f"Failed to get Go module information: {stderr.strip()}", stderr)
            try:
                data = json.loads(stdout)
                # go list omits Imports for packages without any
                data.setdefault("Imports", [])
                return GoModInfo.model_validate(data)
            except (json.JSONDecodeError, AttributeError, pydantic.ValidationError) as exc:
                raise ToolchainError("Unexpected `go list` output", stdout) from exc
