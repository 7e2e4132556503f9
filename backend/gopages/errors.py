"""
GoPages — Structured error catalog.

Every error has a code, human message, and suggested fix.
Nothing is retried internally; callers decide how to report.
"""

from __future__ import annotations

from typing import Any


class GoPagesError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class ConfigurationError(GoPagesError):
    def __init__(self, message: str, suggestion: str = ""):
        super().__init__(
            code="CONFIGURATION_ERROR",
            message=message,
            suggestion=suggestion or "Check GITHUB_REPOSITORY (owner/repo) and GITHUB_TOKEN.",
        )


class ValidationError(GoPagesError):
    """Schema failure. The message never carries field-level detail."""

    def __init__(self, message: str = "Invalid payload"):
        super().__init__(
            code="VALIDATION_FAILED",
            message=message,
            suggestion="Required: owner, repoName, goModInfo.Module.Path, goModInfo.Imports[] (non-empty strings).",
        )


class ToolchainError(GoPagesError):
    def __init__(self, message: str, stderr: str = ""):
        super().__init__(
            code="TOOLCHAIN_ERROR",
            message=message,
            suggestion="Install Go and run from the module root (where go.mod lives).",
            detail=stderr[:500] if stderr else None,
        )


class PageWriteError(GoPagesError):
    def __init__(self, path: str, reason: str):
        super().__init__(
            code="PAGE_WRITE_FAILED",
            message=f"Could not write {path}: {reason}",
            suggestion="Check that the pages directory is writable.",
        )


class GitCommandError(GoPagesError):
    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        self.args_list = args
        self.returncode = returncode
        super().__init__(
            code="GIT_COMMAND_FAILED",
            message=f"`{' '.join(args)}` exited with status {returncode}",
            suggestion="Make sure the working directory is a git checkout with push access.",
            detail=stderr[:500] if stderr else None,
        )


class GitHubAPIError(GoPagesError):
    def __init__(self, api: str, status: int, body: str = ""):
        self.status = status
        super().__init__(
            code=f"GITHUB_{api.upper().replace(' ', '_')}_ERROR",
            message=f"GitHub {api} returned HTTP {status}",
            suggestion="Check the token's permissions (contents, pull-requests, issues).",
            detail=body[:500] if body else None,
        )
