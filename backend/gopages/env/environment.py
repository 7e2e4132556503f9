"""GoPages — Process environment access."""

from __future__ import annotations

import os
from typing import Mapping

from gopages.errors import ConfigurationError

REPOSITORY_VAR = "GITHUB_REPOSITORY"


class EnvironmentReader:
    """Reads the current repository slug (owner/repo) set by the CI runner."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ if environ is not None else os.environ

    def get_github_repository(self) -> str | None:
        return self._environ.get(REPOSITORY_VAR) or None


def split_repository_slug(slug: str) -> tuple[str, str]:
    """'owner/repo' -> ('owner', 'repo'). Anything else is a ConfigurationError."""
    owner, sep, repo = slug.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise ConfigurationError(
            f"Invalid {REPOSITORY_VAR} format: {slug!r}. Expected: owner/repo"
        )
    return owner, repo
