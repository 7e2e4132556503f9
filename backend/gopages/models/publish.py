"""
GoPages — Publish workflow state and result contracts.

Every update run returns an UpdateResult with the final state, the decision
that drove the git/GitHub calls, and per-step timings.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ChangeType(str, enum.Enum):
    COMMIT = "commit"
    PR = "pr"


class PublishState(str, enum.Enum):
    START = "START"
    CHANGE_CHECKED = "CHANGE_CHECKED"
    PUBLISHED_DIRECT = "PUBLISHED_DIRECT"
    PUBLISHED_PR = "PUBLISHED_PR"
    DONE = "DONE"
    FAILED = "FAILED"


class StepTiming(BaseModel):
    step: str
    duration_ms: int
    status: str = "ok"  # ok | skipped | failed
    detail: str = ""


class UpdateOptions(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    pages_dir: str = Field(default=".", min_length=1)
    change_type: ChangeType = ChangeType.COMMIT


class PublishDecision(BaseModel):
    has_changes: bool
    change_type: ChangeType
    branch_name: str | None = None


class UpdateResult(BaseModel):
    """Complete output contract for one update run."""

    state: PublishState
    suffixes: list[str] = Field(default_factory=list)
    written_files: list[str] = Field(default_factory=list)
    decision: PublishDecision | None = None
    pull_request_url: str | None = None
    timings: list[StepTiming] = Field(default_factory=list)
