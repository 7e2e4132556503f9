"""GoPages data models — typed contracts for the entire pipeline."""

from gopages.models.payload import (
    GoModInfo,
    ModuleModel,
    Payload,
)
from gopages.models.publish import (
    ChangeType,
    PublishDecision,
    PublishState,
    StepTiming,
    UpdateOptions,
    UpdateResult,
)

__all__ = [
    "GoModInfo",
    "ModuleModel",
    "Payload",
    "ChangeType",
    "PublishDecision",
    "PublishState",
    "StepTiming",
    "UpdateOptions",
    "UpdateResult",
]
