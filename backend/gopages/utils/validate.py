"""
GoPages — Input validation for payloads and run options.

Delegates to the Pydantic models. Schema problems are wrapped in a single
ValidationError so field-level detail never reaches the caller's output;
the original exception stays available as __cause__.
"""

import json
from typing import Any

import pydantic

from gopages.errors import ValidationError
from gopages.models.payload import Payload
from gopages.models.publish import UpdateOptions


def parse_payload(raw: str | bytes | dict[str, Any]) -> Payload:
    """
    Parse and validate a payload given as JSON text or an already-decoded dict.
    Raises ValidationError("Invalid payload") on any failure.
    """
    try:
        data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        return Payload.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, pydantic.ValidationError) as exc:
        raise ValidationError("Invalid payload") from exc


def parse_options(pages_dir: str | None = None, change_type: str | None = None) -> UpdateOptions:
    """Build UpdateOptions; empty inputs fall back to the defaults ('.', 'commit')."""
    try:
        return UpdateOptions(
            pages_dir=pages_dir or ".",
            change_type=change_type or "commit",
        )
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid options") from exc
