"""
GoPages — Typed payload data model.

The payload travels as JSON between the module repository (notify) and the
pages repository (update). Field names on the wire follow `go list -json`
(`Module.Path`, `Imports`) and camelCase for the rest; Python code uses the
snake_case attributes.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

NonEmptyStr = Annotated[str, Field(min_length=1)]


class ModuleModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    path: NonEmptyStr = Field(alias="Path")


class GoModInfo(BaseModel):
    """Module root path plus every import observed while listing the package."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    module: ModuleModel = Field(alias="Module")
    imports: list[NonEmptyStr] = Field(alias="Imports")


class Payload(BaseModel):
    """
    Unit of work for one update run.

    owner/repo_name identify the GitHub repository the module source lives in;
    they end up in the go-import meta tag of every generated page.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    owner: NonEmptyStr
    repo_name: NonEmptyStr = Field(alias="repoName")
    go_mod_info: GoModInfo = Field(alias="goModInfo")

    def to_wire_json(self, indent: int | None = None) -> str:
        """Serialise using the wire field names."""
        return self.model_dump_json(by_alias=True, indent=indent)
