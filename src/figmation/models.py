"""
Data model for Figma variables.

Two layers:

- Raw models mirror the Figma REST payload (camelCase keys via aliases).
- ``Variable`` is the normalized record the CSS pipeline consumes: one
  resolved scope, one resolved value, per-mode overrides keyed by mode name.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .scopes import VariableScope

# string | number | absent
VariableValue = str | int | float | None


# =============================================================================
# Raw Figma payload
# =============================================================================


class FigmaVariable(BaseModel):
    """A variable as returned by ``GET /files/:key/variables/local``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str
    scopes: list[str] = Field(default_factory=list)
    hidden_from_publishing: bool | None = Field(default=None, alias="hiddenFromPublishing")
    values_by_mode: dict[str, Any] = Field(default_factory=dict, alias="valuesByMode")
    value: Any = Field(default=None, description="Value already resolved for the default mode")
    resolved_type: str | None = Field(default=None, alias="resolvedType")
    variable_collection_id: str | None = Field(default=None, alias="variableCollectionId")


class VariableMode(BaseModel):
    """A named mode of a collection (e.g. Light, Dark)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    mode_id: str = Field(alias="modeId")
    name: str = ""


class FigmaVariableCollection(BaseModel):
    """A collection of variables sharing one set of modes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = ""
    key: str | None = None
    default_mode_id: str | None = Field(default=None, alias="defaultModeId")
    modes: list[VariableMode] = Field(default_factory=list)
    variables: list[FigmaVariable] = Field(default_factory=list)

    @property
    def mode_names(self) -> dict[str, str]:
        """Mode id -> display name, falling back to the id for unnamed modes."""
        return {mode.mode_id: mode.name or mode.mode_id for mode in self.modes}


class FileInfo(BaseModel):
    """Basic metadata for a Figma file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str
    last_modified: str | None = Field(default=None, alias="lastModified")


# =============================================================================
# Normalized records
# =============================================================================


class Variable(BaseModel):
    """
    A design variable ready for CSS generation.

    ``scope`` is always a ``VariableScope`` member. ``values_by_mode`` holds
    per-mode overrides keyed by mode name and may be empty.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    scope: VariableScope
    value: VariableValue = None
    values_by_mode: dict[str, VariableValue] = Field(default_factory=dict)
    hidden: bool = False

    def value_for_mode(self, mode: str) -> VariableValue:
        """Return the override for ``mode`` if there is one, else the resolved value.

        An empty-string override counts as missing.
        """
        override = self.values_by_mode.get(mode)
        if override is not None and override != "":
            return override
        return self.value


class VariableGroup(BaseModel):
    """Variables sharing one category, in input order."""

    name: str
    variables: list[Variable] = Field(default_factory=list)
