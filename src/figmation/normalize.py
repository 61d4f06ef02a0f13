"""
Normalization of raw Figma variables.

Turns each ``FigmaVariable`` (many scope tags, one value per mode) into a
``Variable`` with a single resolved scope and value. Unrecognised or missing
scopes fall back to ``ALL_FILLS``; missing values become ``None`` and are
dropped later at emission time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .models import FigmaVariable, FigmaVariableCollection, Variable, VariableValue
from .scopes import DEFAULT_SCOPE, VariableScope, is_valid_scope

logger = logging.getLogger(__name__)

_ALIAS_TYPE = "VARIABLE_ALIAS"


def resolve_scope(scopes: Sequence[str]) -> VariableScope:
    """Return the first recognised scope tag, or ``ALL_FILLS`` if none is."""
    for scope in scopes:
        if is_valid_scope(scope):
            return VariableScope(scope)
    return DEFAULT_SCOPE


def _rgba_to_css(color: Mapping[str, Any]) -> str:
    """Convert a Figma RGBA color (0..1 channels) to hex, or rgba() when translucent."""
    r = round(float(color.get("r", 0)) * 255)
    g = round(float(color.get("g", 0)) * 255)
    b = round(float(color.get("b", 0)) * 255)
    a = float(color.get("a", 1))

    if a < 1:
        return f"rgba({r}, {g}, {b}, {a:.2f})"
    return f"#{r:02x}{g:02x}{b:02x}"


def coerce_value(raw: Any) -> VariableValue:
    """
    Coerce a raw Figma mode value into a ``VariableValue``.

    Strings and numbers pass through. Colors become CSS color literals,
    booleans become ``"true"``/``"false"``. Alias references and any other
    structured value become ``None``.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, str | int | float):
        return raw
    if isinstance(raw, Mapping):
        if raw.get("type") == _ALIAS_TYPE:
            logger.debug("Skipping alias value referencing %s", raw.get("id"))
            return None
        if all(channel in raw for channel in ("r", "g", "b")):
            return _rgba_to_css(raw)
    logger.debug("Unsupported variable value %r", raw)
    return None


def normalize_variable(
    raw: FigmaVariable,
    default_mode_id: str | None = None,
    mode_names: Mapping[str, str] | None = None,
) -> Variable:
    """
    Build a normalized ``Variable`` from a raw Figma variable.

    Args:
        raw: Variable as returned by the Figma API
        default_mode_id: The owning collection's default mode
        mode_names: Mode id -> mode name, used to key ``values_by_mode``

    Returns:
        Normalized variable
    """
    value: VariableValue = None
    if default_mode_id is not None and default_mode_id in raw.values_by_mode:
        value = coerce_value(raw.values_by_mode[default_mode_id])
    if value is None:
        value = coerce_value(raw.value)

    values_by_mode: dict[str, VariableValue] = {}
    for mode_id, mode_value in raw.values_by_mode.items():
        key = mode_names.get(mode_id, mode_id) if mode_names else mode_id
        values_by_mode[key] = coerce_value(mode_value)

    return Variable(
        id=raw.id,
        name=raw.name,
        scope=resolve_scope(raw.scopes),
        value=value,
        values_by_mode=values_by_mode,
        hidden=bool(raw.hidden_from_publishing),
    )


def normalize_collections(collections: Mapping[str, FigmaVariableCollection]) -> list[Variable]:
    """Flatten and normalize every variable of every collection, in mapping order."""
    variables: list[Variable] = []
    for collection in collections.values():
        mode_names = collection.mode_names
        for raw in collection.variables:
            variables.append(
                normalize_variable(
                    raw,
                    default_mode_id=collection.default_mode_id,
                    mode_names=mode_names,
                )
            )
    return variables


def collection_mode_names(collections: Mapping[str, FigmaVariableCollection]) -> list[str]:
    """Distinct mode names across collections, in first-seen order."""
    names: list[str] = []
    for collection in collections.values():
        for name in collection.mode_names.values():
            if name not in names:
                names.append(name)
    return names
