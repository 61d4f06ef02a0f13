"""Shared pytest fixtures for Figmation tests."""

from __future__ import annotations

from typing import Any

import pytest

from figmation.models import Variable
from figmation.scopes import VariableScope


def make_variable(
    name: str,
    value: Any,
    scope: VariableScope = VariableScope.ALL_FILLS,
    *,
    hidden: bool = False,
    values_by_mode: dict[str, Any] | None = None,
    id: str | None = None,
) -> Variable:
    """Build a normalized variable with sensible defaults."""
    return Variable(
        id=id or name,
        name=name,
        scope=scope,
        value=value,
        values_by_mode=values_by_mode or {},
        hidden=hidden,
    )


@pytest.fixture
def sample_variables() -> list[Variable]:
    """Variables spread over the three folder categories."""
    return [
        make_variable("Colors/Primary", "#FF0000", VariableScope.ALL_FILLS, id="1"),
        make_variable("Typography/Size/Large", "24", VariableScope.FONT_SIZE, id="2"),
        make_variable("Layout/Border Radius/Small", "4", VariableScope.CORNER_RADIUS, id="3"),
    ]


@pytest.fixture
def variables_payload() -> dict[str, Any]:
    """A ``/variables/local`` response in Figma's split collections/variables shape."""
    return {
        "status": 200,
        "error": False,
        "meta": {
            "variableCollections": {
                "VariableCollectionId:1": {
                    "id": "VariableCollectionId:1",
                    "name": "Tokens",
                    "key": "abc",
                    "defaultModeId": "1:0",
                    "modes": [
                        {"modeId": "1:0", "name": "Light"},
                        {"modeId": "1:1", "name": "Dark"},
                    ],
                    "variableIds": ["VariableID:1", "VariableID:2"],
                },
            },
            "variables": {
                "VariableID:1": {
                    "id": "VariableID:1",
                    "name": "Colors/Background",
                    "variableCollectionId": "VariableCollectionId:1",
                    "resolvedType": "COLOR",
                    "scopes": ["FRAME_FILL"],
                    "hiddenFromPublishing": False,
                    "valuesByMode": {
                        "1:0": {"r": 1, "g": 1, "b": 1, "a": 1},
                        "1:1": {"r": 0, "g": 0, "b": 0, "a": 1},
                    },
                },
                "VariableID:2": {
                    "id": "VariableID:2",
                    "name": "Spacing/Gap/Medium",
                    "variableCollectionId": "VariableCollectionId:1",
                    "resolvedType": "FLOAT",
                    "scopes": ["GAP"],
                    "hiddenFromPublishing": False,
                    "valuesByMode": {"1:0": 16, "1:1": 16},
                },
            },
        },
    }


@pytest.fixture
def make_var() -> Any:
    """Factory fixture for normalized variables."""
    return make_variable
