"""Figmation version lookup."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "figmation"

# Source checkout layout: src/figmation/_version.py -> <root>/pyproject.toml
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, or pyproject's when running from a source tree."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass

    if _PYPROJECT.exists():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        return str(project.get("version", "0.0.0"))
    return "0.0.0"
