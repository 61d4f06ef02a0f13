"""
Configuration for Figmation.

Settings are layered, highest precedence first:

1. Explicit overrides (CLI options, constructor arguments)
2. Environment variables (FIGMA_ACCESS_TOKEN, FIGMA_FILE_ID,
   FIGMATION_OUTPUT_PATH, FIGMATION_FILENAME)
3. The ``[figmation]`` table of ``figmation.toml``
4. Defaults

Example figmation.toml:

    [figmation]
    file_id = "abc123"
    output_path = "src/styles"
    filename = "tokens.css"

The access token is normally left out of the file and supplied through the
environment.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigurationError

CONFIG_FILE = "figmation.toml"

FIGMA_API_BASE = "https://api.figma.com/v1"

_ENV_VARS = {
    "access_token": "FIGMA_ACCESS_TOKEN",
    "file_id": "FIGMA_FILE_ID",
    "output_path": "FIGMATION_OUTPUT_PATH",
    "filename": "FIGMATION_FILENAME",
}


@dataclass
class FigmationConfig:
    """Resolved Figmation settings."""

    access_token: str | None = None
    file_id: str | None = None
    output_path: Path = field(default_factory=lambda: Path("."))
    filename: str = "variables.css"
    base_url: str = FIGMA_API_BASE

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token and self.file_id)


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    section = data.get("figmation", {})
    if not isinstance(section, dict):
        raise ConfigurationError(f"[figmation] in {path} must be a table")
    return section


def load_config(path: Path | None = None, **overrides: Any) -> FigmationConfig:
    """
    Load configuration from file, environment and explicit overrides.

    Args:
        path: Config file. If omitted, ``figmation.toml`` in the current
            directory is used when it exists.
        **overrides: Field values that win over every other source. ``None``
            values are ignored so unset CLI options fall through.

    Returns:
        Resolved configuration

    Raises:
        ConfigurationError: If an explicit config file is missing or invalid
    """
    values: dict[str, Any] = {}

    if path is not None:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        values.update(_read_config_file(path))
    elif Path(CONFIG_FILE).exists():
        values.update(_read_config_file(Path(CONFIG_FILE)))

    for key, env_var in _ENV_VARS.items():
        env_value = os.getenv(env_var)
        if env_value:
            values[key] = env_value

    values.update({k: v for k, v in overrides.items() if v is not None})

    unknown = set(values) - set(FigmationConfig.__dataclass_fields__)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    if "output_path" in values:
        values["output_path"] = Path(values["output_path"])

    return FigmationConfig(**values)
