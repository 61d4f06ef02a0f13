"""Stylesheet output."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_stylesheet(css: str, path: Path) -> Path:
    """Write ``css`` to ``path``, creating parent directories first.

    Filesystem errors propagate unchanged.

    Returns:
        The path written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(css, encoding="utf-8")
    logger.info("CSS variables written to %s (%d bytes)", path, len(css.encode("utf-8")))
    return path
