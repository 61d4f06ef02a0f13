"""
Figmation facade.

Ties the pipeline together: fetch variables from Figma, normalize them,
render CSS and write it to disk.

Usage:
    figmation = Figmation(load_config())
    paths = await figmation.generate_from_figma(all_modes=True)
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .config import FigmationConfig
from .css_generator import DEFAULT_MODE, generate_css
from .errors import ConfigurationError
from .figma_client import FigmaClient
from .models import Variable
from .normalize import collection_mode_names, normalize_collections
from .writer import write_stylesheet

logger = logging.getLogger(__name__)


def _mode_slug(mode: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", mode.lower()).strip("-") or "mode"


class Figmation:
    """Generates CSS custom properties from a Figma file's variables."""

    def __init__(self, config: FigmationConfig | None = None):
        self.config = config or FigmationConfig()
        self._client: FigmaClient | None = None

    # =========================================================================
    # CSS
    # =========================================================================

    def generate_css(self, variables: Iterable[Variable], mode: str = DEFAULT_MODE) -> str:
        """Render variables as a ``:root`` stylesheet for ``mode``."""
        return generate_css(variables, mode)

    def output_file(self, mode: str = DEFAULT_MODE) -> Path:
        """
        Target path for a mode's stylesheet.

        The default mode writes ``filename`` as is; other modes insert the
        mode slug before the suffix (``variables.css`` -> ``variables.dark.css``).
        """
        filename = Path(self.config.filename)
        if mode != DEFAULT_MODE:
            filename = filename.with_name(f"{filename.stem}.{_mode_slug(mode)}{filename.suffix}")
        return self.config.output_path / filename

    async def write_css(
        self,
        variables: Iterable[Variable],
        mode: str = DEFAULT_MODE,
        *,
        file_path: Path | None = None,
    ) -> Path:
        """Generate CSS for ``mode`` and write it to ``file_path`` or the configured output."""
        target = file_path or self.output_file(mode)
        css = self.generate_css(variables, mode)
        try:
            return await asyncio.to_thread(write_stylesheet, css, target)
        except OSError as e:
            logger.error("Error writing CSS file %s: %s", target, e)
            raise

    # =========================================================================
    # Figma
    # =========================================================================

    def _get_client(self) -> FigmaClient:
        if not self.config.access_token or not self.config.file_id:
            raise ConfigurationError("Figma access token and file ID are required")
        if self._client is None:
            self._client = FigmaClient(
                self.config.access_token,
                self.config.file_id,
                base_url=self.config.base_url,
            )
        return self._client

    async def fetch_variables(self) -> tuple[list[Variable], list[str]]:
        """
        Fetch and normalize the file's variables.

        Returns:
            Normalized variables and the distinct mode names of their collections

        Raises:
            ConfigurationError: If the token or file id is not configured
        """
        client = self._get_client()
        try:
            collections = await client.get_local_variables()
        except Exception as e:
            logger.error("Error fetching variables from Figma: %s", e)
            raise
        return normalize_collections(collections), collection_mode_names(collections)

    async def generate_from_figma(
        self,
        mode: str = DEFAULT_MODE,
        *,
        all_modes: bool = False,
    ) -> list[Path]:
        """
        Fetch variables from Figma and write their stylesheet(s).

        Args:
            mode: Mode whose values to emit
            all_modes: Also write one stylesheet per named mode of the file

        Returns:
            Paths written, default/requested mode first
        """
        variables, mode_names = await self.fetch_variables()

        modes = [mode]
        if all_modes:
            modes.extend(name for name in mode_names if name != mode)

        written = []
        for current in modes:
            written.append(await self.write_css(variables, current))
        return written

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
