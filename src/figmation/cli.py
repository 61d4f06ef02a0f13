"""
Figmation CLI.

Commands:
- generate: Fetch variables from Figma and write the CSS stylesheet(s)
- info: Show the Figma file's name and last modification time
"""

from __future__ import annotations

import asyncio
import logging
import platform
import sys
from pathlib import Path

import httpx
import typer

from ._version import get_version
from .config import FigmationConfig, load_config
from .css_generator import DEFAULT_MODE
from .errors import FigmationError
from .figma_client import FigmaClient
from .generator import Figmation


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"Figmation version {get_version()}")
        typer.echo(f"  Python:   {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform: {platform.system()} {platform.release()}")
        raise typer.Exit()


app = typer.Typer(
    help="Figmation – mirror Figma variables into CSS custom properties",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Figmation CLI main callback for global options."""
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _load(config_path: Path | None, **overrides: object) -> FigmationConfig:
    try:
        return load_config(config_path, **overrides)
    except FigmationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command(name="generate")
def generate_command(
    token: str | None = typer.Option(
        None, "--token", help="Figma personal access token (default: $FIGMA_ACCESS_TOKEN)"
    ),
    file_id: str | None = typer.Option(
        None, "--file-id", help="Figma file key (default: $FIGMA_FILE_ID)"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Output directory (default: current directory)"
    ),
    filename: str | None = typer.Option(
        None, "--filename", help="Stylesheet file name (default: variables.css)"
    ),
    mode: str = typer.Option(DEFAULT_MODE, "--mode", "-m", help="Mode name to emit values for"),
    all_modes: bool = typer.Option(
        False, "--all-modes", help="Also write one stylesheet per Figma mode"
    ),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to figmation.toml"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Fetch variables from Figma and write them as CSS custom properties."""
    _configure_logging(verbose)
    config = _load(
        config_path,
        access_token=token,
        file_id=file_id,
        output_path=output,
        filename=filename,
    )

    async def _run() -> list[Path]:
        figmation = Figmation(config)
        try:
            return await figmation.generate_from_figma(mode, all_modes=all_modes)
        finally:
            await figmation.aclose()

    try:
        written = asyncio.run(_run())
    except (FigmationError, httpx.HTTPError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for path in written:
        typer.echo(f"CSS variables file generated at: {path}")


@app.command(name="info")
def info_command(
    token: str | None = typer.Option(None, "--token", help="Figma personal access token"),
    file_id: str | None = typer.Option(None, "--file-id", help="Figma file key"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to figmation.toml"
    ),
) -> None:
    """Show the Figma file's name and last modification time."""
    config = _load(config_path, access_token=token, file_id=file_id)
    if not config.access_token or not config.file_id:
        typer.echo("Error: Figma access token and file ID are required", err=True)
        raise typer.Exit(code=1)

    async def _run() -> tuple[str, str | None]:
        async with FigmaClient(
            config.access_token or "", config.file_id or "", base_url=config.base_url
        ) as client:
            info = await client.get_file_info()
        return info.name, info.last_modified

    try:
        name, last_modified = asyncio.run(_run())
    except (FigmationError, httpx.HTTPError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Name:          {name}")
    typer.echo(f"Last modified: {last_modified or 'unknown'}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
