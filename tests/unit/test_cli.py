"""Tests for CLI commands."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from figmation._version import get_version
from figmation.cli import app
from figmation.config import _ENV_VARS
from figmation.errors import FigmaAuthError
from figmation.figma_client import FigmaClient
from figmation.models import FigmaVariableCollection, FileInfo


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in _ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


def _collections() -> dict[str, FigmaVariableCollection]:
    return {
        "c1": FigmaVariableCollection.model_validate(
            {
                "id": "c1",
                "defaultModeId": "m1",
                "modes": [{"modeId": "m1", "name": "Light"}],
                "variables": [
                    {
                        "id": "1",
                        "name": "Typography/Size/Large",
                        "scopes": ["FONT_SIZE"],
                        "valuesByMode": {"m1": 24},
                    }
                ],
            }
        )
    }


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "Figmation version" in result.stdout


def test_version_matches_pyproject(cli_runner: CliRunner) -> None:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    expected = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]["version"]
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"Figmation version {expected}"


def test_generate_without_credentials_fails(cli_runner: CliRunner) -> None:
    with patch.object(FigmaClient, "get_local_variables", new=AsyncMock()) as fetch:
        result = cli_runner.invoke(app, ["generate"])
    assert result.exit_code == 1
    assert "access token and file ID are required" in result.output
    fetch.assert_not_called()


def test_generate_writes_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    with patch.object(
        FigmaClient, "get_local_variables", new=AsyncMock(return_value=_collections())
    ):
        result = cli_runner.invoke(
            app,
            ["generate", "--token", "t", "--file-id", "f", "--output", str(tmp_path / "css")],
        )
    assert result.exit_code == 0, result.output
    css = (tmp_path / "css" / "variables.css").read_text()
    assert "--font-size-large: 24px;" in css


def test_generate_reads_env(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("FIGMA_ACCESS_TOKEN", "t")
    monkeypatch.setenv("FIGMA_FILE_ID", "f")
    with patch.object(
        FigmaClient, "get_local_variables", new=AsyncMock(return_value=_collections())
    ):
        result = cli_runner.invoke(app, ["generate", "--filename", "tokens.css"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "tokens.css").exists()


def test_generate_auth_error(cli_runner: CliRunner) -> None:
    error = FigmaAuthError("Invalid Figma access token or insufficient permissions")
    with patch.object(FigmaClient, "get_local_variables", new=AsyncMock(side_effect=error)):
        result = cli_runner.invoke(app, ["generate", "--token", "t", "--file-id", "f"])
    assert result.exit_code == 1
    assert "insufficient permissions" in result.output


def test_generate_bad_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(app, ["generate", "--config", str(tmp_path / "missing.toml")])
    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_info(cli_runner: CliRunner) -> None:
    info = FileInfo(name="Design System", last_modified="2024-05-01T10:00:00Z")
    with patch.object(FigmaClient, "get_file_info", new=AsyncMock(return_value=info)):
        result = cli_runner.invoke(app, ["info", "--token", "t", "--file-id", "f"])
    assert result.exit_code == 0, result.output
    assert "Design System" in result.stdout
    assert "2024-05-01T10:00:00Z" in result.stdout


def test_info_without_credentials(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["info"])
    assert result.exit_code == 1


class TestGetVersion:
    def test_source_tree_falls_back_to_pyproject(self) -> None:
        pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
        expected = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]["version"]
        with patch(
            "figmation._version.version", side_effect=PackageNotFoundError("figmation")
        ):
            assert get_version() == expected

    def test_unexpected_metadata_error_propagates(self) -> None:
        with patch("figmation._version.version", side_effect=RuntimeError("broken metadata")):
            with pytest.raises(RuntimeError, match="broken metadata"):
                get_version()
