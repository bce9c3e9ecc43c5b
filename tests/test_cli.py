"""Tests for the root brandmark CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from brandmark import __version__
from brandmark.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "brandmark" in result.output
    for command in ("banner", "logo", "icon", "serve"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("flag", ["--json", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
def test_explicit_config(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = tmp_path / "alt.toml"
    config.write_text("[render]\ndefault_logo_size = 80\n")
    result = cli_runner.invoke(cli, ["-c", str(config), "logo", "netproxy.io", "-o", "x.png"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "x.png").is_file()


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_is_a_usage_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "brandmark.toml").write_text("[render\n")
    result = cli_runner.invoke(cli, ["logo", "netproxy.io"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
