"""Tests for the root datematch CLI."""

import pytest
from click.testing import CliRunner

from datematch import __version__
from datematch.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "datematch" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "datematch check before" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_tz_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--tz", "UTC", "fields", "2012-05-12"])
    assert result.exit_code == 0


def test_unknown_tz_rejected(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--tz", "Nowhere/Special", "fields", "2012-05-12"])
    assert result.exit_code == 2
    assert "Unknown timezone" in result.output


# --- Commands registered ---

EXPECTED_COMMANDS = ["check", "within", "fields"]


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"datematch {name}" in result.output
