"""Tests for the check command."""

import json

import pytest
from click.testing import CliRunner

from datematch.cli import cli


def _check(cli_runner: CliRunner, *args: str):  # type: ignore[no-untyped-def]
    return cli_runner.invoke(cli, ["--tz", "UTC", "check", *args])


class TestCheck:
    def test_before_passes(self, cli_runner: CliRunner) -> None:
        result = _check(cli_runner, "before", "2012-05-12", "2012-05-11T23:59:59.999")
        assert result.exit_code == 0
        assert "PASS" in result.output
        assert "the date is before 12 May 2012 00:00:00 000ms +0000" in result.output

    def test_before_fails_on_equal_instant(self, cli_runner: CliRunner) -> None:
        result = _check(cli_runner, "before", "2012-05-12", "2012-05-12T00:00:00.000")
        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "but: the date is 12 May 2012 00:00:00 000ms +0000" in result.output

    def test_same_day(self, cli_runner: CliRunner) -> None:
        assert _check(cli_runner, "same-day", "2012-05-12T08:00", "2012-05-12T23:59:59").exit_code == 0
        assert _check(cli_runner, "same-day", "2012-05-12T08:00", "2012-05-13T00:00").exit_code == 1

    def test_same_weekday(self, cli_runner: CliRunner) -> None:
        assert _check(cli_runner, "same-weekday", "2013-01-07", "2013-01-14").exit_code == 0

    @pytest.mark.parametrize(
        "kind,actual,exit_code",
        [
            ("after", "2012-05-12T10:00:00.001", 0),
            ("after", "2012-05-12T10:00:00", 1),
            ("same-instant", "2012-05-12T10:00:00", 0),
            ("same-hour", "2000-01-01T10:59", 0),
            ("same-minute", "2012-05-12T11:00", 0),
            ("same-second", "2012-05-12T10:00:01", 1),
            ("same-month", "1999-05-30", 0),
            ("same-year", "2013-05-12T10:00", 1),
            ("same-day-of-month", "2012-06-12", 0),
        ],
    )
    def test_kinds(self, cli_runner: CliRunner, kind: str, actual: str, exit_code: int) -> None:
        assert _check(cli_runner, kind, "2012-05-12T10:00:00", actual).exit_code == exit_code

    def test_offset_in_value(self, cli_runner: CliRunner) -> None:
        result = _check(cli_runner, "same-instant", "2012-05-12T10:00:00Z", "2012-05-12T12:00:00+02:00")
        assert result.exit_code == 0

    def test_zone_applies_to_naive_values(self, cli_runner: CliRunner) -> None:
        args = ["check", "same-day", "2012-05-12", "2012-05-12T23:30:00Z"]
        assert cli_runner.invoke(cli, ["--tz", "UTC", *args]).exit_code == 0
        assert cli_runner.invoke(cli, ["--tz", "Asia/Tokyo", *args]).exit_code == 1

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "--tz", "UTC", "check", "same-hour", "2012-05-12T10:00", "2012-05-12T11:00"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["passed"] is False
        assert data["expectation"] == "the date has the same hour as 12 May 2012 10:00:00 000ms +0000"

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "same-year", "2012-05-12", "2012-01-01"])
        assert result.exit_code == 0
        assert result.output.strip() == "PASS"

    def test_unknown_kind(self, cli_runner: CliRunner) -> None:
        assert _check(cli_runner, "same-decade", "2012-05-12", "2012-05-12").exit_code == 2

    def test_invalid_date(self, cli_runner: CliRunner) -> None:
        result = _check(cli_runner, "before", "not-a-date", "2012-05-12")
        assert result.exit_code == 2
        assert "ISO-8601" in result.output

    def test_unrepresentable_reference(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--tz", "Asia/Tokyo", "check", "before", "0001-01-01", "2012-05-12"])
        assert result.exit_code == 2
        assert "outside the representable date range" in result.output
