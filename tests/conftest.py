"""Shared pytest fixtures and test helpers for datematch tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from click.testing import CliRunner

UTC = timezone.utc
PLUS_TWO = timezone(timedelta(hours=2), "PLUS_TWO")
MINUS_FIVE = timezone(timedelta(hours=-5), "MINUS_FIVE")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def utc(*args: int) -> datetime:
    """Aware UTC datetime; the last positional value may be milliseconds.

    ``utc(2012, 5, 12, 10, 0, 0, 250)`` is 10:00:00.250 on 12 May 2012.
    """
    if len(args) == 7:
        *head, millis = args
        return datetime(*head, millis * 1000, tzinfo=UTC)
    return datetime(*args, tzinfo=UTC)
