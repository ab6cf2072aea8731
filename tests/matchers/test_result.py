"""Tests for MatchResult."""

import json

import pytest
from pydantic import ValidationError

from datematch.matchers.result import MatchResult


class TestMatchResult:
    def test_success_construction(self) -> None:
        result = MatchResult.success("the date is before X", actual="Y")
        assert result.passed is True
        assert result.expectation == "the date is before X"
        assert result.mismatch_description is None
        assert result.actual == "Y"

    def test_failure_construction(self) -> None:
        result = MatchResult.failure("the date is before X", "the date is Z")
        assert result.passed is False
        assert result.mismatch_description == "the date is Z"
        assert result.actual is None

    def test_truthiness(self) -> None:
        assert MatchResult.success("e")
        assert not MatchResult.failure("e", "m")

    def test_json_serialization(self) -> None:
        result = MatchResult.failure("expect", "mismatch", actual="shown")
        parsed = json.loads(result.model_dump_json())
        assert parsed == {
            "passed": False,
            "expectation": "expect",
            "mismatch_description": "mismatch",
            "actual": "shown",
        }

    def test_frozen(self) -> None:
        result = MatchResult.success("e")
        with pytest.raises(ValidationError):
            result.passed = False  # type: ignore[misc]
