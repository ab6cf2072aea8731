"""Tests for the shared matcher base and hamcrest integration."""

from __future__ import annotations

from datetime import date

import pytest
from hamcrest import all_of, any_of, is_not
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from datematch import DateMatcher, Months, assert_that, before, same_hour, same_year, within
from tests.conftest import PLUS_TWO, UTC, utc


def test_matchers_are_hamcrest_matchers() -> None:
    for matcher in (before(utc(2012, 5, 12)), same_hour(10), within(1, "days", utc(2012, 5, 12))):
        assert isinstance(matcher, DateMatcher)
        assert isinstance(matcher, Matcher)


class TestAssertThat:
    def test_passes_silently(self) -> None:
        assert_that(utc(2012, 5, 11), before(2012, Months.MAY, 12, tz=UTC))

    def test_failing_match_raises(self) -> None:
        with pytest.raises(AssertionError):
            assert_that(date(2020, 1, 1), before(date(2012, 5, 12), tz=UTC))

    def test_failure_message(self) -> None:
        with pytest.raises(AssertionError) as excinfo:
            assert_that(utc(2012, 5, 12), before(2012, Months.MAY, 12, tz=UTC))
        assert str(excinfo.value) == (
            "\nExpected: the date is before 12 May 2012 00:00:00 000ms +0000\n"
            "     but: the date is 12 May 2012 00:00:00 000ms +0000\n"
        )

    def test_reason_prefix(self) -> None:
        with pytest.raises(AssertionError, match=r"^order shipped late\nExpected: the hour is 9"):
            assert_that(utc(2012, 5, 12, 10), same_hour(9, tz=UTC), "order shipped late")

    def test_non_date_actual(self) -> None:
        with pytest.raises(AssertionError, match="but: was 'soon'"):
            assert_that("soon", same_hour(9, tz=UTC))


class TestComposition:
    def test_all_of(self) -> None:
        morning_of_may_12 = all_of(
            before(2012, Months.MAY, 12, 12, tz=UTC),
            same_hour(10, tz=UTC),
        )
        assert_that(utc(2012, 5, 12, 10, 30), morning_of_may_12)
        with pytest.raises(AssertionError, match="the hour is 11 instead of 10"):
            assert_that(utc(2012, 5, 12, 11), morning_of_may_12)

    def test_any_of(self) -> None:
        assert_that(utc(2012, 5, 12, 9), any_of(same_hour(9, tz=UTC), same_hour(17, tz=UTC)))

    def test_is_not(self) -> None:
        assert_that(utc(2012, 5, 12, 9), is_not(same_hour(10, tz=UTC)))
        with pytest.raises(AssertionError):
            assert_that(utc(2012, 5, 12, 10), is_not(same_hour(10, tz=UTC)))


class TestDescriptions:
    def test_describe_to(self) -> None:
        description = StringDescription()
        same_hour(9, tz=UTC).describe_to(description)
        assert str(description) == "the hour is 9"

    def test_describe_mismatch(self) -> None:
        description = StringDescription()
        same_hour(9, tz=UTC).describe_mismatch(utc(2012, 5, 12, 10), description)
        assert str(description).startswith("the hour is 10 instead of 9")

    def test_matches_fills_mismatch_description(self) -> None:
        description = StringDescription()
        result = same_hour(9, tz=UTC).matches(utc(2012, 5, 12, 10), description)
        assert not result
        assert str(description) == result.mismatch_description

    def test_str_is_description(self) -> None:
        matcher = same_hour(9, tz=UTC)
        assert str(matcher) == matcher.describe()


class TestUnrepresentableActuals:
    @pytest.mark.parametrize("actual", [10**15, -(10**15), 10**30])
    def test_epoch_millis_out_of_range(self, actual: int) -> None:
        result = before(date(2012, 5, 12), tz=UTC).matches(actual)
        assert not result.passed
        assert result.mismatch_description == f"was {actual!r}, outside the representable date range"

    def test_year_one_east_of_utc(self) -> None:
        result = same_year(1, tz=PLUS_TWO).matches(date(1, 1, 1))
        assert not result.passed
        assert "outside the representable date range" in (result.mismatch_description or "")

    def test_field_matcher_out_of_range(self) -> None:
        assert not same_year(2012, tz=UTC).matches(-(10**15))

    def test_through_assert_that(self) -> None:
        with pytest.raises(AssertionError, match="outside the representable date range"):
            assert_that(10**15, within(1, "days", utc(2012, 5, 12)))
