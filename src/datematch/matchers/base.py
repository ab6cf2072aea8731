"""Shared matcher base on top of PyHamcrest.

Every matcher is a ``hamcrest`` ``BaseMatcher``, so it works with
``hamcrest.assert_that`` and composes with ``all_of``, ``is_not`` and
friends. ``matches(actual)`` returns a MatchResult, which is truthy exactly
when the match passed. Values that are not dates, or that fall outside the
representable date range, fail the match instead of raising.
"""

from __future__ import annotations

from datetime import tzinfo
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from datematch.domain.instants import format_instant, is_temporal, to_epoch_millis
from datematch.matchers.result import MatchResult


class DateMatcher(BaseMatcher[Any]):
    """Base class for matchers that judge one date/time value.

    Subclasses provide ``describe()`` and ``_judge()``; conversion of the
    actual value happens here.
    """

    zone: tzinfo | None

    def describe(self) -> str:
        raise NotImplementedError

    def _judge(self, millis: int, shown: str, expectation: str) -> MatchResult:
        raise NotImplementedError

    def matches(  # type: ignore[override]
        self, item: Any, mismatch_description: Description | None = None
    ) -> MatchResult:
        result = self.evaluate(item)
        if not result.passed and mismatch_description is not None:
            mismatch_description.append_text(result.mismatch_description or "")
        return result

    def evaluate(self, actual: object) -> MatchResult:
        """Judge *actual* and explain the outcome."""
        expectation = self.describe()
        if not is_temporal(actual):
            return MatchResult.failure(expectation, f"was {actual!r}")
        try:
            millis = to_epoch_millis(actual, self.zone)  # type: ignore[arg-type]
            shown = format_instant(millis, self.zone)
            return self._judge(millis, shown, expectation)
        except OverflowError:
            return MatchResult.failure(expectation, f"was {actual!r}, outside the representable date range")

    def _matches(self, item: Any) -> bool:
        return self.evaluate(item).passed

    def describe_to(self, description: Description) -> None:
        description.append_text(self.describe())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        mismatch_description.append_text(self.evaluate(item).mismatch_description or "")
