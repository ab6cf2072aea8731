"""Tolerance matcher: the actual instant lies within a window of the reference."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from datematch.domain.instants import ensure_representable, format_instant
from datematch.domain.references import Tolerance
from datematch.matchers import compare
from datematch.matchers.base import DateMatcher
from datematch.matchers.result import MatchResult


@dataclass(frozen=True)
class WithinMatcher(DateMatcher):
    """Passes when ``abs(actual - reference) <= tolerance`` (boundary inclusive)."""

    tolerance: Tolerance
    reference: int
    zone: tzinfo | None = None

    def __post_init__(self) -> None:
        ensure_representable(self.reference, self.zone)

    def describe(self) -> str:
        return f"the date is within {self.tolerance} of {format_instant(self.reference, self.zone)}"

    def _judge(self, millis: int, shown: str, expectation: str) -> MatchResult:
        if compare.is_within(millis, self.reference, self.tolerance):
            return MatchResult.success(expectation, actual=shown)
        distance = compare.difference(millis, self.reference)
        return MatchResult.failure(
            expectation,
            f"the date is {shown}, {distance}ms from the reference",
            actual=shown,
        )
