"""Point-in-time matchers: before, after, and same instant."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import tzinfo
from enum import StrEnum

from datematch.domain.instants import ensure_representable, format_instant
from datematch.matchers import compare
from datematch.matchers.base import DateMatcher
from datematch.matchers.result import MatchResult


class Relation(StrEnum):
    """How the actual instant must relate to the reference instant."""

    BEFORE = "before"
    AFTER = "after"
    SAME_INSTANT = "same_instant"


_PREDICATES: dict[Relation, Callable[[int, int], bool]] = {
    Relation.BEFORE: compare.is_before,
    Relation.AFTER: compare.is_after,
    Relation.SAME_INSTANT: compare.is_same_instant,
}

_PHRASES: dict[Relation, str] = {
    Relation.BEFORE: "before",
    Relation.AFTER: "after",
    Relation.SAME_INSTANT: "the same instant as",
}


@dataclass(frozen=True)
class InstantMatcher(DateMatcher):
    """Compares the actual instant with a fixed reference instant."""

    relation: Relation
    reference: int
    zone: tzinfo | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "relation", Relation(self.relation))
        ensure_representable(self.reference, self.zone)

    def describe(self) -> str:
        return f"the date is {_PHRASES[self.relation]} {format_instant(self.reference, self.zone)}"

    def _judge(self, millis: int, shown: str, expectation: str) -> MatchResult:
        if _PREDICATES[self.relation](millis, self.reference):
            return MatchResult.success(expectation, actual=shown)
        return MatchResult.failure(expectation, f"the date is {shown}", actual=shown)
