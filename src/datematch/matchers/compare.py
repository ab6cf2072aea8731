"""Instant comparison and tolerance arithmetic.

All arguments are epoch milliseconds. Ordering is strict: equal instants
are neither before nor after one another.
"""

from __future__ import annotations

from datematch.domain.references import Tolerance
from datematch.domain.types import TimeUnit


def is_before(actual: int, reference: int) -> bool:
    return actual < reference


def is_after(actual: int, reference: int) -> bool:
    return actual > reference


def is_same_instant(actual: int, reference: int) -> bool:
    return actual == reference


def difference(actual: int, reference: int, unit: TimeUnit = TimeUnit.MILLISECONDS) -> int:
    """Absolute distance between two instants in *unit*, truncated."""
    return TimeUnit(unit).from_millis(abs(actual - reference))


def is_within(actual: int, reference: int, tolerance: Tolerance) -> bool:
    """Whether *actual* lies in the closed window ``reference ± tolerance``."""
    return abs(actual - reference) <= tolerance.millis
