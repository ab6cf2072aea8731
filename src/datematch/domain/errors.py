"""Construction-time errors.

INVARIANT: Every error here is raised while a matcher or reference value is
being built. Evaluating a built matcher never raises.
"""

from __future__ import annotations


class DateMatchError(ValueError):
    """Base class for invalid matcher arguments."""


class FieldRangeError(DateMatchError):
    """A calendar field value lies outside its valid range."""

    def __init__(self, field: str, value: object, low: int, high: int) -> None:
        self.field = field
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{field} must be an integer between {low} and {high}, got {value!r}")


class ToleranceError(DateMatchError):
    """A tolerance window was given a negative or non-integer magnitude."""


class UnknownTimezoneError(DateMatchError):
    """A timezone name could not be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown timezone: {name!r}")


class DateRangeError(DateMatchError):
    """A reference instant cannot be shown as a calendar date in its zone."""

    def __init__(self, reference: object) -> None:
        self.reference = reference
        super().__init__(f"Reference {reference!r} is outside the representable date range")


class InvalidReferenceError(DateMatchError, TypeError):
    """A matcher was given a reference of the wrong kind, or incomplete fields."""
