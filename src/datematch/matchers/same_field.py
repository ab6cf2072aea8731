"""Same-field matcher.

One predicate covers same-year, same-month, same-day-of-month,
same-weekday, same-hour, same-minute, same-second and same-day: it is
parameterized by the calendar fields to extract and compares the extracted
integers for equality. Fields not named are ignored, so a same-month
matcher accepts any year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from datematch.domain.errors import DateMatchError
from datematch.domain.fields import extract_fields, render_field_value, validate_field_value
from datematch.domain.instants import ensure_representable, format_instant
from datematch.domain.types import CalendarField, Months
from datematch.matchers.base import DateMatcher
from datematch.matchers.result import MatchResult

DAY_FIELDS: tuple[CalendarField, ...] = (
    CalendarField.YEAR,
    CalendarField.MONTH,
    CalendarField.DAY_OF_MONTH,
)


def render_values(fields: tuple[CalendarField, ...], values: tuple[int, ...]) -> str:
    """Render extracted values, e.g. ``Monday`` or ``12 May 2012``."""
    if fields == DAY_FIELDS:
        year, month, day = values
        return f"{day} {Months(month).display} {year}"
    return ", ".join(render_field_value(f, v) for f, v in zip(fields, values, strict=True))


@dataclass(frozen=True)
class SameFieldMatcher(DateMatcher):
    """Matches dates whose *fields* equal *expected*.

    ``reference`` holds the instant the expected values were read from, or
    None when they were supplied literally. It only affects descriptions.
    """

    fields: tuple[CalendarField, ...]
    expected: tuple[int, ...]
    zone: tzinfo | None = None
    reference: int | None = None
    name: str = ""

    def __post_init__(self) -> None:
        fields = tuple(CalendarField(f) for f in self.fields)
        if not fields or len(fields) != len(self.expected):
            raise DateMatchError("fields and expected values must be non-empty and the same length")
        expected = tuple(validate_field_value(f, v) for f, v in zip(fields, self.expected, strict=True))
        object.__setattr__(self, "fields", fields)
        object.__setattr__(self, "expected", expected)
        if not self.name:
            object.__setattr__(self, "name", " and ".join(f.label for f in fields))
        if self.reference is not None:
            ensure_representable(self.reference, self.zone)

    @classmethod
    def from_reference(
        cls,
        fields: tuple[CalendarField, ...],
        reference: int,
        zone: tzinfo | None = None,
        name: str = "",
    ) -> SameFieldMatcher:
        """Expect the fields of the *reference* instant as seen in *zone*."""
        expected = extract_fields(ensure_representable(reference, zone), fields, zone)
        return cls(fields=fields, expected=expected, zone=zone, reference=reference, name=name)

    def describe(self) -> str:
        if self.reference is not None:
            return f"the date has the same {self.name} as {format_instant(self.reference, self.zone)}"
        return f"the {self.name} is {render_values(self.fields, self.expected)}"

    def _judge(self, millis: int, shown: str, expectation: str) -> MatchResult:
        found = extract_fields(millis, self.fields, self.zone)
        if found == self.expected:
            return MatchResult.success(expectation, actual=shown)
        return MatchResult.failure(
            expectation,
            f"the {self.name} is {render_values(self.fields, found)} instead of "
            f"{render_values(self.fields, self.expected)} (the date is {shown})",
            actual=shown,
        )
