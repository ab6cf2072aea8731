"""datematch — date/time comparison matchers for test assertions.

Usage::

    from datematch import Months, assert_that, before, same_day

    assert_that(order.created_at, before(2012, Months.MAY, 12))
    assert_that(order.created_at, same_day(order.shipped_at))

Every matcher is a PyHamcrest matcher; ``assert_that`` is hamcrest's own and
the matchers compose with ``all_of``, ``any_of`` and ``is_not``.
"""

from __future__ import annotations

from hamcrest import assert_that

from datematch.domain.errors import DateMatchError
from datematch.domain.types import CalendarField, Months, TimeUnit, Weekdays
from datematch.domain.zones import use_timezone
from datematch.matchers.base import DateMatcher
from datematch.matchers.factories import (
    after,
    before,
    same_date_part,
    same_day,
    same_day_of_month,
    same_hour,
    same_instant,
    same_minute,
    same_month,
    same_second,
    same_weekday,
    same_year,
    within,
)
from datematch.matchers.result import MatchResult

__version__ = "0.4.0"

__all__ = [
    "CalendarField",
    "DateMatchError",
    "DateMatcher",
    "MatchResult",
    "Months",
    "TimeUnit",
    "Weekdays",
    "__version__",
    "after",
    "assert_that",
    "before",
    "same_date_part",
    "same_day",
    "same_day_of_month",
    "same_hour",
    "same_instant",
    "same_minute",
    "same_month",
    "same_second",
    "same_weekday",
    "same_year",
    "use_timezone",
    "within",
]
