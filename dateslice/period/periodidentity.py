"""Period Resolution
-----------------

Core resolver for expanding anchor dates into inclusive day lists.

Supports:
  - Weeks: Sunday through Saturday, 7 days
  - Months: 1st through last day (28-31 days)
  - Years: Jan 1 through Dec 31 (365 or 366 days)
  - Explicit ranges: begin through end, inclusive

Key Design Principles:
  1. Every period is materialized through date_range()
  2. Elements keep the type and time of day of their anchor
  3. Calendar steps use relativedelta, so month and year lengths are exact
  4. Week start is fixed to Sunday
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from dateslice.period.periodtypes import (
    DateOutOfRangeError,
    DateSliceError,
    InvalidRangeError,
)

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7
_SECONDS_PER_DAY = 24 * 60 * 60


def shift_date(day: date, **offset) -> date:
    """
    Apply a relativedelta offset to day.

    Raises:
        DateOutOfRangeError: If the result falls outside years 1-9999

    Example:
        >>> shift_date(date(2021, 1, 31), months=1)
        datetime.date(2021, 2, 28)
    """
    try:
        return day + relativedelta(**offset)
    except (OverflowError, ValueError) as e:
        raise DateOutOfRangeError(day, offset) from e


def _common_endpoint(begin: date, end: date) -> date:
    """Return end converted to the same type as begin."""
    if isinstance(begin, datetime) and not isinstance(end, datetime):
        return datetime.combine(end, begin.timetz())
    if isinstance(end, datetime) and not isinstance(begin, datetime):
        return end.date()
    return end


def _days_between(begin: date, end: date) -> float:
    """Fractional days from begin to end."""
    return (end - begin).total_seconds() / _SECONDS_PER_DAY


def _enumerate_days(begin: date, count: int) -> list:
    return [shift_date(begin, days=i) for i in range(count)]


# ---- Range Resolution ----

def date_range(begin: date, end: date) -> list:
    """
    Return every day from begin through end, inclusive.

    The day count is the whole-day difference plus one, rounded up, so
    datetimes a few hours short of a full day still include the end day.
    Ordering is by calendar day only; a date end is read at begin's time
    of day, and a datetime end paired with a date begin is truncated.

    Args:
        begin: First day of the range
        end: Last day of the range (must not be before begin)

    Returns:
        List of dates (same type as begin), ascending

    Raises:
        InvalidRangeError: If end falls on a calendar day before begin
        DateSliceError: If the endpoints cannot be subtracted (naive vs aware)

    Example:
        >>> date_range(date(2017, 4, 1), date(2017, 4, 3))
        [datetime.date(2017, 4, 1), datetime.date(2017, 4, 2), datetime.date(2017, 4, 3)]
    """
    end = _common_endpoint(begin, end)
    if end.toordinal() < begin.toordinal():
        raise InvalidRangeError(begin, end)

    try:
        days = _days_between(begin, end)
    except TypeError as e:
        raise DateSliceError(f"Cannot subtract range endpoints {begin!r} and {end!r}") from e

    count = math.ceil(days + 1)
    return _enumerate_days(begin, count)


# ---- Week Resolution ----

def _week_start(anchor: date) -> date:
    """Sunday on or before anchor."""
    # isoweekday: Monday=1 .. Sunday=7, so % 7 gives Sunday=0 .. Saturday=6
    days_since_sunday = anchor.isoweekday() % DAYS_IN_WEEK
    return shift_date(anchor, days=-days_since_sunday)


def resolve_week(anchor: date) -> list:
    """
    Expand anchor to the Sunday-Saturday week containing it.

    Example:
        >>> resolve_week(date(2017, 4, 1))[0]
        datetime.date(2017, 3, 26)
    """
    sunday = _week_start(anchor)
    saturday = shift_date(sunday, days=DAYS_IN_WEEK - 1)
    return date_range(sunday, saturday)


# ---- Month Resolution ----

def resolve_month(anchor: date) -> list:
    """
    Expand anchor to every day of its calendar month.

    Example:
        >>> len(resolve_month(date(2024, 2, 10)))
        29
    """
    first = shift_date(anchor, days=-(anchor.day - 1))
    first_of_next = shift_date(first, months=1)
    days_in_month = math.ceil(_days_between(first, first_of_next))
    logger.debug(f"{days_in_month} days in the month starting {first:%Y-%m-%d}")

    return date_range(first, shift_date(first, days=days_in_month - 1))


# ---- Year Resolution ----

def resolve_year(anchor: date) -> list:
    """
    Expand anchor to every day of its calendar year.

    Example:
        >>> len(resolve_year(date(2024, 7, 4)))
        366
    """
    day_of_year = anchor.timetuple().tm_yday
    first = shift_date(anchor, days=-(day_of_year - 1))
    first_of_next = shift_date(first, years=1)
    days_in_year = math.ceil(_days_between(first, first_of_next))
    logger.debug(f"{days_in_year} days in the year starting {first:%Y-%m-%d}")

    return date_range(first, shift_date(first, days=days_in_year - 1))


__all__ = [
    "DAYS_IN_WEEK",
    "shift_date",
    "date_range",
    "resolve_week",
    "resolve_month",
    "resolve_year",
]
