"""Period module for date slice resolution.

This module turns relative period keywords and explicit date strings into
lists of calendar days.

Public API:
    date_objects_to_slice(text, begin, end, asof_ts=None) -> list
        Resolve a keyword or begin/end strings (begin/end wins)

    date_string_to_slice(text, asof_ts=None) -> list
        Resolve a keyword ("today", "thisweek", "lastmonth", ...)

    range_string(begin, end) -> list
        Resolve YYYY / YYYYMM / YYYYMMDD strings to an inclusive range

    week_of(day) / month_of(day) / year_of(day) -> list
        Expand a day to its week (Sunday first), month or year

Examples:
    >>> from datetime import datetime
    >>> from dateslice.period import this_week, range_string
    >>>
    >>> # Relative period
    >>> asof = datetime(2017, 4, 1, 5, 0)
    >>> this_week(asof_ts=asof)[0]
    datetime.datetime(2017, 3, 26, 5, 0)
    >>>
    >>> # Month range from abbreviated strings
    >>> len(range_string("202104", "202104"))
    30
"""

from dateslice.period.periodapi import (
    today,
    yesterday,
    tomorrow,
    day_before,
    week_of,
    this_week,
    last_week,
    next_week,
    month_of,
    this_month,
    last_month,
    next_month,
    year_of,
    this_year,
    last_year,
    next_year,
    date_range,
    range_string,
    resolve_range_string,
    KEYWORDS,
    date_string_to_slice,
    date_objects_to_slice,
    resolve_date_objects,
    format_dates,
)
from dateslice.period.periodtypes import (
    DateSliceError,
    DateParseError,
    InvalidRangeError,
    DateOutOfRangeError,
    DateSliceResult,
)

__all__ = [
    "today",
    "yesterday",
    "tomorrow",
    "day_before",
    "week_of",
    "this_week",
    "last_week",
    "next_week",
    "month_of",
    "this_month",
    "last_month",
    "next_month",
    "year_of",
    "this_year",
    "last_year",
    "next_year",
    "date_range",
    "range_string",
    "resolve_range_string",
    "KEYWORDS",
    "date_string_to_slice",
    "date_objects_to_slice",
    "resolve_date_objects",
    "format_dates",
    "DateSliceError",
    "DateParseError",
    "InvalidRangeError",
    "DateOutOfRangeError",
    "DateSliceResult",
]
