"""Date Slice - lists of calendar days for reporting periods

Public API for resolving period keywords and date strings to day lists.

Usage:
    from dateslice import date_objects_to_slice, this_month, range_string

    # Resolve a keyword
    days = date_objects_to_slice("lastweek")  # 7 days, Sunday first

    # Resolve begin/end strings (begin/end wins over the keyword)
    days = date_objects_to_slice("thisweek", "202104", "202106")  # Apr 1 - Jun 30

    # Pin the reference instant for repeatable results
    days = this_month(asof_ts=datetime(2021, 2, 14))  # Feb 1 - Feb 28, 2021

    # Get a result instead of an exception on malformed input
    result = resolve_range_string("2021ab", "2021")
    result.ok     # False
    result.error  # DateParseError
"""

__version__ = "0.1.0"

# ============================================================================
# Relative Periods
# ============================================================================

from .period.periodapi import (
    today,          # [now]
    yesterday,      # [now - 1 day]
    tomorrow,       # [now + 1 day]
    day_before,     # [day - 1 day]
    this_week,      # Sunday-Saturday week containing now
    last_week,
    next_week,
    week_of,        # Sunday-Saturday week containing day
    this_month,     # Calendar month containing now
    last_month,
    next_month,
    month_of,       # Calendar month containing day
    this_year,      # Calendar year containing now
    last_year,
    next_year,
    year_of,        # Calendar year containing day
)

# ============================================================================
# Explicit Ranges and Dispatch
# ============================================================================

from .period.periodapi import (
    date_range,              # Inclusive range between two dates
    range_string,            # Inclusive range from YYYY / YYYYMM / YYYYMMDD strings
    resolve_range_string,    # range_string() returning DateSliceResult
    date_string_to_slice,    # Keyword dispatch ("today", "lastmonth", ...)
    date_objects_to_slice,   # Keyword or begin/end dispatch
    resolve_date_objects,    # date_objects_to_slice() returning DateSliceResult
    format_dates,            # Format day lists as strings
)

# ============================================================================
# Results and Errors
# ============================================================================

from .period.periodtypes import (
    DateSliceResult,
    DateSliceError,
    DateParseError,
    InvalidRangeError,
    DateOutOfRangeError,
)

__all__ = [
    "__version__",
    # Relative periods
    "today",
    "yesterday",
    "tomorrow",
    "day_before",
    "this_week",
    "last_week",
    "next_week",
    "week_of",
    "this_month",
    "last_month",
    "next_month",
    "month_of",
    "this_year",
    "last_year",
    "next_year",
    "year_of",
    # Ranges and dispatch
    "date_range",
    "range_string",
    "resolve_range_string",
    "date_string_to_slice",
    "date_objects_to_slice",
    "resolve_date_objects",
    "format_dates",
    # Results and errors
    "DateSliceResult",
    "DateSliceError",
    "DateParseError",
    "InvalidRangeError",
    "DateOutOfRangeError",
]
