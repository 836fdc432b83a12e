"""Period Text Normalization
---------------------------

Utility functions for normalizing keywords and partial date strings before
resolution.

Partial date strings come in three shapes, told apart by their digit count:

  - YYYY      year only
  - YYYYMM    year and month
  - YYYYMMDD  full date

A partial string is widened to a full date according to where it sits in a
range: at the begin it becomes the first day of its period, at the end the
last day.

Examples:
  >>> normalize_keyword("  ThisWeek ")
  'thisweek'

  >>> widen_begin("202104")
  '20210401'

  >>> widen_end("202104")
  '20210430'

  >>> widen_end("2022")
  '20221231'
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from dateslice.period.periodtypes import DateParseError

DATE_FORMAT = "%Y%m%d"

# Shape name -> pattern over ASCII digits only
_DATE_STRING_PATTERNS = {
    "day": re.compile(r"[0-9]{8}"),
    "month": re.compile(r"[0-9]{6}"),
    "year": re.compile(r"[0-9]{4}"),
}


def normalize_keyword(text: Optional[str]) -> str:
    """
    Normalize a period keyword for dispatch.

    Transformations:
      - Strip whitespace
      - Lowercase

    Args:
        text: Raw keyword (e.g., "ThisWeek", " lastmonth")

    Returns:
        Normalized keyword, or "" for empty input

    Examples:
        >>> normalize_keyword("TODAY")
        'today'

        >>> normalize_keyword(None)
        ''
    """
    if not text:
        return ""
    return text.strip().lower()


def classify_date_string(text: Optional[str]) -> Optional[str]:
    """
    Classify a date string by shape.

    Args:
        text: Candidate date string

    Returns:
        "year", "month" or "day", or None if the text is not 4, 6 or 8 digits

    Examples:
        >>> classify_date_string("2022")
        'year'

        >>> classify_date_string("202104")
        'month'

        >>> classify_date_string("20210102")
        'day'

        >>> classify_date_string("2021-01-02") is None
        True
    """
    if not text:
        return None

    for shape, pattern in _DATE_STRING_PATTERNS.items():
        if pattern.fullmatch(text):
            return shape

    return None


def parse_date_string(text: str, position: str = "begin") -> date:
    """
    Parse a full YYYYMMDD string into a date.

    Args:
        text: 8-digit date string
        position: "begin" or "end", reported in the error

    Returns:
        Parsed date

    Raises:
        DateParseError: If the text is not 8 digits or names an impossible date

    Examples:
        >>> parse_date_string("20210102")
        datetime.date(2021, 1, 2)
    """
    if classify_date_string(text) != "day":
        raise DateParseError(text, position, "expected YYYYMMDD")

    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(text, position, str(e)) from e


def _check_shape(text: str, position: str) -> str:
    shape = classify_date_string(text)
    if shape is None:
        raise DateParseError(text, position, "expected YYYY, YYYYMM or YYYYMMDD")
    return shape


def widen_begin(text: str) -> str:
    """
    Widen a partial date string to the first day of its period.

    Args:
        text: YYYY, YYYYMM or YYYYMMDD

    Returns:
        YYYYMMDD string

    Raises:
        DateParseError: If the text is not a recognized shape

    Examples:
        >>> widen_begin("2022")
        '20220101'

        >>> widen_begin("202104")
        '20210401'

        >>> widen_begin("20210415")
        '20210415'
    """
    shape = _check_shape(text, "begin")

    if shape == "year":
        return text + "0101"
    if shape == "month":
        return text + "01"
    return text


def widen_end(text: str) -> str:
    """
    Widen a partial date string to the last day of its period.

    The first day of the period is parsed and then moved to the final day of
    its month (YYYYMM) or year (YYYY), so month lengths and leap years come
    from calendar arithmetic.

    Args:
        text: YYYY, YYYYMM or YYYYMMDD

    Returns:
        YYYYMMDD string

    Raises:
        DateParseError: If the text is not a recognized shape or not a real date

    Examples:
        >>> widen_end("2024")
        '20241231'

        >>> widen_end("202402")
        '20240229'

        >>> widen_end("20210415")
        '20210415'
    """
    shape = _check_shape(text, "end")

    if shape == "year":
        first = parse_date_string(text + "0101", "end")
        last = first + relativedelta(month=12, day=31)
    elif shape == "month":
        first = parse_date_string(text + "01", "end")
        # day=31 clamps to the month's final day
        last = first + relativedelta(day=31)
    else:
        return text

    # isoformat keeps the year zero-padded to 4 digits
    return last.isoformat().replace("-", "")


__all__ = [
    "DATE_FORMAT",
    "normalize_keyword",
    "classify_date_string",
    "parse_date_string",
    "widen_begin",
    "widen_end",
]
