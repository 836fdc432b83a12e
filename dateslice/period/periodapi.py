"""Period date slice API.

Public API for turning relative period keywords and explicit date strings
into lists of calendar days.

All now-relative functions accept a keyword-only ``asof_ts``. Leave it unset
to resolve against the local wall clock; pass it to get a pure, repeatable
result.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from dateslice.period.periodidentity import (
    date_range,
    shift_date,
    resolve_week,
    resolve_month,
    resolve_year,
)
from dateslice.period.periodnormalize import (
    DATE_FORMAT,
    normalize_keyword,
    parse_date_string,
    widen_begin,
    widen_end,
)
from dateslice.period.periodtypes import DateSliceError, DateSliceResult

logger = logging.getLogger(__name__)


def _resolve_asof(asof_ts: Optional[datetime]) -> datetime:
    """Return asof_ts, or the local wall-clock time if not provided."""
    if asof_ts is None:
        return datetime.now()
    return asof_ts


# ---- Single days ----

def today(*, asof_ts: Optional[datetime] = None) -> list:
    """Return a list containing the current day."""
    return [_resolve_asof(asof_ts)]


def yesterday(*, asof_ts: Optional[datetime] = None) -> list:
    """Return a list containing the day before the current day."""
    return [shift_date(_resolve_asof(asof_ts), days=-1)]


def tomorrow(*, asof_ts: Optional[datetime] = None) -> list:
    """Return a list containing the day after the current day."""
    return [shift_date(_resolve_asof(asof_ts), days=1)]


def day_before(day: date) -> list:
    """Return a list containing the day before ``day``."""
    return [shift_date(day, days=-1)]


# ---- Weeks (Sunday first) ----

def week_of(day: date) -> list:
    """
    Return all 7 days of the week containing ``day``.

    Weeks run Sunday through Saturday.

    Examples:
        >>> week_of(date(2017, 4, 1))[0]
        datetime.date(2017, 3, 26)
    """
    return resolve_week(day)


def this_week(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_week(_resolve_asof(asof_ts))


def last_week(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_week(shift_date(_resolve_asof(asof_ts), days=-7))


def next_week(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_week(shift_date(_resolve_asof(asof_ts), days=7))


# ---- Months ----

def month_of(day: date) -> list:
    """Return every day of the calendar month containing ``day``."""
    return resolve_month(day)


def this_month(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_month(_resolve_asof(asof_ts))


def last_month(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_month(shift_date(_resolve_asof(asof_ts), months=-1))


def next_month(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_month(shift_date(_resolve_asof(asof_ts), months=1))


# ---- Years ----

def year_of(day: date) -> list:
    """Return every day of the calendar year containing ``day``."""
    return resolve_year(day)


def this_year(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_year(_resolve_asof(asof_ts))


def last_year(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_year(shift_date(_resolve_asof(asof_ts), years=-1))


def next_year(*, asof_ts: Optional[datetime] = None) -> list:
    return resolve_year(shift_date(_resolve_asof(asof_ts), years=1))


# ---- Explicit ranges ----

def range_string(begin: str, end: str) -> list:
    """
    Resolve a begin/end pair of date strings to an inclusive list of days.

    Each string may be abbreviated:
      - "YYYYMMDD": used as-is
      - "YYYYMM": first day of the month as begin, last day as end
      - "YYYY": Jan 1 as begin, Dec 31 as end

    Args:
        begin: Begin date string
        end: End date string

    Returns:
        List of datetime.date values, ascending

    Raises:
        DateParseError: If either string is malformed
        InvalidRangeError: If the widened end falls before the widened begin

    Examples:
        >>> days = range_string("202104", "202104")
        >>> days[0], days[-1], len(days)
        (datetime.date(2021, 4, 1), datetime.date(2021, 4, 30), 30)

        >>> len(range_string("2022", "2022"))
        365
    """
    begin_full = widen_begin(begin)
    end_full = widen_end(end)
    logger.debug(f"Widened range {begin!r}-{end!r} to {begin_full}-{end_full}")

    return date_range(
        parse_date_string(begin_full, "begin"),
        parse_date_string(end_full, "end"),
    )


def resolve_range_string(begin: str, end: str) -> DateSliceResult:
    """
    Same as range_string(), but returns a DateSliceResult instead of raising.

    Examples:
        >>> resolve_range_string("2021ab", "2021").ok
        False
    """
    try:
        return DateSliceResult(dates=range_string(begin, end))
    except DateSliceError as e:
        logger.warning(f"Could not resolve range {begin!r}-{end!r}: {e}")
        return DateSliceResult(error=e)


# ---- Keyword dispatch ----

KEYWORDS = {
    "today": today,
    "yesterday": yesterday,
    "thisweek": this_week,
    "lastweek": last_week,
    "thismonth": this_month,
    "lastmonth": last_month,
}


def date_string_to_slice(text: str, *, asof_ts: Optional[datetime] = None) -> list:
    """
    Resolve a period keyword to a list of days.

    Recognized keywords (case-insensitive): today, yesterday, thisweek,
    lastweek, thismonth, lastmonth.

    Args:
        text: Period keyword
        asof_ts: Reference timestamp (default: now)

    Returns:
        List of days, or an empty list if the keyword is not recognized

    Examples:
        >>> date_string_to_slice("bogus")
        []
    """
    resolver = KEYWORDS.get(normalize_keyword(text))
    if resolver is None:
        logger.debug(f"Unrecognized period keyword: {text!r}")
        return []

    return resolver(asof_ts=asof_ts)


def date_objects_to_slice(
    text: Optional[str] = None,
    begin: Optional[str] = None,
    end: Optional[str] = None,
    *,
    asof_ts: Optional[datetime] = None,
) -> list:
    """
    Resolve a keyword or an explicit begin/end pair to a list of days.

    Precedence:
      1. begin given: range_string(begin, end), with end defaulting to begin
      2. keyword given: date_string_to_slice(keyword)
      3. otherwise an empty list

    An end value without a begin value is ignored.

    Args:
        text: Period keyword
        begin: Begin date string (YYYY, YYYYMM or YYYYMMDD)
        end: End date string (YYYY, YYYYMM or YYYYMMDD)
        asof_ts: Reference timestamp for keywords (default: now)

    Returns:
        List of days

    Raises:
        DateParseError: If begin or end is malformed
        InvalidRangeError: If end falls before begin

    Examples:
        >>> date_objects_to_slice("", "20210101", "")
        [datetime.date(2021, 1, 1)]
    """
    if begin:
        return range_string(begin, end or begin)

    if text:
        return date_string_to_slice(text, asof_ts=asof_ts)

    return []


def resolve_date_objects(
    text: Optional[str] = None,
    begin: Optional[str] = None,
    end: Optional[str] = None,
    *,
    asof_ts: Optional[datetime] = None,
) -> DateSliceResult:
    """
    Same as date_objects_to_slice(), but returns a DateSliceResult.

    An empty result with ``ok`` True means nothing matched; ``ok`` False means
    the input was malformed.
    """
    try:
        return DateSliceResult(
            dates=date_objects_to_slice(text, begin, end, asof_ts=asof_ts)
        )
    except DateSliceError as e:
        logger.warning(f"Could not resolve dates (text={text!r}, begin={begin!r}, end={end!r}): {e}")
        return DateSliceResult(error=e)


# ---- Display ----

def format_dates(dates: list, fmt: str = DATE_FORMAT) -> list[str]:
    """
    Format a list of days as strings.

    Examples:
        >>> format_dates(range_string("20210101", "20210102"))
        ['20210101', '20210102']
    """
    return [d.strftime(fmt) for d in dates]


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
]
