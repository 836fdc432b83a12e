"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available.

Run with: pytest tests/test_smoke.py
"""

import pytest


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from dateslice import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import dateslice
        assert dateslice is not None


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_relative_period_imports(self):
        """Test relative period imports"""
        from dateslice import (
            today,
            yesterday,
            tomorrow,
            day_before,
            this_week,
            last_week,
            next_week,
            week_of,
            this_month,
            last_month,
            next_month,
            month_of,
            this_year,
            last_year,
            next_year,
            year_of,
        )

        for func in (
            today, yesterday, tomorrow, day_before,
            this_week, last_week, next_week, week_of,
            this_month, last_month, next_month, month_of,
            this_year, last_year, next_year, year_of,
        ):
            assert callable(func)

    def test_dispatch_imports(self):
        """Test range and dispatch imports"""
        from dateslice import (
            date_range,
            range_string,
            resolve_range_string,
            date_string_to_slice,
            date_objects_to_slice,
            resolve_date_objects,
            format_dates,
        )

        assert callable(date_range)
        assert callable(range_string)
        assert callable(resolve_range_string)
        assert callable(date_string_to_slice)
        assert callable(date_objects_to_slice)
        assert callable(resolve_date_objects)
        assert callable(format_dates)

    def test_error_imports(self):
        """Test error types derive from ValueError"""
        from dateslice import DateSliceError, DateParseError, InvalidRangeError

        assert issubclass(DateSliceError, ValueError)
        assert issubclass(DateParseError, DateSliceError)
        assert issubclass(InvalidRangeError, DateSliceError)

    def test_subpackage_exports_match(self):
        """Test top-level names are the same objects as in dateslice.period"""
        import dateslice
        import dateslice.period

        for name in ("range_string", "date_objects_to_slice", "week_of", "DateSliceResult"):
            assert getattr(dateslice, name) is getattr(dateslice.period, name)


class TestBasicFunctionality:
    """Test basic functionality works without a pinned reference instant"""

    def test_today_returns_one_day(self):
        """Test today() against the real clock"""
        from dateslice import today
        assert len(today()) == 1

    def test_this_week_returns_seven_days(self):
        """Test this_week() against the real clock"""
        from dateslice import this_week
        days = this_week()
        assert len(days) == 7
        assert days[0].isoweekday() == 7  # Sunday

    def test_unknown_keyword_is_empty(self):
        """Test unknown keywords resolve to an empty list"""
        from dateslice import date_string_to_slice
        assert date_string_to_slice("bogus") == []
