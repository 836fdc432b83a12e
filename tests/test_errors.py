"""Tests for typed errors and the DateSliceResult type.

Run with: pytest tests/test_errors.py -v
"""

import dataclasses
import logging
import pytest
from datetime import date

from dateslice.period.periodapi import (
    month_of,
    range_string,
    resolve_range_string,
    resolve_date_objects,
)
from dateslice.period.periodtypes import (
    DateSliceError,
    DateParseError,
    InvalidRangeError,
    DateSliceResult,
)


class TestErrorTypes:
    """Test error attributes and messages"""

    def test_parse_error_attributes(self):
        """Test DateParseError carries text and position"""
        err = DateParseError("2021ab", "begin", "expected YYYY, YYYYMM or YYYYMMDD")
        assert err.text == "2021ab"
        assert err.position == "begin"
        assert "2021ab" in str(err)
        assert "begin" in str(err)

    def test_parse_error_without_reason(self):
        """Test message without a reason suffix"""
        assert str(DateParseError("x", "end")) == "Invalid end date string: 'x'"

    def test_invalid_range_attributes(self):
        """Test InvalidRangeError carries both endpoints"""
        err = InvalidRangeError(date(2021, 1, 2), date(2021, 1, 1))
        assert err.begin == date(2021, 1, 2)
        assert err.end == date(2021, 1, 1)
        assert "2021-01-01" in str(err)

    def test_errors_catchable_as_value_error(self):
        """Test callers can catch ValueError"""
        with pytest.raises(ValueError):
            range_string("nope", "2021")


class TestDateSliceResult:
    """Test the result type"""

    def test_default_is_ok_and_empty(self):
        result = DateSliceResult()
        assert result.ok is True
        assert result.dates == []
        assert result.unwrap() == []

    def test_unwrap_raises_stored_error(self):
        err = InvalidRangeError(date(2021, 1, 2), date(2021, 1, 1))
        result = DateSliceResult(error=err)
        assert result.ok is False
        with pytest.raises(InvalidRangeError) as excinfo:
            result.unwrap()
        assert excinfo.value is err

    def test_frozen(self):
        result = DateSliceResult()
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.dates = [date(2021, 1, 1)]


class TestResolveRangeString:
    """Test the result-returning range resolver"""

    def test_success(self):
        """Test a valid range resolves"""
        result = resolve_range_string("202104", "202104")
        assert result.ok
        assert len(result.dates) == 30

    def test_parse_failure(self):
        """Test malformed input becomes an error, not an exception"""
        result = resolve_range_string("2021ab", "2021")
        assert result.ok is False
        assert result.dates == []
        assert isinstance(result.error, DateParseError)
        assert result.error.position == "begin"

    def test_reversed_range(self):
        """Test reversed range becomes an InvalidRangeError result"""
        result = resolve_range_string("2022", "2021")
        assert isinstance(result.error, InvalidRangeError)

    def test_failure_logged(self, caplog):
        """Test failures are logged at warning level"""
        with caplog.at_level(logging.WARNING, logger="dateslice.period.periodapi"):
            resolve_range_string("bad", "2021")
        assert "Could not resolve range" in caplog.text


class TestResolveDateObjects:
    """Test empty-vs-error distinction"""

    def test_no_match_is_ok_and_empty(self):
        """Test unknown keyword is an empty success"""
        result = resolve_date_objects("bogus", "", "")
        assert result.ok
        assert result.dates == []

    def test_nothing_given_is_ok_and_empty(self):
        result = resolve_date_objects()
        assert result.ok
        assert result.dates == []

    def test_malformed_is_error(self):
        """Test malformed begin is an error result"""
        result = resolve_date_objects("", "2021ab", "")
        assert not result.ok
        assert isinstance(result.error, DateSliceError)

    def test_begin_only(self):
        result = resolve_date_objects("", "20210101", "")
        assert result.unwrap() == [date(2021, 1, 1)]


class TestLogging:
    """Test debug logging of resolved day counts"""

    def test_month_day_count_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="dateslice.period.periodidentity"):
            month_of(date(2024, 2, 10))
        assert "29 days in the month" in caplog.text
