"""Shared test fixtures for dateslice tests."""

import pytest
from datetime import date, datetime


@pytest.fixture
def asof_ts():
    """Fixed reference instant: Wednesday, February 14, 2024 at 09:30.

    2024 is a leap year, so February has 29 days.
    """
    return datetime(2024, 2, 14, 9, 30)


@pytest.fixture
def year_end_asof_ts():
    """Fixed reference instant near a year boundary: Thursday, January 2, 2025."""
    return datetime(2025, 1, 2, 8, 0)


@pytest.fixture
def sample_days():
    """Fixture providing anchor days across month, year and leap boundaries."""
    return [
        date(2017, 4, 1),
        date(2016, 2, 29),
        date(2003, 1, 3),
        date(2024, 12, 31),
        date(2021, 1, 1),
        date(1999, 7, 15),
    ]
