"""
Unit tests for calendar-month helpers.

Tests cover:
- Normalizing dates, datetimes and strings to month start
- Rejecting malformed month strings
- Trailing month windows across year boundaries
"""

from datetime import date, datetime

import pytest
import pytz

from mgnrega.core.exceptions import ValidationError
from mgnrega.core.months import (
    add_months,
    current_month,
    month_label,
    normalize_month,
    trailing_months,
)

from tests.conftest import ist_datetime


class TestNormalizeMonth:
    """Tests for normalize_month."""

    @pytest.mark.parametrize(
        "value",
        [
            date(2024, 3, 31),
            datetime(2024, 3, 1, 0, 0),
            "2024-03",
            "2024-03-17",
            "  2024-03-05 ",
        ],
    )
    def test_values_in_same_month_normalize_equal(self, value):
        assert normalize_month(value) == date(2024, 3, 1)

    def test_aware_datetime_is_read_in_ist(self):
        """
        GIVEN 2024-03-31 20:00 UTC (already April 1 in India)
        WHEN I normalize it
        THEN the IST month is used
        """
        value = pytz.utc.localize(datetime(2024, 3, 31, 20, 0))

        assert normalize_month(value) == date(2024, 4, 1)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "garbage",
            "2024",
            "12",
            "13",
            "10:30",
            "March",
            "March 2024",
            "03-2024",
            "2024-13",
            "2024-00",
            "2024-02-30",
        ],
    )
    def test_malformed_strings_raise_validation_error(self, value):
        """
        GIVEN a string missing a year or month, or naming an impossible date
        WHEN I normalize it
        THEN it is rejected instead of filled in from a default
        """
        with pytest.raises(ValidationError):
            normalize_month(value)

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-3", date(2024, 3, 1)),
            ("2024-03-17T10:30:00", date(2024, 3, 1)),
            ("2024-12-31 23:59", date(2024, 12, 1)),
        ],
    )
    def test_year_first_formats_accepted(self, value, expected):
        assert normalize_month(value) == expected

    def test_unsupported_type_raises_validation_error(self):
        with pytest.raises(ValidationError):
            normalize_month(202403)


class TestMonthArithmetic:
    """Tests for add_months, month_label and trailing_months."""

    def test_add_months_crosses_year(self):
        assert add_months(date(2024, 1, 1), -2) == date(2023, 11, 1)
        assert add_months(date(2024, 11, 1), 3) == date(2025, 2, 1)

    def test_month_label(self):
        assert month_label(date(2024, 3, 1)) == "2024-03"

    def test_current_month_uses_given_day(self):
        assert current_month(ist_datetime(2024, 6, 30, 23, 0)) == date(2024, 6, 1)

    def test_trailing_months_oldest_first(self):
        """
        GIVEN an end month of March 2024
        WHEN I ask for 5 trailing months
        THEN they run November 2023 through March 2024
        """
        months = trailing_months(5, end=date(2024, 3, 15))

        assert months == [
            date(2023, 11, 1),
            date(2023, 12, 1),
            date(2024, 1, 1),
            date(2024, 2, 1),
            date(2024, 3, 1),
        ]

    def test_single_trailing_month(self):
        assert trailing_months(1, end=date(2024, 3, 15)) == [date(2024, 3, 1)]
