"""
Tests for calendar date arithmetic.
"""

import pytest
from utils.datetime_helpers import (
    add_days,
    previous_day,
    next_day,
    is_within_range,
    date_range,
    parse_date,
)


class TestAddDays:
    """Tests for shifting dates."""

    def test_forward_and_backward(self):
        assert add_days('2025-06-10', 3) == '2025-06-13'
        assert add_days('2025-06-10', -10) == '2025-05-31'
        assert add_days('2025-06-10', 0) == '2025-06-10'

    def test_month_and_year_boundaries(self):
        assert add_days('2024-12-31', 1) == '2025-01-01'
        assert add_days('2024-02-28', 1) == '2024-02-29'
        assert add_days('2025-02-28', 1) == '2025-03-01'

    def test_previous_and_next_day(self):
        assert previous_day('2025-03-01') == '2025-02-28'
        assert next_day('2025-06-30') == '2025-07-01'

    def test_malformed_date_fails_fast(self):
        with pytest.raises(ValueError):
            add_days('2025-13-01', 1)
        with pytest.raises(ValueError):
            next_day('10/06/2025')
        with pytest.raises(ValueError):
            parse_date(None)


class TestIsWithinRange:
    """Tests for stay range membership."""

    def test_three_night_stay(self):
        assert is_within_range('2025-07-01', 3, '2025-07-01') is True
        assert is_within_range('2025-07-01', 3, '2025-07-02') is True
        assert is_within_range('2025-07-01', 3, '2025-07-03') is True

    def test_outside_range(self):
        assert is_within_range('2025-07-01', 3, '2025-07-04') is False
        assert is_within_range('2025-07-01', 3, '2025-06-30') is False

    def test_zero_nights_covers_nothing(self):
        assert is_within_range('2025-07-01', 0, '2025-07-01') is False
        assert is_within_range('2025-07-01', -2, '2025-07-01') is False

    def test_range_across_month_end(self):
        assert is_within_range('2025-01-30', 4, '2025-02-02') is True
        assert is_within_range('2025-01-30', 4, '2025-02-03') is False


class TestDateRange:
    """Tests for consecutive date lists."""

    def test_date_range(self):
        assert date_range('2025-06-29', 3) == ['2025-06-29', '2025-06-30', '2025-07-01']

    def test_empty_range(self):
        assert date_range('2025-06-29', 0) == []
