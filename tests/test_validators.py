"""
Tests for input validation utilities.
"""

from utils.validators import (
    validate_date_format,
    parse_count,
    parse_flag,
    sanitize_input
)


class TestValidateDateFormat:
    """Tests for date format validation."""

    def test_valid_dates(self):
        """Test valid YYYY-MM-DD dates."""
        assert validate_date_format('2025-06-10') is True
        assert validate_date_format('2024-02-29') is True

    def test_invalid_dates(self):
        """Test malformed and impossible dates."""
        assert validate_date_format('') is False
        assert validate_date_format(None) is False
        assert validate_date_format('10/06/2025') is False
        assert validate_date_format('2025-6-10') is False
        assert validate_date_format('2025-02-30') is False
        assert validate_date_format('2025-13-01') is False


class TestParseCount:
    """Tests for whole-number query parsing."""

    def test_valid_counts(self):
        """Test digits and ints."""
        assert parse_count('4') == 4
        assert parse_count(' 12 ') == 12
        assert parse_count(0) == 0
        assert parse_count(3) == 3

    def test_default(self):
        """Test missing values fall back to the default."""
        assert parse_count(None, default=1) == 1
        assert parse_count('', default=7) == 7
        assert parse_count(None) is None

    def test_invalid_counts(self):
        """Test negatives, decimals and words."""
        assert parse_count('-2') is None
        assert parse_count(-2) is None
        assert parse_count('2.5') is None
        assert parse_count('four') is None
        assert parse_count(True) is None


class TestParseFlag:
    """Tests for boolean query flags."""

    def test_flags(self):
        """Test truthy and falsy spellings."""
        assert parse_flag('1') is True
        assert parse_flag('True') is True
        assert parse_flag('yes') is True
        assert parse_flag('0') is False
        assert parse_flag('') is False
        assert parse_flag(None) is False


class TestSanitizeInput:
    """Tests for input sanitization."""

    def test_strip_whitespace(self):
        """Test whitespace stripping."""
        assert sanitize_input('  Playa Blanca  ') == 'Playa Blanca'

    def test_max_length(self):
        """Test length limiting."""
        assert sanitize_input('Playa Blanca', max_length=5) == 'Playa'

    def test_empty_input(self):
        """Test empty and None input."""
        assert sanitize_input('') == ''
        assert sanitize_input(None) == ''
