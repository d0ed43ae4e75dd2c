"""
Input validation helper functions.
Validates query input before it reaches the capacity engine.
"""

import re
from datetime import datetime


def validate_date_format(date_str: str) -> bool:
    """
    Validate date is in YYYY-MM-DD format.

    Args:
        date_str: Date string to validate

    Returns:
        True if valid format
    """
    if not date_str or not re.match(r'^\d{4}-\d{2}-\d{2}$', date_str):
        return False
    try:
        datetime.strptime(date_str, '%Y-%m-%d')
        return True
    except ValueError:
        return False


def parse_count(value, default: int = None):
    """
    Parse a non-negative whole number from query input.

    Args:
        value: Raw value (str, int or None)
        default: Returned when value is None or empty

    Returns:
        int, default, or None if value is not a non-negative whole number
    """
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    text = str(value).strip()
    if not text.isdigit():
        return None
    return int(text)


def parse_flag(value) -> bool:
    """Interpret a query flag ('1', 'true', 'yes', 'on')."""
    if value is None:
        return False
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def sanitize_input(text: str, max_length: int = None) -> str:
    """
    Sanitize text input by trimming and limiting length.

    Args:
        text: Text to sanitize
        max_length: Maximum length (optional)

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    # Strip whitespace
    sanitized = text.strip()

    # Limit length if specified
    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized
