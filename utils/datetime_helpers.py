"""
Date helpers for the capacity engine.

Calendar math works on ISO date strings (YYYY-MM-DD) at day granularity.
No time zone conversion happens here; only get_today()/get_now() look at
the configured timezone, and only the HTTP layer calls them.
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from flask import current_app

DATE_FORMAT = '%Y-%m-%d'


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'America/Panama')
    return ZoneInfo(tz_name)


def get_today() -> date:
    """Get today's date in the configured timezone."""
    return datetime.now(get_timezone()).date()


def get_now() -> datetime:
    """Get current datetime in the configured timezone."""
    return datetime.now(get_timezone())


# =============================================================================
# DAY ARITHMETIC
# =============================================================================

def parse_date(date_str: str) -> date:
    """
    Parse an ISO date string.

    Args:
        date_str: Date (YYYY-MM-DD)

    Returns:
        date object

    Raises:
        ValueError: If the string is not a valid YYYY-MM-DD date
    """
    if not isinstance(date_str, str):
        raise ValueError(f'Invalid date: {date_str!r}')
    return datetime.strptime(date_str, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)


def add_days(date_str: str, n: int) -> str:
    """
    Shift a date by n days (n may be negative).

    Args:
        date_str: Date (YYYY-MM-DD)
        n: Number of days

    Returns:
        Shifted date (YYYY-MM-DD)
    """
    return format_date(parse_date(date_str) + timedelta(days=n))


def previous_day(date_str: str) -> str:
    """Day before date_str."""
    return add_days(date_str, -1)


def next_day(date_str: str) -> str:
    """Day after date_str."""
    return add_days(date_str, 1)


def is_within_range(start_date: str, night_count: int, target_date: str) -> bool:
    """
    Check whether target_date falls inside a stay of night_count nights.

    The covered days are [start_date, start_date + night_count - 1].
    A stay with zero (or negative) nights covers nothing.

    Args:
        start_date: First day of the stay (YYYY-MM-DD)
        night_count: Number of nights
        target_date: Date to test (YYYY-MM-DD)

    Returns:
        True if target_date is covered by the stay
    """
    if night_count <= 0:
        return False
    offset = (parse_date(target_date) - parse_date(start_date)).days
    return 0 <= offset < night_count


def date_range(start_date: str, days: int) -> list:
    """
    List consecutive dates starting at start_date.

    Args:
        start_date: First date (YYYY-MM-DD)
        days: Number of dates to produce

    Returns:
        list of YYYY-MM-DD strings
    """
    start = parse_date(start_date)
    return [format_date(start + timedelta(days=i)) for i in range(max(0, days))]
