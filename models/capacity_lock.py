"""
Fishing lock window.

Any fishing activity on day X (a fishing trip of any type, or an inshore
fishing add-on on a beach booking) reserves the fishing base on X and X+1.
Every fishing rule is a lookup of that activity at a few day offsets around
a date; this module is the one place those lookups happen.

Lookups take an `activity_lookup` callable (date -> activity dict or None)
so the per-date rules and the bulk calendar maps share the same reason
functions: per-date callers read the ledger directly, bulk callers read a
pre-built index.
"""

from utils.datetime_helpers import add_days
from utils.messages import get_message, plural
from .capacity_policy import (
    FISHING_BASE_NAME,
    LOCK_WINDOW,
    NEW_FISHING_CONFLICT_WINDOW,
)

INSHORE_ADDON_LABEL = 'inshore (add-on)'


# =============================================================================
# ACTIVITY LOOKUP
# =============================================================================

def _activity_for_day(day) -> dict:
    if day is None or not (day.has_fishing or day.has_inshore_addon):
        return None
    types = day.fishing_types if day.has_fishing else [INSHORE_ADDON_LABEL]
    return {
        'date': day.date,
        'trips': len(day.fishing),
        'anglers': day.anglers,
        'types': types,
        'inshore_addon': day.has_inshore_addon,
    }


def get_fishing_activity(ledger, date: str) -> dict:
    """
    Fishing activity filed on a date.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)

    Returns:
        dict or None: {
            'date': str,
            'trips': int,          # fishing trips booked on the date
            'anglers': int,
            'types': [str],        # trip types, or ['inshore (add-on)']
            'inshore_addon': bool
        }
    """
    return _activity_for_day(ledger.get_day(date))


def index_fishing_activity(ledger) -> dict:
    """Activity for every ledger date that has any: {date: activity}."""
    index = {}
    for date, day in ledger.items():
        activity = _activity_for_day(day)
        if activity:
            index[date] = activity
    return index


def ledger_lookup(ledger):
    """Activity lookup reading the ledger one date at a time."""
    return lambda date: get_fishing_activity(ledger, date)


def find_fishing_in_window(date: str, offsets, activity_lookup) -> tuple:
    """
    First fishing activity found at date + offset, in offset order.

    Args:
        date: Reference date (YYYY-MM-DD)
        offsets: Day offsets to inspect, e.g. (0, -1)
        activity_lookup: Callable date -> activity or None

    Returns:
        tuple: (offset, activity) or (None, None)
    """
    for offset in offsets:
        activity = activity_lookup(add_days(date, offset))
        if activity:
            return offset, activity
    return None, None


# =============================================================================
# LOCK RULE
# =============================================================================

def check_fishing_lock(ledger, date: str, activity_lookup=None) -> dict:
    """
    Check whether the fishing base is locked on a date.

    Locked when fishing activity is filed on the date itself or on the day
    before it (2-day lock).

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)
        activity_lookup: Optional pre-built lookup (defaults to the ledger)

    Returns:
        dict: {
            'locked': bool,
            'reason': str,
            'locked_by_today': bool,
            'locked_by_yesterday': bool
        }
    """
    lookup = activity_lookup or ledger_lookup(ledger)
    offset, activity = find_fishing_in_window(date, LOCK_WINDOW, lookup)

    if offset == 0:
        if activity['trips']:
            reason = get_message(
                'lock_today',
                anglers=activity['anglers'],
                angler_word=plural(activity['anglers'], 'angler'),
                base=FISHING_BASE_NAME,
            )
        else:
            reason = get_message('lock_today_inshore', base=FISHING_BASE_NAME)
        return {
            'locked': True,
            'reason': reason,
            'locked_by_today': True,
            'locked_by_yesterday': False,
        }

    if offset == -1:
        return {
            'locked': True,
            'reason': get_message('lock_yesterday', base=FISHING_BASE_NAME),
            'locked_by_today': False,
            'locked_by_yesterday': True,
        }

    return {
        'locked': False,
        'reason': '',
        'locked_by_today': False,
        'locked_by_yesterday': False,
    }


# =============================================================================
# CALENDAR REASONS
# =============================================================================

def fishing_block_reason(date: str, activity_lookup) -> str:
    """
    Reason a date is closed to new fishing bookings, or '' if open.

    A new trip on the date would lock the date and the day after, so it
    collides with activity on the day before, the day itself or the day
    after.
    """
    offset, activity = find_fishing_in_window(
        date, NEW_FISHING_CONFLICT_WINDOW, activity_lookup
    )
    if offset is None:
        return ''
    types = ', '.join(activity['types'])
    if offset == 0:
        return get_message('blocked_today', types=types)
    if offset == -1:
        return get_message('blocked_yesterday', types=types)
    return get_message('blocked_tomorrow', types=types)


def long_range_block_reason(date: str, activity_lookup) -> str:
    """
    Reason a date is closed on the offshore / big-game calendar, or ''.

    That calendar only closes the fishing day and the day after it; the
    day before stays bookable.
    """
    offset, activity = find_fishing_in_window(date, LOCK_WINDOW, activity_lookup)
    if offset is None:
        return ''
    types = ', '.join(activity['types'])
    if offset == 0:
        return get_message(
            'long_range_blocked_today', types=types, anglers=activity['anglers']
        )
    return get_message(
        'long_range_blocked_yesterday', origin=activity['date'], types=types
    )
