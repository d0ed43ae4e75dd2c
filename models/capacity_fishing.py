"""
Fishing exclusivity rules.

All fishing departs from the fishing base (Coco Loco). Every fishing trip,
whatever its type, locks the base for 2 days (the fishing day and the day
after). At most one fishing group per day, at most five anglers per group.
"""

import logging

from utils.datetime_helpers import next_day
from utils.messages import get_message, plural
from .capacity_policy import (
    BEACH_MAX_CAPACITY,
    FISHING_BASE_NAME,
    FISHING_MAX_ANGLERS,
    FISHING_MAX_GROUPS_PER_DAY,
    NEW_FISHING_CONFLICT_WINDOW,
)
from .capacity_lock import (
    check_fishing_lock,
    find_fishing_in_window,
    fishing_block_reason,
    ledger_lookup,
)
from .capacity_occupancy import get_day_capacity, get_beach_day_capacity

logger = logging.getLogger(__name__)


# =============================================================================
# LOCK QUERIES
# =============================================================================

def is_resource_locked_by_fishing(ledger, date: str) -> bool:
    """True when the fishing base is locked on date (today's or yesterday's fishing)."""
    return check_fishing_lock(ledger, date)['locked']


def get_fishing_lock_reason(ledger, date: str) -> str:
    """Human-readable lock reason, '' when the base is free."""
    return check_fishing_lock(ledger, date)['reason']


def is_fishing_day_blocked(ledger, date: str) -> dict:
    """
    Check whether a date is closed to new fishing bookings.

    Used by fishing calendars. Blocked when the date already has fishing,
    when yesterday's fishing still locks the base, or when tomorrow's
    fishing would collide with the 2-day lock of a trip booked today.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)

    Returns:
        dict: {'blocked': bool, 'reason': str}
    """
    reason = fishing_block_reason(date, ledger_lookup(ledger))
    return {'blocked': bool(reason), 'reason': reason}


# =============================================================================
# BOOKING CHECK
# =============================================================================

def _reject(date: str, message: str, rule: str) -> dict:
    logger.debug('Fishing rejected on %s (%s): %s', date, rule, message)
    return {'can_book': False, 'message': message, 'rule': rule}


def check_fishing_capacity(ledger, date: str, angler_count: int, trip_type: str = None) -> dict:
    """
    Check if a fishing trip can be booked on a date.

    Rules, in order:
        quota        - the date already has a fishing group
        anglers      - angler_count over the per-group ceiling (or below 1)
        lock         - yesterday's or today's fishing locks the base
        next_day     - tomorrow has fishing; today's 2-day lock would overlap it
        capacity     - the base lacks room for the anglers

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)
        angler_count: Anglers in the group
        trip_type: Trip type shown in the confirmation message (optional)

    Returns:
        dict: {'can_book': bool, 'message': str, 'rule': str or None}
    """
    cap = get_day_capacity(ledger, date)

    if cap['fishing_groups_booked'] >= FISHING_MAX_GROUPS_PER_DAY:
        return _reject(date, get_message(
            'fishing_quota', max_groups=FISHING_MAX_GROUPS_PER_DAY
        ), 'quota')

    if angler_count > FISHING_MAX_ANGLERS:
        return _reject(date, get_message(
            'fishing_too_many_anglers',
            max_anglers=FISHING_MAX_ANGLERS,
            anglers=angler_count,
        ), 'anglers')

    if angler_count < 1:
        return _reject(date, get_message('fishing_no_anglers'), 'anglers')

    offset, activity = find_fishing_in_window(
        date, NEW_FISHING_CONFLICT_WINDOW, ledger_lookup(ledger)
    )
    if offset == -1:
        return _reject(date, get_message(
            'fishing_yesterday', base=FISHING_BASE_NAME
        ), 'lock')
    if offset == 0:
        return _reject(date, get_message(
            'fishing_today', base=FISHING_BASE_NAME
        ), 'lock')
    if offset == 1:
        key = 'fishing_next_day' if activity['trips'] else 'fishing_next_day_inshore'
        return _reject(date, get_message(
            key, next_day=next_day(date), base=FISHING_BASE_NAME
        ), 'next_day')

    base_cap = get_beach_day_capacity(ledger, date, FISHING_BASE_NAME, day_capacity=cap)
    if base_cap['remaining_spots'] < angler_count:
        return _reject(date, get_message(
            'fishing_base_full',
            base=FISHING_BASE_NAME,
            anglers=angler_count,
            booked=base_cap['booked_persons'],
            ceiling=BEACH_MAX_CAPACITY,
        ), 'capacity')

    return {
        'can_book': True,
        'message': get_message(
            'fishing_ok',
            trip=trip_type or 'Fishing',
            anglers=angler_count,
            angler_word=plural(angler_count, 'angler'),
            base=FISHING_BASE_NAME,
        ),
        'rule': None,
    }


# =============================================================================
# FISHING BASE SUMMARY
# =============================================================================

def get_fishing_base_availability(ledger, date: str) -> dict:
    """
    Availability of the fishing base for day visitors.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)

    Returns:
        dict: {
            'available': bool,
            'reason': str,
            'fishing_booked': bool,
            'tourists_at_base': int,
            'total_persons': int,
            'blocked_by_yesterday_fishing': bool,
            'long_range_still_available': bool,
            'overnight_booked': bool,
            'can_book_new_overnight': bool
        }
    """
    cap = get_day_capacity(ledger, date)
    lock = check_fishing_lock(ledger, date)

    result = {
        'total_persons': cap['booked_persons'],
        'overnight_booked': cap['overnight_booked'],
        'can_book_new_overnight': cap['can_book_new_overnight'],
    }

    if lock['locked']:
        result.update({
            'available': False,
            'reason': lock['reason'],
            'fishing_booked': lock['locked_by_today'],
            'tourists_at_base': 0,
            'blocked_by_yesterday_fishing': lock['locked_by_yesterday'],
            'long_range_still_available': (
                cap['fishing_groups_booked'] < FISHING_MAX_GROUPS_PER_DAY
                and not lock['locked_by_yesterday']
            ),
        })
        return result

    base_cap = get_beach_day_capacity(ledger, date, FISHING_BASE_NAME, day_capacity=cap)
    result.update({
        'fishing_booked': False,
        'tourists_at_base': base_cap['booked_persons'],
        'blocked_by_yesterday_fishing': False,
        'long_range_still_available': True,
    })

    if base_cap['is_full']:
        result.update({
            'available': False,
            'reason': get_message(
                'base_full', base=FISHING_BASE_NAME, ceiling=BEACH_MAX_CAPACITY
            ),
        })
        return result

    remaining = base_cap['remaining_spots']
    result.update({
        'available': True,
        'reason': get_message(
            'base_available', remaining=remaining, spot_word=plural(remaining, 'spot')
        ),
    })
    return result
