"""
Beach, overnight and boat availability checks.

Each beach has its own ceiling. Overnight stays spill into the following
days and at most one overnight may be active on any day. The fishing base
cannot take day visitors or overnights while a fishing lock holds.
"""

import logging

from utils.messages import get_message, plural
from .capacity_policy import (
    BEACH_MAX_CAPACITY,
    BOAT_MAX_CAPACITY,
    FISHING_BASE_NAME,
    is_fishing_base,
)
from .capacity_lock import check_fishing_lock
from .capacity_occupancy import (
    get_day_capacity,
    get_beach_day_capacity,
    get_stay_dates,
)

logger = logging.getLogger(__name__)


def _result(can_book: bool, reason: str, remaining_after: int, rule: str = None) -> dict:
    if not can_book:
        logger.debug('Beach booking rejected (%s): %s', rule, reason)
    return {
        'can_book': can_book,
        'reason': reason,
        'remaining_after': remaining_after,
        'rule': rule,
    }


def _describe_existing_overnight(infos: list) -> str:
    if not infos:
        return get_message('overnight_existing_unknown')
    existing = infos[0]
    if existing['is_fishing']:
        return get_message('overnight_existing_fishing')
    return get_message('overnight_existing_stay', resource=existing['resource'])


def _check_overnight_range(ledger, date: str, resource: str, party_size: int,
                           night_count: int, remaining_after: int) -> dict:
    """
    Walk every night of a requested stay.

    Returns a rejection result, or None when every night fits.
    """
    for i, stay_date in enumerate(get_stay_dates(date, night_count)):
        cap = get_day_capacity(ledger, stay_date)

        if not cap['can_book_new_overnight']:
            return _result(False, get_message(
                'overnight_taken',
                date=stay_date,
                existing=_describe_existing_overnight(cap['overnight_infos']),
            ), remaining_after, 'overnight')

        if is_fishing_base(resource) and check_fishing_lock(ledger, stay_date)['locked']:
            return _result(False, get_message(
                'overnight_base_locked', base=FISHING_BASE_NAME, date=stay_date
            ), 0, 'lock')

        if i > 0:
            spill_cap = get_beach_day_capacity(ledger, stay_date, resource, day_capacity=cap)
            if spill_cap['remaining_spots'] - party_size < 0:
                return _result(False, get_message(
                    'overnight_spill_full',
                    resource=resource,
                    date=stay_date,
                    day_number=i + 1,
                    booked=spill_cap['booked_persons'],
                    ceiling=BEACH_MAX_CAPACITY,
                ), 0, 'capacity')

    return None


def check_beach_availability(ledger, date: str, resource: str, party_size: int,
                             is_overnight: bool = False, night_count: int = 0) -> dict:
    """
    Check whether a party can be booked at a resource on a date.

    Args:
        ledger: LedgerSnapshot
        date: First day (YYYY-MM-DD)
        resource: Resource name
        party_size: Persons in the party
        is_overnight: Whether the booking is an overnight stay
        night_count: Nights of the stay (used when is_overnight)

    Returns:
        dict: {
            'can_book': bool,
            'reason': str,
            'remaining_after': int,
            'rule': str or None   # lock / capacity / overnight / party_size
        }
    """
    if party_size < 1:
        return _result(False, get_message('beach_invalid_party'), 0, 'party_size')

    cap = get_day_capacity(ledger, date)

    if is_fishing_base(resource) and cap['base_locked_by_fishing']:
        lock = check_fishing_lock(ledger, date)
        return _result(
            False,
            lock['reason'] or get_message('lock_generic', base=FISHING_BASE_NAME),
            0,
            'lock',
        )

    beach_cap = get_beach_day_capacity(ledger, date, resource, day_capacity=cap)
    remaining_after = beach_cap['remaining_spots'] - party_size

    if remaining_after < 0:
        if beach_cap['remaining_spots'] == 0:
            return _result(False, get_message(
                'beach_full',
                resource=resource,
                booked=beach_cap['booked_persons'],
                ceiling=BEACH_MAX_CAPACITY,
            ), 0, 'capacity')
        return _result(False, get_message(
            'beach_not_enough',
            remaining=beach_cap['remaining_spots'],
            spot_word=plural(beach_cap['remaining_spots'], 'spot'),
            resource=resource,
            booked=beach_cap['booked_persons'],
            ceiling=BEACH_MAX_CAPACITY,
            party_size=party_size,
        ), beach_cap['remaining_spots'], 'capacity')

    if is_overnight and night_count and night_count > 0:
        rejection = _check_overnight_range(
            ledger, date, resource, party_size, night_count, remaining_after
        )
        if rejection:
            return rejection

    if remaining_after == 0:
        reason = get_message('beach_fill', resource=resource)
    else:
        reason = get_message(
            'beach_remaining',
            remaining=remaining_after,
            spot_word=plural(remaining_after, 'spot'),
            resource=resource,
        )
    return _result(True, reason, remaining_after)


def check_boat_capacity(ledger, date: str, persons: int, resource: str = None) -> dict:
    """
    Check the boat transfer for a party.

    The boat follows the destination beach's capacity; without a beach
    there is nothing to check yet.

    Returns:
        dict: {'can_book': bool, 'remaining_after': int, 'message': str}
    """
    if resource:
        result = check_beach_availability(ledger, date, resource, persons)
        return {
            'can_book': result['can_book'],
            'remaining_after': result['remaining_after'],
            'message': result['reason'],
        }
    return {
        'can_book': True,
        'remaining_after': BOAT_MAX_CAPACITY,
        'message': get_message('boat_select_beach'),
    }
