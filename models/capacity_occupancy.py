"""
Occupancy aggregation.
Folds direct bookings, multi-night spillover and fishing anglers into
per-resource person counts for one date.
"""

import logging

from utils.datetime_helpers import add_days, is_within_range
from .capacity_policy import (
    BEACH_MAX_CAPACITY,
    FISHING_BASE_KEY,
    FISHING_MAX_ANGLERS,
    FISHING_MAX_GROUPS_PER_DAY,
    LONG_RANGE_TRIP_DAYS,
    is_fishing_base,
    percent_of_ceiling,
    resource_key,
)
from .capacity_lock import check_fishing_lock

logger = logging.getLogger(__name__)


# =============================================================================
# SPILLOVER
# =============================================================================

def get_overnight_spillover(ledger, date: str) -> list:
    """
    Overnight stays and long-range fishing trips occupying a date.

    A booking with N overnight nights filed on day X occupies its resource
    on X .. X+N-1. An offshore or big-game trip filed on X keeps its anglers
    at the fishing base on X and X+1.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)

    Returns:
        list of dicts: [{
            'resource': str,
            'persons': int,
            'nights': int,
            'from_date': str,
            'is_fishing': bool
        }]
    """
    result = []

    for origin, day in ledger.items():
        for booking in day.bookings:
            if booking.overnight_nights > 0 and is_within_range(
                origin, booking.overnight_nights, date
            ):
                result.append({
                    'resource': booking.resource,
                    'persons': booking.persons,
                    'nights': booking.overnight_nights,
                    'from_date': origin,
                    'is_fishing': False,
                })

        for trip in day.fishing:
            if trip.is_long_range and is_within_range(origin, LONG_RANGE_TRIP_DAYS, date):
                result.append({
                    'resource': FISHING_BASE_KEY,
                    'persons': trip.anglers,
                    'nights': LONG_RANGE_TRIP_DAYS,
                    'from_date': origin,
                    'is_fishing': True,
                })

    return result


def _resource_capacity(resource: str, date: str, persons: int) -> dict:
    remaining = max(0, BEACH_MAX_CAPACITY - persons)
    return {
        'resource': resource,
        'date': date,
        'booked_persons': persons,
        'remaining_spots': remaining,
        'is_full': remaining <= 0,
        'capacity_percent': percent_of_ceiling(persons),
    }


# =============================================================================
# DAY CAPACITY
# =============================================================================

def get_day_capacity(ledger, date: str) -> dict:
    """
    Aggregate everything that occupies resources on a date.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)

    Returns:
        dict: {
            'date': str,
            'booked_persons': int,
            'remaining_spots': int,          # at the fullest resource
            'is_full': bool,                 # every tallied resource is full
            'capacity_percent': int,         # of the fullest resource
            'fishing_groups_booked': int,
            'fishing_anglers_booked': int,
            'fishing_available': bool,
            'fishing_anglers_remaining': int,
            'base_locked_by_fishing': bool,
            'base_persons': int,
            'base_remaining_spots': int,
            'overnight_booked': bool,
            'overnight_infos': [dict],
            'overnight_conflict': bool,      # ledger holds >1 overnight today
            'can_book_new_overnight': bool,
            'resource_bookings': [{'resource': str, 'persons': int}],
            'resource_capacities': {key: {...}}
        }
    """
    day = ledger.get_day(date)
    lock = check_fishing_lock(ledger, date)

    persons_by_key = {}
    resource_bookings = []

    def fold(resource, persons):
        key = resource_key(resource)
        persons_by_key[key] = persons_by_key.get(key, 0) + persons
        resource_bookings.append({'resource': resource, 'persons': persons})

    # Direct bookings
    if day:
        for booking in day.bookings:
            fold(booking.resource, booking.persons)

    # Spillover from stays and long-range trips that started earlier
    overnight_infos = get_overnight_spillover(ledger, date)
    for info in overnight_infos:
        if info['from_date'] != date:
            fold(info['resource'], info['persons'])

    # Today's anglers occupy the base
    fishing_groups = 0
    fishing_anglers = 0
    if day:
        for trip in day.fishing:
            fishing_groups += 1
            fishing_anglers += trip.anglers
            fold(FISHING_BASE_KEY, trip.anglers)

    resource_capacities = {
        key: _resource_capacity(key, date, persons)
        for key, persons in persons_by_key.items()
    }

    total_persons = sum(persons_by_key.values())
    fullest = max(persons_by_key.values(), default=0)
    base_persons = persons_by_key.get(FISHING_BASE_KEY, 0)

    overnight_booked = len(overnight_infos) > 0
    overnight_conflict = len(overnight_infos) > 1
    if overnight_conflict:
        logger.warning(
            'Ledger has %s overnights active on %s (only one allowed)',
            len(overnight_infos), date
        )

    return {
        'date': date,
        'booked_persons': total_persons,
        'remaining_spots': max(0, BEACH_MAX_CAPACITY - fullest),
        'is_full': bool(resource_capacities) and all(
            cap['is_full'] for cap in resource_capacities.values()
        ),
        'capacity_percent': max(
            (cap['capacity_percent'] for cap in resource_capacities.values()),
            default=0
        ),
        'fishing_groups_booked': fishing_groups,
        'fishing_anglers_booked': fishing_anglers,
        'fishing_available': (
            fishing_groups < FISHING_MAX_GROUPS_PER_DAY
            and not lock['locked_by_yesterday']
        ),
        'fishing_anglers_remaining': max(0, FISHING_MAX_ANGLERS - fishing_anglers),
        'base_locked_by_fishing': lock['locked'],
        'base_persons': base_persons,
        'base_remaining_spots': (
            0 if lock['locked'] else max(0, BEACH_MAX_CAPACITY - base_persons)
        ),
        'overnight_booked': overnight_booked,
        'overnight_infos': overnight_infos,
        'overnight_conflict': overnight_conflict,
        'can_book_new_overnight': not overnight_booked,
        'resource_bookings': resource_bookings,
        'resource_capacities': resource_capacities,
    }


def get_beach_day_capacity(ledger, date: str, resource: str, day_capacity: dict = None) -> dict:
    """
    Capacity of one resource on a date.

    The fishing base reports itself full while a fishing lock holds.
    Resources with nothing booked (or names that normalize to nothing)
    report zero booked.

    Args:
        ledger: LedgerSnapshot
        date: Date (YYYY-MM-DD)
        resource: Resource name as shown to the user
        day_capacity: Already computed get_day_capacity() result (optional)

    Returns:
        dict: {
            'resource': str,
            'date': str,
            'booked_persons': int,
            'remaining_spots': int,
            'is_full': bool,
            'capacity_percent': int
        }
    """
    cap = day_capacity or get_day_capacity(ledger, date)

    if is_fishing_base(resource) and cap['base_locked_by_fishing']:
        return {
            'resource': resource,
            'date': date,
            'booked_persons': BEACH_MAX_CAPACITY,
            'remaining_spots': 0,
            'is_full': True,
            'capacity_percent': 100,
        }

    key = resource_key(resource)
    if key and key in cap['resource_capacities']:
        return cap['resource_capacities'][key]

    return _resource_capacity(resource, date, 0)


def get_stay_dates(date: str, night_count: int) -> list:
    """Dates covered by a stay of night_count nights starting on date."""
    return [add_days(date, i) for i in range(max(0, night_count))]
