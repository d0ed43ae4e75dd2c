"""
Capacity engine query surface.
Answers whether a day-trip, fishing trip or overnight stay can be accepted
on a date, given a ledger snapshot. Every function takes the snapshot as its
first argument and only reads it.

This module re-exports the functions from the split modules:
- capacity_policy.py: Ceilings, fishing base, resource-name helpers
- capacity_lock.py: 2-day fishing lock window
- capacity_occupancy.py: Per-date, per-resource occupancy
- capacity_fishing.py: Fishing quota and lock rules
- capacity_availability.py: Beach, overnight and boat checks
- capacity_calendar.py: Labels, colors, bulk calendar maps, report
"""

# =============================================================================
# RE-EXPORTS
# =============================================================================

# Policy
from .capacity_policy import (
    BEACH_MAX_CAPACITY,
    BOAT_MAX_CAPACITY,
    FISHING_MAX_GROUPS_PER_DAY,
    FISHING_MAX_ANGLERS,
    FISHING_BASE_KEY,
    FISHING_BASE_NAME,
    LOCK_WINDOW,
    NEW_FISHING_CONFLICT_WINDOW,
    normalize_resource_key,
    resource_key,
    is_fishing_base,
    percent_of_ceiling,
)

# Lock window
from .capacity_lock import (
    check_fishing_lock,
    get_fishing_activity,
    index_fishing_activity,
)

# Occupancy
from .capacity_occupancy import (
    get_day_capacity,
    get_beach_day_capacity,
    get_overnight_spillover,
    get_stay_dates,
)

# Fishing rules
from .capacity_fishing import (
    is_resource_locked_by_fishing,
    get_fishing_lock_reason,
    is_fishing_day_blocked,
    check_fishing_capacity,
    get_fishing_base_availability,
)

# Beach / overnight / boat
from .capacity_availability import (
    check_beach_availability,
    check_boat_capacity,
)

# Calendar
from .capacity_calendar import (
    capacity_color,
    get_capacity_color,
    get_beach_capacity_color,
    get_capacity_summary,
    get_calendar_days,
    get_blocked_fishing_dates_map,
    get_long_range_calendar_blocked_dates,
    get_overnight_conflicts,
    build_capacity_report,
)

__all__ = [
    'BEACH_MAX_CAPACITY',
    'BOAT_MAX_CAPACITY',
    'FISHING_MAX_GROUPS_PER_DAY',
    'FISHING_MAX_ANGLERS',
    'FISHING_BASE_KEY',
    'FISHING_BASE_NAME',
    'LOCK_WINDOW',
    'NEW_FISHING_CONFLICT_WINDOW',
    'normalize_resource_key',
    'resource_key',
    'is_fishing_base',
    'percent_of_ceiling',
    'check_fishing_lock',
    'get_fishing_activity',
    'index_fishing_activity',
    'get_day_capacity',
    'get_beach_day_capacity',
    'get_overnight_spillover',
    'get_stay_dates',
    'is_resource_locked_by_fishing',
    'get_fishing_lock_reason',
    'is_fishing_day_blocked',
    'check_fishing_capacity',
    'get_fishing_base_availability',
    'check_beach_availability',
    'check_boat_capacity',
    'capacity_color',
    'get_capacity_color',
    'get_beach_capacity_color',
    'get_capacity_summary',
    'get_calendar_days',
    'get_blocked_fishing_dates_map',
    'get_long_range_calendar_blocked_dates',
    'get_overnight_conflicts',
    'build_capacity_report',
]
