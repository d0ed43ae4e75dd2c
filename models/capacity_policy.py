"""
Capacity business policy.
Ceilings, the fishing-base resource and resource-name helpers shared by
every capacity module.
"""

import re

# Business policy, not physical limits
BEACH_MAX_CAPACITY = 10
BOAT_MAX_CAPACITY = 10
FISHING_MAX_GROUPS_PER_DAY = 1
FISHING_MAX_ANGLERS = 5

# The single resource every fishing trip departs from and locks
FISHING_BASE_KEY = 'coco_loco'
FISHING_BASE_NAME = 'Coco Loco'
FISHING_BASE_ALIASES = ('coco_loco', 'coco loco', 'loco')

# Day offsets whose fishing activity locks the base on a given date:
# the fishing day itself and the day before it.
LOCK_WINDOW = (0, -1)

# Day offsets whose fishing activity prevents booking new fishing on a date.
# Order sets which reason is reported first.
NEW_FISHING_CONFLICT_WINDOW = (0, -1, 1)

# Long-range (offshore / big-game) trips keep anglers at the base this many days
LONG_RANGE_TRIP_DAYS = 2


def normalize_resource_key(name: str) -> str:
    """
    Normalize a resource name to its lookup key.

    'Coco Loco' -> 'coco_loco', ' Playa  Blanca! ' -> 'playa_blanca'.
    A name with no letters or digits normalizes to ''.
    """
    key = re.sub(r'[^a-z0-9]', '_', (name or '').lower())
    key = re.sub(r'_+', '_', key)
    return key.strip('_')


def is_fishing_base(name: str) -> bool:
    """Check whether a resource name designates the fishing base."""
    lowered = (name or '').lower().strip()
    if not lowered:
        return False
    return any(alias in lowered for alias in FISHING_BASE_ALIASES)


def resource_key(name: str) -> str:
    """
    Lookup key used to tally persons per resource.

    Every spelling of the fishing base ('Loco', 'Coco Loco', 'coco_loco')
    shares one key so bookings and fishing anglers land in the same tally.
    """
    if is_fishing_base(name):
        return FISHING_BASE_KEY
    return normalize_resource_key(name)


def percent_of_ceiling(persons: int, ceiling: int = BEACH_MAX_CAPACITY) -> int:
    """Occupancy percent, rounded and capped at 100."""
    if ceiling <= 0:
        return 100
    return min(100, int(persons * 100 / ceiling + 0.5))
