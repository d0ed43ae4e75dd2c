"""
Ledger package.

- snapshot: immutable, date-keyed booking records (LedgerSnapshot and friends)
- store: holder that swaps snapshots on refresh (LedgerStore, get_ledger)
"""

from ledger.snapshot import (
    BookingEntry,
    FishingTripEntry,
    DaySnapshot,
    LedgerSnapshot,
    normalize_trip_type,
    TRIP_INSHORE,
    TRIP_OFFSHORE,
    TRIP_BIG_GAME,
    LONG_RANGE_TRIP_TYPES,
)
from ledger.store import LedgerStore, get_ledger, release_ledger

__all__ = [
    # Records
    'BookingEntry',
    'FishingTripEntry',
    'DaySnapshot',
    'LedgerSnapshot',
    'normalize_trip_type',
    'TRIP_INSHORE',
    'TRIP_OFFSHORE',
    'TRIP_BIG_GAME',
    'LONG_RANGE_TRIP_TYPES',
    # Store
    'LedgerStore',
    'get_ledger',
    'release_ledger',
]
