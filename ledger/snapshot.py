"""
Ledger snapshot records.

Immutable, date-keyed view of confirmed bookings and fishing trips.
A snapshot is built once per refresh and never mutated; a refresh
produces a new LedgerSnapshot that replaces the old one.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional

from utils.datetime_helpers import parse_date

logger = logging.getLogger(__name__)

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')

# Closed set of fishing trip types
TRIP_INSHORE = 'inshore'
TRIP_OFFSHORE = 'offshore'
TRIP_BIG_GAME = 'biggame'

TRIP_TYPE_ALIASES = {
    'inshore': TRIP_INSHORE,
    'inshore fishing': TRIP_INSHORE,
    'offshore': TRIP_OFFSHORE,
    'offshore fishing': TRIP_OFFSHORE,
    'biggame': TRIP_BIG_GAME,
    'big game': TRIP_BIG_GAME,
    'big-game': TRIP_BIG_GAME,
    'big game fishing': TRIP_BIG_GAME,
}

LONG_RANGE_TRIP_TYPES = (TRIP_OFFSHORE, TRIP_BIG_GAME)


def normalize_trip_type(trip_type: Optional[str]) -> str:
    """
    Map a free-text trip type onto the closed set.

    Unknown spellings are returned lowercased and trimmed so they still
    count as fishing trips without being classified as long-range.
    """
    lowered = (trip_type or '').strip().lower()
    return TRIP_TYPE_ALIASES.get(lowered, lowered)


def _to_int(value) -> int:
    """Coerce a ledger count to a non-negative int; anything unparseable is 0."""
    if isinstance(value, int):
        return max(0, int(value))
    try:
        return max(0, int(str(value).strip()))
    except (TypeError, ValueError):
        return 0


def _to_str(value) -> str:
    if value is None:
        return ''
    return str(value)


def _is_calendar_date(value) -> bool:
    if not ISO_DATE_PATTERN.match(str(value)):
        return False
    try:
        parse_date(value)
    except ValueError:
        return False
    return True


# =============================================================================
# RECORDS
# =============================================================================

@dataclass(frozen=True)
class BookingEntry:
    """One confirmed day-trip to a named resource."""

    resource: str
    adults: int = 0
    kids: int = 0
    food: str = ''
    activities: str = ''
    overnight_nights: int = 0
    return_boat_persons: int = 0

    @property
    def persons(self) -> int:
        return self.adults + self.kids

    @property
    def has_inshore_addon(self) -> bool:
        return 'inshore' in self.activities.lower()

    @classmethod
    def from_dict(cls, data: Mapping) -> 'BookingEntry':
        return cls(
            resource=_to_str(data.get('beach', data.get('resource'))),
            adults=_to_int(data.get('adults')),
            kids=_to_int(data.get('kids')),
            food=_to_str(data.get('food')),
            activities=_to_str(data.get('activities')),
            overnight_nights=_to_int(
                data.get('overnight_nights', data.get('overnight'))
            ),
            return_boat_persons=_to_int(
                data.get('return_boat_persons', data.get('return_boat'))
            ),
        )


@dataclass(frozen=True)
class FishingTripEntry:
    """One confirmed fishing trip."""

    trip_type: str
    anglers: int = 0
    food: str = ''

    @property
    def normalized_type(self) -> str:
        return normalize_trip_type(self.trip_type)

    @property
    def is_long_range(self) -> bool:
        """Offshore and big-game trips keep the anglers at the base overnight."""
        return self.normalized_type in LONG_RANGE_TRIP_TYPES

    @classmethod
    def from_dict(cls, data: Mapping) -> 'FishingTripEntry':
        return cls(
            trip_type=_to_str(data.get('type', data.get('trip_type'))),
            anglers=_to_int(data.get('anglers')),
            food=_to_str(data.get('food')),
        )


@dataclass(frozen=True)
class DaySnapshot:
    """All ledger entries filed under one calendar date."""

    date: str
    bookings: tuple = ()
    fishing: tuple = ()
    confirmed: tuple = ()

    @property
    def has_fishing(self) -> bool:
        return len(self.fishing) > 0

    @property
    def has_inshore_addon(self) -> bool:
        return any(booking.has_inshore_addon for booking in self.bookings)

    @property
    def anglers(self) -> int:
        return sum(trip.anglers for trip in self.fishing)

    @property
    def fishing_types(self) -> list:
        return [trip.trip_type for trip in self.fishing]

    @classmethod
    def from_dict(cls, date_str: str, data: Mapping) -> 'DaySnapshot':
        confirmed = data.get('confirmed') or ()
        if isinstance(confirmed, str):
            confirmed = confirmed.split(',')
        return cls(
            date=date_str,
            bookings=tuple(
                BookingEntry.from_dict(b) for b in data.get('bookings') or ()
            ),
            fishing=tuple(
                FishingTripEntry.from_dict(f) for f in data.get('fishing') or ()
            ),
            confirmed=tuple(
                code for code in (_to_str(c).strip() for c in confirmed) if code
            ),
        )


# =============================================================================
# SNAPSHOT
# =============================================================================

@dataclass(frozen=True, eq=False)
class LedgerSnapshot:
    """
    Read-only mapping of ISO date -> DaySnapshot.

    Snapshots compare and hash by identity: two refreshes are two
    different snapshots even when their content is equal.
    """

    days: Mapping = field(default_factory=lambda: MappingProxyType({}))
    refreshed_at: Optional[datetime] = None
    version: int = 0

    def __post_init__(self):
        if not isinstance(self.days, MappingProxyType):
            object.__setattr__(self, 'days', MappingProxyType(dict(self.days)))

    @classmethod
    def empty(cls) -> 'LedgerSnapshot':
        return cls()

    @classmethod
    def from_days(cls, days, refreshed_at: datetime = None,
                  version: int = 0) -> 'LedgerSnapshot':
        """Build a snapshot from an iterable of DaySnapshot."""
        return cls(
            days={day.date: day for day in days},
            refreshed_at=refreshed_at,
            version=version,
        )

    @classmethod
    def from_dict(cls, data: Mapping, version: int = 0) -> 'LedgerSnapshot':
        """
        Build a snapshot from already-parsed ledger data.

        Expected shape:
            {
                'refreshed_at': ISO datetime or None,
                'days': {
                    'YYYY-MM-DD': {
                        'bookings': [{'beach', 'adults', 'kids', 'food',
                                      'activities', 'overnight_nights',
                                      'return_boat_persons'}],
                        'fishing': [{'type', 'anglers', 'food'}],
                        'confirmed': ['CODE', ...]
                    }
                }
            }

        Keys that are not real ISO calendar dates ('2025-02-30') are skipped.

        Args:
            data: Parsed ledger mapping
            version: Version number to stamp on the snapshot

        Returns:
            LedgerSnapshot
        """
        days = {}
        for date_str, day_data in (data.get('days') or {}).items():
            if not ISO_DATE_PATTERN.match(str(date_str)):
                logger.warning('Skipping ledger section with invalid date: %r', date_str)
                continue
            days[date_str] = DaySnapshot.from_dict(date_str, day_data or {})

        refreshed_at = data.get('refreshed_at')
        if isinstance(refreshed_at, str):
            try:
                refreshed_at = datetime.fromisoformat(refreshed_at)
            except ValueError:
                refreshed_at = None

        return cls(days=days, refreshed_at=refreshed_at, version=version)

    def with_version(self, version: int, refreshed_at: datetime = None) -> 'LedgerSnapshot':
        """Copy of this snapshot stamped with a new version."""
        return LedgerSnapshot(
            days=self.days,
            refreshed_at=refreshed_at or self.refreshed_at,
            version=version,
        )

    # -------------------------------------------------------------------------
    # Read interface
    # -------------------------------------------------------------------------

    def get_day(self, date_str: str) -> Optional[DaySnapshot]:
        return self.days.get(date_str)

    def items(self):
        return self.days.items()

    def __len__(self):
        return len(self.days)

    def is_confirmed(self, code: str) -> bool:
        """Check whether a confirmation code appears on any day."""
        if not code:
            return False
        wanted = code.strip().upper()
        return any(
            c.strip().upper() == wanted
            for day in self.days.values()
            for c in day.confirmed
        )

    def all_confirmed(self) -> list:
        codes = []
        for day in self.days.values():
            codes.extend(day.confirmed)
        return codes

    def fishing_dates(self) -> dict:
        """Dates with fishing trips: {date: [{'type': str, 'anglers': int}]}."""
        return {
            date_str: [
                {'type': trip.trip_type, 'anglers': trip.anglers}
                for trip in day.fishing
            ]
            for date_str, day in self.days.items()
            if day.has_fishing
        }
