"""
Calendar helpers.
Day labels, severity colors and bulk blocked-date maps for rendering
booking calendars without running the per-date engine once per cell.
"""

from utils.datetime_helpers import add_days, date_range, parse_date
from utils.messages import get_message
from .capacity_policy import LOCK_WINDOW, NEW_FISHING_CONFLICT_WINDOW
from .capacity_lock import (
    fishing_block_reason,
    index_fishing_activity,
    long_range_block_reason,
)
from .capacity_occupancy import (
    get_day_capacity,
    get_beach_day_capacity,
    get_overnight_spillover,
)
from .capacity_fishing import is_fishing_day_blocked

# (upper bound of capacity percent, color); 0% has its own band
CAPACITY_COLOR_EMPTY = '#10B981'
CAPACITY_COLOR_BANDS = (
    (30, '#22C55E'),
    (60, '#F59E0B'),
    (80, '#F97316'),
)
CAPACITY_COLOR_FULL = '#EF4444'


# =============================================================================
# LABELS AND COLORS
# =============================================================================

def capacity_color(percent: int) -> str:
    """Severity color for an occupancy percent."""
    if percent <= 0:
        return CAPACITY_COLOR_EMPTY
    for upper, color in CAPACITY_COLOR_BANDS:
        if percent <= upper:
            return color
    return CAPACITY_COLOR_FULL


def get_capacity_color(ledger, date: str) -> str:
    return capacity_color(get_day_capacity(ledger, date)['capacity_percent'])


def get_beach_capacity_color(ledger, date: str, resource: str) -> str:
    return capacity_color(get_beach_day_capacity(ledger, date, resource)['capacity_percent'])


def summarize_day(cap: dict) -> str:
    """Day label from an already computed get_day_capacity() result."""
    if cap['base_locked_by_fishing']:
        return get_message('label_base_locked')
    if cap['overnight_booked']:
        return get_message('label_overnight')
    if cap['booked_persons'] == 0:
        return get_message('label_available')
    return get_message('label_booked', persons=cap['booked_persons'])


def get_capacity_summary(ledger, date: str) -> str:
    """
    Day-level label for calendars.

    Returns:
        'Available', 'Loco Reserved (Fishing)', 'Overnight booked' or 'N booked'
    """
    return summarize_day(get_day_capacity(ledger, date))


def get_calendar_days(ledger, start_date: str, days: int) -> list:
    """
    Label and color for each day of a calendar page.

    Returns:
        list of dicts: [{'date', 'label', 'color', 'capacity_percent',
                         'booked_persons', 'base_locked_by_fishing',
                         'overnight_booked'}]
    """
    result = []
    for date in date_range(start_date, days):
        cap = get_day_capacity(ledger, date)
        result.append({
            'date': date,
            'label': summarize_day(cap),
            'color': capacity_color(cap['capacity_percent']),
            'capacity_percent': cap['capacity_percent'],
            'booked_persons': cap['booked_persons'],
            'base_locked_by_fishing': cap['base_locked_by_fishing'],
            'overnight_booked': cap['overnight_booked'],
        })
    return result


# =============================================================================
# BULK BLOCKED-DATE MAPS
# =============================================================================

def _in_window(date: str, start_date: str, horizon_days: int) -> bool:
    if start_date is None:
        return True
    offset = (parse_date(date) - parse_date(start_date)).days
    if offset < 0:
        return False
    return horizon_days is None or offset < horizon_days


def _blocked_map(ledger, offsets, reason_fn, start_date, horizon_days) -> dict:
    """
    Evaluate reason_fn only on dates within reach of some fishing activity.

    Dates further than max(|offset|) days from every activity cannot be
    blocked, so they are never visited.
    """
    index = index_fishing_activity(ledger)
    candidates = set()
    for activity_date in index:
        for offset in offsets:
            # activity at X blocks X - offset
            candidates.add(add_days(activity_date, -offset))

    blocked = {}
    for date in sorted(candidates):
        if not _in_window(date, start_date, horizon_days):
            continue
        reason = reason_fn(date, index.get)
        if reason:
            blocked[date] = reason
    return blocked


def get_blocked_fishing_dates_map(ledger, start_date: str = None,
                                  horizon_days: int = None) -> dict:
    """
    Every date closed to new fishing bookings, with its reason.

    Same rule and same reasons as is_fishing_day_blocked(), computed in one
    pass over the ledger's fishing activity.

    Args:
        ledger: LedgerSnapshot
        start_date: First calendar date (YYYY-MM-DD); None for no window
        horizon_days: Number of days from start_date to include; None for all

    Returns:
        dict: {date: reason}
    """
    return _blocked_map(
        ledger, NEW_FISHING_CONFLICT_WINDOW, fishing_block_reason, start_date, horizon_days
    )


def get_long_range_calendar_blocked_dates(ledger, start_date: str = None,
                                          horizon_days: int = None) -> dict:
    """
    Blocked dates for the offshore / big-game booking calendar.

    Only the fishing day and the day after it are closed. The day before a
    trip and days with regular overnight stays stay open on this calendar.

    Returns:
        dict: {date: reason}
    """
    return _blocked_map(
        ledger, LOCK_WINDOW, long_range_block_reason, start_date, horizon_days
    )


def get_overnight_conflicts(ledger) -> dict:
    """
    Days on which the ledger holds more than one active overnight.

    Returns:
        dict: {date: [overnight infos]}
    """
    candidates = set()
    for origin, day in ledger.items():
        for booking in day.bookings:
            for i in range(max(0, booking.overnight_nights)):
                candidates.add(add_days(origin, i))
        for trip in day.fishing:
            if trip.is_long_range:
                candidates.update((origin, add_days(origin, 1)))

    conflicts = {}
    for date in sorted(candidates):
        infos = get_overnight_spillover(ledger, date)
        if len(infos) > 1:
            conflicts[date] = infos
    return conflicts


# =============================================================================
# REPORT
# =============================================================================

def build_capacity_report(ledger, start_date: str, days: int) -> str:
    """
    Plain-text capacity report for a date range.

    Lists, per date, the ledger entries, the per-date fishing block,
    the bulk map's verdict, fishing groups and the fishing-base lock.
    A date where the per-date and bulk verdicts differ is flagged MISMATCH.
    """
    blocked_map = get_blocked_fishing_dates_map(ledger)

    lines = [
        '=== CAPACITY REPORT ===',
        f'Ledger version {ledger.version}: {len(ledger)} day(s)',
        f'Blocked fishing dates: {len(blocked_map)}',
    ]

    for date in date_range(start_date, days):
        day = ledger.get_day(date)
        parts = []

        if day:
            if day.fishing:
                trips = ','.join(f'{t.trip_type}({t.anglers})' for t in day.fishing)
                parts.append(f'FISHING[{trips}]')
            if day.bookings:
                parts.append(f'BOOKINGS[{len(day.bookings)}]')
        else:
            parts.append('no ledger data')

        blocked = is_fishing_day_blocked(ledger, date)
        map_reason = blocked_map.get(date)
        parts.append(
            f"day=BLOCKED({blocked['reason']})" if blocked['blocked'] else 'day=OK'
        )
        parts.append(f'map=BLOCKED({map_reason})' if map_reason else 'map=OK')
        if (map_reason or '') != blocked['reason']:
            parts.append('MISMATCH')

        cap = get_day_capacity(ledger, date)
        lock_state = 'LOCKED' if cap['base_locked_by_fishing'] else 'open'
        parts.append(f"groups:{cap['fishing_groups_booked']} base:{lock_state}")

        lines.append(f'{date}: ' + ' | '.join(parts))

    lines.append('=== END REPORT ===')
    return '\n'.join(lines)
