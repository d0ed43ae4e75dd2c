"""
Tests for calendar labels, colors and bulk blocked-date maps.
"""

import pytest
from models.capacity import (
    build_capacity_report,
    capacity_color,
    get_blocked_fishing_dates_map,
    get_calendar_days,
    get_capacity_color,
    get_capacity_summary,
    get_long_range_calendar_blocked_dates,
    get_overnight_conflicts,
    is_fishing_day_blocked,
    is_resource_locked_by_fishing,
)
from utils.datetime_helpers import date_range


@pytest.fixture
def busy_ledger(make_ledger):
    """A month with trips of every kind, an inshore add-on and base tourists."""
    return make_ledger({
        '2025-06-03': {'fishing': [{'type': 'biggame', 'anglers': 4}]},
        '2025-06-10': {'fishing': [{'type': 'offshore', 'anglers': 2}]},
        '2025-06-11': {'bookings': [{'beach': 'Loco', 'adults': 3}]},
        '2025-06-15': {'fishing': [{'type': 'inshore', 'anglers': 1}]},
        '2025-06-16': {'fishing': [{'type': 'inshore', 'anglers': 2}]},
        '2025-06-20': {'bookings': [
            {'beach': 'Playa Blanca', 'adults': 2, 'activities': 'Inshore fishing'},
        ]},
        '2025-06-25': {'bookings': [
            {'beach': 'Resort A', 'adults': 2, 'overnight_nights': 2},
        ]},
    })


class TestColors:
    """Tests for severity colors."""

    def test_bands(self):
        assert capacity_color(0) == '#10B981'
        assert capacity_color(30) == '#22C55E'
        assert capacity_color(31) == '#F59E0B'
        assert capacity_color(60) == '#F59E0B'
        assert capacity_color(61) == '#F97316'
        assert capacity_color(80) == '#F97316'
        assert capacity_color(81) == '#EF4444'
        assert capacity_color(100) == '#EF4444'

    def test_day_color(self, make_ledger):
        ledger = make_ledger({
            '2025-08-01': {'bookings': [{'beach': 'Playa Blanca', 'adults': 9}]},
        })
        assert get_capacity_color(ledger, '2025-08-01') == '#EF4444'
        assert get_capacity_color(ledger, '2025-08-02') == '#10B981'


class TestLabels:
    """Tests for day labels."""

    def test_labels(self, busy_ledger):
        assert get_capacity_summary(busy_ledger, '2025-06-10') == 'Loco Reserved (Fishing)'
        assert get_capacity_summary(busy_ledger, '2025-06-25') == 'Overnight booked'
        assert get_capacity_summary(busy_ledger, '2025-06-28') == 'Available'

    def test_booked_label(self, make_ledger):
        ledger = make_ledger({
            '2025-08-01': {'bookings': [{'beach': 'Playa Blanca', 'adults': 3}]},
        })
        assert get_capacity_summary(ledger, '2025-08-01') == '3 booked'

    def test_calendar_days(self, busy_ledger):
        days = get_calendar_days(busy_ledger, '2025-06-24', 3)
        assert [d['date'] for d in days] == ['2025-06-24', '2025-06-25', '2025-06-26']
        assert days[0]['label'] == 'Available'
        assert days[1]['overnight_booked'] is True
        assert days[1]['color'] == '#22C55E'


class TestBlockedFishingMap:
    """The bulk map agrees with the per-date rule."""

    def test_map_matches_per_date_rule(self, busy_ledger):
        blocked = get_blocked_fishing_dates_map(busy_ledger)
        for date in date_range('2025-05-30', 35):
            expected = is_fishing_day_blocked(busy_ledger, date)
            assert blocked.get(date, '') == expected['reason'], date

    def test_map_contents(self, busy_ledger):
        blocked = get_blocked_fishing_dates_map(busy_ledger)
        assert blocked['2025-06-09'] == 'Fishing booked tomorrow (offshore) - would conflict'
        assert blocked['2025-06-10'] == 'Fishing already booked (offshore)'
        assert blocked['2025-06-11'] == "Loco reserved (yesterday's offshore fishing)"
        assert '2025-06-12' not in blocked
        assert blocked['2025-06-20'] == 'Fishing already booked (inshore (add-on))'
        assert '2025-06-25' not in blocked

    def test_window(self, busy_ledger):
        blocked = get_blocked_fishing_dates_map(busy_ledger, '2025-06-10', 2)
        assert sorted(blocked) == ['2025-06-10', '2025-06-11']

    def test_empty_ledger(self, empty_ledger):
        assert get_blocked_fishing_dates_map(empty_ledger) == {}


class TestLongRangeCalendar:
    """Tests for the offshore / big-game calendar."""

    def test_matches_base_lock(self, busy_ledger):
        blocked = get_long_range_calendar_blocked_dates(busy_ledger)
        for date in date_range('2025-05-30', 35):
            assert (date in blocked) == is_resource_locked_by_fishing(busy_ledger, date), date

    def test_day_before_stays_open(self, busy_ledger):
        blocked = get_long_range_calendar_blocked_dates(busy_ledger)
        assert '2025-06-09' not in blocked
        assert blocked['2025-06-10'] == 'Fishing booked: offshore (2 anglers)'
        assert blocked['2025-06-11'] == 'Loco reserved from 2025-06-10 fishing (offshore)'


class TestOvernightConflicts:
    """Tests for get_overnight_conflicts."""

    def test_no_conflicts(self, busy_ledger):
        assert get_overnight_conflicts(busy_ledger) == {}

    def test_conflicting_overnights(self, make_ledger):
        ledger = make_ledger({
            '2025-07-01': {
                'bookings': [{'beach': 'Resort A', 'adults': 2, 'overnight_nights': 3}],
            },
            '2025-07-02': {
                'fishing': [{'type': 'offshore', 'anglers': 2}],
            },
        })
        conflicts = get_overnight_conflicts(ledger)
        assert sorted(conflicts) == ['2025-07-02', '2025-07-03']
        assert len(conflicts['2025-07-02']) == 2


class TestCapacityReport:
    """Tests for the plain-text report."""

    def test_report(self, busy_ledger):
        report = build_capacity_report(busy_ledger, '2025-06-09', 4)
        assert report.startswith('=== CAPACITY REPORT ===')
        assert 'FISHING[offshore(2)]' in report
        assert '2025-06-12: no ledger data' in report
        assert 'MISMATCH' not in report
        assert report.endswith('=== END REPORT ===')
