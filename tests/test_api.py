"""
API endpoint tests.
Capacity answers come back in the standard envelope with the result under 'data'.
"""

import pytest


@pytest.fixture
def fishing_ledger(install_ledger):
    """Offshore trip on 2025-06-10 and base tourists on 2025-06-15."""
    return install_ledger({
        '2025-06-10': {'fishing': [{'type': 'offshore', 'anglers': 2}]},
        '2025-06-15': {'bookings': [{'beach': 'Coco Loco', 'adults': 3}]},
        '2025-08-01': {'bookings': [{'beach': 'Playa Blanca', 'adults': 10}]},
    })


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client, fishing_ledger):
        """Test health reports the served ledger."""
        response = client.get('/api/health')
        assert response.status_code == 200

        data = response.get_json()
        assert data['success'] is True
        assert data['data']['status'] == 'ok'
        assert data['data']['ledger_days'] == 3
        assert data['data']['ledger_version'] == fishing_ledger.version


class TestCapacityEndpoints:
    """Tests for day and resource capacity."""

    def test_day_capacity(self, client, fishing_ledger):
        """Test aggregated capacity for a fishing day."""
        response = client.get('/api/capacity/2025-06-10')
        assert response.status_code == 200

        data = response.get_json()['data']
        assert data['capacity']['fishing_groups_booked'] == 1
        assert data['capacity']['base_locked_by_fishing'] is True
        assert data['summary'] == 'Loco Reserved (Fishing)'

    def test_resource_capacity(self, client, fishing_ledger):
        """Test capacity of a single resource."""
        response = client.get('/api/capacity/2025-08-01/Playa%20Blanca')
        data = response.get_json()['data']
        assert data['capacity']['is_full'] is True
        assert data['color'] == '#EF4444'

    def test_invalid_date(self, client):
        """Test malformed dates are rejected with 400."""
        response = client.get('/api/capacity/2025-02-30')
        assert response.status_code == 400

        data = response.get_json()
        assert data['success'] is False
        assert 'Invalid date' in data['error']


class TestAvailabilityEndpoints:
    """Tests for booking checks."""

    def test_beach_rejection_is_not_an_error(self, client, fishing_ledger):
        """Test a full beach answers 200 with can_book false."""
        response = client.get(
            '/api/availability/beach?date=2025-08-01&resource=Playa%20Blanca&party_size=2'
        )
        assert response.status_code == 200

        data = response.get_json()['data']
        assert data['can_book'] is False
        assert data['rule'] == 'capacity'

    def test_beach_overnight(self, client, fishing_ledger):
        """Test an overnight running into the offshore trip."""
        response = client.get(
            '/api/availability/beach?date=2025-06-08&resource=Resort%20A'
            '&party_size=2&overnight=1&nights=3'
        )
        data = response.get_json()['data']
        assert data['can_book'] is False
        assert data['rule'] == 'overnight'

    def test_beach_missing_fields(self, client):
        """Test missing resource and party size."""
        response = client.get('/api/availability/beach?date=2025-08-01&party_size=2')
        assert response.status_code == 400

        response = client.get('/api/availability/beach?date=2025-08-01&resource=X')
        assert response.status_code == 400

        response = client.get(
            '/api/availability/beach?date=2025-08-01&resource=X&party_size=-1'
        )
        assert response.status_code == 400

    def test_fishing(self, client, fishing_ledger):
        """Test fishing checks around the offshore trip."""
        response = client.get('/api/availability/fishing?date=2025-06-11&anglers=2')
        data = response.get_json()['data']
        assert data['can_book'] is False
        assert data['rule'] == 'lock'

        response = client.get(
            '/api/availability/fishing?date=2025-06-13&anglers=2&type=Inshore'
        )
        data = response.get_json()['data']
        assert data['can_book'] is True
        assert data['message'].startswith('Inshore trip available!')

    def test_boat(self, client, fishing_ledger):
        """Test the boat check with and without a beach."""
        response = client.get('/api/availability/boat?date=2025-08-01&persons=2')
        assert response.get_json()['data']['remaining_after'] == 10

        response = client.get(
            '/api/availability/boat?date=2025-08-01&persons=2&resource=Playa%20Blanca'
        )
        assert response.get_json()['data']['can_book'] is False


class TestFishingEndpoints:
    """Tests for fishing lock, base and calendar endpoints."""

    def test_lock(self, client, fishing_ledger):
        """Test the lock state on the day after the trip."""
        data = client.get('/api/fishing/lock/2025-06-11').get_json()['data']
        assert data['locked'] is True
        assert data['locked_by_yesterday'] is True

    def test_base(self, client, fishing_ledger):
        """Test fishing base availability with tourists."""
        data = client.get('/api/fishing/base/2025-06-15').get_json()['data']
        assert data['available'] is True
        assert data['tourists_at_base'] == 3

    def test_blocked_dates(self, client, fishing_ledger):
        """Test the blocked-date calendars."""
        response = client.get('/api/fishing/blocked-dates?start=2025-06-01&days=30')
        data = response.get_json()['data']
        assert sorted(data['blocked']) == ['2025-06-09', '2025-06-10', '2025-06-11']
        assert data['count'] == 3

        response = client.get(
            '/api/fishing/blocked-dates?start=2025-06-01&days=30&calendar=long_range'
        )
        data = response.get_json()['data']
        assert sorted(data['blocked']) == ['2025-06-10', '2025-06-11']

    def test_blocked_dates_bad_input(self, client):
        """Test invalid calendar and window length."""
        response = client.get('/api/fishing/blocked-dates?start=2025-06-01&calendar=weekly')
        assert response.status_code == 400

        response = client.get('/api/fishing/blocked-dates?start=2025-06-01&days=0')
        assert response.status_code == 400

        response = client.get('/api/fishing/blocked-dates?start=2025-06-01&days=1000')
        assert response.status_code == 400


class TestCalendarEndpoints:
    """Tests for calendar pages and overnight conflicts."""

    def test_calendar(self, client, fishing_ledger):
        """Test a calendar page."""
        response = client.get('/api/calendar?start=2025-06-09&days=3')
        days = response.get_json()['data']['days']
        assert [d['label'] for d in days] == [
            'Available',
            'Loco Reserved (Fishing)',
            'Loco Reserved (Fishing)',
        ]

    def test_overnight_conflicts(self, client, fishing_ledger):
        """Test conflict listing on a clean ledger."""
        data = client.get('/api/overnights/conflicts').get_json()['data']
        assert data == {'conflicts': {}, 'count': 0}


class TestErrorHandlers:
    """Tests for JSON error responses."""

    def test_not_found(self, client):
        """Test unknown routes answer JSON 404."""
        response = client.get('/api/nowhere')
        assert response.status_code == 404
        assert response.get_json()['success'] is False

    def test_method_not_allowed(self, client):
        """Test wrong methods answer JSON 405."""
        response = client.post('/api/health')
        assert response.status_code == 405
