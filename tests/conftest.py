"""
Pytest configuration and fixtures.
Every test starts from an empty ledger; tests build the snapshot they need.
"""

import os
import pytest

os.environ.setdefault('FLASK_ENV', 'test')

from ledger import LedgerSnapshot


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['FLASK_ENV'] = 'test'
    os.environ.pop('TEST_LEDGER_PATH', None)
    yield


def build_ledger(days: dict) -> LedgerSnapshot:
    """
    Build a snapshot from a compact description.

    Example:
        build_ledger({
            '2025-06-10': {
                'bookings': [{'beach': 'Playa Blanca', 'adults': 2}],
                'fishing': [{'type': 'offshore', 'anglers': 2}],
            }
        })
    """
    return LedgerSnapshot.from_dict({'days': days})


@pytest.fixture
def make_ledger():
    """Factory fixture returning build_ledger."""
    return build_ledger


@pytest.fixture
def empty_ledger():
    """Snapshot with no days."""
    return LedgerSnapshot.empty()


@pytest.fixture
def app():
    """Create test application with an empty ledger."""
    from app import create_app
    from extensions import ledger_store

    app = create_app('test')
    ledger_store.replace(LedgerSnapshot.empty())

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def install_ledger(app):
    """Swap a compact ledger description into the app's ledger store."""
    from extensions import ledger_store
    from ledger import release_ledger

    def _install(days: dict) -> LedgerSnapshot:
        snapshot = ledger_store.replace(build_ledger(days))
        # Requests reuse the fixture's app context, so drop any pinned snapshot
        release_ledger()
        return snapshot

    return _install
