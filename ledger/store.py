"""
Ledger holder.

Keeps the current LedgerSnapshot and swaps it on refresh. The engine never
sees a half-updated ledger: replace() rebinds a single reference, and
get_ledger() pins whatever snapshot was current when a request first asked
for it.
"""

import json
import logging
import os

from flask import g, current_app

from ledger.snapshot import LedgerSnapshot
from utils.datetime_helpers import get_now

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    Holds the current ledger snapshot for the application.

    Registered on the app the same way the other extensions are
    (store.init_app(app)).
    """

    def __init__(self, app=None):
        self._snapshot = LedgerSnapshot.empty()
        self._version = 0
        self._raw = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Register on the app and load LEDGER_PATH if it exists."""
        app.extensions['ledger_store'] = self
        ledger_path = app.config.get('LEDGER_PATH')
        if ledger_path and os.path.exists(ledger_path):
            with app.app_context():
                self.load_file(ledger_path)

    @property
    def snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    @property
    def version(self) -> int:
        return self._version

    def replace(self, snapshot: LedgerSnapshot) -> LedgerSnapshot:
        """
        Swap in a new snapshot.

        Args:
            snapshot: Freshly built snapshot

        Returns:
            The stored snapshot, stamped with the next version number
        """
        self._version += 1
        stamped = snapshot.with_version(self._version)
        self._snapshot = stamped
        logger.info(
            'Ledger replaced: version %s, %s day(s)', self._version, len(stamped)
        )
        return stamped

    def load_data(self, data: dict) -> LedgerSnapshot:
        """Build a snapshot from parsed ledger data and swap it in."""
        return self.replace(LedgerSnapshot.from_dict(data))

    def load_file(self, path: str) -> LedgerSnapshot:
        """
        Load a JSON ledger file and swap it in.

        A file that cannot be read or parsed leaves the current snapshot
        untouched. Identical content is not re-parsed.

        Args:
            path: Path to the JSON ledger

        Returns:
            The current snapshot after the load attempt
        """
        try:
            with open(path, encoding='utf-8') as fh:
                raw = fh.read()
            if raw == self._raw:
                logger.debug('Ledger content unchanged, skipping re-parse')
                return self._snapshot
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.warning('Could not load ledger from %s: %s', path, e)
            return self._snapshot

        if not isinstance(data, dict):
            logger.warning('Rejected ledger from %s: top level is not an object', path)
            return self._snapshot

        if not data.get('refreshed_at'):
            data = dict(data, refreshed_at=get_now().isoformat())

        snapshot = self.load_data(data)
        self._raw = raw
        return snapshot


def get_ledger() -> LedgerSnapshot:
    """
    Get the ledger snapshot for the current request.

    The first call in a request pins the store's current snapshot on g,
    so every query in that request reads the same ledger.

    Returns:
        LedgerSnapshot
    """
    if 'ledger' not in g:
        g.ledger = current_app.extensions['ledger_store'].snapshot
    return g.ledger


def release_ledger(e=None):
    """
    Drop the pinned snapshot.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    g.pop('ledger', None)
