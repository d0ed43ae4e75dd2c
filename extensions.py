"""
Flask extensions initialization.
Extensions are initialized here and then initialized with the app in app.py.
"""

from ledger.store import LedgerStore

# Holds the current ledger snapshot; refreshed by swapping the reference
ledger_store = LedgerStore()
