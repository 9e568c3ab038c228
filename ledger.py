"""
Uniqueness Ledger
=================
Hash-indexed record of every accepted logo.

The ledger is passed into the engine rather than living at module level, so
tests and concurrent callers can keep isolated instances. Inserts are
atomic insert-if-absent under a lock. An optional backing store (anything
implementing `LedgerStore`) is consulted on the same write path, which is
how persistent collaborators plug in.
"""

import logging
import threading
from collections import Counter
from typing import Protocol

logger = logging.getLogger(__name__)


class LedgerStore(Protocol):
    def hash_exists(self, hash):
        ...

    def store_hash(self, entry):
        ...


class UniquenessLedger:
    def __init__(self, store=None):
        self._entries = {}
        self._store = store
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def __contains__(self, hash):
        return self.contains(hash)

    def _exists(self, hash):
        if hash in self._entries:
            return True
        return self._store is not None and bool(self._store.hash_exists(hash))

    def contains(self, hash):
        """True if `hash` has already been accepted"""
        with self._lock:
            return self._exists(hash)

    def insert(self, entry):
        """Record `entry`; returns False (and stores nothing) if its hash exists"""
        with self._lock:
            if self._exists(entry.hash):
                logger.debug('Ledger already holds %s', entry.hash[:12])
                return False
            if self._store is not None:
                self._store.store_hash(entry)
            self._entries[entry.hash] = entry
            return True

    def get(self, hash):
        with self._lock:
            return self._entries.get(hash)

    def entries_for_brand(self, brand_name):
        """Entries for one brand, oldest first"""
        with self._lock:
            return [e for e in self._entries.values() if e.brand_name == brand_name]

    def stats(self):
        with self._lock:
            entries = list(self._entries.values())
        if not entries:
            return {'total': 0, 'brands': 0, 'by_algorithm': {}, 'average_quality': 0.0}
        return {
            'total': len(entries),
            'brands': len({e.brand_name for e in entries}),
            'by_algorithm': dict(Counter(e.algorithm for e in entries)),
            'average_quality': round(sum(e.quality_score for e in entries) / len(entries), 2),
        }

    def clear(self):
        """Forget in-memory entries; a backing store is left untouched"""
        with self._lock:
            self._entries.clear()
