# src/new_contributors/cache/contributor_cache.py
"""
Process-lifetime cache of contributor structures, one entry per repository.

Entries never expire and are only ever replaced whole. Writers for one
repository serialize on that repository's lock; readers of other
repositories are unaffected.
"""

import logging
import threading
from typing import Dict, Optional

from new_contributors.models.contributors import ContributorStructure

logger = logging.getLogger(__name__)


class ContributorCache:
    """Keyed store of ContributorStructure with a lock per key."""

    def __init__(self):
        self._entries: Dict[str, ContributorStructure] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()  # protects the two dicts above

    def lock_for(self, key: str) -> threading.Lock:
        """Return the lock serializing population of ``key``."""
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    def contains(self, key: str) -> bool:
        with self._guard:
            return key in self._entries

    def get(self, key: str) -> Optional[ContributorStructure]:
        with self._guard:
            return self._entries.get(key)

    def replace(self, key: str, structure: ContributorStructure) -> None:
        """Store ``structure`` for ``key``, discarding any previous entry."""
        with self._guard:
            replaced = key in self._entries
            self._entries[key] = structure
        logger.info(f"Cache {'replaced' if replaced else 'populated'} for {key}")

    def clear(self) -> None:
        with self._guard:
            self._entries.clear()

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)
