"""
Id generation for plan entities.

Every entity the engine creates gets its id from an injected generator so
that two runs over the same configuration produce identical plans.
"""

import threading
from collections import defaultdict
from typing import Dict, Protocol


class IdGenerator(Protocol):
    """Anything that hands out unique string ids for a prefix."""

    def next(self, prefix: str) -> str:
        ...


class SequentialIdGenerator:
    """
    Deterministic ``"{prefix}-{n}"`` ids, numbered per prefix from 1.

    A single instance may be shared between threads; the counters are
    guarded by a lock.
    """

    def __init__(self):
        self._counters: Dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def next(self, prefix: str) -> str:
        prefix = prefix or "id"
        with self._lock:
            self._counters[prefix] += 1
            n = self._counters[prefix]
        return f"{prefix}-{n}"

    def reset(self):
        """Restart numbering for every prefix."""
        with self._lock:
            self._counters.clear()
