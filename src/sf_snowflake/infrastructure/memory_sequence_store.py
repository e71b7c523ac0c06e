"""In-process sequence store with the same semantics as the Redis one.

Only valid when a single process owns the machine id (local dev, tests).
"""

import threading
import time
from collections.abc import Callable

from src.sf_snowflake.domain.sequence_store import sequence_key


class InMemorySequenceStore:
    def __init__(
        self,
        ttl_ms: int = 1000,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_ms / 1000
        self._monotonic = monotonic
        self._entries: dict[str, tuple[int, float]] = {}
        self._lock = threading.Lock()
        self._next_sweep = 0.0

    async def next_sequence(self, machine_id: int, timestamp: int) -> int:
        key = sequence_key(machine_id, timestamp)
        with self._lock:
            now = self._monotonic()
            if now >= self._next_sweep:
                self._sweep(now)
            entry = self._entries.get(key)
            count = entry[0] + 1 if entry is not None and entry[1] > now else 0
            self._entries[key] = (count, now + self._ttl)
            return count

    def __len__(self) -> int:
        return len(self._entries)

    def _sweep(self, now: float) -> None:
        expired = [k for k, (_, deadline) in self._entries.items() if deadline <= now]
        for k in expired:
            del self._entries[k]
        self._next_sweep = now + self._ttl
