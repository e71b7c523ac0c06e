"""Redis-backed sequence store.

Per key "<timestamp>_<machine_id>" one MULTI/EXEC transaction runs:
    INCR    key        -> 1 on first access (key created), 2, 3, ... after
    PEXPIRE key ttl    -> bounds store growth; keys are never deleted
INCR is the single serialization point across all generator processes, so
concurrent callers for the same key always see distinct values.
"""

import asyncio
import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.sf_common.errors import StoreUnavailableError
from src.sf_snowflake.domain.sequence_store import sequence_key

logger = logging.getLogger(__name__)

_STORE_ERRORS = (RedisError, OSError, asyncio.TimeoutError)


class RedisSequenceStore:
    def __init__(
        self,
        client: aioredis.Redis,
        ttl_ms: int = 1000,
        timeout_seconds: float = 0.5,
    ) -> None:
        self._client = client
        self._ttl_ms = ttl_ms
        self._timeout = timeout_seconds

    async def next_sequence(self, machine_id: int, timestamp: int) -> int:
        key = sequence_key(machine_id, timestamp)
        pipe = self._client.pipeline(transaction=True)
        pipe.incr(key).pexpire(key, self._ttl_ms)
        try:
            count, _ = await asyncio.wait_for(pipe.execute(), self._timeout)
        except _STORE_ERRORS as exc:
            logger.warning("Sequence fetch failed: key=%s error=%r", key, exc)
            raise StoreUnavailableError("fetch sequence", exc) from exc
        return int(count) - 1

    async def ping(self) -> None:
        """Verify the store is reachable; used at startup."""
        try:
            await asyncio.wait_for(self._client.ping(), self._timeout)
        except _STORE_ERRORS as exc:
            raise StoreUnavailableError("create redis connection", exc) from exc
