"""SnowflakeGenerator — clock + sequence store + bit layout.

Holds only immutable configuration; uniqueness between concurrent callers
comes from the store's atomic increment, so no in-process lock is taken.
"""

import asyncio
import logging
import time

from src.sf_common.errors import SequenceExhaustedError
from src.sf_snowflake.domain.clock import SystemClock
from src.sf_snowflake.domain.layout import MAX_SEQUENCE, decode, encode, validate_machine_id
from src.sf_snowflake.domain.models import SnowflakeParts
from src.sf_snowflake.domain.sequence_store import SequenceStoreProtocol

logger = logging.getLogger(__name__)

# libuv timers have 1ms resolution; shorter sleeps only yield
_WAIT_STEP_SECONDS = 0.001
_MAX_WAIT_SECONDS = 0.01


class SnowflakeGenerator:
    def __init__(
        self,
        machine_id: int,
        store: SequenceStoreProtocol,
        clock: SystemClock | None = None,
        max_attempts: int = 16,
    ) -> None:
        self._machine_id = validate_machine_id(machine_id)
        self._store = store
        self._clock = clock or SystemClock()
        self._max_attempts = max_attempts

    @property
    def machine_id(self) -> int:
        return self._machine_id

    @property
    def clock(self) -> SystemClock:
        return self._clock

    async def generate_new(self) -> int:
        """Return a new snowflake id.

        Raises ClockError / StoreUnavailableError unchanged, and
        SequenceExhaustedError when ``max_attempts`` attempts in a row ran
        out of sequence values. Between attempts it sleeps in 1ms steps
        until the clock passes the exhausted millisecond, at most 10ms.
        """
        for _ in range(self._max_attempts):
            ts = self._clock.now()
            sequence = await self._store.next_sequence(self._machine_id, ts)
            if sequence <= MAX_SEQUENCE:
                return encode(ts, self._machine_id, sequence)

            # 4096 ids already issued in this millisecond; wait for the next one
            logger.debug("Sequence exhausted at ts=%d machine=%d", ts, self._machine_id)
            await self._wait_next_ms(ts)

        logger.warning(
            "Gave up after %d exhausted attempts (machine=%d)",
            self._max_attempts, self._machine_id,
        )
        raise SequenceExhaustedError(self._machine_id, self._max_attempts)

    def decode(self, snowflake_id: int) -> SnowflakeParts:
        return decode(snowflake_id)

    async def _wait_next_ms(self, last_ts: int) -> None:
        deadline = time.monotonic() + _MAX_WAIT_SECONDS
        while time.monotonic() < deadline:
            await asyncio.sleep(_WAIT_STEP_SECONDS)
            if self._clock.now() > last_ts:
                return
