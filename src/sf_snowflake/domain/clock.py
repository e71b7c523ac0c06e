"""Millisecond clock measured from a configured epoch.

UTC mode reads Unix time. LOCAL mode reads the local wall clock, i.e. Unix
time shifted by the local UTC offset in effect at that instant.
"""

import logging
import time
from collections.abc import Callable

from src.sf_common.enums import EpochMode
from src.sf_common.errors import ClockError
from src.sf_snowflake.domain.layout import MAX_TIMESTAMP

logger = logging.getLogger(__name__)


def _unix_ms() -> int:
    return time.time_ns() // 1_000_000


def _local_offset_ms(unix_ms: int) -> int:
    return time.localtime(unix_ms // 1000).tm_gmtoff * 1000


class SystemClock:
    """Wall clock that refuses to go backwards.

    The highest value returned so far is kept; a reading below it raises
    ClockError instead of handing out a timestamp that was already used.
    """

    def __init__(
        self,
        mode: EpochMode = EpochMode.UTC,
        epoch_ms: int = 0,
        source: Callable[[], int] = _unix_ms,
        local_offset: Callable[[int], int] = _local_offset_ms,
    ) -> None:
        self._mode = mode
        self._epoch_ms = epoch_ms
        self._source = source
        self._local_offset = local_offset
        self._last_ms = -1

    @property
    def mode(self) -> EpochMode:
        return self._mode

    @property
    def epoch_ms(self) -> int:
        return self._epoch_ms

    def now(self) -> int:
        unix_ms = self._source()
        wall_ms = unix_ms
        if self._mode is EpochMode.LOCAL:
            wall_ms += self._local_offset(unix_ms)
        ts = wall_ms - self._epoch_ms

        if ts < 0:
            raise ClockError(f"current time is before the configured epoch ({self._epoch_ms})")
        if ts > MAX_TIMESTAMP:
            raise ClockError(f"timestamp {ts} does not fit in the 42-bit field")
        if ts < self._last_ms:
            logger.error("Clock moved backwards: %d < %d", ts, self._last_ms)
            raise ClockError(f"clock moved backwards by {self._last_ms - ts}ms")

        self._last_ms = ts
        return ts
