"""ServiceContext — everything a request handler needs, built once at startup.

Created by the application lifespan and shared read-only across all
request-handling tasks through app.state.
"""

import logging
from dataclasses import dataclass

import redis.asyncio as aioredis

from config.settings import Settings
from src.sf_common.enums import SequenceBackend
from src.sf_common.errors import ClockError, ConfigError
from src.sf_common.redis_client import close_redis, create_redis
from src.sf_snowflake.application.service import SnowflakeGenerator
from src.sf_snowflake.domain.clock import SystemClock
from src.sf_snowflake.infrastructure.memory_sequence_store import InMemorySequenceStore
from src.sf_snowflake.infrastructure.redis_sequence_store import RedisSequenceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceContext:
    settings: Settings
    generator: SnowflakeGenerator
    redis: aioredis.Redis | None = None

    async def close(self) -> None:
        if self.redis is not None:
            await close_redis(self.redis)


async def build_context(settings: Settings) -> ServiceContext:
    """Wire clock, store and generator from settings.

    Raises ConfigError for an invalid machine id or an unusable epoch, and
    StoreUnavailableError when the Redis backend does not answer PING.
    """
    clock = SystemClock(mode=settings.TIMEZONE, epoch_ms=settings.EPOCH_MS)
    try:
        clock.now()
    except ClockError as exc:
        raise ConfigError(f"EPOCH_MS={settings.EPOCH_MS} unusable: {exc.message}") from exc

    client: aioredis.Redis | None = None
    if settings.SEQUENCE_BACKEND is SequenceBackend.REDIS:
        client = create_redis(settings.REDIS_URL, settings.STORE_TIMEOUT_SECONDS)
        store = RedisSequenceStore(
            client,
            ttl_ms=settings.SEQUENCE_TTL_MS,
            timeout_seconds=settings.STORE_TIMEOUT_SECONDS,
        )
        try:
            await store.ping()
        except Exception:
            await close_redis(client)
            raise
    else:
        logger.warning("Using in-memory sequence store; ids are unique within this process only")
        store = InMemorySequenceStore(ttl_ms=settings.SEQUENCE_TTL_MS)

    generator = SnowflakeGenerator(
        machine_id=settings.MACHINE_ID,
        store=store,
        clock=clock,
        max_attempts=settings.MAX_SEQUENCE_ATTEMPTS,
    )
    logger.info(
        "Snowflake generator ready: machine_id=%d timezone=%s backend=%s",
        settings.MACHINE_ID, settings.TIMEZONE.value, settings.SEQUENCE_BACKEND.value,
    )
    return ServiceContext(settings=settings, generator=generator, redis=client)
