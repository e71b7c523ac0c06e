"""Redis client factory for the sequence store.

The client is created once per process by the application lifespan and
owned by the ServiceContext; there is no module-level pool.
"""

import logging

import redis.asyncio as aioredis

logger = logging.getLogger(__name__)


def create_redis(url: str, timeout_seconds: float) -> aioredis.Redis:
    """Create a Redis client whose connect and read calls are bounded by ``timeout_seconds``."""
    return aioredis.from_url(
        url,
        decode_responses=True,
        socket_timeout=timeout_seconds,
        socket_connect_timeout=timeout_seconds,
    )


async def close_redis(client: aioredis.Redis) -> None:
    """Close the Redis connection pool."""
    await client.aclose()
    logger.info("Redis connection pool closed")
