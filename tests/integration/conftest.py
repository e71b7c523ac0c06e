"""Integration-test fixtures.

Requires a reachable Redis at TEST_REDIS_URL (db 15 is flushed). Tests are skipped
when Redis does not answer PING.
"""

import os

import pytest
import pytest_asyncio
import redis.asyncio as aioredis
from redis.exceptions import RedisError

REDIS_URL = os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest_asyncio.fixture
async def redis_client() -> aioredis.Redis:
    client = aioredis.from_url(REDIS_URL, decode_responses=True, socket_connect_timeout=0.5)
    try:
        await client.ping()
    except (RedisError, OSError):
        await client.aclose()
        pytest.skip(f"Redis not reachable at {REDIS_URL}")
    await client.flushdb()
    yield client
    await client.flushdb()
    await client.aclose()
