"""Shared test fixtures."""

import os

# Settings are loaded at import time; MACHINE_ID has no default.
os.environ.setdefault("MACHINE_ID", "7")
os.environ.setdefault("SEQUENCE_BACKEND", "memory")

import pytest
from httpx import ASGITransport, AsyncClient

from config.settings import load_settings
from src.main import app
from src.sf_snowflake.application.context import ServiceContext
from src.sf_snowflake.application.service import SnowflakeGenerator
from src.sf_snowflake.domain.clock import SystemClock
from src.sf_snowflake.infrastructure.memory_sequence_store import InMemorySequenceStore


class FakeClock(SystemClock):
    """SystemClock driven by a settable Unix-ms value instead of the wall clock."""

    def __init__(self, start_ms: int = 1_700_000_000_000, **kwargs) -> None:
        self.current_ms = start_ms
        super().__init__(source=lambda: self.current_ms, **kwargs)

    def advance(self, ms: int = 1) -> None:
        self.current_ms += ms


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store() -> InMemorySequenceStore:
    return InMemorySequenceStore(ttl_ms=1000)


@pytest.fixture
def generator(fake_clock: FakeClock, memory_store: InMemorySequenceStore) -> SnowflakeGenerator:
    return SnowflakeGenerator(machine_id=7, store=memory_store, clock=fake_clock)


@pytest.fixture
async def client(generator: SnowflakeGenerator) -> AsyncClient:
    """Async HTTP client with a ServiceContext backed by the in-memory store."""
    app.state.context = ServiceContext(
        settings=load_settings(MACHINE_ID=7, SEQUENCE_BACKEND="memory"),
        generator=generator,
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    del app.state.context
