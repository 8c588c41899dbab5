"""Shared test fixtures."""

import os

import pytest
from routine import FakeClock, Routine, RoutineBusClient


@pytest.fixture
def nats_url() -> str:
    return os.environ.get("NATS_URL", "nats://localhost:4222")


@pytest.fixture
async def bus_client(nats_url: str) -> RoutineBusClient:
    """Provide a connected RoutineBusClient, cleaned up after use."""
    client = RoutineBusClient(nats_url)
    await client.connect()
    yield client  # type: ignore[misc]
    await client.close()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def routine(clock: FakeClock) -> Routine:
    """A Routine on a fake clock that starts at zero."""
    return Routine(clock=clock)
