"""Integration tests for the Sequencer service. Requires NATS running."""

import asyncio
import os

import pytest
from routine import (
    Envelope,
    Flow,
    Function,
    MessageType,
    Routine,
    RoutineBusClient,
    Topics,
    Wait,
    tick_message,
)

from services.sequencer.sequencer import SequencerService

pytestmark = pytest.mark.integration

# Use fast tick interval for tests
os.environ["SEQUENCER_TICK_INTERVAL"] = "0.05"


def _slow_routine() -> Routine:
    routine = Routine()
    routine.define(
        "main",
        Function(lambda b: Flow.ADVANCE),
        Wait(0.5),
        Function(lambda b: Flow.FINISH),
    )
    routine.activate()
    return routine


@pytest.fixture
async def test_client(nats_url: str) -> RoutineBusClient:
    """Separate client for sending test messages and receiving results."""
    client = RoutineBusClient(nats_url)
    await client.connect()
    yield client  # type: ignore[misc]
    await client.close()


async def _collect_messages(
    client: RoutineBusClient,
    topic: str,
    msg_type: MessageType,
    count: int,
) -> tuple[list[Envelope], asyncio.Event]:
    """Subscribe to a topic and collect messages of a specific type."""
    results: list[Envelope] = []
    done = asyncio.Event()

    async def handler(env: Envelope) -> None:
        if env.type == msg_type:
            results.append(env)
            if len(results) >= count:
                done.set()

    await client.subscribe(topic, handler)
    await asyncio.sleep(0.3)
    return results, done


class TestSequencerIntegration:
    async def test_local_ticks_publish_status(
        self, nats_url: str, test_client: RoutineBusClient, monkeypatch: pytest.MonkeyPatch
    ):
        """A local-clock sequencer broadcasts ticks and reports its block finishing."""
        monkeypatch.setenv("SEQUENCER_TICK_SOURCE", "local")
        monkeypatch.setenv("SEQUENCER_ID", "seq-local")
        statuses, finished = await _collect_messages(
            test_client, Topics.STATUS, MessageType.BLOCK_STATUS, 3
        )
        ticks, _ = await _collect_messages(test_client, Topics.TICK, MessageType.TICK, 1)

        service = SequencerService(_slow_routine(), nats_url)
        await service.start()
        try:
            await asyncio.wait_for(finished.wait(), timeout=10.0)
        finally:
            await service.stop()

        ours = [s for s in statuses if s.sender == "seq-local"]
        assert ours[0].payload["index"] == 1
        assert ours[-1].payload["active"] is False
        assert any(t.sender == "seq-local" for t in ticks)

    async def test_follows_bus_ticks(
        self, nats_url: str, test_client: RoutineBusClient, monkeypatch: pytest.MonkeyPatch
    ):
        """A bus-driven sequencer steps once per Tick it receives."""
        monkeypatch.setenv("SEQUENCER_TICK_SOURCE", "bus")
        monkeypatch.setenv("SEQUENCER_ID", "seq-follower")
        statuses, first = await _collect_messages(
            test_client, Topics.STATUS, MessageType.BLOCK_STATUS, 1
        )

        service = SequencerService(_slow_routine(), nats_url)
        await service.start()
        await asyncio.sleep(0.3)
        try:
            await test_client.publish(Topics.TICK, tick_message("test-clock", 1))
            await asyncio.wait_for(first.wait(), timeout=5.0)
        finally:
            await service.stop()

        assert service.state.current_tick == 1
        assert service.routine.ticks == 1
        assert statuses[0].tick == 1
