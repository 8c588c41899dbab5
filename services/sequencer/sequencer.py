"""SequencerService — drives a Routine and publishes Block status changes."""

import asyncio
import logging
import os
from collections.abc import Callable

from routine import (
    Envelope,
    Routine,
    RoutineBusClient,
    Topics,
    block_status_message,
    tick_message,
)

from services.sequencer.rules import accept_tick, process_tick
from services.sequencer.state import DEFAULT_TICK_INTERVAL, SequencerState

logger = logging.getLogger(__name__)

TICK_SOURCES = ("local", "bus")


class SequencerService:
    """Owns one Routine and ticks it.

    With the ``local`` tick source the service runs its own interval loop
    and broadcasts each tick on `/system/tick` for other sequencers; with
    ``bus`` it ticks once per Tick message on `/system/tick`. After every
    tick a BlockStatus is published for each Block whose activity or
    playhead changed. Once a tick leaves no Block active, ``on_finished``
    is called (a single time).
    """

    def __init__(
        self,
        routine: Routine,
        nats_url: str = "nats://localhost:4222",
        bus: RoutineBusClient | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._routine = routine
        self._on_finished = on_finished
        self._finished = False
        self._bus = bus if bus is not None else RoutineBusClient(nats_url)
        self._state = SequencerState()
        self._name = os.environ.get("SEQUENCER_ID", "sequencer")
        self._tick_interval = float(
            os.environ.get("SEQUENCER_TICK_INTERVAL", DEFAULT_TICK_INTERVAL)
        )
        self._tick_source = os.environ.get("SEQUENCER_TICK_SOURCE", "local")
        if self._tick_source not in TICK_SOURCES:
            raise ValueError(
                f"SEQUENCER_TICK_SOURCE must be one of {TICK_SOURCES}, got {self._tick_source!r}"
            )
        self._running = False
        self._tick_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> SequencerState:
        """Expose state for testing."""
        return self._state

    @property
    def routine(self) -> Routine:
        return self._routine

    async def start(self) -> None:
        """Connect to NATS and start ticking."""
        await self._bus.connect()
        logger.info("Sequencer %s connected to NATS", self._name)

        self._running = True
        if self._tick_source == "bus":
            await self._bus.subscribe(Topics.TICK, self._on_tick_message)
            logger.info("Sequencer %s ticking on %s", self._name, Topics.TICK)
        else:
            self._tick_task = asyncio.create_task(self._tick_loop())
            logger.info(
                "Sequencer %s started (tick interval: %.2fs)", self._name, self._tick_interval
            )

    async def stop(self) -> None:
        """Clean shutdown."""
        self._running = False
        if self._tick_task is not None:
            self._tick_task.cancel()
            try:
                await self._tick_task
            except asyncio.CancelledError:
                pass
        await self._bus.close()
        logger.info("Sequencer %s stopped", self._name)

    async def _tick_loop(self) -> None:
        """Tick on a fixed interval while any Block is active."""
        while self._running and self._routine.is_active():
            await self._do_tick()
            await asyncio.sleep(self._tick_interval)
        if self._running:
            self._finish()

    async def _on_tick_message(self, envelope: Envelope) -> None:
        tick_number, reason = accept_tick(envelope, self._state)
        if tick_number is None:
            logger.warning("Ignoring message from %s: %s", envelope.sender, reason)
            return
        await self._do_tick(tick_number)
        if not self._routine.is_active():
            self._finish()

    def _finish(self) -> None:
        """Report the end of the routine once and notify the owner."""
        if self._finished:
            return
        self._finished = True
        logger.info(
            "Sequencer %s: no active blocks left after tick %d, routine finished",
            self._name,
            self._state.current_tick,
        )
        if self._on_finished is not None:
            self._on_finished()

    async def _do_tick(self, tick_number: int | None = None) -> None:
        """Step the Routine once and publish what changed."""
        try:
            tick, changed = process_tick(self._state, self._routine, tick_number)
        except Exception:
            logger.exception("[tick %d] Routine tick failed", self._state.current_tick)
            return

        if tick_number is None:
            await self._bus.publish(Topics.TICK, tick_message(self._name, tick))

        for block in changed:
            msg = block_status_message(self._name, block, tick)
            await self._bus.publish(Topics.STATUS, msg)

        if changed:
            logger.info(
                "[tick %d] %d block(s) changed: %s",
                tick,
                len(changed),
                ", ".join(f"{b.id}@{b.index}{'' if b.is_active else ' (idle)'}" for b in changed),
            )
