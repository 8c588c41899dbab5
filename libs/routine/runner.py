"""Async drive loop for a Routine."""

import asyncio
import logging

from routine.engine.routine import Routine

logger = logging.getLogger(__name__)


async def run_routine(
    routine: Routine, interval: float, max_ticks: int | None = None
) -> int:
    """Tick ``routine`` every ``interval`` seconds while any Block is active.

    Stops early after ``max_ticks`` ticks if given. Returns the number of
    ticks run.
    """
    ticks = 0
    while routine.is_active():
        if max_ticks is not None and ticks >= max_ticks:
            logger.info("Tick limit %d reached with blocks still active", max_ticks)
            break
        routine.tick()
        ticks += 1
        await asyncio.sleep(interval)
    return ticks
