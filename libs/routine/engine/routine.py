"""Routine — owns the Blocks and steps every active one once per tick."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from routine.clock import Clock, MonotonicClock
from routine.engine.action import Action
from routine.engine.block import Block
from routine.engine.flow import EndBehavior
from routine.engine.properties import Properties

logger = logging.getLogger(__name__)


class Routine:
    """A cooperative scheduler of Blocks.

    Usage:
        routine = Routine()
        routine.define("intro", Function(say_hello), Wait(2.0), finish())
        routine.activate("intro")
        while routine.is_active():
            routine.tick()

    Args:
        clock: Time source for Wait and Timing actions (monotonic by default).
        end: What Blocks do after their last action advances. A Block's
            own ``end`` overrides this.
        chain_advances: Keep polling a Block's next action in the same tick
            after an ADVANCE instead of yielding until the next tick.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        end: EndBehavior = EndBehavior.STOP,
        chain_advances: bool = False,
    ) -> None:
        self.clock: Clock = clock if clock is not None else MonotonicClock()
        self.end = end
        self.chain_advances = chain_advances
        self._blocks: list[Block] = []
        self._properties = Properties()
        self._ticks = 0

    @property
    def properties(self) -> Properties:
        return self._properties

    @property
    def blocks(self) -> tuple[Block, ...]:
        """All Blocks in registration order."""
        return tuple(self._blocks)

    @property
    def ticks(self) -> int:
        """Number of completed ``tick()`` calls."""
        return self._ticks

    def define(
        self, block_id: Hashable, *actions: Action, end: EndBehavior | None = None
    ) -> Block:
        """Create a Block from ``actions`` and register it under ``block_id``.

        Collections are flattened. A Block already registered under the same
        id is discarded. Raises InvalidDefinitionError for an empty list.
        """
        block = Block(block_id, actions, self, end=end)
        for existing in [b for b in self._blocks if b.id == block_id]:
            logger.debug("Replacing block %r", block_id)
            self._blocks.remove(existing)
        self._blocks.append(block)
        return block

    def get_block(self, block_id: Hashable) -> Block | None:
        for block in self._blocks:
            if block.id == block_id:
                return block
        return None

    def _select(self, block_ids: tuple[Hashable, ...]) -> list[Block]:
        if not block_ids:
            return list(self._blocks)
        selected = []
        for block_id in block_ids:
            block = self.get_block(block_id)
            if block is not None:
                selected.append(block)
        return selected

    # --- Control by id (no ids = every block) ---

    def activate(self, *block_ids: Hashable) -> None:
        for block in self._select(block_ids):
            block.activate()

    def pause(self, *block_ids: Hashable) -> None:
        for block in self._select(block_ids):
            block.pause()

    def stop(self, *block_ids: Hashable) -> None:
        for block in self._select(block_ids):
            block.stop()

    def restart(self, *block_ids: Hashable) -> None:
        for block in self._select(block_ids):
            block.restart()

    def is_active(self, *block_ids: Hashable) -> bool:
        """True if any of the given Blocks (or any Block at all) is active."""
        return any(block.is_active for block in self._select(block_ids))

    # --- Driving ---

    def tick(self) -> None:
        """Step every Block that is active at the start of this call.

        Blocks activated during the tick are first stepped on the next one.
        A Block paused by an earlier Block still takes its step; one stopped
        by an earlier Block does not, so it stays rewound.
        """
        stepping = [block for block in self._blocks if block.is_active]
        for block in stepping:
            block.step()
        self._ticks += 1
