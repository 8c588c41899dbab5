"""Ready-made Function actions for common flow control."""

import random
from collections.abc import Hashable

from routine.actions.basic import Function
from routine.engine.block import Block
from routine.engine.flow import Flow


def wait_ticks(count: int) -> Function:
    """Hold the block for ``count`` ticks before advancing."""

    def _poll(block: Block) -> Flow:
        if block.current_frame >= count:
            return Flow.ADVANCE
        return Flow.IDLE

    return Function(_poll)


def wait_ticks_random(
    min_ticks: int, max_ticks: int, rng: random.Random | None = None
) -> Function:
    """Hold the block for a random tick count in ``[min_ticks, max_ticks)``.

    A new count is drawn every time the action becomes current.
    """
    rng = rng if rng is not None else random.Random()
    target = [min_ticks]

    def _init(_block: Block) -> None:
        target[0] = min_ticks + int((max_ticks - min_ticks) * rng.random())

    def _poll(block: Block) -> Flow:
        if block.current_frame >= target[0]:
            return Flow.ADVANCE
        return Flow.IDLE

    return Function(_poll, init=_init)


def jump_to(label: Hashable) -> Function:
    """Jump to the Label with the given id. Does nothing if it is missing."""

    def _poll(block: Block) -> Flow:
        block.jump_to(label)
        return Flow.ADVANCE

    return Function(_poll)


def set_index(index: int) -> Function:
    """Move the playhead to ``index`` (``set_index(0)`` restarts the block)."""

    def _poll(block: Block) -> Flow:
        block.set_index(index)
        return Flow.ADVANCE

    return Function(_poll)


def loop() -> Function:
    """Send the block back to its first action."""
    return set_index(0)


def finish() -> Function:
    """End the block: it deactivates and rewinds to its first action."""
    return Function(lambda _block: Flow.FINISH)


def run_block(*block_ids: Hashable) -> Function:
    """Activate the given blocks (all blocks if none are given)."""

    def _poll(block: Block) -> Flow:
        block.routine.activate(*block_ids)
        return Flow.ADVANCE

    return Function(_poll)


def pause_block(*block_ids: Hashable) -> Function:
    """Pause the given blocks (all blocks if none are given)."""

    def _poll(block: Block) -> Flow:
        block.routine.pause(*block_ids)
        return Flow.ADVANCE

    return Function(_poll)


def stop_block(*block_ids: Hashable) -> Function:
    """Stop (rewind and pause) the given blocks (all blocks if none are given)."""

    def _poll(block: Block) -> Flow:
        block.routine.stop(*block_ids)
        return Flow.ADVANCE

    return Function(_poll)


def switch_block(*block_ids: Hashable) -> Function:
    """Restart the given blocks from the top and run them.

    With no ids every block is restarted and run.
    """

    def _poll(block: Block) -> Flow:
        routine = block.routine
        routine.stop(*block_ids)
        routine.activate(*block_ids)
        return Flow.ADVANCE

    return Function(_poll)
