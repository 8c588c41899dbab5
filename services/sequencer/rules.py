"""Sequencer rules — pure functions for driving a Routine from ticks."""

import logging

from routine import Block, Envelope, MessageType, Routine, Tick, validate_message

from services.sequencer.state import SequencerState

logger = logging.getLogger(__name__)


def process_tick(
    state: SequencerState, routine: Routine, tick_number: int | None = None
) -> tuple[int, list[Block]]:
    """Advance the tick, step the Routine once, and report what changed.

    Returns (tick_number, changed_blocks).
    """
    tick = state.advance_tick(tick_number)
    routine.tick()
    return tick, state.changed_blocks(routine)


def accept_tick(envelope: Envelope, state: SequencerState) -> tuple[int | None, str | None]:
    """Check that a bus message is a fresh, valid Tick.

    Returns (tick_number, None) when it should drive the Routine, or
    (None, reason) when it must be ignored.
    """
    if envelope.type != MessageType.TICK:
        return None, f"Not a tick: {envelope.type}"

    errors = validate_message(envelope)
    if errors:
        return None, "; ".join(errors)

    tick_number = Tick.model_validate(envelope.payload).tick_number
    if state.is_stale(tick_number):
        return None, f"Stale tick {tick_number} (at {state.current_tick})"

    return tick_number, None
