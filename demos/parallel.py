"""Parallel demo — several blocks running side by side at different rates.

Block 0 wakes one more block every two seconds. Blocks 1-3 print on their
own timers. Block 4, once woken, stops everyone else and finishes.
"""

from collections.abc import Callable

from routine import Block, Clock, Flow, Function, Routine, Wait, finish, loop

# (block id, message, seconds between messages)
CHATTERERS: list[tuple[int, str, float]] = [
    (1, "second block is alive and well...", 0.5),
    (2, "third block is going crazy...", 0.1),
    (3, "fourth block is kinda insane...!!!", 0.05),
]


def build(say: Callable[[str], None] = print, clock: Clock | None = None) -> Routine:
    routine = Routine(clock=clock)
    routine.properties.init("next_block", 1)

    def wake_next(block: Block) -> Flow:
        say("First block is just the beginning...")
        routine.activate(block.properties["next_block"])
        block.properties["next_block"] += 1
        return Flow.ADVANCE

    routine.define(0, Function(wake_next), Wait(2), loop()).activate()

    for block_id, text, period in CHATTERERS:

        def chatter(_block: Block, text: str = text) -> Flow:
            say(text)
            return Flow.ADVANCE

        routine.define(block_id, Function(chatter), Wait(period), loop())

    def wind_down(_block: Block) -> Flow:
        routine.stop(0, *(block_id for block_id, _, _ in CHATTERERS))
        say("OK, I'm done. All tuckered out.")
        return Flow.ADVANCE

    routine.define(4, Function(wind_down), Wait(1), finish())
    return routine
