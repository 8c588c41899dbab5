"""Frames demo — several actions run in one tick when advances are chained.

The Routine here is built with ``chain_advances=True``: a Block keeps going
through actions that advance and only yields to the caller's loop when an
action idles or the Block finishes.
"""

from collections.abc import Callable

from routine import Block, Clock, Flow, Function, Routine, Wait

LINES = [
    "This prints some text all at once, even though it's spread across actions.",
    "Blocks only yield to the outer loop when an action idles or the block ends.",
    "So events compose out of small actions without thinking about frames.",
]


def _say_line(say: Callable[[str], None], text: str) -> Function:
    def _poll(_block: Block) -> Flow:
        say(text)
        return Flow.ADVANCE

    return Function(_poll)


def build(say: Callable[[str], None] = print, clock: Clock | None = None) -> Routine:
    routine = Routine(clock=clock, chain_advances=True)

    def last(_block: Block) -> Flow:
        say("That's it for this one.")
        return Flow.FINISH

    block = routine.define(
        "first",
        *(_say_line(say, text) for text in LINES),
        Wait(3),
        Function(last),
    )
    block.activate()
    return routine
