"""Simple demo — print, wait three seconds, print and finish."""

from collections.abc import Callable

from routine import Block, Clock, Flow, Function, Routine, Wait


def build(say: Callable[[str], None] = print, clock: Clock | None = None) -> Routine:
    routine = Routine(clock=clock)

    def intro(_block: Block) -> Flow:
        say("Here's a simple block that prints some text, and waits three seconds.")
        return Flow.ADVANCE

    def done(_block: Block) -> Flow:
        say("Done!")
        return Flow.FINISH

    routine.define("first", Function(intro), Wait(3), Function(done))
    routine.activate()
    return routine
