"""Loops demo — a block set to loop runs until an action finishes it."""

from collections.abc import Callable

from routine import Block, Clock, EndBehavior, Flow, Function, Routine, Wait

LOOPS = 4


def build(say: Callable[[str], None] = print, clock: Clock | None = None) -> Routine:
    routine = Routine(clock=clock)
    routine.properties.init("loops_left", LOOPS)

    def announce(block: Block) -> Flow:
        left = block.properties["loops_left"]
        if left == 0:
            say("Welp, that's it. Routine over~")
            return Flow.FINISH
        say(f"This block will loop {left - 1} more times.")
        return Flow.ADVANCE

    def count_down(block: Block) -> Flow:
        block.properties["loops_left"] -= 1
        return Flow.ADVANCE

    routine.define(
        "loop",
        Function(announce),
        Wait(2),
        Function(count_down),
        end=EndBehavior.LOOP,
    )
    routine.activate("loop")
    return routine
