"""Jumps demo — skip over a finish by jumping to a label."""

from collections.abc import Callable

from routine import Block, Clock, Flow, Function, Label, Routine, Wait, finish, jump_to


def build(say: Callable[[str], None] = print, clock: Clock | None = None) -> Routine:
    routine = Routine(clock=clock)

    def start(_block: Block) -> Flow:
        say("Let's test jumping to a label.")
        return Flow.ADVANCE

    def skipped_to(_block: Block) -> Flow:
        say("This wouldn't have printed unless we jumped.")
        return Flow.ADVANCE

    def end(_block: Block) -> Flow:
        say("OK, that's it.")
        return Flow.FINISH

    routine.define(
        "first",
        Function(start),
        Wait(3),
        jump_to("after finish"),
        finish(),  # never reached
        Label("after finish"),
        Function(skipped_to),
        Wait(3),
        Function(end),
    )
    routine.activate()
    return routine
