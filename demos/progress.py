"""Progress demo — hand control from one block to another.

The "first" block talks for a while and then switches to the "progress"
block, which fills a bar five percent per tick before finishing.
"""

from collections.abc import Callable

from routine import Block, Clock, Flow, Function, Routine, Wait, finish, switch_block

STEP = 5
FULL = 100


def draw_bar(progress: int) -> None:
    cells = "".join("▪" if i <= progress else "▫" for i in range(0, FULL, STEP))
    print(f"[{cells} ]", end="\r", flush=True)


def build(
    say: Callable[[str], None] = print,
    clock: Clock | None = None,
    show_bar: Callable[[int], None] = draw_bar,
) -> Routine:
    routine = Routine(clock=clock)
    routine.properties.init("progress", 0)

    def line(text: str) -> Function:
        def _poll(block: Block) -> Flow:
            say(f"{block.id} : {text}")
            return Flow.ADVANCE

        return Function(_poll)

    def fill(block: Block) -> Flow:
        block.properties["progress"] += STEP
        show_bar(block.properties["progress"])
        if block.properties["progress"] >= FULL:
            return Flow.ADVANCE
        return Flow.IDLE

    routine.define(
        "first",
        line("In this example, we will switch from one block to another."),
        Wait(2),
        line("Let's fill up a progress bar, but we'll do this in the 'progress' block."),
        Wait(3),
        line("Let's switch now!"),
        Wait(2),
        line("-click-"),
        Wait(1),
        switch_block("progress"),
    )

    routine.define(
        "progress",
        line("OK. Now we're in the 'progress' block."),
        Wait(2),
        line("Filling up progress bar..."),
        Wait(2),
        Function(fill, init=lambda block: block.properties.set("progress", 0)),
        line("Done!"),
        Wait(2),
        finish(),
    )

    routine.activate("first")
    return routine
