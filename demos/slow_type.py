"""Collections demo — a helper that returns several actions as one.

``slow_type`` builds a small loop out of a label, a typing step, a wait and
a jump back, and hands it to the Block as a single Collection.
"""

from collections.abc import Callable

from routine import (
    Block,
    Clock,
    Collection,
    Flow,
    Function,
    Label,
    Routine,
    Wait,
    finish,
    jump_to,
)

TYPING_DELAY = 0.1


def _carriage(text: str) -> None:
    print(text, end="\r", flush=True)


def slow_type(
    text: str,
    type_out: Callable[[str], None] = _carriage,
    say: Callable[[str], None] = print,
) -> Collection:
    """Reveal ``text`` one character per step, then continue past the loop."""
    typed = [0]
    loop_label = f"loop:{text}"
    done_label = f"done:{text}"

    def _reset(_block: Block) -> None:
        typed[0] = 0

    def _type_next(block: Block) -> Flow:
        typed[0] += 1
        if typed[0] >= len(text):
            say(text)
            block.jump_to(done_label)
        else:
            type_out(text[: typed[0]])
        return Flow.ADVANCE

    return Collection(
        Function(lambda _block: Flow.ADVANCE, init=_reset),
        Label(loop_label),
        Function(_type_next),
        Wait(TYPING_DELAY),
        jump_to(loop_label),
        Label(done_label),
    )


def build(
    say: Callable[[str], None] = print,
    clock: Clock | None = None,
    type_out: Callable[[str], None] = _carriage,
) -> Routine:
    routine = Routine(clock=clock)

    def line(text: str) -> Function:
        def _poll(_block: Block) -> Flow:
            say(text)
            return Flow.ADVANCE

        return Function(_poll)

    routine.define(
        "first",
        line("You can easily make your own actions by using functions."),
        Wait(2),
        slow_type("For example, here's a slow typing action.", type_out, say),
        Wait(1),
        line("Done!"),
        finish(),
    ).activate()
    return routine
