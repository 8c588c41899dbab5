"""Gates demo — pick a random branch once, run it, and try again.

The choice is rolled before the Gate; once an option is chosen the Gate
sticks with it until its actions are done, whatever the roll says later.
The third option has no guard, so it catches everything else and ends the
block.
"""

import random
from collections.abc import Callable

from routine import (
    Block,
    Clock,
    Collection,
    Flow,
    Function,
    Gate,
    GateOption,
    Label,
    Routine,
    Wait,
    finish,
    jump_to,
)


def _say_then_pause(say: Callable[[str], None], text: str) -> Collection:
    def _poll(_block: Block) -> Flow:
        say(text)
        return Flow.ADVANCE

    return Collection(Function(_poll), Wait(1))


def _choice_is(value: int) -> Callable[[Block], bool]:
    return lambda block: block.properties["choice"] == value


def build(
    say: Callable[[str], None] = print,
    clock: Clock | None = None,
    rng: random.Random | None = None,
) -> Routine:
    routine = Routine(clock=clock)
    rng = rng if rng is not None else random.Random()

    def roll(block: Block) -> Flow:
        block.properties["choice"] = rng.randrange(3)
        return Flow.ADVANCE

    routine.define(
        "first",
        _say_then_pause(say, "OK, so let's try a Gate."),
        Label("gate start"),
        _say_then_pause(say, "Let's see which option we randomly get..."),
        Function(roll),
        Gate(
            GateOption(_choice_is(0), _say_then_pause(say, "1: Option #1 was chosen.")),
            GateOption(
                _choice_is(1),
                _say_then_pause(say, "2: The second choice, option #2 was selected."),
            ),
            GateOption(
                None,
                _say_then_pause(say, "3: The third choice was chosen."),
                _say_then_pause(say, "This one is a loser - game over!"),
                finish(),
            ),
        ),
        _say_then_pause(say, "Nice! Let's try again."),
        jump_to("gate start"),
    ).activate()
    return routine
