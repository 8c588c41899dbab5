"""Built-in actions: leaves, flow-control helpers, Gate and Timing."""

from routine.actions.basic import Collection, Function, Label, Wait
from routine.actions.control import (
    finish,
    jump_to,
    loop,
    pause_block,
    run_block,
    set_index,
    stop_block,
    switch_block,
    wait_ticks,
    wait_ticks_random,
)
from routine.actions.gate import Gate, GateOption
from routine.actions.timing import Timing, TimingPair

__all__ = [
    "Collection",
    "Function",
    "Gate",
    "GateOption",
    "Label",
    "Timing",
    "TimingPair",
    "Wait",
    "finish",
    "jump_to",
    "loop",
    "pause_block",
    "run_block",
    "set_index",
    "stop_block",
    "switch_block",
    "wait_ticks",
    "wait_ticks_random",
]
