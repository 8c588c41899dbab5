"""Flow — the signal an Action returns from every poll."""

from enum import StrEnum


class Flow(StrEnum):
    """What the owning Block should do after polling an Action."""

    IDLE = "idle"  # poll the same action again next tick
    ADVANCE = "advance"  # move to the next action
    FINISH = "finish"  # deactivate the block and rewind it


class EndBehavior(StrEnum):
    """What a Block does when it advances past its last action."""

    STOP = "stop"
    LOOP = "loop"
