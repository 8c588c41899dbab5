"""Gate — pick one branch once, then run only that branch to its end.

A Gate holds GateOptions, each a guard plus its own list of actions. While
no option is chosen, every poll checks the guards in order and commits to
the first one that passes (a missing guard always passes, which makes it an
"else" when placed last). The commit tick itself returns IDLE; the chosen
branch starts polling on the following tick. From then on the Gate only
runs that branch, never re-checking guards, until the branch's last action
advances. The Gate then advances its Block and is ready to choose again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from routine.engine.action import Action, flatten_actions
from routine.engine.block import Block
from routine.engine.errors import InvalidDefinitionError
from routine.engine.flow import Flow

logger = logging.getLogger(__name__)

Guard = Callable[[Block], bool]
Callback = Callable[[Block], None]


class GateOption:
    """One branch of a Gate: an optional guard and the actions it runs."""

    def __init__(self, guard: Guard | None, *actions: Action) -> None:
        flat = flatten_actions(actions)
        if not flat:
            raise InvalidDefinitionError("GateOption needs at least one action")
        self.guard = guard
        self._steps = flat
        self.index = 0

    @property
    def steps(self) -> tuple[Action, ...]:
        return tuple(self._steps)

    def matches(self, block: Block) -> bool:
        return self.guard is None or bool(self.guard(block))

    def init(self, block: Block) -> None:
        self.index = 0
        self._steps[0].init(block)

    def poll(self, block: Block) -> Flow:
        """Run the current nested action; ADVANCE once the last one advances."""
        flow = self._steps[self.index].poll(block)

        if flow == Flow.FINISH:
            self.index = 0
            return Flow.FINISH

        if flow == Flow.ADVANCE:
            self.index += 1
            if self.index < len(self._steps):
                self._steps[self.index].init(block)
                return Flow.IDLE
            self.init(block)
            return Flow.ADVANCE

        return Flow.IDLE


class Gate:
    """Commit-once branch selection over GateOptions."""

    def __init__(self, *options: GateOption) -> None:
        self.options: list[GateOption] = list(options)
        self.chosen: GateOption | None = None
        self._on_idle: Callback | None = None
        self._on_choose: Callback | None = None

    def add_option(self, option: GateOption) -> Gate:
        self.options.append(option)
        return self

    def set_on_idle(self, on_idle: Callback | None) -> Gate:
        """Run ``on_idle`` on every poll made before an option is chosen."""
        self._on_idle = on_idle
        return self

    def set_on_choose(self, on_choose: Callback | None) -> Gate:
        """Run ``on_choose`` once, when an option is chosen."""
        self._on_choose = on_choose
        return self

    def init(self, block: Block) -> None:
        for option in self.options:
            option.init(block)
        self.chosen = None

    def poll(self, block: Block) -> Flow:
        if self.chosen is not None:
            flow = self.chosen.poll(block)
            if flow != Flow.IDLE:
                self.chosen = None
            return flow

        if self._on_idle is not None:
            self._on_idle(block)

        for i, option in enumerate(self.options):
            if option.matches(block):
                self.chosen = option
                logger.debug("Block %r: gate chose option %d", block.id, i)
                if self._on_choose is not None:
                    self._on_choose(block)
                break

        return Flow.IDLE
