"""Leaf actions — Wait, Function, Label and Collection."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from datetime import timedelta

from routine.clock import Clock, to_seconds
from routine.engine.action import Action, flatten_actions
from routine.engine.block import Block
from routine.engine.flow import Flow

PollFunc = Callable[[Block], Flow]
InitFunc = Callable[[Block], None]


class Wait:
    """Hold the block until ``duration`` has elapsed since the action began.

    The deadline is taken on every ``init``, so revisiting a Wait waits the
    full duration again. Uses the Routine's clock unless given its own.
    """

    def __init__(self, duration: float | timedelta, clock: Clock | None = None) -> None:
        self.duration = to_seconds(duration)
        self._clock = clock
        self._deadline: float | None = None

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def _now(self, block: Block) -> float:
        clock = self._clock if self._clock is not None else block.routine.clock
        return clock.now()

    def init(self, block: Block) -> None:
        self._deadline = self._now(block) + self.duration

    def poll(self, block: Block) -> Flow:
        if self._deadline is not None and self._now(block) >= self._deadline:
            return Flow.ADVANCE
        return Flow.IDLE


class Function:
    """Run a custom poll function, with an optional init function.

    This is the extension point for domain behavior: the poll function
    receives the Block and decides the Flow.
    """

    def __init__(self, poll: PollFunc, init: InitFunc | None = None) -> None:
        self.poll_func = poll
        self.init_func = init

    def init(self, block: Block) -> None:
        if self.init_func is not None:
            self.init_func(block)

    def poll(self, block: Block) -> Flow:
        return self.poll_func(block)


class Label:
    """A marker that ``Block.jump_to`` can find. Does nothing when polled."""

    def __init__(self, label: Hashable) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"Label({self.label!r})"

    def init(self, block: Block) -> None:
        pass

    def poll(self, block: Block) -> Flow:
        return Flow.ADVANCE


class Collection:
    """A definition-time group of actions.

    Wherever a list of actions is accepted, a Collection is replaced by its
    contents, so helpers can return several actions as one argument.
    """

    def __init__(self, *actions: Action) -> None:
        self._actions = flatten_actions(actions)

    def __len__(self) -> int:
        return len(self._actions)

    def add(self, action: Action) -> Collection:
        """Append an action (flattening it if it is a Collection)."""
        self._actions.extend(flatten_actions([action]))
        return self

    def actions(self) -> list[Action]:
        return list(self._actions)

    def init(self, block: Block) -> None:
        pass

    def poll(self, block: Block) -> Flow:
        return Flow.ADVANCE
