"""Timing — fire callbacks one after another, each after its own delay."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import timedelta

from routine.clock import to_seconds
from routine.engine.block import Block
from routine.engine.errors import InvalidDefinitionError
from routine.engine.flow import Flow


@dataclass
class TimingPair:
    """A callback to run once ``duration`` has passed."""

    duration: float | timedelta
    callback: Callable[[Block], None]
    deadline: float | None = field(default=None, compare=False)


class Timing:
    """Run TimingPairs in order.

    A pair's clock starts on the first poll that reaches it. When its
    deadline passes the callback fires once and the chain moves on. After
    the last pair the chain rewinds and advances its Block.
    """

    def __init__(self, pairs: Iterable[TimingPair]) -> None:
        self.pairs = list(pairs)
        if not self.pairs:
            raise InvalidDefinitionError("Timing needs at least one pair")
        self.index = 0

    def init(self, block: Block) -> None:
        self.index = 0
        for pair in self.pairs:
            pair.deadline = None

    def poll(self, block: Block) -> Flow:
        now = block.routine.clock.now()
        pair = self.pairs[self.index]

        if pair.deadline is None:
            pair.deadline = now + to_seconds(pair.duration)

        if now >= pair.deadline:
            pair.callback(block)
            pair.deadline = None
            self.index += 1
            if self.index >= len(self.pairs):
                self.index = 0
                return Flow.ADVANCE

        return Flow.IDLE
