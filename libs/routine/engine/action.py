"""Action protocol — the unit of work a Block steps through.

Any object with ``init(block)`` and ``poll(block) -> Flow`` is an Action.
Two optional capabilities extend it:

- ``Labelled``: exposes a ``label`` so ``Block.jump_to`` can find it.
- ``Collectable``: exposes ``actions()`` and is replaced by its contents
  wherever a list of actions is accepted.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from routine.engine.flow import Flow

if TYPE_CHECKING:
    from routine.engine.block import Block


@runtime_checkable
class Action(Protocol):
    def init(self, block: Block) -> None:
        """Called once each time the action becomes the block's current one."""

    def poll(self, block: Block) -> Flow:
        """Called once per tick while the action is current."""


@runtime_checkable
class Labelled(Protocol):
    label: Hashable


@runtime_checkable
class Collectable(Protocol):
    def actions(self) -> list[Action]: ...


def flatten_actions(actions: Iterable[Action]) -> list[Action]:
    """Expand every Collectable (recursively) into the actions it holds."""
    flat: list[Action] = []
    for action in actions:
        if isinstance(action, Collectable):
            flat.extend(flatten_actions(action.actions()))
        else:
            flat.append(action)
    return flat
