"""Block — an identifier-keyed sequence of Actions with its own playhead."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING

from routine.engine.action import Action, Labelled, flatten_actions
from routine.engine.errors import InvalidDefinitionError
from routine.engine.flow import EndBehavior, Flow
from routine.engine.properties import Properties

if TYPE_CHECKING:
    from routine.engine.routine import Routine

logger = logging.getLogger(__name__)


class Block:
    """A playhead over an ordered, non-empty list of Actions.

    Blocks are created by ``Routine.define`` and stepped by ``Routine.tick``.
    The Block keeps only a weak reference to its Routine; the Routine owns it.
    """

    def __init__(
        self,
        block_id: Hashable,
        actions: Iterable[Action],
        routine: Routine,
        end: EndBehavior | None = None,
    ) -> None:
        flat = flatten_actions(actions)
        if not flat:
            raise InvalidDefinitionError(f"Block {block_id!r} has no actions")
        self.id = block_id
        self._actions = flat
        self._routine_ref = weakref.ref(routine)
        self._end = end
        self._index = 0
        self._active = False
        self._primed = False  # current action has been initialized
        self._internally_moved = False
        self._stopped = False  # rewound and paused since it was last activated
        self._current_frame = 0

    def __repr__(self) -> str:
        return f"Block({self.id!r}, index={self._index}, active={self._active})"

    # --- Accessors ---

    @property
    def routine(self) -> Routine:
        routine = self._routine_ref()
        if routine is None:
            raise RuntimeError(f"Routine owning block {self.id!r} no longer exists")
        return routine

    @property
    def properties(self) -> Properties:
        """Shortcut to the owning Routine's shared properties."""
        return self.routine.properties

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def index(self) -> int:
        return self._index

    @property
    def current_action(self) -> Action:
        return self._actions[self._index]

    @property
    def current_frame(self) -> int:
        """Polls made since the current action became current."""
        return self._current_frame

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def internally_moved(self) -> bool:
        """True if the playhead was repositioned during the current step."""
        return self._internally_moved

    @property
    def end_behavior(self) -> EndBehavior:
        if self._end is not None:
            return self._end
        return self.routine.end

    # --- Playhead ---

    def set_index(self, index: int) -> None:
        """Point the playhead at ``index``, clamped into the action list.

        The new current action is initialized immediately, so a move made
        from inside a poll is in place before the step finishes.
        """
        index = max(0, min(index, len(self._actions) - 1))
        if index != self._index:
            self._move_to(index)

    def jump_to(self, label: Hashable) -> int | None:
        """Move the playhead to the first action labelled ``label``.

        Returns the new index, or None (playhead untouched) if no action
        carries that label.
        """
        for i, action in enumerate(self._actions):
            if isinstance(action, Labelled) and action.label == label:
                self.set_index(i)
                return i
        logger.debug("Block %r: no label %r to jump to", self.id, label)
        return None

    def _move_to(self, index: int) -> None:
        self._internally_moved = True
        self._index = index
        self._enter()

    def _enter(self) -> None:
        self._current_frame = 0
        self._primed = True
        self._actions[self._index].init(self)

    # --- Activity ---

    def activate(self) -> None:
        """Mark the block to be stepped from the next tick on."""
        self._stopped = False
        if not self._primed:
            self._enter()
        if not self._active:
            logger.debug("Block %r activated at index %d", self.id, self._index)
        self._active = True

    def pause(self) -> None:
        """Stop stepping the block; it resumes at the same action later."""
        if self._active:
            logger.debug("Block %r paused at index %d", self.id, self._index)
        self._active = False

    def restart(self) -> None:
        """Rewind to the first action without changing activity."""
        self._move_to(0)

    def stop(self) -> None:
        """Rewind and pause, so the block starts over when activated again."""
        self.restart()
        self.pause()
        self._stopped = True

    # --- Stepping ---

    def step(self) -> None:
        """Poll the current action and move the playhead by its Flow."""
        if self._stopped:
            return
        self._internally_moved = False
        polls_left = len(self._actions) if self.routine.chain_advances else 1

        while True:
            flow = self._actions[self._index].poll(self)
            self._current_frame += 1
            polls_left -= 1
            if self._internally_moved:
                # the move already initialized the new action
                self._current_frame = 0

            if flow == Flow.FINISH:
                logger.debug("Block %r finished", self.id)
                self._index = 0
                self._active = False
                self._enter()
                return

            if flow != Flow.ADVANCE:
                return

            wrapped = False
            if not self._internally_moved:
                self._index += 1
                if self._index >= len(self._actions):
                    wrapped = True
                    self._index = 0
                    if self.end_behavior == EndBehavior.STOP:
                        logger.debug("Block %r reached its end", self.id)
                        self._active = False
                self._enter()

            if wrapped or not self._active or polls_left <= 0:
                return
            self._internally_moved = False
