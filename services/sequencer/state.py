"""In-memory state for the Sequencer service.

Tracks the tick counter and the last reported activity and playhead of
every Block, so only changes are published.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field

from routine import Block, Routine

DEFAULT_TICK_INTERVAL = 0.1


@dataclass
class SequencerState:
    """Tick counter plus the last (active, index) seen per Block."""

    current_tick: int = 0
    _last_seen: dict[Hashable, tuple[bool, int]] = field(default_factory=dict)

    def advance_tick(self, tick_number: int | None = None) -> int:
        """Move to ``tick_number`` (or the next tick). Returns the new tick."""
        self.current_tick = tick_number if tick_number is not None else self.current_tick + 1
        return self.current_tick

    def is_stale(self, tick_number: int) -> bool:
        """True if ``tick_number`` was already processed."""
        return tick_number <= self.current_tick

    def changed_blocks(self, routine: Routine) -> list[Block]:
        """Blocks whose activity or index differ from the last call."""
        changed = []
        for block in routine.blocks:
            seen = (block.is_active, block.index)
            if self._last_seen.get(block.id) != seen:
                self._last_seen[block.id] = seen
                changed.append(block)
        return changed
