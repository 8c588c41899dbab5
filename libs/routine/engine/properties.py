"""Properties — shared memory for every Action in a Routine."""

from collections.abc import Hashable
from typing import Any


class Properties(dict[Hashable, Any]):
    """A plain mapping with the few helpers routines lean on.

    Actions reach it through ``block.properties``.
    """

    def init(self, key: Hashable, value: Any) -> None:
        """Set ``key`` to ``value`` only if it is not already present."""
        if key not in self:
            self[key] = value

    def has(self, key: Hashable) -> bool:
        return key in self

    def set(self, key: Hashable, value: Any) -> None:
        self[key] = value

    def delete(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        self.pop(key, None)
