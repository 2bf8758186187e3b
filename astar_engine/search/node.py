"""Search node bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.generator import Cost
from ..core.position import Position


@dataclass(eq=False)
class SearchNode:
    """A discovered position with its best known cost and predecessor."""

    position: Position
    g: Cost
    f: Cost
    predecessor: Optional["SearchNode"] = None

    def sort_key(self, seq: int) -> Tuple[Cost, Cost, int]:
        """Lower ``f`` first, then larger ``g``, then earlier insertion."""
        return (self.f, -self.g, seq)


__all__ = ["SearchNode"]
