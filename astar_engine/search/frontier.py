"""Open set keyed by position and ordered by estimated total cost."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from ..core.generator import Cost
from ..core.position import Position
from .node import SearchNode

_Entry = Tuple[Cost, Cost, int, SearchNode]


class Frontier:
    """Priority queue holding at most one live node per position.

    Replaced nodes stay in the heap until popped and are then discarded,
    so lookups and updates never scan the queue.
    """

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._live: Dict[Position, SearchNode] = {}
        self._seq = 0

    def offer(self, node: SearchNode) -> bool:
        """Queue ``node`` unless an equal or cheaper entry already exists.

        Returns ``True`` if the node became the live entry for its position.
        """
        current = self._live.get(node.position)
        if current is not None and node.g >= current.g:
            return False
        self._live[node.position] = node
        self._seq += 1
        f, neg_g, seq = node.sort_key(self._seq)
        heappush(self._heap, (f, neg_g, seq, node))
        return True

    def pop(self) -> SearchNode:
        """Remove and return the live node with the lowest ``f``."""
        while self._heap:
            node = heappop(self._heap)[-1]
            if self._live.get(node.position) is node:
                del self._live[node.position]
                return node
        raise IndexError("pop from an empty frontier")

    def get(self, position: Position) -> Optional[SearchNode]:
        return self._live.get(position)

    def __contains__(self, position: object) -> bool:
        return position in self._live

    def __len__(self) -> int:
        return len(self._live)

    def __bool__(self) -> bool:
        return bool(self._live)


__all__ = ["Frontier"]
