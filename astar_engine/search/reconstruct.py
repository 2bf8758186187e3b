"""Turn the predecessor chain of a matched node into an ordered path."""

from __future__ import annotations

from typing import List

from ..core.position import Position
from .node import SearchNode

START_TO_GOAL = "start_to_goal"
GOAL_TO_START = "goal_to_start"


def reconstruct_path(node: SearchNode, order: str = START_TO_GOAL) -> List[Position]:
    """Return the positions from the search start to ``node``.

    ``order`` selects ``"start_to_goal"`` (the engine's order) or
    ``"goal_to_start"``. The start is always included exactly once.
    """

    if order not in (START_TO_GOAL, GOAL_TO_START):
        raise ValueError(f"unknown path order {order!r}")
    path: List[Position] = []
    current = node
    while current is not None:
        path.append(current.position)
        current = current.predecessor
    if order == START_TO_GOAL:
        path.reverse()
    return path


__all__ = ["reconstruct_path", "START_TO_GOAL", "GOAL_TO_START"]
