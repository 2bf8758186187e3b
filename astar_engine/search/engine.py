"""A* search over any structure implementing the path generation contract."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Set

from ..config import CONFIG, SearchConfig
from ..core.errors import InvalidGoalSpecification
from ..core.generator import Cost, SupportsPathGeneration
from ..core.goal import Goal, GoalLike, resolve_goal
from ..core.position import Position, as_position
from .frontier import Frontier
from .node import SearchNode
from .reconstruct import reconstruct_path

logger = logging.getLogger(__name__)


class SearchOutcome(Enum):
    """How a search ended."""

    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_GOAL = "invalid_goal"


@dataclass
class SearchResult:
    """Outcome of one :meth:`AStar.search` call.

    ``path`` runs from the start to the matched goal and is ``None`` unless
    the outcome is :attr:`SearchOutcome.FOUND`. ``expanded`` counts calls to
    ``generate_paths``; ``generated`` counts nodes accepted into the
    frontier, the start included.
    """

    outcome: SearchOutcome
    goal: Optional[Goal] = None
    path: Optional[List[Position]] = None
    cost: Optional[Cost] = None
    expanded: int = 0
    visited: int = 0
    generated: int = 0

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def __len__(self) -> int:
        return len(self.path) if self.path else 0

    def __bool__(self) -> bool:
        return self.found


class AStar:
    """Best-first search driven by a structure's own movement rules.

    The instance only carries configuration; every call starts from an
    empty frontier and visited set.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or CONFIG.search

    def run(
        self,
        structure: SupportsPathGeneration,
        start: Any,
        target: GoalLike,
    ) -> Optional[List[Position]]:
        """Return the path from ``start`` to ``target`` or ``None``.

        ``target`` is a goal instance or an ``(x, y)`` pair where one axis
        may be ``None`` to accept any position in that column or row.
        """
        return self.search(structure, start, target).path

    def search(
        self,
        structure: SupportsPathGeneration,
        start: Any,
        target: GoalLike,
    ) -> SearchResult:
        """Search ``structure`` and return a :class:`SearchResult`."""
        try:
            goal = resolve_goal(target)
        except InvalidGoalSpecification:
            logger.warning("Rejected goal %r: neither axis is bound.", target)
            return SearchResult(SearchOutcome.INVALID_GOAL)

        start = as_position(start)
        logger.debug("Search from %s towards %s", start, goal)

        frontier = Frontier()
        visited: Set[Position] = set()
        expanded = 0
        generated = 1
        frontier.offer(
            SearchNode(start, 0, structure.calculate_heuristic_cost(start, goal))
        )

        while frontier:
            current = frontier.pop()
            # Offers skip visited positions, so the frontier never yields one.
            if current.position in visited:
                continue
            visited.add(current.position)

            if goal.matches(current.position):
                path = reconstruct_path(current)
                logger.debug(
                    "Reached %s at cost %s (expanded=%d, visited=%d)",
                    current.position,
                    current.g,
                    expanded,
                    len(visited),
                )
                return SearchResult(
                    SearchOutcome.FOUND,
                    goal=goal,
                    path=path,
                    cost=current.g,
                    expanded=expanded,
                    visited=len(visited),
                    generated=generated,
                )

            expanded += 1
            if self.config.log_expansions:
                logger.debug("Expanding %s g=%s f=%s", current.position, current.g, current.f)
            for neighbor in structure.generate_paths(current.position):
                neighbor = as_position(neighbor)
                if neighbor in visited:
                    continue
                g = current.g + structure.calculate_cost(current.position, neighbor)
                queued = frontier.get(neighbor)
                if queued is not None and g >= queued.g:
                    continue
                h = structure.calculate_heuristic_cost(neighbor, goal)
                frontier.offer(SearchNode(neighbor, g, g + h, current))
                generated += 1

        logger.debug(
            "No path from %s towards %s (expanded=%d, visited=%d)",
            start,
            goal,
            expanded,
            len(visited),
        )
        return SearchResult(
            SearchOutcome.NO_PATH,
            goal=goal,
            expanded=expanded,
            visited=len(visited),
            generated=generated,
        )


def find_path(
    structure: SupportsPathGeneration,
    start: Any,
    target: GoalLike,
) -> Optional[List[Position]]:
    """Shortcut for ``AStar().run(structure, start, target)``."""
    return AStar().run(structure, start, target)


__all__ = ["AStar", "SearchOutcome", "SearchResult", "find_path"]
