"""Bounded rectangular grid usable as a searchable structure."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..core.generator import Cost, PathGenerator
from ..core.goal import Goal, GoalLike
from ..core.position import Position
from ..search.engine import AStar

Coord = Tuple[int, int]

_ORTHOGONAL: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL: Tuple[Coord, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))

BLOCKED_CELL = "#"
OPEN_CELL = "."


class GridMap(PathGenerator):
    """Grid of ``width`` x ``height`` cells with optional walls and weights.

    Entering a cell costs its weight (``1`` unless listed in ``weights``).
    Diagonal moves, when enabled, cost the same as orthogonal ones.
    """

    def __init__(
        self,
        width: int,
        height: int,
        blocked: Iterable[Coord] = (),
        weights: Optional[Mapping[Coord, Cost]] = None,
        diagonal: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.blocked: Set[Position] = {Position(*c) for c in blocked}
        self.weights: Dict[Position, Cost] = {}
        for cell, weight in (weights or {}).items():
            if weight < 0:
                raise ValueError(f"weight of {cell} must be non-negative")
            self.weights[Position(*cell)] = weight
        self.diagonal = diagonal
        self._min_weight: Cost = min([1, *self.weights.values()])

    @classmethod
    def from_rows(cls, rows: Sequence[str], diagonal: bool = False) -> "GridMap":
        """Build a map from text rows, the first row being ``y == 0``.

        ``#`` marks a wall, ``.`` an open cell and a digit an open cell
        with that entry cost.
        """

        if not rows:
            raise ValueError("at least one row is required")
        width = len(rows[0])
        blocked: List[Coord] = []
        weights: Dict[Coord, Cost] = {}
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for x, char in enumerate(row):
                if char == BLOCKED_CELL:
                    blocked.append((x, y))
                elif char.isdigit():
                    weights[(x, y)] = int(char)
                elif char != OPEN_CELL:
                    raise ValueError(f"unknown cell {char!r} at {(x, y)}")
        return cls(width, len(rows), blocked, weights, diagonal)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, pos: Sequence[int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, pos: Sequence[int]) -> bool:
        return Position(*pos) in self.blocked

    def weight(self, pos: Sequence[int]) -> Cost:
        return self.weights.get(Position(*pos), 1)

    # ------------------------------------------------------------------
    # PathGenerator
    # ------------------------------------------------------------------
    def generate_paths(self, position: Position) -> List[Position]:
        x, y = position
        offsets = _ORTHOGONAL + _DIAGONAL if self.diagonal else _ORTHOGONAL
        out: List[Position] = []
        for dx, dy in offsets:
            n = Position(x + dx, y + dy)
            if self.in_bounds(n) and n not in self.blocked:
                out.append(n)
        return out

    def calculate_cost(self, from_position: Position, to_position: Position) -> Cost:
        return self.weight(to_position)

    def calculate_heuristic_cost(self, position: Position, goal: Goal) -> Cost:
        """Manhattan distance (Chebyshev with diagonals) over the bound axes.

        Scaled by the cheapest cell weight so the estimate stays admissible.
        """

        dx = abs(goal.x - position[0]) if goal.x is not None else 0
        dy = abs(goal.y - position[1]) if goal.y is not None else 0
        steps = max(dx, dy) if self.diagonal else dx + dy
        return steps * self._min_weight


def find_grid_path(
    start: Coord,
    goal: GoalLike,
    *,
    width: int,
    height: int,
    blocked: Iterable[Coord] = (),
    diagonal: bool = False,
) -> List[Position]:
    """Return a shortest path on an unweighted grid, or ``[]`` if none exists.

    ``goal`` may leave one axis as ``None`` to target a whole row or column.
    """

    grid = GridMap(width, height, blocked=blocked, diagonal=diagonal)
    return AStar().run(grid, start, goal) or []


__all__ = ["GridMap", "find_grid_path", "BLOCKED_CELL", "OPEN_CELL"]
