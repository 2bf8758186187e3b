"""Capability contract a structure must satisfy to be searched."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Protocol, Sequence, Union, runtime_checkable

from .goal import Goal
from .position import Position

Cost = Union[int, float]


@runtime_checkable
class SupportsPathGeneration(Protocol):
    """Structural type accepted by :class:`~astar_engine.search.engine.AStar`."""

    def generate_paths(self, position: Position) -> Iterable[Sequence[int]]: ...

    def calculate_cost(self, from_position: Position, to_position: Position) -> Cost: ...

    def calculate_heuristic_cost(self, position: Position, goal: Goal) -> Cost: ...


class PathGenerator(ABC):
    """Base class for searchable structures.

    Subclassing is optional; the engine only calls the three methods below.
    Implementations must not change between calls made during one search.
    """

    @abstractmethod
    def generate_paths(self, position: Position) -> Iterable[Sequence[int]]:
        """Return the positions reachable in one step from ``position``."""
        raise NotImplementedError

    @abstractmethod
    def calculate_cost(self, from_position: Position, to_position: Position) -> Cost:
        """Return the non-negative cost of stepping between two neighbours."""
        raise NotImplementedError

    @abstractmethod
    def calculate_heuristic_cost(self, position: Position, goal: Goal) -> Cost:
        """Estimate the remaining cost from ``position`` to satisfy ``goal``.

        The estimate must never exceed the true cost for the search to
        return optimal paths.
        """
        raise NotImplementedError


__all__ = ["Cost", "PathGenerator", "SupportsPathGeneration"]
