"""Exceptions raised by the pathfinding engine."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for engine errors."""


class InvalidGoalSpecification(PathfindingError, ValueError):
    """Raised when a goal leaves an axis unbound that it must bind."""

    def __init__(self, target: object = None, reason: str = "binds neither x nor y") -> None:
        self.target = target
        super().__init__(f"goal {target!r} {reason}")


__all__ = ["PathfindingError", "InvalidGoalSpecification"]
