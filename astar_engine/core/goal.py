"""Goal specifications: exact points and single-axis targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from .errors import InvalidGoalSpecification
from .position import Position

Coordinate = Union[int, float]


class Goal:
    """Base class for the three goal variants.

    Every variant exposes ``x`` and ``y``; an unbound axis reads as ``None``.
    """

    x: Optional[Coordinate]
    y: Optional[Coordinate]

    @property
    def axes(self) -> Tuple[Optional[Coordinate], Optional[Coordinate]]:
        """Return the goal as an ``(x, y)`` pair of optional coordinates."""
        return (self.x, self.y)

    def matches(self, position: Sequence[Coordinate]) -> bool:
        """Return ``True`` if ``position`` agrees with every bound axis."""
        if self.x is not None and self.x != position[0]:
            return False
        if self.y is not None and self.y != position[1]:
            return False
        return True


@dataclass(frozen=True)
class ExactPoint(Goal):
    """Reach exactly ``(x, y)``."""

    x: Coordinate
    y: Coordinate

    def __post_init__(self) -> None:
        if self.x is None or self.y is None:
            raise InvalidGoalSpecification(self, "must bind both x and y")

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass(frozen=True)
class AxisX(Goal):
    """Reach any position in column ``x``."""

    x: Coordinate

    def __post_init__(self) -> None:
        if self.x is None:
            raise InvalidGoalSpecification(self)

    @property
    def y(self) -> None:  # type: ignore[override]
        return None


@dataclass(frozen=True)
class AxisY(Goal):
    """Reach any position in row ``y``."""

    y: Coordinate

    def __post_init__(self) -> None:
        if self.y is None:
            raise InvalidGoalSpecification(self)

    @property
    def x(self) -> None:  # type: ignore[override]
        return None


GoalLike = Union[Goal, Sequence[Optional[Coordinate]]]


def resolve_goal(target: GoalLike) -> Goal:
    """Build a :class:`Goal` from ``target``.

    ``target`` is either a goal instance, returned unchanged, or an
    ``(x, y)`` pair where either coordinate may be ``None``.

    Raises
    ------
    InvalidGoalSpecification
        If both coordinates are ``None``, on the pair or on the instance.
    """

    if isinstance(target, Goal):
        if getattr(target, "x", None) is None and getattr(target, "y", None) is None:
            raise InvalidGoalSpecification(target)
        return target
    try:
        x, y = target
    except (TypeError, ValueError):
        raise TypeError(f"cannot interpret {target!r} as a goal") from None
    if x is not None and y is not None:
        return ExactPoint(x, y)
    if x is not None:
        return AxisX(x)
    if y is not None:
        return AxisY(y)
    raise InvalidGoalSpecification(target)


__all__ = ["Goal", "ExactPoint", "AxisX", "AxisY", "GoalLike", "resolve_goal"]
