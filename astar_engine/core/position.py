"""Position type shared by the engine and the structures it searches."""

from __future__ import annotations

from typing import Any, NamedTuple, Union


class Position(NamedTuple):
    """Immutable 2D coordinate.

    Being a tuple, ``Position(1, 2) == (1, 2)`` and both hash the same, so
    structures are free to hand plain ``(x, y)`` tuples to the engine.
    """

    x: Union[int, float]
    y: Union[int, float]


def as_position(value: Any) -> Position:
    """Return ``value`` as a :class:`Position`.

    Accepts a ``Position`` or any two-item sequence of numbers.
    """

    if isinstance(value, Position):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise TypeError(f"cannot interpret {value!r} as a position") from None
    return Position(x, y)


__all__ = ["Position", "as_position"]
