"""Position value type.

Immutable non-negative integer grid coordinates. The same type doubles as a
relative direction vector (see :data:`Direction`), so it supports
componentwise ``+`` and ``-``. Subtraction never wraps: a result with a
negative component is a caller error and raises ``ValueError``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Row index along the X block axis (0 at top).
        y: Column index along the Y block axis (0 at left).
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position components must be non-negative: {self}")

    def __add__(self, other: object) -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        if other.x > self.x or other.y > self.y:
            raise ValueError(f"Subtraction underflow: {self} - {other}")
        return Position(self.x - other.x, self.y - other.y)


Direction = Position

ORIGIN = Position(0, 0)
