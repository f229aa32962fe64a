"""Block layout parameters."""

import operator
from dataclasses import dataclass

import numpy as np

from city_grid.errors import InvalidLayout

# Two road lanes plus a one-tile park ring on each side of the building core
# add four tiles to every block along each axis.
BLOCK_PADDING = 4


@dataclass(frozen=True)
class Layout:
    """Immutable block layout.

    Attributes:
        block_count_x: Number of blocks along the X (row) axis.
        block_count_y: Number of blocks along the Y (column) axis.
        block_size: Side length of a block's building core in tiles.
    """

    block_count_x: int
    block_count_y: int
    block_size: int

    def __post_init__(self) -> None:
        for name in ("block_count_x", "block_count_y", "block_size"):
            value = getattr(self, name)
            # bool is an int subclass and np.bool_ is index-convertible on older numpy
            if isinstance(value, (bool, np.bool_)):
                raise InvalidLayout(f"{name} must be a positive integer, got {value!r}")
            try:
                number = operator.index(value)
            except TypeError:
                raise InvalidLayout(
                    f"{name} must be a positive integer, got {value!r}"
                ) from None
            if number < 1:
                raise InvalidLayout(f"{name} must be a positive integer, got {value!r}")
            # store numpy integer scalars and other index types as plain int
            object.__setattr__(self, name, number)

    @property
    def unit(self) -> int:
        """Period of the repeating block pattern along either axis."""
        return self.block_size + BLOCK_PADDING
