"""Dense tile grid and the grid builder.

The grid is fixed-size once built, so tiles live in a single 2D numpy object
array indexed ``[row, column]`` and flagged read-only. Rows run along the X
block axis and columns along the Y block axis, so a :class:`Position`
``(x, y)`` addresses ``grid[x, y]``.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Tuple

import numpy as np
import structlog
from pyrsistent import pmap
from pyrsistent.typing import PMap

from city_grid.errors import ClassificationGap
from city_grid.layout import Layout
from city_grid.position import Position
from city_grid.tiles import Tile, is_unknown, tile_code
from city_grid.types import CityLayoutVariant
from city_grid.variants import city_length_x, city_length_y, classifier_for

logger = structlog.get_logger(__name__)


class TileGrid:
    """Read-only ``rows x columns`` grid of tiles."""

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2:
            raise ValueError(f"Tile grid must be 2D, got shape {cells.shape}")
        cells = cells.copy()
        cells.flags.writeable = False
        self._cells = cells

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def columns(self) -> int:
        return self._cells.shape[1]

    def __getitem__(self, index: Tuple[int, int]) -> Tile:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(f"Out of bounds: {(i, j)} for grid {self.rows}x{self.columns}")
        return self._cells[i, j]

    def __iter__(self) -> Iterator[Tuple[Tile, ...]]:
        for row in self._cells:
            yield tuple(row)

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileGrid):
            return NotImplemented
        return self.shape == other.shape and bool(np.all(self._cells == other._cells))

    def __hash__(self) -> int:
        return hash((self.shape, tuple(self._cells.flat)))

    def __repr__(self) -> str:
        return f"TileGrid(rows={self.rows}, columns={self.columns})"

    def in_bounds(self, pos: Position) -> bool:
        return pos.x < self.rows and pos.y < self.columns

    def tile_at(self, pos: Position) -> Tile:
        """Tile at ``pos`` (x = row, y = column)."""
        return self[pos.x, pos.y]

    def positions(self) -> Iterator[Position]:
        for i in range(self.rows):
            for j in range(self.columns):
                yield Position(i, j)

    def counts(self) -> PMap[Tile, int]:
        """Number of cells holding each distinct tile value."""
        return pmap(Counter(self._cells.flat))

    def tile_codes(self) -> np.ndarray:
        """``uint8`` array of :class:`~city_grid.tiles.TileCode` values."""
        codes = np.zeros(self.shape, dtype=np.uint8)
        for (i, j), tile in np.ndenumerate(self._cells):
            codes[i, j] = tile_code(tile)
        return codes


def find_classification_gaps(grid: TileGrid) -> List[Position]:
    """Positions of every ``Unknown`` cell, in row-major order."""
    return [pos for pos in grid.positions() if is_unknown(grid.tile_at(pos))]


def build_grid(
    variant: CityLayoutVariant, layout: Layout, strict: bool = True
) -> TileGrid:
    """Allocate and classify the full grid for ``layout``.

    Arguments:
        variant: Layout family; must support length and classify.
        layout: Block parameters.
        strict: Raise :class:`ClassificationGap` if any cell is ``Unknown``.

    Raises:
        UnsupportedVariant: ``variant`` cannot size or classify a grid. Raised
            before any cell is allocated.
    """
    rows = city_length_x(variant, layout)
    columns = city_length_y(variant, layout)
    classify = classifier_for(variant)

    cells = np.empty((rows, columns), dtype=object)
    for i in range(rows):
        for j in range(columns):
            cells[i, j] = classify(layout.block_size, i, j)
    grid = TileGrid(cells)

    gaps = find_classification_gaps(grid)
    if gaps:
        logger.warning(
            "grid.classification_gap",
            variant=str(variant),
            count=len(gaps),
            first=(gaps[0].x, gaps[0].y),
        )
        if strict:
            raise ClassificationGap(gaps)
    return grid
