"""Entry point and building target generators.

Entry points are the border coordinates where vehicles may enter the city.
They depend only on the layout, never on the classified grid. Building
targets are declared but not generated yet: every variant yields an empty
sequence.
"""

from pyrsistent import pvector
from pyrsistent.typing import PVector

from city_grid.layout import Layout
from city_grid.position import Position
from city_grid.types import Target


def default_entry_points(layout: Layout) -> PVector[Position]:
    """Border crossings of a default-layout city.

    For every inner block boundary along X, one position on the top edge and
    one on the bottom edge; then, for every inner boundary along Y, one on the
    left edge and one on the right edge. A single-block city has none.

    The far-edge coordinate is ``unit * block_count - 4``, which equals the
    grid length on that axis, i.e. one past the last cell.
    """
    unit = layout.unit
    far_x = unit * layout.block_count_x - 4
    far_y = unit * layout.block_count_y - 4
    points = []
    for i in range(1, layout.block_count_x):
        points.append(Position(unit * i - 1, 0))
        points.append(Position(unit * i - 1, far_y))
    for i in range(1, layout.block_count_y):
        points.append(Position(0, unit * i - 1))
        points.append(Position(far_x, unit * i - 1))
    return pvector(points)


def bordered_entry_points(layout: Layout) -> PVector[Position]:
    """Bordered cities expose no entry points yet."""
    return pvector()


def default_building_targets(layout: Layout) -> PVector[Target]:
    """Building placement is not generated; always empty."""
    return pvector()
