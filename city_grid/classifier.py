"""Tile classification for the default city layout.

A cell's tile is a pure function of its coordinate. Each coordinate is
reduced modulo the block period ``unit = block_size + 4`` and shifted by
``block_size``, giving a residue in ``[-block_size, 3]``:

* negative residue: inside the building core
* ``0`` and ``3``: the park ring around the core
* ``1`` and ``2``: the two one-way lanes between neighbouring blocks

The column residue is bucketed into an *X intent* (lanes run ``BOTTOM`` and
``UP``), the row residue into a *Y intent* (lanes run ``LEFT`` and
``RIGHT``), and the two intents are combined into the final tile by
:func:`combine_intents`. Note the cross binding: the row coordinate drives
the left/right lanes and the column coordinate drives the up/bottom lanes.

Every function here is pure; identical inputs always give identical tiles.
"""

from city_grid.tiles import (
    Building,
    Light,
    LightState,
    OneWay,
    OneWayDirection,
    Park,
    ParkOccupancy,
    Road,
    Tile,
    TwoWayCorner,
    Unknown,
    one_way,
    two_way,
)

# (y lane, x lane) -> merged corner
TWO_WAY_MERGES = {
    (OneWayDirection.RIGHT, OneWayDirection.UP): TwoWayCorner.UP_RIGHT,
    (OneWayDirection.LEFT, OneWayDirection.UP): TwoWayCorner.UP_LEFT,
    (OneWayDirection.RIGHT, OneWayDirection.BOTTOM): TwoWayCorner.DOWN_RIGHT,
    (OneWayDirection.LEFT, OneWayDirection.BOTTOM): TwoWayCorner.DOWN_LEFT,
}


def axis_residue(coordinate: int, block_size: int) -> int:
    """Signed offset of ``coordinate`` from the end of its block core."""
    return coordinate % (block_size + 4) - block_size


def _intent(residue: int, first_lane: OneWayDirection, second_lane: OneWayDirection) -> Tile:
    if residue in (0, 3):
        return Park(ParkOccupancy.FREE)
    if residue == 1:
        return one_way(first_lane)
    if residue == 2:
        return one_way(second_lane)
    return Building()


def x_intent(residue: int) -> Tile:
    """Provisional X-axis tile for a column residue."""
    return _intent(residue, OneWayDirection.BOTTOM, OneWayDirection.UP)


def y_intent(residue: int) -> Tile:
    """Provisional Y-axis tile for a row residue."""
    return _intent(residue, OneWayDirection.LEFT, OneWayDirection.RIGHT)


def _merge_roads(x_road: Road, y_road: Road) -> Tile:
    if not (isinstance(x_road.kind, OneWay) and isinstance(y_road.kind, OneWay)):
        return Unknown()
    corner = TWO_WAY_MERGES.get((y_road.kind.direction, x_road.kind.direction))
    if corner is None:
        return Unknown()
    return two_way(corner)


def combine_intents(x: Tile, y: Tile) -> Tile:
    """Combine the two axis intents into a single tile.

    The X intent is matched first:

    * park x park -> green light (intersection)
    * park or building x road -> the road
    * park x building, building x park -> free park
    * building x building -> building
    * road x park or building -> the X road
    * road x road -> a two-way merge if the lane pair is in
      :data:`TWO_WAY_MERGES`, otherwise ``Unknown``

    Any other pairing (e.g. a light or unknown intent) yields ``Unknown``.
    """
    if isinstance(x, Park):
        if isinstance(y, Park):
            return Light(LightState.GREEN)
        if isinstance(y, Building):
            return Park(ParkOccupancy.FREE)
        if isinstance(y, Road):
            return y
        return Unknown()

    if isinstance(x, Building):
        if isinstance(y, Building):
            return Building()
        if isinstance(y, Park):
            return Park(ParkOccupancy.FREE)
        if isinstance(y, Road):
            return y
        return Unknown()

    if isinstance(x, Road):
        if isinstance(y, (Building, Park)):
            return x
        if isinstance(y, Road):
            return _merge_roads(x, y)
        return Unknown()

    return Unknown()


def classify_default(block_size: int, i: int, j: int) -> Tile:
    """Classify cell ``(i, j)`` (row, column) of a default-layout city."""
    row_residue = axis_residue(i, block_size)
    column_residue = axis_residue(j, block_size)
    return combine_intents(x_intent(column_residue), y_intent(row_residue))
