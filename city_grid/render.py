"""Plain-text rendering of a tile grid, one glyph per cell."""

from typing import Dict, Iterable, Optional

from city_grid.grid import TileGrid
from city_grid.position import Position
from city_grid.tiles import (
    Building,
    Light,
    LightState,
    OneWayDirection,
    Park,
    ParkOccupancy,
    Tile,
    TwoWayCorner,
    Unknown,
    one_way,
    two_way,
)

ENTRY_POINT_GLYPH = "E"

TILE_GLYPHS: Dict[Tile, str] = {
    Building(): "#",
    Park(ParkOccupancy.FREE): "p",
    Park(ParkOccupancy.FULL): "P",
    Light(LightState.GREEN): "g",
    Light(LightState.RED): "r",
    one_way(OneWayDirection.UP): "^",
    one_way(OneWayDirection.LEFT): "<",
    one_way(OneWayDirection.BOTTOM): "v",
    one_way(OneWayDirection.RIGHT): ">",
    two_way(TwoWayCorner.UP_LEFT): "1",
    two_way(TwoWayCorner.UP_RIGHT): "2",
    two_way(TwoWayCorner.DOWN_LEFT): "3",
    two_way(TwoWayCorner.DOWN_RIGHT): "4",
    Unknown(): "?",
}


def tile_glyph(tile: Tile) -> str:
    return TILE_GLYPHS.get(tile, "?")


def render_text(
    grid: TileGrid, entry_points: Optional[Iterable[Position]] = None
) -> str:
    """Render ``grid`` as newline-separated rows.

    Entry points inside the grid are drawn as ``E``; those lying on the far
    border (one past the last cell) have no cell to mark and are skipped.
    """
    marks = {
        (p.x, p.y) for p in (entry_points or ()) if grid.in_bounds(p)
    }
    lines = []
    for i, row in enumerate(grid):
        lines.append(
            "".join(
                ENTRY_POINT_GLYPH if (i, j) in marks else tile_glyph(tile)
                for j, tile in enumerate(row)
            )
        )
    return "\n".join(lines)
