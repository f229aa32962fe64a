# tests/unit/test_render.py

from city_grid.render import ENTRY_POINT_GLYPH, TILE_GLYPHS, render_text, tile_glyph
from city_grid.tiles import Building, Park, ParkOccupancy, Unknown
from tests.test_utils import REFERENCE_ENTRY_POINTS, REFERENCE_ROWS, make_reference_city


def test_glyphs_are_distinct_single_characters() -> None:
    glyphs = list(TILE_GLYPHS.values())
    assert all(len(g) == 1 for g in glyphs)
    assert len(set(glyphs)) == len(glyphs)
    assert ENTRY_POINT_GLYPH not in glyphs


def test_tile_glyph() -> None:
    assert tile_glyph(Building()) == "#"
    assert tile_glyph(Park(ParkOccupancy.FULL)) == "P"
    assert tile_glyph(Unknown()) == "?"


def test_render_reference_city() -> None:
    city = make_reference_city()
    assert render_text(city.grid).splitlines() == REFERENCE_ROWS


def test_render_marks_in_bounds_entry_points_only() -> None:
    city = make_reference_city()
    rows = render_text(city.grid, REFERENCE_ENTRY_POINTS).splitlines()
    marked = [
        (i, j) for i, row in enumerate(rows) for j, ch in enumerate(row) if ch == ENTRY_POINT_GLYPH
    ]
    # (6, 10) and (10, 6) sit one past the far edge
    assert marked == [(0, 6), (6, 0)]
