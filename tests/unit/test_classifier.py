# tests/unit/test_classifier.py

import pytest

from city_grid.classifier import (
    TWO_WAY_MERGES,
    axis_residue,
    classify_default,
    combine_intents,
    x_intent,
    y_intent,
)
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

UP = one_way(OneWayDirection.UP)
LEFT = one_way(OneWayDirection.LEFT)
BOTTOM = one_way(OneWayDirection.BOTTOM)
RIGHT = one_way(OneWayDirection.RIGHT)
PARK = Park(ParkOccupancy.FREE)


@pytest.mark.parametrize(
    "coordinate, block_size, expected",
    [
        (0, 3, -3),
        (2, 3, -1),
        (3, 3, 0),
        (6, 3, 3),
        (7, 3, -3),
        (10, 3, 0),
        (0, 1, -1),
        (4, 1, 3),
        (5, 1, -1),
    ],
)
def test_axis_residue(coordinate: int, block_size: int, expected: int) -> None:
    assert axis_residue(coordinate, block_size) == expected


@pytest.mark.parametrize(
    "residue, expected",
    [(-3, Building()), (-1, Building()), (0, PARK), (1, BOTTOM), (2, UP), (3, PARK)],
)
def test_x_intent(residue: int, expected: Tile) -> None:
    assert x_intent(residue) == expected


@pytest.mark.parametrize(
    "residue, expected",
    [(-3, Building()), (-1, Building()), (0, PARK), (1, LEFT), (2, RIGHT), (3, PARK)],
)
def test_y_intent(residue: int, expected: Tile) -> None:
    assert y_intent(residue) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        # park first
        (PARK, PARK, Light(LightState.GREEN)),
        (PARK, Building(), PARK),
        (PARK, LEFT, LEFT),
        (PARK, RIGHT, RIGHT),
        # building first
        (Building(), Building(), Building()),
        (Building(), PARK, PARK),
        (Building(), LEFT, LEFT),
        (Building(), RIGHT, RIGHT),
        # x road wins over building / park
        (UP, Building(), UP),
        (UP, PARK, UP),
        (BOTTOM, Building(), BOTTOM),
        (BOTTOM, PARK, BOTTOM),
        # two-way merges
        (UP, RIGHT, two_way(TwoWayCorner.UP_RIGHT)),
        (UP, LEFT, two_way(TwoWayCorner.UP_LEFT)),
        (BOTTOM, RIGHT, two_way(TwoWayCorner.DOWN_RIGHT)),
        (BOTTOM, LEFT, two_way(TwoWayCorner.DOWN_LEFT)),
    ],
)
def test_combination_table(x: Tile, y: Tile, expected: Tile) -> None:
    assert combine_intents(x, y) == expected


@pytest.mark.parametrize(
    "x, y",
    [
        # parallel lanes never cross in the default pattern
        (UP, UP),
        (UP, BOTTOM),
        (LEFT, RIGHT),
        (RIGHT, LEFT),
        (LEFT, UP),
        # already merged roads
        (two_way(TwoWayCorner.UP_LEFT), LEFT),
        (UP, two_way(TwoWayCorner.DOWN_RIGHT)),
        # intents that no residue produces
        (Light(LightState.GREEN), Building()),
        (Building(), Light(LightState.RED)),
        (PARK, Unknown()),
        (Unknown(), PARK),
        (Park(ParkOccupancy.FULL), Light(LightState.GREEN)),
    ],
)
def test_unmatched_combinations_are_unknown(x: Tile, y: Tile) -> None:
    assert combine_intents(x, y) == Unknown()


def test_merge_table_covers_every_perpendicular_lane_pair() -> None:
    pairs = {
        (y, x)
        for y in (OneWayDirection.LEFT, OneWayDirection.RIGHT)
        for x in (OneWayDirection.UP, OneWayDirection.BOTTOM)
    }
    assert set(TWO_WAY_MERGES) == pairs
    assert set(TWO_WAY_MERGES.values()) == set(TwoWayCorner)


def test_row_drives_left_right_lanes() -> None:
    # Row residue 1 inside a building column: the row coordinate selects the
    # LEFT lane. Binding the row to the X intent instead would give BOTTOM.
    block_size = 3
    assert classify_default(block_size, 4, 0) == LEFT
    assert x_intent(axis_residue(4, block_size)) == BOTTOM


def test_column_drives_up_bottom_lanes() -> None:
    block_size = 3
    assert classify_default(block_size, 0, 4) == BOTTOM
    assert classify_default(block_size, 0, 5) == UP
    assert y_intent(axis_residue(5, block_size)) == RIGHT


def test_alternative_binding_differs_exactly_on_lane_cells() -> None:
    # Feeding the row residue to the X intent (and the column residue to the
    # Y intent) would change every cell touching a lane, except where both
    # coordinates sit on the same lane, and nothing else.
    # Pins the current row -> LEFT/RIGHT binding.
    block_size = 2
    unit = block_size + 4
    for i in range(unit):
        for j in range(unit):
            row_residue = axis_residue(i, block_size)
            column_residue = axis_residue(j, block_size)
            alternative = combine_intents(x_intent(row_residue), y_intent(column_residue))
            on_lane = row_residue in (1, 2) or column_residue in (1, 2)
            # identical lane residues merge to the same corner either way
            same_lane = row_residue == column_residue
            differs = classify_default(block_size, i, j) != alternative
            assert differs == (on_lane and not same_lane)


@pytest.mark.parametrize("block_size", [1, 2, 3, 6])
def test_classification_is_deterministic(block_size: int) -> None:
    unit = block_size + 4
    first = [classify_default(block_size, i, j) for i in range(unit) for j in range(unit)]
    second = [classify_default(block_size, i, j) for i in range(unit) for j in range(unit)]
    assert first == second


@pytest.mark.parametrize("block_size", [1, 2, 3, 4, 7])
def test_pattern_repeats_with_block_period(block_size: int) -> None:
    unit = block_size + 4
    for i in range(unit):
        for j in range(unit):
            tile = classify_default(block_size, i, j)
            assert classify_default(block_size, i + unit, j) == tile
            assert classify_default(block_size, i, j + 2 * unit) == tile


@pytest.mark.parametrize("block_size", [1, 2, 3, 4, 7])
def test_no_residue_pair_is_unknown(block_size: int) -> None:
    unit = block_size + 4
    for i in range(unit):
        for j in range(unit):
            assert classify_default(block_size, i, j) != Unknown()


@pytest.mark.parametrize("block_size", [1, 3, 5])
def test_two_way_tiles_only_at_lane_crossings(block_size: int) -> None:
    unit = block_size + 4
    expected = {
        (block_size + 1, block_size + 1): two_way(TwoWayCorner.DOWN_LEFT),
        (block_size + 1, block_size + 2): two_way(TwoWayCorner.UP_LEFT),
        (block_size + 2, block_size + 1): two_way(TwoWayCorner.DOWN_RIGHT),
        (block_size + 2, block_size + 2): two_way(TwoWayCorner.UP_RIGHT),
    }
    found = {}
    for i in range(unit):
        for j in range(unit):
            tile = classify_default(block_size, i, j)
            if tile in expected.values():
                found[(i, j)] = tile
    assert found == expected
