from typing import Iterator, List, Tuple

from city_grid.city import City, create_city
from city_grid.position import Position
from city_grid.types import CityLayoutVariant

# Rendering of the 2 x 2 blocks, block size 3 city (10 x 10 tiles).
REFERENCE_ROWS: List[str] = [
    "###pv^p###",
    "###pv^p###",
    "###pv^p###",
    "pppgv^gppp",
    "<<<<31<<<<",
    ">>>>42>>>>",
    "pppgv^gppp",
    "###pv^p###",
    "###pv^p###",
    "###pv^p###",
]

REFERENCE_ENTRY_POINTS: List[Position] = [
    Position(6, 0),
    Position(6, 10),
    Position(0, 6),
    Position(10, 6),
]

# (block_count_x, block_count_y, block_size) combinations swept by property tests
LAYOUT_SWEEP: List[Tuple[int, int, int]] = [
    (bx, by, bs) for bx in range(1, 5) for by in range(1, 5) for bs in (1, 2, 3, 5, 8)
]


def make_reference_city() -> City:
    return create_city(CityLayoutVariant.DEFAULT, 2, 2, 3)


def cells(city: City) -> Iterator[Tuple[int, int]]:
    for i in range(city.length_x):
        for j in range(city.length_y):
            yield i, j
