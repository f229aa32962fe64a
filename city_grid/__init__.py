"""Deterministic synthetic city grid generation.

Builds a repeating block pattern (building cores ringed by parks, one-way
lanes between blocks, lit intersections and two-way merges) from four
integers and a layout variant, plus the border entry points where vehicles
may enter. Everything is a pure function of its inputs.

Typical use::

    from city_grid import CityLayoutVariant, create_city

    city = create_city(CityLayoutVariant.DEFAULT, 2, 2, 3)
    city.grid[0, 0]        # Building()
    list(city.entry_points)
"""

__version__ = "0.1.0"

from city_grid.city import City, create_city, create_city_from_config
from city_grid.config import CityConfig
from city_grid.errors import (
    CityGridError,
    ClassificationGap,
    DegenerateSampling,
    InvalidLayout,
    UnsupportedVariant,
)
from city_grid.grid import TileGrid, build_grid, find_classification_gaps
from city_grid.layout import Layout
from city_grid.position import Direction, Position
from city_grid.types import CityLayoutVariant, Operation, Target, TargetKind
from city_grid.variants import supports

__all__ = [
    "City",
    "CityConfig",
    "CityGridError",
    "CityLayoutVariant",
    "ClassificationGap",
    "DegenerateSampling",
    "Direction",
    "InvalidLayout",
    "Layout",
    "Operation",
    "Position",
    "Target",
    "TargetKind",
    "TileGrid",
    "UnsupportedVariant",
    "build_grid",
    "create_city",
    "create_city_from_config",
    "find_classification_gaps",
    "supports",
]
