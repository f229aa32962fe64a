"""Tile variants.

A city grid cell holds exactly one tile value. Variants are small frozen
dataclasses so they compare and hash by structure; sub-variants (road
orientation, park occupancy, light colour) are ``StrEnum`` members.

``Unknown`` is a sentinel produced only by an unmatched combination of axis
intents. It never appears in a correctly classified default city; finding one
is a defect (see :func:`city_grid.grid.find_classification_gaps`).
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Union


class ParkOccupancy(StrEnum):
    FREE = auto()
    FULL = auto()


class LightState(StrEnum):
    GREEN = auto()
    RED = auto()


class OneWayDirection(StrEnum):
    """Direction of travel on a one-way lane."""

    UP = auto()
    LEFT = auto()
    BOTTOM = auto()
    RIGHT = auto()


class TwoWayCorner(StrEnum):
    """Corner where two perpendicular one-way lanes merge."""

    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()


@dataclass(frozen=True)
class OneWay:
    direction: OneWayDirection


@dataclass(frozen=True)
class TwoWay:
    corner: TwoWayCorner


RoadKind = Union[OneWay, TwoWay]


@dataclass(frozen=True)
class Building:
    pass


@dataclass(frozen=True)
class Park:
    occupancy: ParkOccupancy = ParkOccupancy.FREE


@dataclass(frozen=True)
class Light:
    state: LightState = LightState.GREEN


@dataclass(frozen=True)
class Road:
    kind: RoadKind


@dataclass(frozen=True)
class Unknown:
    pass


Tile = Union[Building, Park, Light, Road, Unknown]


def is_unknown(tile: Tile) -> bool:
    """Return True if ``tile`` is the classification-gap sentinel."""
    return isinstance(tile, Unknown)


def one_way(direction: OneWayDirection) -> Road:
    """Shorthand for a one-way road tile."""
    return Road(OneWay(direction))


def two_way(corner: TwoWayCorner) -> Road:
    """Shorthand for a two-way road tile."""
    return Road(TwoWay(corner))


class TileCode(IntEnum):
    """Stable integer encoding of every concrete tile value.

    Used for numeric export of a grid (``TileGrid.tile_codes``). Zero is kept
    for ``Unknown`` so an all-zero array reads as "nothing classified".
    """

    UNKNOWN = 0
    BUILDING = auto()
    PARK_FREE = auto()
    PARK_FULL = auto()
    LIGHT_GREEN = auto()
    LIGHT_RED = auto()
    ROAD_UP = auto()
    ROAD_LEFT = auto()
    ROAD_BOTTOM = auto()
    ROAD_RIGHT = auto()
    ROAD_UP_LEFT = auto()
    ROAD_UP_RIGHT = auto()
    ROAD_DOWN_LEFT = auto()
    ROAD_DOWN_RIGHT = auto()


def tile_code(tile: Tile) -> TileCode:
    """Map a tile value to its :class:`TileCode`."""
    if isinstance(tile, Building):
        return TileCode.BUILDING
    if isinstance(tile, Park):
        return TileCode[f"PARK_{tile.occupancy.name}"]
    if isinstance(tile, Light):
        return TileCode[f"LIGHT_{tile.state.name}"]
    if isinstance(tile, Road):
        if isinstance(tile.kind, OneWay):
            return TileCode[f"ROAD_{tile.kind.direction.name}"]
        return TileCode[f"ROAD_{tile.kind.corner.name}"]
    return TileCode.UNKNOWN
