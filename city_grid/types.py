"""Common enumerations and small value types shared across the package."""

from dataclasses import dataclass
from enum import StrEnum, auto

from city_grid.position import Position


class CityLayoutVariant(StrEnum):
    """City layout family.

    ``DEFAULT`` is fully specified. ``BORDERED`` only defines its grid
    dimensions and ``LINE`` defines nothing; both are extension points that
    fault when an unsupported operation is requested (see
    :mod:`city_grid.variants`).
    """

    DEFAULT = auto()
    BORDERED = auto()
    LINE = auto()


class Operation(StrEnum):
    """Per-variant operations dispatched through :mod:`city_grid.variants`."""

    LENGTH_X = auto()
    LENGTH_Y = auto()
    CLASSIFY = auto()
    ENTRY_POINTS = auto()
    BUILDING_TARGETS = auto()


class TargetKind(StrEnum):
    """What a vehicle is heading for."""

    BUILDING = auto()
    EXIT = auto()
    WAYPOINT = auto()


@dataclass(frozen=True)
class Target:
    """A tagged destination consumed by the simulation layer.

    Attributes:
        kind: Building, exit or plain waypoint.
        position: Grid coordinate of the destination.
    """

    kind: TargetKind
    position: Position
