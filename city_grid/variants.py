"""Per-variant operation dispatch.

Each :class:`~city_grid.types.CityLayoutVariant` is described by a
:class:`VariantRules` record. A rule slot left as ``None`` marks the
operation as unsupported for that variant: :func:`supports` reports it and
the dispatch functions raise :class:`~city_grid.errors.UnsupportedVariant`.

New layout families plug in through :func:`register_variant`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pyrsistent.typing import PVector

from city_grid.classifier import classify_default
from city_grid.entry_points import (
    bordered_entry_points,
    default_building_targets,
    default_entry_points,
)
from city_grid.errors import UnsupportedVariant
from city_grid.layout import BLOCK_PADDING, Layout
from city_grid.position import Position
from city_grid.tiles import Tile
from city_grid.types import CityLayoutVariant, Operation, Target

# (block_count, block_size) -> grid length along one axis
LengthFn = Callable[[int, int], int]
# (block_size, row, column) -> tile
ClassifyFn = Callable[[int, int, int], Tile]
EntryPointFn = Callable[[Layout], PVector[Position]]
BuildingTargetFn = Callable[[Layout], PVector[Target]]


@dataclass(frozen=True)
class VariantRules:
    """Operations implemented by one layout variant.

    Attributes:
        length: Grid length along an axis; shared by both axes.
        classify: Tile for a single cell.
        entry_points: Border entry coordinates.
        building_targets: Building destinations.
    """

    length: Optional[LengthFn] = None
    classify: Optional[ClassifyFn] = None
    entry_points: Optional[EntryPointFn] = None
    building_targets: Optional[BuildingTargetFn] = None

    def slot(self, operation: Operation) -> Optional[Callable[..., object]]:
        if operation in (Operation.LENGTH_X, Operation.LENGTH_Y):
            return self.length
        if operation == Operation.CLASSIFY:
            return self.classify
        if operation == Operation.ENTRY_POINTS:
            return self.entry_points
        return self.building_targets


def default_length(block_count: int, block_size: int) -> int:
    return (block_size + BLOCK_PADDING) * block_count - 4


def bordered_length(block_count: int, block_size: int) -> int:
    return (block_size + BLOCK_PADDING) * block_count + 2


_VARIANT_REGISTRY: Dict[CityLayoutVariant, VariantRules] = {}


def register_variant(variant: CityLayoutVariant, rules: VariantRules) -> None:
    """Add or replace the rules for ``variant``."""
    _VARIANT_REGISTRY[variant] = rules


def variant_rules(variant: CityLayoutVariant) -> VariantRules:
    """Return the registered rules; an unregistered variant supports nothing."""
    return _VARIANT_REGISTRY.get(variant, VariantRules())


def coerce_variant(value: object) -> CityLayoutVariant:
    """Resolve a variant member or its (case-insensitive) name.

    Raises:
        UnsupportedVariant: ``value`` names no known layout family.
    """
    if isinstance(value, CityLayoutVariant):
        return value
    try:
        return CityLayoutVariant(str(value).lower())
    except ValueError:
        raise UnsupportedVariant(str(value)) from None


def supports(variant: CityLayoutVariant, operation: Operation) -> bool:
    """Return True if ``variant`` implements ``operation``."""
    return variant_rules(variant).slot(operation) is not None


def _require(variant: CityLayoutVariant, operation: Operation) -> Callable[..., Any]:
    fn = variant_rules(variant).slot(operation)
    if fn is None:
        raise UnsupportedVariant(variant, operation)
    return fn


def city_length_x(variant: CityLayoutVariant, layout: Layout) -> int:
    fn = _require(variant, Operation.LENGTH_X)
    return fn(layout.block_count_x, layout.block_size)


def city_length_y(variant: CityLayoutVariant, layout: Layout) -> int:
    fn = _require(variant, Operation.LENGTH_Y)
    return fn(layout.block_count_y, layout.block_size)


def classify(variant: CityLayoutVariant, block_size: int, i: int, j: int) -> Tile:
    """Tile at row ``i``, column ``j`` for ``variant``."""
    fn = _require(variant, Operation.CLASSIFY)
    return fn(block_size, i, j)


def classifier_for(variant: CityLayoutVariant) -> ClassifyFn:
    """Resolve the classifier once, for callers iterating many cells."""
    return _require(variant, Operation.CLASSIFY)


def generate_entry_points(
    variant: CityLayoutVariant, layout: Layout
) -> PVector[Position]:
    fn = _require(variant, Operation.ENTRY_POINTS)
    return fn(layout)


def generate_building_targets(
    variant: CityLayoutVariant, layout: Layout
) -> PVector[Target]:
    """Building destinations for ``variant``.

    Empty for every variant that defines the operation (``DEFAULT`` and
    ``BORDERED``). ``LINE`` defines nothing and raises
    :class:`UnsupportedVariant` here too, though ``create_city`` already
    fails earlier on the grid length.
    """
    fn = _require(variant, Operation.BUILDING_TARGETS)
    return fn(layout)


register_variant(
    CityLayoutVariant.DEFAULT,
    VariantRules(
        length=default_length,
        classify=classify_default,
        entry_points=default_entry_points,
        building_targets=default_building_targets,
    ),
)
register_variant(
    CityLayoutVariant.BORDERED,
    VariantRules(
        length=bordered_length,
        entry_points=bordered_entry_points,
        building_targets=default_building_targets,
    ),
)
register_variant(CityLayoutVariant.LINE, VariantRules())
