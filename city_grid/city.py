"""City aggregate.

:class:`City` bundles the layout, the classified :class:`TileGrid`, the
entry points and the building targets into one frozen value. It is built
once by :func:`create_city` and never changes afterwards, so any number of
readers may share it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog
from pyrsistent.typing import PVector

from city_grid.grid import TileGrid, build_grid
from city_grid.layout import Layout
from city_grid.position import Position
from city_grid.types import CityLayoutVariant, Target
from city_grid.variants import (
    coerce_variant,
    generate_building_targets,
    generate_entry_points,
)

if TYPE_CHECKING:
    from city_grid.config import CityConfig

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class City:
    """Immutable generated city.

    Attributes:
        variant: Layout family the city was built with.
        layout: Block parameters.
        grid: Classified tiles, ``grid[x, y]``.
        entry_points: Ordered border entry coordinates (may be empty).
        building_targets: Building destinations (currently always empty).
    """

    variant: CityLayoutVariant
    layout: Layout
    grid: TileGrid
    entry_points: PVector[Position]
    building_targets: PVector[Target]

    @property
    def length_x(self) -> int:
        return self.grid.rows

    @property
    def length_y(self) -> int:
        return self.grid.columns

    @property
    def entry_point_count(self) -> int:
        return len(self.entry_points)

    @property
    def building_target_count(self) -> int:
        return len(self.building_targets)

    @property
    def has_entry_points(self) -> bool:
        return self.entry_point_count > 0

    @property
    def has_building_targets(self) -> bool:
        return self.building_target_count > 0


def create_city(
    variant: CityLayoutVariant,
    block_count_x: int,
    block_count_y: int,
    block_size: int,
    strict: bool = True,
) -> City:
    """Generate a city.

    Arguments:
        variant: Layout family, or its name.
        block_count_x: Blocks along the X (row) axis.
        block_count_y: Blocks along the Y (column) axis.
        block_size: Building core side length.
        strict: Fail on any ``Unknown`` cell (see :func:`build_grid`).

    Raises:
        InvalidLayout: A parameter is not a positive integer.
        UnsupportedVariant: ``variant`` is not a known layout family, or does
            not implement an operation the build needs.
        ClassificationGap: ``strict`` and some cell classified to ``Unknown``.
    """
    variant = coerce_variant(variant)
    layout = Layout(block_count_x, block_count_y, block_size)
    grid = build_grid(variant, layout, strict=strict)
    entry_points = generate_entry_points(variant, layout)
    building_targets = generate_building_targets(variant, layout)

    logger.debug(
        "city.built",
        variant=str(variant),
        rows=grid.rows,
        columns=grid.columns,
        entry_points=len(entry_points),
        building_targets=len(building_targets),
    )
    if not entry_points:
        logger.warning(
            "city.no_entry_points",
            variant=str(variant),
            block_count_x=layout.block_count_x,
            block_count_y=layout.block_count_y,
        )
    return City(
        variant=variant,
        layout=layout,
        grid=grid,
        entry_points=entry_points,
        building_targets=building_targets,
    )


def create_city_from_config(config: "CityConfig") -> City:
    """Build a city from a :class:`~city_grid.config.CityConfig`."""
    layout = config.layout
    return create_city(
        config.variant,
        layout.block_count_x,
        layout.block_count_y,
        layout.block_size,
        strict=config.strict,
    )
