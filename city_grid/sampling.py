"""Uniform samplers over a city's entry points and building targets.

These sit on the consumer side of the :class:`~city_grid.city.City`
contract: a simulation places new vehicles at a random entry point and
routes them to a random building target. An empty source is a precondition
violation and raises :class:`~city_grid.errors.DegenerateSampling`.
"""

import random
from typing import Optional, Sequence, TypeVar

from city_grid.city import City
from city_grid.errors import DegenerateSampling
from city_grid.position import Position
from city_grid.types import Target

T = TypeVar("T")


def _pick(items: Sequence[T], source: str, rng: Optional[random.Random]) -> T:
    if len(items) == 0:
        raise DegenerateSampling(source)
    chooser = rng if rng is not None else random
    return items[chooser.randrange(len(items))]


def random_entry_point(city: City, rng: Optional[random.Random] = None) -> Position:
    """Uniformly pick one of ``city.entry_points``."""
    return _pick(city.entry_points, "entry points", rng)


def random_building_target(city: City, rng: Optional[random.Random] = None) -> Target:
    """Uniformly pick one of ``city.building_targets``."""
    return _pick(city.building_targets, "building targets", rng)
