"""City generation settings and named presets.

:class:`CityConfig` is the frozen settings record a caller (or the CLI)
builds a city from. Presets are registered by name so front ends can list
them in a stable order.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional

from city_grid.layout import Layout
from city_grid.types import CityLayoutVariant
from city_grid.variants import coerce_variant


@dataclass(frozen=True)
class CityConfig:
    variant: CityLayoutVariant = CityLayoutVariant.DEFAULT
    block_count_x: int = 2
    block_count_y: int = 2
    block_size: int = 3
    strict: bool = True

    @property
    def layout(self) -> Layout:
        return Layout(self.block_count_x, self.block_count_y, self.block_size)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CityConfig":
        """Build a config from plain data (e.g. parsed JSON or TOML).

        Raises:
            ValueError: Unknown keys.
            UnsupportedVariant: Unknown variant name.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        values = dict(data)
        if "variant" in values:
            values["variant"] = coerce_variant(values["variant"])
        return cls(**values)


@dataclass(frozen=True)
class CityPreset:
    """Named configuration.

    Attributes:
        name: Identifier used on the command line.
        description: One-line summary shown in listings.
        config: The settings to build.
    """

    name: str
    description: str
    config: CityConfig


_PRESET_REGISTRY: Dict[str, CityPreset] = {}


def register_preset(preset: CityPreset) -> None:
    # Re-registering a name replaces the previous entry.
    _PRESET_REGISTRY[preset.name] = preset


def find_preset(name: str) -> Optional[CityPreset]:
    return _PRESET_REGISTRY.get(name)


def all_presets() -> List[CityPreset]:
    """Registered presets sorted by name."""
    return sorted(_PRESET_REGISTRY.values(), key=lambda p: p.name.lower())


register_preset(
    CityPreset(
        name="reference",
        description="2 x 2 blocks of size 3 (10 x 10 tiles)",
        config=CityConfig(CityLayoutVariant.DEFAULT, 2, 2, 3),
    )
)
register_preset(
    CityPreset(
        name="single-block",
        description="One block of size 3; no entry points",
        config=CityConfig(CityLayoutVariant.DEFAULT, 1, 1, 3),
    )
)
register_preset(
    CityPreset(
        name="district",
        description="4 x 3 blocks of size 5",
        config=CityConfig(CityLayoutVariant.DEFAULT, 4, 3, 5),
    )
)
