"""``city-grid`` command: generate a city and print it."""

from __future__ import annotations

import click

from city_grid import __version__
from city_grid.city import create_city_from_config
from city_grid.config import CityConfig, all_presets, find_preset
from city_grid.errors import CityGridError
from city_grid.render import render_text
from city_grid.types import CityLayoutVariant
from city_grid.utils.logging import configure_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="city-grid")
@click.option(
    "--variant",
    type=click.Choice([v.value for v in CityLayoutVariant], case_sensitive=False),
    default=CityLayoutVariant.DEFAULT.value,
    show_default=True,
    help="City layout variant.",
)
@click.option("--blocks-x", type=int, default=2, show_default=True, help="Blocks along X.")
@click.option("--blocks-y", type=int, default=2, show_default=True, help="Blocks along Y.")
@click.option("--block-size", type=int, default=3, show_default=True, help="Block core size.")
@click.option("--preset", default=None, help="Named preset; overrides the layout options.")
@click.option("--list-presets", is_flag=True, help="List presets and exit.")
@click.option("--entry-points", "show_entry_points", is_flag=True, help="Mark entry points on the grid.")
@click.option("--codes", is_flag=True, help="Print numeric tile codes instead of glyphs.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def main(
    variant: str,
    blocks_x: int,
    blocks_y: int,
    block_size: int,
    preset: str | None,
    list_presets: bool,
    show_entry_points: bool,
    codes: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Generate a synthetic city block grid."""
    configure_logging(verbose=verbose, log_json=log_json)

    if list_presets:
        for p in all_presets():
            click.echo(f"{p.name}\t{p.description}")
        return

    if preset is not None:
        found = find_preset(preset)
        if found is None:
            raise click.BadParameter(f"Unknown preset {preset!r}", param_hint="--preset")
        config = found.config
    else:
        config = CityConfig(
            variant=CityLayoutVariant(variant.lower()),
            block_count_x=blocks_x,
            block_count_y=blocks_y,
            block_size=block_size,
        )

    try:
        city = create_city_from_config(config)
    except CityGridError as exc:
        raise click.ClickException(str(exc)) from exc

    if codes:
        for row in city.grid.tile_codes():
            click.echo(" ".join(f"{int(c):2d}" for c in row))
    else:
        click.echo(
            render_text(city.grid, city.entry_points if show_entry_points else None)
        )

    click.echo("")
    click.echo(f"entry points ({city.entry_point_count}):")
    for pos in city.entry_points:
        click.echo(f"  ({pos.x}, {pos.y})")
