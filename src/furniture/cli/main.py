"""Typer CLI for the furniture configurator."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from furniture.application import (
    ChangeColumnTypeCommand,
    ConfigureFurnitureCommand,
    LayoutCommand,
)
from furniture.application.codecs import get_template_codec
from furniture.application.config import ConfigError, load_constraints
from furniture.cli.commands import templates_app, validate_command
from furniture.domain.constraints import DEFAULT_REGISTRY, ConstraintRegistry
from furniture.domain.exceptions import ConstraintTableError
from furniture.domain.services import family_column_fit, resolve_column_count
from furniture.domain.templates import has_template_catalog
from furniture.domain.value_objects import ConfigurationType, FurnitureFamily

app = typer.Typer(
    name="furniture",
    help="Resolve furniture configurations and shareable links from dimensions.",
)

app.command(name="validate")(validate_command)
app.add_typer(templates_app, name="templates")

FamilyOption = Annotated[
    FurnitureFamily,
    typer.Option("--family", "-F", help="Furniture family"),
]
ConstraintsOption = Annotated[
    Path | None,
    typer.Option("--constraints", "-c", help="JSON constraint override file"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log resolver and codec diagnostics")
    ] = False,
) -> None:
    """Furniture configuration constraint engine."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _registry(constraints: Path | None) -> ConstraintRegistry:
    if constraints is None:
        return DEFAULT_REGISTRY
    try:
        return load_constraints(constraints)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _echo_json(data: dict) -> None:
    typer.echo(json.dumps(data, indent=2))


@app.command()
def normalize(
    query: Annotated[str, typer.Argument(help="Shareable-link query, e.g. 'width=150&colCfg=D1SL'")],
    family: FamilyOption = FurnitureFamily.STAND,
    constraints: ConstraintsOption = None,
) -> None:
    """Resolve a shareable-link query and print the shortened link.

    Out-of-range values are clamped, unknown codes skipped and the column
    configuration array repaired to the final column count.

    Example:
        furniture normalize "width=150&height=90&colCfg=D1SL,DR3" --family stand
    """
    command = ConfigureFurnitureCommand(_registry(constraints))
    try:
        result = command.execute(query, family)
    except ConstraintTableError as e:
        typer.echo(f"Constraint table error: {e}", err=True)
        raise typer.Exit(code=1)

    _echo_json(result.config.to_dict())
    typer.echo()
    typer.echo(f"Query: {result.query_string}")


@app.command(name="set-column")
def set_column(
    query: Annotated[str, typer.Argument(help="Shareable-link query of the current piece")],
    column: Annotated[int, typer.Option("--column", help="Zero-based column index")],
    config_type: Annotated[
        ConfigurationType, typer.Option("--type", help="New configuration type")
    ],
    family: FamilyOption = FurnitureFamily.STAND,
    constraints: ConstraintsOption = None,
) -> None:
    """Change one column's configuration type and print the new link.

    Picking a drawer type gives every other drawer column the same drawer
    count where it fits.

    Example:
        furniture set-column "width=120&colCfg=DR3,D1SL,DR3" --column 0 --type DRAWERS_2
    """
    command = ChangeColumnTypeCommand(_registry(constraints))
    try:
        result = command.execute(query, family, column, config_type)
    except ConstraintTableError as e:
        typer.echo(f"Constraint table error: {e}", err=True)
        raise typer.Exit(code=1)
    except (KeyError, IndexError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for summary in result.columns:
        typer.echo(f"Column {summary.index + 1}: {summary.configuration.type.value}")
    typer.echo()
    typer.echo(f"Query: {result.query_string}")


@app.command()
def columns(
    family: FamilyOption = FurnitureFamily.STAND,
    width: Annotated[int | None, typer.Option("--width", "-w", help="Total width in cm")] = None,
    height: Annotated[
        int | None, typer.Option("--height", "-h", help="Total height in cm")
    ] = None,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Depth in cm")] = None,
    plinth_height: Annotated[
        int | None, typer.Option("--plinth", help="Plinth height in cm")
    ] = None,
    current: Annotated[
        int | None, typer.Option("--current", help="Currently chosen column count")
    ] = None,
    constraints: ConstraintsOption = None,
) -> None:
    """Show which column counts are legal for the given dimensions.

    Missing dimensions take the family defaults. Values are used as given,
    without clamping.

    Example:
        furniture columns --family bedside --width 70 --height 50 --depth 40
    """
    table = _registry(constraints).get(family)
    width = table.width.default if width is None else width
    height = table.height.default if height is None else height
    depth = table.depth.default if depth is None else depth
    plinth_height = table.plinth_height.default if plinth_height is None else plinth_height
    current = table.columns.default if current is None else current

    try:
        chosen, validity = resolve_column_count(
            current, width, height, depth, plinth_height, table, family_column_fit(family)
        )
    except ConstraintTableError as e:
        typer.echo(f"Constraint table error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{family.value} {width}x{height}x{depth} (plinth {plinth_height}):")
    for count, legal in validity.items():
        column_width = width / count
        status = "legal" if legal else "illegal"
        typer.echo(f"  {count} column(s): {column_width:6.1f} cm each - {status}")
    typer.echo()
    typer.echo(f"Chosen column count: {chosen}")


@app.command()
def layout(
    family: FamilyOption = FurnitureFamily.RACK,
    width: Annotated[int | None, typer.Option("--width", "-w", help="Total width in cm")] = None,
    height: Annotated[
        int | None, typer.Option("--height", "-h", help="Total height in cm")
    ] = None,
    depth: Annotated[int | None, typer.Option("--depth", "-d", help="Depth in cm")] = None,
    column_count: Annotated[
        int | None, typer.Option("--columns", help="Requested column count")
    ] = None,
    template: Annotated[
        list[str] | None,
        typer.Option("--template", "-t", help="Template id per column (repeatable)"),
    ] = None,
    no_align: Annotated[
        bool, typer.Option("--no-align", help="Do not snap zones to the master grid")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
    constraints: ConstraintsOption = None,
) -> None:
    """Lay out the zones of every column of a rack, bookcase or shoe rack.

    Example:
        furniture layout --family rack --width 160 --height 200 \\
            --template OPEN_SHELVES_AND_DRAWERS --template HALF_OPEN_HALF_CLOSED
    """
    if not has_template_catalog(family):
        typer.echo(f"Error: {family.value} has no zone layout", err=True)
        raise typer.Exit(code=1)

    query: dict[str, str] = {}
    requested = {"width": width, "height": height, "depth": depth, "columns": column_count}
    for key, value in requested.items():
        if value is not None:
            query[key] = str(value)
    if template:
        query["rackCfg"] = get_template_codec(family).encode(template)

    command = LayoutCommand(_registry(constraints))
    try:
        result = command.execute(query, family, align_to_grid=False if no_align else None)
    except ConstraintTableError as e:
        typer.echo(f"Constraint table error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_json:
        _echo_json(result.to_dict())
        return

    config = result.configurator.config
    dims = result.configurator.column_dimensions
    typer.echo(
        f"{family.value} {config.width}x{config.height}x{config.depth}: "
        f"{config.columns} column(s) of {dims.width:.1f} x {dims.height:g} cm"
    )
    grid = result.layout.grid
    if grid is not None:
        positions = ", ".join(f"{p:.1f}" for p in grid.positions)
        typer.echo(f"Master grid: spacing {grid.spacing:.2f} cm at [{positions}]")
    for column in result.layout.columns:
        typer.echo()
        typer.echo(f"Column {column.index + 1}: {column.template_id}")
        for zone in column.zones:
            line = f"  {zone.type.value:<13} {zone.height:6.1f} cm"
            if zone.shelf_count is not None:
                line += f"  {zone.shelf_count} shelves @ {zone.shelf_spacing:.1f}"
            if zone.drawer_count is not None:
                heights = ", ".join(f"{h:g}" for h in zone.drawer_heights or ())
                line += f"  {zone.drawer_count} drawers [{heights}]"
            if zone.has_door:
                line += "  [door]"
            typer.echo(line)
        for snap in column.snaps:
            if snap.snapped:
                typer.echo(
                    f"  boundary {snap.zone_index}: {snap.natural_position:.1f} -> "
                    f"{snap.snapped_position:.1f}"
                )
    typer.echo()
    typer.echo(f"Query: {result.configurator.query_string}")


if __name__ == "__main__":
    app()
