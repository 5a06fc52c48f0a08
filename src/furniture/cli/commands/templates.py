"""Templates commands for browsing column templates.

This module provides the `templates` command group with subcommands for
listing the templates of a template family and showing one in detail.
"""

from typing import Annotated

import typer

from furniture.domain.exceptions import TemplateNotFoundError
from furniture.domain.templates import get_template_catalog, has_template_catalog
from furniture.domain.value_objects import FurnitureFamily

templates_app = typer.Typer(
    name="templates",
    help="Browse column templates of rack, bookcase and shoe-rack families.",
)

FamilyOption = Annotated[
    FurnitureFamily,
    typer.Option("--family", "-F", help="Template family: rack, bookcase or shoe-rack"),
]


def _catalog_or_exit(family: FurnitureFamily):
    if not has_template_catalog(family):
        typer.echo(f"Error: {family.value} has no column templates", err=True)
        raise typer.Exit(code=1)
    return get_template_catalog(family)


@templates_app.command(name="list")
def list_templates(
    family: FamilyOption = FurnitureFamily.RACK,
    tag: Annotated[
        list[str] | None,
        typer.Option("--tag", help="Only templates carrying this tag (repeatable)"),
    ] = None,
    width: Annotated[
        float | None, typer.Option("--width", "-w", help="Only templates fitting this column width")
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Only templates fitting this column height"),
    ] = None,
) -> None:
    """List the templates of a family.

    Examples:
        furniture templates list --family rack
        furniture templates list --family shoe-rack --tag shoes -w 60 -h 40
    """
    catalog = _catalog_or_exit(family)
    templates = list(catalog)
    if tag:
        templates = catalog.by_tags(tag)
    if width is not None:
        templates = [t for t in templates if t.min_width <= width <= t.max_width]
    if height is not None:
        templates = [t for t in templates if t.min_height <= height <= t.max_height]

    typer.echo(f"Templates for {family.value}:")
    typer.echo()
    if not templates:
        typer.echo("  (none)")
        return

    max_id_width = max(len(t.id) for t in templates)
    for template in templates:
        marker = "*" if template.id == catalog.default_template_id else " "
        typer.echo(
            f" {marker}{template.code:<3} {template.id:<{max_id_width}}  - {template.name}"
        )
    typer.echo()
    typer.echo("* default template")


@templates_app.command(name="show")
def show_template(
    template_id: Annotated[str, typer.Argument(help="Template id, e.g. OPEN_SHELVES_AND_DRAWERS")],
    family: FamilyOption = FurnitureFamily.RACK,
) -> None:
    """Show the zones and doors of one template.

    Example:
        furniture templates show OPEN_SHELVES_AND_DRAWERS --family rack
    """
    catalog = _catalog_or_exit(family)
    try:
        template = catalog.get(template_id)
    except TemplateNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Available templates: {', '.join(catalog.ids())}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{template.name} ({template.code})")
    if template.description:
        typer.echo(f"  {template.description}")
    typer.echo(
        f"  Size: width {template.min_width:g}-{template.max_width:g}, "
        f"height {template.min_height:g}-{template.max_height:g}"
    )
    typer.echo("  Zones (top to bottom):")
    for index, zone in enumerate(template.zones):
        door = " [door]" if template.is_covered(index) else ""
        typer.echo(f"    {index}: {zone.type.value} {zone.height_proportion:g}%{door}")
    if template.tags:
        typer.echo(f"  Tags: {', '.join(template.tags)}")
