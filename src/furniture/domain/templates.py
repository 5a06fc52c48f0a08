"""Template catalogues for the rack, bookcase and shoe-rack families.

Zones are listed top to bottom and their height proportions sum to 100.
Catalogues are checked when this module is imported.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import ConstraintTableError, TemplateNotFoundError
from .value_objects import (
    DoorSpec,
    DoorType,
    FurnitureFamily,
    Template,
    ZoneDefaults,
    ZoneTemplate,
    ZoneType,
)

RACK_ZONE_DEFAULTS = ZoneDefaults(
    door_min_height=60,
    min_zone_height=28,
    shelf_min_spacing=28,
    shelf_max_spacing=32,
    shelf_optimal_spacing=30,
    drawer_min_height=15,
    drawer_max_height=25,
    drawer_optimal_height=20,
)

SHOE_RACK_ZONE_DEFAULTS = ZoneDefaults(
    door_min_height=40,
    min_zone_height=18,
    shelf_min_spacing=18,
    shelf_max_spacing=25,
    shelf_optimal_spacing=None,
    drawer_min_height=10,
    drawer_max_height=20,
    drawer_optimal_height=15,
)


@dataclass(frozen=True)
class TemplateCatalog:
    """The templates offered for one family plus its zone defaults."""

    family: FurnitureFamily
    templates: tuple[Template, ...]
    default_template_id: str
    defaults: ZoneDefaults

    def __post_init__(self) -> None:
        ids = [template.id for template in self.templates]
        if len(set(ids)) != len(ids):
            raise ConstraintTableError(f"Duplicate template ids in {self.family.value}")
        codes = [template.code for template in self.templates]
        if len(set(codes)) != len(codes):
            raise ConstraintTableError(f"Duplicate template codes in {self.family.value}")
        if self.default_template_id not in ids:
            raise ConstraintTableError(
                f"Default template {self.default_template_id} missing from {self.family.value}"
            )
        for template in self.templates:
            validate_template(template)

    def __iter__(self):
        return iter(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    @property
    def default_template(self) -> Template:
        return self.get(self.default_template_id)

    def ids(self) -> list[str]:
        return [template.id for template in self.templates]

    def get(self, template_id: str) -> Template:
        """Look up a template by id.

        Raises:
            TemplateNotFoundError: If the id is unknown.
        """
        for template in self.templates:
            if template.id == template_id:
                return template
        raise TemplateNotFoundError(template_id, self.family.value)

    def exists(self, template_id: str) -> bool:
        return any(template.id == template_id for template in self.templates)

    def valid_templates(self, width: float, height: float) -> list[Template]:
        """Templates that fit a column of the given size."""
        return [t for t in self.templates if t.fits(width, height)]

    def by_tags(self, tags: Iterable[str]) -> list[Template]:
        """Templates sharing at least one tag with `tags`."""
        wanted = set(tags)
        return [t for t in self.templates if wanted.intersection(t.tags)]


def validate_template(template: Template) -> None:
    """Check that a template's zone proportions sum to 100.

    Raises:
        ConstraintTableError: If the proportions are off.
    """
    if not math.isclose(template.proportion_total, 100, abs_tol=0.01):
        raise ConstraintTableError(
            f"Template {template.id} zone proportions sum to "
            f"{template.proportion_total}, expected 100"
        )


def _shelves(proportion: float, **kwargs) -> ZoneTemplate:
    params = {"shelf_min_spacing": 28, "shelf_max_spacing": 32, "shelf_optimal_spacing": 30}
    params.update(kwargs)
    return ZoneTemplate(ZoneType.SHELVES, proportion, **params)


_BOTTOM_DOOR = (DoorSpec(zone_indices=(1,), type=DoorType.SINGLE),)
_FULL_DOOR = (DoorSpec(zone_indices=(0,), type=DoorType.SINGLE),)

_OPEN_SHELVES_ONLY = Template(
    id="OPEN_SHELVES_ONLY",
    name="Open Shelves Only",
    code="OS",
    description="Multiple open shelves for books and display items",
    zones=(_shelves(100),),
    min_width=40,
    max_width=100,
    tags=("display", "books", "open"),
    extra_cost=200,
)

_SHELVES_WITH_FULL_DOOR = Template(
    id="SHELVES_WITH_FULL_DOOR",
    name="Shelves with Full Door",
    code="FD",
    description="Shelves enclosed behind full-height door for clean look",
    zones=(_shelves(100),),
    doors=_FULL_DOOR,
    min_width=40,
    max_width=100,
    tags=("enclosed", "storage", "clean"),
    extra_cost=800,
)

_HALF_OPEN_HALF_CLOSED = Template(
    id="HALF_OPEN_HALF_CLOSED",
    name="Half Open, Half Closed",
    code="HC",
    description="Top shelves open for display, bottom shelves with door",
    zones=(_shelves(50), _shelves(50)),
    doors=_BOTTOM_DOOR,
    min_width=40,
    max_width=100,
    tags=("mixed", "display", "storage"),
    extra_cost=600,
)

RACK_CATALOG = TemplateCatalog(
    family=FurnitureFamily.RACK,
    default_template_id="OPEN_SHELVES_ONLY",
    defaults=RACK_ZONE_DEFAULTS,
    templates=(
        _OPEN_SHELVES_ONLY,
        _SHELVES_WITH_FULL_DOOR,
        _HALF_OPEN_HALF_CLOSED,
        Template(
            id="OPEN_AND_BOTTOM_CLOSED",
            name="Open and Bottom Closed",
            code="OBC",
            description="Top shelves open for display, bottom shelves closed",
            zones=(_shelves(70), _shelves(30)),
            doors=_BOTTOM_DOOR,
            min_height=140,
            min_width=40,
            max_width=100,
            tags=("mixed", "display", "storage"),
            extra_cost=600,
        ),
        Template(
            id="OPEN_AND_SMALL_BOTTOM_CLOSED",
            name="Open and Small Bottom Closed",
            code="OSC",
            description="Top shelves open for display, only 1 shelf at the bottom closed",
            zones=(
                _shelves(90),
                ZoneTemplate(ZoneType.SHELVES, 10, min_height=20),
            ),
            doors=_BOTTOM_DOOR,
            min_width=40,
            max_width=100,
            tags=("mixed", "display", "storage"),
            extra_cost=600,
        ),
        Template(
            id="OPEN_SHELVES_AND_DRAWERS",
            name="Shelves with Drawers",
            code="ODS",
            description="Open shelves on top with drawers at bottom for storage",
            zones=(
                _shelves(50),
                ZoneTemplate(
                    ZoneType.DRAWERS,
                    50,
                    min_height=60,
                    drawer_min_height=15,
                    drawer_max_height=30,
                    drawer_optimal_height=30,
                ),
            ),
            min_width=40,
            max_width=100,
            tags=("drawers", "storage", "versatile"),
            extra_cost=1500,
        ),
        Template(
            id="OPEN_SHELVES_AND_BOTTOM_DRAWERS",
            name="Shelves with Bottom Drawers",
            code="OBD",
            description="Open shelves on top with a low bank of drawers at the bottom",
            zones=(
                _shelves(70),
                ZoneTemplate(
                    ZoneType.DRAWERS,
                    30,
                    min_height=60,
                    drawer_min_height=15,
                    drawer_max_height=30,
                    drawer_optimal_height=30,
                ),
            ),
            min_width=40,
            max_width=100,
            tags=("drawers", "storage", "versatile"),
            extra_cost=1500,
        ),
    ),
)

_BOOKCASE_DRAWERS = ZoneTemplate(
    ZoneType.DRAWERS,
    50,
    min_height=60,
    drawer_min_height=15,
    drawer_max_height=25,
    drawer_optimal_height=20,
)

BOOKCASE_CATALOG = TemplateCatalog(
    family=FurnitureFamily.BOOKCASE,
    default_template_id="OPEN_SHELVES_ONLY",
    defaults=RACK_ZONE_DEFAULTS,
    templates=(
        _OPEN_SHELVES_ONLY,
        _SHELVES_WITH_FULL_DOOR,
        _HALF_OPEN_HALF_CLOSED,
        Template(
            id="OPEN_SHELVES_AND_DRAWERS",
            name="Shelves with Drawers",
            code="DS",
            description="Open shelves on top with drawers at bottom for storage",
            zones=(_shelves(50), _BOOKCASE_DRAWERS),
            min_width=40,
            max_width=100,
            tags=("drawers", "storage", "versatile"),
            extra_cost=1500,
        ),
        Template(
            id="SHELVES_AND_CLOSED_DRAWERS",
            name="Mixed Storage",
            code="MS",
            description="Combination of open shelves and enclosed drawers",
            zones=(_shelves(50), _BOOKCASE_DRAWERS),
            doors=_BOTTOM_DOOR,
            min_width=40,
            max_width=100,
            tags=("mixed", "drawers", "storage"),
            extra_cost=1800,
        ),
    ),
)

_ONE_ROW = {"min_height": 29, "max_height": 45, "min_width": 0, "max_width": 1000}
_TWO_ROWS = {"min_height": 46, "max_height": 85, "min_width": 0, "max_width": 1000}
_SHOE_TAGS = ("display", "shoes", "open")

SHOE_RACK_CATALOG = TemplateCatalog(
    family=FurnitureFamily.SHOE_RACK,
    default_template_id="ONE_ROW_EMPTY",
    defaults=SHOE_RACK_ZONE_DEFAULTS,
    templates=(
        Template(
            id="ONE_ROW_EMPTY",
            name="One Row Empty",
            code="E1",
            description="One open row for shoes",
            zones=(ZoneTemplate(ZoneType.EMPTY, 100),),
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_ONE_ROW,
        ),
        Template(
            id="ONE_ROW_DOOR",
            name="One Row Door",
            code="D1",
            description="One row for shoes behind a door",
            zones=(ZoneTemplate(ZoneType.EMPTY, 100),),
            doors=_FULL_DOOR,
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_ONE_ROW,
        ),
        Template(
            id="ONE_ROW_DRAWER",
            name="One Row Drawer",
            code="R1",
            description="One row of empty space for shoes with drawer",
            zones=(
                ZoneTemplate(
                    ZoneType.DRAWERS,
                    100,
                    drawer_min_height=28,
                    drawer_max_height=45,
                    drawer_optimal_height=40,
                    drawer_min_count=1,
                    drawer_max_count=1,
                ),
            ),
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_ONE_ROW,
        ),
        Template(
            id="TWO_ROWS_SHELVES",
            name="Two Rows Shelves",
            code="S2",
            description="Two open rows split by a single shelf",
            zones=(
                ZoneTemplate(ZoneType.SHELVES, 100, min_shelf_count=1, max_shelf_count=1),
            ),
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_TWO_ROWS,
        ),
        Template(
            id="TWO_ROWS_DOOR",
            name="Two Rows Door",
            code="D2",
            description="Two rows for shoes behind a door",
            zones=(ZoneTemplate(ZoneType.EMPTY, 100),),
            doors=_FULL_DOOR,
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_TWO_ROWS,
        ),
        Template(
            id="TWO_ROWS_DRAWER",
            name="Two Rows Drawer",
            code="R2",
            description="Two rows of empty space for shoes with drawer",
            zones=(
                ZoneTemplate(ZoneType.DRAWERS, 100, drawer_min_count=2, drawer_max_count=2),
            ),
            tags=_SHOE_TAGS,
            extra_cost=150,
            **_TWO_ROWS,
        ),
        Template(
            id="SHELVES_WITH_FULL_DOOR",
            name="Shelves with Full Door",
            code="FD",
            description="Shelves enclosed behind full-height door for clean look",
            zones=(
                ZoneTemplate(
                    ZoneType.SHELVES,
                    100,
                    shelf_min_spacing=18,
                    shelf_max_spacing=25,
                    shelf_optimal_spacing=20,
                ),
            ),
            doors=_FULL_DOOR,
            min_width=30,
            max_width=100,
            tags=("enclosed", "storage", "clean"),
            extra_cost=700,
        ),
    ),
)

_CATALOGS: dict[FurnitureFamily, TemplateCatalog] = {
    FurnitureFamily.RACK: RACK_CATALOG,
    FurnitureFamily.BOOKCASE: BOOKCASE_CATALOG,
    FurnitureFamily.SHOE_RACK: SHOE_RACK_CATALOG,
}

# Families whose columns are aligned to one shared shelf grid.
GRID_ALIGNED_FAMILIES: frozenset[FurnitureFamily] = frozenset(
    {FurnitureFamily.RACK, FurnitureFamily.BOOKCASE}
)


def has_template_catalog(family: FurnitureFamily | str) -> bool:
    return FurnitureFamily(family) in _CATALOGS


def get_template_catalog(family: FurnitureFamily | str) -> TemplateCatalog:
    """Return the template catalogue of a family.

    Raises:
        KeyError: If the family is not template based.
    """
    return _CATALOGS[FurnitureFamily(family)]
