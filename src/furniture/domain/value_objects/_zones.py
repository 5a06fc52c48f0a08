"""Zone, template and layout value objects for rack-like families."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ZoneType(str, Enum):
    """Kinds of vertical zones inside a column.

    Attributes:
        SHELVES: Open adjustable shelves.
        SHELVES_FIXED: Fixed shelves, laid out like SHELVES.
        DRAWERS: A bank of pull-out drawers.
        EMPTY: Open space with no inner parts.
    """

    SHELVES = "SHELVES"
    SHELVES_FIXED = "SHELVES_FIXED"
    DRAWERS = "DRAWERS"
    EMPTY = "EMPTY"

    @property
    def has_shelves(self) -> bool:
        return self in (ZoneType.SHELVES, ZoneType.SHELVES_FIXED)


class DoorType(str, Enum):
    """Door style declared by a template."""

    SINGLE = "single"
    SPLIT = "split"


@dataclass(frozen=True)
class ZoneTemplate:
    """A zone archetype inside a template, before any height is known.

    Spacing and drawer fields left as None fall back to the family's
    zone defaults.

    Attributes:
        type: Zone type.
        height_proportion: Share of the column height, in percent.
        min_height: Minimum height of this zone in cm.
        shelf_min_spacing: Minimum distance between shelves.
        shelf_max_spacing: Maximum distance between shelves.
        shelf_optimal_spacing: Preferred distance between shelves.
        min_shelf_count: Lower bound of an explicit shelf count window.
        max_shelf_count: Upper bound of an explicit shelf count window.
        drawer_min_height: Minimum height of one drawer.
        drawer_max_height: Maximum height of one drawer.
        drawer_optimal_height: Preferred height of one drawer.
        drawer_min_count: Lower bound of an explicit drawer count window.
        drawer_max_count: Upper bound of an explicit drawer count window.
    """

    type: ZoneType
    height_proportion: float
    min_height: float | None = None
    shelf_min_spacing: float | None = None
    shelf_max_spacing: float | None = None
    shelf_optimal_spacing: float | None = None
    min_shelf_count: int | None = None
    max_shelf_count: int | None = None
    drawer_min_height: float | None = None
    drawer_max_height: float | None = None
    drawer_optimal_height: float | None = None
    drawer_min_count: int | None = None
    drawer_max_count: int | None = None

    def __post_init__(self) -> None:
        if self.height_proportion < 0:
            raise ValueError("Height proportion must be non-negative")
        if (
            self.min_shelf_count is not None
            and self.max_shelf_count is not None
            and self.min_shelf_count > self.max_shelf_count
        ):
            raise ValueError("min_shelf_count must not exceed max_shelf_count")
        if (
            self.drawer_min_count is not None
            and self.drawer_max_count is not None
            and self.drawer_min_count > self.drawer_max_count
        ):
            raise ValueError("drawer_min_count must not exceed drawer_max_count")


@dataclass(frozen=True)
class DoorSpec:
    """A door covering one or more zones of a template."""

    zone_indices: tuple[int, ...]
    type: DoorType = DoorType.SINGLE

    def __post_init__(self) -> None:
        if not self.zone_indices:
            raise ValueError("A door must cover at least one zone")


@dataclass(frozen=True)
class Template:
    """A named column archetype: zones as height proportions plus doors.

    Zones are ordered top to bottom. Templates are declared statically per
    family; the engine only instantiates them.

    Attributes:
        id: Stable template identifier.
        name: Display name.
        code: Short code used in shareable links.
        zones: Zone templates, top to bottom.
        doors: Doors and the zone indices they cover.
        min_height: Minimum column height for this template.
        max_height: Maximum column height for this template.
        min_width: Minimum column width for this template.
        max_width: Maximum column width for this template.
        description: Longer description.
        tags: Category tags used for lookup.
        extra_cost: Surcharge read by price calculators.
    """

    id: str
    name: str
    code: str
    zones: tuple[ZoneTemplate, ...]
    doors: tuple[DoorSpec, ...] = ()
    min_height: float = 0
    max_height: float = 9999
    min_width: float = 0
    max_width: float = 9999
    description: str = ""
    tags: tuple[str, ...] = ()
    extra_cost: float = 0

    def __post_init__(self) -> None:
        if not self.zones:
            raise ValueError(f"Template {self.id} must declare at least one zone")
        for door in self.doors:
            for index in door.zone_indices:
                if not 0 <= index < len(self.zones):
                    raise ValueError(
                        f"Template {self.id} door covers unknown zone index {index}"
                    )

    @property
    def proportion_total(self) -> float:
        return sum(zone.height_proportion for zone in self.zones)

    @property
    def door_zone_indices(self) -> frozenset[int]:
        """Indices of every zone covered by any door."""
        return frozenset(i for door in self.doors for i in door.zone_indices)

    def is_covered(self, zone_index: int) -> bool:
        return zone_index in self.door_zone_indices

    def fits(self, width: float, height: float) -> bool:
        """Check whether a column of this size can use the template."""
        return (
            self.min_width <= width <= self.max_width
            and self.min_height <= height <= self.max_height
        )


@dataclass(frozen=True)
class ZoneDefaults:
    """Family-wide fallbacks for zone templates that leave fields unset.

    Attributes:
        door_min_height: Height a door-covered zone is raised to.
        min_zone_height: Height a non-door zone keeps when giving way.
        shelf_min_spacing: Default minimum shelf spacing.
        shelf_max_spacing: Default maximum shelf spacing.
        shelf_optimal_spacing: Default preferred spacing, None for the midpoint.
        drawer_min_height: Default minimum drawer height.
        drawer_max_height: Default maximum drawer height.
        drawer_optimal_height: Default preferred drawer height.
    """

    door_min_height: float
    min_zone_height: float
    shelf_min_spacing: float
    shelf_max_spacing: float
    shelf_optimal_spacing: float | None
    drawer_min_height: float
    drawer_max_height: float
    drawer_optimal_height: float


@dataclass(frozen=True)
class Zone:
    """A concrete zone of a column, with its computed contents.

    Attributes:
        type: Zone type.
        height: Zone height in cm.
        shelf_count: Internal shelves (shelf zones only).
        shelf_spacing: Distance between shelves (shelf zones only).
        drawer_count: Number of drawers (drawer zones only).
        drawer_heights: Individual drawer front heights, bottom to top.
        has_door: Whether a door covers this zone.
    """

    type: ZoneType
    height: float
    shelf_count: int | None = None
    shelf_spacing: float | None = None
    drawer_count: int | None = None
    drawer_heights: tuple[float, ...] | None = None
    has_door: bool = False

    def to_dict(self) -> dict:
        """Serialize to a dictionary, omitting unset optional fields."""
        data: dict = {"type": self.type.value, "height": self.height}
        if self.shelf_count is not None:
            data["shelf_count"] = self.shelf_count
            data["shelf_spacing"] = self.shelf_spacing
        if self.drawer_count is not None:
            data["drawer_count"] = self.drawer_count
            data["drawer_heights"] = list(self.drawer_heights or ())
        data["has_door"] = self.has_door
        return data


@dataclass(frozen=True)
class ZonePosition:
    """Vertical extent of a zone, measured from the plinth top."""

    zone_index: int
    start_y: float
    end_y: float


@dataclass(frozen=True)
class ShelfLayout:
    """Result of the shelf count search."""

    count: int
    spacing: float


@dataclass(frozen=True)
class DrawerLayout:
    """Result of the drawer count search."""

    count: int
    heights: tuple[float, ...] = field(default_factory=tuple)
