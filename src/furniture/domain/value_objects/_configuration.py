"""Column configuration types and their static metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..exceptions import ConstraintTableError


class FurnitureFamily(str, Enum):
    """Furniture product families supported by the engine."""

    STAND = "stand"
    BEDSIDE = "bedside"
    TV_STAND = "tv-stand"
    WARDROBE = "wardrobe"
    RACK = "rack"
    BOOKCASE = "bookcase"
    SHOE_RACK = "shoe-rack"


class ConfigurationType(str, Enum):
    """Closed set of column interior archetypes.

    Member order is significant: it is the linear "nearness" ordering used
    when an invalid configuration has to be replaced by a valid one.

    Attributes:
        DRAWERS_1..DRAWERS_5: N equal drawers, no shelves.
        DOOR_1_SHELF..DOOR_5_SHELVES: One door covering N internal shelves.
        DOOR_SPLIT_1_SHELF..DOOR_SPLIT_5_SHELVES: Two doors covering N shelves.
    """

    DRAWERS_1 = "DRAWERS_1"
    DRAWERS_2 = "DRAWERS_2"
    DRAWERS_3 = "DRAWERS_3"
    DRAWERS_4 = "DRAWERS_4"
    DRAWERS_5 = "DRAWERS_5"
    DOOR_1_SHELF = "DOOR_1_SHELF"
    DOOR_2_SHELVES = "DOOR_2_SHELVES"
    DOOR_3_SHELVES = "DOOR_3_SHELVES"
    DOOR_4_SHELVES = "DOOR_4_SHELVES"
    DOOR_5_SHELVES = "DOOR_5_SHELVES"
    DOOR_SPLIT_1_SHELF = "DOOR_SPLIT_1_SHELF"
    DOOR_SPLIT_2_SHELVES = "DOOR_SPLIT_2_SHELVES"
    DOOR_SPLIT_3_SHELVES = "DOOR_SPLIT_3_SHELVES"
    DOOR_SPLIT_4_SHELVES = "DOOR_SPLIT_4_SHELVES"
    DOOR_SPLIT_5_SHELVES = "DOOR_SPLIT_5_SHELVES"

    @property
    def metadata(self) -> ConfigurationMetadata:
        """Static metadata for this configuration type."""
        return get_configuration_metadata(self)

    @property
    def index(self) -> int:
        """Position of this type in the nearness ordering."""
        return CONFIGURATION_ORDER.index(self)


class DoorOpeningSide(str, Enum):
    """Hinge side of a single door."""

    LEFT = "left"
    RIGHT = "right"


class HingePositionRule(str, Enum):
    """How interior hinges are placed along a door.

    Attributes:
        EVEN: Interior hinges evenly spaced, a single middle hinge at centre.
        OFFSET_MIDDLE: Middle hinge shifted below the centre line.
    """

    EVEN = "even"
    OFFSET_MIDDLE = "offset-middle"


class OpeningType(str, Enum):
    """Door and drawer front opening hardware."""

    PUSH = "push"
    ROUND = "round"
    PROFILE = "profile"


@dataclass(frozen=True)
class ConfigurationMetadata:
    """Fixed properties of a configuration type.

    Attributes:
        drawer_count: Number of drawers in the column.
        shelf_count: Number of internal shelves behind the door(s).
        door_count: 0 for drawer columns, 1 for single door, 2 for split doors.
        hinge_count: Hinges per door (0 when there is no door).
        hinge_rule: Hinge placement rule, None when there is no door.
    """

    drawer_count: int
    shelf_count: int
    door_count: int
    hinge_count: int
    hinge_rule: HingePositionRule | None

    def __post_init__(self) -> None:
        if self.door_count not in (0, 1, 2):
            raise ValueError("Door count must be 0, 1 or 2")
        if self.door_count and self.hinge_rule is None:
            raise ValueError("Door-bearing types need a hinge rule")

    @property
    def has_single_door(self) -> bool:
        """True when the type takes a door opening side."""
        return self.door_count == 1


CONFIGURATION_ORDER: tuple[ConfigurationType, ...] = tuple(ConfigurationType)

_EVEN = HingePositionRule.EVEN
_OFFSET = HingePositionRule.OFFSET_MIDDLE

CONFIGURATION_METADATA: dict[ConfigurationType, ConfigurationMetadata] = {
    ConfigurationType.DRAWERS_1: ConfigurationMetadata(1, 0, 0, 0, None),
    ConfigurationType.DRAWERS_2: ConfigurationMetadata(2, 0, 0, 0, None),
    ConfigurationType.DRAWERS_3: ConfigurationMetadata(3, 0, 0, 0, None),
    ConfigurationType.DRAWERS_4: ConfigurationMetadata(4, 0, 0, 0, None),
    ConfigurationType.DRAWERS_5: ConfigurationMetadata(5, 0, 0, 0, None),
    ConfigurationType.DOOR_1_SHELF: ConfigurationMetadata(0, 1, 1, 2, _EVEN),
    ConfigurationType.DOOR_2_SHELVES: ConfigurationMetadata(0, 2, 1, 3, _EVEN),
    ConfigurationType.DOOR_3_SHELVES: ConfigurationMetadata(0, 3, 1, 3, _OFFSET),
    ConfigurationType.DOOR_4_SHELVES: ConfigurationMetadata(0, 4, 1, 3, _EVEN),
    ConfigurationType.DOOR_5_SHELVES: ConfigurationMetadata(0, 5, 1, 3, _OFFSET),
    ConfigurationType.DOOR_SPLIT_1_SHELF: ConfigurationMetadata(0, 1, 2, 2, _EVEN),
    ConfigurationType.DOOR_SPLIT_2_SHELVES: ConfigurationMetadata(0, 2, 2, 3, _EVEN),
    ConfigurationType.DOOR_SPLIT_3_SHELVES: ConfigurationMetadata(0, 3, 2, 3, _OFFSET),
    ConfigurationType.DOOR_SPLIT_4_SHELVES: ConfigurationMetadata(0, 4, 2, 3, _EVEN),
    ConfigurationType.DOOR_SPLIT_5_SHELVES: ConfigurationMetadata(0, 5, 2, 3, _OFFSET),
}


def get_configuration_metadata(config_type: ConfigurationType) -> ConfigurationMetadata:
    """Look up the metadata for a configuration type.

    Raises:
        ConstraintTableError: If the type has no metadata entry.
    """
    try:
        return CONFIGURATION_METADATA[config_type]
    except KeyError:
        raise ConstraintTableError(
            f"Configuration type {config_type!r} has no metadata entry"
        ) from None


def drawer_type_for_count(count: int) -> ConfigurationType | None:
    """Return the DRAWERS_N type for a drawer count, or None if out of range."""
    for config_type in CONFIGURATION_ORDER:
        metadata = CONFIGURATION_METADATA[config_type]
        if metadata.door_count == 0 and metadata.drawer_count == count:
            return config_type
    return None


def _check_metadata_table() -> None:
    missing = [t.value for t in ConfigurationType if t not in CONFIGURATION_METADATA]
    if missing:
        raise ConstraintTableError(
            f"Configuration types without metadata: {', '.join(missing)}"
        )


_check_metadata_table()
