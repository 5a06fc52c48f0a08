"""Door helpers: hinge placement and door style resolution."""

from __future__ import annotations

from ..value_objects import ConfigurationType, DoorSpec, DoorType, HingePositionRule

HINGE_EDGE_OFFSET = 10.0
HINGE_MIDDLE_SHIFT = 5.0

# Template single doors render as split doors from this column width on.
SPLIT_DOOR_MIN_WIDTH = 60.0


def hinge_positions(door_height: float, config_type: ConfigurationType) -> list[float]:
    """Hinge offsets along a door, measured down from its top edge.

    The first and last hinges sit HINGE_EDGE_OFFSET from the top and bottom
    edges. A single middle hinge sits at the centre, or HINGE_MIDDLE_SHIFT
    below it for the offset-middle rule. Any other interior hinges are
    spread evenly.

    Args:
        door_height: Inner height of the door.
        config_type: Configuration type carrying the hinge count and rule.

    Returns:
        One offset per hinge, top to bottom. Empty for drawer types.
    """
    metadata = config_type.metadata
    count = metadata.hinge_count
    positions: list[float] = []
    for index in range(count):
        if index == 0:
            positions.append(HINGE_EDGE_OFFSET)
        elif index == count - 1:
            positions.append(door_height - HINGE_EDGE_OFFSET)
        elif count == 3:
            middle = door_height / 2
            if metadata.hinge_rule is HingePositionRule.OFFSET_MIDDLE:
                middle += HINGE_MIDDLE_SHIFT
            positions.append(middle)
        else:
            positions.append((index + 1) * door_height / (count + 1))
    return positions


def resolve_door_type(door: DoorSpec, column_width: float) -> DoorType:
    """Door style actually built for a template door in a column this wide."""
    if door.type is DoorType.SPLIT or column_width >= SPLIT_DOOR_MIN_WIDTH:
        return DoorType.SPLIT
    return DoorType.SINGLE
