"""Domain entities held by the configurator state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .value_objects import ConfigurationType, DoorOpeningSide


@dataclass(frozen=True)
class ColumnConfiguration:
    """Interior configuration of one physical column.

    A door opening side is required for single-door types and forbidden for
    every other type, so absence of the side always means "this type takes
    no side" and is preserved exactly through the codec.

    Attributes:
        type: The configuration archetype.
        door_opening_side: Hinge side, only for single-door types.
    """

    type: ConfigurationType
    door_opening_side: DoorOpeningSide | None = None

    def __post_init__(self) -> None:
        takes_side = self.type.metadata.has_single_door
        if takes_side and self.door_opening_side is None:
            raise ValueError(f"{self.type.value} requires a door opening side")
        if not takes_side and self.door_opening_side is not None:
            raise ValueError(f"{self.type.value} takes no door opening side")

    @classmethod
    def create(
        cls,
        config_type: ConfigurationType,
        side: DoorOpeningSide | None = None,
    ) -> "ColumnConfiguration":
        """Build a configuration, fitting the side to the type.

        Single-door types default to a left opening side; the side is
        dropped for types that take none.
        """
        if config_type.metadata.has_single_door:
            return cls(config_type, side or DoorOpeningSide.LEFT)
        return cls(config_type)

    @property
    def drawer_count(self) -> int:
        return self.type.metadata.drawer_count

    @property
    def is_drawer_column(self) -> bool:
        return self.type.metadata.door_count == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary; the side key is present only when set."""
        data: dict[str, Any] = {"type": self.type.value}
        if self.door_opening_side is not None:
            data["door_opening_side"] = self.door_opening_side.value
        return data
