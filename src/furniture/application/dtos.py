"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from furniture.application.config.mapper import FurnitureConfig
from furniture.domain.entities import ColumnConfiguration
from furniture.domain.services import FurnitureLayout, zone_positions
from furniture.domain.value_objects import ColumnDimensions, ConfigurationType


@dataclass(frozen=True)
class ColumnSummary:
    """One stand-like column as read by renderers and price calculators."""

    index: int
    configuration: ColumnConfiguration
    width: float
    hinge_positions: tuple[float, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            **self.configuration.to_dict(),
            "width": round(self.width, 2),
            "hinge_positions": [round(p, 2) for p in self.hinge_positions],
        }


@dataclass
class ConfiguratorOutput:
    """Output DTO of the configurator use case.

    Attributes:
        config: Normalized configuration with a legal column count and one
            valid entry per column.
        valid_column_counts: Legality of every column count at the final dimensions.
        column_dimensions: Interior dimensions of one column.
        columns: Per-column summaries (stand-like families only).
        valid_column_types: Configuration types that fit the columns, in type
            order (stand-like families only).
        query: Shortened shareable-link query.
        query_string: The same query, URL encoded.
    """

    config: FurnitureConfig
    valid_column_counts: dict[int, bool]
    column_dimensions: ColumnDimensions
    columns: list[ColumnSummary] = field(default_factory=list)
    valid_column_types: list[ConfigurationType] = field(default_factory=list)
    query: dict[str, str] = field(default_factory=dict)
    query_string: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": self.config.to_dict(),
            "valid_column_counts": {str(k): v for k, v in self.valid_column_counts.items()},
            "column_dimensions": {
                "width": round(self.column_dimensions.width, 2),
                "height": self.column_dimensions.height,
                "depth": self.column_dimensions.depth,
            },
            "columns": [column.to_dict() for column in self.columns],
            "valid_column_types": [t.value for t in self.valid_column_types],
            "query": self.query,
            "query_string": self.query_string,
        }


@dataclass
class LayoutOutput:
    """Output DTO of the zone layout use case."""

    configurator: ConfiguratorOutput
    layout: FurnitureLayout

    def to_dict(self) -> dict[str, Any]:
        grid = self.layout.grid
        return {
            **self.configurator.to_dict(),
            "grid": (
                None
                if grid is None
                else {
                    "spacing": round(grid.spacing, 4),
                    "positions": [round(p, 4) for p in grid.positions],
                }
            ),
            "layout": [
                {
                    "index": column.index,
                    "template_id": column.template_id,
                    "width": round(column.width, 2),
                    "door_types": [d.value for d in column.door_types],
                    "zones": [zone.to_dict() for zone in column.zones],
                    "positions": [
                        {
                            "zone_index": position.zone_index,
                            "start_y": round(position.start_y, 4),
                            "end_y": round(position.end_y, 4),
                        }
                        for position in zone_positions(column.zones)
                    ],
                    "snaps": [
                        {
                            "zone_index": snap.zone_index,
                            "natural_position": snap.natural_position,
                            "snapped_position": snap.snapped_position,
                        }
                        for snap in column.snaps
                    ],
                }
                for column in self.layout.columns
            ],
        }
