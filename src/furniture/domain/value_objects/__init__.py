"""Value objects for the furniture domain.

All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Configuration types and metadata
from ._configuration import (
    CONFIGURATION_METADATA,
    CONFIGURATION_ORDER,
    ConfigurationMetadata,
    ConfigurationType,
    DoorOpeningSide,
    FurnitureFamily,
    HingePositionRule,
    OpeningType,
    drawer_type_for_count,
    get_configuration_metadata,
)

# Dimension tables
from ._dimensions import (
    POSSIBLE_COLUMN_COUNTS,
    ColumnCountRange,
    ColumnDimensions,
    DimensionConstraint,
    FamilyConstraints,
    TotalWidthBand,
    TotalWidthRule,
    WidthBand,
    round_half_up,
)

# Zones and templates
from ._zones import (
    DoorSpec,
    DoorType,
    DrawerLayout,
    ShelfLayout,
    Template,
    Zone,
    ZoneDefaults,
    ZonePosition,
    ZoneTemplate,
    ZoneType,
)

__all__ = [
    # Configuration
    "CONFIGURATION_METADATA",
    "CONFIGURATION_ORDER",
    "ConfigurationMetadata",
    "ConfigurationType",
    "DoorOpeningSide",
    "FurnitureFamily",
    "HingePositionRule",
    "OpeningType",
    "drawer_type_for_count",
    "get_configuration_metadata",
    # Dimensions
    "POSSIBLE_COLUMN_COUNTS",
    "ColumnCountRange",
    "ColumnDimensions",
    "DimensionConstraint",
    "FamilyConstraints",
    "TotalWidthBand",
    "TotalWidthRule",
    "WidthBand",
    "round_half_up",
    # Zones
    "DoorSpec",
    "DoorType",
    "DrawerLayout",
    "ShelfLayout",
    "Template",
    "Zone",
    "ZoneDefaults",
    "ZonePosition",
    "ZoneTemplate",
    "ZoneType",
]
