"""Domain services for the furniture constraint engine.

This package provides:
- Column-count legality and fallback selection
- Zone layout calculation for template-based columns
- Master grid alignment across columns
- Configuration fallback resolution
- Door hinge placement
"""

from .column_count import (
    family_column_fit,
    get_valid_column_counts,
    pick_column_count,
    preference_order,
    resolve_column_count,
)
from .doors import hinge_positions, resolve_door_type
from .fallback import (
    ConfigurationFallbackResolver,
    find_nearest_valid_type,
    nearness_order,
    synchronize_drawer_counts,
)
from .master_grid import (
    AlignedColumn,
    FurnitureLayout,
    MasterGrid,
    MasterGridAligner,
    SnapDecision,
    compute_master_grid,
    layout_columns,
)
from .zone_layout import (
    ZoneLayoutCalculator,
    compute_drawer_layout,
    compute_shelf_layout,
    zone_positions,
)

__all__ = [
    # Column count
    "family_column_fit",
    "get_valid_column_counts",
    "pick_column_count",
    "preference_order",
    "resolve_column_count",
    # Doors
    "hinge_positions",
    "resolve_door_type",
    # Fallback
    "ConfigurationFallbackResolver",
    "find_nearest_valid_type",
    "nearness_order",
    "synchronize_drawer_counts",
    # Master grid
    "AlignedColumn",
    "FurnitureLayout",
    "MasterGrid",
    "MasterGridAligner",
    "SnapDecision",
    "compute_master_grid",
    "layout_columns",
    # Zone layout
    "ZoneLayoutCalculator",
    "compute_drawer_layout",
    "compute_shelf_layout",
    "zone_positions",
]
