"""Per-family validity tables for column configuration types.

Each table bounds the column width, height and depth for which a
configuration type may be chosen. Families without their own table use the
stand table.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from .value_objects import (
    CONFIGURATION_ORDER,
    ColumnDimensions,
    ConfigurationType,
    FurnitureFamily,
)


@dataclass(frozen=True)
class ConfigurationConstraint:
    """Column dimension bounds for one configuration type.

    Unset bounds are unbounded on that side.
    """

    min_width: float = 0
    max_width: float = math.inf
    min_height: float = 0
    max_height: float = math.inf
    min_depth: float = 0
    max_depth: float = math.inf

    def allows(self, dimensions: ColumnDimensions) -> bool:
        return (
            self.min_width <= dimensions.width <= self.max_width
            and self.min_height <= dimensions.height <= self.max_height
            and self.min_depth <= dimensions.depth <= self.max_depth
        )


@dataclass(frozen=True)
class ConfigurationRuleSet:
    """Validity table for one family.

    Attributes:
        constraints: Bounds per configuration type. Types without an entry
            are always allowed.
        excluded_door_counts: Door counts the family never offers.
    """

    constraints: Mapping[ConfigurationType, ConfigurationConstraint]
    excluded_door_counts: frozenset[int] = field(default_factory=frozenset)

    def is_valid(
        self, config_type: ConfigurationType, dimensions: ColumnDimensions
    ) -> bool:
        """Check whether a configuration type fits a column."""
        if config_type.metadata.door_count in self.excluded_door_counts:
            return False
        constraint = self.constraints.get(config_type)
        if constraint is None:
            return True
        return constraint.allows(dimensions)

    def valid_types(self, dimensions: ColumnDimensions) -> list[ConfigurationType]:
        """All types that fit the column, in nearness order."""
        return [t for t in CONFIGURATION_ORDER if self.is_valid(t, dimensions)]


_C = ConfigurationConstraint
_T = ConfigurationType

_DRAWER_HEIGHTS = {
    _T.DRAWERS_1: (20, 40),
    _T.DRAWERS_2: (40, 60),
    _T.DRAWERS_3: (60, 100),
    _T.DRAWERS_4: (80, 130),
    _T.DRAWERS_5: (100, math.inf),
}

_DOOR_HEIGHTS = {
    1: (25, 60),
    2: (45, 105),
    3: (80, 130),
    4: (105, math.inf),
    5: (140, math.inf),
}

_SINGLE_DOORS = (
    _T.DOOR_1_SHELF,
    _T.DOOR_2_SHELVES,
    _T.DOOR_3_SHELVES,
    _T.DOOR_4_SHELVES,
    _T.DOOR_5_SHELVES,
)

_SPLIT_DOORS = (
    _T.DOOR_SPLIT_1_SHELF,
    _T.DOOR_SPLIT_2_SHELVES,
    _T.DOOR_SPLIT_3_SHELVES,
    _T.DOOR_SPLIT_4_SHELVES,
    _T.DOOR_SPLIT_5_SHELVES,
)


def _drawer_constraints(
    heights: Mapping[ConfigurationType, tuple[float, float]],
) -> dict[ConfigurationType, ConfigurationConstraint]:
    return {
        config_type: _C(min_width=40, min_height=low, max_height=high, min_depth=25)
        for config_type, (low, high) in heights.items()
    }


def _door_constraints(
    types: tuple[ConfigurationType, ...],
    min_width: float,
    max_width: float,
    heights: Mapping[int, tuple[float, float]],
) -> dict[ConfigurationType, ConfigurationConstraint]:
    table = {}
    for config_type in types:
        low, high = heights[config_type.metadata.shelf_count]
        table[config_type] = _C(
            min_width=min_width,
            max_width=max_width,
            min_height=low,
            max_height=high,
            min_depth=25,
        )
    return table


STAND_RULES = ConfigurationRuleSet(
    constraints={
        **_drawer_constraints(_DRAWER_HEIGHTS),
        **_door_constraints(_SINGLE_DOORS, 40, 60, _DOOR_HEIGHTS),
        **_door_constraints(_SPLIT_DOORS, 60, math.inf, _DOOR_HEIGHTS),
    }
)

BEDSIDE_RULES = ConfigurationRuleSet(
    constraints={
        **_drawer_constraints(_DRAWER_HEIGHTS),
        **_door_constraints(_SINGLE_DOORS, 40, 80, {**_DOOR_HEIGHTS, 2: (60, 60)}),
        **_door_constraints(_SPLIT_DOORS, 61, 80, {**_DOOR_HEIGHTS, 2: (45, 60)}),
    }
)

TV_STAND_RULES = ConfigurationRuleSet(
    constraints={
        **_drawer_constraints({**_DRAWER_HEIGHTS, _T.DRAWERS_1: (30, 40)}),
        **_door_constraints(_SINGLE_DOORS, 40, 50, _DOOR_HEIGHTS),
    },
    excluded_door_counts=frozenset({2}),
)

_FAMILY_RULES: dict[FurnitureFamily, ConfigurationRuleSet] = {
    FurnitureFamily.STAND: STAND_RULES,
    FurnitureFamily.BEDSIDE: BEDSIDE_RULES,
    FurnitureFamily.TV_STAND: TV_STAND_RULES,
}


def rules_for_family(family: FurnitureFamily | str) -> ConfigurationRuleSet:
    """Return the validity table for a family, the stand table by default."""
    return _FAMILY_RULES.get(FurnitureFamily(family), STAND_RULES)


def get_valid_configurations(
    dimensions: ColumnDimensions,
    family: FurnitureFamily | str = FurnitureFamily.STAND,
) -> list[ConfigurationType]:
    """List the configuration types that fit a column, in nearness order."""
    return rules_for_family(family).valid_types(dimensions)
