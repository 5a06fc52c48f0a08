"""Replacement of column configurations that no longer fit their column.

Nearness between configuration types is their distance in the fixed
ConfigurationType ordering; ties go to the type earlier in the ordering.
Every function here is deterministic for identical inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..column_rules import ConfigurationRuleSet
from ..entities import ColumnConfiguration
from ..value_objects import (
    CONFIGURATION_ORDER,
    ColumnDimensions,
    ConfigurationType,
    drawer_type_for_count,
)

logger = logging.getLogger(__name__)

DEFAULT_NEW_COLUMN_DRAWERS = 3

TypePredicate = Callable[[ConfigurationType], bool]


def nearness_order(config_type: ConfigurationType) -> list[ConfigurationType]:
    """All types sorted by distance from `config_type`, lower index first on ties."""
    origin = config_type.index
    return sorted(
        CONFIGURATION_ORDER,
        key=lambda t: (abs(t.index - origin), t.index),
    )


def find_nearest_valid_type(
    config_type: ConfigurationType, is_valid: TypePredicate
) -> ConfigurationType | None:
    """Return `config_type` if valid, else the nearest valid type, else None."""
    for candidate in nearness_order(config_type):
        if is_valid(candidate):
            return candidate
    return None


def synchronize_drawer_counts(
    configs: Sequence[ColumnConfiguration],
    changed_index: int,
    drawer_count: int,
    is_valid: Callable[[int, ConfigurationType], bool],
) -> list[ColumnConfiguration]:
    """Propagate a drawer count change to every other drawer column.

    Args:
        configs: Current configurations, one per column.
        changed_index: Column whose drawer count was changed.
        drawer_count: The new drawer count.
        is_valid: Predicate (column index, type) -> fits that column.

    Returns:
        New configurations; columns where the new count does not fit keep theirs.
    """
    target = drawer_type_for_count(drawer_count)
    result = list(configs)
    if target is None:
        return result
    for index, config in enumerate(configs):
        if index == changed_index or not config.is_drawer_column:
            continue
        if is_valid(index, target):
            result[index] = ColumnConfiguration(target)
    return result


class ConfigurationFallbackResolver:
    """Keeps a configuration array valid for the current column dimensions.

    Args:
        rules: The family's configuration validity table.
    """

    def __init__(self, rules: ConfigurationRuleSet) -> None:
        self.rules = rules

    def resolve(
        self, config: ColumnConfiguration, dimensions: ColumnDimensions
    ) -> ColumnConfiguration:
        """Return `config` if it still fits, else the nearest valid replacement.

        A single-door replacement keeps the previous door opening side, or
        opens left if there was none. When no type fits at all the
        configuration is returned unchanged.
        """
        if self.rules.is_valid(config.type, dimensions):
            return config

        replacement = find_nearest_valid_type(
            config.type, lambda t: self.rules.is_valid(t, dimensions)
        )
        if replacement is None:
            logger.warning(
                f"No configuration type fits column {dimensions}, keeping {config.type.value}"
            )
            return config

        resolved = ColumnConfiguration.create(replacement, config.door_opening_side)
        logger.info(
            f"Replaced {config.type.value} -> {replacement.value} for column "
            f"{dimensions.width:.1f}x{dimensions.height:.1f}x{dimensions.depth:.1f}"
        )
        return resolved

    def default_configuration(
        self,
        existing: Sequence[ColumnConfiguration],
        dimensions: ColumnDimensions,
    ) -> ColumnConfiguration:
        """Configuration for a newly added column.

        Uses the drawer count of the first existing drawer column (3 when
        there is none), then falls back to the nearest valid type.
        """
        drawer_count = next(
            (c.drawer_count for c in existing if c.is_drawer_column),
            DEFAULT_NEW_COLUMN_DRAWERS,
        )
        config_type = drawer_type_for_count(drawer_count) or ConfigurationType.DRAWERS_3
        return self.resolve(ColumnConfiguration(config_type), dimensions)

    def repair(
        self,
        configs: Sequence[ColumnConfiguration],
        column_count: int,
        dimensions: ColumnDimensions,
    ) -> list[ColumnConfiguration]:
        """Fit a configuration array to a column count and column size.

        Extra entries are truncated, missing ones synthesized with
        default_configuration, and every entry re-validated.
        """
        repaired = [self.resolve(c, dimensions) for c in configs[:column_count]]
        while len(repaired) < column_count:
            repaired.append(self.default_configuration(repaired, dimensions))
        return repaired
