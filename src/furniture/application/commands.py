"""Application commands (use cases) for the furniture configurator."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from furniture.application.config.mapper import (
    FurnitureConfig,
    config_to_query,
    config_to_query_string,
    normalize_config,
    parse_query_to_config,
)
from furniture.domain.column_rules import get_valid_configurations, rules_for_family
from furniture.domain.constraints import DEFAULT_REGISTRY, ConstraintRegistry
from furniture.domain.entities import ColumnConfiguration
from furniture.domain.services import (
    ConfigurationFallbackResolver,
    family_column_fit,
    hinge_positions,
    layout_columns,
    resolve_column_count,
    synchronize_drawer_counts,
)
from furniture.domain.templates import (
    GRID_ALIGNED_FAMILIES,
    TemplateCatalog,
    get_template_catalog,
    has_template_catalog,
)
from furniture.domain.services.zone_layout import ZoneLayoutCalculator
from furniture.domain.value_objects import ColumnDimensions, ConfigurationType, FurnitureFamily

from .dtos import ColumnSummary, ConfiguratorOutput, LayoutOutput

logger = logging.getLogger(__name__)

# Families whose columns carry a ColumnConfiguration (the colCfg parameter).
COLUMN_CONFIGURATION_FAMILIES: frozenset[FurnitureFamily] = frozenset(
    {FurnitureFamily.STAND, FurnitureFamily.BEDSIDE, FurnitureFamily.TV_STAND}
)


def repair_templates(
    template_ids: Sequence[str],
    column_count: int,
    dimensions: ColumnDimensions,
    catalog: TemplateCatalog,
) -> list[str]:
    """Fit a template id list to a column count and column size.

    Extra ids are truncated and missing ones take the default template.
    Templates that do not fit the column are replaced by the default
    template, or by the first fitting template when the default does not
    fit either. When nothing fits, known ids are kept as they are.
    """
    fitting_ids = [t.id for t in catalog.valid_templates(dimensions.width, dimensions.height)]
    if catalog.default_template_id in fitting_ids or not fitting_ids:
        fallback = catalog.default_template_id
    else:
        fallback = fitting_ids[0]

    repaired: list[str] = []
    for template_id in list(template_ids)[:column_count]:
        if not catalog.exists(template_id):
            repaired.append(fallback)
            continue
        if template_id in fitting_ids or not fitting_ids:
            repaired.append(template_id)
            continue
        logger.info(
            f"Replaced template {template_id} -> {fallback} for column "
            f"{dimensions.width:.1f}x{dimensions.height:.1f}"
        )
        repaired.append(fallback)
    while len(repaired) < column_count:
        repaired.append(fallback)
    return repaired


class ConfigureFurnitureCommand:
    """Turn an untrusted shareable-link query into a complete configuration.

    Steps: parse, normalize, settle on a legal column count, then repair
    the per-column configuration array for the resulting column size.
    Malformed input never raises; only an incoherent constraint table does.

    Args:
        registry: Family constraint tables to use.
    """

    def __init__(self, registry: ConstraintRegistry = DEFAULT_REGISTRY) -> None:
        self.registry = registry

    def execute(
        self, query: Mapping[str, Any] | str, family: FurnitureFamily | str
    ) -> ConfiguratorOutput:
        """Execute the configurator use case.

        Args:
            query: Raw query string or mapping of query keys to values.
            family: Furniture family of the link.

        Returns:
            ConfiguratorOutput with the resolved configuration and its short query.

        Raises:
            ConstraintTableError: If no column count is legal for the dimensions.
        """
        family = FurnitureFamily(family)
        constraints = self.registry.get(family)
        config = normalize_config(parse_query_to_config(query, family, constraints), constraints)
        return self.resolve(config)

    def resolve(self, config: FurnitureConfig) -> ConfiguratorOutput:
        """Settle column count and per-column content of a normalized config."""
        family = config.family
        constraints = self.registry.get(family)

        column_count, validity = resolve_column_count(
            config.columns,
            config.width,
            config.height,
            config.depth,
            config.plinth_height,
            constraints,
            family_column_fit(family),
        )
        dimensions = constraints.column_dimensions(
            config.width, config.height, config.depth, config.plinth_height, column_count
        )

        changes: dict[str, Any] = {"columns": column_count}
        summaries: list[ColumnSummary] = []
        valid_types: list[ConfigurationType] = []
        if family in COLUMN_CONFIGURATION_FAMILIES:
            resolver = ConfigurationFallbackResolver(rules_for_family(family))
            configurations = resolver.repair(
                config.column_configurations, column_count, dimensions
            )
            changes["column_configurations"] = tuple(configurations)
            valid_types = get_valid_configurations(dimensions, family)
            summaries = [
                ColumnSummary(
                    index=index,
                    configuration=configuration,
                    width=dimensions.width,
                    hinge_positions=tuple(
                        hinge_positions(dimensions.height, configuration.type)
                    ),
                )
                for index, configuration in enumerate(configurations)
            ]
        elif has_template_catalog(family):
            changes["rack_templates"] = tuple(
                repair_templates(
                    config.rack_templates,
                    column_count,
                    dimensions,
                    get_template_catalog(family),
                )
            )

        resolved = replace(config, **changes)
        return ConfiguratorOutput(
            config=resolved,
            valid_column_counts=validity,
            column_dimensions=dimensions,
            columns=summaries,
            valid_column_types=valid_types,
            query=config_to_query(resolved, constraints),
            query_string=config_to_query_string(resolved, constraints),
        )


class LayoutCommand:
    """Compute the zone layout of every column of a template family.

    Args:
        registry: Family constraint tables to use.
    """

    def __init__(self, registry: ConstraintRegistry = DEFAULT_REGISTRY) -> None:
        self.configurator = ConfigureFurnitureCommand(registry)

    def execute(
        self,
        query: Mapping[str, Any] | str,
        family: FurnitureFamily | str,
        align_to_grid: bool | None = None,
    ) -> LayoutOutput:
        """Execute the layout use case.

        Args:
            query: Raw query string or mapping of query keys to values.
            family: A template family (rack, bookcase or shoe-rack).
            align_to_grid: Snap door and drawer boundaries to a master grid.
                Defaults to True for rack and bookcase.

        Returns:
            LayoutOutput with the configuration and the aligned layout.

        Raises:
            KeyError: If the family has no template catalogue.
        """
        family = FurnitureFamily(family)
        catalog = get_template_catalog(family)
        configured = self.configurator.execute(query, family)
        if align_to_grid is None:
            align_to_grid = family in GRID_ALIGNED_FAMILIES

        dimensions = configured.column_dimensions
        layout = layout_columns(
            [catalog.get(template_id) for template_id in configured.config.rack_templates],
            dimensions.width,
            dimensions.height,
            ZoneLayoutCalculator(catalog.defaults),
            align_to_grid=align_to_grid,
        )
        return LayoutOutput(configurator=configured, layout=layout)


class ChangeColumnTypeCommand:
    """Change the configuration type of one column of a stand-like piece.

    Choosing a drawer type sets the same drawer count on every other
    drawer column that can take it. A single-door type keeps the column's
    previous door side, or opens left.

    Args:
        registry: Family constraint tables to use.
    """

    def __init__(self, registry: ConstraintRegistry = DEFAULT_REGISTRY) -> None:
        self.configurator = ConfigureFurnitureCommand(registry)

    def execute(
        self,
        query: Mapping[str, Any] | str,
        family: FurnitureFamily | str,
        column_index: int,
        config_type: ConfigurationType,
    ) -> ConfiguratorOutput:
        """Execute the column type change use case.

        Args:
            query: Raw query string or mapping of query keys to values.
            family: A stand-like family (stand, bedside or tv-stand).
            column_index: Zero-based column to change, after column count resolution.
            config_type: The new configuration type.

        Returns:
            ConfiguratorOutput of the changed configuration.

        Raises:
            KeyError: If the family has no per-column configurations.
            IndexError: If the column does not exist.
            ValueError: If the type does not fit the column.
        """
        family = FurnitureFamily(family)
        if family not in COLUMN_CONFIGURATION_FAMILIES:
            raise KeyError(f"{family.value} has no column configurations")

        configured = self.configurator.execute(query, family)
        configs = list(configured.config.column_configurations)
        if not 0 <= column_index < len(configs):
            raise IndexError(
                f"Column {column_index} does not exist, the piece has {len(configs)} column(s)"
            )

        rules = rules_for_family(family)
        dimensions = configured.column_dimensions
        if not rules.is_valid(config_type, dimensions):
            raise ValueError(
                f"{config_type.value} does not fit a column of "
                f"{dimensions.width:.1f}x{dimensions.height:.1f}x{dimensions.depth:.1f}"
            )

        configs[column_index] = ColumnConfiguration.create(
            config_type, configs[column_index].door_opening_side
        )
        if config_type.metadata.door_count == 0:
            configs = synchronize_drawer_counts(
                configs,
                column_index,
                config_type.metadata.drawer_count,
                lambda index, candidate: rules.is_valid(candidate, dimensions),
            )
        logger.info(f"Column {column_index} set to {config_type.value}")
        return self.configurator.resolve(
            replace(configured.config, column_configurations=tuple(configs))
        )
