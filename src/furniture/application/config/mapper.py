"""Mapping between shareable-link query strings and furniture configurations.

A link is the only persisted form of a configuration, so the round trip
``parse_query_to_config -> normalize_config -> config_to_query`` must be
stable: normalizing twice changes nothing and serializing omits every
field that equals its family default.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any
from urllib.parse import parse_qs, urlencode

from furniture.application.codecs import (
    decode_column_configs,
    encode_column_configs,
    get_template_codec,
)
from furniture.application.config.schema import QueryParams
from furniture.domain.constraints import DEFAULT_COLOR, get_family_constraints
from furniture.domain.entities import ColumnConfiguration
from furniture.domain.templates import has_template_catalog
from furniture.domain.value_objects import FamilyConstraints, FurnitureFamily, OpeningType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FurnitureConfig:
    """Typed configuration of one furniture instance.

    Attributes:
        family: Furniture family the configuration belongs to.
        width: Total width in cm.
        height: Total height in cm, plinth included.
        depth: Depth in cm.
        plinth_height: Plinth height in cm.
        columns: Column count.
        color: Lower-case 6-digit hex color with a leading '#'.
        column_configurations: One configuration per column (stand-like families).
        rack_templates: One template id per column (template families).
        wardrobe_cfg: Opaque wardrobe column encoding, passed through untouched.
        opening_type: Door and drawer opening hardware.
        section_count: Optional section count; never clamped.
    """

    family: FurnitureFamily
    width: int
    height: int
    depth: int
    plinth_height: int
    columns: int
    color: str = DEFAULT_COLOR
    column_configurations: tuple[ColumnConfiguration, ...] = field(default_factory=tuple)
    rack_templates: tuple[str, ...] = field(default_factory=tuple)
    wardrobe_cfg: str | None = None
    opening_type: OpeningType = OpeningType.PUSH
    section_count: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        data: dict[str, Any] = {
            "family": self.family.value,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "plinth_height": self.plinth_height,
            "columns": self.columns,
            "color": self.color,
            "column_configurations": [c.to_dict() for c in self.column_configurations],
            "rack_templates": list(self.rack_templates),
            "opening_type": self.opening_type.value,
        }
        if self.wardrobe_cfg is not None:
            data["wardrobe_cfg"] = self.wardrobe_cfg
        if self.section_count is not None:
            data["section_count"] = self.section_count
        return data


def _constraints_for(
    family: FurnitureFamily, constraints: FamilyConstraints | None
) -> FamilyConstraints:
    return constraints if constraints is not None else get_family_constraints(family)


def default_config(
    family: FurnitureFamily | str, constraints: FamilyConstraints | None = None
) -> FurnitureConfig:
    """Configuration made only of family defaults."""
    family = FurnitureFamily(family)
    table = _constraints_for(family, constraints)
    return FurnitureConfig(
        family=family,
        width=table.width.default,
        height=table.height.default,
        depth=table.depth.default,
        plinth_height=table.plinth_height.default,
        columns=table.columns.default,
    )


def _flatten_query(query: Mapping[str, Any] | str) -> dict[str, Any]:
    """Accept a raw query string, a parse_qs result, or a plain mapping."""
    if isinstance(query, str):
        query = parse_qs(query.lstrip("?"), keep_blank_values=True)
    flat: dict[str, Any] = {}
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[0]
        flat[key] = value
    return flat


def parse_query_to_config(
    query: Mapping[str, Any] | str,
    family: FurnitureFamily | str,
    constraints: FamilyConstraints | None = None,
) -> FurnitureConfig:
    """Parse a shareable-link query into a configuration.

    Missing or invalid fields take the family default; other fields are
    kept. Values are not clamped here; see normalize_config.

    Args:
        query: Query string ("width=150&colCfg=D1SL") or mapping of keys to values.
        family: Furniture family of the link.
        constraints: Dimension table to read defaults from.

    Returns:
        The parsed configuration.
    """
    family = FurnitureFamily(family)
    table = _constraints_for(family, constraints)
    params = QueryParams.model_validate(_flatten_query(query))

    def pick(value: int | None, default: int) -> int:
        return default if value is None else value

    plinth = table.plinth_height.default
    if table.plinth_in_query:
        plinth = pick(params.plinth_height, plinth)

    rack_templates: tuple[str, ...] = ()
    if params.rack_cfg and has_template_catalog(family):
        rack_templates = tuple(get_template_codec(family).decode(params.rack_cfg))

    return FurnitureConfig(
        family=family,
        width=pick(params.width, table.width.default),
        height=pick(params.height, table.height.default),
        depth=pick(params.depth, table.depth.default),
        plinth_height=plinth,
        columns=pick(params.columns, table.columns.default),
        color=params.resolved_color or DEFAULT_COLOR,
        column_configurations=tuple(decode_column_configs(params.col_cfg)),
        rack_templates=rack_templates,
        wardrobe_cfg=params.wardrobe_cfg or None,
        opening_type=params.opening_type or OpeningType.PUSH,
        section_count=params.sections,
    )


def normalize_config(
    config: FurnitureConfig, constraints: FamilyConstraints | None = None
) -> FurnitureConfig:
    """Clamp and step-snap every numeric field into its family range.

    Idempotent: normalizing a normalized configuration returns it unchanged.
    """
    table = _constraints_for(config.family, constraints)
    normalized = replace(
        config,
        width=table.width.normalize(config.width),
        height=table.height.normalize(config.height),
        depth=table.depth.normalize(config.depth),
        plinth_height=table.plinth_height.normalize(config.plinth_height),
        columns=table.columns.clamp(config.columns),
    )
    if normalized != config:
        logger.debug(f"Normalized {config.family.value} configuration")
    return normalized


def config_to_query(
    config: FurnitureConfig, constraints: FamilyConstraints | None = None
) -> dict[str, str]:
    """Serialize a configuration to query parameters.

    Numeric fields equal to the family default are omitted; color is
    always emitted. Configuration strings are emitted only when non-empty
    and the opening type only when it is not push.
    """
    table = _constraints_for(config.family, constraints)
    query: dict[str, str] = {}

    if config.width != table.width.default:
        query["width"] = str(config.width)
    if config.height != table.height.default:
        query["height"] = str(config.height)
    if config.depth != table.depth.default:
        query["depth"] = str(config.depth)
    if table.plinth_in_query and config.plinth_height != table.plinth_height.default:
        query["plintHeight"] = str(config.plinth_height)
    if config.columns != table.columns.default:
        query["columns"] = str(config.columns)
    if config.section_count is not None:
        query["sections"] = str(config.section_count)

    query["color"] = config.color

    if config.column_configurations:
        query["colCfg"] = encode_column_configs(config.column_configurations)
    if config.rack_templates:
        query["rackCfg"] = get_template_codec(config.family).encode(config.rack_templates)
    if config.wardrobe_cfg:
        query["wardrobeCfg"] = config.wardrobe_cfg
    if config.opening_type is not OpeningType.PUSH:
        query["openingType"] = config.opening_type.value
    return query


def config_to_query_string(
    config: FurnitureConfig, constraints: FamilyConstraints | None = None
) -> str:
    """Serialize a configuration to a URL query string."""
    return urlencode(config_to_query(config, constraints), safe=",")
