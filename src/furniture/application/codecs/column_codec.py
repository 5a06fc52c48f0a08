"""Compact string codec for column configuration arrays.

Format: comma-separated codes, one per column, e.g. "D1SL,DR3,D2SR,DS3S".
Single-door codes carry an L/R suffix for the door opening side. No base
code ends in L or R, so the suffix is unambiguous.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from furniture.domain.entities import ColumnConfiguration
from furniture.domain.exceptions import ConstraintTableError
from furniture.domain.value_objects import ConfigurationType, DoorOpeningSide

logger = logging.getLogger(__name__)

TYPE_TO_CODE: dict[ConfigurationType, str] = {
    ConfigurationType.DRAWERS_1: "DR1",
    ConfigurationType.DRAWERS_2: "DR2",
    ConfigurationType.DRAWERS_3: "DR3",
    ConfigurationType.DRAWERS_4: "DR4",
    ConfigurationType.DRAWERS_5: "DR5",
    ConfigurationType.DOOR_1_SHELF: "D1S",
    ConfigurationType.DOOR_2_SHELVES: "D2S",
    ConfigurationType.DOOR_3_SHELVES: "D3S",
    ConfigurationType.DOOR_4_SHELVES: "D4S",
    ConfigurationType.DOOR_5_SHELVES: "D5S",
    ConfigurationType.DOOR_SPLIT_1_SHELF: "DS1S",
    ConfigurationType.DOOR_SPLIT_2_SHELVES: "DS2S",
    ConfigurationType.DOOR_SPLIT_3_SHELVES: "DS3S",
    ConfigurationType.DOOR_SPLIT_4_SHELVES: "DS4S",
    ConfigurationType.DOOR_SPLIT_5_SHELVES: "DS5S",
}

CODE_TO_TYPE: dict[str, ConfigurationType] = {code: t for t, code in TYPE_TO_CODE.items()}

SIDE_TO_SUFFIX: dict[DoorOpeningSide, str] = {
    DoorOpeningSide.LEFT: "L",
    DoorOpeningSide.RIGHT: "R",
}

SUFFIX_TO_SIDE: dict[str, DoorOpeningSide] = {s: side for side, s in SIDE_TO_SUFFIX.items()}

if set(TYPE_TO_CODE) != set(ConfigurationType):
    raise ConstraintTableError("Every configuration type needs a codec entry")


def encode_column_configs(configs: Iterable[ColumnConfiguration]) -> str:
    """Encode configurations as a comma-separated code string.

    Example:
        >>> encode_column_configs([
        ...     ColumnConfiguration(ConfigurationType.DOOR_1_SHELF, DoorOpeningSide.LEFT),
        ...     ColumnConfiguration(ConfigurationType.DRAWERS_3),
        ... ])
        'D1SL,DR3'
    """
    tokens: list[str] = []
    for config in configs:
        code = TYPE_TO_CODE[config.type]
        if config.door_opening_side is not None:
            code += SIDE_TO_SUFFIX[config.door_opening_side]
        tokens.append(code)
    return ",".join(tokens)


def _split_side(token: str) -> tuple[str, DoorOpeningSide | None]:
    side = SUFFIX_TO_SIDE.get(token[-1])
    if side is None:
        return token, None
    return token[:-1], side


def decode_column_configs(encoded: str | None) -> list[ColumnConfiguration]:
    """Decode a code string into configurations.

    Never raises. Empty tokens are skipped silently; unknown codes are
    skipped with one warning each. A side suffix on a type that takes no
    side is dropped with a warning, and a single-door code without a
    suffix opens left.

    Example:
        >>> [c.to_dict() for c in decode_column_configs("DR3,INVALID,D1SL")]
        [{'type': 'DRAWERS_3'}, {'type': 'DOOR_1_SHELF', 'door_opening_side': 'left'}]
    """
    if not encoded or not isinstance(encoded, str):
        return []

    configs: list[ColumnConfiguration] = []
    for raw in encoded.split(","):
        token = raw.strip()
        if not token:
            continue

        base, side = _split_side(token)
        config_type = CODE_TO_TYPE.get(base)
        if config_type is None:
            logger.warning(f"Unknown column configuration code: {token}")
            continue

        if side is not None and not config_type.metadata.has_single_door:
            logger.warning(f"Dropping door side from {token}: {config_type.value} takes no side")
            side = None
        configs.append(ColumnConfiguration.create(config_type, side))
    return configs


def is_valid_column_code(code: str) -> bool:
    """Check whether a single token decodes to a configuration."""
    if not isinstance(code, str) or not code.strip():
        return False
    base, _ = _split_side(code.strip())
    return base in CODE_TO_TYPE
