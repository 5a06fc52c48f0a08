"""Pydantic models for shareable-link queries and constraint override files.

Query models are lax: every field arrives as an untrusted string and an
invalid value falls back to ``None`` (meaning "use the family default")
without discarding the other fields. Override-file models are strict and
mirror the domain constraint tables one to one.
"""

import logging
import re
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from furniture.domain.value_objects import (
    POSSIBLE_COLUMN_COUNTS,
    ColumnCountRange,
    DimensionConstraint,
    FamilyConstraints,
    FurnitureFamily,
    OpeningType,
    TotalWidthBand,
    TotalWidthRule,
    WidthBand,
)

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Historical opening type names still found in old links.
OPENING_TYPE_ALIASES: dict[str, OpeningType] = {"handle": OpeningType.ROUND}


class QueryParams(BaseModel):
    """Raw shareable-link query bag.

    Attribute names follow the query keys, so ``plintHeight`` and ``colCfg``
    keep their link spelling through aliases.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    width: int | None = None
    height: int | None = None
    depth: int | None = None
    plinth_height: int | None = Field(default=None, alias="plintHeight")
    columns: int | None = None
    sections: int | None = Field(default=None, gt=0)
    color: str | None = None
    colors: str | None = Field(default=None, description="Legacy alias of color")
    col_cfg: str | None = Field(default=None, alias="colCfg")
    rack_cfg: str | None = Field(default=None, alias="rackCfg")
    wardrobe_cfg: str | None = Field(default=None, alias="wardrobeCfg")
    opening_type: OpeningType | None = Field(default=None, alias="openingType")

    @field_validator(
        "width", "height", "depth", "plinth_height", "columns", "sections", mode="wrap"
    )
    @classmethod
    def lax_integer(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> int | None:
        """Coerce to int, dropping the field instead of failing the model."""
        if value is None or value == "":
            return None
        try:
            return handler(value)
        except ValidationError:
            logger.warning(f"Ignoring invalid integer query value: {value!r}")
            return None

    @field_validator("color", "colors")
    @classmethod
    def lower_hex_color(cls, value: str | None) -> str | None:
        """Lower-case a 6-digit hex color; anything else is dropped."""
        if value is None:
            return None
        match = HEX_COLOR_PATTERN.match(value.strip())
        if match is None:
            logger.warning(f"Ignoring invalid color query value: {value!r}")
            return None
        return f"#{match.group(1).lower()}"

    @field_validator("opening_type", mode="wrap")
    @classmethod
    def opening_type_alias(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> OpeningType | None:
        """Map historical names, dropping unknown opening types."""
        if value is None or value == "":
            return None
        if isinstance(value, str) and value.strip().lower() in OPENING_TYPE_ALIASES:
            return OPENING_TYPE_ALIASES[value.strip().lower()]
        try:
            return handler(value.strip().lower() if isinstance(value, str) else value)
        except ValidationError:
            logger.warning(f"Ignoring unknown opening type: {value!r}")
            return None

    @property
    def resolved_color(self) -> str | None:
        """The current color key wins over the legacy one."""
        return self.color if self.color is not None else self.colors


class DimensionConstraintSchema(BaseModel):
    """Range of one numeric axis in an override file."""

    model_config = ConfigDict(extra="forbid")

    min: int = Field(..., ge=0, description="Smallest allowed value in cm")
    max: int = Field(..., ge=0, description="Largest allowed value in cm")
    default: int = Field(..., ge=0, description="Value used when absent")
    step: int = Field(default=1, ge=1, description="Snap step in cm")

    @model_validator(mode="after")
    def validate_range(self) -> "DimensionConstraintSchema":
        """Validate that min does not exceed max."""
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def to_domain(self) -> DimensionConstraint:
        return DimensionConstraint(
            min=self.min, max=self.max, default=self.default, step=self.step
        )


class ColumnCountSchema(BaseModel):
    """Column-count range in an override file."""

    model_config = ConfigDict(extra="forbid")

    min: int = Field(default=1, ge=1, le=4)
    max: int = Field(default=4, ge=1, le=4)
    default: int = Field(default=1, ge=1, le=4)

    @model_validator(mode="after")
    def validate_range(self) -> "ColumnCountSchema":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def to_domain(self) -> ColumnCountRange:
        return ColumnCountRange(min=self.min, max=self.max, default=self.default)


class WidthBandSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min: float = Field(..., gt=0)
    max: float = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_range(self) -> "WidthBandSchema":
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class TotalWidthBandSchema(BaseModel):
    """Column counts allowed for a total width range."""

    model_config = ConfigDict(extra="forbid")

    min_width: float = Field(..., gt=0)
    max_width: float = Field(..., gt=0)
    counts: list[int] = Field(..., min_length=1)

    @field_validator("counts")
    @classmethod
    def validate_counts(cls, v: list[int]) -> list[int]:
        """Validate that every count is a possible column count."""
        for count in v:
            if count not in POSSIBLE_COLUMN_COUNTS:
                raise ValueError(f"column count {count} must be between 1 and 4")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "TotalWidthBandSchema":
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must not exceed max_width ({self.max_width})"
            )
        return self


class FamilyConstraintsSchema(BaseModel):
    """Complete dimension table for one family.

    Attributes:
        width: Total width range.
        height: Total height range, plinth included.
        depth: Depth range.
        plinth_height: Plinth height range.
        columns: Allowed column counts.
        column_width: Per-column width band (defaults to 40-100 cm).
        total_width_rule: Optional total width bands, in ascending order.
        plinth_in_query: Whether plinth height travels in shareable links.
    """

    model_config = ConfigDict(extra="forbid")

    width: DimensionConstraintSchema
    height: DimensionConstraintSchema
    depth: DimensionConstraintSchema
    plinth_height: DimensionConstraintSchema
    columns: ColumnCountSchema = Field(default_factory=ColumnCountSchema)
    column_width: WidthBandSchema | None = None
    total_width_rule: list[TotalWidthBandSchema] | None = Field(
        default=None, description="Total width bands with their allowed counts"
    )
    plinth_in_query: bool = False

    def to_domain(self, family: FurnitureFamily) -> FamilyConstraints:
        """Convert into the domain dimension table for `family`."""
        rule = None
        if self.total_width_rule is not None:
            rule = TotalWidthRule(
                bands=tuple(
                    TotalWidthBand(band.min_width, band.max_width, frozenset(band.counts))
                    for band in self.total_width_rule
                )
            )
        extra: dict[str, Any] = {}
        if self.column_width is not None:
            extra["column_width"] = WidthBand(self.column_width.min, self.column_width.max)
        return FamilyConstraints(
            family=family,
            width=self.width.to_domain(),
            height=self.height.to_domain(),
            depth=self.depth.to_domain(),
            plinth_height=self.plinth_height.to_domain(),
            columns=self.columns.to_domain(),
            total_width_rule=rule,
            plinth_in_query=self.plinth_in_query,
            **extra,
        )


class ConstraintsFile(BaseModel):
    """Root model of a constraint override file.

    Example:
        {
            "schema_version": "1.0",
            "families": {
                "bedside": {
                    "width": {"min": 40, "max": 90, "default": 60},
                    ...
                }
            }
        }
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    families: dict[FurnitureFamily, FamilyConstraintsSchema] = Field(default_factory=dict)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{v}'. "
                f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    def to_domain(self) -> dict[FurnitureFamily, FamilyConstraints]:
        return {family: table.to_domain(family) for family, table in self.families.items()}
