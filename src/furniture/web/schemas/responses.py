"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer


class RangeSchema(BaseModel):
    """Allowed range of one dimension."""

    min: int = Field(..., description="Smallest allowed value in cm")
    max: int = Field(..., description="Largest allowed value in cm")
    default: int = Field(..., description="Default value in cm")
    step: int = Field(default=1, description="Snap step in cm")


class FamilySchema(BaseModel):
    """Dimension table of one furniture family."""

    name: str = Field(..., description="Family identifier")
    width: RangeSchema
    height: RangeSchema
    depth: RangeSchema
    plinth_height: RangeSchema
    columns: RangeSchema
    column_width: dict[str, float] = Field(..., description="Per-column width band")
    has_templates: bool = Field(..., description="Whether columns are built from templates")
    grid_aligned: bool = Field(..., description="Whether zones snap to a master grid")


class FamilyListSchema(BaseModel):
    families: list[FamilySchema]


class _DoorSideSchema(BaseModel):
    """Base for column schemas whose door side is left out when absent."""

    # No return annotation so the JSON schema keeps the model's fields.
    @model_serializer(mode="wrap")
    def omit_absent_door_side(self, handler: SerializerFunctionWrapHandler):
        data = handler(self)
        if data.get("door_opening_side") is None:
            data.pop("door_opening_side", None)
        return data


class ColumnConfigurationSchema(_DoorSideSchema):
    type: str = Field(..., description="Configuration type")
    door_opening_side: str | None = Field(
        default=None, description="Door opening side, single-door types only"
    )


class FurnitureConfigSchema(BaseModel):
    """Resolved furniture configuration."""

    family: str
    width: int
    height: int
    depth: int
    plinth_height: int
    columns: int
    color: str
    column_configurations: list[ColumnConfigurationSchema] = Field(default_factory=list)
    rack_templates: list[str] = Field(default_factory=list)
    opening_type: str
    wardrobe_cfg: str | None = None
    section_count: int | None = None


class ColumnSummarySchema(_DoorSideSchema):
    index: int
    type: str
    door_opening_side: str | None = None
    width: float
    hinge_positions: list[float] = Field(default_factory=list)


class ColumnDimensionsSchema(BaseModel):
    width: float = Field(..., description="Column width in cm")
    height: float = Field(..., description="Usable column height in cm")
    depth: float = Field(..., description="Column depth in cm")


class ConfiguratorResponseSchema(BaseModel):
    """Response of the configurator endpoint."""

    config: FurnitureConfigSchema
    valid_column_counts: dict[str, bool] = Field(
        ..., description="Legality of every column count"
    )
    column_dimensions: ColumnDimensionsSchema
    columns: list[ColumnSummarySchema] = Field(default_factory=list)
    valid_column_types: list[str] = Field(
        default_factory=list, description="Configuration types that fit the columns"
    )
    query: dict[str, str] = Field(..., description="Shortened shareable-link query")
    query_string: str = Field(..., description="URL encoded shortened query")


class ZoneSchema(BaseModel):
    type: str
    height: float
    shelf_count: int | None = None
    shelf_spacing: float | None = None
    drawer_count: int | None = None
    drawer_heights: list[float] | None = None
    has_door: bool = False


class ZonePositionSchema(BaseModel):
    zone_index: int
    start_y: float = Field(..., description="Zone bottom from the plinth top")
    end_y: float = Field(..., description="Zone top from the plinth top")


class SnapSchema(BaseModel):
    zone_index: int
    natural_position: float
    snapped_position: float | None = None


class LayoutColumnSchema(BaseModel):
    index: int
    template_id: str
    width: float
    door_types: list[str] = Field(default_factory=list)
    zones: list[ZoneSchema]
    positions: list[ZonePositionSchema] = Field(default_factory=list)
    snaps: list[SnapSchema] = Field(default_factory=list)


class GridSchema(BaseModel):
    spacing: float = Field(..., description="Grid spacing in cm")
    positions: list[float] = Field(..., description="Grid lines from the plinth top")


class LayoutResponseSchema(ConfiguratorResponseSchema):
    """Response of the layout endpoint."""

    grid: GridSchema | None = None
    layout: list[LayoutColumnSchema]


class TemplateZoneSchema(BaseModel):
    type: str
    height_proportion: float
    has_door: bool


class TemplateSchema(BaseModel):
    """One column template."""

    id: str
    code: str
    name: str
    description: str = ""
    min_width: float
    max_width: float
    min_height: float
    max_height: float
    zones: list[TemplateZoneSchema]
    tags: list[str] = Field(default_factory=list)
    extra_cost: float = 0
    is_default: bool = False


class TemplateListSchema(BaseModel):
    """Response for template listing."""

    family: str
    templates: list[TemplateSchema]


class ValidationResultSchema(BaseModel):
    """Response for constraint validation."""

    is_valid: bool = Field(..., description="Whether the tables are coherent")
    errors: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
