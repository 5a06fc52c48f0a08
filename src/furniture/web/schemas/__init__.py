"""Pydantic schemas for the REST API."""

from furniture.web.schemas.responses import (
    ColumnConfigurationSchema,
    ColumnSummarySchema,
    ConfiguratorResponseSchema,
    ErrorResponseSchema,
    FamilyListSchema,
    FamilySchema,
    FurnitureConfigSchema,
    GridSchema,
    LayoutColumnSchema,
    LayoutResponseSchema,
    RangeSchema,
    TemplateListSchema,
    TemplateSchema,
    TemplateZoneSchema,
    ValidationResultSchema,
    ZoneSchema,
)

__all__ = [
    "ColumnConfigurationSchema",
    "ColumnSummarySchema",
    "ConfiguratorResponseSchema",
    "ErrorResponseSchema",
    "FamilyListSchema",
    "FamilySchema",
    "FurnitureConfigSchema",
    "GridSchema",
    "LayoutColumnSchema",
    "LayoutResponseSchema",
    "RangeSchema",
    "TemplateListSchema",
    "TemplateSchema",
    "TemplateZoneSchema",
    "ValidationResultSchema",
    "ZoneSchema",
]
