"""Template catalogue endpoints."""

from fastapi import APIRouter, Query

from furniture.domain.templates import get_template_catalog, has_template_catalog
from furniture.domain.value_objects import Template
from furniture.web.dependencies import FamilyDep
from furniture.web.exceptions import FamilyNotFoundError
from furniture.web.schemas.responses import (
    ErrorResponseSchema,
    TemplateListSchema,
    TemplateSchema,
    TemplateZoneSchema,
)

router = APIRouter(
    prefix="/templates",
    tags=["templates"],
    responses={404: {"model": ErrorResponseSchema}},
)


def _template_schema(template: Template, default_id: str) -> TemplateSchema:
    return TemplateSchema(
        id=template.id,
        code=template.code,
        name=template.name,
        description=template.description,
        min_width=template.min_width,
        max_width=template.max_width,
        min_height=template.min_height,
        max_height=template.max_height,
        zones=[
            TemplateZoneSchema(
                type=zone.type.value,
                height_proportion=zone.height_proportion,
                has_door=template.is_covered(index),
            )
            for index, zone in enumerate(template.zones)
        ],
        tags=list(template.tags),
        extra_cost=template.extra_cost,
        is_default=template.id == default_id,
    )


def _catalog(family):
    if not has_template_catalog(family):
        raise FamilyNotFoundError(family.value, reason="Family has no column templates")
    return get_template_catalog(family)


@router.get("/{family}", response_model=TemplateListSchema)
async def list_templates(
    family: FamilyDep,
    width: float | None = Query(default=None, description="Only templates fitting this column width"),
    height: float | None = Query(default=None, description="Only templates fitting this column height"),
    tag: list[str] | None = Query(default=None, description="Only templates with one of these tags"),
) -> TemplateListSchema:
    """List the templates of a family, optionally filtered."""
    catalog = _catalog(family)
    templates = catalog.by_tags(tag) if tag else list(catalog)
    if width is not None:
        templates = [t for t in templates if t.min_width <= width <= t.max_width]
    if height is not None:
        templates = [t for t in templates if t.min_height <= height <= t.max_height]
    return TemplateListSchema(
        family=family.value,
        templates=[_template_schema(t, catalog.default_template_id) for t in templates],
    )


@router.get("/{family}/{template_id}", response_model=TemplateSchema)
async def get_template(family: FamilyDep, template_id: str) -> TemplateSchema:
    """Get one template.

    Raises:
        TemplateNotFoundError: If the template does not exist (handled by exception handler).
    """
    catalog = _catalog(family)
    return _template_schema(catalog.get(template_id), catalog.default_template_id)
