"""Furniture family endpoints."""

from fastapi import APIRouter

from furniture.domain.templates import GRID_ALIGNED_FAMILIES, has_template_catalog
from furniture.domain.value_objects import DimensionConstraint, FamilyConstraints
from furniture.web.dependencies import FamilyDep, RegistryDep
from furniture.web.schemas.responses import (
    ErrorResponseSchema,
    FamilyListSchema,
    FamilySchema,
    RangeSchema,
)

router = APIRouter(
    prefix="/families",
    tags=["families"],
    responses={404: {"model": ErrorResponseSchema}},
)


def _range(constraint: DimensionConstraint) -> RangeSchema:
    return RangeSchema(
        min=constraint.min,
        max=constraint.max,
        default=constraint.default,
        step=constraint.step,
    )


def _family_schema(table: FamilyConstraints) -> FamilySchema:
    return FamilySchema(
        name=table.family.value,
        width=_range(table.width),
        height=_range(table.height),
        depth=_range(table.depth),
        plinth_height=_range(table.plinth_height),
        columns=RangeSchema(
            min=table.columns.min, max=table.columns.max, default=table.columns.default
        ),
        column_width={"min": table.column_width.min, "max": table.column_width.max},
        has_templates=has_template_catalog(table.family),
        grid_aligned=table.family in GRID_ALIGNED_FAMILIES,
    )


@router.get("", response_model=FamilyListSchema)
async def list_families(registry: RegistryDep) -> FamilyListSchema:
    """List every family with its dimension table."""
    return FamilyListSchema(families=[_family_schema(table) for table in registry])


@router.get("/{family}", response_model=FamilySchema)
async def get_family_table(family: FamilyDep, registry: RegistryDep) -> FamilySchema:
    """Get the dimension table of one family."""
    return _family_schema(registry.get(family))
