"""Constraint validation endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body

from furniture.application.config import load_constraints_from_dict, validate_constraints
from furniture.web.dependencies import RegistryDep
from furniture.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(
    prefix="/validate",
    tags=["validate"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=ValidationResultSchema)
async def validate(
    registry: RegistryDep,
    overrides: dict[str, Any] | None = Body(default=None),
) -> ValidationResultSchema:
    """Check constraint tables, optionally with overrides applied.

    The body, when given, has the shape of a constraint override file.
    Schema violations are reported as 422 by the ConfigError handler.
    """
    if overrides:
        registry = load_constraints_from_dict(overrides, base=registry)
    result = validate_constraints(registry)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[asdict(e) for e in result.errors],
        warnings=[asdict(w) for w in result.warnings],
    )
