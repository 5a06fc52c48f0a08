"""Configurator endpoints: shareable-link query in, resolved configuration out."""

from fastapi import APIRouter, Request

from furniture.web.dependencies import ConfigureCommandDep, FamilyDep
from furniture.web.schemas.responses import ConfiguratorResponseSchema, ErrorResponseSchema

router = APIRouter(
    prefix="/configurator",
    tags=["configurator"],
    responses={404: {"model": ErrorResponseSchema}},
)


@router.get("/{family}", response_model=ConfiguratorResponseSchema)
async def configure(
    family: FamilyDep,
    request: Request,
    command: ConfigureCommandDep,
) -> ConfiguratorResponseSchema:
    """Resolve a shareable-link query.

    Every query parameter is optional and untrusted: unknown keys are
    ignored, invalid values fall back to family defaults and out-of-range
    values are clamped. The response carries the shortened link.

    Example:
        GET /api/v1/configurator/stand?width=150&colCfg=D1SL,DR3&openingType=handle
    """
    result = command.execute(dict(request.query_params), family)
    return ConfiguratorResponseSchema.model_validate(result.to_dict())
