"""Zone layout endpoints for template families."""

from fastapi import APIRouter, Query, Request

from furniture.domain.templates import has_template_catalog
from furniture.web.dependencies import FamilyDep, LayoutCommandDep
from furniture.web.exceptions import FamilyNotFoundError
from furniture.web.schemas.responses import ErrorResponseSchema, LayoutResponseSchema

router = APIRouter(
    prefix="/layout",
    tags=["layout"],
    responses={404: {"model": ErrorResponseSchema}},
)


@router.get("/{family}", response_model=LayoutResponseSchema)
async def layout(
    family: FamilyDep,
    request: Request,
    command: LayoutCommandDep,
    align: bool | None = Query(
        default=None, description="Snap zones to the master grid (rack and bookcase by default)"
    ),
) -> LayoutResponseSchema:
    """Compute the zones of every column from a shareable-link query.

    Columns are chosen with the `rackCfg` parameter, one template code per
    column (e.g. `rackCfg=ODS,HC`).
    """
    if not has_template_catalog(family):
        raise FamilyNotFoundError(family.value, reason="Family has no zone layout")
    query = {key: value for key, value in request.query_params.items() if key != "align"}
    result = command.execute(query, family, align_to_grid=align)
    return LayoutResponseSchema.model_validate(result.to_dict())
