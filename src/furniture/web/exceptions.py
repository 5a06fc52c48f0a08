"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from furniture.application.config import ConfigError
from furniture.domain.exceptions import ConstraintTableError, TemplateNotFoundError


class FamilyNotFoundError(Exception):
    """Raised when a path names a family that does not exist or lacks a feature."""

    def __init__(self, family: str, reason: str = "Unknown furniture family") -> None:
        self.family = family
        self.reason = reason
        super().__init__(f"{reason}: {family}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(FamilyNotFoundError)
    async def family_not_found_handler(
        request: Request, exc: FamilyNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"family": exc.family},
            },
        )

    @app.exception_handler(TemplateNotFoundError)
    async def template_not_found_handler(
        request: Request, exc: TemplateNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"template_id": exc.template_id, "family": exc.family},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Constraint overrides are invalid",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")} for d in exc.details
                ],
            },
        )

    @app.exception_handler(ConstraintTableError)
    async def constraint_table_error_handler(
        request: Request, exc: ConstraintTableError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": str(exc),
                "error_type": "constraint_table",
                "details": None,
            },
        )
