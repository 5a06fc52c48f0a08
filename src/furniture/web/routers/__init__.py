"""API routers for the REST API."""

from furniture.web.routers.configurator import router as configurator_router
from furniture.web.routers.families import router as families_router
from furniture.web.routers.layout import router as layout_router
from furniture.web.routers.templates import router as templates_router
from furniture.web.routers.validate import router as validate_router

__all__ = [
    "configurator_router",
    "families_router",
    "layout_router",
    "templates_router",
    "validate_router",
]
