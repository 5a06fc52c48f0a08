"""FastAPI dependency injection for furniture services."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from furniture.application.commands import ConfigureFurnitureCommand, LayoutCommand
from furniture.application.config import load_constraints
from furniture.domain.constraints import DEFAULT_REGISTRY, ConstraintRegistry
from furniture.domain.value_objects import FurnitureFamily
from furniture.web.exceptions import FamilyNotFoundError

logger = logging.getLogger(__name__)

# Environment variable naming an optional constraint override file.
CONSTRAINTS_ENV_VAR = "FURNITURE_CONSTRAINTS"


@lru_cache(maxsize=1)
def get_registry() -> ConstraintRegistry:
    """Get the cached constraint registry, with overrides applied if configured."""
    path = os.environ.get(CONSTRAINTS_ENV_VAR)
    if not path:
        return DEFAULT_REGISTRY
    logger.info(f"Loading constraint overrides from {path}")
    return load_constraints(Path(path))


def get_family(family: str) -> FurnitureFamily:
    """Resolve the `family` path parameter."""
    try:
        return FurnitureFamily(family)
    except ValueError:
        raise FamilyNotFoundError(family)


def get_configure_command(
    registry: Annotated[ConstraintRegistry, Depends(get_registry)],
) -> ConfigureFurnitureCommand:
    """Dependency for ConfigureFurnitureCommand."""
    return ConfigureFurnitureCommand(registry)


def get_layout_command(
    registry: Annotated[ConstraintRegistry, Depends(get_registry)],
) -> LayoutCommand:
    """Dependency for LayoutCommand."""
    return LayoutCommand(registry)


# Type aliases for cleaner endpoint signatures
RegistryDep = Annotated[ConstraintRegistry, Depends(get_registry)]
FamilyDep = Annotated[FurnitureFamily, Depends(get_family)]
ConfigureCommandDep = Annotated[ConfigureFurnitureCommand, Depends(get_configure_command)]
LayoutCommandDep = Annotated[LayoutCommand, Depends(get_layout_command)]
