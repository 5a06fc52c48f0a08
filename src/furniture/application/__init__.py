"""Application layer - use cases and orchestration."""

from .commands import (
    ChangeColumnTypeCommand,
    ConfigureFurnitureCommand,
    LayoutCommand,
    repair_templates,
)
from .dtos import ColumnSummary, ConfiguratorOutput, LayoutOutput

__all__ = [
    "ChangeColumnTypeCommand",
    "ColumnSummary",
    "ConfigureFurnitureCommand",
    "ConfiguratorOutput",
    "LayoutCommand",
    "LayoutOutput",
    "repair_templates",
]
