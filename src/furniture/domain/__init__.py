"""Domain layer - constraint tables, value objects and layout services."""

from .column_rules import (
    ConfigurationConstraint,
    ConfigurationRuleSet,
    get_valid_configurations,
    rules_for_family,
)
from .constraints import (
    DEFAULT_COLOR,
    DEFAULT_REGISTRY,
    ConstraintRegistry,
    get_family_constraints,
)
from .entities import ColumnConfiguration
from .exceptions import ConstraintTableError, TemplateNotFoundError
from .templates import TemplateCatalog, get_template_catalog, has_template_catalog
from .value_objects import (
    ColumnDimensions,
    ConfigurationType,
    DimensionConstraint,
    DoorOpeningSide,
    FamilyConstraints,
    FurnitureFamily,
    OpeningType,
    Template,
    Zone,
    ZoneType,
)

__all__ = [
    "ColumnConfiguration",
    "ColumnDimensions",
    "ConfigurationConstraint",
    "ConfigurationRuleSet",
    "ConfigurationType",
    "ConstraintRegistry",
    "ConstraintTableError",
    "DEFAULT_COLOR",
    "DEFAULT_REGISTRY",
    "DimensionConstraint",
    "DoorOpeningSide",
    "FamilyConstraints",
    "FurnitureFamily",
    "OpeningType",
    "Template",
    "TemplateCatalog",
    "TemplateNotFoundError",
    "Zone",
    "ZoneType",
    "get_family_constraints",
    "get_template_catalog",
    "get_valid_configurations",
    "has_template_catalog",
    "rules_for_family",
]
