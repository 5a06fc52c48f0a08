"""Query mapping and constraint configuration for the furniture engine.

Public API:
    - FurnitureConfig: Typed configuration of one furniture instance
    - parse_query_to_config: Parse a shareable-link query
    - normalize_config: Clamp and step-snap numeric fields
    - config_to_query: Serialize, omitting family defaults
    - load_constraints: Apply a constraint override file
    - load_constraints_from_dict: Apply overrides from a dictionary
    - ConfigError: Exception for constraint file errors
    - validate_constraints: Coherence check of constraint tables

Example:
    >>> from furniture.application.config import parse_query_to_config, normalize_config
    >>> config = normalize_config(parse_query_to_config("width=500&colCfg=DR3", "stand"))
    >>> config.width
    120
"""

from furniture.application.config.loader import (
    ConfigError,
    load_constraints,
    load_constraints_file,
    load_constraints_from_dict,
)
from furniture.application.config.mapper import (
    FurnitureConfig,
    config_to_query,
    config_to_query_string,
    default_config,
    normalize_config,
    parse_query_to_config,
)
from furniture.application.config.schema import (
    ColumnCountSchema,
    ConstraintsFile,
    DimensionConstraintSchema,
    FamilyConstraintsSchema,
    QueryParams,
    TotalWidthBandSchema,
    WidthBandSchema,
)
from furniture.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_constraints,
    validate_family,
)

__all__ = [
    # Loader
    "ConfigError",
    "load_constraints",
    "load_constraints_file",
    "load_constraints_from_dict",
    # Mapper
    "FurnitureConfig",
    "config_to_query",
    "config_to_query_string",
    "default_config",
    "normalize_config",
    "parse_query_to_config",
    # Schema
    "ColumnCountSchema",
    "ConstraintsFile",
    "DimensionConstraintSchema",
    "FamilyConstraintsSchema",
    "QueryParams",
    "TotalWidthBandSchema",
    "WidthBandSchema",
    # Validator
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_constraints",
    "validate_family",
]
