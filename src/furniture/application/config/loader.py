"""Constraint override file loader with detailed error reporting.

An override file replaces the dimension tables of some families; every
family it does not mention keeps its built-in table. File system errors,
JSON syntax errors and schema violations all surface as ConfigError.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from furniture.application.config.schema import ConstraintsFile
from furniture.domain.constraints import DEFAULT_REGISTRY, ConstraintRegistry

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for constraint file errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, json_parse, validation, ...)
        path: Path to the constraint file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("families", "bedside", "width", "min"))
        'families.bedside.width.min'
        >>> _format_json_path(("families", "rack", "total_width_rule", 0, "counts"))
        'families.rack.total_width_rule[0].counts'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Constraint file validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> ConstraintsFile:
    try:
        return ConstraintsFile.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_constraints_file(path: Path) -> ConstraintsFile:
    """Read and validate an override file without applying it.

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            error_type attribute is one of "file_not_found",
            "permission_denied", "file_read_error", "json_parse" or
            "validation".
    """
    if not path.exists():
        raise ConfigError(
            message=f"Constraint file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading constraint file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading constraint file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in constraint file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_constraints(
    path: Path, base: ConstraintRegistry = DEFAULT_REGISTRY
) -> ConstraintRegistry:
    """Load an override file and apply it on top of `base`.

    Example:
        >>> registry = load_constraints(Path("constraints.json"))
        >>> registry.get("bedside").width.max
        90
    """
    overrides = load_constraints_file(path).to_domain()
    logger.info(
        f"Loaded constraint overrides for {', '.join(f.value for f in overrides) or 'no families'} "
        f"from {path}"
    )
    return base.with_overrides(overrides)


def load_constraints_from_dict(
    data: dict[str, Any], base: ConstraintRegistry = DEFAULT_REGISTRY
) -> ConstraintRegistry:
    """Apply overrides given as a dictionary, e.g. from an API request.

    Raises:
        ConfigError: If the data fails validation.
    """
    return base.with_overrides(_validate(data).to_domain())
