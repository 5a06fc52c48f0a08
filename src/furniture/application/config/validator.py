"""Coherence checks for constraint tables.

A table is coherent when every reachable width has at least one legal
column count, every default lies inside its range, and every template's
zone proportions sum to 100. An incoherent table is a data defect that
must be fixed in the table, not handled at runtime.
"""

from dataclasses import dataclass, field
from typing import Any

from furniture.domain.constraints import DEFAULT_REGISTRY, ConstraintRegistry
from furniture.domain.exceptions import ConstraintTableError
from furniture.domain.services.column_count import family_column_fit, get_valid_column_counts
from furniture.domain.templates import get_template_catalog, has_template_catalog, validate_template
from furniture.domain.value_objects import DimensionConstraint, FamilyConstraints


@dataclass
class ValidationError:
    """A blocking coherence error.

    Attributes:
        path: Dotted path to the offending table entry (e.g. "bedside.width")
        message: Human-readable description of the error
        value: The value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking coherence warning.

    Attributes:
        path: Dotted path to the concerning table entry
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the tables have no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another result into this one and return self."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _check_dimension(
    result: ValidationResult, path: str, constraint: DimensionConstraint
) -> None:
    if not constraint.contains(constraint.default):
        result.add_error(
            path,
            f"Default {constraint.default} lies outside [{constraint.min}, {constraint.max}]",
            constraint.default,
        )
    elif constraint.normalize(constraint.default) != constraint.default:
        result.add_warning(
            path,
            f"Default {constraint.default} is not a multiple of step {constraint.step}",
            suggestion=f"Use {constraint.normalize(constraint.default)}",
        )


def _format_ranges(widths: list[int]) -> str:
    """Collapse sorted widths into "a-b, c" ranges."""
    ranges: list[str] = []
    start = previous = widths[0]
    for width in widths[1:]:
        if width != previous + 1:
            ranges.append(f"{start}-{previous}" if start != previous else f"{start}")
            start = width
        previous = width
    ranges.append(f"{start}-{previous}" if start != previous else f"{start}")
    return ", ".join(ranges)


def validate_family(table: FamilyConstraints) -> ValidationResult:
    """Check one family table.

    Every width from min to max (by width step) is tried at the default
    height, depth and plinth height.
    """
    result = ValidationResult()
    name = table.family.value

    for axis in ("width", "height", "depth", "plinth_height"):
        _check_dimension(result, f"{name}.{axis}", getattr(table, axis))

    if not table.columns.contains(table.columns.default):
        result.add_error(
            f"{name}.columns",
            f"Default column count {table.columns.default} lies outside "
            f"[{table.columns.min}, {table.columns.max}]",
            table.columns.default,
        )

    fits = family_column_fit(table.family)
    dead_widths: list[int] = []
    for width in range(table.width.min, table.width.max + 1, table.width.step):
        validity = get_valid_column_counts(
            width,
            table.height.default,
            table.depth.default,
            table.plinth_height.default,
            table,
            fits,
        )
        if not any(validity.values()):
            dead_widths.append(width)
    if dead_widths:
        result.add_error(
            f"{name}.width",
            f"No legal column count at widths {_format_ranges(dead_widths)}",
            dead_widths,
        )

    default_validity = get_valid_column_counts(
        table.width.default,
        table.height.default,
        table.depth.default,
        table.plinth_height.default,
        table,
        fits,
    )
    if not default_validity.get(table.columns.default, False):
        result.add_warning(
            f"{name}.columns",
            f"Default column count {table.columns.default} is not legal at the default width "
            f"{table.width.default}",
            suggestion="Pick a default count that is legal at the default width",
        )

    if has_template_catalog(table.family):
        for template in get_template_catalog(table.family):
            try:
                validate_template(template)
            except ConstraintTableError as e:
                result.add_error(f"{name}.templates.{template.id}", str(e))
    return result


def validate_constraints(registry: ConstraintRegistry = DEFAULT_REGISTRY) -> ValidationResult:
    """Check every family table of a registry."""
    result = ValidationResult()
    for table in registry:
        result.merge(validate_family(table))
    return result
