"""Validate command for checking constraint tables.

Without an argument the built-in tables are checked; with a JSON override
file the overrides are applied first and the merged tables are checked.
"""

from pathlib import Path
from typing import Annotated

import typer

from furniture.application.config import (
    ConfigError,
    ValidationResult,
    load_constraints,
    validate_constraints,
)
from furniture.domain.constraints import DEFAULT_REGISTRY


def _display_load_error(error: ConfigError) -> None:
    """Display a constraint file loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    """Display validation results including errors and warnings."""
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Constraint tables are coherent.")


def validate_command(
    constraints_file: Annotated[
        Path | None,
        typer.Argument(help="Optional JSON constraint override file to validate"),
    ] = None,
) -> None:
    """Check constraint tables for coherence.

    Every reachable width must have a legal column count, every default must
    lie inside its range, and every template's zone proportions must sum
    to 100.

    Exit codes:
        0 - Tables are coherent with no warnings
        1 - Tables have errors
        2 - Tables are coherent but have warnings

    Example:
        furniture validate constraints.json
    """
    if constraints_file is None:
        typer.echo("Validating built-in constraint tables...")
        registry = DEFAULT_REGISTRY
    else:
        typer.echo(f"Validating {constraints_file}...")
        try:
            registry = load_constraints(constraints_file)
        except ConfigError as e:
            _display_load_error(e)
            raise typer.Exit(code=1)
    typer.echo()

    result = validate_constraints(registry)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
