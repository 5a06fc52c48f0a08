"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- The built-in tables pass validation
- Override files are applied before validation
- Load errors and incoherent tables fail
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from furniture.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_builtin_tables(self, runner: CliRunner) -> None:
        """Built-in tables pass with exit code 0."""
        result = runner.invoke(app, ["validate"])

        assert result.exit_code == 0
        assert "Validating built-in constraint tables" in result.output
        assert "Validation passed. Constraint tables are coherent." in result.output

    def test_valid_overrides(self, runner: CliRunner, fixtures_path: Path) -> None:
        """A coherent override file passes."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "valid_overrides.json")])

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_warnings_exit_code(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Warnings alone give exit code 2."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "warning_overrides.json")])

        assert result.exit_code == 2
        assert "Validation passed with 1 warning(s)" in result.output
        assert "stand.height" in result.output
        assert "Suggestion: Use 70" in result.output

    def test_incoherent_overrides(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Widths without a legal column count fail validation."""
        result = runner.invoke(
            app, ["validate", str(fixtures_path / "incoherent_overrides.json")]
        )

        assert result.exit_code == 1
        assert "bedside.width" in result.output
        assert "81-120" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Invalid JSON should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line" in result.output

    def test_schema_violation(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Schema violations list the offending path."""
        result = runner.invoke(app, ["validate", str(fixtures_path / "invalid_schema.json")])

        assert result.exit_code == 1
        assert "families.bedside.width" in result.output
        assert "Validation failed." in result.output
