"""Integration tests for the templates CLI command group."""

import pytest
from typer.testing import CliRunner

from furniture.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for `templates list`."""

    def test_rack_templates(self, runner: CliRunner) -> None:
        """Rack templates are listed with the default marked."""
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Templates for rack:" in result.output
        assert "*OS" in result.output
        assert "OPEN_SHELVES_AND_BOTTOM_DRAWERS" in result.output

    def test_filter_by_tag(self, runner: CliRunner) -> None:
        """Only templates with the tag are shown."""
        result = runner.invoke(app, ["templates", "list", "--tag", "drawers"])

        assert result.exit_code == 0
        assert "ODS" in result.output
        assert "OBD" in result.output
        assert "HALF_OPEN_HALF_CLOSED" not in result.output

    def test_filter_by_height(self, runner: CliRunner) -> None:
        """Templates too tall for the column are hidden."""
        result = runner.invoke(app, ["templates", "list", "--height", "120"])

        assert result.exit_code == 0
        assert "OPEN_AND_BOTTOM_CLOSED" not in result.output

    def test_shoe_rack(self, runner: CliRunner) -> None:
        """The family option switches catalogues."""
        result = runner.invoke(app, ["templates", "list", "--family", "shoe-rack"])

        assert result.exit_code == 0
        assert "Templates for shoe-rack:" in result.output

    def test_family_without_templates(self, runner: CliRunner) -> None:
        """Stand-like families have no catalogue."""
        result = runner.invoke(app, ["templates", "list", "--family", "stand"])

        assert result.exit_code == 1
        assert "has no column templates" in result.output


class TestTemplatesShow:
    """Tests for `templates show`."""

    def test_show_template(self, runner: CliRunner) -> None:
        """Zones and doors are printed top to bottom."""
        result = runner.invoke(app, ["templates", "show", "OPEN_SHELVES_AND_DRAWERS"])

        assert result.exit_code == 0
        assert "Shelves with Drawers (ODS)" in result.output
        assert "0: SHELVES 50%" in result.output
        assert "1: DRAWERS 50%" in result.output

    def test_door_marker(self, runner: CliRunner) -> None:
        """Zones behind a door are marked."""
        result = runner.invoke(app, ["templates", "show", "HALF_OPEN_HALF_CLOSED"])

        assert result.exit_code == 0
        assert "1: SHELVES 50% [door]" in result.output

    def test_unknown_template(self, runner: CliRunner) -> None:
        """Unknown ids exit with code 1 and list the alternatives."""
        result = runner.invoke(app, ["templates", "show", "NOPE"])

        assert result.exit_code == 1
        assert "not found" in result.output
        assert "Available templates:" in result.output
