"""Integration tests for the normalize, columns and layout CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from furniture.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_shortened_query(self, runner: CliRunner) -> None:
        """The repaired configuration and shortened link are printed."""
        result = runner.invoke(app, ["normalize", "width=120&columns=4&colCfg=D1SR,DR5"])

        assert result.exit_code == 0
        assert '"columns": 3' in result.output
        assert "Query: width=120&columns=3&color=%23baa397&colCfg=D2SR,DR3,DR3" in result.output

    def test_other_family(self, runner: CliRunner) -> None:
        """The family option selects the constraint table."""
        result = runner.invoke(app, ["normalize", "width=500", "--family", "bedside"])

        assert result.exit_code == 0
        assert '"family": "bedside"' in result.output
        assert '"width": 80' in result.output

    def test_unknown_family(self, runner: CliRunner) -> None:
        """Unknown families are rejected by option parsing."""
        result = runner.invoke(app, ["normalize", "width=100", "--family", "sofa"])

        assert result.exit_code == 2

    def test_constraint_overrides(self, runner: CliRunner, fixtures_path: Path) -> None:
        """Override files widen the clamping range."""
        result = runner.invoke(
            app,
            [
                "normalize",
                "width=90",
                "--family",
                "bedside",
                "--constraints",
                str(fixtures_path / "valid_overrides.json"),
            ],
        )

        assert result.exit_code == 0
        assert '"width": 90' in result.output

    def test_bad_constraint_file(self, runner: CliRunner, fixtures_path: Path) -> None:
        """A broken override file exits with code 1."""
        result = runner.invoke(
            app,
            ["normalize", "width=90", "--constraints", str(fixtures_path / "invalid_json.json")],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestSetColumnCommand:
    """Tests for the set-column command."""

    QUERY = "width=120&height=90&columns=3&colCfg=DR3,D2SL,DR3"

    def test_drawer_counts_follow(self, runner: CliRunner) -> None:
        """Other drawer columns take the chosen drawer count."""
        result = runner.invoke(app, ["set-column", self.QUERY, "--column", "2", "--type", "DRAWERS_4"])

        assert result.exit_code == 0
        assert "Column 1: DRAWERS_4" in result.output
        assert "Column 2: DOOR_2_SHELVES" in result.output
        assert "colCfg=DR4,D2SL,DR4" in result.output

    def test_type_that_does_not_fit(self, runner: CliRunner) -> None:
        """A type outside the column's table exits with code 1."""
        result = runner.invoke(app, ["set-column", self.QUERY, "--column", "0", "--type", "DRAWERS_1"])

        assert result.exit_code == 1
        assert "does not fit" in result.output

    def test_unknown_type(self, runner: CliRunner) -> None:
        """Unknown type names are rejected by option parsing."""
        result = runner.invoke(app, ["set-column", self.QUERY, "--column", "0", "--type", "SOFA"])

        assert result.exit_code == 2

    def test_template_family(self, runner: CliRunner) -> None:
        """Template families have no column types to change."""
        result = runner.invoke(
            app, ["set-column", "", "--column", "0", "--type", "DRAWERS_3", "--family", "rack"]
        )

        assert result.exit_code == 1
        assert "has no column configurations" in result.output


class TestColumnsCommand:
    """Tests for the columns command."""

    def test_bedside_validity(self, runner: CliRunner) -> None:
        """Every count is listed with its legality and an illegal current count is replaced."""
        result = runner.invoke(
            app,
            ["columns", "--family", "bedside", "--width", "70", "--height", "50", "--current", "2"],
        )

        assert result.exit_code == 0
        assert "1 column(s):   70.0 cm each - legal" in result.output
        assert "2 column(s):   35.0 cm each - illegal" in result.output
        assert "Chosen column count: 1" in result.output

    def test_no_legal_count(self, runner: CliRunner) -> None:
        """Dimensions without any legal count report a table error."""
        result = runner.invoke(
            app, ["columns", "--family", "stand", "--width", "80", "--depth", "20"]
        )

        assert result.exit_code == 1
        assert "Constraint table error" in result.output


class TestLayoutCommand:
    """Tests for the layout command."""

    def test_rack_layout(self, runner: CliRunner) -> None:
        """Templates, grid and link are printed."""
        result = runner.invoke(
            app,
            [
                "layout",
                "--width",
                "160",
                "-t",
                "OPEN_SHELVES_AND_DRAWERS",
                "-t",
                "HALF_OPEN_HALF_CLOSED",
            ],
        )

        assert result.exit_code == 0
        assert "Master grid: spacing 29.67 cm" in result.output
        assert "Column 1: OPEN_SHELVES_AND_DRAWERS" in result.output
        assert "Column 2: HALF_OPEN_HALF_CLOSED" in result.output
        assert "Query: width=160&columns=2&color=%23baa397&rackCfg=ODS,HC" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        """The --json flag prints the full layout."""
        result = runner.invoke(app, ["layout", "--width", "160", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["grid"]["positions"]) == 5
        assert len(data["layout"]) == 2

    def test_no_align(self, runner: CliRunner) -> None:
        """Alignment can be switched off."""
        result = runner.invoke(app, ["layout", "--no-align"])

        assert result.exit_code == 0
        assert "Master grid" not in result.output

    def test_family_without_templates(self, runner: CliRunner) -> None:
        """Stand-like families have no zone layout."""
        result = runner.invoke(app, ["layout", "--family", "stand"])

        assert result.exit_code == 1
        assert "has no zone layout" in result.output
