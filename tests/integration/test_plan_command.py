"""Integration tests for the garden-planner CLI.

These tests drive the CLI end-to-end, including:
- Default prices and layout
- Price overrides and design files
- Config files and output formats
- Error reporting and exit codes
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from garden_planner.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
DESIGNS_PATH = FIXTURES_PATH / "designs"
CONFIGS_PATH = FIXTURES_PATH / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestPlanCommand:
    """Tests for costing designs from the command line."""

    def test_no_arguments(self, runner: CliRunner) -> None:
        """Example prices and the default layout are used."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "Garden Planner v0.2"
        assert "    Rectangle 2.0 2.0" in result.output
        assert "Total garden area is:     8.00 m2." in result.output
        assert "Total wall length is:    20.00 m." in result.output
        assert "Total soil required:      1.60 m3." in result.output
        assert "Total garden cost is: $ 469.60." in result.output

    def test_price_overrides(self, runner: CliRunner) -> None:
        """Two arguments override the prices for the default layout."""
        result = runner.invoke(app, ["100", "20"])
        assert result.exit_code == 0
        assert "Total garden cost is: $ 560.00." in result.output

    def test_design_file(self, runner: CliRunner) -> None:
        """Three arguments load beds from a design file."""
        path = DESIGNS_PATH / "mixed_case.txt"
        result = runner.invoke(app, ["81", "17", str(path)])
        assert result.exit_code == 0
        assert "    Rectangle 3.0 4.0" in result.output
        assert "    Rectangle 1.5 2.5" in result.output
        assert "    Rectangle 0.5 0.5" in result.output
        # 12 + 3.75 + 0.25 m2, 14 + 8 + 2 m of wall
        assert "Total garden area is:    16.00 m2." in result.output
        assert "Total wall length is:    24.00 m." in result.output

    def test_comment_only_design(self, runner: CliRunner) -> None:
        """A comment-only design costs nothing."""
        path = DESIGNS_PATH / "comments_only.txt"
        result = runner.invoke(app, ["81", "17", str(path)])
        assert result.exit_code == 0
        assert "Total garden cost is: $   0.00." in result.output

    def test_single_price_rejected(self, runner: CliRunner) -> None:
        """Giving only the soil price is an error."""
        result = runner.invoke(app, ["81"])
        assert result.exit_code == 1
        assert "WALL_PRICE" in result.output

    def test_malformed_design(self, runner: CliRunner) -> None:
        """A bad line aborts the run and names the line."""
        path = DESIGNS_PATH / "malformed.txt"
        result = runner.invoke(app, ["81", "17", str(path)])
        assert result.exit_code == 1
        assert "line 2: illegal garden bed: square 3 4" in result.output
        assert "Total garden cost" not in result.output

    def test_missing_design_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """A missing design file aborts the run."""
        path = tmp_path / "missing.txt"
        result = runner.invoke(app, ["81", "17", str(path)])
        assert result.exit_code == 1
        assert "Design file not found" in result.output


class TestPlanCommandOptions:
    """Tests for config file and output options."""

    def test_config_file(self, runner: CliRunner) -> None:
        """Prices and design come from the config file."""
        result = runner.invoke(app, ["--config", str(CONFIGS_PATH / "valid.json")])
        assert result.exit_code == 0
        assert "Total garden cost is: $ 560.00." in result.output

    def test_cli_prices_override_config(self, runner: CliRunner) -> None:
        """CLI prices win over the config file."""
        result = runner.invoke(
            app, ["81", "17", "-c", str(CONFIGS_PATH / "valid.json")]
        )
        assert result.exit_code == 0
        assert "Total garden cost is: $ 469.60." in result.output

    def test_invalid_config(self, runner: CliRunner) -> None:
        """An invalid config file aborts the run."""
        result = runner.invoke(
            app, ["--config", str(CONFIGS_PATH / "unknown_field.json")]
        )
        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output

    def test_json_format(self, runner: CliRunner) -> None:
        """JSON output can be requested."""
        result = runner.invoke(app, ["--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["totals"]["total_cost"] == pytest.approx(469.6)
        assert len(data["beds"]) == 3

    def test_unknown_format(self, runner: CliRunner) -> None:
        """Unknown output formats are rejected."""
        result = runner.invoke(app, ["--format", "xml"])
        assert result.exit_code == 1
        assert "output.format" in result.output

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """The report can be written to a file."""
        out = tmp_path / "report.txt"
        result = runner.invoke(app, ["--output", str(out)])
        assert result.exit_code == 0
        assert "Report written to" in result.output
        content = out.read_text(encoding="utf-8")
        assert content.startswith("Garden Planner v0.2\n")
        assert "Total garden cost is: $ 469.60." in content

    def test_verbose(self, runner: CliRunner) -> None:
        """Verbose mode still produces the report."""
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert "Total garden cost is: $ 469.60." in result.output
