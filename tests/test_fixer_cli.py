"""
Tests for the barcode repair CLI.
"""

import json
import tomllib
from pathlib import Path

from click.testing import CliRunner

from eanfix.models import RepairResult
from eanfix.cli import format_result, main


class TestFixerCli:
    """Tests for the fix-barcode command."""

    def test_fixes_given_barcodes(self):
        """Test barcodes from arguments are repaired."""
        runner = CliRunner()
        result = runner.invoke(main, ["40063X1333931", "40063813339X1", "--no-pause"])

        assert result.exit_code == 0
        assert result.output.count("Fixed Barcode: 4006381333931") == 2

    def test_uses_demo_barcodes(self, monkeypatch):
        """Test demo barcodes from settings are used without arguments."""
        monkeypatch.setenv("EANFIX_DEMO_BARCODES", '["400638133393X"]')
        runner = CliRunner()
        result = runner.invoke(main, ["--no-pause"])

        assert result.exit_code == 0
        assert "Fixed Barcode: 4006381333931" in result.output

    def test_reports_errors(self):
        """Test invalid barcodes print an error and fail the command."""
        runner = CliRunner()
        result = runner.invoke(main, ["40063X1333931", "40063A1333931", "--no-pause"])

        assert result.exit_code == 1
        assert "Fixed Barcode: 4006381333931" in result.output
        assert "Error: Barcode contains non-numeric characters." in result.output

    def test_json_output(self):
        """Test JSON output emits one result per line."""
        runner = CliRunner()
        result = runner.invoke(main, ["40063X1333931", "--format", "json", "--no-pause"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("{")]
        assert len(lines) == 1
        data = json.loads(lines[0])
        assert data["fixed_code"] == "4006381333931"
        assert data["broken_index"] == 5
        assert data["missing_digit"] == 8

    def test_pause_without_tty(self):
        """Test pausing is skipped when input is not interactive."""
        runner = CliRunner()
        result = runner.invoke(main, ["4006381333931"])

        assert result.exit_code == 0
        assert "Fixed Barcode: 4006381333931" in result.output


class TestFormatResult:
    """Tests for text formatting."""

    def test_format_fixed(self):
        """Test repaired results."""
        result = RepairResult(code="40063X1333931", fixed_code="4006381333931")
        assert format_result(result) == "Fixed Barcode: 4006381333931"

    def test_format_error(self):
        """Test failed results."""
        result = RepairResult(code="123", error="Invalid barcode length.")
        assert format_result(result) == "Error: Invalid barcode length."


class TestPackaging:
    """Tests for the installed entry point."""

    def test_script_ships_inside_package(self):
        """Test the console script targets eanfix and only eanfix is packaged."""
        pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
        with open(pyproject, "rb") as f:
            data = tomllib.load(f)

        assert data["project"]["scripts"]["fix-barcode"] == "eanfix.cli:main"
        assert data["tool"]["poetry"]["packages"] == [{"include": "eanfix"}]
