"""Tests for the command-line interface."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from athyg import load
from athyg.cli import app

runner = CliRunner()


class TestLoadCommand:
    """Tests for `athyg load`."""

    def test_summary(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
    ) -> None:
        """Test loading files prints progress and totals."""
        a = write_catalog("a.csv", "v1", [make_line("v1")] * 2)
        b = write_catalog("b.csv", "v1", [make_line("v1", gaia="abc")])

        result = runner.invoke(app, ["load", str(a), str(b), "--schema", "v1"])

        assert result.exit_code == 0, result.output
        assert "Parsing" in result.output
        assert "Records" in result.output
        assert "gaia: 2/3" in result.output

    def test_schema_case_insensitive(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
    ) -> None:
        """Test that --schema accepts upper-case names."""
        a = write_catalog("a.csv", "v2", [make_line("v2")])

        result = runner.invoke(app, ["load", str(a), "--schema", "V2", "--quiet"])

        assert result.exit_code == 0, result.output

    def test_missing_file_exits_1(self, tmp_path: Path) -> None:
        """Test that an invalid path is reported as an error."""
        result = runner.invoke(app, ["load", str(tmp_path / "nope.csv"), "-s", "v1"])

        assert result.exit_code == 1
        assert "Invalid catalog path" in result.output

    def test_short_line_exits_1(self, write_catalog: Callable[..., Path]) -> None:
        """Test that an arity mismatch is reported as an error."""
        a = write_catalog("a.csv", "v3", ["1,2,3"])

        result = runner.invoke(app, ["load", str(a), "-s", "v3"])

        assert result.exit_code == 1
        assert "Expected 34 fields, got 3" in result.output

    def test_output_and_validate(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
        tmp_path: Path,
    ) -> None:
        """Test exporting with validation and parallel workers."""
        a = write_catalog("a.csv", "v3", [make_line("v3", id="1")])
        b = write_catalog("b.csv", "v3", [make_line("v3", id="2")])
        out = tmp_path / "merged.csv"

        result = runner.invoke(
            app,
            ["load", str(a), str(b), "-s", "v3", "-w", "2", "--validate", "-o", str(out)],
        )

        assert result.exit_code == 0, result.output
        assert "Schema validation passed" in result.output
        assert [r.id for r in load("v3", [out])] == [1, 2]

    def test_validation_failure_exits_1(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
    ) -> None:
        """Test that out-of-range values fail --validate."""
        a = write_catalog("a.csv", "v1", [make_line("v1", dec="-95")])

        result = runner.invoke(app, ["load", str(a), "-s", "v1", "--validate"])

        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_largest_identifier(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
        tmp_path: Path,
    ) -> None:
        """Test that identifiers above 2**63 load, validate and export."""
        a = write_catalog("a.csv", "v1", [make_line("v1", id="18446744073709551615")])
        out = tmp_path / "out.csv"

        result = runner.invoke(app, ["load", str(a), "-s", "v1", "--validate", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert "Records" in result.output
        assert load("v1", [out])[0].id == 2**64 - 1

    def test_table_conversion_failure_exits_1(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that a failing DataFrame conversion is reported as an error."""

        def failing(records: Any, version: Any) -> None:
            raise TypeError("cannot safely cast")

        monkeypatch.setattr("athyg.export.records_to_dataframe", failing)
        a = write_catalog("a.csv", "v1", [make_line("v1")])

        result = runner.invoke(app, ["load", str(a), "-s", "v1"])

        assert result.exit_code == 1
        assert "could not build table" in result.output
        assert "cannot safely cast" in result.output


class TestRunCommand:
    """Tests for `athyg run`."""

    def test_run_from_config(
        self,
        make_line: Callable[..., str],
        write_catalog: Callable[..., Path],
        tmp_path: Path,
    ) -> None:
        """Test loading files listed in a YAML config."""
        write_catalog("a.csv", "v2", [make_line("v2")])
        write_catalog("b.csv", "v2", [make_line("v2")])
        config_path = tmp_path / "catalog.yaml"
        config_path.write_text("version: v2\nfiles: [a.csv, b.csv]\nlogging:\n  level: ERROR\n")

        result = runner.invoke(app, ["run", "--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert "Records" in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        """Test that a config without files exits with an error."""
        config_path = tmp_path / "catalog.yaml"
        config_path.write_text("version: v2\n")

        result = runner.invoke(app, ["run", "--config", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestSchemaCommand:
    """Tests for `athyg schema`."""

    def test_v3_columns(self) -> None:
        """Test that the column table is printed."""
        result = runner.invoke(app, ["schema", "v3"])

        assert result.exit_code == 0, result.output
        assert "34 columns" in result.output
        assert "ci" in result.output
        assert "spect_src" in result.output

    def test_unknown_version(self) -> None:
        """Test that unknown versions are rejected by the CLI."""
        result = runner.invoke(app, ["schema", "v7"])
        assert result.exit_code != 0
