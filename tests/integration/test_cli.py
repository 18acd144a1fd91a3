"""Integration tests for CLI commands.

These tests invoke the click application end to end: real files are read
from and written to ``tmp_path``.
"""

from datetime import datetime

from click.testing import CliRunner
from openpyxl import Workbook, load_workbook
import pytest

from tabular_codec.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def visits_csv(tmp_path):
    path = tmp_path / "visits.csv"
    path.write_text(
        "subject,visit,code\nS-001,2024-01-15,0042\nS-002,2024-02-01,2024-01\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def visits_xlsx(tmp_path):
    path = tmp_path / "visits.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Sheet1"
    sheet.append(["subject", "weight", "visit"])
    sheet.append(["S-001", 72.5, datetime(2024, 1, 15)])
    sheet.append(["S-002", 80, None])
    workbook.save(path)
    return path


@pytest.mark.integration
class TestAppGroup:
    """Integration tests for the command group."""

    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("convert", "inspect", "scan"):
            assert command in result.output

    def test_invalid_environment_configuration(self, runner, visits_csv):
        result = runner.invoke(
            app,
            ["inspect", str(visits_csv)],
            env={"TABULAR_CODEC_DELIMITER": "\t"},
        )

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output

    def test_config_file_option(self, runner, tmp_path, visits_xlsx):
        # Arrange
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[write]\ndelimiter = "|"\n')

        # Act
        result = runner.invoke(
            app,
            ["--config", str(config_file), "convert", str(visits_xlsx), "--to", "csv"],
        )

        # Assert
        assert result.exit_code == 0, result.output
        header = (tmp_path / "visits.csv").read_text().splitlines()[0]
        assert header == "subject|weight|visit"


@pytest.mark.integration
class TestConvertCommand:
    """Integration tests for the convert command."""

    def test_help(self, runner):
        result = runner.invoke(app, ["convert", "--help"])

        assert result.exit_code == 0
        assert "SOURCE" in result.output
        assert "--column-format" in result.output

    def test_csv_to_xlsx(self, runner, visits_csv, tmp_path):
        # Act
        result = runner.invoke(app, ["convert", str(visits_csv), "--to", "xlsx"])

        # Assert
        assert result.exit_code == 0, result.output
        sheet = load_workbook(tmp_path / "visits.xlsx")["Sheet1"]
        assert [cell.value for cell in sheet[1]] == ["subject", "visit", "code"]
        assert sheet["B2"].value == datetime(2024, 1, 15)
        assert sheet["C2"].value == "0042"
        assert sheet["C3"].value == "2024-01"

    def test_xlsx_to_csv_with_options(self, runner, visits_xlsx, tmp_path):
        out_dir = tmp_path / "out"

        result = runner.invoke(
            app,
            [
                "convert",
                str(visits_xlsx),
                "--to",
                "csv",
                "--delimiter",
                ";",
                "--date-format",
                "dd.mm.yyyy",
                "--output-dir",
                str(out_dir),
                "--name",
                "export",
            ],
        )

        assert result.exit_code == 0, result.output
        text = (out_dir / "export.csv").read_text(encoding="utf-8")
        assert text == "subject;weight;visit\nS-001;72.5;15.01.2024\nS-002;80;\n"

    def test_column_format_option(self, runner, visits_csv, tmp_path):
        result = runner.invoke(
            app,
            [
                "convert",
                str(visits_csv),
                "--to",
                "xlsx",
                "--column-format",
                "visit=text",
            ],
        )

        assert result.exit_code == 0, result.output
        sheet = load_workbook(tmp_path / "visits.xlsx")["Sheet1"]
        assert sheet["B2"].value == "2024-01-15"

    def test_bad_column_format(self, runner, visits_csv):
        result = runner.invoke(
            app, ["convert", str(visits_csv), "--to", "xlsx", "--column-format", "x"]
        )

        assert result.exit_code == 2
        assert "NAME=TYPE" in result.output

    def test_refuses_to_overwrite_source(self, runner, visits_csv):
        result = runner.invoke(app, ["convert", str(visits_csv), "--to", "csv"])

        assert result.exit_code == 1
        assert "would overwrite it" in result.output

    def test_missing_sheet(self, runner, visits_xlsx):
        result = runner.invoke(
            app, ["convert", str(visits_xlsx), "--to", "csv", "--sheet", "Nope"]
        )

        assert result.exit_code == 1
        assert "Could not read" in result.output

    def test_header_only_source_writes_nothing(self, runner, tmp_path):
        source = tmp_path / "empty.csv"
        source.write_text("a,b\n")

        result = runner.invoke(app, ["convert", str(source), "--to", "xlsx"])

        assert result.exit_code == 0, result.output
        assert "record set was empty" in result.output
        assert not (tmp_path / "empty.xlsx").exists()


@pytest.mark.integration
class TestInspectCommand:
    """Integration tests for the inspect command."""

    def test_inspect_delimited(self, runner, visits_csv):
        result = runner.invoke(app, ["inspect", str(visits_csv)])

        assert result.exit_code == 0, result.output
        assert "Columns of visits.csv" in result.output
        assert "date" in result.output
        assert "First 2 of 2 rows" in result.output

    def test_inspect_spreadsheet_with_row_limit(self, runner, visits_xlsx):
        result = runner.invoke(app, ["inspect", str(visits_xlsx), "--rows", "1"])

        assert result.exit_code == 0, result.output
        assert "number" in result.output
        assert "First 1 of 2 rows" in result.output

    def test_inspect_unreadable(self, runner, tmp_path):
        source = tmp_path / "broken.xlsx"
        source.write_bytes(b"not a workbook")

        result = runner.invoke(app, ["inspect", str(source)])

        assert result.exit_code == 1
        assert "Could not read" in result.output


@pytest.mark.integration
class TestScanCommand:
    """Integration tests for the scan command."""

    @pytest.fixture
    def folder(self, tmp_path, visits_csv, visits_xlsx):
        (tmp_path / "notes.md").write_text("notes")
        return tmp_path

    def test_scan_lists_importable_files(self, runner, folder):
        result = runner.invoke(app, ["scan", str(folder)])

        assert result.exit_code == 0, result.output
        assert "visits.csv" in result.output
        assert "visits.xlsx" in result.output
        assert "2 importable of 3 files" in result.output

    def test_scan_load(self, runner, folder):
        result = runner.invoke(app, ["scan", str(folder), "--load"])

        assert result.exit_code == 0, result.output
        assert "Total" in result.output
        assert "Skipped 1 other file(s)" in result.output

    def test_scan_load_reports_failures(self, runner, folder):
        (folder / "broken.xlsx").write_bytes(b"not a workbook")

        result = runner.invoke(app, ["scan", str(folder), "--load"])

        assert result.exit_code == 1
        assert "Some files could not be imported" in result.output
