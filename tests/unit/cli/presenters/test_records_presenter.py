"""Unit tests for RecordsPresenter class."""

from datetime import date
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from tabular_codec.application.models import (
    ExportRecordsResponse,
    ImportRecordsResponse,
)
from tabular_codec.cli.presenters import RecordsPresenter
from tabular_codec.domain.services.column_formatter import derive_columns


class TestRecordsPresenter:
    """Test suite for RecordsPresenter class."""

    @pytest.fixture
    def console(self):
        """Plain console so assertions see text without escape codes."""
        return Console(file=StringIO(), width=120)

    @pytest.fixture
    def presenter(self, console):
        return RecordsPresenter(console, date_format="yyyy-mm-dd")

    def _output(self, console) -> str:
        return console.file.getvalue()

    def test_present_columns(self, presenter, console, plain_records):
        presenter.present_columns("scores.csv", derive_columns(plain_records))

        output = self._output(console)
        assert "Columns of scores.csv" in output
        assert "city" in output
        assert "@" in output
        assert "General" in output
        assert "12" in output

    def test_present_preview_limits_rows(self, presenter, console):
        # Arrange
        response = ImportRecordsResponse(
            source=Path("visits.xlsx"),
            records=[
                {"subject": "S-001", "visit": date(2024, 1, 15)},
                {"subject": "S-002", "visit": None},
                {"subject": "S-003", "visit": None},
            ],
            columns=["subject", "visit"],
        )

        # Act
        presenter.present_preview(response, limit=2)

        # Assert
        output = self._output(console)
        assert "First 2 of 3 rows" in output
        assert "2024-01-15" in output
        assert "∅" in output
        assert "S-003" not in output

    def test_present_preview_without_rows(self, presenter, console):
        presenter.present_preview(
            ImportRecordsResponse(source=Path("empty.csv")), limit=10
        )

        assert "empty.csv has no data rows" in self._output(console)

    def test_markup_in_values_is_shown_literally(self, presenter, console):
        response = ImportRecordsResponse(
            source=Path("notes.csv"),
            records=[{"note": "[bold]not bold[/bold]"}],
            columns=["note"],
        )

        presenter.present_preview(response, limit=5)

        assert "[bold]not bold[/bold]" in self._output(console)

    def test_present_export(self, presenter, console):
        presenter.present_export(
            ExportRecordsResponse(
                output_path=Path("out/scores.xlsx"),
                byte_count=4096,
                row_count=3,
                columns=["name", "city", "score"],
            )
        )

        output = self._output(console)
        assert "Wrote 3 rows x 3 columns" in output
        assert "4,096 bytes" in output

    def test_present_empty_export(self, presenter, console):
        presenter.present_export(
            ExportRecordsResponse(empty_message="the record set was empty")
        )

        assert "the record set was empty" in self._output(console)
