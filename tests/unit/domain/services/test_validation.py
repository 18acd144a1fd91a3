"""Unit tests for input validation."""

from datetime import date
from decimal import Decimal
import math
from pathlib import Path

import pytest

from tabular_codec.domain.entities.columns import HeaderStyle, WriteOptions
from tabular_codec.domain.services.validation import (
    ValidationResult,
    validate_delimiter,
    validate_delimiter_char,
    validate_file_data,
    validate_file_name,
    validate_header_row_index,
    validate_record_set,
    validate_sheet_name,
    validate_source,
    validate_write_options,
)


class TestValidationResult:
    """Collecting and merging errors."""

    def test_new_result_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert not result.is_error

    def test_merge_keeps_every_message(self):
        # Arrange
        first = ValidationResult()
        first.add("delimiter", "bad")
        second = ValidationResult()
        second.add("delimiter", "worse")
        second.add("records", "missing")

        # Act
        merged = ValidationResult().merge(first, second)

        # Assert
        assert merged.errors == {"delimiter": ["bad", "worse"], "records": ["missing"]}
        assert merged.messages() == [
            "delimiter: bad",
            "delimiter: worse",
            "records: missing",
        ]


class TestValidateRecordSet:
    """Record set shape and cell value types."""

    def test_valid_records(self, visit_records):
        assert validate_record_set(visit_records).is_valid

    def test_empty_record_set_is_valid(self):
        assert validate_record_set([]).is_valid

    @pytest.mark.parametrize("records", [None, "abc", {"a": 1}, 42])
    def test_non_sequences_are_rejected(self, records):
        assert "records" in validate_record_set(records).errors

    def test_non_mapping_record_is_reported_by_index(self):
        result = validate_record_set([{"a": 1}, ["a", 1]])
        assert list(result.errors) == ["records[1]"]

    def test_first_record_needs_a_field(self):
        assert "records[0]" in validate_record_set([{}]).errors

    def test_every_bad_value_is_reported(self):
        # Arrange
        records = [
            {"a": object(), "b": date(2024, 1, 1)},
            {"a": 1, "b": [1, 2]},
        ]

        # Act
        result = validate_record_set(records)

        # Assert
        assert set(result.errors) == {"records[0].a", "records[1].b"}
        assert result.errors["records[1].b"] == ["unsupported value type list"]

    def test_non_string_field_names(self):
        result = validate_record_set([{1: "x"}])
        assert "records[0]" in result.errors

    def test_fields_missing_from_the_first_record_are_not_checked(self):
        # Arrange
        records = [{"a": 1}, {"a": 2, "extra": object()}]

        # Act
        result = validate_record_set(records)

        # Assert
        assert result.is_valid

    @pytest.mark.parametrize(
        "value",
        [math.inf, -math.inf, Decimal("Infinity"), Decimal("NaN"), Decimal("sNaN")],
    )
    def test_non_finite_numbers_are_rejected(self, value):
        result = validate_record_set([{"a": value}])

        assert list(result.errors) == ["records[0].a"]
        assert "non-finite number" in result.errors["records[0].a"][0]

    def test_nan_float_is_null_and_large_ints_are_finite(self):
        assert validate_record_set([{"a": math.nan, "b": 10**400}]).is_valid


class TestScalarValidators:
    """Delimiters, sheet names, header rows and sources."""

    @pytest.mark.parametrize("delimiter", [",", ";", "|"])
    def test_allowed_delimiters(self, delimiter):
        assert validate_delimiter(delimiter).is_valid

    @pytest.mark.parametrize("delimiter", ["\t", ":", "", ",,"])
    def test_other_delimiters_are_rejected(self, delimiter):
        assert "delimiter" in validate_delimiter(delimiter).errors

    @pytest.mark.parametrize("char", [",", "\t", ":"])
    def test_any_single_reader_delimiter(self, char):
        assert validate_delimiter_char(char).is_valid

    @pytest.mark.parametrize("char", ["", ";;", '"', "\n", None])
    def test_invalid_reader_delimiters(self, char):
        assert validate_delimiter_char(char).is_error

    def test_sheet_names_for_reading_only_need_text(self):
        assert validate_sheet_name("x" * 40).is_valid
        assert validate_sheet_name("  ").is_error

    def test_sheet_names_for_writing_follow_workbook_rules(self):
        assert validate_sheet_name("x" * 32, for_write=True).is_error
        assert validate_sheet_name("Q1/Q2", for_write=True).is_error
        assert validate_sheet_name("Visits", for_write=True).is_valid

    @pytest.mark.parametrize("index", [0, -1, True, "1", 1.0])
    def test_header_row_index_must_be_a_positive_int(self, index):
        assert validate_header_row_index(index).is_error

    def test_sources(self):
        assert validate_source(Path("data.csv")).is_valid
        assert validate_source(b"a,b\n").is_valid
        assert validate_source("").is_error
        assert validate_source(3).is_error


class TestValidateWriteOptions:
    """Options shared by both writers."""

    def test_defaults_are_valid(self):
        assert validate_write_options(WriteOptions(), spreadsheet=True).is_valid

    def test_unknown_column_format(self):
        options = WriteOptions(column_formats={"id": "currency"})

        result = validate_write_options(options, spreadsheet=False)

        assert "column_formats.id" in result.errors

    def test_boolean_cannot_be_declared(self):
        options = WriteOptions(column_formats={"flag": "boolean"})

        result = validate_write_options(options, spreadsheet=False)

        assert "column_formats.flag" in result.errors

    def test_sheet_and_header_style_only_checked_for_spreadsheets(self):
        options = WriteOptions(
            sheet_name="bad:name", header_style=HeaderStyle(fill_color="blue")
        )

        assert validate_write_options(options, spreadsheet=False).is_valid
        result = validate_write_options(options, spreadsheet=True)
        assert set(result.errors) == {"sheet_name", "header_style.fill_color"}

    def test_blank_date_format(self):
        options = WriteOptions(date_format=" ")

        result = validate_write_options(options, spreadsheet=False)

        assert "date_format" in result.errors


class TestFileValidators:
    """File names and payloads handed to persistence."""

    def test_valid_file_name(self):
        assert validate_file_name("visits 2024.xlsx").is_valid

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "Filename cannot be empty"),
            ("a/b.csv", "Filename contains invalid characters"),
            ("..csv", "Filename cannot contain '..'"),
        ],
    )
    def test_invalid_file_names(self, name, message):
        assert message in validate_file_name(name).errors["name"]

    def test_file_data(self):
        assert validate_file_data(b"x").is_valid
        assert validate_file_data("x").is_valid
        assert validate_file_data(b"").errors["data"] == ["File data cannot be empty"]
        assert validate_file_data(3).is_error
