"""Unit tests for the delimited text reader."""

from unittest.mock import MagicMock

import pytest

from tabular_codec.infrastructure.io.delimited_reader import (
    DelimitedReader,
    read_delimited,
)
from tabular_codec.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
    DataValidationError,
)


class TestReadDelimited:
    """Values come back as text exactly as written."""

    def test_values_are_never_coerced(self):
        # Arrange
        data = b"id,joined,score\n0042,2024-01-01,7.50\n"

        # Act
        records = read_delimited(data)

        # Assert
        assert records == [{"id": "0042", "joined": "2024-01-01", "score": "7.50"}]

    def test_reads_from_a_path(self, tmp_path):
        path = tmp_path / "people.csv"
        path.write_text("name,city\nAda,London\nGrace,Arlington\n", encoding="utf-8")

        records = read_delimited(path)

        assert records == [
            {"name": "Ada", "city": "London"},
            {"name": "Grace", "city": "Arlington"},
        ]

    def test_missing_value_markers_stay_text(self):
        records = read_delimited(b"a,b,c\nNA,null,\n")

        assert records == [{"a": "NA", "b": "null", "c": ""}]

    def test_whitespace_is_preserved(self):
        assert read_delimited(b"a,b\n  x  ,y\n") == [{"a": "  x  ", "b": "y"}]

    def test_quoted_fields(self):
        data = b'a,b\n"London, UK","line one\nline two"\n'

        records = read_delimited(data)

        assert records == [{"a": "London, UK", "b": "line one\nline two"}]

    def test_text_after_a_closing_quote_is_kept(self):
        records = read_delimited(b'a,b\n"x"y,2\n')

        assert records == [{"a": "xy", "b": "2"}]

    def test_quotes_inside_a_field_are_kept(self):
        records = read_delimited(b'a,b\nsay "hi",2\n')

        assert records == [{"a": 'say "hi"', "b": "2"}]

    def test_byte_order_mark_is_stripped(self):
        records = read_delimited(b"\xef\xbb\xbfname\nAda\n")

        assert list(records[0]) == ["name"]

    def test_custom_delimiter(self):
        records = read_delimited(b"a\tb\n1\t2\n", delimiter_char="\t")

        assert records == [{"a": "1", "b": "2"}]

    def test_blank_lines_are_skipped(self):
        assert read_delimited(b"a\n1\n\n2\n") == [{"a": "1"}, {"a": "2"}]

    def test_short_rows_are_padded(self):
        records = read_delimited(b"a,b,c\n1\n")

        assert records == [{"a": "1", "b": "", "c": ""}]

    def test_long_rows_are_truncated_with_a_warning(self):
        # Arrange
        logger = MagicMock()

        # Act
        records = read_delimited(b"a,b\n1,2,3\n4,5\n", logger=logger)

        # Assert
        assert records == [{"a": "1", "b": "2"}, {"a": "4", "b": "5"}]
        logger.warning.assert_called_once()
        assert "truncated 1 row(s)" in logger.warning.call_args.args[0]

    def test_every_long_row_is_counted(self):
        # Arrange
        logger = MagicMock()

        # Act
        records = read_delimited(b"a\n1,x\n2\n3,y,z\n", logger=logger)

        # Assert
        assert records == [{"a": "1"}, {"a": "2"}, {"a": "3"}]
        assert "truncated 2 row(s)" in logger.warning.call_args.args[0]

    def test_no_warning_when_rows_fit(self):
        logger = MagicMock()

        read_delimited(b"a,b\n1\n2,3\n", logger=logger)

        logger.warning.assert_not_called()

    def test_duplicate_headers_are_disambiguated(self):
        records = read_delimited(b"a,a\n1,2\n")

        assert records == [{"a": "1", "a.1": "2"}]

    def test_empty_source(self):
        assert read_delimited(b"") == []

    def test_header_only(self):
        assert read_delimited(b"a,b\n") == []


class TestReadDelimitedFailures:
    """Invalid arguments, missing files and undecodable content."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError):
            read_delimited(tmp_path / "absent.csv")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(DataSourceNotFoundError, match="Not a file"):
            read_delimited(tmp_path)

    @pytest.mark.parametrize("delimiter_char", ["", ";;", '"'])
    def test_invalid_delimiter(self, delimiter_char):
        with pytest.raises(DataValidationError):
            read_delimited(b"a\n1\n", delimiter_char=delimiter_char)

    def test_invalid_utf8(self):
        with pytest.raises(DataParseError):
            read_delimited(b"name\n\xc3\x28\n")


class TestDelimitedReader:
    def test_logs_loaded_records(self):
        logger = MagicMock()

        DelimitedReader(logger).read(b"a;b\n1;2\n", ";")

        logger.log_records_loaded.assert_called_once()
        label, row_count, column_count = logger.log_records_loaded.call_args.args
        assert label.endswith("bytes in memory>")
        assert (row_count, column_count) == (1, 2)
