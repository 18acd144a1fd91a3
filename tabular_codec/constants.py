from typing import ClassVar


class Defaults:
    DATE_FORMAT = "mm/dd/yyyy"
    SHEET_NAME = "Sheet1"
    DELIMITER = ","
    HEADER_ROW_INDEX = 1
    MIN_COLUMN_WIDTH = 10
    COLUMN_PADDING = 2
    HEADER_FILL_COLOR = "FFE0E0E0"
    HEADER_FONT_SIZE = 12.0
    TEXT_NUMBER_FORMAT = "@"


class Constraints:
    ALLOWED_DELIMITERS: ClassVar[tuple[str, ...]] = (",", ";", "|")
    SHEET_NAME_MAX_LENGTH = 31
    SHEET_NAME_FORBIDDEN_CHARS: ClassVar[tuple[str, ...]] = (
        "[",
        "]",
        ":",
        "*",
        "?",
        "/",
        "\\",
    )


class Patterns:
    ISO_DATE_PREFIX = "^\\d{4}-\\d{2}-\\d{2}"
    SAFE_FILE_NAME = "^[\\w\\-. ]+$"
    ARGB_COLOR = "^(?:[0-9A-Fa-f]{2})?[0-9A-Fa-f]{6}$"


class Messages:
    EMPTY_SPREADSHEET = (
        "The spreadsheet ran successfully, but the record set was empty"
    )
    EMPTY_DELIMITED = (
        "Delimited file creation attempted, but the record set was empty"
    )


class FileKinds:
    SPREADSHEET_SUFFIXES: ClassVar[tuple[str, ...]] = (".xlsx", ".xlsm")
    DELIMITED_SUFFIXES: ClassVar[tuple[str, ...]] = (".csv", ".txt", ".tsv")


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
