from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ...constants import Defaults
from .records import TypeTag


def _empty_column_formats() -> dict[str, TypeTag | str]:
    return {}


@dataclass(frozen=True, slots=True)
class HeaderStyle:
    bold: bool = True
    font_size: float = Defaults.HEADER_FONT_SIZE
    fill_color: str | None = Defaults.HEADER_FILL_COLOR
    font_color: str | None = None


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    name: str
    type: TypeTag
    width: int
    format_string: str | None = None

    @property
    def is_date(self) -> bool:
        return self.type is TypeTag.DATE


@dataclass(frozen=True, slots=True)
class WriteOptions:
    sheet_name: str = Defaults.SHEET_NAME
    date_format: str = Defaults.DATE_FORMAT
    column_formats: Mapping[str, TypeTag | str] = field(
        default_factory=_empty_column_formats
    )
    header_style: HeaderStyle = field(default_factory=HeaderStyle)
    min_column_width: int = Defaults.MIN_COLUMN_WIDTH
    column_padding: int = Defaults.COLUMN_PADDING
