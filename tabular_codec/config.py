from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults
from .domain.entities.columns import HeaderStyle, WriteOptions
from .domain.entities.records import COLUMN_TYPES, TypeTag

CONFIG_FILE_NAME = "tabular_codec.toml"


def _empty_column_formats() -> dict[str, str]:
    return {}


@dataclass(frozen=True, slots=True)
class CodecConfig:
    date_format: str = Defaults.DATE_FORMAT
    sheet_name: str = Defaults.SHEET_NAME
    delimiter: str = Defaults.DELIMITER
    header_row_index: int = Defaults.HEADER_ROW_INDEX
    min_column_width: int = Defaults.MIN_COLUMN_WIDTH
    column_padding: int = Defaults.COLUMN_PADDING
    header_fill_color: str | None = Defaults.HEADER_FILL_COLOR
    header_font_size: float = Defaults.HEADER_FONT_SIZE
    column_formats: dict[str, str] = field(default_factory=_empty_column_formats)

    def __post_init__(self) -> None:
        if not self.date_format.strip():
            raise ValueError("date_format must not be empty")
        if not self.sheet_name.strip():
            raise ValueError("sheet_name must not be empty")
        if self.delimiter not in Constraints.ALLOWED_DELIMITERS:
            raise ValueError(
                f"delimiter must be one of {' '.join(Constraints.ALLOWED_DELIMITERS)}"
                f", got {self.delimiter!r}"
            )
        if self.header_row_index < 1:
            raise ValueError(
                f"header_row_index must be positive, got {self.header_row_index}"
            )
        if self.min_column_width < 1:
            raise ValueError(
                f"min_column_width must be positive, got {self.min_column_width}"
            )
        if self.column_padding < 0:
            raise ValueError(
                f"column_padding must not be negative, got {self.column_padding}"
            )
        if self.header_font_size <= 0:
            raise ValueError(
                f"header_font_size must be positive, got {self.header_font_size}"
            )
        for name, tag in self.column_formats.items():
            if tag.lower() not in COLUMN_TYPES:
                raise ValueError(f"column_formats.{name}: unknown type {tag!r}")

    @classmethod
    def from_env(cls) -> CodecConfig:
        return cls(
            date_format=os.getenv("TABULAR_CODEC_DATE_FORMAT", Defaults.DATE_FORMAT),
            sheet_name=os.getenv("TABULAR_CODEC_SHEET_NAME", Defaults.SHEET_NAME),
            delimiter=os.getenv("TABULAR_CODEC_DELIMITER", Defaults.DELIMITER),
            header_row_index=int(
                os.getenv("TABULAR_CODEC_HEADER_ROW", str(Defaults.HEADER_ROW_INDEX))
            ),
        )

    def header_style(self) -> HeaderStyle:
        return HeaderStyle(
            font_size=self.header_font_size, fill_color=self.header_fill_color
        )

    def write_options(
        self, column_formats: Mapping[str, TypeTag | str] | None = None
    ) -> WriteOptions:
        formats: dict[str, TypeTag | str] = dict(self.column_formats)
        formats.update(column_formats or {})
        return WriteOptions(
            sheet_name=self.sheet_name,
            date_format=self.date_format,
            column_formats=formats,
            header_style=self.header_style(),
            min_column_width=self.min_column_width,
            column_padding=self.column_padding,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> CodecConfig:
        config = CodecConfig.from_env()
        if config_file is None:
            config_file = Path(CONFIG_FILE_NAME)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: CodecConfig) -> CodecConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        write = _get_table(data, "write")
        read = _get_table(data, "read")
        header = _get_table(data, "header")
        date_format = base_config.date_format
        if (value := write.get("date_format")) is not None:
            date_format = str(value)
        sheet_name = base_config.sheet_name
        if (value := write.get("sheet_name")) is not None:
            sheet_name = str(value)
        delimiter = base_config.delimiter
        if (value := write.get("delimiter")) is not None:
            delimiter = str(value)
        min_column_width = base_config.min_column_width
        if (value := write.get("min_column_width")) is not None:
            min_column_width = _coerce_int(value, key="write.min_column_width")
        column_padding = base_config.column_padding
        if (value := write.get("column_padding")) is not None:
            column_padding = _coerce_int(value, key="write.column_padding")
        column_formats = dict(base_config.column_formats)
        for name, tag in _get_table(write, "column_formats").items():
            column_formats[str(name)] = str(tag)
        header_row_index = base_config.header_row_index
        if (value := read.get("header_row_index")) is not None:
            header_row_index = _coerce_int(value, key="read.header_row_index")
        header_fill_color = base_config.header_fill_color
        if "fill_color" in header:
            raw = header.get("fill_color")
            cleaned = str(raw).strip() if raw is not None else ""
            header_fill_color = cleaned or None
        header_font_size = base_config.header_font_size
        if (value := header.get("font_size")) is not None:
            header_font_size = _coerce_float(value, key="header.font_size")
        return CodecConfig(
            date_format=date_format,
            sheet_name=sheet_name,
            delimiter=delimiter,
            header_row_index=header_row_index,
            min_column_width=min_column_width,
            column_padding=column_padding,
            header_fill_color=header_fill_color,
            header_font_size=header_font_size,
            column_formats=column_formats,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float, str)):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, (int, str)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
