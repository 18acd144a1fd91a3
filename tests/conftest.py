from datetime import date, datetime
from pathlib import Path

import pytest

CODEC_ENV_VARS = (
    "TABULAR_CODEC_DATE_FORMAT",
    "TABULAR_CODEC_SHEET_NAME",
    "TABULAR_CODEC_DELIMITER",
    "TABULAR_CODEC_HEADER_ROW",
)


@pytest.fixture(autouse=True)
def _isolated_codec_config(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Keep the developer's environment and ./tabular_codec.toml out of tests."""
    for name in CODEC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def visit_records() -> list[dict[str, object]]:
    return [
        {
            "subject": "S-001",
            "visit": date(2024, 1, 15),
            "weight": 72.5,
            "code": "0042",
            "enrolled": True,
        },
        {
            "subject": "S-002",
            "visit": datetime(2024, 2, 1, 9, 30),
            "weight": 80,
            "code": "0107",
            "enrolled": False,
        },
        {
            "subject": "S-003",
            "visit": None,
            "weight": None,
            "code": "2024-01",
            "enrolled": None,
        },
    ]


@pytest.fixture
def plain_records() -> list[dict[str, object]]:
    """Records without date-like or dashed/slashed strings."""
    return [
        {"name": "Ada", "city": "London", "score": 91},
        {"name": "Grace", "city": "Arlington", "score": 88.5},
        {"name": "Linus", "city": "Helsinki", "score": 75},
    ]
