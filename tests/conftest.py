from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from gaps_n_laps.models import BoundaryRow, ContentRow, RawRow


@pytest.fixture()
def today() -> dt.date:
    return dt.date(2024, 1, 1)


@pytest.fixture()
def week_rows() -> list[RawRow]:
    return [
        BoundaryRow("mon", "Monday"),
        ContentRow("(09:00 - 12:00)", "Development"),
        ContentRow("(13:00 - 17:00)", "Meetings"),
        BoundaryRow("tue", "Tuesday"),
        ContentRow("(10:00 - 13:00) (12:00 - 14:00)", "Development"),
    ]


@pytest.fixture()
def feed_file(tmp_path: Path) -> Path:
    path = tmp_path / "timesheet.txt"
    path.write_text(
        "# week 1\n"
        "@mon Monday\n"
        "Development | (09:00 - 12:00)\n"
        "Meetings | (13:00 - 17:00)\n"
        "@tue Tuesday\n"
        "(08:00 - 10:00)\n",
        encoding="utf-8",
    )
    return path
