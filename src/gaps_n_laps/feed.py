"""Row feeds: turn text and JSON documents into boundary and content rows.

Text feeds hold one row per line::

    # comments and blank lines are ignored
    @mon-13 Monday 13.10
    Development | (08:00 - 11:30) (12:00 - 16:00)
    (16:00 - 16:30)

A line starting with ``@`` opens a group; its first word is the group id and
the rest of the line its label. Every other line is a content row, with an
optional activity before a ``|``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import FeedFormatError
from .models import BoundaryRow, ContentRow, RawRow

BOUNDARY_PREFIX = "@"
COMMENT_PREFIX = "#"
ACTIVITY_SEPARATOR = "|"


def parse_feed_text(text: str) -> list[RawRow]:
    rows: list[RawRow] = []
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        if line.startswith(BOUNDARY_PREFIX):
            rows.append(_parse_boundary(line, line_number))
        else:
            rows.append(_parse_content(line))
    return rows


def read_feed(path: Path) -> list[RawRow]:
    """Read a text feed from disk."""
    return parse_feed_text(Path(path).read_text(encoding="utf-8"))


def _parse_boundary(line: str, line_number: int) -> BoundaryRow:
    header = line[len(BOUNDARY_PREFIX):].strip()
    if not header:
        raise FeedFormatError("group header is missing an id", line_number)
    group_id, _, label = header.partition(" ")
    return BoundaryRow(id=group_id, label=label.strip())


def _parse_content(line: str) -> ContentRow:
    activity, separator, interval_text = line.partition(ACTIVITY_SEPARATOR)
    if not separator:
        return ContentRow(interval_text=line)
    return ContentRow(
        interval_text=interval_text.strip() or None,
        activity=activity.strip() or None,
    )


class BoundaryRowPayload(BaseModel):
    kind: Literal["boundary"]
    id: str = Field(min_length=1)
    label: str = ""

    model_config = ConfigDict(extra="forbid")

    def to_row(self) -> BoundaryRow:
        return BoundaryRow(id=self.id, label=self.label)


class ContentRowPayload(BaseModel):
    kind: Literal["content"]
    interval_text: Optional[str] = None
    activity: Optional[str] = None

    model_config = ConfigDict(extra="forbid")

    def to_row(self) -> ContentRow:
        return ContentRow(interval_text=self.interval_text, activity=self.activity)


RowPayload = Annotated[
    Union[BoundaryRowPayload, ContentRowPayload],
    Field(discriminator="kind"),
]


class FeedPayload(BaseModel):
    """JSON form of a row feed."""

    rows: list[RowPayload] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_rows(self) -> list[RawRow]:
        return [row.to_row() for row in self.rows]
