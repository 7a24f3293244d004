"""Domain models for time-report intervals and day groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Union


@dataclass(slots=True)
class TimeInterval:
    """A single start/stop block of work parsed from a report row."""

    start: datetime
    stop: datetime
    activity: Optional[str] = None
    color: Optional[str] = None

    @property
    def duration(self) -> timedelta:
        return self.stop - self.start


@dataclass(slots=True)
class Group:
    """Intervals collected under one day header, plus their derived metrics."""

    id: str
    label: str = ""
    intervals: list[TimeInterval] = field(default_factory=list)
    total_duration: timedelta = timedelta(0)
    start: Optional[datetime] = None
    stop: Optional[datetime] = None
    total_gap_duration: timedelta = timedelta(0)
    total_overlap_duration: timedelta = timedelta(0)

    @property
    def is_empty(self) -> bool:
        return not self.intervals

    @property
    def span(self) -> timedelta:
        """Worked time plus idle time, the width a group occupies on a timeline."""
        return self.total_duration + self.total_gap_duration


@dataclass(slots=True, frozen=True)
class BoundaryRow:
    """Row that opens a new group (a day header)."""

    id: str
    label: str = ""


@dataclass(slots=True, frozen=True)
class ContentRow:
    """Row carrying interval text and the activity it was logged against."""

    interval_text: Optional[str] = None
    activity: Optional[str] = None


RawRow = Union[BoundaryRow, ContentRow]


@dataclass(slots=True, frozen=True)
class TimelineSlot:
    """Position of one interval on a group timeline, as fractions of the scale."""

    offset: float
    width: float
    color: Optional[str] = None

    @property
    def offset_percent(self) -> float:
        return self.offset * 100

    @property
    def width_percent(self) -> float:
        return self.width * 100
