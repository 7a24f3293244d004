"""Threshold settings used to flag group metrics for display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from .models import Group


@dataclass(slots=True, frozen=True)
class DurationThreshold:
    """A duration limit; values on the wrong side of it are flagged."""

    limit: timedelta
    flag_when_exceeded: bool = True

    def is_flagged(self, value: timedelta) -> bool:
        if self.flag_when_exceeded:
            return value > self.limit
        return value < self.limit


@dataclass(slots=True, frozen=True)
class GroupFlags:
    total: bool
    gap: bool
    overlap: bool


@dataclass(slots=True, frozen=True)
class ReportSettings:
    """Display thresholds for a report. They never change the computed metrics."""

    total: DurationThreshold = field(
        default_factory=lambda: DurationThreshold(timedelta(hours=7.5), flag_when_exceeded=False)
    )
    gap: DurationThreshold = field(
        default_factory=lambda: DurationThreshold(timedelta(minutes=30))
    )
    overlap: DurationThreshold = field(
        default_factory=lambda: DurationThreshold(timedelta(0))
    )

    @classmethod
    def from_minutes(
        cls,
        total_minutes: float,
        gap_minutes: float,
        overlap_minutes: float = 0.0,
    ) -> "ReportSettings":
        return cls(
            total=DurationThreshold(timedelta(minutes=total_minutes), flag_when_exceeded=False),
            gap=DurationThreshold(timedelta(minutes=gap_minutes)),
            overlap=DurationThreshold(timedelta(minutes=overlap_minutes)),
        )

    def classify(self, group: Group) -> GroupFlags:
        return GroupFlags(
            total=self.total.is_flagged(group.total_duration),
            gap=self.gap.is_flagged(group.total_gap_duration),
            overlap=self.overlap.is_flagged(group.total_overlap_duration),
        )
