"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from .config import DurationThreshold
from .models import TimelineSlot
from .report import Report

UNKNOWN_DAY = "Unknown day"
TIMELINE_WIDTH = 40


class ReportPrinter:
    """Render human-readable group summaries in the console."""

    def __init__(self, timeline_width: int = TIMELINE_WIDTH) -> None:
        self.timeline_width = timeline_width

    def print_report(self, report: Report) -> None:
        if not report.groups:
            print("No day headers found in the feed.")
            return

        print(f"{'Day':<16} {'Span':<12} {'Overlap':<12} {'Gap':<12} {'Total':<12} Timeline")
        print("-" * (69 + self.timeline_width))
        settings = report.settings
        for group, slots in report.rows():
            overlap = format_flagged(group.total_overlap_duration, settings.overlap)
            gap = format_flagged(group.total_gap_duration, settings.gap)
            total = format_flagged(group.total_duration, settings.total)
            label = (group.label or UNKNOWN_DAY)[:16]
            bar = render_bar(slots, self.timeline_width) if report.has_timeline else ""
            span = f"{format_clock(group.start)}-{format_clock(group.stop)}"
            print(f"{label:<16} {span:<12} {overlap:<12} {gap:<12} {total:<12} {bar}")

        if not report.has_timeline:
            print()
            print("No intervals found; timeline skipped.")


def format_duration(value: timedelta) -> str:
    """Whole hours and remaining whole minutes, e.g. ``7h 30m``."""
    total_minutes = int(value.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def format_clock(value: Optional[datetime]) -> str:
    if value is None:
        return "--:--"
    return value.strftime("%H:%M")


def format_flagged(value: timedelta, threshold: DurationThreshold) -> str:
    marker = "!" if threshold.is_flagged(value) else " "
    return f"{marker} {format_duration(value)}"


def render_bar(slots: Sequence[TimelineSlot], width: int) -> str:
    """Draw the slots as ``#`` cells on a ``.`` track of ``width`` characters.

    Cells where two intervals cover the same character are drawn as ``X``;
    anything reaching past the scale is clipped.
    """
    cells = ["."] * width
    for slot in slots:
        first = max(0, int(round(slot.offset * width)))
        last = min(width, max(first + 1, int(round((slot.offset + slot.width) * width))))
        for index in range(first, last):
            cells[index] = "X" if cells[index] == "#" else "#"
    return "".join(cells)
