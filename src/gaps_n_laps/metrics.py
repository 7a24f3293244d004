"""Per-group metrics: total worked time, bounds, gaps and overlaps."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator, Optional, Sequence

from .models import Group, TimeInterval


def compute_metrics(group: Group) -> None:
    """Fill the derived fields of ``group``; its intervals must already be sorted by start."""
    group.total_duration = total_duration(group.intervals)
    group.start, group.stop = group_bounds(group.intervals)
    group.total_gap_duration = total_gap_duration(group.intervals)
    group.total_overlap_duration = total_overlap_duration(group.intervals)


def total_duration(intervals: Sequence[TimeInterval]) -> timedelta:
    return sum((interval.duration for interval in intervals), timedelta(0))


def group_bounds(
    intervals: Sequence[TimeInterval],
) -> tuple[Optional[datetime], Optional[datetime]]:
    """First start and last stop of a sorted interval list, ``(None, None)`` when empty."""
    if not intervals:
        return None, None
    return intervals[0].start, intervals[-1].stop


def pair_deltas(intervals: Sequence[TimeInterval]) -> Iterator[timedelta]:
    """Signed distance from each interval's stop to the next interval's start.

    A positive delta is idle time between the two, a negative one is how far
    they overlap. A pair can therefore only ever contribute to one of the two.
    """
    for previous, current in zip(intervals, intervals[1:]):
        yield current.start - previous.stop


def total_gap_duration(intervals: Sequence[TimeInterval]) -> timedelta:
    return sum(
        (delta for delta in pair_deltas(intervals) if delta > timedelta(0)),
        timedelta(0),
    )


def total_overlap_duration(intervals: Sequence[TimeInterval]) -> timedelta:
    return sum(
        (-delta for delta in pair_deltas(intervals) if delta < timedelta(0)),
        timedelta(0),
    )
