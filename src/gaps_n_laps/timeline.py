"""Scale groups against each other and project intervals onto a timeline."""

from __future__ import annotations

from datetime import timedelta
from typing import Sequence

from .exceptions import EmptyInputError
from .models import Group, TimelineSlot


def max_scale(groups: Sequence[Group]) -> timedelta:
    """Largest worked-plus-idle span over all groups.

    Overlap is not part of the span, so a group with heavy overlap may draw
    past the right edge of a timeline scaled with this value.
    """
    scale = max((group.span for group in groups), default=timedelta(0))
    if scale <= timedelta(0):
        raise EmptyInputError("No intervals to build a timeline scale from.")
    return scale


def project(group: Group, scale: timedelta) -> list[TimelineSlot]:
    """Offset and width of each interval in ``group``, as fractions of ``scale``."""
    if scale <= timedelta(0):
        raise ValueError("Timeline scale must be positive.")
    if group.start is None:
        return []
    return [
        TimelineSlot(
            offset=(interval.start - group.start) / scale,
            width=interval.duration / scale,
            color=interval.color,
        )
        for interval in group.intervals
    ]
