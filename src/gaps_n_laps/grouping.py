"""Assemble raw report rows into day groups."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from .metrics import compute_metrics
from .models import BoundaryRow, ContentRow, Group, RawRow
from .normalization import normalize_activity, normalize_label
from .parsing import parse_intervals

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "hsla(0, 0%, 0%, 0.5)"


def accumulate(
    rows: Iterable[RawRow],
    *,
    today: Optional[date] = None,
    colorize: bool = True,
) -> list[Group]:
    """Group rows under the boundary row preceding them and compute each group's metrics.

    Content rows seen before the first boundary row have no group to belong to
    and are dropped.
    """
    day = today or date.today()
    groups: list[Group] = []
    # dict keys keep first-seen order, which keeps colors stable for a given input.
    activities: dict[str, None] = {}
    current: Optional[Group] = None
    dropped = 0

    for row in rows:
        if isinstance(row, BoundaryRow):
            current = Group(id=row.id, label=normalize_label(row.label))
            groups.append(current)
            continue
        if not isinstance(row, ContentRow):
            raise TypeError(f"Unsupported row type: {type(row).__name__}")
        if current is None:
            dropped += 1
            continue
        activity = normalize_activity(row.activity)
        if activity:
            activities.setdefault(activity, None)
        if row.interval_text:
            current.intervals.extend(
                parse_intervals(row.interval_text, activity, today=day)
            )

    if dropped:
        logger.debug("Dropped %d content rows preceding the first group header.", dropped)

    colors = activity_colors(list(activities)) if colorize else {}
    for group in groups:
        group.intervals.sort(key=lambda interval: interval.start)
        if colorize:
            for interval in group.intervals:
                interval.color = colors.get(interval.activity, FALLBACK_COLOR)
        compute_metrics(group)

    logger.debug(
        "Accumulated %d groups with %d intervals.",
        len(groups),
        sum(len(group.intervals) for group in groups),
    )
    return groups


def activity_colors(activities: Sequence[str]) -> dict[str, str]:
    """Spread the activities evenly over the hue circle as semi-transparent HSLA colors."""
    if not activities:
        return {}
    hue_step = 360 // len(activities)
    return {
        activity: f"hsla({index * hue_step}, 70%, 50%, 0.5)"
        for index, activity in enumerate(activities)
    }
