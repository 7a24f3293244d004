"""Run the whole pipeline for one batch of rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, Optional

from .config import GroupFlags, ReportSettings
from .exceptions import EmptyInputError
from .grouping import accumulate
from .models import Group, RawRow, TimelineSlot
from .timeline import max_scale, project

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Report:
    """Groups with their metrics and, when anything can be scaled, their timelines."""

    groups: list[Group]
    settings: ReportSettings = field(default_factory=ReportSettings)
    scale: Optional[timedelta] = None
    timelines: list[list[TimelineSlot]] = field(default_factory=list)

    @property
    def has_timeline(self) -> bool:
        return self.scale is not None

    def flags(self, group: Group) -> GroupFlags:
        return self.settings.classify(group)

    def rows(self) -> list[tuple[Group, list[TimelineSlot]]]:
        """Each group paired with its timeline slots (empty when there is no timeline)."""
        if not self.has_timeline:
            return [(group, []) for group in self.groups]
        return list(zip(self.groups, self.timelines))


def build_report(
    rows: Iterable[RawRow],
    *,
    today: Optional[date] = None,
    colorize: bool = True,
    settings: Optional[ReportSettings] = None,
) -> Report:
    """Parse, group, measure and project one batch of rows.

    ``today`` is resolved once here so every row of the batch is anchored to
    the same day.
    """
    day = today or date.today()
    groups = accumulate(rows, today=day, colorize=colorize)
    report = Report(groups=groups, settings=settings or ReportSettings())
    try:
        report.scale = max_scale(groups)
    except EmptyInputError:
        logger.info("No intervals found in %d groups; skipping timeline.", len(groups))
        return report

    report.timelines = [project(group, report.scale) for group in groups]
    return report
