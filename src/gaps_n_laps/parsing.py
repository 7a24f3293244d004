"""Parse "(HH:MM - HH:MM)" interval text into time intervals."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta
from typing import Optional

from .models import TimeInterval

logger = logging.getLogger(__name__)

INTERVAL_PATTERN = re.compile(r"\((\d{2}):(\d{2})\s*-\s*(\d{2}):(\d{2})\)", re.ASCII)


def parse_intervals(
    text: str,
    activity: Optional[str] = None,
    *,
    today: Optional[date] = None,
) -> list[TimeInterval]:
    """Return one interval per "(HH:MM - HH:MM)" match, in order of appearance.

    Both clock times are anchored to ``today``. An interval whose stop time is
    earlier than its start time passed midnight, so its stop moves to the next
    day. Equal times are kept as a zero-length interval. Anything in ``text``
    that does not match the pattern is ignored.
    """
    day = today or date.today()
    intervals: list[TimeInterval] = []
    for match in INTERVAL_PATTERN.finditer(text.strip()):
        start_hour, start_minute, stop_hour, stop_minute = (int(part) for part in match.groups())
        try:
            start = datetime.combine(day, time(start_hour, start_minute))
            stop = datetime.combine(day, time(stop_hour, stop_minute))
        except ValueError:
            logger.debug("Skipping out-of-range interval %r", match.group(0))
            continue
        if stop < start:
            stop += timedelta(days=1)
        intervals.append(TimeInterval(start=start, stop=stop, activity=activity))
    return intervals
