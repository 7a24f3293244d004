"""Poll a feed file and run a callback once each time it appears."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Callable, Optional

from .feed import read_feed
from .models import RawRow

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class FeedIdentity:
    """What distinguishes one appearance of the feed file from another."""

    mtime_ns: int
    size: int


class FeedWatcher:
    """Invokes ``on_feed`` with the parsed rows whenever a new feed instance shows up.

    The watcher remembers the identity of the last feed it handled. A file that
    stays unchanged is not handled twice; once the file disappears the memory
    is cleared, so the same content reappearing is handled again. A feed that
    fails to read is tried again on the next poll.
    """

    def __init__(
        self,
        path: Path,
        on_feed: Callable[[list[RawRow]], None],
        poll_interval: timedelta = timedelta(seconds=2),
    ) -> None:
        self.path = Path(path)
        self.poll_interval = poll_interval
        self._on_feed = on_feed
        self._seen: Optional[FeedIdentity] = None

    @property
    def seen(self) -> bool:
        return self._seen is not None

    def check_once(self) -> bool:
        """Poll the file once; return True when the callback ran."""
        identity = self._identity()
        if identity is None:
            if self._seen is not None:
                logger.debug("Feed %s disappeared; resetting.", self.path)
            self._seen = None
            return False
        if identity == self._seen:
            return False

        rows = read_feed(self.path)
        self._seen = identity
        logger.info("Feed %s changed; processing %d rows.", self.path, len(rows))
        self._on_feed(rows)
        return True

    def run_until_stopped(self, stop_event: threading.Event) -> None:
        logger.info("Watching %s", self.path)
        interval = self.poll_interval.total_seconds()
        while not stop_event.is_set():
            try:
                self.check_once()
            except Exception:
                logger.exception("Failed to process feed %s", self.path)
            stop_event.wait(interval)
        logger.info("Watcher stopped.")

    def run_forever(self) -> None:
        stop_event = threading.Event()
        try:
            self.run_until_stopped(stop_event)
        except KeyboardInterrupt:
            logger.info("Watcher interrupted.")

    def _identity(self) -> Optional[FeedIdentity]:
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            return None
        return FeedIdentity(mtime_ns=stat.st_mtime_ns, size=stat.st_size)
