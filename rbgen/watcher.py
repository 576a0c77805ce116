#!/usr/bin/env python3
"""
Watch a directory for changes made to translation files.

Uses a polling loop over file modification times, so it behaves the same
on every platform. Every change to a matching file is reported to the
handler; there is no debouncing.
"""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .format_handlers import PropertiesHandler, SourceHandler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WatchEvent:
    """A change to one file in the watched directory."""
    event: str  # created, modified, deleted
    filename: str


Snapshot = dict[str, tuple[int, int]]


class PropertiesWatcher:
    """
    Polls a directory and calls a handler for each changed translation file.

    Usage:
        watcher = PropertiesWatcher(directory, handler)
        watcher.run()        # blocks until watcher.stop() is called
    """

    def __init__(
        self,
        directory: Path,
        handler: Callable[[WatchEvent], None],
        poll_interval: float = 0.5,
        source_handler: Optional[SourceHandler] = None,
    ):
        self.directory = Path(directory)
        self.handler = handler
        self.poll_interval = poll_interval
        self.source_handler = source_handler or PropertiesHandler()
        self._stop_event = threading.Event()
        self._snapshot: Snapshot = self.snapshot()

    def snapshot(self) -> Snapshot:
        """Map of file name -> (mtime_ns, size) for matching files."""
        result: Snapshot = {}
        for entry in self.directory.iterdir():
            if not self.source_handler.matches(entry.name):
                continue
            try:
                stat = entry.stat()
            except FileNotFoundError:
                # Removed between listing and stat
                continue
            result[entry.name] = (stat.st_mtime_ns, stat.st_size)
        return result

    def poll(self) -> list[WatchEvent]:
        """
        Compare the directory with the previous snapshot.

        Calls the handler once per detected event and returns the events.
        """
        try:
            current = self.snapshot()
        except OSError as e:
            # Directory removed or renamed; keep the last snapshot and retry
            logger.warning("Cannot list %s: %s", self.directory, e)
            return []

        previous = self._snapshot
        self._snapshot = current

        events = []
        for name, signature in current.items():
            if name not in previous:
                events.append(WatchEvent("created", name))
            elif previous[name] != signature:
                events.append(WatchEvent("modified", name))
        for name in previous:
            if name not in current:
                events.append(WatchEvent("deleted", name))

        for event in events:
            self.handler(event)

        return events

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """
        Poll until stopped.

        Args:
            stop_event: Optional external event; setting it stops the loop
                the same way stop() does
        """
        stop = stop_event or self._stop_event
        logger.debug("Polling %s every %ss", self.directory, self.poll_interval)

        while not stop.is_set() and not self._stop_event.is_set():
            self.poll()
            stop.wait(self.poll_interval)

    def stop(self) -> None:
        """Stop a running loop."""
        self._stop_event.set()
