"""Polling file-system watcher.

Snapshots file modification times under a directory and reports the
differences between snapshots as :class:`Change` events.  Iterating a
:class:`PollingWatcher` blocks and yields changes until :meth:`stop` is
called, so events reach the consumer one at a time on its own thread.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger("hono_router.watch")


class ChangeKind(Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Change:
    """One reported file-system change."""

    kind: ChangeKind
    path: Path


# path -> (mtime_ns, size)
_Snapshot = dict[Path, tuple[int, int]]


class PollingWatcher:
    """Lightweight cross-platform polling watcher.

    Usage::

        watcher = PollingWatcher("src/routes", interval=0.5)
        for change in watcher:
            print(change.kind.value, change.path)
    """

    __slots__ = ("_exclude", "_interval", "_root", "_snapshot", "_stopped")

    def __init__(
        self,
        root: str | Path,
        *,
        interval: float = 0.5,
        exclude: Iterable[str | Path] = (),
    ) -> None:
        self._root = Path(root)
        self._interval = interval
        self._exclude = frozenset(Path(p).resolve() for p in exclude)
        self._stopped = threading.Event()
        self._snapshot = self._take_snapshot()

    @property
    def root(self) -> Path:
        return self._root

    def _take_snapshot(self) -> _Snapshot:
        snapshot: _Snapshot = {}
        for path in self._root.rglob("*"):
            if path.resolve() in self._exclude:
                continue
            # Files removed between listing and stat are reported next poll
            with contextlib.suppress(FileNotFoundError):
                stat = path.stat()
                if path.is_file():
                    snapshot[path] = (stat.st_mtime_ns, stat.st_size)
        return snapshot

    def poll(self) -> list[Change]:
        """Compare against the previous snapshot and return what changed."""
        current = self._take_snapshot()
        previous = self._snapshot
        changes: list[Change] = []
        for path in sorted(current.keys() - previous.keys()):
            changes.append(Change(ChangeKind.ADDED, path))
        for path in sorted(current.keys() & previous.keys()):
            if current[path] != previous[path]:
                changes.append(Change(ChangeKind.MODIFIED, path))
        for path in sorted(previous.keys() - current.keys()):
            changes.append(Change(ChangeKind.DELETED, path))
        self._snapshot = current
        if changes:
            logger.debug("Detected %d changes under %s", len(changes), self._root)
        return changes

    def stop(self) -> None:
        self._stopped.set()

    def __iter__(self) -> Iterator[Change]:
        while not self._stopped.is_set():
            yield from self.poll()
            self._stopped.wait(self._interval)
