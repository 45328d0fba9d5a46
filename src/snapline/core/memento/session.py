"""
Lock-guarded pairing of a subject with its history manager.

Neither :class:`Subject` nor :class:`HistoryManager` is safe to drive from
several threads: a revert racing a mutate can restore a state that is
immediately overwritten. ``MementoSession`` serialises every public operation
on the pair behind a single re-entrant lock.

Single-threaded callers can keep using the two objects directly.
"""

from __future__ import annotations

import threading
from typing import Any

from snapline.core.errors import EmptyHistory, InvalidArgument
from snapline.core.result import Result

from .history import HistoryManager
from .snapshot import Snapshot
from .subject import Subject


class MementoSession:
    """A subject and the one history manager bound to it, behind one lock."""

    def __init__(self, subject: Subject[Any], history: HistoryManager | None = None) -> None:
        if history is not None and history.subject is not subject:
            raise InvalidArgument("history is bound to a different subject")
        self.subject = subject
        self.history = history if history is not None else HistoryManager(subject)
        self._lock = threading.RLock()

    def mutate(self) -> None:
        with self._lock:
            self.subject.mutate()

    def capture(self) -> Snapshot:
        with self._lock:
            return self.history.capture()

    def revert(self) -> Snapshot | None:
        with self._lock:
            return self.history.revert()

    def try_revert(self) -> Result[Snapshot, EmptyHistory]:
        with self._lock:
            return self.history.try_revert()

    def list_history(self) -> tuple[str, ...]:
        """Return the labels, oldest first, as a tuple taken under the lock."""
        with self._lock:
            return tuple(self.history.list_history())

    def current(self) -> Snapshot:
        """Snapshot the live state without recording it in the history."""
        with self._lock:
            return self.subject.capture()


__all__ = ["MementoSession"]
