"""
History manager (caretaker): a LIFO stack of snapshots for one subject.

The manager is bound to exactly one :class:`Subject` for its whole lifetime.
It captures snapshots from that subject and restores them in reverse order.

State machine
-------------
The manager only ever sits in one of two states:

- ``EMPTY``: no snapshots. ``capture()`` moves to ``NON_EMPTY``; ``revert()``
  is a no-op.
- ``NON_EMPTY``: ``capture()`` grows the stack; ``revert()`` shrinks it and
  returns to ``EMPTY`` once the last snapshot is consumed.

Empty-history policy
--------------------
``revert()`` on an empty history silently does nothing and returns ``None``.
Callers that need to tell the difference use ``try_revert()``, which returns
``Err(EmptyHistory())`` instead.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from snapline.core.errors import EmptyHistory
from snapline.core.result import Result, err, ok
from snapline.core.settings import get_logger

from .snapshot import Snapshot
from .subject import Subject

log = get_logger("snapline.history")


class HistoryStatus(str, Enum):
    """The two states of a history manager."""

    EMPTY = "empty"
    NON_EMPTY = "non_empty"


class HistoryListing:
    """
    Lazy, restartable view over the labels of a history, oldest first.

    Nothing is copied up front: every ``iter()`` pins the entries present at
    that moment and walks them from the beginning, so a capture or revert made
    mid-iteration shows up in the next pass only. Iterating never changes the
    history.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: list[Snapshot]) -> None:
        self._entries = entries

    def __iter__(self) -> Iterator[str]:
        for snap in tuple(self._entries):
            yield snap.label

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"HistoryListing({list(self)!r})"


class HistoryManager:
    """
    Ordered stack of snapshots taken from a single subject.

    Attributes
    ----------
    _subject : Subject
        The subject this manager captures from and restores into.
    _entries : list[Snapshot]
        Snapshots in capture order; only the tail is ever removed.
    """

    __slots__ = ("_subject", "_entries")

    def __init__(self, subject: Subject[Any]) -> None:
        self._subject = subject
        self._entries: list[Snapshot] = []

    @property
    def subject(self) -> Subject[Any]:
        """The subject this manager is bound to."""
        return self._subject

    # ------------------------------- Stack API ------------------------------

    def capture(self) -> Snapshot:
        """
        Capture the subject's current state and push it onto the history.

        Returns
        -------
        Snapshot
            The snapshot that was appended.
        """
        snap = self._subject.capture()
        self._entries.append(snap)
        log.debug("History: saved %s (depth=%d)", snap.name, len(self._entries))
        return snap

    def revert(self) -> Snapshot | None:
        """
        Pop the most recent snapshot and restore the subject from it.

        Returns
        -------
        Snapshot | None
            The snapshot that was restored, or ``None`` when the history was
            empty (nothing changes in that case).
        """
        if not self._entries:
            log.debug("History: nothing to revert")
            return None
        snap = self._entries.pop()
        log.debug("History: restoring state to %s", snap.name)
        self._subject.restore(snap)
        return snap

    def try_revert(self) -> Result[Snapshot, EmptyHistory]:
        """Like :meth:`revert`, but report an empty history as ``Err(EmptyHistory)``."""
        snap = self.revert()
        if snap is None:
            return err(EmptyHistory())
        return ok(snap)

    # ------------------------------- Read API -------------------------------

    def list_history(self) -> HistoryListing:
        """Return a lazy, restartable listing of snapshot labels, oldest first."""
        return HistoryListing(self._entries)

    def snapshots(self) -> tuple[Snapshot, ...]:
        """Return all held snapshots, oldest first (immutable tuple)."""
        return tuple(self._entries)

    @property
    def status(self) -> HistoryStatus:
        return HistoryStatus.NON_EMPTY if self._entries else HistoryStatus.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["HistoryListing", "HistoryManager", "HistoryStatus"]
