"""Exception types raised (or carried in a ``Result``) by the memento core.

The core is made of pure in-memory transitions, so there is nothing to retry:
errors are surfaced to the caller immediately.

- :class:`InvalidArgument` is *raised* by ``Subject.restore`` when it is handed
  no snapshot.
- :class:`EmptyHistory` is *returned* inside an ``Err`` by
  ``HistoryManager.try_revert``. The plain ``revert`` treats an empty history
  as a silent no-op and never raises it.
"""

from __future__ import annotations


class SnaplineError(Exception):
    """Base class for all snapline errors."""


class InvalidArgument(SnaplineError, ValueError):
    """An operation received an absent or ill-typed argument."""


class EmptyHistory(SnaplineError, LookupError):
    """A revert was requested while the history holds no snapshots."""

    def __init__(self, message: str = "history is empty; nothing to revert") -> None:
        super().__init__(message)


__all__ = ["EmptyHistory", "InvalidArgument", "SnaplineError"]
