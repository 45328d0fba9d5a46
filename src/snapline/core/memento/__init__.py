"""Memento core: snapshots, the subject they capture, and the LIFO history.

Re-exports the public API so callers can write:
    from snapline.core.memento import Subject, HistoryManager
"""

from __future__ import annotations

from .history import HistoryListing, HistoryManager, HistoryStatus
from .session import MementoSession
from .snapshot import Snapshot
from .subject import Subject
from .transitions import Transition, cycle, random_string

__all__ = [
    "HistoryListing",
    "HistoryManager",
    "HistoryStatus",
    "MementoSession",
    "Snapshot",
    "Subject",
    "Transition",
    "cycle",
    "random_string",
]
