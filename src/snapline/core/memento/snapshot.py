"""
Snapshot (memento) definition.

This module defines the immutable record of a subject's state at a specific
point in time. It is kept apart from ``subject.py`` and ``history.py`` so that
both can depend on it without importing each other.

Design Notes
------------
- **Immutability**: The dataclass is ``frozen=True`` and the state is deep-copied
  both when the snapshot is created and whenever it is read. Mutating a value
  handed to or returned from a snapshot never reaches the stored copy.
- **Display metadata**: ``timestamp`` is frozen to a string at capture time,
  and ``label`` is derived by the subject. ``name`` combines the two for
  history listings.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class Snapshot:
    """
    Immutable record of a subject state.

    Attributes
    ----------
    label : str
        Short human-readable description of the state (e.g. ``"Super-dup..."``).
    timestamp : str
        UTC capture time formatted as ``YYYY-MM-DD HH:MM:SS``.
    _state : Any
        Private deep copy of the captured state. Read it through :attr:`state`.
    """

    label: str
    timestamp: str
    _state: Any = field(repr=False)

    def __post_init__(self) -> None:
        # The stored state never aliases the object it was built from.
        object.__setattr__(self, "_state", copy.deepcopy(self._state))

    @classmethod
    def create(cls, state: Any, label: str, *, now: datetime | None = None) -> Snapshot:
        """
        Build a snapshot holding an independent copy of ``state``.

        Parameters
        ----------
        state : Any
            The value to capture. Deep-copied, so later changes to the caller's
            object do not leak into the snapshot.
        label : str
            Display label for listings.
        now : datetime | None
            Capture time; defaults to the current UTC time. Aware values are
            converted to UTC; naive values are taken to be UTC already.
        """
        moment = now if now is not None else datetime.now(UTC)
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        else:
            moment = moment.astimezone(UTC)
        return cls(
            label=label,
            timestamp=moment.strftime(TIMESTAMP_FORMAT),
            _state=state,
        )

    @property
    def state(self) -> Any:
        """Return a deep copy of the captured state."""
        return copy.deepcopy(self._state)

    @property
    def name(self) -> str:
        """Return the listing name, e.g. ``"2024-01-01 12:00:00 / (abc...)"``."""
        return f"{self.timestamp} / ({self.label})"

    def get_state(self) -> Any:
        return self.state

    def get_label(self) -> str:
        return self.label

    def get_timestamp(self) -> str:
        return self.timestamp


__all__ = ["Snapshot", "TIMESTAMP_FORMAT"]
