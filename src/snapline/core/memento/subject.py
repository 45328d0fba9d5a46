"""
Subject (originator) owning a single piece of mutable state.

The subject is the only object allowed to write its state. It never exposes a
plain getter: the state is inspected by capturing a :class:`Snapshot`.

Operations
----------
- ``mutate()``: apply the injected transition to the current state.
- ``capture()``: return a snapshot of the current state (no mutation).
- ``restore(snapshot)``: overwrite the state from a snapshot. This is a pure
  overwrite; it does not touch any history.
"""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from snapline.core.errors import InvalidArgument
from snapline.core.settings import get_logger, load_settings

from .snapshot import Snapshot
from .transitions import Transition, random_string

S = TypeVar("S")

log = get_logger("snapline.subject")


class Subject(Generic[S]):
    """
    Holder of checkpointable state.

    Attributes
    ----------
    _state : S
        The live state. Only this class assigns it.
    _transition : Transition[S]
        Strategy used by :meth:`mutate`.
    _label_width : int
        Number of characters of ``str(state)`` kept in snapshot labels.
    """

    __slots__ = ("_state", "_transition", "_label_width")

    def __init__(
        self,
        initial_state: S,
        transition: Transition[S] | None = None,
        *,
        label_width: int | None = None,
    ) -> None:
        self._state: S = copy.deepcopy(initial_state)
        # Default transition yields strings regardless of the initial state type.
        self._transition: Transition[S] = (
            transition if transition is not None else random_string()  # type: ignore[assignment]
        )
        width = label_width if label_width is not None else load_settings().label_width
        if width < 1:
            raise InvalidArgument(f"label_width must be >= 1, got {width}")
        self._label_width = width
        log.debug("Subject: initial state is %r", self._state)

    def mutate(self) -> None:
        """Replace the state with ``transition(state)``."""
        self._state = copy.deepcopy(self._transition(self._state))
        log.debug("Subject: state changed to %r", self._state)

    def capture(self) -> Snapshot:
        """Return a snapshot of the current state with a derived label."""
        return Snapshot.create(self._state, self._label_for(self._state))

    def restore(self, snapshot: Snapshot | None) -> None:
        """
        Overwrite the state with the value stored in ``snapshot``.

        Raises
        ------
        InvalidArgument
            If ``snapshot`` is ``None`` or not a :class:`Snapshot`. The state is
            left untouched.
        """
        if snapshot is None:
            raise InvalidArgument("restore() requires a snapshot, got None")
        if not isinstance(snapshot, Snapshot):
            raise InvalidArgument(
                f"restore() requires a Snapshot, got {type(snapshot).__name__}"
            )
        self._state = snapshot.state
        log.debug("Subject: state restored to %r", self._state)

    def _label_for(self, state: Any) -> str:
        return f"{str(state)[: self._label_width]}..."

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Subject(label={self._label_for(self._state)!r})"


__all__ = ["Subject"]
