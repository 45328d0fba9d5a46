"""Unit tests for the HistoryManager (caretaker) undo stack.

These tests pin down:
1) The capture/revert round-trip law and strict LIFO ordering.
2) The empty-history policy: `revert()` is a silent no-op, `try_revert()`
   reports `EmptyHistory` as an `Err`.
3) `list_history()` is lazy, restartable, and never mutates the stack.
"""

from __future__ import annotations

import pytest

from snapline.core.errors import EmptyHistory
from snapline.core.memento import HistoryManager, HistoryStatus, Subject, cycle


def _state(subject: Subject[str]) -> str:
    return subject.capture().state


def test_capture_then_revert_walkthrough() -> None:
    """Capture A, mutate to X, capture X, then revert twice back to A."""
    subject = Subject("A", cycle(["X"]))
    history = HistoryManager(subject)

    history.capture()
    assert [s.state for s in history.snapshots()] == ["A"]

    subject.mutate()
    assert _state(subject) == "X"

    history.capture()
    assert [s.state for s in history.snapshots()] == ["A", "X"]

    restored = history.revert()
    assert restored is not None and restored.state == "X"
    assert _state(subject) == "X"
    assert [s.state for s in history.snapshots()] == ["A"]

    history.revert()
    assert _state(subject) == "A"
    assert len(history) == 0


def test_revert_on_empty_history_is_noop() -> None:
    """A fresh manager reverts to nothing: no exception, no state change."""
    subject = Subject("A", cycle(["B"]))
    subject.mutate()
    history = HistoryManager(subject)

    assert history.revert() is None
    assert history.revert() is None
    assert _state(subject) == "B"
    assert history.is_empty
    assert history.status is HistoryStatus.EMPTY


def test_try_revert_reports_empty_history() -> None:
    """The strict variant returns `Err(EmptyHistory)` and changes nothing."""
    subject = Subject("A")
    history = HistoryManager(subject)

    result = history.try_revert()

    assert result.is_err()
    assert isinstance(result.unwrap_err(), EmptyHistory)
    with pytest.raises(EmptyHistory):
        result.unwrap()
    assert _state(subject) == "A"
    assert len(history) == 0


def test_try_revert_returns_restored_snapshot() -> None:
    """On a non-empty history `try_revert()` pops and restores like `revert()`."""
    subject = Subject("A", cycle(["B"]))
    history = HistoryManager(subject)
    history.capture()
    subject.mutate()

    result = history.try_revert()

    assert result.is_ok()
    assert result.unwrap().state == "A"
    assert _state(subject) == "A"


def test_round_trip_after_many_captures() -> None:
    """n captures followed by n reverts restore the pre-capture state."""
    subject = Subject("start", cycle(["s1", "s2", "s3", "s4", "s5"]))
    history = HistoryManager(subject)

    for _ in range(5):
        history.capture()
        subject.mutate()
    assert _state(subject) == "s5"

    for _ in range(5):
        history.revert()
    assert _state(subject) == "start"


def test_revert_is_strict_lifo() -> None:
    """Each revert restores the newest snapshot not yet consumed."""
    subject = Subject("a", cycle(["b", "c", "d"]))
    history = HistoryManager(subject)

    for _ in range(3):
        history.capture()
        subject.mutate()

    popped = [history.revert() for _ in range(3)]
    assert [p.state for p in popped if p is not None] == ["c", "b", "a"]
    assert history.revert() is None


def test_list_history_in_capture_order() -> None:
    """Three captures list three labels; two reverts leave the first one."""
    subject = Subject("first-state", cycle(["second-state", "third-state"]), label_width=5)
    history = HistoryManager(subject)

    history.capture()
    subject.mutate()
    history.capture()
    subject.mutate()
    history.capture()

    assert list(history.list_history()) == ["first...", "secon...", "third..."]

    history.revert()
    history.revert()

    assert list(history.list_history()) == ["first..."]


def test_list_history_is_restartable_and_read_only() -> None:
    """Iterating a listing repeatedly yields identical results and no mutation."""
    subject = Subject("A", cycle(["B"]))
    history = HistoryManager(subject)
    history.capture()
    subject.mutate()
    history.capture()

    listing = history.list_history()
    first = list(listing)
    second = list(listing)
    third = list(history.list_history())

    assert first == second == third
    assert len(listing) == 2
    assert len(history) == 2


def test_list_history_is_lazy() -> None:
    """A listing reflects the entries at iteration time, not creation time."""
    subject = Subject("A", cycle(["B"]))
    history = HistoryManager(subject)
    listing = history.list_history()
    assert list(listing) == []

    history.capture()
    assert list(listing) == ["A..."]


def test_status_transitions() -> None:
    """EMPTY -> NON_EMPTY on capture, back to EMPTY after the last revert."""
    history = HistoryManager(Subject("A"))
    assert history.status is HistoryStatus.EMPTY

    history.capture()
    history.capture()
    assert history.status is HistoryStatus.NON_EMPTY

    history.revert()
    assert history.status is HistoryStatus.NON_EMPTY
    history.revert()
    assert history.status is HistoryStatus.EMPTY


def test_capture_stores_copies_of_mutable_state() -> None:
    """Snapshots in the history are unaffected by later in-place changes."""
    items: list[int] = []

    def append_one(state: list[int]) -> list[int]:
        state.append(len(state))
        return state

    subject = Subject(items, append_one)
    history = HistoryManager(subject)

    history.capture()
    subject.mutate()
    history.capture()
    subject.mutate()

    assert [s.state for s in history.snapshots()] == [[], [0]]
    history.revert()
    assert subject.capture().state == [0]
    history.revert()
    assert subject.capture().state == []


def test_capturing_while_iterating_listing_terminates() -> None:
    """An iteration covers the entries present when it began, then stops."""
    subject = Subject("A", cycle(["B"]))
    history = HistoryManager(subject)
    history.capture()

    seen: list[str] = []
    for label in history.list_history():
        seen.append(label)
        history.capture()

    assert seen == ["A..."]
    assert len(history) == 2
    assert list(history.list_history()) == ["A...", "A..."]


def test_reverting_while_iterating_listing_keeps_pass_intact() -> None:
    """A revert mid-iteration does not skip entries in the current pass."""
    subject = Subject("a", cycle(["b", "c"]))
    history = HistoryManager(subject)
    for _ in range(3):
        history.capture()
        subject.mutate()

    seen: list[str] = []
    for label in history.list_history():
        seen.append(label)
        history.revert()

    assert seen == ["a...", "b...", "c..."]
    assert len(history) == 0


def test_manager_exposes_bound_subject() -> None:
    subject = Subject("A")
    assert HistoryManager(subject).subject is subject
