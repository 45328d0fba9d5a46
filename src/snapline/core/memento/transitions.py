"""
State transitions applied by :meth:`Subject.mutate`.

A transition is any callable ``(current_state) -> next_state``. The subject
owns *when* its state changes; the transition decides *what* it changes to.
Injecting it keeps tests deterministic and lets the CLI seed its randomness.

Provided strategies
-------------------
- :func:`random_string`: the default, a fresh random string of
  ASCII letters (ignores the current state).
- :func:`cycle`: walks a fixed sequence of values, wrapping around.
"""

from __future__ import annotations

import itertools
import random
import string
from collections.abc import Callable, Iterable
from typing import TypeVar

from snapline.core.settings import load_settings

S = TypeVar("S")

Transition = Callable[[S], S]

CHARSET = string.ascii_lowercase + string.ascii_uppercase


def random_string(
    length: int | None = None, *, rng: random.Random | None = None
) -> Transition[str]:
    """
    Return a transition that replaces the state with a random letter string.

    Parameters
    ----------
    length : int | None
        Number of characters; defaults to ``settings.state_length``.
    rng : random.Random | None
        Source of randomness. Pass ``random.Random(seed)`` for repeatable runs.
    """
    size = length if length is not None else load_settings().state_length
    if size < 1:
        raise ValueError(f"length must be >= 1, got {size}")
    source = rng if rng is not None else random.Random()

    def _next(_: str) -> str:
        return "".join(source.choice(CHARSET) for _ in range(size))

    return _next


def cycle(values: Iterable[S]) -> Transition[S]:
    """Return a transition that yields ``values`` in order, forever."""
    pool = list(values)
    if not pool:
        raise ValueError("cycle() needs at least one value")
    it = itertools.cycle(pool)

    def _next(_: S) -> S:
        return next(it)

    return _next


__all__ = ["CHARSET", "Transition", "cycle", "random_string"]
