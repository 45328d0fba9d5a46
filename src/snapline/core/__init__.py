"""Core package initializer for snapline.

Settings and logging live in :mod:`snapline.core.settings`, error types in
:mod:`snapline.core.errors`, and the undo history in :mod:`snapline.core.memento`.
"""

from __future__ import annotations

__all__ = ["__doc__"]
