"""snapline: checkpoint and undo history for a single mutable subject.

The memento core lives in :mod:`snapline.core.memento`; the Typer CLI in
:mod:`snapline.cli` replays the classic capture/mutate/undo walkthrough.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
