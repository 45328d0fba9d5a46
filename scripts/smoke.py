# scripts/smoke.py
"""
Smoke Test Script for the snapline memento core.

Drives a Subject and HistoryManager directly (no CLI) with DEBUG logging on,
so every save, state change and restore is narrated on stdout.

Usage
-----
    $ uv run python scripts/smoke.py
    $ uv run python scripts/smoke.py --steps 5 --seed 42
"""

import argparse
import logging
import os
import random
import sys

# Must be set before snapline reads its settings.
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from snapline.core.memento import HistoryManager, Subject, random_string  # noqa: E402

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run snapline Smoke Test")
    parser.add_argument("--steps", "-n", type=int, default=3, help="Save+mutate rounds")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed) if args.seed is not None else None
    subject = Subject("Super-duper-super-puper-super.", random_string(rng=rng))
    history = HistoryManager(subject)
    start = subject.capture().state

    for _ in range(args.steps):
        history.capture()
        subject.mutate()

    print("\nHistory:")
    for snap in history.snapshots():
        print(f"  {snap.name}")

    while history.revert() is not None:
        pass

    end = subject.capture().state
    if end != start:
        print(f"❌ Round trip failed: {end!r} != {start!r}")
        sys.exit(1)
    print(f"\n✅ Round trip OK: back to {end!r}")


if __name__ == "__main__":
    main()
