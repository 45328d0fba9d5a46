# src/snapline/cli.py
"""
snapline Command Line Interface (CLI).

This module implements the terminal driver using `typer` and `rich`. It holds
no history logic of its own: it builds a :class:`MementoSession` and calls the
public operations in the classic memento walkthrough order.

Usage
-----
    # Save, mutate three times, show the history, then roll back twice
    $ snapline demo

    # Repeatable run with a custom starting state
    $ snapline demo --initial "hello world" --steps 4 --undo 4 --seed 7
"""

from __future__ import annotations

import random
import traceback
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from snapline import __version__
from snapline.core.memento import MementoSession, Subject, random_string

load_dotenv()

app = typer.Typer(
    help="snapline: capture, list and revert snapshots of a mutable subject.",
    rich_markup_mode="markdown",
)
console = Console()

DEFAULT_INITIAL_STATE = "Super-duper-super-puper-super."


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _render_history(session: MementoSession) -> None:
    """Print the snapshots currently held by the session, oldest first."""
    table = Table(title="History", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Saved at (UTC)", style="cyan")
    table.add_column("Label", style="yellow")

    for i, snap in enumerate(session.history.snapshots(), start=1):
        table.add_row(str(i), snap.timestamp, escape(snap.label))
    console.print(table)


def _render_state(prefix: str, session: MementoSession) -> None:
    console.print(f"{prefix} [bold]{escape(str(session.current().state))}[/bold]")


def _run_walkthrough(session: MementoSession, steps: int, undo: int) -> None:
    """Drive the capture/mutate/undo sequence and render each step."""
    for _ in range(steps):
        snap = session.capture()
        console.print(f"\n[dim]Saving state...[/dim] {escape(snap.name)}")
        session.mutate()
        _render_state("State changed to:", session)

    console.print("")
    _render_history(session)

    for i in range(undo):
        console.print(f"\n[bold magenta]Rollback {i + 1}[/bold magenta]")
        result = session.try_revert()
        if result.is_err():
            console.print(f"[yellow]{result.unwrap_err()}[/yellow]")
            continue
        console.print(f"Restoring state to: {escape(result.unwrap().name)}")
        _render_state("State is now:", session)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def demo(
    initial: Annotated[
        str,
        typer.Option("--initial", "-i", help="Initial state of the subject."),
    ] = DEFAULT_INITIAL_STATE,
    steps: Annotated[
        int,
        typer.Option("--steps", "-n", min=0, help="How many save+mutate rounds to run."),
    ] = 3,
    undo: Annotated[
        int,
        typer.Option("--undo", "-u", min=0, help="How many times to roll back afterwards."),
    ] = 2,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed for the random state generator."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Run the memento walkthrough: save, mutate, list history, roll back.
    """
    console.print(
        Panel.fit(
            f"[bold cyan]snapline demo[/bold cyan]\nInitial state: [u]{escape(initial)}[/u]",
            border_style="cyan",
        )
    )

    try:
        rng = random.Random(seed) if seed is not None else None
        subject: Subject[str] = Subject(initial, random_string(rng=rng))
        session = MementoSession(subject)
        _run_walkthrough(session, steps, undo)
    except Exception as e:
        console.print(f"\n[bold red]❌ Demo Error:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    console.print(f"\n[bold green]✅ Done.[/bold green] {len(session.history)} snapshot(s) left.")


@app.command()  # type: ignore[misc]
def version() -> None:
    """Print the installed snapline version."""
    console.print(f"snapline {__version__}")


if __name__ == "__main__":
    app()
