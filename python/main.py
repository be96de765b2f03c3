#!/usr/bin/env python3
"""Pawn-to-Queen Puzzle.

Finds the shortest sequence of moves that brings a queen to the bottom-left
square of::

    K K K K
    B B B B
    R R R R
    0     P

Usage::

    python main.py                # vanilla terminal output
    python main.py -f rich        # Rich terminal output
    python main.py --quiet        # move count and timing only
"""

import importlib
import sys
import time
from enum import StrEnum
from pathlib import Path

import typer
from loguru import logger

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.value)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="PAWN_QUEEN_FRONTEND",
        help="How to display the solution.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only print the move count and elapsed time.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        envvar="PAWN_QUEEN_LOG_LEVEL",
        case_sensitive=False,
        help="Log level for search diagnostics (written to stderr).",
    ),
) -> None:
    """Pawn-to-Queen Puzzle."""
    _configure_logging(log_level)

    start = time.perf_counter()
    solution = Solver.solve(Board.initial())
    elapsed = time.perf_counter() - start

    if solution is None:
        print("No solution found.")
        print(f"Time taken to run the program: {elapsed} seconds")
        raise typer.Exit(code=1)

    if quiet:
        print(f"Solved in {solution.move_count} moves.")
        print(f"Time taken to run the program: {elapsed} seconds")
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solution, elapsed)


if __name__ == "__main__":
    app()
