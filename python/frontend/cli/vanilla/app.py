"""Vanilla terminal frontend — no third-party dependencies.

Uses only print and ANSI codes to show a solution, one board per move,
from the goal back to the initial board.
"""

from __future__ import annotations

import sys

from backend.engine.gamesolver import Solution, Step
from backend.models.board import INVALID_INDICES, NUM_COLS, Board, Piece


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_RULE = "======="


def _colour(enabled: bool, code: str, text: str) -> str:
    return f"{code}{text}{_R}" if enabled else text


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight: int | None = None, colour: bool = True) -> str:
    """Return a text representation of the board.

    Invalid cells are left blank; the cell at *highlight* (the square a
    piece just moved to) is drawn in green.
    """
    lines: list[str] = [_RULE]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, piece in enumerate(row):
            index = r * NUM_COLS + c
            if index in INVALID_INDICES:
                cells.append(" ")
            elif piece == Piece.EMPTY:
                cells.append(_colour(colour, _DIM, piece.value))
            elif index == highlight:
                cells.append(_colour(colour, _G, piece.value))
            else:
                cells.append(piece.value)
        lines.append(" ".join(cells).rstrip())
    lines.append(_RULE)
    return "\n".join(lines)


def describe_step(step: Step) -> str:
    text = f"{step.piece.name.title()} {step.source} -> {step.target}"
    return f"{text} (promoted)" if step.promoted else text


# -- public entry point -------------------------------------------------------


def run(solution: Solution, elapsed: float, colour: bool | None = None) -> None:
    """Print every move of *solution* from the goal back to the start."""
    if colour is None:
        colour = sys.stdout.isatty()

    for number in range(solution.move_count, 0, -1):
        step = solution.steps[number - 1]
        print()
        print(_colour(colour, _C, f"MOVE {number}:") + f"  {describe_step(step)}")
        print(render_board(solution.path[number], highlight=step.target, colour=colour))

    print()
    print(_colour(colour, _Y, "INITIAL BOARD:"))
    print(render_board(solution.initial, colour=colour))

    print()
    print(f"Time taken to run the program: {elapsed} seconds")
