"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library to show the same move-by-move walk back from
the goal as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solution, Step
from backend.models.board import INVALID_INDICES, NUM_COLS, NUM_ROWS, Board, Piece

console = Console()

_STYLES = {
    Piece.PAWN: "bold white",
    Piece.QUEEN: "bold magenta",
    Piece.KNIGHT: "bold cyan",
    Piece.BISHOP: "bold yellow",
    Piece.ROOK: "bold blue",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, highlight: int | None = None) -> Table:
    """Return a Rich Table representing the board."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(NUM_COLS):
        table.add_column(width=1, justify="center")

    for r in range(NUM_ROWS):
        cells: list[str] = []
        for c in range(NUM_COLS):
            index = r * NUM_COLS + c
            piece = board.get_piece(index)
            if index in INVALID_INDICES:
                cells.append("")
            elif piece == Piece.EMPTY:
                cells.append("[dim]·[/dim]")
            elif index == highlight:
                cells.append(f"[bold green]{piece.value}[/bold green]")
            else:
                style = _STYLES[piece]
                cells.append(f"[{style}]{piece.value}[/{style}]")
        table.add_row(*cells)

    return table


def _step_text(step: Step) -> Text:
    text = Text()
    text.append(f"{step.piece.name.title()} ", style=_STYLES[step.piece])
    text.append(f"{step.source} → {step.target}", style="dim")
    if step.promoted:
        text.append("  promoted!", style="bold magenta")
    return text


def _panel(title: str, board: Board, highlight: int | None = None,
           caption: Text | None = None) -> Panel:
    body = Align.center(_render_board(board, highlight))
    if caption is not None:
        body = Group(body, Align.center(caption))
    return Panel(
        body,
        title=title,
        border_style="bright_blue",
        padding=(0, 2),
    )


# -- public entry point -------------------------------------------------------


def run(solution: Solution, elapsed: float) -> None:
    """Print every move of *solution* from the goal back to the start."""
    for number in range(solution.move_count, 0, -1):
        step = solution.steps[number - 1]
        title = f"[bold cyan]MOVE {number}[/bold cyan]"
        console.print(
            _panel(title, solution.path[number], step.target, _step_text(step))
        )

    console.print(_panel("[bold yellow]INITIAL BOARD[/bold yellow]", solution.initial))

    summary = Text()
    summary.append("  Moves: ", style="dim")
    summary.append(str(solution.move_count), style="bold yellow")
    summary.append("    Explored: ", style="dim")
    summary.append(f"{solution.explored:,}", style="bold yellow")
    console.print()
    console.print(summary)
    console.print(f"Time taken to run the program: {elapsed} seconds", highlight=False)
