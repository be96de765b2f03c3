"""Shared fixtures.

The search from the initial board runs once per session and is shared
by every test that needs it.
"""

from __future__ import annotations

import pytest

from backend.engine.gamesolver import Solver
from backend.models.board import INVALID_INDICES, NUM_COLS, NUM_ROWS, Board

# -- reference search ---------------------------------------------------------
#
# A deliberately naive breadth-first search over (row, col) coordinates,
# written independently of the engine, used as the oracle for move counts.

_STRAIGHT = "QR"
_RULES: list[tuple[int, int, str]] = (
    [(0, -1, _STRAIGHT), (0, 1, _STRAIGHT), (-1, 0, _STRAIGHT), (1, 0, "QRP")]
    + [(dr, dc, "QB") for dr in (-1, 1) for dc in (-1, 1)]
    + [
        (dr, dc, "K")
        for dr, dc in (
            (-2, -1), (-2, 1), (-1, 2), (1, 2), (2, -1), (2, 1), (-1, -2), (1, -2),
        )
    ]
)


def _reference_successors(layout: str) -> list[str]:
    hole = layout.index("0")
    hr, hc = divmod(hole, NUM_COLS)
    out: list[str] = []
    for dr, dc, pieces in _RULES:
        r, c = hr + dr, hc + dc
        if not (0 <= r < NUM_ROWS and 0 <= c < NUM_COLS):
            continue
        source = r * NUM_COLS + c
        piece = layout[source]
        if source in INVALID_INDICES or piece not in pieces:
            continue
        cells = list(layout)
        cells[hole] = "Q" if piece == "P" and hr == 0 else piece
        cells[source] = "0"
        out.append("".join(cells))
    return out


def _reference_move_count(layout: str) -> int | None:
    """Layer-by-layer BFS; returns the depth of the first solved layer."""
    seen = {layout}
    layer = [layout]
    depth = 0
    while layer:
        if any(state[12] == "Q" for state in layer):
            return depth
        next_layer: list[str] = []
        for state in layer:
            for nxt in _reference_successors(state):
                if nxt not in seen:
                    seen.add(nxt)
                    next_layer.append(nxt)
        layer = next_layer
        depth += 1
    return None


# -- fixtures -----------------------------------------------------------------


@pytest.fixture(scope="session")
def initial_search():
    return Solver.search(Board.initial())


@pytest.fixture(scope="session")
def initial_solution():
    solution = Solver.solve(Board.initial())
    assert solution is not None, "The fixed puzzle must be solvable"
    return solution


@pytest.fixture(scope="session")
def reference_move_count():
    return _reference_move_count
