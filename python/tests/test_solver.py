"""Solver test suite.

Small hand-built boards pin down exact behaviour; the full puzzle is
solved once per session (see ``conftest.py``) and checked against an
independent reference search.  Every returned path is replayed through
the real game engine to verify correctness.
"""

from __future__ import annotations

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import (
    PathReconstructionError,
    SearchStatus,
    Solution,
    Solver,
    Step,
    VisitRecord,
    reconstruct_path,
)
from backend.engine.movegenerator import generate_moves
from backend.models.board import GOAL_INDEX, INITIAL_LAYOUT, Board, Piece

SOLVED = "KKKKBBBBRRR0QiiR"
ONE_MOVE = "KKKKBBBBQRRR0iiR"
STUCK = "KKKKBBBBBRRR0iiR"
# Knights everywhere: only the queen (or pawn) and the hole really move.
KNIGHTS_AND_QUEEN = "QKKKKKKKKKKK0iiK"
KNIGHTS_AND_PAWN = "KKKKKKKKKKKK0iiP"

# Shortest solution of the fixed puzzle.
INITIAL_MOVE_COUNT = 22

FULL_SEARCH_TIMEOUT = 60


# -- helpers ------------------------------------------------------------------


def _assert_replays(solution: Solution) -> None:
    """Replay the steps from the start and check every board on the path."""
    game = GamePlay.from_board(solution.initial)
    for i, step in enumerate(solution.steps):
        assert game.state.board.empty_index == step.target
        ok = game.move(step.source)
        assert ok, f"Move {i + 1} ({step}) was rejected"
        assert game.state.board == solution.path[i + 1]

    assert game.is_won
    assert game.state.board == solution.final
    assert game.state.moves == solution.move_count


# -- hand-built boards --------------------------------------------------------


def test_already_solved() -> None:
    solution = Solver.solve(Board.from_layout(SOLVED))

    assert solution is not None
    assert solution.move_count == 0
    assert solution.path == [Board.from_layout(SOLVED)]
    assert solution.steps == []


def test_one_move() -> None:
    solution = Solver.solve(Board.from_layout(ONE_MOVE))

    assert solution is not None
    assert solution.move_count == 1
    assert [b.layout for b in solution.path] == [ONE_MOVE, "KKKKBBBB0RRRQiiR"]
    assert solution.steps == [Step(source=8, target=12, piece=Piece.QUEEN, promoted=False)]
    assert solution.explored == 2
    _assert_replays(solution)


def test_exhausted_returns_none() -> None:
    board = Board.from_layout(STUCK)
    status, goal, visited = Solver.search(board)

    assert status is SearchStatus.EXHAUSTED
    assert goal is None
    assert list(visited) == [STUCK]
    assert Solver.solve(board) is None
    assert not Solver.is_solvable(board)


def test_hint() -> None:
    assert Solver.hint(Board.from_layout(SOLVED)) is None
    assert Solver.hint(Board.from_layout(STUCK)) is None
    assert Solver.hint(Board.from_layout(ONE_MOVE)) == Step(8, 12, Piece.QUEEN, False)


@pytest.mark.parametrize("layout", [KNIGHTS_AND_QUEEN, KNIGHTS_AND_PAWN])
def test_small_boards_match_reference(layout: str, reference_move_count) -> None:
    solution = Solver.solve(Board.from_layout(layout))

    assert solution is not None
    assert solution.move_count == reference_move_count(layout)
    assert len(solution.path) == solution.move_count + 1
    _assert_replays(solution)


def test_pawn_board_promotes_exactly_once() -> None:
    solution = Solver.solve(Board.from_layout(KNIGHTS_AND_PAWN))

    assert solution is not None
    promotions = [step for step in solution.steps if step.promoted]
    assert len(promotions) == 1
    assert promotions[0].piece == Piece.QUEEN
    assert promotions[0].target < 4


def test_repeated_solves_agree() -> None:
    board = Board.from_layout(KNIGHTS_AND_QUEEN)
    first = Solver.solve(board)
    second = Solver.solve(board)

    assert first is not None and second is not None
    assert first.move_count == second.move_count
    assert first.path == second.path


# -- path reconstruction ------------------------------------------------------


def test_reconstruct_path() -> None:
    visited = {
        "a": VisitRecord(0, 0, None),
        "b": VisitRecord(1, 1, "a"),
        "c": VisitRecord(2, 2, "b"),
    }
    assert reconstruct_path("c", visited) == ["a", "b", "c"]
    assert reconstruct_path("a", visited) == ["a"]


def test_reconstruct_path_missing_record() -> None:
    visited = {"b": VisitRecord(1, 1, "a")}

    with pytest.raises(PathReconstructionError):
        reconstruct_path("b", visited)


# -- the puzzle ---------------------------------------------------------------


@pytest.mark.timeout(FULL_SEARCH_TIMEOUT)
def test_solve_initial_board(initial_solution: Solution) -> None:
    assert initial_solution.move_count > 0
    assert initial_solution.initial == Board.initial()
    assert initial_solution.final.get_piece(GOAL_INDEX) == Piece.QUEEN
    assert len(initial_solution.path) == initial_solution.move_count + 1
    assert sum(step.promoted for step in initial_solution.steps) == 1
    _assert_replays(initial_solution)


@pytest.mark.timeout(FULL_SEARCH_TIMEOUT)
def test_initial_move_count_matches_reference(
    initial_solution: Solution, reference_move_count
) -> None:
    assert initial_solution.move_count == INITIAL_MOVE_COUNT
    assert initial_solution.move_count == reference_move_count(INITIAL_LAYOUT)


@pytest.mark.timeout(FULL_SEARCH_TIMEOUT)
def test_visit_records_are_layered(initial_search) -> None:
    status, goal, visited = initial_search

    assert status is SearchStatus.FOUND
    assert goal is not None
    goal_moves = visited[goal].moves

    for layout, record in visited.items():
        if record.previous is None:
            assert layout == INITIAL_LAYOUT
            assert record.moves == 0
        else:
            assert record.moves == visited[record.previous].moves + 1
        assert layout[record.empty_index] == "0"
        assert record.moves <= goal_moves + 1

    # Layouts closer than the goal were fully expanded: each successor was
    # recorded no more than one layer deeper.
    checked = 0
    for layout, record in visited.items():
        if record.moves >= goal_moves or checked >= 20_000:
            break
        for nxt, _ in generate_moves(layout, record.empty_index):
            assert visited[nxt].moves <= record.moves + 1
        checked += 1


@pytest.mark.timeout(FULL_SEARCH_TIMEOUT)
def test_search_and_solve_agree(initial_search, initial_solution: Solution) -> None:
    _, goal, visited = initial_search

    assert visited[goal].moves == initial_solution.move_count
    assert goal == initial_solution.final.layout
