"""Pawn-to-queen puzzle solver.

Breadth-first search over board layouts.  Every move costs one, so the
first time the search dequeues a solved board its recorded move count is
the minimum.  Each newly seen layout gets a ``VisitRecord`` pointing back
at the layout it was first reached from; following those links from the
goal rebuilds the path.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import StrEnum

from loguru import logger

from backend.engine.movegenerator import generate_moves
from backend.models.board import GOAL_INDEX, Board, Piece


class SearchStatus(StrEnum):
    EXPLORING = "exploring"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class PathReconstructionError(RuntimeError):
    """A layout on the path back to the start has no visit record."""


@dataclass(frozen=True, slots=True)
class VisitRecord:
    empty_index: int
    moves: int
    previous: str | None  # None for the initial layout


@dataclass(frozen=True)
class Step:
    """One move of a solution: *piece* slid from *source* into *target*."""

    source: int
    target: int
    piece: Piece
    promoted: bool


@dataclass
class Solution:
    move_count: int
    path: list[Board]
    explored: int = 0
    steps: list[Step] = field(init=False)

    def __post_init__(self) -> None:
        self.steps = [
            _step_between(before, after)
            for before, after in zip(self.path, self.path[1:])
        ]

    @property
    def initial(self) -> Board:
        return self.path[0]

    @property
    def final(self) -> Board:
        return self.path[-1]


def _step_between(before: Board, after: Board) -> Step:
    target = before.empty_index
    source = after.empty_index
    piece = after.get_piece(target)
    return Step(
        source=source,
        target=target,
        piece=piece,
        promoted=before.get_piece(source) != piece,
    )


def reconstruct_path(goal: str, visited: dict[str, VisitRecord]) -> list[str]:
    """Follow predecessor links from *goal* back to the initial layout.

    Returns layouts ordered from the initial one to *goal*.
    """
    path: list[str] = []
    current: str | None = goal
    while current is not None:
        try:
            record = visited[current]
        except KeyError:
            raise PathReconstructionError(
                f"No visit record for layout {current!r}."
            ) from None
        path.append(current)
        current = record.previous
    path.reverse()
    return path


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(board: Board) -> tuple[SearchStatus, str | None, dict[str, VisitRecord]]:
        """Run the search from *board*.

        Returns the final status, the solved layout (or ``None``), and
        the visit records gathered along the way.
        """
        start = board.layout
        visited: dict[str, VisitRecord] = {
            start: VisitRecord(board.empty_index, 0, None)
        }
        frontier: deque[str] = deque([start])
        queen = Piece.QUEEN.value
        status = SearchStatus.EXPLORING
        goal: str | None = None

        logger.debug("Searching from {}", start)
        while frontier:
            current = frontier.popleft()
            record = visited[current]

            if current[GOAL_INDEX] == queen:
                status = SearchStatus.FOUND
                goal = current
                break

            next_moves = record.moves + 1
            for next_layout, empty_index in generate_moves(current, record.empty_index):
                # First discovery wins; later paths are never shorter.
                if next_layout not in visited:
                    visited[next_layout] = VisitRecord(empty_index, next_moves, current)
                    frontier.append(next_layout)
        else:
            status = SearchStatus.EXHAUSTED

        logger.info(
            "Search {}: {} layouts recorded, {} left in frontier",
            status,
            len(visited),
            len(frontier),
        )
        return status, goal, visited

    @staticmethod
    def solve(board: Board) -> Solution | None:
        """Return a shortest solution for *board*, or ``None`` if unsolvable."""
        status, goal, visited = Solver.search(board)
        if status is not SearchStatus.FOUND or goal is None:
            return None

        path = [Board(layout) for layout in reconstruct_path(goal, visited)]
        solution = Solution(
            move_count=visited[goal].moves,
            path=path,
            explored=len(visited),
        )
        logger.info("Solved in {} moves", solution.move_count)
        return solution

    @staticmethod
    def hint(board: Board) -> Step | None:
        """Return the first step of a shortest solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        solution = Solver.solve(board)
        return solution.steps[0] if solution else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return Solver.solve(board) is not None
