"""Tracks the state of a game being played or replayed."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board, move counter and promotions."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.promotions: int = 0

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board, promoted: bool = False) -> None:
        self.board = board
        self.moves += 1
        if promoted:
            self.promotions += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
