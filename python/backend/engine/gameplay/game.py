"""Core gameplay logic — applies single moves and checks the win condition."""

from __future__ import annotations

from backend.engine.gamestate import GameState
from backend.engine.movegenerator import generate_moves
from backend.models.board import Board, Piece


class GamePlay:
    """Plays or replays moves on one board."""

    def __init__(self, board: Board | None = None) -> None:
        self.state = GameState(board if board is not None else Board.initial())

    @classmethod
    def from_board(cls, board: Board) -> "GamePlay":
        return cls(board)

    # -- movement (a piece slides into the hole) ------------------------------

    def legal_sources(self) -> list[int]:
        """Indices of the pieces that may currently move into the hole."""
        board = self.state.board
        return [index for _, index in generate_moves(board.layout, board.empty_index)]

    def move(self, source: int) -> bool:
        """Slide the piece at *source* into the empty square.

        Returns True if the move was legal and has been applied.
        """
        board = self.state.board
        for next_layout, empty_index in generate_moves(board.layout, board.empty_index):
            if empty_index != source:
                continue
            next_board = Board(next_layout)
            promoted = (
                board.get_piece(source) == Piece.PAWN
                and next_board.get_piece(board.empty_index) == Piece.QUEEN
            )
            self.state.advance(next_board, promoted=promoted)
            return True
        return False

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
