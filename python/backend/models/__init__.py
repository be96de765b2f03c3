from backend.models.board import Board, Piece
from backend.models.move import Move

__all__ = ["Board", "Move", "Piece"]
