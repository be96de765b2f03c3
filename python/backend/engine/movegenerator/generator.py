"""Generates every board reachable from a configuration in one move.

Boards are handled here as raw 16-character layout strings: they are
immutable and hashable, so the solver can use them directly as keys.
"""

from __future__ import annotations

from backend.models.board import BOARD_SIZE, INVALID_INDICES, NUM_COLS, Piece
from backend.models.move import (
    ALL_MOVES,
    DIAGONAL_MOVES,
    KNIGHT_MOVES,
    PAWN_MOVE,
    Move,
)

_STRAIGHT = frozenset({Piece.QUEEN.value, Piece.ROOK.value})
_PAWN = frozenset({Piece.QUEEN.value, Piece.ROOK.value, Piece.PAWN.value})
_DIAGONAL = frozenset({Piece.QUEEN.value, Piece.BISHOP.value})
_KNIGHT = frozenset({Piece.KNIGHT.value})


def is_move_within_boundary(empty_index: int, dx: int, dy: int) -> bool:
    """Return True if ``(dx, dy)`` from *empty_index* lands on a usable cell.

    The horizontal step must stay in the hole's row; the final index must
    be on the board and not one of the invalid cells.
    """
    shifted = empty_index + dx
    if shifted < 0 or shifted // NUM_COLS != empty_index // NUM_COLS:
        return False
    index = shifted + dy * NUM_COLS
    return 0 <= index < BOARD_SIZE and index not in INVALID_INDICES


def target_index(empty_index: int, move: Move) -> int:
    return empty_index + move.dx + move.dy * NUM_COLS


def eligible_pieces(move: Move) -> frozenset[str]:
    """Pieces allowed to slide into the hole along *move*."""
    if move in DIAGONAL_MOVES:
        return _DIAGONAL
    if move in KNIGHT_MOVES:
        return _KNIGHT
    return _PAWN if move == PAWN_MOVE else _STRAIGHT


def apply_move(
    layout: str, empty_index: int, source_index: int, promote: bool = False
) -> str:
    """Return a new layout with the piece at *source_index* moved into the hole.

    With *promote* the piece arrives as a queen.
    """
    piece = Piece.QUEEN.value if promote else layout[source_index]
    cells = list(layout)
    cells[empty_index] = piece
    cells[source_index] = Piece.EMPTY.value
    return "".join(cells)


# -- precomputed candidates ---------------------------------------------------


def _build_candidates() -> tuple[tuple[tuple[int, frozenset[str]], ...], ...]:
    table: list[tuple[tuple[int, frozenset[str]], ...]] = []
    for empty_index in range(BOARD_SIZE):
        row: list[tuple[int, frozenset[str]]] = []
        for move in ALL_MOVES:
            if is_move_within_boundary(empty_index, move.dx, move.dy):
                row.append((target_index(empty_index, move), eligible_pieces(move)))
        table.append(tuple(row))
    return tuple(table)


# For each hole position: (source cell, pieces allowed to come from it)
_CANDIDATES = _build_candidates()


def generate_moves(layout: str, empty_index: int) -> list[tuple[str, int]]:
    """Return ``(next_layout, next_empty_index)`` for every legal move.

    *layout* is never modified.  Candidates are produced in a fixed
    order: straight, then diagonal, then knight moves.
    """
    pawn = Piece.PAWN.value
    promotes = empty_index < NUM_COLS
    next_states: list[tuple[str, int]] = []
    for source, eligible in _CANDIDATES[empty_index]:
        piece = layout[source]
        if piece not in eligible:
            continue
        next_layout = apply_move(
            layout, empty_index, source, promote=promotes and piece == pawn
        )
        next_states.append((next_layout, source))
    return next_states
