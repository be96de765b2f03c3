"""Board model for the pawn-to-queen puzzle."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum


class Piece(StrEnum):
    INVALID = "i"
    EMPTY = "0"
    PAWN = "P"
    KNIGHT = "K"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"


# -- geometry -----------------------------------------------------------------

NUM_ROWS = 4  # y direction
NUM_COLS = 4  # x direction
BOARD_SIZE = NUM_ROWS * NUM_COLS

# Cells that never hold a piece and can never be moved onto.
INVALID_INDICES: tuple[int, ...] = (13, 14)

# -- the puzzle ---------------------------------------------------------------
#
#   K K K K
#   B B B B
#   R R R R
#   0 i i P

INITIAL_LAYOUT = "KKKKBBBBRRRR0iiP"
INITIAL_EMPTY_INDEX = 12

# Solved once a queen stands on the square the hole started on.
GOAL_INDEX = INITIAL_EMPTY_INDEX

_ALPHABET = frozenset(p.value for p in Piece)


@dataclass(frozen=True)
class Board:
    """An immutable board configuration.

    The cells are kept as a 16-character row-major string, one character
    per ``Piece``.  Two boards are equal (and hash equal) exactly when
    their layouts are.
    """

    layout: str

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_layout(cls, layout: str) -> Board:
        """Create a board from a row-major layout string.

        Example::

            Board.from_layout("KKKKBBBBRRRR0iiP")
        """
        if len(layout) != BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE} cells for a {NUM_ROWS}×{NUM_COLS} "
                f"board, got {len(layout)}."
            )
        unknown = set(layout) - _ALPHABET
        if unknown:
            raise ValueError(f"Unknown piece(s): {''.join(sorted(unknown))}.")
        invalid = tuple(i for i, c in enumerate(layout) if c == Piece.INVALID)
        if invalid != INVALID_INDICES:
            raise ValueError(
                f"Invalid cells must be exactly {INVALID_INDICES}, got {invalid}."
            )
        if layout.count(Piece.EMPTY) != 1:
            raise ValueError(
                f"Expected exactly one empty cell, got {layout.count(Piece.EMPTY)}."
            )
        return cls(layout=layout)

    @classmethod
    def from_cells(cls, cells: list[Piece]) -> Board:
        return cls.from_layout("".join(cells))

    @classmethod
    def initial(cls) -> Board:
        return cls.from_layout(INITIAL_LAYOUT)

    # -- queries --------------------------------------------------------------

    @property
    def empty_index(self) -> int:
        return self.layout.index(Piece.EMPTY)

    def get_piece(self, index: int) -> Piece:
        return Piece(self.layout[index])

    @property
    def rows(self) -> list[list[Piece]]:
        return [
            [Piece(c) for c in self.layout[r * NUM_COLS : (r + 1) * NUM_COLS]]
            for r in range(NUM_ROWS)
        ]

    def is_solved(self) -> bool:
        """Check if a queen stands on the goal square."""
        return self.layout[GOAL_INDEX] == Piece.QUEEN

    def piece_counts(self) -> Counter[Piece]:
        return Counter(Piece(c) for c in self.layout)

    def __str__(self) -> str:
        return self.layout
