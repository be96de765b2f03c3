"""Direction vectors, seen from the empty square.

A move ``(dx, dy)`` names the cell ``dx`` columns and ``dy`` rows away
from the hole.  The piece standing there is the one that slides in.
"""

from __future__ import annotations

from typing import NamedTuple

UP = -1
DOWN = 1
LEFT = -1
RIGHT = 1


class Move(NamedTuple):
    dx: int
    dy: int
    name: str


# Rook, queen, and (DOWN only) pawn
STRAIGHT_MOVES: tuple[Move, ...] = (
    Move(LEFT, 0, "left"),
    Move(RIGHT, 0, "right"),
    Move(0, UP, "up"),
    Move(0, DOWN, "down"),
)

# Bishop and queen
DIAGONAL_MOVES: tuple[Move, ...] = (
    Move(LEFT, UP, "left-up"),
    Move(RIGHT, UP, "right-up"),
    Move(LEFT, DOWN, "left-down"),
    Move(RIGHT, DOWN, "right-down"),
)

KNIGHT_MOVES: tuple[Move, ...] = (
    Move(LEFT, UP * 2, "left1-up2"),
    Move(RIGHT, UP * 2, "right1-up2"),
    Move(RIGHT * 2, UP, "right2-up1"),
    Move(RIGHT * 2, DOWN, "right2-down1"),
    Move(LEFT, DOWN * 2, "left1-down2"),
    Move(RIGHT, DOWN * 2, "right1-down2"),
    Move(LEFT * 2, UP, "left2-up1"),
    Move(LEFT * 2, DOWN, "left2-down1"),
)

# The pawn sits below the hole and steps up into it.
PAWN_MOVE = STRAIGHT_MOVES[3]

ALL_MOVES: tuple[Move, ...] = STRAIGHT_MOVES + DIAGONAL_MOVES + KNIGHT_MOVES
