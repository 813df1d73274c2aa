from __future__ import annotations

from typing import Iterator, Tuple

from .board import Board
from .moves import Move
from .piece import Piece
from .types import Position, Side

# (row, col) deltas
UP = (-1, 0)
DOWN = (1, 0)
LEFT = (0, -1)
RIGHT = (0, 1)
ORTH = (UP, DOWN, LEFT, RIGHT)

def man_directions(side: Side) -> Tuple[Tuple[int, int], ...]:
    """Forward and both sideways; never backward."""
    return ((side.forward, 0), LEFT, RIGHT)


class ManMovement:
    """Single steps and single-piece jumps in the man's three directions."""

    def generate_moves(self, board: Board, origin: Position, piece: Piece) -> Iterator[Move]:
        for dr, dc in man_directions(piece.side):
            step = origin.offset(dr, dc)
            if not step.in_bounds():
                continue
            target = board.piece_at(step)
            if target is None:
                yield Move(origin, step)
                continue
            landing = origin.offset(2 * dr, 2 * dc)
            if target.side is not piece.side and landing.in_bounds() and board.is_empty(landing):
                yield Move(origin, landing, is_capture=True, captured=step)


class KingMovement:
    """Flying king: slides any distance, jumps one enemy and lands on any empty cell behind it."""

    def generate_moves(self, board: Board, origin: Position, piece: Piece) -> Iterator[Move]:
        for dr, dc in ORTH:
            cur = origin.offset(dr, dc)
            while cur.in_bounds() and board.is_empty(cur):
                yield Move(origin, cur)
                cur = cur.offset(dr, dc)

            # cur is now the first blocker (or off-board)
            if not cur.in_bounds() or board.piece_at(cur).side is piece.side:
                continue
            landing = cur.offset(dr, dc)
            while landing.in_bounds() and board.is_empty(landing):
                yield Move(origin, landing, is_capture=True, captured=cur)
                landing = landing.offset(dr, dc)


MAN_MOVEMENT = ManMovement()
KING_MOVEMENT = KingMovement()

def piece_moves(board: Board, origin: Position, piece: Piece) -> Iterator[Move]:
    movement = KING_MOVEMENT if piece.is_king else MAN_MOVEMENT
    return movement.generate_moves(board, origin, piece)
