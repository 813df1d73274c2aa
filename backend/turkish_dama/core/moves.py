from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional

from .board import Board
from .piece import Piece
from .types import Position, Side


class InvalidMoveApplication(ValueError):
    """A move was applied to a board it was not generated for."""


@dataclass(frozen=True)
class Move:
    from_pos: Position
    to_pos: Position
    is_capture: bool = False
    captured: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.is_capture != (self.captured is not None):
            raise ValueError("captured square must be set exactly when is_capture is true")


class AppliedMove(NamedTuple):
    board: Board
    promoted: bool


def _last_survivor_crowns(board: Board) -> Dict[Position, Optional[Piece]]:
    changes: Dict[Position, Optional[Piece]] = {}
    for side in (Side.NEAR, Side.FAR):
        pieces = board.pieces_of(side)
        if len(pieces) == 1 and not pieces[0][1].is_king:
            p, piece = pieces[0]
            changes[p] = piece.crowned()
    return changes


def apply_move(board: Board, move: Move) -> AppliedMove:
    """Return the board after ``move`` and whether it promoted by reaching the back row.

    The lone-survivor crowning runs for both sides on every call and is not
    reported as a promotion.
    """
    piece = board.piece_at(move.from_pos)
    if piece is None:
        raise InvalidMoveApplication(f"No piece at source {move.from_pos}")

    promoted = not piece.is_king and move.to_pos.row == piece.side.promotion_row
    changes: Dict[Position, Optional[Piece]] = {
        move.from_pos: None,
        move.to_pos: piece.crowned() if promoted else piece,
    }
    if move.is_capture:
        changes[move.captured] = None
    after = board.with_changes(changes)

    survivors = _last_survivor_crowns(after)
    if survivors:
        after = after.with_changes(survivors)
    return AppliedMove(after, promoted)
