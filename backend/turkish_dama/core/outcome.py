from __future__ import annotations

from typing import Optional

from .board import Board
from .rules import legal_moves
from .types import Side

def annihilation_winner(board: Board) -> Optional[Side]:
    for side in (Side.NEAR, Side.FAR):
        if board.count(side) == 0:
            return side.opponent()
    return None

def winner(board: Board, side_to_move: Optional[Side] = None) -> Optional[Side]:
    """Winner by annihilation, or by the side to move having no legal moves.

    Stalemate is a loss for the stalemated side, never a draw.
    """
    won = annihilation_winner(board)
    if won is not None:
        return won
    if side_to_move is not None and not legal_moves(board, side_to_move):
        return side_to_move.opponent()
    return None
