from __future__ import annotations

from typing import Dict, Optional

from .core import Board, Position, Side, apply_move, can_continue, legal_moves
from .notation import move_to_str


def perft(board: Board, side: Side, depth: int, continuation_from: Optional[Position] = None) -> int:
    """Performance test: count leaf move sequences to `depth`.

    A capture that can be continued keeps the same side and does not use up
    depth, the same way the search treats it.
    """
    if depth <= 0:
        return 1
    total = 0
    for m in legal_moves(board, side, continuation_from):
        after = apply_move(board, m).board
        if m.is_capture and can_continue(after, side, m.to_pos):
            total += perft(after, side, depth, m.to_pos)
        else:
            total += perft(after, side.opponent(), depth - 1)
    return total


def perft_divide(board: Board, side: Side, depth: int) -> Dict[str, int]:
    """Divide perft: nodes per root move."""
    out: Dict[str, int] = {}
    for m in legal_moves(board, side):
        after = apply_move(board, m).board
        if m.is_capture and can_continue(after, side, m.to_pos):
            out[move_to_str(m)] = perft(after, side, depth, m.to_pos)
        else:
            out[move_to_str(m)] = perft(after, side.opponent(), depth - 1)
    return out
