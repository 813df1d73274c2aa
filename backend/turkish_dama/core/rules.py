from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Sequence, Tuple

from .board import Board
from .movement import piece_moves
from .moves import Move, apply_move
from .types import Position, Side

ChainMemo = Dict[Tuple[Board, Position], int]

class Rule(Protocol):
    def apply(self, board: Board, side: Side, moves: Iterable[Move]) -> Iterable[Move]:
        ...


def _further_captures(board: Board, square: Position, memo: ChainMemo) -> int:
    """Longest run of captures the piece on ``square`` can still make."""
    key = (board, square)
    cached = memo.get(key)
    if cached is not None:
        return cached

    best = 0
    piece = board.piece_at(square)
    if piece is not None:
        for m in piece_moves(board, square, piece):
            if not m.is_capture:
                continue
            after = apply_move(board, m).board
            best = max(best, 1 + _further_captures(after, m.to_pos, memo))
    memo[key] = best
    return best


def capture_chain_length(board: Board, move: Move, memo: Optional[ChainMemo] = None) -> int:
    """Number of captures in the longest chain that starts with ``move``."""
    if memo is None:
        memo = {}
    after = apply_move(board, move).board
    return 1 + _further_captures(after, move.to_pos, memo)


class MaximumCaptureRule:
    """Captures are mandatory, and only the longest chains may be started.

    Ties are all kept; the value of the captured pieces is not considered.
    """

    def apply(self, board: Board, side: Side, moves: Iterable[Move]) -> Iterable[Move]:
        moves = list(moves)
        captures = [m for m in moves if m.is_capture]
        if not captures:
            return moves

        memo: ChainMemo = {}
        lengths = [capture_chain_length(board, m, memo) for m in captures]
        longest = max(lengths)
        return [m for m, n in zip(captures, lengths) if n == longest]


DEFAULT_RULES: Sequence[Rule] = (MaximumCaptureRule(),)

def pseudo_legal_moves(board: Board, side: Side, continuation_from: Optional[Position] = None) -> Iterator[Move]:
    if continuation_from is not None:
        piece = board.piece_at(continuation_from)
        if piece is not None and piece.side is side:
            yield from piece_moves(board, continuation_from, piece)
        return
    for p, piece in board.pieces_of(side):
        yield from piece_moves(board, p, piece)


def apply_rules(board: Board, side: Side, moves: Iterable[Move], rules: Sequence[Rule] = DEFAULT_RULES) -> Iterable[Move]:
    out: Iterable[Move] = moves
    for rule in rules:
        out = rule.apply(board, side, out)
    return out


def legal_moves(board: Board, side: Side, continuation_from: Optional[Position] = None) -> List[Move]:
    return list(apply_rules(board, side, pseudo_legal_moves(board, side, continuation_from)))


def can_continue(board: Board, side: Side, square: Position) -> bool:
    """True when the piece of ``side`` on ``square`` has another capture available."""
    return any(m.is_capture for m in pseudo_legal_moves(board, side, square))
