from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from .core import Board, Move, Position, Side, BOARD_SIZE, apply_move, can_continue, legal_moves
from .core.outcome import annihilation_winner

LOGGER = logging.getLogger("dama.engine")

MAN_VALUE = 5.0
KING_VALUE = 25.0
CENTER_COLS = range(2, 6)
CENTER_BONUS = 0.5
ADVANCE_BONUS = 0.2

WIN_SCORE = 10_000
STALEMATE_SCORE = 5_000

DEFAULT_DEPTH = 4
HINT_DEPTH = 3
DEFAULT_NODE_LIMIT = 2_000_000

_INF = float("inf")


def evaluate(board: Board, side: Side) -> float:
    """Material, centre files and man advancement, from ``side``'s perspective."""
    score = 0.0
    for p, piece in board.iter_pieces():
        value = KING_VALUE if piece.is_king else MAN_VALUE
        if p.col in CENTER_COLS:
            value += CENTER_BONUS
        if not piece.is_king:
            advanced = p.row if piece.side is Side.FAR else BOARD_SIZE - 1 - p.row
            value += advanced * ADVANCE_BONUS
        score += value if piece.side is side else -value
    return score


def order_moves(moves: List[Move]) -> List[Move]:
    # captures first; sort is stable so enumeration order breaks ties
    return sorted(moves, key=lambda m: not m.is_capture)


@dataclass
class SearchResult:
    move: Optional[Move]
    score: float
    depth: int
    nodes: int = 0
    truncated: bool = False


@dataclass
class _SearchState:
    side: Side
    node_limit: Optional[int]
    deadline: Optional[float]
    nodes: int = 0
    truncated: bool = False

    def exhausted(self) -> bool:
        if self.node_limit is not None and self.nodes >= self.node_limit:
            self.truncated = True
        elif self.deadline is not None and time.time() >= self.deadline:
            self.truncated = True
        return self.truncated


class Engine:
    """Minimax with alpha-beta for one side, chaining multi-captures inside a ply.

    Notes:
    - A capture that can be continued keeps the same mover and the same
      depth; the landing square becomes the continuation square.
    - ``node_limit`` bounds the work per call deterministically. Once it is
      spent every remaining node scores its static evaluation.
    - ``time_limit_s`` is available for hosts that want a wall-clock bound,
      at the cost of reproducible results.
    """

    def __init__(self, node_limit: Optional[int] = DEFAULT_NODE_LIMIT, time_limit_s: Optional[float] = None) -> None:
        self.node_limit = node_limit
        self.time_limit_s = time_limit_s

    def best_move(
        self,
        board: Board,
        side: Side,
        max_depth: int = DEFAULT_DEPTH,
        continuation_from: Optional[Position] = None,
    ) -> Optional[Move]:
        return self.search(board, side, max_depth, continuation_from).move

    def search(
        self,
        board: Board,
        side: Side,
        max_depth: int = DEFAULT_DEPTH,
        continuation_from: Optional[Position] = None,
    ) -> SearchResult:
        depth = max(1, max_depth)
        deadline = None if self.time_limit_s is None else time.time() + self.time_limit_s
        state = _SearchState(side=side, node_limit=self.node_limit, deadline=deadline)

        moves = order_moves(legal_moves(board, side, continuation_from))
        if not moves:
            LOGGER.debug("search_no_moves", extra={"side": side.value})
            return SearchResult(move=None, score=-WIN_SCORE, depth=depth)

        alpha, beta = -_INF, _INF
        best: Optional[Move] = None
        best_val = -_INF
        for m in moves:
            val = self._child(board, m, side, True, depth, alpha, beta, state)
            if val > best_val:
                best_val = val
                best = m
            alpha = max(alpha, val)

        result = SearchResult(
            move=best if best is not None else moves[0],
            score=best_val,
            depth=depth,
            nodes=state.nodes,
            truncated=state.truncated,
        )
        LOGGER.debug(
            "search_complete",
            extra={"side": side.value, "depth": depth, "nodes": state.nodes,
                   "score": best_val, "truncated": state.truncated},
        )
        return result

    def _child(
        self,
        board: Board,
        move: Move,
        mover: Side,
        maximizing: bool,
        depth: int,
        alpha: float,
        beta: float,
        state: _SearchState,
    ) -> float:
        after = apply_move(board, move).board
        if move.is_capture and can_continue(after, mover, move.to_pos):
            return self._minimax(after, depth, maximizing, alpha, beta, move.to_pos, state)
        return self._minimax(after, depth - 1, not maximizing, alpha, beta, None, state)

    def _minimax(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        continuation: Optional[Position],
        state: _SearchState,
    ) -> float:
        state.nodes += 1
        mover = state.side if maximizing else state.side.opponent()

        won = annihilation_winner(board)
        moves: Optional[List[Move]] = None
        if won is None and continuation is None:
            moves = legal_moves(board, mover)
            if not moves:
                won = mover.opponent()
        if won is not None:
            return WIN_SCORE if won is state.side else -WIN_SCORE

        if depth <= 0 or state.exhausted():
            return evaluate(board, state.side)

        if moves is None:
            moves = legal_moves(board, mover, continuation)
        if not moves:
            return -STALEMATE_SCORE if maximizing else STALEMATE_SCORE

        if maximizing:
            best_val = -_INF
            for m in order_moves(moves):
                val = self._child(board, m, mover, True, depth, alpha, beta, state)
                best_val = max(best_val, val)
                alpha = max(alpha, val)
                if alpha >= beta:
                    break
            return best_val

        best_val = _INF
        for m in order_moves(moves):
            val = self._child(board, m, mover, False, depth, alpha, beta, state)
            best_val = min(best_val, val)
            beta = min(beta, val)
            if alpha >= beta:
                break
        return best_val


def best_move(
    board: Board,
    side: Side,
    max_depth: int = DEFAULT_DEPTH,
    continuation_from: Optional[Position] = None,
) -> Optional[Move]:
    return Engine().best_move(board, side, max_depth, continuation_from)
