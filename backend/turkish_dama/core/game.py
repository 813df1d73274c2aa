from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .events import GameFinished, MoveApplied, MoveUndone
from .moves import Move, apply_move
from .outcome import winner
from .rules import can_continue, legal_moves
from .setup import initial_board
from .types import Position, Side, pos_name

LOGGER = logging.getLogger("dama.session")


class IllegalMoveError(ValueError):
    pass


class Listener:
    def on_event(self, session: "GameSession", event: object) -> None:
        return


@dataclass(frozen=True)
class Snapshot:
    board: Board
    side_to_move: Side
    continuation: Optional[Position]
    winner: Optional[Side]
    move: Move


class GameSession:
    """Turn sequencing for one game: whose move, mid-chain piece, undo history, result.

    The rules functions stay pure; this is the only place that holds mutable
    game state, and it is meant to have a single owner.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        side_to_move: Side = Side.NEAR,
        continuation: Optional[Position] = None,
        tracked_side: Side = Side.NEAR,
    ) -> None:
        self.tracked_side = tracked_side
        self.listeners: List[Listener] = []
        self._stack: List[Snapshot] = []
        self._load(board, side_to_move, continuation)

    def _load(self, board: Optional[Board], side_to_move: Side, continuation: Optional[Position]) -> None:
        self.board = initial_board() if board is None else board
        self.side_to_move = side_to_move
        self.continuation = continuation
        self.winner: Optional[Side] = winner(self.board, self.side_to_move)
        self.last_move: Optional[Move] = None

    @property
    def ply(self) -> int:
        return len(self._stack)

    @property
    def moves_played(self) -> List[Move]:
        return [s.move for s in self._stack]

    def emit(self, event: object) -> None:
        for listener in list(self.listeners):
            listener.on_event(self, event)

    def legal_moves(self) -> List[Move]:
        if self.winner is not None:
            return []
        return legal_moves(self.board, self.side_to_move, self.continuation)

    def targets(self, square: Position) -> List[Move]:
        """Legal moves for the piece selected on ``square``."""
        return [m for m in self.legal_moves() if m.from_pos == square]

    def resolve(self, from_pos: Position, to_pos: Position) -> Move:
        for m in self.targets(from_pos):
            if m.to_pos == to_pos:
                return m
        raise IllegalMoveError(f"Illegal move: {pos_name(from_pos)}-{pos_name(to_pos)}")

    def push(self, move: Move) -> None:
        if self.winner is not None:
            raise IllegalMoveError("Game is over")
        if move not in self.legal_moves():
            raise IllegalMoveError(f"Illegal move: {pos_name(move.from_pos)}-{pos_name(move.to_pos)}")

        mover = self.side_to_move
        self._stack.append(Snapshot(self.board, mover, self.continuation, self.winner, move))
        self.board, promoted = apply_move(self.board, move)

        # promotion ends the turn even when the new king could capture again
        continues = move.is_capture and not promoted and can_continue(self.board, mover, move.to_pos)
        if continues:
            self.continuation = move.to_pos
        else:
            self.continuation = None
            self.side_to_move = mover.opponent()
        self.last_move = move
        self.winner = winner(self.board, self.side_to_move)

        LOGGER.debug(
            "session_move_applied",
            extra={"side": mover.value, "from": pos_name(move.from_pos), "to": pos_name(move.to_pos),
                   "capture": move.is_capture, "promoted": promoted, "continues": continues},
        )
        self.emit(MoveApplied(move=move, side=mover, promoted=promoted, continues=continues))
        if self.winner is not None:
            LOGGER.debug("session_game_finished", extra={"winner": self.winner.value, "ply": self.ply})
            self.emit(GameFinished(winner=self.winner, tracked_won=self.winner is self.tracked_side))

    def pop(self) -> Move:
        if not self._stack:
            raise ValueError("No moves to undo")
        snap = self._stack.pop()
        self.board = snap.board
        self.side_to_move = snap.side_to_move
        self.continuation = snap.continuation
        self.winner = snap.winner
        self.last_move = self._stack[-1].move if self._stack else None
        self.emit(MoveUndone(move=snap.move, side=snap.side_to_move))
        return snap.move

    def reset(self) -> None:
        self._stack.clear()
        self._load(None, Side.NEAR, None)
