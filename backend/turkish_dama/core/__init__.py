from .types import Side, Position, BOARD_SIZE, in_bounds, pos_name, parse_pos
from .piece import Piece
from .board import Board
from .moves import Move, AppliedMove, InvalidMoveApplication, apply_move
from .movement import ManMovement, KingMovement, piece_moves
from .rules import Rule, MaximumCaptureRule, legal_moves, pseudo_legal_moves, capture_chain_length, can_continue
from .outcome import winner, annihilation_winner
from .events import MoveApplied, MoveUndone, GameFinished
from .game import GameSession, IllegalMoveError, Listener
from .setup import initial_board, ascii_board, board_from_diagram, board_to_text

__all__ = [
    "Side","Position","BOARD_SIZE","in_bounds","pos_name","parse_pos",
    "Piece","Board",
    "Move","AppliedMove","InvalidMoveApplication","apply_move",
    "ManMovement","KingMovement","piece_moves",
    "Rule","MaximumCaptureRule","legal_moves","pseudo_legal_moves","capture_chain_length","can_continue",
    "winner","annihilation_winner",
    "MoveApplied","MoveUndone","GameFinished",
    "GameSession","IllegalMoveError","Listener",
    "initial_board","ascii_board","board_from_diagram","board_to_text",
]
