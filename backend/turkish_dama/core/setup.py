from __future__ import annotations

from typing import Dict

from .board import Board
from .piece import Piece, SYMBOL_TO_PIECE
from .types import BOARD_SIZE, Position, Side

def initial_board() -> Board:
    pieces: Dict[Position, Piece] = {}
    for side in (Side.NEAR, Side.FAR):
        for r in side.home_rows:
            for c in range(BOARD_SIZE):
                pieces[Position(r, c)] = Piece(side)
    return Board.from_pieces(pieces)

def ascii_board(board: Board) -> str:
    rows = []
    for row in board.rows():
        rows.append(" ".join(p.symbol if p else "." for p in row))
    return "\n".join(rows)

def board_from_diagram(text: str) -> Board:
    """Parse eight rows of eight cells (``.``, ``n``, ``N``, ``f``, ``F``), row 0 first.

    Whitespace inside a row is ignored, so ``ascii_board`` output parses back.
    """
    lines = [ln for ln in ("".join(line.split()) for line in text.strip().splitlines()) if ln]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(lines)}")

    pieces: Dict[Position, Piece] = {}
    for r, line in enumerate(lines):
        if len(line) != BOARD_SIZE:
            raise ValueError(f"Bad row width in diagram row {r}: {line!r}")
        for c, ch in enumerate(line):
            if ch == ".":
                continue
            piece = SYMBOL_TO_PIECE.get(ch)
            if piece is None:
                raise ValueError(f"Unknown piece char: {ch!r}")
            pieces[Position(r, c)] = piece
    return Board.from_pieces(pieces)

def board_to_text(board: Board) -> str:
    """Row-major grid for the advice prompt: ``[ ]`` empty, ``[B]``/``[BK]``, ``[W]``/``[WK]``."""
    out = []
    for r, row in enumerate(board.rows()):
        cells = "".join(f"[{p.tag}]" if p else "[ ]" for p in row)
        out.append(f"Row {r}: {cells}\n")
    return "".join(out)
