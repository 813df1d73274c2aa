from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Tuple

from .piece import Piece
from .types import BOARD_SIZE, Position, Side

Cells = Tuple[Optional[Piece], ...]

def _index(p: Position) -> int:
    # negative rows or cols would otherwise wrap onto real cells
    if not p.in_bounds():
        raise ValueError(f"Off-board position {p}")
    return p.row * BOARD_SIZE + p.col

@dataclass(frozen=True)
class Board:
    """Immutable 8x8 grid. Every change produces a new Board."""

    cells: Cells = (None,) * (BOARD_SIZE * BOARD_SIZE)

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Board needs {BOARD_SIZE * BOARD_SIZE} cells, got {len(self.cells)}")

    @classmethod
    def from_pieces(cls, pieces: Mapping[Position, Piece]) -> "Board":
        return cls().with_changes(pieces)

    def piece_at(self, p: Position) -> Optional[Piece]:
        return self.cells[_index(p)]

    def is_empty(self, p: Position) -> bool:
        return self.cells[_index(p)] is None

    def with_changes(self, changes: Mapping[Position, Optional[Piece]]) -> "Board":
        cells = list(self.cells)
        for p, piece in changes.items():
            cells[_index(p)] = piece
        return Board(tuple(cells))

    def iter_pieces(self) -> Iterator[Tuple[Position, Piece]]:
        # row-major: the enumeration order every generator relies on
        for i, piece in enumerate(self.cells):
            if piece is not None:
                yield Position(i // BOARD_SIZE, i % BOARD_SIZE), piece

    def pieces_of(self, side: Side) -> List[Tuple[Position, Piece]]:
        return [(p, piece) for p, piece in self.iter_pieces() if piece.side is side]

    def count(self, side: Side) -> int:
        return sum(1 for piece in self.cells if piece is not None and piece.side is side)

    def rows(self) -> List[Cells]:
        return [self.cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]
