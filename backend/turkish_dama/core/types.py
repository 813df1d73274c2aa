from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

BOARD_SIZE = 8

class Side(Enum):
    NEAR = "NEAR"
    FAR = "FAR"

    def opponent(self) -> "Side":
        return Side.FAR if self is Side.NEAR else Side.NEAR

    @property
    def forward(self) -> int:
        # row delta toward the opponent's back row
        return -1 if self is Side.NEAR else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Side.NEAR else BOARD_SIZE - 1

    @property
    def home_rows(self) -> Tuple[int, int]:
        return (5, 6) if self is Side.NEAR else (1, 2)

    @property
    def label(self) -> str:
        return "Blue" if self is Side.NEAR else "White"

    @property
    def tag(self) -> str:
        return "B" if self is Side.NEAR else "W"


FILES = "abcdefgh"

@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)

    def in_bounds(self) -> bool:
        return in_bounds(self.row, self.col)

def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

def pos_name(p: Position) -> str:
    return f"{FILES[p.col]}{BOARD_SIZE - p.row}"

def parse_pos(name: str) -> Position:
    a = name.strip().lower()
    if len(a) != 2 or a[0] not in FILES or not a[1].isdigit():
        raise ValueError(f"Bad square: {name!r}")
    row = BOARD_SIZE - int(a[1])
    col = FILES.index(a[0])
    if not in_bounds(row, col):
        raise ValueError(f"Bad square: {name!r}")
    return Position(row, col)
