from __future__ import annotations

from dataclasses import dataclass, replace

from .types import Side

@dataclass(frozen=True)
class Piece:
    side: Side
    is_king: bool = False

    @property
    def symbol(self) -> str:
        ch = "n" if self.side is Side.NEAR else "f"
        return ch.upper() if self.is_king else ch

    @property
    def tag(self) -> str:
        """Advice-grid tag: side letter plus ``K`` for kings."""
        return self.side.tag + ("K" if self.is_king else "")

    def crowned(self) -> "Piece":
        return self if self.is_king else replace(self, is_king=True)


SYMBOL_TO_PIECE = {
    "n": Piece(Side.NEAR),
    "f": Piece(Side.FAR),
    "N": Piece(Side.NEAR, is_king=True),
    "F": Piece(Side.FAR, is_king=True),
}
