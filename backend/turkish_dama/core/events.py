from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .moves import Move
    from .types import Side

@dataclass(frozen=True)
class MoveApplied:
    move: "Move"
    side: "Side"
    promoted: bool
    continues: bool

@dataclass(frozen=True)
class MoveUndone:
    move: "Move"
    side: "Side"

@dataclass(frozen=True)
class GameFinished:
    winner: "Side"
    # the only signal the profile store consumes
    tracked_won: bool
