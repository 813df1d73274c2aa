from __future__ import annotations

from typing import Iterable, Optional

from .core import Move, parse_pos, pos_name


def move_to_str(m: Move) -> str:
    """``a3-a4`` for a step or slide, ``a3xa5`` for a capture."""
    sep = "x" if m.is_capture else "-"
    return f"{pos_name(m.from_pos)}{sep}{pos_name(m.to_pos)}"


def parse_move(text: str, legal: Iterable[Move]) -> Optional[Move]:
    """Match typed input against the legal moves; ``-``, ``x`` or a space may separate the squares."""
    s = text.strip().lower()
    for sep in ("-", "x", " "):
        s = s.replace(sep, "")
    if len(s) != 4:
        raise ValueError(f"Bad move: {text!r}")
    fr, to = parse_pos(s[:2]), parse_pos(s[2:])
    for m in legal:
        if m.from_pos == fr and m.to_pos == to:
            return m
    return None
