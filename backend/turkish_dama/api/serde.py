from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core import Move, Position, Side, pos_name, parse_pos, board_to_text
from ..notation import move_to_str


def side_to_str(s: Optional[Side]) -> Optional[str]:
    return None if s is None else s.value


def str_to_side(name: str) -> Side:
    try:
        return Side[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown side: {name!r}") from None


def pos_to_dict(p: Position) -> Dict[str, Any]:
    return {"row": p.row, "col": p.col, "name": pos_name(p)}


def parse_square(raw: Any, key: str = "square") -> Position:
    """Accept a square name or a {row, col} / {name} object."""
    if isinstance(raw, str):
        return parse_pos(raw)
    if isinstance(raw, dict):
        if "row" in raw and "col" in raw:
            p = Position(int(raw["row"]), int(raw["col"]))
        elif "name" in raw:
            p = parse_pos(str(raw["name"]))
        else:
            raise ValueError(f"Bad square for {key}: {raw!r}")
        if not p.in_bounds():
            raise ValueError(f"Bad square for {key}: {raw!r}")
        return p
    raise ValueError(f"Bad square for {key}: {raw!r}")


def _get_pos(d: Dict[str, Any], key: str) -> Position:
    raw = d.get(key)
    if raw is None:
        raise ValueError(f"Missing square: {key}")
    return parse_square(raw, key)


def move_to_dict(m: Move) -> Dict[str, Any]:
    """Opaque move record for a transport or a renderer."""
    return {
        "from": pos_to_dict(m.from_pos),
        "to": pos_to_dict(m.to_pos),
        "is_capture": m.is_capture,
        "captured": pos_to_dict(m.captured) if m.captured is not None else None,
        "text": move_to_str(m),
    }


def dict_to_move(d: Dict[str, Any]) -> Move:
    if not isinstance(d, dict):
        raise ValueError(f"Move record must be an object, got {type(d).__name__}")
    fr = _get_pos(d, "from")
    to = _get_pos(d, "to")
    is_capture = bool(d.get("is_capture", False))
    captured = _get_pos(d, "captured") if d.get("captured") is not None else None
    return Move(fr, to, is_capture=is_capture, captured=captured)


def snapshot(session) -> Dict[str, Any]:
    """JSON-friendly snapshot of the current game state."""
    pieces: List[Dict[str, Any]] = []
    for p, piece in session.board.iter_pieces():
        pieces.append(
            {
                "side": piece.side.value,
                "king": piece.is_king,
                "pos": pos_to_dict(p),
                "symbol": piece.symbol,
            }
        )

    cont = session.continuation
    return {
        "side_to_move": side_to_str(session.side_to_move),
        "continuation": pos_to_dict(cont) if cont is not None else None,
        "winner": side_to_str(session.winner),
        "last_move": move_to_dict(session.last_move) if session.last_move is not None else None,
        "pieces": pieces,
        "counts": {s.value: session.board.count(s) for s in Side},
        "ply": session.ply,
        "text": board_to_text(session.board),
    }
