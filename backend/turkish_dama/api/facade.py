from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..core import GameSession, GameFinished, Listener, MoveApplied, Side, board_to_text
from ..engine import Engine, HINT_DEPTH

from .serde import snapshot, dict_to_move, move_to_dict, side_to_str, parse_square

LOGGER = logging.getLogger("dama.api.facade")


def _index_by_square(snap: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    return {p["pos"]["name"]: p for p in snap.get("pieces", [])}


def diff(before: Dict[str, Any], after: Dict[str, Any]) -> Dict[str, Any]:
    """Animation-friendly diff between two snapshots, keyed by square name."""
    b = _index_by_square(before)
    a = _index_by_square(after)

    changed: List[Dict[str, Any]] = []
    for name in sorted(a.keys() & b.keys()):
        if (a[name]["side"], a[name]["king"]) != (b[name]["side"], b[name]["king"]):
            changed.append({"square": name, "before": b[name], "after": a[name]})

    return {
        "vacated": [b[name] for name in sorted(b.keys() - a.keys())],
        "filled": [a[name] for name in sorted(a.keys() - b.keys())],
        "changed": changed,
        "side_to_move": after.get("side_to_move"),
        "continuation": after.get("continuation"),
        "last_move": after.get("last_move"),
    }


class _Recorder(Listener):
    def __init__(self) -> None:
        self.events: List[object] = []

    def on_event(self, session: GameSession, event: object) -> None:
        self.events.append(event)


class DamaApi:
    """A small, stable facade for a renderer, a transport or an advice host.

    - apply/undo are deterministic
    - returns snapshots + diffs for animation
    - hints come from the same engine the computer opponent uses
    """

    def __init__(self, session: Optional[GameSession] = None, engine: Optional[Engine] = None,
                 hint_depth: int = HINT_DEPTH) -> None:
        self.session = session if session is not None else GameSession()
        self.engine = engine if engine is not None else Engine()
        self.hint_depth = hint_depth
        self._recorder = _Recorder()
        self.session.listeners.append(self._recorder)

    def state(self) -> Dict[str, Any]:
        return snapshot(self.session)

    def legal_moves(self) -> List[Dict[str, Any]]:
        return [move_to_dict(m) for m in self.session.legal_moves()]

    def targets(self, square: Union[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
        pos = parse_square(square)
        return [move_to_dict(m) for m in self.session.targets(pos)]

    def apply(self, move: Dict[str, Any]) -> Dict[str, Any]:
        before = snapshot(self.session)
        m = dict_to_move(move)

        self._recorder.events.clear()
        self.session.push(m)
        after = snapshot(self.session)

        meta: Dict[str, Any] = {"applied": move_to_dict(m), "promoted": False, "continues": False}
        for ev in self._recorder.events:
            if isinstance(ev, MoveApplied):
                meta["promoted"] = ev.promoted
                meta["continues"] = ev.continues
            elif isinstance(ev, GameFinished):
                meta["winner"] = side_to_str(ev.winner)
                meta["tracked_won"] = ev.tracked_won

        return {"before": before, "after": after, "diff": diff(before, after), "meta": meta}

    def undo(self) -> Dict[str, Any]:
        before = snapshot(self.session)
        undone = self.session.pop()
        after = snapshot(self.session)
        return {"before": before, "after": after, "diff": diff(before, after),
                "meta": {"undone": move_to_dict(undone)}}

    def reset(self) -> Dict[str, Any]:
        self.session.reset()
        return snapshot(self.session)

    def hint(self, depth: Optional[int] = None) -> Optional[Dict[str, Any]]:
        s = self.session
        if s.winner is not None:
            return None
        if depth is None:
            depth = self.hint_depth
        result = self.engine.search(s.board, s.side_to_move, depth, s.continuation)
        LOGGER.debug("hint", extra={"side": s.side_to_move.value, "nodes": result.nodes, "score": result.score})
        if result.move is None:
            return None
        return move_to_dict(result.move)

    def advice_request(self, side: Optional[Side] = None) -> Dict[str, str]:
        """Payload the host forwards to the advice service."""
        who = side if side is not None else self.session.side_to_move
        return {"boardStr": board_to_text(self.session.board), "playerColorName": who.label}
