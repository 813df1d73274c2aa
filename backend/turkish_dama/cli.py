from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from .core import Board, GameSession, ascii_board, board_from_diagram, board_to_text, initial_board
from .engine import Engine, DEFAULT_DEPTH, DEFAULT_NODE_LIMIT, HINT_DEPTH
from .notation import move_to_str, parse_move
from .perft import perft, perft_divide
from .api.serde import str_to_side


def _load_board(diagram: Optional[str]) -> Board:
    if not diagram:
        return initial_board()
    path = Path(diagram)
    if path.is_file():
        return board_from_diagram(path.read_text(encoding="utf-8"))
    # inline form: rows separated by "/"
    return board_from_diagram("\n".join(diagram.split("/")))


def cmd_show(args: argparse.Namespace) -> int:
    board = _load_board(args.diagram)
    print(ascii_board(board))
    print()
    print(board_to_text(board), end="")
    return 0


def cmd_perft(args: argparse.Namespace) -> int:
    board = _load_board(args.diagram)
    side = str_to_side(args.side)
    if args.divide:
        out = perft_divide(board, side, args.depth)
        total = 0
        for k in sorted(out):
            print(f"{k}: {out[k]}")
            total += out[k]
        print(f"Total: {total}")
    else:
        print(perft(board, side, args.depth))
    return 0


def cmd_hint(args: argparse.Namespace) -> int:
    board = _load_board(args.diagram)
    side = str_to_side(args.side)
    result = Engine(node_limit=args.node_limit).search(board, side, args.depth)
    if result.move is None:
        print("No legal moves.")
        return 0
    print(f"{move_to_str(result.move)} score={result.score:.1f} nodes={result.nodes}")
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    session = GameSession(board=_load_board(args.diagram), side_to_move=str_to_side(args.side),
                          tracked_side=str_to_side(args.human))
    engine = Engine(node_limit=args.node_limit)
    human = session.tracked_side

    while True:
        print(ascii_board(session.board))
        print()
        if session.winner is not None:
            print(f"{session.winner.label} wins.")
            return 0

        moves = session.legal_moves()
        if session.side_to_move is human:
            prompt = "Continue the capture" if session.continuation is not None else "Your move"
            text = input(f"{prompt} (e.g. {move_to_str(moves[0])}): ").strip()
            if text in ("quit", "exit"):
                return 0
            if text == "undo":
                try:
                    session.pop()
                    while session.side_to_move is not human and session.ply:
                        session.pop()
                except ValueError as exc:
                    print(exc)
                continue
            try:
                m = parse_move(text, moves)
            except ValueError as exc:
                print(exc)
                continue
            if m is None:
                print("Illegal move.")
                continue
            session.push(m)
        else:
            m = engine.best_move(session.board, session.side_to_move, args.depth, session.continuation)
            if m is None:
                # no moves means the side to move has already lost
                print("Engine has no legal moves.")
                return 0
            print("Engine:", move_to_str(m))
            session.push(m)


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="turkish-dama")
    ap.add_argument("--log-level", default=os.environ.get("DAMA_LOG_LEVEL", "WARNING"))
    sub = ap.add_subparsers(dest="cmd", required=True)

    default_depth = int(os.environ.get("DAMA_DEPTH", str(DEFAULT_DEPTH)))
    default_nodes = int(os.environ.get("DAMA_NODE_LIMIT", str(DEFAULT_NODE_LIMIT)))

    def position_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--diagram", type=str, default=None,
                       help="diagram file, or inline rows separated by '/' (. n N f F)")
        p.add_argument("--side", type=str, default="near", choices=["near", "far"], help="side to move")

    ss = sub.add_parser("show", help="Show the board as a diagram and as the advice text grid")
    ss.add_argument("--diagram", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    sp = sub.add_parser("perft", help="Run perft")
    position_args(sp)
    sp.add_argument("--depth", type=int, default=3)
    sp.add_argument("--divide", action="store_true")
    sp.set_defaults(fn=cmd_perft)

    sh = sub.add_parser("hint", help="Print the engine's move for a position")
    position_args(sh)
    sh.add_argument("--depth", type=int, default=HINT_DEPTH)
    sh.add_argument("--node-limit", type=int, default=default_nodes)
    sh.set_defaults(fn=cmd_hint)

    pl = sub.add_parser("play", help="Play against the built-in engine")
    position_args(pl)
    pl.add_argument("--human", type=str, default="near", choices=["near", "far"])
    pl.add_argument("--depth", type=int, default=default_depth)
    pl.add_argument("--node-limit", type=int, default=default_nodes)
    pl.set_defaults(fn=cmd_play)

    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    return int(args.fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
