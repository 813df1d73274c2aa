from __future__ import annotations

from pathlib import Path
import sys

# Ensure `backend/` is on sys.path so `import turkish_dama` works.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from turkish_dama.core import GameSession, Position, Side, ascii_board, board_from_diagram, pos_name
from turkish_dama.engine import Engine
from turkish_dama.notation import move_to_str


def show(title: str, session: GameSession) -> None:
    print("\n" + "=" * 72)
    print(title)
    print(ascii_board(session.board))
    print("Side to move:", session.side_to_move.label)
    if session.continuation is not None:
        print("Continuing capture from:", pos_name(session.continuation))


def demo_longest_chain_is_forced() -> None:
    s = GameSession(board_from_diagram("""
        ........
        ........
        .f......
        ........
        .f....f.
        .n....n.
        ........
        ........
    """))
    show("Demo 1: two captures available, only the two-piece chain is legal", s)
    print("Legal:", [move_to_str(m) for m in s.legal_moves()])

    while s.side_to_move is Side.NEAR:
        m = s.legal_moves()[0]
        s.push(m)
        show(f"After {move_to_str(m)}", s)


def demo_flying_king() -> None:
    s = GameSession(board_from_diagram("""
        ........
        ........
        ........
        f.......
        ........
        ........
        ........
        N......f
    """))
    show("Demo 2: a king captures from a distance and may land on any empty square beyond", s)
    print("King moves from a1:", [move_to_str(m) for m in s.targets(Position(7, 0))])


def demo_engine_reply() -> None:
    s = GameSession()
    engine = Engine(node_limit=50_000)
    for _ in range(4):
        result = engine.search(s.board, s.side_to_move, 3, s.continuation)
        print(f"{s.side_to_move.label}: {move_to_str(result.move)} score={result.score:.1f} nodes={result.nodes}")
        s.push(result.move)
    show("Demo 3: four engine plies from the start", s)


if __name__ == "__main__":
    demo_longest_chain_is_forced()
    demo_flying_king()
    demo_engine_reply()
