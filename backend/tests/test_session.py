import unittest

from turkish_dama.core import (
    Board, GameFinished, GameSession, IllegalMoveError, Listener, Move, MoveApplied, MoveUndone,
    Piece, Position, Side, board_from_diagram, can_continue, initial_board,
)


P = Position

MAX_CAPTURE = """
........
........
.f......
........
.f....f.
.n....n.
........
........
"""

PROMOTING_CHAIN = """
...f....
f.......
n.......
........
.......f
.......n
........
........
"""


class _Events(Listener):
    def __init__(self):
        self.events = []

    def on_event(self, session, event):
        self.events.append(event)


class TestTurns(unittest.TestCase):
    def test_step_passes_the_turn(self):
        s = GameSession()
        s.push(s.resolve(P(5, 0), P(4, 0)))
        self.assertIs(s.side_to_move, Side.FAR)
        self.assertIsNone(s.continuation)
        self.assertEqual(s.ply, 1)
        self.assertEqual(s.last_move, Move(P(5, 0), P(4, 0)))
        self.assertTrue(all(m.from_pos.row == 2 for m in s.legal_moves()))

    def test_illegal_moves_are_rejected(self):
        s = GameSession()
        with self.assertRaisesRegex(IllegalMoveError, "Illegal move"):
            s.push(Move(P(5, 0), P(3, 0)))
        with self.assertRaisesRegex(ValueError, "Illegal move: a6-a5"):
            s.resolve(P(2, 0), P(3, 0))
        # far piece while near is to move
        with self.assertRaises(IllegalMoveError):
            s.push(Move(P(2, 0), P(3, 0)))
        self.assertEqual(s.ply, 0)
        self.assertEqual(s.board, initial_board())

    def test_targets_for_a_selected_piece(self):
        s = GameSession()
        self.assertEqual(s.targets(P(5, 3)), [Move(P(5, 3), P(4, 3))])
        self.assertEqual(s.targets(P(6, 3)), [])
        self.assertEqual(s.targets(P(2, 3)), [])


class TestMultiCapture(unittest.TestCase):
    def test_same_piece_keeps_capturing(self):
        s = GameSession(board_from_diagram(MAX_CAPTURE))
        s.push(Move(P(5, 1), P(3, 1), is_capture=True, captured=P(4, 1)))
        self.assertIs(s.side_to_move, Side.NEAR)
        self.assertEqual(s.continuation, P(3, 1))
        self.assertEqual(s.legal_moves(), [Move(P(3, 1), P(1, 1), is_capture=True, captured=P(2, 1))])
        # the other capture is no longer available
        with self.assertRaises(IllegalMoveError):
            s.push(Move(P(5, 6), P(3, 6), is_capture=True, captured=P(4, 6)))

        s.push(s.legal_moves()[0])
        self.assertIs(s.side_to_move, Side.FAR)
        self.assertIsNone(s.continuation)

    def test_promotion_ends_the_turn(self):
        s = GameSession(board_from_diagram(PROMOTING_CHAIN))
        events = _Events()
        s.listeners.append(events)
        s.push(Move(P(2, 0), P(0, 0), is_capture=True, captured=P(1, 0)))
        # the new king could keep going, the session does not let it
        self.assertTrue(can_continue(s.board, Side.NEAR, P(0, 0)))
        self.assertIs(s.side_to_move, Side.FAR)
        self.assertIsNone(s.continuation)
        applied = events.events[0]
        self.assertIsInstance(applied, MoveApplied)
        self.assertTrue(applied.promoted)
        self.assertFalse(applied.continues)


class TestUndo(unittest.TestCase):
    def test_pop_restores_everything(self):
        s = GameSession(board_from_diagram(MAX_CAPTURE))
        events = _Events()
        s.listeners.append(events)
        first = s.legal_moves()[0]
        s.push(first)
        s.push(s.legal_moves()[0])
        s.pop()
        self.assertEqual(s.continuation, P(3, 1))
        self.assertIs(s.side_to_move, Side.NEAR)
        self.assertEqual(s.last_move, first)
        self.assertEqual(s.pop(), first)
        self.assertEqual(s.board, board_from_diagram(MAX_CAPTURE))
        self.assertIsNone(s.last_move)
        self.assertIsInstance(events.events[-1], MoveUndone)

    def test_pop_on_empty_history(self):
        with self.assertRaisesRegex(ValueError, "No moves to undo"):
            GameSession().pop()

    def test_reset(self):
        s = GameSession(board_from_diagram(MAX_CAPTURE))
        s.push(s.legal_moves()[0])
        s.reset()
        self.assertEqual(s.board, initial_board())
        self.assertIs(s.side_to_move, Side.NEAR)
        self.assertEqual(s.ply, 0)
        self.assertEqual(s.moves_played, [])


class TestGameOver(unittest.TestCase):
    def _last_capture_board(self):
        return Board.from_pieces({P(3, 3): Piece(Side.NEAR), P(3, 4): Piece(Side.FAR)})

    def test_annihilation_finishes_the_game(self):
        for tracked, won in ((Side.NEAR, True), (Side.FAR, False)):
            with self.subTest(tracked=tracked):
                s = GameSession(self._last_capture_board(), tracked_side=tracked)
                events = _Events()
                s.listeners.append(events)
                s.push(s.legal_moves()[0])
                self.assertIs(s.winner, Side.NEAR)
                self.assertEqual(events.events[-1], GameFinished(winner=Side.NEAR, tracked_won=won))
                self.assertEqual(s.legal_moves(), [])
                with self.assertRaisesRegex(IllegalMoveError, "Game is over"):
                    s.push(Move(P(3, 5), P(2, 5)))

    def test_undo_reopens_a_finished_game(self):
        s = GameSession(self._last_capture_board())
        s.push(s.legal_moves()[0])
        s.pop()
        self.assertIsNone(s.winner)
        self.assertEqual(len(s.legal_moves()), 1)

    def test_stalemated_start(self):
        board = Board.from_pieces({P(0, 0): Piece(Side.NEAR), P(0, 1): Piece(Side.FAR), P(0, 2): Piece(Side.FAR)})
        self.assertIs(GameSession(board, Side.NEAR).winner, Side.FAR)
        self.assertIsNone(GameSession(board, Side.FAR).winner)


if __name__ == "__main__":
    unittest.main()
