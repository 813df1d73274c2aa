import unittest

from turkish_dama.core import (
    Board, InvalidMoveApplication, Move, Piece, Position, Side,
    apply_move, initial_board,
)


P = Position
NEAR = Piece(Side.NEAR)
FAR = Piece(Side.FAR)


class TestApplyMove(unittest.TestCase):
    def test_step_moves_the_piece_and_leaves_the_input_alone(self):
        board = initial_board()
        after, promoted = apply_move(board, Move(P(5, 2), P(4, 2)))
        self.assertFalse(promoted)
        self.assertIsNone(after.piece_at(P(5, 2)))
        self.assertEqual(after.piece_at(P(4, 2)), NEAR)
        self.assertEqual(board.piece_at(P(5, 2)), NEAR)
        self.assertIsNone(board.piece_at(P(4, 2)))
        self.assertEqual(board, initial_board())

    def test_capture_removes_the_jumped_piece(self):
        board = Board.from_pieces({P(3, 3): NEAR, P(3, 4): FAR, P(0, 0): FAR, P(7, 7): NEAR})
        after, _ = apply_move(board, Move(P(3, 3), P(3, 5), is_capture=True, captured=P(3, 4)))
        self.assertIsNone(after.piece_at(P(3, 4)))
        self.assertEqual(after.piece_at(P(3, 5)), NEAR)
        self.assertEqual(after.count(Side.FAR), 1)

    def test_reaching_the_back_row_promotes(self):
        cases = (
            (Side.NEAR, P(1, 3), P(0, 3)),
            (Side.FAR, P(6, 2), P(7, 2)),
        )
        for side, fr, to in cases:
            with self.subTest(side=side):
                board = Board.from_pieces({
                    fr: Piece(side),
                    P(4, 0): Piece(side),
                    P(3, 7): Piece(side.opponent()),
                    P(4, 7): Piece(side.opponent()),
                })
                after, promoted = apply_move(board, Move(fr, to))
                self.assertTrue(promoted)
                self.assertTrue(after.piece_at(to).is_king)
                # stable under repeated reads
                self.assertTrue(after.piece_at(to).is_king)
                self.assertFalse(after.piece_at(P(4, 0)).is_king)

    def test_king_on_the_back_row_is_not_a_promotion(self):
        board = Board.from_pieces({
            P(3, 3): Piece(Side.NEAR, is_king=True), P(6, 6): NEAR,
            P(1, 1): FAR, P(1, 2): FAR,
        })
        _, promoted = apply_move(board, Move(P(3, 3), P(0, 3)))
        self.assertFalse(promoted)

    def test_last_survivor_is_crowned_on_both_sides(self):
        board = Board.from_pieces({P(3, 3): NEAR, P(3, 4): FAR, P(0, 0): FAR})
        after, promoted = apply_move(board, Move(P(3, 3), P(3, 5), is_capture=True, captured=P(3, 4)))
        self.assertFalse(promoted)
        self.assertEqual(after.piece_at(P(0, 0)), Piece(Side.FAR, is_king=True))
        self.assertEqual(after.piece_at(P(3, 5)), Piece(Side.NEAR, is_king=True))

    def test_survivor_rule_runs_for_the_side_that_did_not_move(self):
        board = Board.from_pieces({P(5, 5): NEAR, P(6, 6): NEAR, P(1, 1): FAR})
        after, _ = apply_move(board, Move(P(5, 5), P(4, 5)))
        self.assertTrue(after.piece_at(P(1, 1)).is_king)
        self.assertFalse(after.piece_at(P(4, 5)).is_king)

    def test_empty_source_is_a_caller_defect(self):
        with self.assertRaises(InvalidMoveApplication):
            apply_move(initial_board(), Move(P(4, 4), P(3, 4)))
        with self.assertRaisesRegex(ValueError, "No piece at source"):
            apply_move(initial_board(), Move(P(4, 4), P(3, 4)))

    def test_move_capture_fields_must_agree(self):
        with self.assertRaises(ValueError):
            Move(P(3, 3), P(3, 5), is_capture=True)
        with self.assertRaises(ValueError):
            Move(P(3, 3), P(3, 4), captured=P(3, 4))


if __name__ == "__main__":
    unittest.main()
