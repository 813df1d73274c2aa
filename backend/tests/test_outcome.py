import unittest

from turkish_dama.core import Board, Piece, Position, Side, initial_board, winner


P = Position

# near man boxed in on the top row: no step, no jump
STALEMATE = Board.from_pieces({
    P(0, 0): Piece(Side.NEAR),
    P(0, 1): Piece(Side.FAR),
    P(0, 2): Piece(Side.FAR),
})


class TestWinner(unittest.TestCase):
    def test_no_winner_at_start(self):
        self.assertIsNone(winner(initial_board()))
        self.assertIsNone(winner(initial_board(), Side.NEAR))
        self.assertIsNone(winner(initial_board(), Side.FAR))

    def test_annihilation(self):
        only_near = Board.from_pieces({P(4, 4): Piece(Side.NEAR)})
        only_far = Board.from_pieces({P(4, 4): Piece(Side.FAR)})
        self.assertIs(winner(only_near), Side.NEAR)
        self.assertIs(winner(only_far), Side.FAR)
        self.assertIs(winner(only_near, Side.FAR), Side.NEAR)

    def test_stalemate_loses(self):
        self.assertIs(winner(STALEMATE, Side.NEAR), Side.FAR)

    def test_stalemate_needs_the_side_to_move(self):
        self.assertIsNone(winner(STALEMATE))
        self.assertIsNone(winner(STALEMATE, Side.FAR))


if __name__ == "__main__":
    unittest.main()
