import unittest

from turkish_dama.core import Position, Side, board_from_diagram, initial_board
from turkish_dama.perft import perft, perft_divide


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


class TestPerft(unittest.TestCase):
    def test_startpos(self):
        board = initial_board()
        self.assertEqual(perft(board, Side.NEAR, 0), 1)
        self.assertEqual(perft(board, Side.NEAR, 1), 8)
        self.assertEqual(perft(board, Side.NEAR, 2), 64)
        self.assertEqual(perft(board, Side.FAR, 1), 8)

    def test_divide_sums_to_perft(self):
        board = initial_board()
        out = perft_divide(board, Side.NEAR, 3)
        self.assertEqual(len(out), 8)
        self.assertIn("a3-a4", out)
        self.assertEqual(sum(out.values()), perft(board, Side.NEAR, 3))

    def test_chain_counts_as_one_ply(self):
        board = board_from_diagram(MAX_CAPTURE)
        self.assertEqual(perft(board, Side.NEAR, 1), 1)
        self.assertEqual(perft_divide(board, Side.NEAR, 1), {"b3xb5": 1})
        self.assertEqual(perft(board, Side.NEAR, 1, Position(5, 6)), 1)


if __name__ == "__main__":
    unittest.main()
