from unittest import TestCase, main

from game_search.addons.types import NO_DIRECTION
from game_search.baseline import corner_move, greedy_move, lookahead_move
from slidingtiles.core import Board, Direction

EMPTY_ROW = [0, 0, 0, 0]


class TestBaseline(TestCase):
    def test_greedy_prefers_largest_merge(self):
        """
        Test if the direction merging the most is chosen.
        """
        board = Board.from_values([[2, 2, 0, 0], [8, 0, 0, 0], [8, 0, 0, 0], EMPTY_ROW])
        self.assertEqual(greedy_move(board), (int(Direction.UP), 16))

    def test_greedy_without_merge(self):
        """
        Test if sliding without merging gives no direction.
        """
        board = Board.from_values([[0, 2, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        self.assertEqual(greedy_move(board).direction, NO_DIRECTION)

    def test_lookahead_single_move(self):
        """
        Test if one move of lookahead is the immediate merge score.
        """
        board = Board.from_values([[2, 2, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        result = lookahead_move(board, 1)
        self.assertEqual(result.direction, int(Direction.RIGHT))
        self.assertEqual(result.score, 4.0)

    def test_lookahead_counts_later_merges(self):
        """
        Test if merges after a spawn add to the score.
        """
        board = Board.from_values([[2, 0, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        result = lookahead_move(board, 2)
        self.assertNotEqual(result.direction, NO_DIRECTION)
        self.assertGreater(result.score, 0.0)
        self.assertEqual(lookahead_move(board, 0).direction, NO_DIRECTION)

    def test_corner_priority(self):
        """
        Test if left, down and up are preferred in this order.
        """
        self.assertEqual(corner_move(Board.from_values([[0, 2], [0, 0]])).direction, int(Direction.LEFT))
        self.assertEqual(corner_move(Board.from_values([[2, 0], [0, 0]])).direction, int(Direction.DOWN))
        self.assertEqual(corner_move(Board.from_values([[0, 0], [2, 0]])).direction, int(Direction.UP))
        self.assertEqual(corner_move(Board.from_values([[2, 4], [4, 2]])).direction, int(Direction.RIGHT))


if __name__ == '__main__':
    main()
