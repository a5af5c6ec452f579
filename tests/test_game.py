"""
Tests for the game driver: spawns, scoring, end of game and saved state.
"""

from unittest import TestCase, main

import numpy as np

from slidingtiles.core import Board, Direction
from slidingtiles.envs import TileGame

EMPTY_ROW = [0, 0, 0, 0]


class TestTileGame(TestCase):
    """Test TileGame API and state management."""

    def setUp(self):
        self.game = TileGame(size=4, seed=42)

    def test_reset_state_initialization(self):
        """Reset spawns two tiles of value 2 or 4 and clears the score."""
        board = self.game.reset(seed=1)
        values = board.values()
        self.assertEqual(np.count_nonzero(values), 2)
        self.assertTrue(np.all(np.isin(values[values != 0], [2, 4])))
        self.assertEqual(self.game.score, 0)
        self.assertFalse(self.game.is_terminated)

    def test_reset_seed_reproducibility(self):
        first = self.game.reset(seed=7).clone()
        second = self.game.reset(seed=7)
        self.assertEqual(first, second)

    def test_spawn_values(self):
        """Spawns are only 2 or 4, mostly 2."""
        values = []
        for _ in range(200):
            self.game.board = Board(size=4)
            values.append(self.game.add_random_tile().value)
        self.assertTrue(set(values) <= {2, 4})
        self.assertGreater(values.count(2), values.count(4))

    def test_spawn_on_full_board(self):
        self.game.board = Board.from_values([[2, 4], [4, 2]])
        self.assertIsNone(self.game.add_random_tile())

    def test_step_valid_move(self):
        """An effective move scores and spawns exactly one tile."""
        self.game.board = Board.from_values([[2, 2, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        board, reward, done = self.game.step(Direction.LEFT)

        self.assertEqual(reward, 4)
        self.assertEqual(self.game.score, 4)
        self.assertEqual(board.values()[0, 0], 4)
        self.assertEqual(np.count_nonzero(board.values()), 2)
        self.assertFalse(done)

    def test_step_invalid_move(self):
        """An ineffective move scores nothing and spawns nothing."""
        self.game.board = Board.from_values([[2, 0, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        board, reward, done = self.game.step(Direction.LEFT)

        self.assertEqual(reward, 0)
        self.assertEqual(np.count_nonzero(board.values()), 1)
        self.assertFalse(done)

    def test_step_invalid_direction(self):
        with self.assertRaises(ValueError):
            self.game.step(5)

    def test_game_over(self):
        """Filling the last cell without any match ends the game."""
        self.game.board = Board.from_values(
            [[2, 4, 2, 4], [4, 2, 4, 2], [16, 4, 2, 4], [8, 16, 8, 0]]
        )
        with self.assertLogs("slidingtiles.envs.game", level="INFO"):
            _, reward, done = self.game.step(Direction.RIGHT)

        self.assertEqual(reward, 0)
        self.assertTrue(done)
        self.assertTrue(self.game.over)
        self.assertFalse(self.game.board.moves_available())

        # ##>: A finished game ignores further moves.
        board_before = self.game.board.clone()
        self.assertEqual(self.game.step(Direction.LEFT), (self.game.board, 0, True))
        self.assertEqual(self.game.board, board_before)

    def test_win_and_keep_playing(self):
        """Reaching the winning tile stops the game until asked to continue."""
        self.game.board = Board.from_values([[1024, 1024, 0, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
        _, reward, done = self.game.step(Direction.LEFT)

        self.assertEqual(reward, 2048)
        self.assertTrue(self.game.won)
        self.assertTrue(done)
        self.assertTrue(self.game.is_terminated)

        self.game.keep_playing()
        self.assertFalse(self.game.is_terminated)
        self.assertEqual(self.game.best_score, 2048)

    def test_win_needs_merge(self):
        """A restored board already past the winning tile only wins by merging it."""
        state = TileGame.from_state(
            {"grid": Board.from_values([[4096, 0, 2, 2], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW]).serialize(), "score": 0},
            seed=0,
        )
        # ##>: Merging the twos is not the winning merge.
        _, reward, done = state.step(Direction.LEFT)

        self.assertEqual(reward, 4)
        self.assertFalse(state.won)
        self.assertFalse(done)

    def test_restore_keeps_start_tiles(self):
        """The number of starting tiles survives a save and restore."""
        game = TileGame(size=4, start_tiles=3, seed=2)
        restored = TileGame.from_state(game.serialize(), seed=2)
        self.assertEqual(restored.start_tiles, 3)
        self.assertEqual(np.count_nonzero(restored.reset(seed=4).values()), 3)

        self.assertEqual(TileGame.from_state(game.serialize(), start_tiles=1).start_tiles, 1)

    def test_serialize_round_trip(self):
        """A restored game has the same board, score and flags."""
        self.game.board = Board.from_values([[2, 2, 0, 0], [0, 4, 0, 0], EMPTY_ROW, [0, 0, 0, 8]])
        self.game.step(Direction.LEFT)
        state = self.game.serialize()

        restored = TileGame.from_state(state, seed=3)
        self.assertEqual(restored.board, self.game.board)
        self.assertEqual(restored.score, self.game.score)
        self.assertEqual(restored.over, self.game.over)
        self.assertEqual(restored.won, self.game.won)
        self.assertEqual(restored.keep_playing_flag, self.game.keep_playing_flag)
        self.assertEqual(restored.start_tiles, 2)


if __name__ == "__main__":
    main()
