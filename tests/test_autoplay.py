"""
Tests for the command line driver.
"""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, main

from autoplay import evaluate, play_game
from game_search import Algorithm, SearchConfig, SearchEngine
from slidingtiles.core import Board
from slidingtiles.envs import TileGame
from slidingtiles.utils import GameStorage


class TestAutoplay(TestCase):
    """Test full game loops with cheap strategies."""

    def test_play_game_move_cap(self):
        """Every tick plays one move until the cap."""
        game = TileGame(seed=0)
        engine = SearchEngine(game.board, algorithm=Algorithm.GREEDY)
        self.assertEqual(play_game(game, engine, max_moves=5), 5)
        self.assertFalse(game.over)

    def test_play_game_until_over(self):
        """A game played to the end finishes on a terminal board."""
        game = TileGame(size=2, seed=0)
        engine = SearchEngine(game.board, algorithm=Algorithm.CORNER)
        moves = play_game(game, engine)

        self.assertGreater(moves, 0)
        self.assertTrue(game.over)
        self.assertFalse(game.board.moves_available())

    def test_play_game_rebinds_board(self):
        """The engine follows the game board even after a reset."""
        game = TileGame(seed=1)
        engine = SearchEngine(Board(size=4), algorithm=Algorithm.GREEDY)
        play_game(game, engine, max_moves=1)
        self.assertIs(engine.board, game.board)

    def test_evaluate_with_state_file(self):
        """Results count one largest tile per game and the state file is kept up to date."""
        with TemporaryDirectory() as directory:
            path = Path(directory) / "autoplay.json"
            config = SearchConfig(algorithm=Algorithm.MINIMAX, depth_limit=1)
            result = evaluate(config, length=2, seed=0, state_file=path, max_moves=3)

            self.assertEqual(sum(result.values()), 2)
            storage = GameStorage(path)
            self.assertGreaterEqual(storage.get_best_score(), 0)
            self.assertIsNotNone(storage.get_game_state())


if __name__ == "__main__":
    main()
