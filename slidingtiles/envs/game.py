"""Sliding-tile game driver: live board, running score, tile spawns and end of game."""

import logging

from numpy.random import PCG64DXSM, default_rng

from slidingtiles.core.gameboard import TILE_SPAWN_PROBS, Board
from slidingtiles.core.gamemove import NO_OP, to_direction
from slidingtiles.core.tile import Tile

logger = logging.getLogger(__name__)

# ##>: Pre-computed tile values and probabilities for sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS.keys())
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class TileGame:
    """
    Sliding-tile game.

    This class owns the real board: it applies moves, spawns the random tiles and tracks the
    score and the end of the game. Search only reads the board, this class is the one that
    mutates it.
    """

    # ##: All Actions.
    ACTIONS = {"up": 0, "right": 1, "down": 2, "left": 3}

    def __init__(self, size: int = 4, start_tiles: int = 2, seed: int | None = None, win_value: int = 2048):
        """
        Initialize the game with a fresh board.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        start_tiles : int, optional
            Number of tiles spawned on reset (default is 2).
        seed : int, optional
            Random number generator seed for reproducibility.
        win_value : int, optional
            Tile value that wins the game (default is 2048).
        """
        self.size = size
        self.start_tiles = start_tiles
        self.win_value = win_value
        self.best_score = 0

        self.reset(seed=seed)

    @property
    def is_terminated(self) -> bool:
        """
        Check if the game accepts no more moves.

        Returns
        -------
        bool
            True when the game is over, or won and not continued.
        """
        return self.over or (self.won and not self.keep_playing_flag)

    def reset(self, seed: int | None = None) -> Board:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Random number generator seed for reproducibility.

        Returns
        -------
        Board
            The new board holding ``start_tiles`` tiles.
        """
        self.generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())
        self.board = Board(self.size)
        self.score = 0
        self.over = False
        self.won = False
        self.keep_playing_flag = False

        for _ in range(self.start_tiles):
            self.add_random_tile()
        return self.board

    def add_random_tile(self) -> Tile | None:
        """
        Spawn a tile in a uniformly chosen empty cell.

        Returns
        -------
        Tile or None
            The new tile, 2 with probability 0.9 and 4 otherwise; None if the board is full.
        """
        position = self.board.random_available_cell(self.generator)
        if position is None:
            return None

        value = int(self.generator.choice(_TILE_VALUES, p=_TILE_PROBS))
        tile = Tile(position, value)
        self.board.insert_tile(tile)
        return tile

    def step(self, direction: int) -> tuple[Board, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : int
            The move to apply (0: up, 1: right, 2: down, 3: left).

        Returns
        -------
        tuple[Board, int, bool]
            The board, the score gained by the move and whether the game is terminated.

        Notes
        -----
        - An ineffective move gains nothing and spawns no tile.
        - After an effective move exactly one tile is spawned.
        """
        to_direction(direction)
        if self.is_terminated:
            return self.board, 0, True

        gained = self.board.move(direction)
        if gained == NO_OP:
            return self.board, 0, self.is_terminated

        self.score += gained
        self.best_score = max(self.best_score, self.score)

        # ##>: Only a tile merged by this move can win.
        merged = (tile for _, tile in self.board.each_cell() if tile and tile.merged_from)
        if not self.won and any(tile.value == self.win_value for tile in merged):
            self.won = True
            logger.info("Reached %d with score %d", self.win_value, self.score)

        self.add_random_tile()

        if not self.board.moves_available():
            self.over = True
            logger.info("Game over with score %d, largest tile %d", self.score, self.board.largest_value())

        return self.board, gained, self.is_terminated

    def keep_playing(self) -> None:
        """Continue a won game."""
        self.keep_playing_flag = True

    def serialize(self) -> dict:
        """
        Describe the game as plain data.

        Returns
        -------
        dict
            Board, score and flags, accepted back by ``from_state``.
        """
        return {
            "grid": self.board.serialize(),
            "score": self.score,
            "over": self.over,
            "won": self.won,
            "keep_playing": self.keep_playing_flag,
            "start_tiles": self.start_tiles,
        }

    @classmethod
    def from_state(
        cls, state: dict, seed: int | None = None, win_value: int = 2048, start_tiles: int | None = None
    ) -> "TileGame":
        """
        Restore a game saved with ``serialize``.

        Parameters
        ----------
        state : dict
            The saved game.
        seed : int, optional
            Seed for the spawns that follow the restore.
        win_value : int, optional
            Tile value that wins the game (default is 2048).
        start_tiles : int, optional
            Tiles spawned by later resets, defaults to the saved value or 2.

        Returns
        -------
        TileGame
            The restored game.
        """
        grid = state["grid"]
        game = cls(size=grid["size"], start_tiles=0, seed=seed, win_value=win_value)
        game.start_tiles = start_tiles if start_tiles is not None else int(state.get("start_tiles", 2))
        game.board = Board.from_cells(grid["size"], grid["cells"])
        game.score = int(state.get("score", 0))
        game.over = bool(state.get("over", False))
        game.won = bool(state.get("won", False))
        game.keep_playing_flag = bool(state.get("keep_playing", False))
        game.best_score = game.score
        return game
