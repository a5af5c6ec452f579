# -*- coding: utf-8 -*-
"""
Search engine recommending a move for the live board.
"""
import logging
from typing import Optional

from numpy.random import PCG64DXSM, Generator, default_rng

from slidingtiles.core import NO_OP, Board, Direction

from .addons.config import Algorithm, SearchConfig
from .addons.types import NO_DIRECTION, SearchResult
from .baseline import corner_move, greedy_move, lookahead_move
from .expectimax import expectimax_search
from .memo import MemoTable
from .minimax import minimax_search

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    An engine that searches the board to recommend a direction.

    The engine never applies a move to the board it is given: it explores copies and returns a
    direction. Applying the move and spawning the next tile belongs to the game.

    Methods
    -------
    search()
        Run the configured algorithm and return its raw result.
    best_move()
        Return a direction that is legal on the board, falling back to a random one.
    """

    def __init__(
        self,
        board: Board,
        algorithm: Algorithm = Algorithm.EXPECTIMAX,
        depth_limit: int = 3,
        exact_memo_keys: bool = False,
        generator: Optional[Generator] = None,
    ):
        """
        Initialize the search engine.

        Parameters
        ----------
        board : Board
            The live board, read at every call.
        algorithm : Algorithm, optional
            The strategy to use (default is expectimax).
        depth_limit : int, optional
            The search depth (default is 3). Zero or less scores the board without searching.
        exact_memo_keys : bool, optional
            Key the expectimax cache with exact cell values instead of the rolling hash.
        generator : Generator, optional
            Random source of the fallback direction.
        """
        self.board = board
        self.algorithm = Algorithm(algorithm)
        self.depth_limit = depth_limit
        self.memo = MemoTable(exact_keys=exact_memo_keys)
        self.last_result: Optional[SearchResult] = None
        self._generator = generator if generator is not None else default_rng(PCG64DXSM())

    @classmethod
    def from_config(cls, board: Board, config: SearchConfig, generator: Optional[Generator] = None) -> "SearchEngine":
        return cls(
            board,
            algorithm=config.algorithm,
            depth_limit=config.depth_limit,
            exact_memo_keys=config.exact_memo_keys,
            generator=generator,
        )

    def search(self) -> SearchResult:
        """
        Run the configured algorithm on the board.

        Returns
        -------
        SearchResult
            The recommended direction, possibly ``NO_DIRECTION``, and its score.
        """
        algorithm = Algorithm(self.algorithm)
        if algorithm is Algorithm.MINIMAX:
            result = minimax_search(self.board, self.depth_limit)
        elif algorithm is Algorithm.EXPECTIMAX:
            result = expectimax_search(self.board, self.depth_limit, self.memo)
        elif algorithm is Algorithm.GREEDY:
            result = greedy_move(self.board)
        elif algorithm is Algorithm.LOOKAHEAD:
            result = lookahead_move(self.board, self.depth_limit)
        else:
            result = corner_move(self.board)

        self.last_result = result
        logger.debug("%s (depth %d) picked %d with score %.1f", algorithm.value, self.depth_limit, *result)
        return result

    def random_legal_direction(self) -> int:
        """
        Draw directions uniformly until one changes the board.

        Raises
        ------
        ValueError
            If no direction changes the board.
        """
        if not self.board.legal_directions():
            raise ValueError("No legal direction on this board")
        while True:
            direction = int(self._generator.integers(len(Direction)))
            if self.board.clone().move(direction) != NO_OP:
                return direction

    def best_move(self) -> int:
        """
        Recommend a legal direction.

        Returns
        -------
        int
            A direction between 0 and 3 that changes the board.

        Raises
        ------
        ValueError
            If the board is terminal. The game must check for the end before asking.

        Notes
        -----
        When the search gives no direction, or one that does not change the live board, a
        random legal direction is used instead.
        """
        if not self.board.legal_directions():
            raise ValueError("No legal direction on this board")

        direction = self.search().direction
        if direction == NO_DIRECTION or self.board.clone().move(direction) == NO_OP:
            logger.warning("Search gave no playable direction (%d), picking a random one", direction)
            direction = self.random_legal_direction()
        return direction
