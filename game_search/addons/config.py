"""
Configuration of the move search.
"""

from dataclasses import dataclass
from enum import Enum


class Algorithm(str, Enum):
    """
    Strategy used to pick a move.

    MINIMAX: Alpha-beta search against the worst tile spawn, with iterative deepening.
    EXPECTIMAX: Expected value over tile spawns, memoized per board.
    GREEDY: Largest immediate merge score.
    LOOKAHEAD: Expected merge score over a few moves, without heuristic.
    CORNER: Fixed priority left, down, up, right.
    """

    MINIMAX = 'minimax'
    EXPECTIMAX = 'expectimax'
    GREEDY = 'greedy'
    LOOKAHEAD = 'lookahead'
    CORNER = 'corner'


@dataclass
class SearchConfig:
    """
    Configuration for the search engine.
    """

    algorithm: Algorithm = Algorithm.EXPECTIMAX
    depth_limit: int = 3  # Recursion depth of the search

    # ##>: Key the expectimax memo table with the exact cell values instead of the rolling hash.
    exact_memo_keys: bool = False

    def __post_init__(self):
        self.algorithm = Algorithm(self.algorithm)
