# -*- coding: utf-8 -*-
"""
Move search for the sliding-tile game.

It provides a static board heuristic, minimax with alpha-beta pruning, memoized expectimax and a
few simple strategies, all behind the `SearchEngine`.
"""
from .addons import NO_DIRECTION, Algorithm, SearchConfig, SearchResult, Turn
from .engine import SearchEngine
from .heuristic import heuristic
from .memo import MemoTable, fingerprint

__all__ = [
    "Algorithm",
    "MemoTable",
    "NO_DIRECTION",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "Turn",
    "fingerprint",
    "heuristic",
]
