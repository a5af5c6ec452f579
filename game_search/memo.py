# -*- coding: utf-8 -*-
"""
Board fingerprint and the memo table of the expectimax search.
"""
from typing import Dict, Hashable, Optional, Tuple

from slidingtiles.core import Board

from .addons.types import SearchResult

# ##: Rolling hash parameters, the base exceeds any practical tile value.
FINGERPRINT_BASE = 4096
FINGERPRINT_MODULUS = 982451653


def fingerprint(board: Board) -> int:
    """
    Hash the board cell by cell.

    Parameters
    ----------
    board : Board
        The board to hash.

    Returns
    -------
    int
        ``hash = (hash * 4096 + value) mod 982451653`` over the cells, empty cells count as 0.

    Notes
    -----
    Collisions are possible, the state space is far larger than the modulus.
    """
    code = 0
    for _, tile in board.each_cell():
        code = (code * FINGERPRINT_BASE + (tile.value if tile else 0)) % FINGERPRINT_MODULUS
    return code


def exact_key(board: Board) -> Tuple[int, ...]:
    """Collision-free key: the size followed by every cell value."""
    return (board.size,) + tuple(tile.value if tile else 0 for _, tile in board.each_cell())


class MemoTable:
    """
    Results of already evaluated boards.

    The table is rebuilt for every top-level search, entries are never reused once the real
    board has changed.
    """

    def __init__(self, exact_keys: bool = False):
        self._key = exact_key if exact_keys else fingerprint
        self._entries: Dict[Hashable, SearchResult] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def find(self, board: Board) -> Optional[SearchResult]:
        return self._entries.get(self._key(board))

    def add(self, board: Board, result: SearchResult) -> None:
        self._entries[self._key(board)] = result
