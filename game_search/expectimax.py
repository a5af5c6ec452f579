# -*- coding: utf-8 -*-
"""
Expectimax search with memoization.

The player maximizes, the tile spawn is a chance node expanded over every empty cell with the
real spawn probabilities. Evaluated boards are cached in a ``MemoTable``.
"""
from slidingtiles.core import NO_OP, TILE_SPAWN_PROBS, Board, Direction, Tile

from .addons.types import NO_DIRECTION, SearchResult
from .heuristic import heuristic
from .memo import MemoTable

# ##: Score of a direction that does not change the board, dominated by any real move.
NO_MOVE_SCORE = -999999.0


def chance_value(board: Board, depth: int, memo: MemoTable) -> float:
    """
    Expected score over the tile spawn that follows a move.

    Parameters
    ----------
    board : Board
        Board after the move, before the spawn.
    depth : int
        Depth of the decision nodes below.
    memo : MemoTable
        Shared cache.

    Returns
    -------
    float
        Sum over cells and values of ``P(value) / empty_cells * score``.
    """
    cells = list(board.available_cells())
    expected = 0.0
    for position in cells:
        for value, probability in TILE_SPAWN_PROBS.items():
            child = board.clone()
            child.insert_tile(Tile(position, value))
            expected += probability * (1.0 / len(cells)) * expectimax(child, depth, memo).score
    return expected


def expectimax(board: Board, depth: int, memo: MemoTable) -> SearchResult:
    """
    Evaluate a decision node.

    Parameters
    ----------
    board : Board
        Board on which the player moves, never mutated.
    depth : int
        Remaining depth, leaves are scored with the heuristic.
    memo : MemoTable
        Cache keyed on the board at entry of this call.

    Returns
    -------
    SearchResult
        Best direction and its expected score. Ties keep the lowest direction; when no move is
        legal the direction is ``NO_DIRECTION`` and the score ``NO_MOVE_SCORE``.

    Notes
    -----
    - A cached result is returned as is, whatever depth it was computed at.
    - Leaves are cached too.
    """
    if depth <= 0:
        result = SearchResult(NO_DIRECTION, heuristic(board))
        memo.add(board, result)
        return result

    cached = memo.find(board)
    if cached is not None:
        return cached

    best = SearchResult(NO_DIRECTION, NO_MOVE_SCORE)
    for direction in Direction:
        child = board.clone()
        if child.move(direction) == NO_OP:
            continue

        expected = chance_value(child, depth - 1, memo)
        if best.direction == NO_DIRECTION or expected > best.score:
            best = SearchResult(int(direction), expected)

    memo.add(board, best)
    return best


def expectimax_search(board: Board, depth_limit: int, memo: MemoTable) -> SearchResult:
    """Clear the cache, then search the board at a fixed depth."""
    memo.clear()
    return expectimax(board, depth_limit, memo)
