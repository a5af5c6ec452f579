# -*- coding: utf-8 -*-
"""
Depth-limited minimax with alpha-beta pruning.

The player picks the direction that maximizes the heuristic, the environment answers with
the tile spawn that minimizes it. Spawns are explored on every empty cell with both values.
"""
from math import inf

from slidingtiles.core import NO_OP, Board, Direction, Tile

from .addons.types import NO_DIRECTION, SearchResult, Turn
from .heuristic import heuristic

# ##: Values the environment may spawn, tried in this order.
SPAWN_VALUES = (2, 4)


def maximize(board: Board, alpha: float, beta: float, depth: int) -> SearchResult:
    """
    Player node: try every direction that changes the board.

    Parameters
    ----------
    board : Board
        Board before the move.
    alpha : float
        Best score the player is already assured of.
    beta : float
        Best score the environment is already assured of.
    depth : int
        Remaining depth.

    Returns
    -------
    SearchResult
        The direction that raised ``alpha`` and the new ``alpha``, or ``NO_DIRECTION`` and the
        incoming ``alpha`` when no move improved it.
    """
    best = SearchResult(NO_DIRECTION, alpha)
    for direction in Direction:
        child = board.clone()
        if child.move(direction) == NO_OP:
            continue

        result = minimax(child, alpha, beta, Turn.MINIMIZING, depth - 1)
        if result.score > alpha:
            alpha = result.score
            best = SearchResult(int(direction), alpha)
        if beta <= alpha:
            break
    return best


def minimize(board: Board, alpha: float, beta: float, depth: int) -> SearchResult:
    """
    Environment node: spawn a 2, then a 4, on every empty cell.

    Returns
    -------
    SearchResult
        ``NO_DIRECTION`` and the lowest score found, stopping as soon as it falls to ``alpha``.
    """
    for position in board.available_cells():
        for value in SPAWN_VALUES:
            child = board.clone()
            child.insert_tile(Tile(position, value))

            result = minimax(child, alpha, beta, Turn.MAXIMIZING, depth - 1)
            beta = min(beta, result.score)
            if beta <= alpha:
                return SearchResult(NO_DIRECTION, beta)
    return SearchResult(NO_DIRECTION, beta)


def minimax(board: Board, alpha: float, beta: float, turn: Turn, depth: int) -> SearchResult:
    """
    Evaluate a node of the search tree.

    Parameters
    ----------
    board : Board
        The board at this node, never mutated.
    alpha : float
        Lower bound of the window.
    beta : float
        Upper bound of the window.
    turn : Turn
        Whose turn it is.
    depth : int
        Remaining depth, leaves are scored with the heuristic.

    Returns
    -------
    SearchResult
        The direction is only meaningful at a maximizing node.
    """
    if depth <= 0:
        return SearchResult(NO_DIRECTION, heuristic(board))
    if turn is Turn.MAXIMIZING:
        return maximize(board, alpha, beta, depth)
    return minimize(board, alpha, beta, depth)


def minimax_search(board: Board, depth_limit: int) -> SearchResult:
    """
    Iterative deepening from half the depth limit to the full limit.

    Parameters
    ----------
    board : Board
        The current board.
    depth_limit : int
        Deepest search to run.

    Returns
    -------
    SearchResult
        The result with the highest score over all depths tried, not only the deepest one.

    Notes
    -----
    Depth 0 is never part of the schedule, so a board with a legal move always gets a direction.
    A limit of 0 or less returns the heuristic of the board without direction.
    """
    if depth_limit <= 0:
        return SearchResult(NO_DIRECTION, heuristic(board))

    best = SearchResult(NO_DIRECTION, -inf)
    for depth in range(max(1, depth_limit // 2), depth_limit + 1):
        result = minimax(board, -inf, inf, Turn.MAXIMIZING, depth)
        if result.score > best.score:
            best = result
    return best
