# -*- coding: utf-8 -*-
"""
Simple strategies that search little or not at all.
"""
from slidingtiles.core import NO_OP, TILE_SPAWN_PROBS, Board, Direction, Tile

from .addons.types import NO_DIRECTION, SearchResult

# ##: Preferred directions of the corner strategy, right is the last resort.
CORNER_PRIORITY = (Direction.LEFT, Direction.DOWN, Direction.UP)


def greedy_move(board: Board) -> SearchResult:
    """
    Pick the direction with the largest immediate merge score.

    Returns
    -------
    SearchResult
        ``NO_DIRECTION`` with score 0 when no move merges anything.
    """
    best = SearchResult(NO_DIRECTION, 0)
    for direction in Direction:
        gained = board.clone().move(direction)
        if gained > best.score:
            best = SearchResult(int(direction), gained)
    return best


def lookahead_move(board: Board, moves: int) -> SearchResult:
    """
    Pick the direction with the best expected merge score over the next moves.

    Parameters
    ----------
    board : Board
        The current board.
    moves : int
        Number of moves to look ahead.

    Returns
    -------
    SearchResult
        The immediate merge score plus the probability weighted scores of the following moves.
        Totals at or below 0 are never chosen.
    """
    best = SearchResult(NO_DIRECTION, 0)
    if moves <= 0:
        return best

    for direction in Direction:
        child = board.clone()
        gained = child.move(direction)
        if gained == NO_OP:
            continue

        cells = list(child.available_cells())
        total = float(gained)
        for position in cells:
            for value, probability in TILE_SPAWN_PROBS.items():
                spawned = child.clone()
                spawned.insert_tile(Tile(position, value))
                total += probability * (1.0 / len(cells)) * lookahead_move(spawned, moves - 1).score

        if total > best.score:
            best = SearchResult(int(direction), total)
    return best


def corner_move(board: Board) -> SearchResult:
    """Keep tiles packed in the bottom-left corner: left, then down, then up, else right."""
    for direction in CORNER_PRIORITY:
        if board.clone().move(direction) != NO_OP:
            return SearchResult(int(direction), 0.0)
    return SearchResult(int(Direction.RIGHT), 0.0)
