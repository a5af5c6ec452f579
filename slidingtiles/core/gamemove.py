# -*- coding: utf-8 -*-
"""
Move utilities for the sliding-tile board: directions, unit vectors and traversal order.
"""
from enum import IntEnum
from typing import List, Tuple

from .tile import Position

# ##: Returned by a move that changes nothing.
NO_OP = -1


class Direction(IntEnum):
    """The four move directions, in the order used by the search."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# ##>: Unit vector of each direction, y grows downward.
VECTORS = {
    Direction.UP: Position(0, -1),
    Direction.RIGHT: Position(1, 0),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
}


def to_direction(direction: int) -> Direction:
    """
    Validate a direction code.

    Parameters
    ----------
    direction : int
        Code between 0 and 3.

    Returns
    -------
    Direction
        The matching direction.

    Raises
    ------
    ValueError
        If the code is out of range.
    """
    try:
        return Direction(direction)
    except ValueError:
        raise ValueError(f"Direction must be one of 0, 1, 2, 3, got {direction!r}") from None


def get_vector(direction: int) -> Position:
    """Unit vector for a direction code."""
    return VECTORS[to_direction(direction)]


def build_traversals(size: int, vector: Position) -> Tuple[List[int], List[int]]:
    """
    Build the order in which cells are visited during a move.

    Parameters
    ----------
    size : int
        Side length of the board.
    vector : Position
        Unit vector of the move.

    Returns
    -------
    tuple of list
        Column order and row order.

    Notes
    -----
    Cells farthest in the move direction come first, so a tile never slides over a cell
    that a later tile is about to free.
    """
    traversal_x = list(range(size))
    traversal_y = list(range(size))

    if vector.x == 1:
        traversal_x.reverse()
    if vector.y == 1:
        traversal_y.reverse()

    return traversal_x, traversal_y
