# -*- coding: utf-8 -*-
"""
Static evaluation of a board, used at the leaves of the search.
"""
from numpy import abs as abs_array_values
from numpy import arange, count_nonzero, minimum, ndarray
from numpy import sum as sum_array_values

from slidingtiles.core import Board

# ##: Weights of the evaluation terms.
EMPTY_CELL_REWARD = 4096
CORNER_BONUS = 4096
EDGE_WEIGHT = 10
SMOOTHNESS_WEIGHT = 10


def edge_distances(size: int) -> ndarray:
    """
    Distance of every cell to the nearest border.

    Parameters
    ----------
    size : int
        Side length of the board.

    Returns
    -------
    ndarray
        Matrix of ``min(x, size - 1 - x, y, size - 1 - y)``.
    """
    index = arange(size)
    border = minimum(index, size - 1 - index)
    return minimum.outer(border, border)


def corner_mask(size: int) -> ndarray:
    index = arange(size)
    border = (index == 0) | (index == size - 1)
    return border[:, None] & border[None, :]


def smoothness_penalty(values: ndarray) -> int:
    """
    Sum of value gaps between occupied neighbours.

    Parameters
    ----------
    values : ndarray
        Board values indexed ``[y, x]``.

    Returns
    -------
    int
        The penalty, before weighting.

    Notes
    -----
    Only pairs whose second cell has both coordinates at least 1 are scanned: the first row
    and the first column are never compared along themselves.
    """
    inner = values[1:, 1:]
    penalty = 0
    for neighbour in (values[:-1, 1:], values[1:, :-1]):
        both = (inner != 0) & (neighbour != 0)
        penalty += int(sum_array_values(abs_array_values(inner - neighbour)[both]))
    return penalty


def heuristic(board: Board) -> float:
    """
    Score a board without searching.

    Parameters
    ----------
    board : Board
        The board to evaluate.

    Returns
    -------
    float
        Higher is better for the player.

    Notes
    -----
    - Every empty cell is worth ``EMPTY_CELL_REWARD``.
    - Every tile costs ``EDGE_WEIGHT * value * distance`` to the nearest border.
    - Every corner holding the largest value earns ``CORNER_BONUS``.
    - Neighbour gaps cost ``SMOOTHNESS_WEIGHT`` each, see ``smoothness_penalty``.
    """
    values = board.values()
    occupied = values != 0

    score = EMPTY_CELL_REWARD * int(count_nonzero(~occupied))
    score -= EDGE_WEIGHT * int(sum_array_values(edge_distances(board.size) * values))

    largest = int(values.max())
    if largest:
        score += CORNER_BONUS * int(count_nonzero((values == largest) & corner_mask(board.size)))

    score -= SMOOTHNESS_WEIGHT * smoothness_penalty(values)
    return float(score)
