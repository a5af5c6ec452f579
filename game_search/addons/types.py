# -*- coding: utf-8 -*-
"""
New types for the move search.
"""
from enum import Enum
from typing import NamedTuple

# ##: No legal move was found at a node.
NO_DIRECTION = -1


class SearchResult(NamedTuple):
    """
    Outcome of a search node.
    """
    direction: int
    score: float


class Turn(Enum):
    """
    Who plays at a minimax node: the player maximizes, the tile spawn minimizes.
    """
    MAXIMIZING = "maximizing"
    MINIMIZING = "minimizing"
