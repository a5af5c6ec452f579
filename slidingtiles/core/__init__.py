# -*- coding: utf-8 -*-
"""
Core state of the sliding-tile game.

It provides the tile and position types, the direction encoding and the board with its
merge-move rule and terminal detection.
"""

from .gameboard import TILE_SPAWN_PROBS, Board
from .gamemove import NO_OP, Direction, build_traversals, get_vector, to_direction
from .tile import Position, Tile

__all__ = [
    "Board",
    "Direction",
    "NO_OP",
    "Position",
    "Tile",
    "TILE_SPAWN_PROBS",
    "build_traversals",
    "get_vector",
    "to_direction",
]
