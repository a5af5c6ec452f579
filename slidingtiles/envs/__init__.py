# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile game.

This module provides the `TileGame` class, which owns the live board, the score and the tile spawns.
"""

from .game import TileGame

__all__ = ["TileGame"]
