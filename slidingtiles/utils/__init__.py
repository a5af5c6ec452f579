# -*- coding: utf-8 -*-
"""
Utilities around the game: persistence of the game state and best score.
"""

from .storage import GameStorage

__all__ = ["GameStorage"]
