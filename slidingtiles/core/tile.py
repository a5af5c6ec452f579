# -*- coding: utf-8 -*-
"""
Tiles and positions of the sliding-tile board.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


class Position(NamedTuple):
    """A cell coordinate, ``x`` is the column and ``y`` the row."""

    x: int
    y: int


@dataclass(eq=False)
class Tile:
    """
    A numbered tile occupying one cell of a board.

    Attributes
    ----------
    position : Position
        The cell currently holding the tile.
    value : int
        The tile value, a power of two not lower than 2.
    previous_position : Position, optional
        Where the tile was before the last move, only useful for presentation.
    merged_from : tuple of Tile, optional
        The two tiles merged into this one during the last move.
    """

    position: Position
    value: int = 2
    previous_position: Optional[Position] = None
    merged_from: Optional[Tuple[Tile, Tile]] = None

    def __post_init__(self):
        self.position = Position(*self.position)
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(f"Tile value must be a power of two >= 2, got {self.value}")

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def save_position(self) -> None:
        """Remember the current position before a move."""
        self.previous_position = self.position

    def update_position(self, position: Position) -> None:
        self.position = Position(*position)

    def serialize(self) -> dict:
        """
        Describe the tile as plain data.

        Returns
        -------
        dict
            ``{"position": {"x": ..., "y": ...}, "value": ...}``
        """
        return {"position": {"x": self.x, "y": self.y}, "value": self.value}

    def clone(self) -> Tile:
        """Copy position and value, history is not carried over."""
        return Tile(self.position, self.value)
