# -*- coding: utf-8 -*-
"""
Board state of the sliding-tile game: cell occupancy, the merge-move rule and terminal detection.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from numpy import int64, ndarray, zeros
from numpy.random import Generator

from .gamemove import NO_OP, VECTORS, Direction, build_traversals, get_vector
from .tile import Position, Tile

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict = {2: 0.9, 4: 0.1}


class Board:
    """
    Square grid of optional tiles.

    Every occupied cell holds a tile whose position equals the cell coordinates. Cells are
    stored column first (``cells[x][y]``) and iterated with ``x`` as the outer loop.

    Methods
    -------
    move(direction)
        Slide and merge all tiles, return the score delta or ``NO_OP``.
    clone()
        Independent deep copy.
    moves_available()
        Whether any move can still change the board.
    """

    def __init__(self, size: int = 4):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int, optional
            The side length of the grid (default is 4).
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.cells: List[List[Optional[Tile]]] = [[None] * size for _ in range(size)]

    @classmethod
    def from_cells(cls, size: int, cells: Iterable[Optional[dict]]) -> Board:
        """
        Rebuild a board from a serialized cell list.

        Parameters
        ----------
        size : int
            The side length of the grid.
        cells : iterable of dict
            Entries shaped like ``Tile.serialize()``; ``None`` entries are empty cells.

        Returns
        -------
        Board
            The restored board.
        """
        board = cls(size)
        for cell in cells:
            if cell is None:
                continue
            position = cell["position"]
            board.insert_tile(Tile(Position(position["x"], position["y"]), int(cell["value"])))
        return board

    @classmethod
    def from_values(cls, rows: Sequence[Sequence[int]]) -> Board:
        """
        Build a board from a matrix laid out as displayed, ``rows[y][x]``, 0 meaning empty.

        Parameters
        ----------
        rows : sequence of sequence of int
            A square matrix of tile values.

        Returns
        -------
        Board
            The matching board.
        """
        board = cls(len(rows))
        for y, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError("Board values must form a square matrix")
            for x, value in enumerate(row):
                if value:
                    board.insert_tile(Tile(Position(x, y), int(value)))
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(
            (tile.value if tile else 0) == (other_tile.value if other_tile else 0)
            for (_, tile), (_, other_tile) in zip(self.each_cell(), other.each_cell())
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board(size={self.size}, values={self.values().tolist()})"

    # ##: Cell queries.
    def each_cell(self) -> Iterator[Tuple[Position, Optional[Tile]]]:
        """Iterate over every cell, ``x`` outer and ``y`` inner."""
        for x in range(self.size):
            for y in range(self.size):
                yield Position(x, y), self.cells[x][y]

    def available_cells(self) -> Iterator[Position]:
        """
        Iterate over the empty cells in ``each_cell`` order.

        Returns
        -------
        Iterator[Position]
            Positions of the empty cells, produced lazily.
        """
        return (position for position, tile in self.each_cell() if tile is None)

    def random_available_cell(self, generator: Generator) -> Optional[Position]:
        """Pick an empty cell uniformly, ``None`` when the board is full."""
        cells = list(self.available_cells())
        if not cells:
            return None
        return cells[int(generator.integers(len(cells)))]

    def cells_available(self) -> bool:
        return next(self.available_cells(), None) is not None

    def within_bounds(self, position: Position) -> bool:
        return 0 <= position[0] < self.size and 0 <= position[1] < self.size

    def cell_content(self, position: Position) -> Optional[Tile]:
        """Tile at a position, ``None`` when empty or outside the board."""
        if self.within_bounds(position):
            return self.cells[position[0]][position[1]]
        return None

    def cell_occupied(self, position: Position) -> bool:
        return self.cell_content(position) is not None

    def cell_available(self, position: Position) -> bool:
        return not self.cell_occupied(position)

    def largest_value(self) -> int:
        """Highest tile value on the board, 0 when empty."""
        return max((tile.value for _, tile in self.each_cell() if tile), default=0)

    def values(self) -> ndarray:
        """
        Tile values as a matrix.

        Returns
        -------
        ndarray
            An ``int64`` array indexed ``[y, x]``, 0 for empty cells.
        """
        values = zeros((self.size, self.size), dtype=int64)
        for position, tile in self.each_cell():
            if tile:
                values[position.y, position.x] = tile.value
        return values

    # ##: Cell mutations.
    def insert_tile(self, tile: Tile) -> None:
        """
        Place a tile at its own position.

        Raises
        ------
        ValueError
            If the tile lies outside the board.
        """
        if not self.within_bounds(tile.position):
            raise ValueError(f"Tile position {tuple(tile.position)} is outside a board of size {self.size}")
        self.cells[tile.x][tile.y] = tile

    def remove_tile(self, tile: Tile) -> None:
        self.cells[tile.x][tile.y] = None

    def clone(self) -> Board:
        """
        Copy the board without sharing any tile.

        Returns
        -------
        Board
            A board with the same values that can be mutated freely.
        """
        board = Board(self.size)
        for _, tile in self.each_cell():
            if tile:
                board.insert_tile(tile.clone())
        return board

    def serialize(self) -> dict:
        """
        Describe the board as plain data.

        Returns
        -------
        dict
            ``{"size": ..., "cells": [...]}``, see ``serialize_cells``.
        """
        return {"size": self.size, "cells": self.serialize_cells()}

    def serialize_cells(self) -> List[Optional[dict]]:
        """Flat list of serialized tiles in ``each_cell`` order, ``None`` for empty cells."""
        return [tile.serialize() if tile else None for _, tile in self.each_cell()]

    # ##: Move rule.
    def move(self, direction: int) -> int:
        """
        Slide every tile in a direction, merging equal neighbours once.

        Parameters
        ----------
        direction : int
            The move direction (0: up, 1: right, 2: down, 3: left).

        Returns
        -------
        int
            The sum of the merged tile values, or ``NO_OP`` if no tile moved.

        Raises
        ------
        ValueError
            If the direction is out of range.

        Notes
        -----
        - A tile created by a merge cannot merge again during the same move.
        - Two tiles of value v vanish and one tile of value 2v appears, so the sum of all
          values grows by exactly the returned delta.
        """
        vector = get_vector(direction)
        traversal_x, traversal_y = build_traversals(self.size, vector)
        moved = False
        score = 0

        self._prepare_tiles()

        for x in traversal_x:
            for y in traversal_y:
                cell = Position(x, y)
                tile = self.cell_content(cell)
                if tile is None:
                    continue

                farthest, following = self._find_farthest_position(cell, vector)
                other = self.cell_content(following)

                if other is not None and other.value == tile.value and other.merged_from is None:
                    merged = Tile(following, tile.value * 2)
                    merged.merged_from = (tile, other)

                    self.insert_tile(merged)
                    self.remove_tile(tile)
                    tile.update_position(following)

                    score += merged.value
                else:
                    self._move_tile(tile, farthest)

                if cell != tile.position:
                    moved = True

        return score if moved else NO_OP

    def _prepare_tiles(self) -> None:
        for _, tile in self.each_cell():
            if tile:
                tile.merged_from = None
                tile.save_position()

    def _move_tile(self, tile: Tile, position: Position) -> None:
        self.cells[tile.x][tile.y] = None
        self.cells[position.x][position.y] = tile
        tile.update_position(position)

    def _find_farthest_position(self, cell: Position, vector: Position) -> Tuple[Position, Position]:
        """Last empty cell reached along the vector, and the first blocked cell after it."""
        previous = cell
        cell = Position(previous.x + vector.x, previous.y + vector.y)
        while self.within_bounds(cell) and self.cell_available(cell):
            previous = cell
            cell = Position(previous.x + vector.x, previous.y + vector.y)
        return previous, cell

    # ##: Terminal detection.
    def tile_matches_available(self) -> bool:
        """Whether two orthogonal neighbours share a value."""
        for position, tile in self.each_cell():
            if tile is None:
                continue
            for vector in VECTORS.values():
                other = self.cell_content(Position(position.x + vector.x, position.y + vector.y))
                if other is not None and other.value == tile.value:
                    return True
        return False

    def moves_available(self) -> bool:
        """
        Check whether the game can go on.

        Returns
        -------
        bool
            False when the board is full and no neighbours can merge.
        """
        return self.cells_available() or self.tile_matches_available()

    def legal_directions(self) -> List[Direction]:
        """Directions whose move would change the board, tried on copies."""
        return [direction for direction in Direction if self.clone().move(direction) != NO_OP]
