"""Randomized Prim's algorithm on the odd lattice."""

from __future__ import annotations

import random
from typing import List, Tuple

import numpy as np

from ..grid import Cell, Point
from .base import (
    AbstractMazeGenerator,
    between,
    fallback_end,
    lattice_neighbors,
    random_lattice_cell,
)


class PrimGenerator(AbstractMazeGenerator):
    """Grow a perfect maze outward from a random cell by picking random frontier cells."""

    name = "prim"

    def carve(self, buffer: np.ndarray, rng: random.Random) -> Tuple[Point, Point]:
        rows, cols = buffer.shape
        origin = random_lattice_cell(rows, cols, rng)
        buffer[origin] = Cell.OPEN
        frontier: List[Point] = []
        self._extend_frontier(buffer, origin, frontier)

        while frontier:
            cell = frontier.pop(rng.randrange(len(frontier)))
            # The same wall cell can be queued by several carved neighbors.
            if buffer[cell] != Cell.WALL:
                continue
            carved = [n for n in lattice_neighbors(buffer, cell) if buffer[n] != Cell.WALL]
            neighbor = rng.choice(carved)
            buffer[between(cell, neighbor)] = Cell.OPEN
            buffer[cell] = Cell.OPEN
            self._extend_frontier(buffer, cell, frontier)

        return Point(1, 1), fallback_end(rows, cols)

    @staticmethod
    def _extend_frontier(buffer: np.ndarray, cell: Point, frontier: List[Point]) -> None:
        for neighbor in lattice_neighbors(buffer, cell):
            if buffer[neighbor] == Cell.WALL:
                frontier.append(neighbor)


__all__ = ["PrimGenerator"]
