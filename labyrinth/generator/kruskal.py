"""Randomized Kruskal's algorithm over the lattice walls."""

from __future__ import annotations

import random
from typing import List, Tuple

import numpy as np

from ..grid import Cell, Point
from .base import AbstractMazeGenerator, between, fallback_end, lattice_cells


class DisjointSet:
    """Array-backed union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, item: int) -> int:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; False if they were already joined."""

        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True


class KruskalGenerator(AbstractMazeGenerator):
    """Knock down shuffled walls whenever they separate two unconnected regions."""

    name = "kruskal"

    def carve(self, buffer: np.ndarray, rng: random.Random) -> Tuple[Point, Point]:
        rows, cols = buffer.shape
        lattice_cols = cols // 2
        walls: List[Tuple[Point, Point]] = []
        for cell in lattice_cells(rows, cols):
            buffer[cell] = Cell.OPEN
            if cell.col + 2 < cols - 1:
                walls.append((cell, cell.offset(0, 2)))
            if cell.row + 2 < rows - 1:
                walls.append((cell, cell.offset(2, 0)))
        rng.shuffle(walls)

        sets = DisjointSet((rows // 2) * lattice_cols)
        for a, b in walls:
            if sets.union(self._cell_id(a, lattice_cols), self._cell_id(b, lattice_cols)):
                buffer[between(a, b)] = Cell.OPEN

        return Point(1, 1), fallback_end(rows, cols)

    @staticmethod
    def _cell_id(cell: Point, lattice_cols: int) -> int:
        return (cell.row // 2) * lattice_cols + cell.col // 2


__all__ = ["KruskalGenerator", "DisjointSet"]
