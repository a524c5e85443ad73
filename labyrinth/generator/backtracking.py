"""Randomized depth-first carving (recursive backtracker) on the odd lattice."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..grid import Cell, Point
from .base import (
    AbstractMazeGenerator,
    LATTICE_STEPS,
    fallback_end,
    is_interior,
    lattice_cells,
    random_lattice_cell,
)


class RecursiveBacktrackingGenerator(AbstractMazeGenerator):
    """Carve a perfect maze with a randomized depth-first walk.

    The walk uses an explicit stack of ``(cell, directions)`` frames instead of
    recursion, so large grids do not exhaust the interpreter's call stack. Each
    frame keeps its own shuffled direction order and resumes where it left off,
    which is exactly what the recursive version would do.
    """

    name = "recursive_backtracking"

    def carve(self, buffer: np.ndarray, rng: random.Random) -> Tuple[Point, Point]:
        rows, cols = buffer.shape
        origin = random_lattice_cell(rows, cols, rng)
        buffer[origin] = Cell.OPEN
        stack: List[Tuple[Point, Iterator[Tuple[int, int]]]] = [(origin, self._shuffled(rng))]

        while stack:
            cell, directions = stack[-1]
            step = next(directions, None)
            if step is None:
                stack.pop()
                continue
            dr, dc = step
            target = cell.offset(dr, dc)
            if is_interior(buffer, target) and buffer[target] == Cell.WALL:
                buffer[cell.offset(dr // 2, dc // 2)] = Cell.OPEN
                buffer[target] = Cell.OPEN
                stack.append((target, self._shuffled(rng)))

        start = Point(1, 1)
        end = self._farthest_cell(buffer, start)
        if end is None:
            end = fallback_end(rows, cols)
        return start, end

    @staticmethod
    def _shuffled(rng: random.Random) -> Iterator[Tuple[int, int]]:
        directions = list(LATTICE_STEPS)
        rng.shuffle(directions)
        return iter(directions)

    @staticmethod
    def _farthest_cell(buffer: np.ndarray, start: Point) -> Optional[Point]:
        """Carved lattice cell with the largest Manhattan distance; first wins on ties."""

        rows, cols = buffer.shape
        best: Optional[Point] = None
        best_distance = 0
        for cell in lattice_cells(rows, cols):
            if cell == start or buffer[cell] == Cell.WALL:
                continue
            distance = cell.manhattan(start)
            if distance > best_distance:
                best, best_distance = cell, distance
        return best


__all__ = ["RecursiveBacktrackingGenerator"]
