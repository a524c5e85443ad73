"""Common scaffolding for maze generation strategies."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ..errors import InvalidDimensions
from ..grid import Cell, Grid, Point

logger = logging.getLogger(__name__)

# Smallest odd size that leaves room for distinct start and end cells.
MIN_DIMENSION = 5

# Two-cell moves between lattice cells; the cell halfway is the wall between them.
LATTICE_STEPS: Tuple[Tuple[int, int], ...] = ((-2, 0), (2, 0), (0, -2), (0, 2))


def normalize_dimensions(rows: int, cols: int) -> Tuple[int, int]:
    """Round dimensions up to odd values of at least :data:`MIN_DIMENSION`."""

    if rows <= 0 or cols <= 0:
        raise InvalidDimensions(rows, cols)
    rows = rows if rows % 2 == 1 else rows + 1
    cols = cols if cols % 2 == 1 else cols + 1
    return max(rows, MIN_DIMENSION), max(cols, MIN_DIMENSION)


def is_interior(buffer: np.ndarray, point: Point) -> bool:
    rows, cols = buffer.shape
    return 0 < point.row < rows - 1 and 0 < point.col < cols - 1


def lattice_cells(rows: int, cols: int) -> Iterator[Point]:
    """Odd-coordinate cells in row-major order."""

    for r in range(1, rows - 1, 2):
        for c in range(1, cols - 1, 2):
            yield Point(r, c)


def lattice_neighbors(buffer: np.ndarray, point: Point) -> List[Point]:
    return [
        neighbor
        for neighbor in (point.offset(dr, dc) for dr, dc in LATTICE_STEPS)
        if is_interior(buffer, neighbor)
    ]


def between(a: Point, b: Point) -> Point:
    return Point((a.row + b.row) // 2, (a.col + b.col) // 2)


def random_lattice_cell(rows: int, cols: int, rng: random.Random) -> Point:
    return Point(rng.randrange(rows // 2) * 2 + 1, rng.randrange(cols // 2) * 2 + 1)


def fallback_end(rows: int, cols: int) -> Point:
    return Point(rows - 2, cols - 2)


class AbstractMazeGenerator(ABC):
    """Base class for strategies that carve a fresh grid out of solid wall.

    Subclasses implement :meth:`carve`; this class normalizes the dimensions,
    allocates the buffer, writes the start and end markers once and wraps the
    result in an immutable :class:`~labyrinth.grid.Grid`.
    """

    name: str = ""

    def generate(self, rows: int, cols: int, rng: Optional[random.Random] = None) -> Grid:
        rows, cols = normalize_dimensions(rows, cols)
        if rng is None:
            rng = random.Random()
        buffer = np.full((rows, cols), Cell.WALL, dtype=np.uint8)
        start, end = self.carve(buffer, rng)
        buffer[start] = Cell.START
        buffer[end] = Cell.END
        grid = Grid(buffer, start, end)
        logger.debug(
            "%s carved %dx%d maze with %d open cells (start=%s, end=%s)",
            self.name,
            rows,
            cols,
            rows * cols - grid.count(Cell.WALL),
            start,
            end,
        )
        return grid

    @abstractmethod
    def carve(self, buffer: np.ndarray, rng: random.Random) -> Tuple[Point, Point]:
        """Open passages in ``buffer`` in place and return ``(start, end)``."""


__all__ = [
    "AbstractMazeGenerator",
    "LATTICE_STEPS",
    "MIN_DIMENSION",
    "between",
    "fallback_end",
    "is_interior",
    "lattice_cells",
    "lattice_neighbors",
    "normalize_dimensions",
    "random_lattice_cell",
]
