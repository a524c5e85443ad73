"""Grid entity shared by generators, solvers and the analyzer."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .errors import DuplicateMarker, EmptyInput, InvalidGrid, MissingMarker, NonRectangular


class Cell(IntEnum):
    WALL = 0
    OPEN = 1
    START = 2
    END = 3
    PATH = 4

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        """Map a text glyph to a cell; unknown glyphs are open floor."""

        return _CELLS_BY_SYMBOL.get(symbol, cls.OPEN)


_SYMBOLS: Dict[Cell, str] = {
    Cell.WALL: "#",
    Cell.OPEN: " ",
    Cell.START: "S",
    Cell.END: "E",
    Cell.PATH: "+",
}
_CELLS_BY_SYMBOL: Dict[str, Cell] = {symbol: cell for cell, symbol in _SYMBOLS.items()}


class Point(NamedTuple):
    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Point":
        return Point(self.row + d_row, self.col + d_col)

    def manhattan(self, other: "Point") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def euclidean(self, other: "Point") -> float:
        return math.hypot(self.row - other.row, self.col - other.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# Up, down, left, right. Solvers rely on this order for reproducible tie-breaks.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    """Immutable rows x cols matrix of :class:`Cell` codes with start and end markers.

    The cell buffer is a read-only ``numpy`` array. Solvers never write to it;
    anything that needs to mark cells works on :meth:`copy_cells` and builds a
    new grid from the result.
    """

    def __init__(
        self,
        cells: Sequence[Sequence[int]],
        start: Tuple[int, int],
        end: Tuple[int, int],
    ) -> None:
        array = _to_cell_array(cells)
        self._cells = array
        self._start = Point(*start)
        self._end = Point(*end)
        self._validate()
        self._cells.setflags(write=False)

    # ------------------------------------------------------------------
    # Construction from text

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Build a grid from maze text (``#`` wall, space open, ``S`` start, ``E`` end)."""

        return cls.from_lines(text.splitlines())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows = [line.rstrip("\r\n") for line in lines]
        if not rows:
            raise EmptyInput()
        width = len(rows[0])
        for index, line in enumerate(rows):
            if len(line) != width:
                raise NonRectangular(index + 1, width, len(line))

        markers: Dict[str, Optional[Point]] = {"S": None, "E": None}
        for r, line in enumerate(rows):
            for c, symbol in enumerate(line):
                if symbol in markers:
                    if markers[symbol] is not None:
                        raise DuplicateMarker(symbol, tuple(markers[symbol]), (r, c))
                    markers[symbol] = Point(r, c)
        for symbol in ("S", "E"):
            if markers[symbol] is None:
                raise MissingMarker(symbol)

        cells = [[Cell.from_symbol(symbol) for symbol in line] for line in rows]
        return cls(cells, markers["S"], markers["E"])

    # ------------------------------------------------------------------
    # Properties

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell codes."""

        return self._cells

    def copy_cells(self) -> np.ndarray:
        return self._cells.copy()

    # ------------------------------------------------------------------
    # Queries

    def in_bounds(self, point: Tuple[int, int]) -> bool:
        r, c = point
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cell(self, point: Tuple[int, int]) -> Cell:
        if not self.in_bounds(point):
            raise IndexError(f"Point {tuple(point)} outside {self.rows}x{self.cols} grid")
        return Cell(int(self._cells[point[0], point[1]]))

    def is_wall(self, point: Tuple[int, int]) -> bool:
        """Out-of-bounds points count as walls."""

        if not self.in_bounds(point):
            return True
        return int(self._cells[point[0], point[1]]) == Cell.WALL

    def is_open(self, point: Tuple[int, int]) -> bool:
        return not self.is_wall(point)

    def neighbors(self, point: Tuple[int, int]) -> List[Point]:
        """Open 4-neighbors in up, down, left, right order."""

        r, c = point
        result: List[Point] = []
        for dr, dc in DIRECTIONS:
            candidate = Point(r + dr, c + dc)
            if self.is_open(candidate):
                result.append(candidate)
        return result

    def open_cells(self) -> Iterator[Point]:
        for r, c in zip(*np.nonzero(self._cells != Cell.WALL)):
            yield Point(int(r), int(c))

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self._cells == cell))

    def path_cells(self) -> List[Point]:
        return [Point(int(r), int(c)) for r, c in zip(*np.nonzero(self._cells == Cell.PATH))]

    def with_path(self, points: Iterable[Tuple[int, int]], *, clear: bool = False) -> "Grid":
        """Return a copy with ``PATH`` marks on ``points`` (start and end are left as is).

        With ``clear=True`` existing path marks are turned back into open cells first.
        """

        buffer = self.copy_cells()
        if clear:
            buffer[buffer == Cell.PATH] = Cell.OPEN
        for point in points:
            point = Point(*point)
            if point == self._start or point == self._end:
                continue
            buffer[point.row, point.col] = Cell.PATH
        return Grid(buffer, self._start, self._end)

    # ------------------------------------------------------------------
    # Serialization

    def to_lines(self, *, include_path: bool = True) -> List[str]:
        lines: List[str] = []
        for row in self._cells:
            symbols = []
            for value in row:
                cell = Cell(int(value))
                if cell is Cell.PATH and not include_path:
                    cell = Cell.OPEN
                symbols.append(cell.symbol)
            lines.append("".join(symbols))
        return lines

    def to_text(self, *, include_path: bool = True) -> str:
        return "\n".join(self.to_lines(include_path=include_path))

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "start": list(self._start),
            "end": list(self._end),
            "grid": self.to_lines(),
        }

    # ------------------------------------------------------------------

    def _validate(self) -> None:
        for name, point in (("start", self._start), ("end", self._end)):
            if not self.in_bounds(point):
                raise InvalidGrid(f"{name} {point} is outside the {self.rows}x{self.cols} grid")
        if self._start == self._end:
            raise InvalidGrid(f"start and end must differ, both are {self._start}")
        if self.cell(self._start) is not Cell.START:
            raise InvalidGrid(f"start {self._start} is not marked as a start cell")
        if self.cell(self._end) is not Cell.END:
            raise InvalidGrid(f"end {self._end} is not marked as an end cell")
        if self.count(Cell.START) != 1 or self.count(Cell.END) != 1:
            raise InvalidGrid("grid must contain exactly one start and one end cell")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._start == other._start
            and self._end == other._end
            and np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, start={self._start}, end={self._end})"

    def __str__(self) -> str:
        return self.to_text()


def _to_cell_array(cells: Sequence[Sequence[int]]) -> np.ndarray:
    if isinstance(cells, np.ndarray):
        if cells.ndim != 2:
            raise InvalidGrid(f"cell buffer must be 2-dimensional, got {cells.ndim} dimensions")
        rows = cells.tolist()
    else:
        rows = [list(row) for row in cells]
    if not rows or not rows[0]:
        raise EmptyInput()
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            raise NonRectangular(index + 1, width, len(row))
    array = np.array(rows, dtype=np.int64)
    if array.min() < min(Cell) or array.max() > max(Cell):
        raise InvalidGrid("cell buffer holds values that are not cell codes")
    return array.astype(np.uint8)


__all__ = ["Cell", "Point", "Grid", "DIRECTIONS"]
