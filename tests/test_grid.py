import tempfile
import unittest
from pathlib import Path

import numpy as np

from labyrinth import (
    Cell,
    DuplicateMarker,
    EmptyInput,
    Grid,
    InvalidGrid,
    MazeFormatError,
    MissingMarker,
    NonRectangular,
    Point,
    load_grid,
    save_grid,
)

MAZE_TEXT = "\n".join(
    [
        "#######",
        "#S    #",
        "# ### #",
        "#   #E#",
        "#######",
    ]
)


class GridParsingTests(unittest.TestCase):
    def test_parse_reads_markers_and_dimensions(self) -> None:
        grid = Grid.parse(MAZE_TEXT)
        self.assertEqual(grid.shape, (5, 7))
        self.assertEqual(grid.start, Point(1, 1))
        self.assertEqual(grid.end, Point(3, 5))
        self.assertIs(grid.cell((0, 0)), Cell.WALL)
        self.assertIs(grid.cell((1, 2)), Cell.OPEN)

    def test_round_trip_reproduces_text(self) -> None:
        grid = Grid.parse(MAZE_TEXT)
        self.assertEqual(grid.to_text(), MAZE_TEXT)
        self.assertEqual(Grid.parse(grid.to_text()), grid)

    def test_dot_is_read_as_open_floor(self) -> None:
        grid = Grid.parse("#####\n#S.E#\n#####")
        self.assertTrue(grid.is_open((1, 2)))
        self.assertEqual(grid.to_lines()[1], "#S E#")

    def test_empty_input(self) -> None:
        with self.assertRaises(EmptyInput):
            Grid.parse("")
        with self.assertRaises(EmptyInput):
            Grid.from_lines([])

    def test_leading_blank_line_is_not_empty_input(self) -> None:
        with self.assertRaises(NonRectangular) as ctx:
            Grid.parse("\n#S E#")
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertEqual(ctx.exception.expected, 0)
        self.assertEqual(ctx.exception.actual, 5)

    def test_non_rectangular(self) -> None:
        with self.assertRaises(NonRectangular) as ctx:
            Grid.parse("#####\n#S E\n#####")
        self.assertEqual(ctx.exception.line_number, 2)
        self.assertEqual(ctx.exception.expected, 5)
        self.assertEqual(ctx.exception.actual, 4)

    def test_missing_markers(self) -> None:
        with self.assertRaises(MissingMarker) as ctx:
            Grid.parse("#####\n#  E#\n#####")
        self.assertEqual(ctx.exception.marker, "S")
        with self.assertRaises(MissingMarker) as ctx:
            Grid.parse("#####\n#S  #\n#####")
        self.assertEqual(ctx.exception.marker, "E")

    def test_duplicate_marker(self) -> None:
        with self.assertRaises(DuplicateMarker):
            Grid.parse("#####\n#SSE#\n#####")

    def test_format_errors_are_value_errors(self) -> None:
        with self.assertRaises(ValueError):
            Grid.parse("")
        self.assertTrue(issubclass(MissingMarker, MazeFormatError))


class GridQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid.parse(MAZE_TEXT)

    def test_bounds_and_walls(self) -> None:
        self.assertTrue(self.grid.in_bounds((0, 0)))
        self.assertFalse(self.grid.in_bounds((5, 0)))
        self.assertFalse(self.grid.in_bounds((0, -1)))
        self.assertTrue(self.grid.is_wall((0, 3)))
        self.assertTrue(self.grid.is_wall((-1, 3)))
        self.assertTrue(self.grid.is_open(self.grid.start))
        self.assertTrue(self.grid.is_open(self.grid.end))

    def test_neighbors_follow_up_down_left_right(self) -> None:
        self.assertEqual(self.grid.neighbors((1, 5)), [Point(2, 5), Point(1, 4)])
        self.assertEqual(self.grid.neighbors((3, 2)), [Point(3, 1), Point(3, 3)])

    def test_counts(self) -> None:
        self.assertEqual(self.grid.count(Cell.START), 1)
        self.assertEqual(self.grid.count(Cell.END), 1)
        self.assertEqual(len(list(self.grid.open_cells())), 35 - self.grid.count(Cell.WALL))

    def test_cell_buffer_is_read_only(self) -> None:
        with self.assertRaises(ValueError):
            self.grid.cells[1, 2] = Cell.WALL
        copy = self.grid.copy_cells()
        copy[1, 2] = Cell.WALL
        self.assertIs(self.grid.cell((1, 2)), Cell.OPEN)

    def test_with_path_returns_new_grid(self) -> None:
        marked = self.grid.with_path([(1, 1), (1, 2), (1, 3)])
        self.assertEqual(marked.path_cells(), [Point(1, 2), Point(1, 3)])
        self.assertIs(marked.cell((1, 1)), Cell.START)
        self.assertEqual(self.grid.count(Cell.PATH), 0)
        self.assertEqual(marked.to_text(include_path=False), MAZE_TEXT)
        cleared = marked.with_path([(1, 4)], clear=True)
        self.assertEqual(cleared.path_cells(), [Point(1, 4)])

    def test_point_distances(self) -> None:
        self.assertEqual(Point(0, 0).manhattan(Point(3, 4)), 7)
        self.assertAlmostEqual(Point(0, 0).euclidean(Point(3, 4)), 5.0)


class GridConstructionTests(unittest.TestCase):
    def _cells(self):
        return [
            [Cell.WALL] * 5,
            [Cell.WALL, Cell.START, Cell.OPEN, Cell.END, Cell.WALL],
            [Cell.WALL] * 5,
        ]

    def test_accepts_nested_lists_and_arrays(self) -> None:
        grid = Grid(self._cells(), (1, 1), (1, 3))
        self.assertEqual(Grid(np.array(self._cells()), (1, 1), (1, 3)), grid)

    def test_rejects_ragged_rows(self) -> None:
        cells = self._cells()
        cells[2] = cells[2][:4]
        with self.assertRaises(NonRectangular):
            Grid(cells, (1, 1), (1, 3))

    def test_rejects_bad_markers(self) -> None:
        with self.assertRaises(InvalidGrid):
            Grid(self._cells(), (1, 1), (1, 1))
        with self.assertRaises(InvalidGrid):
            Grid(self._cells(), (1, 1), (7, 7))
        with self.assertRaises(InvalidGrid):
            Grid(self._cells(), (1, 2), (1, 3))

    def test_rejects_unknown_codes(self) -> None:
        cells = self._cells()
        cells[0][0] = 9
        with self.assertRaises(InvalidGrid):
            Grid(cells, (1, 1), (1, 3))


class GridFileTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_save_and_load(self) -> None:
        grid = Grid.parse(MAZE_TEXT)
        path = save_grid(grid, Path(self.tmp.name) / "nested" / "maze.txt")
        self.assertEqual(path.read_text(encoding="utf-8"), MAZE_TEXT + "\n")
        self.assertEqual(load_grid(path), grid)

    def test_load_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_grid(Path(self.tmp.name) / "missing.txt")

    def test_load_empty_file(self) -> None:
        path = Path(self.tmp.name) / "empty.txt"
        path.write_text("", encoding="utf-8")
        with self.assertRaises(EmptyInput):
            load_grid(path)


if __name__ == "__main__":
    unittest.main()
