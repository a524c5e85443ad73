import random
import unittest

import numpy as np

from labyrinth import (
    Cell,
    GeneratorAlgorithm,
    InvalidAlgorithm,
    InvalidDimensions,
    Point,
    generate,
    solve,
)
from labyrinth.generator import DisjointSet, RoomGenerator, normalize_dimensions
from labyrinth.generator.base import lattice_cells

PERFECT = [
    GeneratorAlgorithm.RECURSIVE_BACKTRACKING,
    GeneratorAlgorithm.PRIM,
    GeneratorAlgorithm.KRUSKAL,
]


def reachable_from_start(grid):
    seen = {grid.start}
    frontier = [grid.start]
    while frontier:
        current = frontier.pop()
        for neighbor in grid.neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                frontier.append(neighbor)
    return seen


def open_edge_count(grid):
    open_mask = grid.cells != Cell.WALL
    horizontal = np.count_nonzero(open_mask[:, :-1] & open_mask[:, 1:])
    vertical = np.count_nonzero(open_mask[:-1, :] & open_mask[1:, :])
    return int(horizontal + vertical)


class PerfectMazeTests(unittest.TestCase):
    def test_every_open_cell_is_reachable(self) -> None:
        for algorithm in PERFECT:
            for seed in (1, 7, 2024):
                with self.subTest(algorithm=algorithm.value, seed=seed):
                    grid = generate(21, 31, algorithm, seed)
                    open_count = grid.rows * grid.cols - grid.count(Cell.WALL)
                    self.assertEqual(len(reachable_from_start(grid)), open_count)

    def test_open_cells_form_a_tree(self) -> None:
        for algorithm in PERFECT:
            with self.subTest(algorithm=algorithm.value):
                grid = generate(15, 15, algorithm, 99)
                open_count = grid.rows * grid.cols - grid.count(Cell.WALL)
                self.assertEqual(open_edge_count(grid), open_count - 1)

    def test_every_lattice_cell_is_carved(self) -> None:
        for algorithm in PERFECT:
            with self.subTest(algorithm=algorithm.value):
                grid = generate(11, 13, algorithm, 5)
                for cell in lattice_cells(grid.rows, grid.cols):
                    self.assertTrue(grid.is_open(cell), cell)

    def test_bfs_and_astar_agree_on_length(self) -> None:
        for algorithm in PERFECT:
            with self.subTest(algorithm=algorithm.value):
                grid = generate(25, 25, algorithm, 3)
                bfs = solve(grid, "bfs")
                astar = solve(grid, "astar")
                self.assertTrue(bfs.found)
                self.assertEqual(bfs.path_length, astar.path_length)

    def test_border_stays_solid(self) -> None:
        for algorithm in list(GeneratorAlgorithm):
            with self.subTest(algorithm=algorithm.value):
                grid = generate(17, 23, algorithm, 11)
                cells = grid.cells
                for edge in (cells[0, :], cells[-1, :], cells[:, 0], cells[:, -1]):
                    self.assertTrue(np.all(edge == Cell.WALL))


class GeneratorContractTests(unittest.TestCase):
    def test_same_seed_same_maze(self) -> None:
        for algorithm in list(GeneratorAlgorithm):
            with self.subTest(algorithm=algorithm.value):
                self.assertEqual(generate(19, 19, algorithm, 42), generate(19, 19, algorithm, 42))

    def test_dimensions_are_made_odd(self) -> None:
        for algorithm in list(GeneratorAlgorithm):
            with self.subTest(algorithm=algorithm.value):
                grid = generate(10, 12, algorithm, 0)
                self.assertEqual(grid.shape, (11, 13))

    def test_small_dimensions_are_raised_to_minimum(self) -> None:
        self.assertEqual(normalize_dimensions(1, 2), (5, 5))
        grid = generate(1, 1, GeneratorAlgorithm.PRIM, 0)
        self.assertEqual(grid.shape, (5, 5))
        self.assertNotEqual(grid.start, grid.end)

    def test_invalid_dimensions(self) -> None:
        with self.assertRaises(InvalidDimensions):
            generate(0, 10, GeneratorAlgorithm.PRIM, 1)
        with self.assertRaises(InvalidDimensions):
            generate(10, -3, GeneratorAlgorithm.KRUSKAL, 1)

    def test_invalid_algorithm(self) -> None:
        with self.assertRaises(InvalidAlgorithm):
            generate(11, 11, "hunt_and_kill", 1)
        with self.assertRaises(ValueError):
            generate(11, 11, 3, 1)

    def test_algorithm_tags_accept_strings(self) -> None:
        self.assertEqual(generate(9, 9, "PRIM", 8), generate(9, 9, GeneratorAlgorithm.PRIM, 8))
        self.assertEqual(generate(9, 9, "kruskal", 8), generate(9, 9, GeneratorAlgorithm.KRUSKAL, 8))

    def test_markers_written_once(self) -> None:
        for algorithm in list(GeneratorAlgorithm):
            with self.subTest(algorithm=algorithm.value):
                grid = generate(21, 21, algorithm, 17)
                self.assertEqual(grid.count(Cell.START), 1)
                self.assertEqual(grid.count(Cell.END), 1)
                self.assertEqual(grid.count(Cell.PATH), 0)
                self.assertIs(grid.cell(grid.start), Cell.START)
                self.assertIs(grid.cell(grid.end), Cell.END)

    def test_fixed_endpoints(self) -> None:
        for algorithm in (GeneratorAlgorithm.PRIM, GeneratorAlgorithm.KRUSKAL):
            with self.subTest(algorithm=algorithm.value):
                grid = generate(15, 21, algorithm, 2)
                self.assertEqual(grid.start, Point(1, 1))
                self.assertEqual(grid.end, Point(13, 19))

    def test_backtracking_end_is_farthest_lattice_cell(self) -> None:
        grid = generate(15, 21, GeneratorAlgorithm.RECURSIVE_BACKTRACKING, 6)
        self.assertEqual(grid.start, Point(1, 1))
        best = max(
            (cell for cell in lattice_cells(grid.rows, grid.cols) if cell != grid.start),
            key=lambda cell: cell.manhattan(grid.start),
        )
        self.assertEqual(grid.end, best)

    def test_backtracking_handles_large_grids(self) -> None:
        grid = generate(201, 201, GeneratorAlgorithm.RECURSIVE_BACKTRACKING, 1)
        open_count = grid.rows * grid.cols - grid.count(Cell.WALL)
        self.assertEqual(len(reachable_from_start(grid)), open_count)


class RoomGeneratorTests(unittest.TestCase):
    def test_rooms_do_not_overlap_and_hold_markers(self) -> None:
        for seed in range(10):
            with self.subTest(seed=seed):
                generator = RoomGenerator()
                grid = generator.generate(41, 41, random.Random(seed))
                rooms = generator.rooms
                self.assertGreaterEqual(len(rooms), 1)
                self.assertLessEqual(len(rooms), generator.max_rooms)
                for i, a in enumerate(rooms):
                    for b in rooms[i + 1 :]:
                        self.assertFalse(a.intersects(b))
                first, last = rooms[0], rooms[-1]
                self.assertTrue(first.top <= grid.start.row <= first.bottom)
                self.assertTrue(first.left <= grid.start.col <= first.right)
                if len(rooms) > 1:
                    self.assertTrue(last.top <= grid.end.row <= last.bottom)
                    self.assertTrue(last.left <= grid.end.col <= last.right)

    def test_rejected_rooms_are_not_retried(self) -> None:
        # Six 3x3 rooms cannot fit in the 7x7 interior of a 9x9 grid.
        generator = RoomGenerator(min_room_size=3, max_room_size=3, min_rooms=6, max_rooms=6)
        rng = random.Random(3)
        generator.generate(9, 9, rng)
        self.assertEqual(generator.requested_rooms, 6)
        self.assertLess(len(generator.rooms), 6)

        replay = random.Random(3)
        replay.randint(6, 6)
        for _ in range(6):
            replay.randint(3, 3)
            replay.randint(3, 3)
            replay.randrange(5)
            replay.randrange(5)
        self.assertEqual(rng.getstate(), replay.getstate())

    def test_single_room_uses_fallback_end(self) -> None:
        generator = RoomGenerator(min_room_size=3, max_room_size=3, min_rooms=1, max_rooms=1)
        grid = generator.generate(9, 9, random.Random(4))
        self.assertEqual(len(generator.rooms), 1)
        self.assertEqual(grid.end, Point(7, 7))
        self.assertNotEqual(grid.start, grid.end)

    def test_small_grid_still_fits_a_room(self) -> None:
        grid = generate(5, 5, GeneratorAlgorithm.ROOMS, 0)
        self.assertEqual(grid.shape, (5, 5))
        self.assertNotEqual(grid.start, grid.end)

    def test_rejects_bad_settings(self) -> None:
        with self.assertRaises(ValueError):
            RoomGenerator(min_room_size=2)
        with self.assertRaises(ValueError):
            RoomGenerator(min_rooms=5, max_rooms=2)

    def test_rooms_are_not_a_perfect_strategy(self) -> None:
        self.assertFalse(GeneratorAlgorithm.ROOMS.is_perfect)
        self.assertTrue(all(algorithm.is_perfect for algorithm in PERFECT))


class DisjointSetTests(unittest.TestCase):
    def test_union_and_find(self) -> None:
        sets = DisjointSet(6)
        self.assertTrue(sets.union(0, 1))
        self.assertTrue(sets.union(2, 3))
        self.assertTrue(sets.union(1, 3))
        self.assertFalse(sets.union(0, 2))
        self.assertEqual(sets.find(0), sets.find(3))
        self.assertNotEqual(sets.find(0), sets.find(4))
        root = sets.find(2)
        self.assertEqual(sets.parent[2], root)


if __name__ == "__main__":
    unittest.main()
