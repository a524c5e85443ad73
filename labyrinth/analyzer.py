"""Comparative statistics for one maze across all pathfinders."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Dict, Optional

import numpy as np

from .errors import InvalidGrid
from .grid import Cell, Grid
from .solver import SolveResult, SolverAlgorithm, SOLVERS

logger = logging.getLogger(__name__)


@dataclass
class SolverRun:
    """One timed solver run."""

    algorithm: str
    steps: int
    path_length: int
    found: bool
    duration_ms: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MazeStats:
    """Metrics for a single maze.

    ``path_efficiency`` and ``complexity`` are ``None`` when their ratio is
    undefined (start and end coincide, or breadth-first search found no route
    or a route without intermediate cells).
    """

    dimensions: str
    total_cells: int
    wall_count: int
    path_count: int
    wall_ratio: float
    straight_line_distance: float
    bfs_path_length: int
    dfs_path_length: int
    astar_path_length: int
    bfs_steps: int
    dfs_steps: int
    astar_steps: int
    bfs_duration_ms: float
    dfs_duration_ms: float
    astar_duration_ms: float
    solvable: bool
    path_efficiency: Optional[float]
    complexity: Optional[float]

    def to_dict(self) -> dict:
        return asdict(self)


def safe_ratio(numerator: float, denominator: float, name: str) -> Optional[float]:
    if denominator == 0:
        logger.debug("%s is undefined (denominator is zero)", name)
        return None
    return numerator / denominator


class MazeAnalyzer:
    """Run BFS, DFS and A* on one grid and derive comparison metrics."""

    def __init__(self, grid: Grid) -> None:
        self.grid = _check_grid(grid)
        self.runs: Dict[SolverAlgorithm, SolverRun] = {}
        self.results: Dict[SolverAlgorithm, SolveResult] = {}

    def analyze(self) -> MazeStats:
        grid = self.grid
        total_cells = grid.rows * grid.cols
        wall_count = grid.count(Cell.WALL)
        straight_line = grid.start.euclidean(grid.end)

        for algorithm, solver_cls in SOLVERS.items():
            solver = solver_cls()
            started = time.perf_counter()
            result = solver.solve(grid)
            elapsed = time.perf_counter() - started
            self.results[algorithm] = result
            self.runs[algorithm] = SolverRun(
                algorithm=algorithm.value,
                steps=result.steps,
                path_length=result.path_length,
                found=result.found,
                duration_ms=elapsed * 1000.0,
            )

        bfs = self.runs[SolverAlgorithm.BFS]
        dfs = self.runs[SolverAlgorithm.DFS]
        astar = self.runs[SolverAlgorithm.ASTAR]
        stats = MazeStats(
            dimensions=f"{grid.rows}x{grid.cols}",
            total_cells=total_cells,
            wall_count=wall_count,
            path_count=total_cells - wall_count,
            wall_ratio=wall_count / total_cells,
            straight_line_distance=straight_line,
            bfs_path_length=bfs.path_length,
            dfs_path_length=dfs.path_length,
            astar_path_length=astar.path_length,
            bfs_steps=bfs.steps,
            dfs_steps=dfs.steps,
            astar_steps=astar.steps,
            bfs_duration_ms=bfs.duration_ms,
            dfs_duration_ms=dfs.duration_ms,
            astar_duration_ms=astar.duration_ms,
            solvable=bfs.found,
            path_efficiency=safe_ratio(bfs.path_length, straight_line, "path_efficiency"),
            complexity=safe_ratio(dfs.path_length, bfs.path_length, "complexity"),
        )
        logger.info(
            "Analyzed %s maze: bfs=%d dfs=%d astar=%d path cells",
            stats.dimensions,
            bfs.path_length,
            dfs.path_length,
            astar.path_length,
        )
        return stats


def analyze(grid: Grid) -> MazeStats:
    return MazeAnalyzer(grid).analyze()


def _check_grid(grid: object) -> Grid:
    if not isinstance(grid, Grid):
        raise InvalidGrid(f"Expected a Grid, got {type(grid).__name__}")
    cells = grid.cells
    if not isinstance(cells, np.ndarray) or cells.ndim != 2 or cells.size == 0:
        raise InvalidGrid("Grid cell buffer is not a non-empty 2-D array")
    if not (grid.in_bounds(grid.start) and grid.in_bounds(grid.end)):
        raise InvalidGrid("Grid start or end lies outside the cell buffer")
    return grid


__all__ = ["MazeAnalyzer", "MazeStats", "SolverRun", "analyze", "safe_ratio"]
