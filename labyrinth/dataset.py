"""Batch generation of maze records: text files, images and analysis metadata."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from .analyzer import analyze
from .base import AbstractDatasetGenerator, PathLike
from .generator import GeneratorAlgorithm, generate, normalize_dimensions, resolve_generator
from .render import render_grid, save_image
from .solver import SolverAlgorithm, resolve_solver, solve
from .textio import save_grid

logger = logging.getLogger(__name__)


@dataclass
class MazeRecord:
    id: str
    algorithm: str
    solver: str
    seed: int
    grid_size: Tuple[int, int]
    start: Tuple[int, int]
    end: Tuple[int, int]
    maze_grid: List[str]
    solution_steps: int
    solution_length: int
    maze_path: str
    solution_path: str
    puzzle_image_path: Optional[str]
    solution_image_path: Optional[str]
    stats: Dict[str, Any]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "algorithm": self.algorithm,
            "solver": self.solver,
            "seed": self.seed,
            "grid_size": list(self.grid_size),
            "start": list(self.start),
            "end": list(self.end),
            "maze_grid": self.maze_grid,
            "solution_steps": self.solution_steps,
            "solution_length": self.solution_length,
            "maze_path": self.maze_path,
            "solution_path": self.solution_path,
            "puzzle_image_path": self.puzzle_image_path,
            "solution_image_path": self.solution_image_path,
            "stats": self.stats,
        }


class MazeDatasetGenerator(AbstractDatasetGenerator[MazeRecord]):
    """Generate mazes, solve them and store every artifact under ``output_dir``."""

    def __init__(
        self,
        output_dir: PathLike = "data/mazes",
        *,
        rows: int = 15,
        cols: int = 15,
        algorithm: Union[GeneratorAlgorithm, str] = GeneratorAlgorithm.RECURSIVE_BACKTRACKING,
        solver: Union[SolverAlgorithm, str] = SolverAlgorithm.BFS,
        cell_size: int = 16,
        render_images: bool = True,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(output_dir, seed=seed)
        self.rows = rows
        self.cols = cols
        self.grid_size = normalize_dimensions(rows, cols)
        self.algorithm = resolve_generator(algorithm)
        self.solver = resolve_solver(solver)
        self.cell_size = cell_size
        self.render_images = render_images

    def settings(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            "solver": self.solver.value,
            "grid_size": list(self.grid_size),
        }

    def create_record(
        self,
        *,
        record_id: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> MazeRecord:
        record_uuid = record_id or str(uuid.uuid4())
        maze_seed = self.next_seed(seed)
        paths = self.asset_paths(record_uuid)
        grid = generate(self.rows, self.cols, self.algorithm, maze_seed)
        result = solve(grid, self.solver)
        stats = analyze(grid)

        maze_path = save_grid(grid, paths["maze"])
        solution_path = save_grid(result.grid, paths["solution"])

        puzzle_image_path: Optional[str] = None
        solution_image_path: Optional[str] = None
        if self.render_images:
            puzzle_image = render_grid(grid, cell_size=self.cell_size)
            solution_image = render_grid(result.grid, cell_size=self.cell_size, solution=result)
            puzzle_image_path = self.relativize_path(
                save_image(puzzle_image, paths["puzzle_image"])
            )
            solution_image_path = self.relativize_path(
                save_image(solution_image, paths["solution_image"])
            )

        logger.info(
            "Created %s maze %s (%dx%d, seed=%d, solved=%s)",
            self.algorithm.value,
            record_uuid,
            grid.rows,
            grid.cols,
            maze_seed,
            result.found,
        )
        return MazeRecord(
            id=record_uuid,
            algorithm=self.algorithm.value,
            solver=self.solver.value,
            seed=maze_seed,
            grid_size=grid.shape,
            start=tuple(grid.start),
            end=tuple(grid.end),
            maze_grid=grid.to_lines(),
            solution_steps=result.steps,
            solution_length=result.path_length,
            maze_path=self.relativize_path(maze_path),
            solution_path=self.relativize_path(solution_path),
            puzzle_image_path=puzzle_image_path,
            solution_image_path=solution_image_path,
            stats=stats.to_dict(),
        )


__all__ = ["MazeDatasetGenerator", "MazeRecord"]
