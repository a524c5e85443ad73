"""Pick a pathfinder by tag."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Type, Union

from ..errors import InvalidAlgorithm
from ..grid import Grid
from .astar import AStarSolver
from .base import AbstractMazeSolver
from .bfs import BFSSolver
from .dfs import DFSSolver
from .result import SolveResult


class SolverAlgorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astar"


SOLVERS: Dict[SolverAlgorithm, Type[AbstractMazeSolver]] = {
    SolverAlgorithm.BFS: BFSSolver,
    SolverAlgorithm.DFS: DFSSolver,
    SolverAlgorithm.ASTAR: AStarSolver,
}


def resolve_solver(algorithm: Union[SolverAlgorithm, str]) -> SolverAlgorithm:
    """Accept an enum member or a loose spelling such as ``"A*"`` or ``"a-star"``."""

    if isinstance(algorithm, SolverAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        key = algorithm.strip().lower().replace("*", "star")
        for separator in ("-", "_", " "):
            key = key.replace(separator, "")
        try:
            return SolverAlgorithm(key)
        except ValueError:
            pass
    raise InvalidAlgorithm(algorithm, (member.value for member in SolverAlgorithm))


def solve(grid: Grid, algorithm: Union[SolverAlgorithm, str] = SolverAlgorithm.BFS) -> SolveResult:
    return SOLVERS[resolve_solver(algorithm)]().solve(grid)


__all__ = ["SolverAlgorithm", "SOLVERS", "resolve_solver", "solve"]
