"""Grid pathfinders."""

__all__ = [
    "AbstractMazeSolver",
    "SearchOutcome",
    "SolveResult",
    "reconstruct_path",
    "BFSSolver",
    "DFSSolver",
    "AStarSolver",
    "SolverAlgorithm",
    "SOLVERS",
    "resolve_solver",
    "solve",
]

from .result import SolveResult, reconstruct_path
from .base import AbstractMazeSolver, SearchOutcome
from .bfs import BFSSolver
from .dfs import DFSSolver
from .astar import AStarSolver
from .factory import SolverAlgorithm, SOLVERS, resolve_solver, solve
