"""Maze generation, pathfinding and analysis toolkit."""

__all__ = [
    "Cell",
    "Point",
    "Grid",
    "load_grid",
    "save_grid",
    "GeneratorAlgorithm",
    "generate",
    "SolverAlgorithm",
    "SolveResult",
    "solve",
    "MazeAnalyzer",
    "MazeStats",
    "analyze",
    "MazeError",
    "MazeFormatError",
    "EmptyInput",
    "NonRectangular",
    "MissingMarker",
    "DuplicateMarker",
    "InvalidDimensions",
    "InvalidAlgorithm",
    "InvalidGrid",
    "MetadataMismatch",
]

from .errors import (
    MazeError,
    MazeFormatError,
    EmptyInput,
    NonRectangular,
    MissingMarker,
    DuplicateMarker,
    InvalidDimensions,
    InvalidAlgorithm,
    InvalidGrid,
    MetadataMismatch,
)
from .grid import Cell, Point, Grid
from .textio import load_grid, save_grid
from .generator import GeneratorAlgorithm, generate
from .solver import SolverAlgorithm, SolveResult, solve
from .analyzer import MazeAnalyzer, MazeStats, analyze
