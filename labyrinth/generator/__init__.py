"""Maze generation strategies."""

__all__ = [
    "AbstractMazeGenerator",
    "RecursiveBacktrackingGenerator",
    "PrimGenerator",
    "KruskalGenerator",
    "DisjointSet",
    "RoomGenerator",
    "Room",
    "GeneratorAlgorithm",
    "GENERATORS",
    "generate",
    "normalize_dimensions",
    "resolve_generator",
]

from .base import AbstractMazeGenerator, normalize_dimensions
from .backtracking import RecursiveBacktrackingGenerator
from .prim import PrimGenerator
from .kruskal import KruskalGenerator, DisjointSet
from .rooms import RoomGenerator, Room
from .factory import GeneratorAlgorithm, GENERATORS, generate, resolve_generator
