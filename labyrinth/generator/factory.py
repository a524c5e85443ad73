"""Pick a generation strategy by tag and run it with a seeded random source."""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Optional, Type, Union

from ..errors import InvalidAlgorithm
from ..grid import Grid
from .backtracking import RecursiveBacktrackingGenerator
from .base import AbstractMazeGenerator
from .kruskal import KruskalGenerator
from .prim import PrimGenerator
from .rooms import RoomGenerator


class GeneratorAlgorithm(str, Enum):
    RECURSIVE_BACKTRACKING = "recursive_backtracking"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    ROOMS = "rooms"

    @property
    def is_perfect(self) -> bool:
        """Whether the strategy guarantees a spanning-tree maze."""

        return self is not GeneratorAlgorithm.ROOMS


GENERATORS: Dict[GeneratorAlgorithm, Type[AbstractMazeGenerator]] = {
    GeneratorAlgorithm.RECURSIVE_BACKTRACKING: RecursiveBacktrackingGenerator,
    GeneratorAlgorithm.PRIM: PrimGenerator,
    GeneratorAlgorithm.KRUSKAL: KruskalGenerator,
    GeneratorAlgorithm.ROOMS: RoomGenerator,
}


def resolve_generator(algorithm: Union[GeneratorAlgorithm, str]) -> GeneratorAlgorithm:
    """Accept an enum member, its value (``"prim"``) or its name (``"PRIM"``)."""

    if isinstance(algorithm, GeneratorAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        key = algorithm.strip()
        try:
            return GeneratorAlgorithm(key.lower())
        except ValueError:
            pass
        try:
            return GeneratorAlgorithm[key.upper()]
        except KeyError:
            pass
    raise InvalidAlgorithm(algorithm, (member.value for member in GeneratorAlgorithm))


def generate(
    rows: int,
    cols: int,
    algorithm: Union[GeneratorAlgorithm, str] = GeneratorAlgorithm.RECURSIVE_BACKTRACKING,
    seed: Optional[int] = None,
) -> Grid:
    """Generate a maze; the same ``seed`` always yields the same grid."""

    choice = resolve_generator(algorithm)
    return GENERATORS[choice]().generate(rows, cols, random.Random(seed))


__all__ = ["GeneratorAlgorithm", "GENERATORS", "generate", "resolve_generator"]
