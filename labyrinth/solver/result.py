"""Solver output and path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from ..grid import Cell, Grid, Point


@dataclass(frozen=True)
class SolveResult:
    """Solved copy of a grid plus search instrumentation.

    ``steps`` counts nodes expanded by the search, not the length of the
    returned path. When the end was never reached ``path`` is empty and
    ``grid`` carries no path marks.
    """

    algorithm: str
    grid: Grid
    steps: int
    path: Tuple[Point, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def path_length(self) -> int:
        """Number of ``PATH`` cells, i.e. the route without its start and end."""

        return self.grid.count(Cell.PATH)

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "steps": self.steps,
            "found": self.found,
            "path_length": self.path_length,
            "path": [list(point) for point in self.path],
            "grid": self.grid.to_lines(),
        }


def reconstruct_path(parents: Mapping[Point, Point], start: Point, end: Point) -> List[Point]:
    """Walk ``parents`` back from ``end`` and return the route from ``start`` to ``end``."""

    if end != start and end not in parents:
        return []
    route: List[Point] = [end]
    node = end
    while node != start:
        node = parents[node]
        route.append(node)
    route.reverse()
    return route


__all__ = ["SolveResult", "reconstruct_path"]
