"""Common scaffolding for grid pathfinders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict

from ..grid import Grid, Point
from .result import SolveResult, reconstruct_path

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    reached: bool
    steps: int
    parents: Dict[Point, Point] = field(default_factory=dict)


class AbstractMazeSolver(ABC):
    """Base class for searches from ``grid.start`` to ``grid.end``.

    Subclasses implement :meth:`search`. The input grid is only read; the
    result holds a fresh grid with the found route marked.
    """

    name: str = ""

    def solve(self, grid: Grid) -> SolveResult:
        outcome = self.search(grid)
        path = reconstruct_path(outcome.parents, grid.start, grid.end) if outcome.reached else []
        solved = grid.with_path(path, clear=True)
        if path:
            logger.debug("%s reached %s in %d steps, route of %d cells", self.name, grid.end, outcome.steps, len(path))
        else:
            logger.debug("%s found no route after %d steps", self.name, outcome.steps)
        return SolveResult(algorithm=self.name, grid=solved, steps=outcome.steps, path=tuple(path))

    @abstractmethod
    def search(self, grid: Grid) -> SearchOutcome:
        """Explore ``grid`` and report whether the end was reached."""


__all__ = ["AbstractMazeSolver", "SearchOutcome"]
