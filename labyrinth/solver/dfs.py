"""Depth-first search with an explicit stack; finds a route, not the shortest."""

from __future__ import annotations

from typing import Dict, List, Set

from ..grid import Grid, Point
from .base import AbstractMazeSolver, SearchOutcome


class DFSSolver(AbstractMazeSolver):
    name = "dfs"

    def search(self, grid: Grid) -> SearchOutcome:
        start, end = grid.start, grid.end
        stack: List[Point] = [start]
        visited: Set[Point] = {start}
        parents: Dict[Point, Point] = {}
        steps = 0

        while stack:
            current = stack.pop()
            if current == end:
                return SearchOutcome(reached=True, steps=steps, parents=parents)
            steps += 1
            # Cells are marked on push, so the first discovery fixes the parent.
            for neighbor in grid.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    parents[neighbor] = current
                    stack.append(neighbor)

        return SearchOutcome(reached=False, steps=steps, parents=parents)


__all__ = ["DFSSolver"]
