"""Breadth-first search: shortest route by hop count."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Set

from ..grid import Grid, Point
from .base import AbstractMazeSolver, SearchOutcome


class BFSSolver(AbstractMazeSolver):
    name = "bfs"

    def search(self, grid: Grid) -> SearchOutcome:
        start, end = grid.start, grid.end
        queue: Deque[Point] = deque([start])
        visited: Set[Point] = {start}
        parents: Dict[Point, Point] = {}
        steps = 0

        while queue:
            current = queue.popleft()
            if current == end:
                return SearchOutcome(reached=True, steps=steps, parents=parents)
            steps += 1
            for neighbor in grid.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    parents[neighbor] = current
                    queue.append(neighbor)

        return SearchOutcome(reached=False, steps=steps, parents=parents)


__all__ = ["BFSSolver"]
