"""A* search with a Manhattan-distance heuristic."""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Set, Tuple

from ..grid import Grid, Point
from .base import AbstractMazeSolver, SearchOutcome

# (f, h, insertion order, point)
HeapEntry = Tuple[int, int, int, Point]


class AStarSolver(AbstractMazeSolver):
    """A* over unit-cost 4-connected cells.

    The heuristic is admissible and consistent here, so the route has the same
    length as the breadth-first one. The open set is a binary heap with lazy
    deletion: an improved neighbor is pushed again and outdated entries are
    dropped when popped. Ties on ``f`` go to the entry closer to the end, then
    to the one pushed first.
    """

    name = "astar"

    def search(self, grid: Grid) -> SearchOutcome:
        start, end = grid.start, grid.end
        order = itertools.count()
        g_score: Dict[Point, int] = {start: 0}
        f_score: Dict[Point, int] = {start: start.manhattan(end)}
        parents: Dict[Point, Point] = {}
        closed: Set[Point] = set()
        open_heap: List[HeapEntry] = [(f_score[start], f_score[start], next(order), start)]
        steps = 0

        while open_heap:
            f, _, _, current = heapq.heappop(open_heap)
            if current in closed or f > f_score[current]:
                continue
            if current == end:
                return SearchOutcome(reached=True, steps=steps, parents=parents)
            closed.add(current)
            steps += 1

            tentative = g_score[current] + 1
            for neighbor in grid.neighbors(current):
                if neighbor in closed or tentative >= g_score.get(neighbor, tentative + 1):
                    continue
                h = neighbor.manhattan(end)
                parents[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + h
                heapq.heappush(open_heap, (tentative + h, h, next(order), neighbor))

        return SearchOutcome(reached=False, steps=steps, parents=parents)


__all__ = ["AStarSolver"]
