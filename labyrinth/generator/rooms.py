"""Rectangular rooms joined by corridors.

Unlike the lattice strategies this one does not produce a perfect maze. Rooms
are open areas (many paths between two cells), rejected rooms are not retried,
and corridors advance diagonally while the row and column both differ, leaving
cells that only touch at a corner. A 4-connected solver may therefore find no
route from start to end.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..grid import Cell, Point
from .base import AbstractMazeGenerator, fallback_end

logger = logging.getLogger(__name__)

MIN_ROOM_SIZE = 3
MAX_ROOM_SIZE = 8
MIN_ROOMS = 3
MAX_ROOMS = 10


@dataclass(frozen=True)
class Room:
    top: int
    left: int
    height: int
    width: int

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def center(self) -> Point:
        return Point(self.top + self.height // 2, self.left + self.width // 2)

    def intersects(self, other: "Room") -> bool:
        return not (
            self.right < other.left
            or other.right < self.left
            or self.bottom < other.top
            or other.bottom < self.top
        )


class RoomGenerator(AbstractMazeGenerator):
    """Scatter non-overlapping rooms and chain their centers with corridors.

    After each call to :meth:`generate` the placed rooms are in :attr:`rooms` and
    the number of rooms that were attempted is in :attr:`requested_rooms`. That
    state belongs to the instance, so do not share one generator between threads;
    :func:`labyrinth.generator.generate` builds a fresh one per call.
    """

    name = "rooms"

    def __init__(
        self,
        *,
        min_room_size: int = MIN_ROOM_SIZE,
        max_room_size: int = MAX_ROOM_SIZE,
        min_rooms: int = MIN_ROOMS,
        max_rooms: int = MAX_ROOMS,
    ) -> None:
        if min_room_size < 3 or max_room_size < min_room_size:
            raise ValueError("room sizes must satisfy 3 <= min_room_size <= max_room_size")
        if min_rooms < 1 or max_rooms < min_rooms:
            raise ValueError("room counts must satisfy 1 <= min_rooms <= max_rooms")
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size
        self.min_rooms = min_rooms
        self.max_rooms = max_rooms
        self.rooms: List[Room] = []
        self.requested_rooms = 0

    def carve(self, buffer: np.ndarray, rng: random.Random) -> Tuple[Point, Point]:
        rows, cols = buffer.shape
        rooms = self._place_rooms(rows, cols, rng)
        for room in rooms:
            buffer[room.top : room.bottom + 1, room.left : room.right + 1] = Cell.OPEN
        for a, b in zip(rooms, rooms[1:]):
            self._connect(buffer, a.center, b.center)
        self.rooms = rooms

        first, last = rooms[0], rooms[-1]
        start = Point(first.top + 1, first.left + 1)
        end = Point(last.bottom - 1, last.right - 1)
        if end == start:
            end = fallback_end(rows, cols)
        return start, end

    def _place_rooms(self, rows: int, cols: int, rng: random.Random) -> List[Room]:
        max_height = min(self.max_room_size, rows - 2)
        max_width = min(self.max_room_size, cols - 2)
        min_height = min(self.min_room_size, max_height)
        min_width = min(self.min_room_size, max_width)

        target = rng.randint(self.min_rooms, self.max_rooms)
        self.requested_rooms = target
        rooms: List[Room] = []
        for _ in range(target):
            height = rng.randint(min_height, max_height)
            width = rng.randint(min_width, max_width)
            room = Room(
                top=1 + rng.randrange(rows - height - 1),
                left=1 + rng.randrange(cols - width - 1),
                height=height,
                width=width,
            )
            if any(room.intersects(existing) for existing in rooms):
                continue
            rooms.append(room)
        logger.debug("Placed %d of %d requested rooms", len(rooms), target)
        return rooms

    @staticmethod
    def _connect(buffer: np.ndarray, source: Point, target: Point) -> None:
        row, col = source
        while (row, col) != target:
            if row < target.row:
                row += 1
            elif row > target.row:
                row -= 1
            if col < target.col:
                col += 1
            elif col > target.col:
                col -= 1
            buffer[row, col] = Cell.OPEN


__all__ = ["RoomGenerator", "Room", "MIN_ROOM_SIZE", "MAX_ROOM_SIZE", "MIN_ROOMS", "MAX_ROOMS"]
