"""Exception types raised by the maze toolkit."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for every error raised by :mod:`labyrinth`."""


class MazeFormatError(MazeError, ValueError):
    """Raised when maze text cannot be turned into a grid."""


class EmptyInput(MazeFormatError):
    def __init__(self) -> None:
        super().__init__("Maze text is empty")


class NonRectangular(MazeFormatError):
    def __init__(self, line_number: int, expected: int, actual: int) -> None:
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Maze is not rectangular: line {line_number} has {actual} cells, expected {expected}"
        )


class MissingMarker(MazeFormatError):
    def __init__(self, marker: str) -> None:
        self.marker = marker
        super().__init__(f"Marker '{marker}' not found")


class DuplicateMarker(MazeFormatError):
    def __init__(self, marker: str, first: tuple, second: tuple) -> None:
        self.marker = marker
        self.positions = (first, second)
        super().__init__(f"Marker '{marker}' appears more than once: {first} and {second}")


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"rows and cols must be positive, got {rows}x{cols}")


class InvalidAlgorithm(MazeError, ValueError):
    def __init__(self, algorithm: object, choices) -> None:
        self.algorithm = algorithm
        self.choices = tuple(choices)
        super().__init__(
            f"Unknown algorithm {algorithm!r}; expected one of: {', '.join(self.choices)}"
        )


class InvalidGrid(MazeError, ValueError):
    """Raised when a grid object does not satisfy its structural invariants."""


class MetadataMismatch(MazeError, ValueError):
    def __init__(self, record_id: object, field: str, expected: object, actual: object) -> None:
        self.record_id = record_id
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Record {record_id} has {field}={actual!r}, this batch uses {field}={expected!r}"
        )


__all__ = [
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
