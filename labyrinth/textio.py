"""Reading and writing maze text files."""

from __future__ import annotations

import logging
from pathlib import Path

from .base import PathLike
from .grid import Grid

logger = logging.getLogger(__name__)


def load_grid(path: PathLike) -> Grid:
    """Parse a maze text file into a :class:`Grid`."""

    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Maze file not found: {source}")
    grid = Grid.parse(source.read_text(encoding="utf-8"))
    logger.debug("Loaded %dx%d maze from %s", grid.rows, grid.cols, source)
    return grid


def save_grid(grid: Grid, path: PathLike, *, include_path: bool = True) -> Path:
    """Write ``grid`` as text, one row per line."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(grid.to_text(include_path=include_path) + "\n", encoding="utf-8")
    logger.debug("Wrote %dx%d maze to %s", grid.rows, grid.cols, target)
    return target


__all__ = ["load_grid", "save_grid"]
