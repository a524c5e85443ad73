"""Pillow rendering of mazes and solved routes."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw

from .base import PathLike
from .grid import Cell, Grid, Point
from .solver import SolveResult

Color = Tuple[int, int, int]

WALL_COLOR: Color = (0, 0, 0)
OPEN_COLOR: Color = (255, 255, 255)
START_COLOR: Color = (220, 30, 30)
END_COLOR: Color = (40, 180, 80)
PATH_COLOR: Color = (255, 214, 102)
LINE_COLOR: Color = (220, 0, 0)

DEFAULT_PALETTE: Dict[Cell, Color] = {
    Cell.WALL: WALL_COLOR,
    Cell.OPEN: OPEN_COLOR,
    Cell.START: START_COLOR,
    Cell.END: END_COLOR,
    Cell.PATH: PATH_COLOR,
}


def render_grid(
    grid: Grid,
    *,
    cell_size: int = 16,
    solution: Union[SolveResult, Sequence[Tuple[int, int]], None] = None,
    palette: Optional[Dict[Cell, Color]] = None,
    draw_line: bool = True,
) -> Image.Image:
    """Draw ``grid`` as an RGB image, one square per cell.

    ``solution`` may be a :class:`SolveResult` or a sequence of points from
    start to end. Its route is drawn as a line through the cell centers; the
    grid's own ``PATH`` cells are filled with the path color either way.
    """

    if cell_size < 1:
        raise ValueError("cell_size must be at least 1")
    colors = dict(DEFAULT_PALETTE)
    if palette:
        colors.update(palette)

    canvas = Image.new("RGB", (grid.cols * cell_size, grid.rows * cell_size), colors[Cell.WALL])
    draw = ImageDraw.Draw(canvas)
    for r in range(grid.rows):
        for c in range(grid.cols):
            cell = grid.cell((r, c))
            if cell is Cell.WALL:
                continue
            _fill_cell(draw, Point(r, c), cell_size, colors[cell])

    route = _route_points(solution)
    if route and draw_line:
        thickness = max(2, cell_size // 3)
        centers = [
            (c * cell_size + cell_size / 2, r * cell_size + cell_size / 2) for r, c in route
        ]
        if len(centers) >= 2:
            draw.line(centers, fill=LINE_COLOR, width=thickness, joint="curve")
        # Keep the endpoints readable on top of the line.
        _fill_cell(draw, grid.start, cell_size, colors[Cell.START])
        _fill_cell(draw, grid.end, cell_size, colors[Cell.END])
    return canvas


def save_image(image: Image.Image, path: PathLike) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    image.save(target)
    return target


def _route_points(
    solution: Union[SolveResult, Sequence[Tuple[int, int]], None],
) -> Sequence[Tuple[int, int]]:
    if solution is None:
        return ()
    if isinstance(solution, SolveResult):
        return solution.path
    return solution


def _fill_cell(draw: ImageDraw.ImageDraw, point: Point, cell_size: int, color: Color) -> None:
    r, c = point
    left = c * cell_size
    top = r * cell_size
    draw.rectangle((left, top, left + cell_size - 1, top + cell_size - 1), fill=color)


__all__ = ["render_grid", "save_image", "DEFAULT_PALETTE"]
