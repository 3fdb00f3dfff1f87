"""Composite sprite addressing for multi-cell sprites."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from pixel_demos.types import InvalidArgument, Placement, SpriteCellGroup

if TYPE_CHECKING:
    from pixel_demos.renderer.api import RenderApi


def place(
    cells: Sequence[int],
    origin_x: int,
    origin_y: int,
    grid_width: int,
    cell_size: int = 8,
) -> list[Placement]:
    """Lay out cells row by row starting at (origin_x, origin_y).

    Args:
        cells: Sprite cell IDs in row-major order.
        origin_x: Screen x of the top-left cell.
        origin_y: Screen y of the top-left cell.
        grid_width: Cells per row.
        cell_size: Pixel size of one sprite cell.

    Returns:
        One placement per cell, in the same order as cells.
    """
    if grid_width <= 0:
        raise InvalidArgument(f"grid width must be positive, got {grid_width}")

    rows, cols = np.divmod(np.arange(len(cells)), grid_width)
    xs = origin_x + cols * cell_size
    ys = origin_y + rows * cell_size

    return [
        Placement(int(sprite_id), int(x), int(y))
        for sprite_id, x, y in zip(cells, xs, ys)
    ]


def place_group(group: SpriteCellGroup, x: int, y: int, cell_size: int = 8) -> list[Placement]:
    """Lay out a SpriteCellGroup at (x, y)."""
    return place(group.cells, x, y, group.width, cell_size)


def draw_group(
    api: RenderApi,
    group: SpriteCellGroup,
    x: int,
    y: int,
    flip_x: bool = False,
    flip_y: bool = False,
    opaque: bool = True,
    palette_offset: int = 0,
) -> None:
    """Send a whole cell group to the renderer as one request."""
    api.draw_sprite_cells(
        list(group.cells), x, y, group.width, flip_x, flip_y, opaque, palette_offset
    )
