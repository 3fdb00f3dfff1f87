"""Sprite cell groups and draw request types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence

from .errors import InvalidArgument


class Placement(NamedTuple):
    """Screen placement of a single sprite cell."""

    sprite_id: int
    x: int
    y: int


@dataclass(frozen=True)
class SpriteCellGroup:
    """Ordered sprite cells tiled into a grid `width` cells wide."""

    cells: tuple[int, ...]
    width: int

    def __post_init__(self):
        if self.width <= 0:
            raise InvalidArgument(f"grid width must be positive, got {self.width}")
        if not self.cells:
            raise InvalidArgument("sprite cell group needs at least one cell")
        # Accept lists from callers but store an immutable copy
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def of(cls, cells: Sequence[int], width: int) -> "SpriteCellGroup":
        """Build a group from any sequence of cell IDs."""
        return cls(tuple(cells), width)

    @property
    def height(self) -> int:
        """Number of rows the cells occupy."""
        return math.ceil(len(self.cells) / self.width)

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class DrawCall:
    """A sprite draw request as received by a renderer."""

    cells: tuple[int, ...]
    x: int
    y: int
    grid_width: int = 1
    flip_x: bool = False
    flip_y: bool = False
    opaque: bool = True
    palette_offset: int = 0


@dataclass
class TextCall:
    """A text draw request as received by a renderer."""

    text: str
    x: int
    y: int
    font_id: str = "large-font"
    palette_offset: int = 0
