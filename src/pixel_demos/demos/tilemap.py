"""Tilemap demo that scrolls the map in one of eight directions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from pixel_demos.engine import repeat
from pixel_demos.renderer.api import RenderApi
from pixel_demos.types import DIRECTIONS, Position

logger = logging.getLogger(__name__)


@dataclass
class TilemapConfig:
    """Configuration for the tilemap scroll demo."""

    background_color: int = 0
    change_button: int = 0  # Mouse button that cycles the direction
    tile_cells: int = 2  # Sprites per tile edge
    font: str = "message-font"
    font_palette_offset: int = -4
    label_position: tuple[int, int] = (8, 0)


@dataclass
class ScrollState:
    """Scroll position and the index of the direction it moves in."""

    position: Position = field(default_factory=Position)
    direction_index: int = 0

    @property
    def direction(self) -> tuple[int, int]:
        return DIRECTIONS[self.direction_index]

    def cycle_direction(self) -> int:
        """Switch to the next direction, wrapping after the last one.

        Returns:
            The new direction index.
        """
        self.direction_index = repeat(self.direction_index + 1, len(DIRECTIONS))
        return self.direction_index

    def step(self) -> None:
        """Move one unit along the current direction."""
        dx, dy = self.direction
        self.position.offset(dx, dy)


class TilemapDemo:
    """Scrolls the screen buffer every frame; a click changes direction."""

    name = "tilemap"

    def __init__(self, api: RenderApi, config: Optional[TilemapConfig] = None):
        """Initialize the demo.

        Args:
            api: Renderer the demo draws through.
            config: Optional configuration.
        """
        self.api = api
        self.config = config or TilemapConfig()
        self.state = ScrollState()
        self.tile_size = 0
        self.grid_size = (0, 0)

    def init(self) -> None:
        """Set up the display and work out the visible tile grid."""
        self.api.change_background_color(self.config.background_color)
        self.api.rebuild_screen_buffer()

        self.tile_size = self.api.sprite_width * self.config.tile_cells
        self.grid_size = (
            self.api.display_width // self.tile_size,
            self.api.display_height // self.tile_size,
        )
        logger.info(
            "Tilemap demo initialized: tile size %d, grid %dx%d",
            self.tile_size,
            *self.grid_size,
        )

    def update(self, dt: float) -> None:
        """Apply any direction change, then scroll one step.

        Args:
            dt: Delta time in seconds. Scrolling is per frame, not per second.
        """
        if self.api.get_mouse_button_down(self.config.change_button):
            index = self.state.cycle_direction()
            logger.debug("Scroll direction changed to %d %s", index, self.state.direction)

        self.state.step()

        pos = self.state.position
        self.api.scroll_to(pos.x, pos.y)

    def draw(self) -> None:
        """Draw the buffer and the current scroll position."""
        self.api.draw_screen_buffer()

        x, y = self.config.label_position
        self.api.draw_text(
            f"Scroll {self.state.position.label()}",
            x,
            y,
            self.config.font,
            self.config.font_palette_offset,
        )
