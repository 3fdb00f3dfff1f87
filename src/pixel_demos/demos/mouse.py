"""Mouse demo that shows the pointer position and a sprite cursor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from pixel_demos.engine import draw_group
from pixel_demos.renderer.api import RenderApi
from pixel_demos.types import Position, SpriteCellGroup

logger = logging.getLogger(__name__)


@dataclass
class MouseConfig:
    """Configuration for the mouse demo."""

    cursor_cells: list[int] = field(default_factory=lambda: [4, 5, 10, 11])
    cursor_width: int = 2
    font_offset_x: int = 128
    background_color: int = 32
    font: str = "large-font"


class MouseDemo:
    """Tracks the pointer and draws a 2x2 cursor while it is on screen."""

    name = "mouse"

    def __init__(self, api: RenderApi, config: Optional[MouseConfig] = None):
        self.api = api
        self.config = config or MouseConfig()
        self.cursor = SpriteCellGroup.of(self.config.cursor_cells, self.config.cursor_width)
        self.mouse_pos = Position(-1, 0)

    @property
    def offscreen(self) -> bool:
        return self.mouse_pos.x < 0 or self.mouse_pos.y < 0

    def init(self) -> None:
        self.api.change_background_color(self.config.background_color)
        self.api.rebuild_screen_buffer()

        # Keep the cursor from reappearing on the far edge
        self.api.toggle_display_wrap(False)

        font = self.config.font
        self.api.draw_text_to_buffer("MOUSE POSITION", 1, 1, font, 0)
        self.api.draw_text_to_buffer("BUTTON 1 DOWN", 1, 3, font, 0)
        self.api.draw_text_to_buffer("BUTTON 2 DOWN", 1, 4, font, 0)

        logger.info("Mouse demo initialized")

    def update(self, dt: float) -> None:
        self.mouse_pos.x = self.api.mouse_x
        self.mouse_pos.y = self.api.mouse_y

    def draw(self) -> None:
        api = self.api
        font = self.config.font
        offset_x = self.config.font_offset_x

        api.draw_screen_buffer()

        if self.offscreen:
            api.draw_text("OFFSCREEN", offset_x, 8, font, 0)
        else:
            pos = self.mouse_pos
            api.draw_text(f"({pos.x:03d},{pos.y:03d})", offset_x, 8, font, 0)
            draw_group(api, self.cursor, pos.x, pos.y)

        api.draw_text(str(api.get_mouse_button(0)), offset_x - 8, 24, font, 0)
        api.draw_text(str(api.get_mouse_button(1)), offset_x - 8, 32, font, 0)
