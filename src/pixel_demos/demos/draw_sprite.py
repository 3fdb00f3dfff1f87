"""Sprite drawing demo with animated shells that wrap around the display."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from pixel_demos.engine import AnimationClock, DEFAULT_FRAME_THRESHOLD, draw_group, place_group
from pixel_demos.renderer.api import RenderApi
from pixel_demos.types import InvalidArgument, Position, SpriteCellGroup

logger = logging.getLogger(__name__)


@dataclass
class DrawSpriteConfig:
    """Configuration for the sprite drawing demo."""

    # Each shell frame is 4 sprites in a 2x2 grid
    shell_frames: list[list[int]] = field(
        default_factory=lambda: [[0, 1, 6, 7], [2, 3, 8, 9]]
    )
    shell_width: int = 2

    speed: int = 100  # Pixels per second
    frame_threshold: float = DEFAULT_FRAME_THRESHOLD

    shell_a_start: tuple[int, int] = (0, 8 * 8)
    shell_b_start: tuple[int, int] = (8 * 22, 0)

    background_color: int = 32
    font: str = "large-font"
    label_offset: int = 20  # Gap between a shell and its position label
    loose_cell_pitch: int = 10  # Cell size plus a 2px gap


class ShellMotion:
    """An animated shell sliding along one axis.

    Positions are never wrapped here. The renderer's display wrap mode
    brings off-screen shells back on the opposite edge.
    """

    def __init__(
        self,
        start: Position,
        axis: str,
        speed: int,
        frame_count: int,
        threshold: float = DEFAULT_FRAME_THRESHOLD,
    ):
        """Initialize the shell motion.

        Args:
            start: Starting position. Copied, never shared.
            axis: "x" or "y".
            speed: Pixels per second.
            frame_count: Number of animation frames to cycle through.
            threshold: Seconds between frame advances.
        """
        if axis not in ("x", "y"):
            raise InvalidArgument(f"axis must be 'x' or 'y', got {axis!r}")

        self.position = start.copy()
        self.axis = axis
        self.speed = speed
        self.clock = AnimationClock(frame_count=frame_count, threshold=threshold)

    @property
    def frame(self) -> int:
        return self.clock.frame_index

    def update(self, dt: float) -> None:
        """Move and animate the shell.

        Args:
            dt: Delta time in seconds.
        """
        # Rounded up on every call, so small steps never stall at zero
        step = math.ceil(self.speed * dt)
        if self.axis == "x":
            self.position.x += step
        else:
            self.position.y += step

        self.clock.tick(dt)


class DrawSpriteDemo:
    """Draws single sprites, static and animated cell groups, and moving shells."""

    name = "draw-sprite"

    def __init__(self, api: RenderApi, config: Optional[DrawSpriteConfig] = None):
        """Initialize the demo.

        Args:
            api: Renderer the demo draws through.
            config: Optional configuration.
        """
        self.api = api
        self.config = config or DrawSpriteConfig()

        self.shell_frames = [
            SpriteCellGroup.of(cells, self.config.shell_width)
            for cells in self.config.shell_frames
        ]
        self.shell_a = ShellMotion(
            Position(*self.config.shell_a_start),
            "x",
            self.config.speed,
            len(self.shell_frames),
            self.config.frame_threshold,
        )
        self.shell_b = ShellMotion(
            Position(*self.config.shell_b_start),
            "y",
            self.config.speed,
            len(self.shell_frames),
            self.config.frame_threshold,
        )

    @property
    def frame(self) -> int:
        """Current animation frame of the shells."""
        return self.shell_a.frame

    def init(self) -> None:
        """Set up the display and bake the static labels into the buffer."""
        self.api.change_background_color(self.config.background_color)
        self.api.toggle_display_wrap(True)

        self.api.rebuild_screen_buffer()
        self.api.draw_text_to_buffer("Sprite Test", 1, 1, self.config.font, 0)
        self.api.draw_text_to_buffer("Position Wrap Test", 1, 6, self.config.font, 0)

        logger.info("Draw sprite demo initialized with %d shell frames", len(self.shell_frames))

    def update(self, dt: float) -> None:
        """Move and animate both shells.

        Args:
            dt: Delta time in seconds.
        """
        self.shell_a.update(dt)
        self.shell_b.update(dt)

    def draw(self) -> None:
        """Draw the sprite examples and shell position labels."""
        api = self.api
        api.draw_screen_buffer()

        # Single sprites spaced apart so the 2x2 composition is visible
        for cell in place_group(self.shell_frames[0], 8, 24, self.config.loose_cell_pitch):
            api.draw_sprite(cell.sprite_id, cell.x, cell.y, False, False, True, 0)

        draw_group(api, self.shell_frames[0], 32, 24)
        draw_group(api, self.shell_frames[self.frame], 54, 24)

        for shell in (self.shell_a, self.shell_b):
            pos = shell.position
            draw_group(api, self.shell_frames[shell.frame], pos.x, pos.y)
            api.draw_text(pos.label(), pos.x, pos.y + self.config.label_offset, self.config.font, 0)
