"""Headless renderer for testing."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from pixel_demos.engine.composite import place
from pixel_demos.types import DrawCall, TextCall

logger = logging.getLogger(__name__)


class HeadlessRenderer:
    """A renderer that records draw requests instead of drawing pixels.

    Also simulates the pointer so demos can be driven from tests. The
    character screen (one character per sprite cell) is only a debug view.
    """

    def __init__(
        self,
        width: int = 256,
        height: int = 240,
        sprite_size: int = 8,
        sprite_count: Optional[int] = None,
    ):
        """Initialize the headless renderer.

        Args:
            width: Display width in pixels.
            height: Display height in pixels.
            sprite_size: Width and height of one sprite cell in pixels.
            sprite_count: Number of sprites in memory. When set, drawing an
                ID outside [0, sprite_count) raises IndexError.
        """
        self._width = width
        self._height = height
        self._sprite_size = sprite_size
        self.sprite_count = sprite_count

        self.columns = width // sprite_size
        self.rows = height // sprite_size
        self.screen: list[list[str]] = self._blank_screen()

        self.calls: list[Union[DrawCall, TextCall]] = []
        self.buffer_text: list[TextCall] = []
        self.background_color = 0
        self.display_wrap = True
        self.scroll = (0, 0)
        self.sprite_draw_count = 0
        self.buffer_rebuilds = 0
        self._frame_count = 0

        self._mouse = (-1, -1)
        self._held: set[int] = set()
        self._held_last_frame: set[int] = set()

    # Display properties

    @property
    def sprite_width(self) -> int:
        return self._sprite_size

    @property
    def sprite_height(self) -> int:
        return self._sprite_size

    @property
    def display_width(self) -> int:
        return self._width

    @property
    def display_height(self) -> int:
        return self._height

    @property
    def frame_count(self) -> int:
        """Number of frames closed with end_frame()."""
        return self._frame_count

    # Frame bookkeeping

    def _blank_screen(self) -> list[list[str]]:
        return [[" " for _ in range(self.columns)] for _ in range(self.rows)]

    def begin_frame(self) -> None:
        """Clear the per-frame call log and screen view."""
        self.calls.clear()
        self.screen = self._blank_screen()
        self.sprite_draw_count = 0

    def end_frame(self) -> None:
        """Latch button state so the next frame can detect press edges."""
        self._held_last_frame = set(self._held)
        self._frame_count += 1

    # Display state

    def change_background_color(self, color_id: int) -> None:
        self.background_color = color_id

    def toggle_display_wrap(self, enabled: bool) -> None:
        self.display_wrap = enabled

    def rebuild_screen_buffer(self) -> None:
        """Reset the screen buffer layer to an empty backdrop."""
        self.buffer_text.clear()
        self.buffer_rebuilds += 1

    def draw_text_to_buffer(
        self,
        text: str,
        column: int,
        row: int,
        font_id: str = "large-font",
        palette_offset: int = 0,
    ) -> None:
        """Bake text into the screen buffer at a cell position."""
        self.buffer_text.append(TextCall(text, column, row, font_id, palette_offset))

    def draw_screen_buffer(self) -> None:
        """Copy the screen buffer onto the display, clearing the last frame."""
        self.screen = self._blank_screen()
        for call in self.buffer_text:
            self._write_text(call.x, call.y, call.text)

    def scroll_to(self, x: int, y: int) -> None:
        self.scroll = (x, y)

    # Drawing

    def draw_sprite(
        self,
        sprite_id: int,
        x: int,
        y: int,
        flip_x: bool = False,
        flip_y: bool = False,
        opaque: bool = True,
        palette_offset: int = 0,
    ) -> None:
        """Draw a single sprite cell."""
        self.draw_sprite_cells([sprite_id], x, y, 1, flip_x, flip_y, opaque, palette_offset)

    def draw_sprite_cells(
        self,
        cells: Sequence[int],
        x: int,
        y: int,
        grid_width: int,
        flip_x: bool = False,
        flip_y: bool = False,
        opaque: bool = True,
        palette_offset: int = 0,
    ) -> None:
        """Draw cells tiled into a grid, each cell counting as a draw call."""
        if self.sprite_count is not None:
            for sprite_id in cells:
                if not 0 <= sprite_id < self.sprite_count:
                    raise IndexError(
                        f"sprite {sprite_id} out of range (0-{self.sprite_count - 1})"
                    )

        self.calls.append(
            DrawCall(tuple(cells), x, y, grid_width, flip_x, flip_y, opaque, palette_offset)
        )
        for placement in place(cells, x, y, grid_width, self._sprite_size):
            self._plot(placement.x, placement.y, "#")
            self.sprite_draw_count += 1

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        font_id: str = "large-font",
        palette_offset: int = 0,
    ) -> None:
        """Draw text at a pixel position."""
        self.calls.append(TextCall(text, x, y, font_id, palette_offset))
        self._write_text(x // self._sprite_size, y // self._sprite_size, text)

    def _plot(self, x: int, y: int, char: str) -> None:
        column = x // self._sprite_size
        row = y // self._sprite_size
        if self.display_wrap:
            column %= self.columns
            row %= self.rows
        if 0 <= row < self.rows and 0 <= column < self.columns:
            self.screen[row][column] = char

    def _write_text(self, column: int, row: int, text: str) -> None:
        if row < 0 or row >= self.rows:
            return

        for i, char in enumerate(text):
            cx = column + i
            if 0 <= cx < self.columns:
                self.screen[row][cx] = char

    def get_screen_string(self) -> str:
        """Get the screen as a string."""
        return "\n".join("".join(row) for row in self.screen)

    # Pointer input

    @property
    def mouse_x(self) -> int:
        return self._mouse[0]

    @property
    def mouse_y(self) -> int:
        return self._mouse[1]

    def move_mouse(self, x: int, y: int) -> None:
        """Move the pointer. Positions off the display read back as (-1, -1)."""
        if 0 <= x < self._width and 0 <= y < self._height:
            self._mouse = (x, y)
        else:
            self._mouse = (-1, -1)

    def press_button(self, index: int) -> None:
        self._held.add(index)
        logger.debug("Mouse button %d pressed", index)

    def release_button(self, index: int) -> None:
        self._held.discard(index)

    def get_mouse_button(self, index: int) -> bool:
        return index in self._held

    def get_mouse_button_down(self, index: int) -> bool:
        return index in self._held and index not in self._held_last_frame

    # Inspection helpers

    def sprite_calls(self) -> list[DrawCall]:
        """Sprite draw requests made this frame."""
        return [call for call in self.calls if isinstance(call, DrawCall)]

    def text_calls(self) -> list[TextCall]:
        """Text draw requests made this frame."""
        return [call for call in self.calls if isinstance(call, TextCall)]
