"""Interface the demos use to reach the rendering and input engine."""

from __future__ import annotations

from typing import Protocol, Sequence


class RenderApi(Protocol):
    """Sprite, font, display and pointer capabilities of the host engine.

    Demos receive an implementation in their constructor and never look one
    up globally. Sprite cells are fixed-size tiles addressed by integer ID.
    """

    @property
    def sprite_width(self) -> int: ...

    @property
    def sprite_height(self) -> int: ...

    @property
    def display_width(self) -> int: ...

    @property
    def display_height(self) -> int: ...

    @property
    def mouse_x(self) -> int:
        """Pointer x, or -1 when off the display."""
        ...

    @property
    def mouse_y(self) -> int:
        """Pointer y, or -1 when off the display."""
        ...

    def draw_sprite(
        self,
        sprite_id: int,
        x: int,
        y: int,
        flip_x: bool = False,
        flip_y: bool = False,
        opaque: bool = True,
        palette_offset: int = 0,
    ) -> None: ...

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
    ) -> None: ...

    def draw_text(
        self,
        text: str,
        x: int,
        y: int,
        font_id: str = "large-font",
        palette_offset: int = 0,
    ) -> None: ...

    def draw_text_to_buffer(
        self,
        text: str,
        column: int,
        row: int,
        font_id: str = "large-font",
        palette_offset: int = 0,
    ) -> None: ...

    def change_background_color(self, color_id: int) -> None: ...

    def toggle_display_wrap(self, enabled: bool) -> None: ...

    def rebuild_screen_buffer(self) -> None: ...

    def draw_screen_buffer(self) -> None: ...

    def scroll_to(self, x: int, y: int) -> None: ...

    def get_mouse_button(self, index: int) -> bool:
        """True while the button is held."""
        ...

    def get_mouse_button_down(self, index: int) -> bool:
        """True only on the frame the button went down."""
        ...
