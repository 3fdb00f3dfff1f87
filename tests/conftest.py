"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from pixel_demos.demos import DrawSpriteDemo, MouseDemo, TilemapDemo
from pixel_demos.engine import AnimationClock
from pixel_demos.renderer import HeadlessRenderer
from pixel_demos.types import SpriteCellGroup


class RecordingDemo:
    """Demo that records the order its lifecycle hooks are called in."""

    name = "recording"

    def __init__(self):
        self.events: list[str] = []
        self.deltas: list[float] = []

    def init(self) -> None:
        self.events.append("init")

    def update(self, dt: float) -> None:
        self.events.append("update")
        self.deltas.append(dt)

    def draw(self) -> None:
        self.events.append("draw")


@pytest.fixture
def renderer() -> HeadlessRenderer:
    """Create a headless renderer with an 8px sprite size."""
    return HeadlessRenderer(width=256, height=240, sprite_size=8)


@pytest.fixture
def shell_group() -> SpriteCellGroup:
    """First frame of the shell animation."""
    return SpriteCellGroup.of([0, 1, 6, 7], 2)


@pytest.fixture
def two_frame_clock() -> AnimationClock:
    """A clock cycling two frames at the reference threshold."""
    return AnimationClock(frame_count=2, threshold=0.09)


@pytest.fixture
def draw_sprite_demo(renderer) -> DrawSpriteDemo:
    """Create an initialized sprite drawing demo."""
    demo = DrawSpriteDemo(renderer)
    demo.init()
    return demo


@pytest.fixture
def tilemap_demo(renderer) -> TilemapDemo:
    """Create an initialized tilemap demo."""
    demo = TilemapDemo(renderer)
    demo.init()
    return demo


@pytest.fixture
def mouse_demo(renderer) -> MouseDemo:
    """Create an initialized mouse demo."""
    demo = MouseDemo(renderer)
    demo.init()
    return demo


@pytest.fixture
def recording_demo() -> RecordingDemo:
    """Create a demo that records its lifecycle calls."""
    return RecordingDemo()
