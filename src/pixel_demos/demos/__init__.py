"""Demo package."""

from __future__ import annotations

from .base import Demo
from .draw_sprite import DrawSpriteConfig, DrawSpriteDemo, ShellMotion
from .tilemap import ScrollState, TilemapConfig, TilemapDemo
from .mouse import MouseConfig, MouseDemo
from .demo_loader import DemoLoader

__all__ = [
    "Demo",
    "DrawSpriteConfig",
    "DrawSpriteDemo",
    "ShellMotion",
    "ScrollState",
    "TilemapConfig",
    "TilemapDemo",
    "MouseConfig",
    "MouseDemo",
    "DemoLoader",
]
