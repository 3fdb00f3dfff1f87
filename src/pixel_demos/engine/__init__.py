"""Animation core for pixel_demos."""

from __future__ import annotations

from .math_util import repeat
from .clock import AnimationClock, advance, DEFAULT_FRAME_THRESHOLD
from .composite import place, place_group, draw_group

__all__ = [
    "repeat",
    "AnimationClock",
    "advance",
    "DEFAULT_FRAME_THRESHOLD",
    "place",
    "place_group",
    "draw_group",
]
