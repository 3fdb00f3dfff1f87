"""Type definitions for pixel_demos."""

from .errors import InvalidArgument
from .entities import (
    Position,
    DIRECTIONS,
)
from .sprites import (
    SpriteCellGroup,
    Placement,
    DrawCall,
    TextCall,
)

__all__ = [
    # Errors
    "InvalidArgument",
    # Entities
    "Position",
    "DIRECTIONS",
    # Sprites
    "SpriteCellGroup",
    "Placement",
    "DrawCall",
    "TextCall",
]
