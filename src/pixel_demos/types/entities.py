"""Position and direction types for demo state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """2D integer position owned by a single demo."""

    x: int = 0
    y: int = 0

    def copy(self) -> "Position":
        """Create a copy of this position."""
        return Position(self.x, self.y)

    def offset(self, dx: int, dy: int) -> None:
        """Move this position by (dx, dy) in place."""
        self.x += dx
        self.y += dy

    def label(self) -> str:
        """Format as "(x,y)" for on-screen text."""
        return f"({self.x},{self.y})"


# Scroll directions, indexed by direction index
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)
