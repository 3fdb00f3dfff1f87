"""Fixed-threshold animation clock."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from pixel_demos.types import InvalidArgument

from .math_util import repeat

logger = logging.getLogger(__name__)

DEFAULT_FRAME_THRESHOLD = 0.09  # seconds


@dataclass
class AnimationClock:
    """Accumulates frame time and cycles through frame_count frames."""

    frame_count: int
    threshold: float = DEFAULT_FRAME_THRESHOLD
    frame_index: int = 0
    accumulated_time: float = 0.0

    def __post_init__(self):
        if self.frame_count <= 0:
            raise InvalidArgument(f"frame_count must be positive, got {self.frame_count}")
        if self.threshold <= 0:
            raise InvalidArgument(f"threshold must be positive, got {self.threshold}")
        if not 0 <= self.frame_index < self.frame_count:
            raise InvalidArgument(
                f"frame_index must be in [0, {self.frame_count}), got {self.frame_index}"
            )
        if not 0 <= self.accumulated_time <= self.threshold:
            raise InvalidArgument(
                f"accumulated_time must be in [0, {self.threshold}], got {self.accumulated_time}"
            )

    def tick(self, dt: float) -> bool:
        """Advance this clock in place by dt seconds.

        At most one frame is advanced per call, however large dt is.

        Args:
            dt: Delta time in seconds.

        Returns:
            True if the frame index changed.
        """
        # Written so NaN fails too
        if not dt >= 0:
            raise InvalidArgument(f"delta time must be a non-negative number, got {dt}")

        self.accumulated_time += dt
        if self.accumulated_time > self.threshold:
            # One step per call even when dt spans several thresholds
            self.frame_index = repeat(self.frame_index + 1, self.frame_count)
            self.accumulated_time = 0.0
            logger.debug("Animation advanced to frame %d", self.frame_index)
            return True
        return False

    def copy(self) -> "AnimationClock":
        """Create a copy of this clock."""
        return replace(self)


def advance(clock: AnimationClock, dt: float) -> AnimationClock:
    """Return a new clock advanced by dt seconds, leaving clock untouched.

    Args:
        clock: The clock to advance.
        dt: Delta time in seconds.

    Returns:
        The advanced clock.
    """
    advanced = clock.copy()
    advanced.tick(dt)
    return advanced
