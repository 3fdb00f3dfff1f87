"""Game loop that drives a demo's init/update/draw lifecycle."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pixel_demos.demos import Demo
    from pixel_demos.renderer.headless import HeadlessRenderer

logger = logging.getLogger(__name__)


class GameLoop:
    """Main game loop that calls a demo's lifecycle hooks once per frame."""

    def __init__(
        self,
        demo: Demo,
        renderer: HeadlessRenderer,
        target_fps: int = 60,
        max_delta: float = 0.25,
    ):
        """Initialize the game loop.

        Args:
            demo: The demo to run.
            renderer: The renderer the demo draws through.
            target_fps: Target frames per second.
            max_delta: Upper bound on the delta time passed to update().
        """
        self.demo = demo
        self.renderer = renderer
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.max_delta = max_delta

        self._running = False
        self._initialized = False
        self._last_time = 0.0
        self._frames = 0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0

    def initialize(self) -> None:
        """Call the demo's init() hook. Runs only once."""
        if self._initialized:
            return

        self.demo.init()
        self._initialized = True
        logger.info("Initialized demo %s", self.demo.name)

    def tick(self, dt: float) -> None:
        """Process a single frame: update, then draw.

        Args:
            dt: Delta time in seconds.
        """
        self.initialize()

        self.renderer.begin_frame()
        self.demo.update(dt)
        self.demo.draw()
        self.renderer.end_frame()
        self._frames += 1

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

    def start(self) -> None:
        """Start the game loop."""
        self._running = True
        self._last_time = time.perf_counter()
        logger.info("Game loop started at %d fps", self.target_fps)

    def stop(self) -> None:
        """Stop the game loop."""
        if self._running:
            logger.info("Game loop stopped after %d frames", self._frames)
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running.

        Returns:
            True if running.
        """
        return self._running

    @property
    def frames(self) -> int:
        """Total frames processed."""
        return self._frames

    @property
    def fps(self) -> float:
        """Get current FPS.

        Returns:
            Current frames per second.
        """
        return self._fps

    def process_frame(self) -> float:
        """Process a single frame with timing.

        Returns:
            The delta time passed to the demo.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        # Cap delta time to prevent spiral of death
        if dt > self.max_delta:
            dt = self.max_delta

        self.tick(dt)

        return dt

    async def run_async(self, max_frames: Optional[int] = None) -> None:
        """Run the game loop asynchronously.

        Args:
            max_frames: Stop after this many frames. None runs until stop().
        """
        import asyncio

        self.start()
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()
            if max_frames is not None and self._frames >= max_frames:
                self.stop()
                break

            # Calculate sleep time to maintain target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            if sleep_time > 0:
                await asyncio.sleep(sleep_time)
