"""Main application entry point."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from pixel_demos.demos import Demo, DemoLoader
from pixel_demos.renderer.headless import HeadlessRenderer

from .game_loop import GameLoop

logger = logging.getLogger(__name__)


class Application:
    """Runs one demo against the headless renderer."""

    def __init__(
        self,
        demo_name: str = "draw-sprite",
        target_fps: int = 60,
        width: int = 256,
        height: int = 240,
        sprite_size: int = 8,
        max_frames: Optional[int] = None,
    ):
        """Initialize the application.

        Args:
            demo_name: Name of demo to load.
            target_fps: Target frames per second.
            width: Display width in pixels.
            height: Display height in pixels.
            sprite_size: Sprite cell size in pixels.
            max_frames: Frames to run before exiting. None runs until stopped.
        """
        self.demo_name = demo_name
        self.target_fps = target_fps
        self.width = width
        self.height = height
        self.sprite_size = sprite_size
        self.max_frames = max_frames

        # Components (created in initialize)
        self.renderer: Optional[HeadlessRenderer] = None
        self.demo: Optional[Demo] = None
        self.game_loop: Optional[GameLoop] = None

        self._initialized = False

    async def initialize(self) -> None:
        """Initialize all application components."""
        if self._initialized:
            return

        self.renderer = HeadlessRenderer(
            width=self.width,
            height=self.height,
            sprite_size=self.sprite_size,
        )

        loader = DemoLoader()
        self.demo = loader.load(self.demo_name, self.renderer)

        self.game_loop = GameLoop(
            demo=self.demo,
            renderer=self.renderer,
            target_fps=self.target_fps,
        )
        self.game_loop.initialize()

        self._initialized = True

    async def run(self) -> None:
        """Run the demo until stopped or max_frames is reached."""
        await self.initialize()

        try:
            await self.game_loop.run_async(max_frames=self.max_frames)
        finally:
            self.game_loop.stop()

    def stop(self) -> None:
        """Stop the application."""
        if self.game_loop is not None:
            self.game_loop.stop()

    def screen(self) -> str:
        """Debug view of the last frame."""
        if self.renderer is None:
            return ""
        return self.renderer.get_screen_string()


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    import argparse

    loader = DemoLoader()

    parser = argparse.ArgumentParser(description="Pixel Demos - sprite and scroll samples")
    parser.add_argument(
        "--demo",
        default="draw-sprite",
        choices=loader.available_demos,
        help="Demo to run",
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=120,
        help="Frames to run before exiting",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target FPS",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=256,
        help="Display width in pixels",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=240,
        help="Display height in pixels",
    )
    parser.add_argument(
        "--sprite-size",
        type=int,
        default=8,
        help="Sprite cell size in pixels",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Application(
        demo_name=args.demo,
        target_fps=args.fps,
        width=args.width,
        height=args.height,
        sprite_size=args.sprite_size,
        max_frames=args.frames,
    )

    asyncio.run(app.run())
    print(app.screen())


if __name__ == "__main__":
    main()
