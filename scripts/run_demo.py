#!/usr/bin/env python3
"""Step through every demo in headless mode and print what it drew."""

import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pixel_demos.app import GameLoop
from pixel_demos.demos import DemoLoader
from pixel_demos.renderer import HeadlessRenderer


def print_frame(title, renderer):
    """Print the draw requests and screen view of the last frame."""
    print("\n" + "=" * 60)
    print(title)
    print(f"Sprite draw calls: {renderer.sprite_draw_count}")
    for call in renderer.text_calls():
        print(f"  text {call.text!r} at ({call.x},{call.y})")
    print(f"Scroll: {renderer.scroll}")
    print("Screen Preview:")
    print("-" * 40)
    for line in renderer.get_screen_string().split("\n")[:12]:
        print(line)
    print("-" * 40)


def run_demo():
    """Run each demo for a few frames, poking the mouse along the way."""
    loader = DemoLoader()

    for name in loader.available_demos:
        renderer = HeadlessRenderer()
        loop = GameLoop(demo=loader.load(name, renderer), renderer=renderer)

        for frame in range(30):
            if frame == 10:
                renderer.move_mouse(40, 60)
                renderer.press_button(0)
            elif frame == 11:
                renderer.release_button(0)
            loop.tick(1 / 60)

        print_frame(f"[{name}] after {loop.frames} frames", renderer)


def main():
    """Main entry point."""
    run_demo()


if __name__ == "__main__":
    main()
