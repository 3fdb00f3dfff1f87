"""Tests for the game loop and application."""

from __future__ import annotations

import time

import pytest

from pixel_demos.app import Application, GameLoop, main
from pixel_demos.demos import TilemapDemo


class TestGameLoop:
    """Tests for the host game loop."""

    def test_lifecycle_order(self, recording_demo, renderer):
        """Test init runs once, then update before draw every frame."""
        loop = GameLoop(demo=recording_demo, renderer=renderer)
        loop.tick(0.016)
        loop.tick(0.016)
        assert recording_demo.events == ["init", "update", "draw", "update", "draw"]
        assert loop.frames == 2

    def test_initialize_is_idempotent(self, recording_demo, renderer):
        """Test calling initialize twice only inits once."""
        loop = GameLoop(demo=recording_demo, renderer=renderer)
        loop.initialize()
        loop.initialize()
        assert recording_demo.events == ["init"]

    def test_tick_closes_renderer_frame(self, recording_demo, renderer):
        """Test each tick latches input on the renderer."""
        loop = GameLoop(demo=recording_demo, renderer=renderer)
        loop.tick(0.016)
        assert renderer.frame_count == 1

    def test_process_frame_caps_delta(self, recording_demo, renderer):
        """Test a stalled frame is capped at max_delta."""
        loop = GameLoop(demo=recording_demo, renderer=renderer, max_delta=0.25)
        loop.start()
        loop._last_time = time.perf_counter() - 5.0

        dt = loop.process_frame()
        assert dt == 0.25
        assert recording_demo.deltas == [0.25]

    def test_fps_tracking(self, recording_demo, renderer):
        """Test FPS is measured after a second of frames."""
        loop = GameLoop(demo=recording_demo, renderer=renderer)
        for _ in range(4):
            loop.tick(0.25)
        assert loop.fps == pytest.approx(4.0)

    def test_start_stop(self, recording_demo, renderer):
        """Test running flag."""
        loop = GameLoop(demo=recording_demo, renderer=renderer)
        loop.start()
        assert loop.is_running
        loop.stop()
        assert not loop.is_running

    def test_click_reaches_demo_through_loop(self, renderer):
        """Test a press edge seen by the loop changes scroll direction once."""
        demo = TilemapDemo(renderer)
        loop = GameLoop(demo=demo, renderer=renderer)

        renderer.press_button(0)
        loop.tick(1 / 60)
        loop.tick(1 / 60)
        renderer.release_button(0)
        loop.tick(1 / 60)
        assert demo.state.direction_index == 1

    @pytest.mark.asyncio
    async def test_run_async_stops_after_max_frames(self, recording_demo, renderer):
        """Test the async loop stops itself after max_frames."""
        loop = GameLoop(demo=recording_demo, renderer=renderer, target_fps=1000)
        await loop.run_async(max_frames=5)
        assert loop.frames == 5
        assert not loop.is_running


@pytest.mark.asyncio
class TestApplicationAsync:
    """Async tests for application."""

    async def test_initialize_loads_demo(self):
        """Test initialization creates and inits the demo."""
        app = Application(demo_name="draw-sprite")
        await app.initialize()
        assert app.demo.name == "draw-sprite"
        assert app.renderer.display_wrap is True
        assert len(app.renderer.buffer_text) == 2

    async def test_run_stops_after_frames(self):
        """Test the app runs the requested number of frames."""
        app = Application(demo_name="tilemap", target_fps=1000, max_frames=3)
        await app.run()
        assert app.game_loop.frames == 3
        assert app.demo.state.position.x == 3
        assert "Scroll (3,0)" in app.screen()

    async def test_unknown_demo_raises(self):
        """Test an unknown demo fails at initialization."""
        app = Application(demo_name="missing")
        with pytest.raises(ValueError):
            await app.initialize()


class TestApplication:
    """Tests for the application entry point."""

    def test_screen_before_init_is_empty(self):
        """Test the screen view needs a renderer."""
        assert Application().screen() == ""

    def test_main_runs_demo(self, capsys):
        """Test the CLI runs a demo and prints its screen."""
        main(["--demo", "tilemap", "--frames", "2", "--fps", "1000"])
        out = capsys.readouterr().out
        assert "Scroll (2,0)" in out

    def test_main_rejects_unknown_demo(self):
        """Test the CLI only accepts registered demos."""
        with pytest.raises(SystemExit):
            main(["--demo", "nope"])
