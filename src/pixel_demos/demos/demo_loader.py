"""Demo loading and management."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from pixel_demos.renderer.api import RenderApi

from .base import Demo
from .draw_sprite import DrawSpriteConfig, DrawSpriteDemo
from .mouse import MouseConfig, MouseDemo
from .tilemap import TilemapConfig, TilemapDemo

DemoFactory = Callable[[RenderApi, Any], Demo]


class DemoLoader:
    """Creates demos by name."""

    def __init__(self):
        """Initialize the demo loader."""
        self._demo_factories: Dict[str, DemoFactory] = {
            "draw-sprite": DrawSpriteDemo,
            "tilemap": TilemapDemo,
            "mouse": MouseDemo,
        }
        self._configs: Dict[str, Any] = {
            "draw-sprite": DrawSpriteConfig(),
            "tilemap": TilemapConfig(),
            "mouse": MouseConfig(),
        }

    @property
    def available_demos(self) -> list[str]:
        """Get list of available demo names.

        Returns:
            List of demo names.
        """
        return list(self._demo_factories.keys())

    def load(
        self,
        demo_name: str,
        api: RenderApi,
        config: Optional[Any] = None,
    ) -> Demo:
        """Create a demo by name.

        Args:
            demo_name: Name of the demo to load.
            api: Renderer the demo will draw through.
            config: Optional configuration override. Defaults to the config
                registered under demo_name.

        Returns:
            The demo, not yet initialized.

        Raises:
            ValueError: If demo name is not found.
        """
        if demo_name not in self._demo_factories:
            raise ValueError(
                f"Unknown demo: {demo_name}. "
                f"Available: {', '.join(self.available_demos)}"
            )

        factory = self._demo_factories[demo_name]
        if config is None:
            config = self._configs[demo_name]
        return factory(api, config)

    def get_config(self, demo_name: str) -> Any:
        """Get the default configuration for a demo.

        Args:
            demo_name: Name of the demo.

        Returns:
            Demo configuration.

        Raises:
            ValueError: If demo name is not found.
        """
        if demo_name not in self._configs:
            raise ValueError(f"Unknown demo: {demo_name}")

        return self._configs[demo_name]

    def register_demo(
        self,
        name: str,
        factory: DemoFactory,
        config: Any,
    ) -> None:
        """Register a new demo.

        Args:
            name: Demo name.
            factory: Callable taking (api, config) and returning a Demo.
            config: Default configuration for the demo.
        """
        self._demo_factories[name] = factory
        self._configs[name] = config
