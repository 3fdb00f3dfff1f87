"""Lifecycle contract shared by every demo."""

from __future__ import annotations

from typing import Protocol


class Demo(Protocol):
    """A demo driven by the host loop.

    The host calls init() once, then update(dt) and draw() every frame in
    that order. Only update() mutates demo state; draw() just issues
    requests to the renderer.
    """

    name: str

    def init(self) -> None: ...

    def update(self, dt: float) -> None: ...

    def draw(self) -> None: ...
