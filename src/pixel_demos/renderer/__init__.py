"""Renderer package for pixel_demos."""

from __future__ import annotations

from .api import RenderApi
from .headless import HeadlessRenderer

__all__ = [
    "RenderApi",
    "HeadlessRenderer",
]
