"""Graphics module for flapcore rendering."""

from flapcore.graphics.renderer import FrameRenderer, Palette
from flapcore.graphics.primitives import draw_rect, draw_circle, fill, new_buffer

__all__ = [
    "FrameRenderer",
    "Palette",
    "draw_rect",
    "draw_circle",
    "fill",
    "new_buffer",
]
