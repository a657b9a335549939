"""Graphics module for BounceStack rendering."""

from bouncestack.graphics.primitives import draw_circle, draw_rect, fill, new_buffer
from bouncestack.graphics.surface import BufferSurface, Surface

__all__ = [
    "Surface",
    "BufferSurface",
    "draw_circle",
    "draw_rect",
    "fill",
    "new_buffer",
]
