"""
Drawing surfaces the game renders into.

The game only needs to clear, draw circles and draw rectangles. A surface
also keeps the cumulative camera offset: each shift moves the camera up,
so world content is drawn that much further down the screen.
"""

from abc import ABC, abstractmethod
import logging

from bouncestack.graphics.primitives import (
    Buffer, Color, draw_circle, draw_rect, fill, new_buffer
)

logger = logging.getLogger(__name__)


class Surface(ABC):
    """Abstract render target."""

    def __init__(self) -> None:
        self._camera_offset = 0.0

    @property
    def camera_offset(self) -> float:
        """Total camera travel so far, in world units."""
        return self._camera_offset

    def shift_camera(self, offset: float) -> None:
        """Move the camera up by offset for all future draws."""
        self._camera_offset += offset
        logger.debug(f"Camera offset now {self._camera_offset}")

    def to_screen_y(self, y: float) -> float:
        return y + self._camera_offset

    @abstractmethod
    def clear_surface(self, width: float, height: float, color: Color = (0, 0, 0)) -> None:
        """Clear the given area."""
        ...

    @abstractmethod
    def draw_circle(self, x: float, y: float, r: float, color: Color) -> None:
        """Draw a filled circle centered at world (x, y)."""
        ...

    @abstractmethod
    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """Draw a filled rectangle with its top-left corner at world (x, y)."""
        ...


class BufferSurface(Surface):
    """Surface backed by an RGB numpy buffer."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = width
        self._height = height
        self._buffer = new_buffer(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> Buffer:
        """Live buffer. Copy it if you need to keep a frame."""
        return self._buffer

    def clear_surface(self, width: float, height: float, color: Color = (0, 0, 0)) -> None:
        if width >= self._width and height >= self._height:
            fill(self._buffer, color)
        else:
            draw_rect(self._buffer, 0, 0, round(width), round(height), color)

    def draw_circle(self, x: float, y: float, r: float, color: Color) -> None:
        draw_circle(self._buffer, round(x), round(self.to_screen_y(y)), round(r), color)

    def draw_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        draw_rect(
            self._buffer,
            round(x),
            round(self.to_screen_y(y)),
            round(w),
            round(h),
            color,
        )
