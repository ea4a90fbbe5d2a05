"""An in-memory RGBA pixel buffer that the renderers draw into."""

from __future__ import annotations

from typing import ClassVar, NamedTuple

from PIL import Image


class Color(NamedTuple):
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    SKYBLUE: ClassVar[Color]
    DARKGREEN: ClassVar[Color]


Color.WHITE = Color(255, 255, 255, 255)
Color.BLACK = Color(0, 0, 0, 255)
Color.RED = Color(230, 41, 55, 255)
Color.GREEN = Color(0, 228, 48, 255)
Color.BLUE = Color(0, 121, 241, 255)
Color.YELLOW = Color(253, 249, 0, 255)
Color.SKYBLUE = Color(102, 191, 255, 255)
Color.DARKGREEN = Color(0, 117, 44, 255)


class Framebuffer:
    """A fixed-size grid of RGBA pixels.

    Writes outside the buffer are silently ignored; reads outside it return
    the background colour.
    """

    def __init__(self, width: int, height: int, background_color: Color) -> None:
        if width < 0 or height < 0:
            raise ValueError("framebuffer dimensions must not be negative")
        self.width = width
        self.height = height
        self.background_color = Color(*background_color)
        self.current_color = Color.WHITE
        self._pixels = bytearray()
        self.clear()

    def clear(self) -> None:
        """Fill the whole buffer with the background colour."""
        self._pixels = bytearray(bytes(self.background_color) * (self.width * self.height))

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint one pixel with ``color`` if it lies inside the buffer."""
        if self._in_bounds(x, y):
            offset = (y * self.width + x) * 4
            self._pixels[offset:offset + 4] = bytes(color)

    def set_pixel_current(self, x: int, y: int) -> None:
        """Paint one pixel with the current drawing colour."""
        self.set_pixel(x, y, self.current_color)

    def get_color(self, x: int, y: int) -> Color:
        """Return the colour at ``(x, y)``, or the background colour outside."""
        if self._in_bounds(x, y):
            offset = (y * self.width + x) * 4
            return Color(*self._pixels[offset:offset + 4])
        return self.background_color

    def to_image(self) -> Image.Image:
        """Return a copy of the buffer as an RGBA image."""
        return Image.frombytes("RGBA", (self.width, self.height), bytes(self._pixels))