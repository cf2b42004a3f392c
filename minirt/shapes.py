"""RGBA pixel images and rasterisation of lines and circles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from minirt.utils import Color

BPP = 4
"""Bytes per pixel: red, green, blue, alpha."""


@dataclass(slots=True)
class Pixel:
    """A screen position with depth values and a colour."""

    x: int
    y: int
    color: Color = field(default_factory=Color)
    z: float = 1.0
    w: float = 1.0


@dataclass(slots=True)
class Image:
    """A width x height buffer of RGBA bytes, row by row."""

    width: int
    height: int
    pixels: Optional[bytearray] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        size = self.width * self.height * BPP
        if self.pixels is None:
            self.pixels = bytearray(size)
        elif len(self.pixels) != size:
            raise ValueError(f"pixel buffer must hold {size} bytes")

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (self.width * y + x) * BPP

    def get_pixel(self, x: int, y: int) -> Pixel:
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        return Pixel(x, y, Color(*self.pixels[offset:offset + BPP]))

    def set_pixel(self, pixel: Pixel) -> None:
        """Write the pixel's colour; positions outside the image are ignored."""
        if not self._contains(pixel.x, pixel.y):
            return
        offset = self._offset(pixel.x, pixel.y)
        color = pixel.color
        self.pixels[offset:offset + BPP] = bytes((color.r, color.g, color.b, color.a))


def fraction(p: Pixel, p1: Pixel, p2: Pixel) -> float:
    """How far ``p`` lies from ``p1`` towards ``p2`` along the major axis."""
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    if abs(dx) > abs(dy):
        return (p.x - p1.x) / dx if dx else 0.0
    return (p.y - p1.y) / dy if dy else 0.0


def interpolate_color(p: Pixel, p1: Pixel, p2: Pixel) -> Color:
    """The colour at ``p`` on a gradient from ``p1`` to ``p2``."""
    return p1.color.lerp(p2.color, fraction(p, p1, p2))


def _line_visible(image: Image, p1: Pixel, p2: Pixel) -> bool:
    if p1.w <= 0 or p2.w <= 0 or p1.z <= 0 or p2.z <= 0:
        return False
    return image._contains(p1.x, p1.y) and image._contains(p2.x, p2.y)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _straight(x: int, y: int, dx: int, dy: int, sx: int, sy: int) -> Iterator[tuple[int, int]]:
    steps = dy if dx == 0 else dx
    for _ in range(steps):
        if dx == 0:
            y += sy
        if dy == 0:
            x += sx
        yield x, y


def _x_major(x: int, y: int, dx: int, dy: int, sx: int, sy: int) -> Iterator[tuple[int, int]]:
    c = 2 * dy - dx
    for _ in range(dx):
        x += sx
        if c < 0:
            c += 2 * dy
        else:
            y += sy
            c += 2 * dy - 2 * dx
        yield x, y


def _y_major(x: int, y: int, dx: int, dy: int, sx: int, sy: int) -> Iterator[tuple[int, int]]:
    c = 2 * dx - dy
    for _ in range(dy):
        y += sy
        if c < 0:
            c += 2 * dx
        else:
            x += sx
            c += 2 * dx - 2 * dy
        yield x, y


def draw_line(image: Image, p1: Pixel, p2: Pixel) -> None:
    """Draw a colour-graded line from ``p1`` (exclusive) to ``p2`` (inclusive).

    Nothing is drawn unless both ends lie inside the image and have positive
    depth values.
    """
    if not _line_visible(image, p1, p2):
        return
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    sx, sy = _sign(dx), _sign(dy)
    dx, dy = abs(dx), abs(dy)
    if dx == 0 or dy == 0:
        walker = _straight
    elif dy < dx:
        walker = _x_major
    else:
        walker = _y_major
    for x, y in walker(p1.x, p1.y, dx, dy, sx, sy):
        pix = Pixel(x, y)
        pix.color = interpolate_color(pix, p1, p2)
        image.set_pixel(pix)


def _octants(cx: int, cy: int, px: int, py: int) -> Iterator[tuple[int, int]]:
    yield cx + px, cy + py
    yield cx - px, cy + py
    yield cx + px, cy - py
    yield cx - px, cy - py
    yield cx + py, cy + px
    yield cx - py, cy + px
    yield cx + py, cy - px
    yield cx - py, cy - px


def draw_circle(image: Image, center: Pixel, radius: int) -> None:
    """Draw a circle outline in the centre pixel's colour."""
    if radius < 0:
        raise ValueError("radius must not be negative")

    def plot(px: int, py: int) -> None:
        for x, y in _octants(center.x, center.y, px, py):
            image.set_pixel(Pixel(x, y, center.color))

    px, py = 0, radius
    d = 3 - 2 * radius
    plot(px, py)
    while py >= px:
        if d > 0:
            py -= 1
            d += 4 * (px - py) + 10
        else:
            d += 4 * px + 6
        px += 1
        plot(px, py)