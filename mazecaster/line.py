"""Straight lines drawn with Bresenham's algorithm."""

from __future__ import annotations

from collections.abc import Sequence

from mazecaster.framebuffer import Framebuffer


def line(fb: Framebuffer, start: Sequence[float], end: Sequence[float]) -> None:
    """Draw a line from ``start`` to ``end`` in the framebuffer's current colour.

    Both end points are included; pixels outside the buffer are skipped.
    """
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])

    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        fb.set_pixel_current(x0, y0)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy