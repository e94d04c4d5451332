"""Boundary radius sampling by marching rays through a rendered raster."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .raster import Raster
from .viewport import Viewport

RAY_LENGTH = 2.0


def bresenham_line(start: tuple[int, int], end: tuple[int, int]) -> Iterator[tuple[int, int]]:
    """Yield every pixel on the line from ``start`` to ``end``, both included."""

    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def ray_endpoint(viewport: Viewport, theta: float, length: float = RAY_LENGTH) -> tuple[int, int]:
    """Pixel at ``length * (cos theta, sin theta)``, clamped to the grid.

    Coordinates beyond the viewport saturate at the nearest edge pixel,
    so every pixel between the origin and the endpoint can be indexed.
    """

    theta = np.float32(theta)
    end = np.complex64(complex(np.float32(length) * np.cos(theta), np.float32(length) * np.sin(theta)))
    return viewport.clamp(viewport.to_pixel(end))


def radius_at(raster: Raster, theta: float) -> float:
    """Plane distance from the origin to the last interior pixel along ``theta``.

    The walk stops at the first exterior pixel, so only the run of
    interior pixels connected to the origin along the ray is measured.
    """

    viewport = raster.viewport
    origin = viewport.clamp(viewport.to_pixel(0j))
    end = ray_endpoint(viewport, theta)

    last_interior = origin
    for x, y in bresenham_line(origin, end):
        if not raster.is_interior(x, y):
            break
        last_interior = (x, y)

    radius = float(abs(viewport.to_complex(last_interior)))
    return min(max(radius, 0.0), RAY_LENGTH)
