"""Mapping between raster pixels and the complex-plane viewport."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Viewport:
    """A raster of ``width`` x ``height`` pixels over the complex plane.

    The horizontal extent is [-2, 2]; the vertical extent is scaled by
    ``height / width`` so pixels stay square. All arithmetic is float32.
    """

    width: int
    height: int

    @property
    def aspect(self) -> np.float32:
        return np.float32(self.height) / np.float32(self.width)

    @property
    def half_width(self) -> np.float32:
        return np.float32(2.0)

    @property
    def half_height(self) -> np.float32:
        return np.float32(2.0) * self.aspect

    def to_pixel(self, c: complex) -> tuple[int, int]:
        """Map ``c`` to pixel space, truncating and saturating at zero.

        No upper bound check is done: points on or beyond the right or
        bottom edge map to ``width`` / ``height`` or further.
        """

        c = np.complex64(c)
        w = np.float32(self.width)
        h = np.float32(self.height)
        x = (c.real / np.float32(2.0) + np.float32(1.0)) / np.float32(2.0) * w
        y = (np.float32(1.0) - (c.imag / (np.float32(2.0) * h / w) + np.float32(1.0)) / np.float32(2.0)) * h
        return max(int(x), 0), max(int(y), 0)

    def to_complex(self, pixel: tuple[int, int]) -> np.complex64:
        x, y = pixel
        w = np.float32(self.width)
        h = np.float32(self.height)
        re = np.float32(2.0) * (np.float32(x) / w * np.float32(2.0) - np.float32(1.0))
        im = np.float32(2.0) * h / w * ((np.float32(1.0) - np.float32(y) / h) * np.float32(2.0) - np.float32(1.0))
        return np.complex64(complex(re, im))

    def row_to_complex(self, y: int) -> np.ndarray:
        """Complex points for every pixel of row ``y``, left to right."""

        w = np.float32(self.width)
        h = np.float32(self.height)
        xs = np.arange(self.width, dtype=np.float32)
        re = np.float32(2.0) * (xs / w * np.float32(2.0) - np.float32(1.0))
        im = np.float32(2.0) * h / w * ((np.float32(1.0) - np.float32(y) / h) * np.float32(2.0) - np.float32(1.0))
        points = np.empty(self.width, dtype=np.complex64)
        points.real = re
        points.imag = im
        return points

    def contains(self, pixel: tuple[int, int]) -> bool:
        x, y = pixel
        return 0 <= x < self.width and 0 <= y < self.height

    def clamp(self, pixel: tuple[int, int]) -> tuple[int, int]:
        x, y = pixel
        return min(max(x, 0), self.width - 1), min(max(y, 0), self.height - 1)
