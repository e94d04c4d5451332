"""Shared pixel grid filled in by concurrent row tasks."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import numpy as np
import PIL.Image

from .viewport import Viewport


class Raster:
    """A ``height`` x ``width`` RGB grid behind a single coarse lock.

    Writers go through :meth:`writer` (or :meth:`write_row`, which uses
    it). Reads take no lock: callers only sample once every row has been
    written.

    The grid starts zero-filled, which reads as black (interior), so an
    unwritten pixel is not exterior; check :attr:`is_complete` before
    sampling.
    """

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport
        self._pixels = np.zeros((viewport.height, viewport.width, 3), dtype=np.uint8)
        self._written = np.zeros(viewport.height, dtype=bool)
        self._lock = threading.Lock()

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Raster":
        """Wrap a fully-populated ``(height, width, 3)`` uint8 array."""

        array = np.asarray(array, dtype=np.uint8)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"expected a (height, width, 3) array, got shape {array.shape}.")
        raster = cls(Viewport(width=array.shape[1], height=array.shape[0]))
        raster._pixels[...] = array
        raster._written[:] = True
        return raster

    @contextmanager
    def writer(self) -> Iterator[np.ndarray]:
        """Hold the grid lock and yield the pixel array for writing."""

        with self._lock:
            yield self._pixels

    def write_row(self, y: int, row: np.ndarray) -> None:
        row = np.asarray(row, dtype=np.uint8)
        if row.shape != (self.viewport.width, 3):
            raise ValueError(f"row {y} has shape {row.shape}, expected {(self.viewport.width, 3)}.")
        with self.writer() as pixels:
            if self._written[y]:
                raise ValueError(f"row {y} has already been written.")
            pixels[y, :, :] = row
            self._written[y] = True

    @property
    def rows_written(self) -> int:
        return int(np.count_nonzero(self._written))

    @property
    def is_complete(self) -> bool:
        return bool(self._written.all())

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the grid."""

        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def is_interior(self, x: int, y: int) -> bool:
        return not self._pixels[y, x].any()

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self._pixels)

    def save(self, path: str | Path) -> Path:
        output_path = Path(path).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self.to_image().save(str(output_path))
        return output_path
