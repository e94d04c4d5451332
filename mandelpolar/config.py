"""Parameter bundle for a boundary-radius run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .viewport import Viewport


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class PipelineConfig:
    """Parameters shared by every stage of the pipeline."""

    width: int = 3960
    height: int = 2160
    bailout_radius: float = 2.0
    bailout_iterations: int = 1000
    sample_count: int = 1000
    raster_path: str = "output_set.png"
    plot_path: str = "output_plot.png"
    plot_size: tuple[int, int] = (1280, 960)
    max_workers: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "bailout_iterations", "sample_count"):
            value = getattr(self, name)
            if not _is_positive_int(value):
                raise ValueError(f"{name} must be a positive integer, got {value!r}.")
        if not self.bailout_radius > 0:
            raise ValueError(f"bailout_radius must be positive, got {self.bailout_radius!r}.")
        if len(self.plot_size) != 2 or not all(_is_positive_int(v) for v in self.plot_size):
            raise ValueError(f"plot_size must be two positive integers, got {self.plot_size!r}.")
        if self.max_workers is not None and not _is_positive_int(self.max_workers):
            raise ValueError(f"max_workers must be positive, got {self.max_workers!r}.")

    @property
    def viewport(self) -> Viewport:
        return Viewport(width=self.width, height=self.height)
