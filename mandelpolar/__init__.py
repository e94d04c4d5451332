"""Public API for Mandelbrot boundary-radius utilities."""

from .config import PipelineConfig
from .pipeline import PipelineResult, render_raster, run
from .polar import PolarSamples, plot_polar, sample_radii
from .raster import Raster
from .renderer import classify, escape_counts, render_row
from .sampler import bresenham_line, radius_at, ray_endpoint
from .viewport import Viewport

__all__ = [
    "PipelineConfig",
    "PipelineResult",
    "PolarSamples",
    "Raster",
    "Viewport",
    "bresenham_line",
    "classify",
    "escape_counts",
    "plot_polar",
    "radius_at",
    "ray_endpoint",
    "render_raster",
    "render_row",
    "run",
    "sample_radii",
]
