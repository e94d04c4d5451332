"""Fixed render, sample and plot sequence."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import PipelineConfig
from .polar import PolarSamples, plot_polar, sample_radii
from .raster import Raster
from .renderer import render_row


@dataclass(frozen=True)
class PipelineResult:
    """Artifacts produced by :func:`run`."""

    raster: Raster
    samples: PolarSamples
    raster_path: Path
    plot_path: Path


def _render_and_store(raster: Raster, y: int, config: PipelineConfig) -> None:
    row = render_row(y, raster.viewport, config.bailout_iterations, config.bailout_radius)
    raster.write_row(y, row)


def render_raster(config: PipelineConfig) -> Raster:
    """Render every row concurrently and return the completed raster."""

    raster = Raster(config.viewport)
    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        futures = [pool.submit(_render_and_store, raster, y, config) for y in range(config.height)]
    for future in futures:
        future.result()

    if not raster.is_complete:
        raise RuntimeError(f"only {raster.rows_written} of {config.height} rows were rendered.")
    return raster


def run(config: PipelineConfig, log: Optional[Callable[[str], None]] = None) -> PipelineResult:
    """Render the set, save it, then derive and save the polar plot."""

    def _log(message: str) -> None:
        if log is not None:
            log(message)

    _log(f"Rendering {config.width}x{config.height} raster ({config.bailout_iterations} iterations)")
    raster = render_raster(config)

    raster_path = raster.save(config.raster_path)
    _log(f"Saved raster to {raster_path}")

    _log(f"Sampling boundary radius at {config.sample_count} angles")
    samples = sample_radii(raster, config.sample_count)

    plot_path = plot_polar(samples, config.plot_path, config.plot_size)
    _log(f"Saved polar plot to {plot_path}")

    return PipelineResult(raster=raster, samples=samples, raster_path=raster_path, plot_path=plot_path)
