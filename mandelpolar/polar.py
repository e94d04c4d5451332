"""Radius-versus-angle sampling and chart output."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from matplotlib.figure import Figure

from .raster import Raster
from .sampler import RAY_LENGTH, radius_at

PLOT_DPI = 100


@dataclass(frozen=True)
class PolarSamples:
    """Boundary radius sampled at increasing angles in [0, 2*pi)."""

    thetas: np.ndarray
    radii: np.ndarray

    def __len__(self) -> int:
        return int(self.thetas.size)


def sample_radii(raster: Raster, count: int = 1000) -> PolarSamples:
    step = np.float32(2.0 * np.pi) / np.float32(count)
    thetas = step * np.arange(count, dtype=np.float32)
    radii = np.array([radius_at(raster, float(theta)) for theta in thetas], dtype=np.float32)
    return PolarSamples(thetas=thetas, radii=radii)


def plot_polar(samples: PolarSamples, path: str | Path, size: tuple[int, int] = (1280, 960)) -> Path:
    """Draw ``samples`` as a connected curve on linear axes and save it."""

    output_path = Path(path).expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    width, height = size
    fig = Figure(figsize=(width / PLOT_DPI, height / PLOT_DPI), dpi=PLOT_DPI, facecolor="white")
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(samples.thetas, samples.radii, color="red", linewidth=1.0)
    ax.set_xlim(0.0, 2.0 * np.pi)
    ax.set_ylim(0.0, RAY_LENGTH)
    ax.set_xlabel("theta (rad)")
    ax.set_ylabel("radius")
    ax.grid(True, color="0.85")
    fig.tight_layout(pad=0.5)
    fig.savefig(str(output_path), dpi=PLOT_DPI, facecolor="white")
    return output_path
