import numpy as np
import pytest

from mandelpolar import PipelineConfig, Raster, Viewport


@pytest.fixture
def small_config(tmp_path):
    return PipelineConfig(
        width=32,
        height=24,
        bailout_iterations=60,
        sample_count=90,
        raster_path=str(tmp_path / "set.png"),
        plot_path=str(tmp_path / "plot.png"),
        plot_size=(640, 480),
        max_workers=4,
    )


def filled_raster(width, height, value):
    return Raster.from_array(np.full((height, width, 3), value, dtype=np.uint8))


@pytest.fixture
def black_raster():
    return filled_raster(64, 64, 0)


@pytest.fixture
def white_raster():
    return filled_raster(64, 64, 255)


@pytest.fixture
def wide_viewport():
    return Viewport(width=64, height=48)
