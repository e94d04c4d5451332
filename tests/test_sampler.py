import numpy as np
import pytest

from mandelpolar import Raster, Viewport, bresenham_line, radius_at, ray_endpoint

from conftest import filled_raster


def _steps_are_adjacent(points):
    return all(
        max(abs(x1 - x0), abs(y1 - y0)) == 1
        for (x0, y0), (x1, y1) in zip(points, points[1:])
    )


@pytest.mark.parametrize(
    "start,end,length",
    [
        ((0, 0), (5, 2), 6),
        ((5, 2), (0, 0), 6),
        ((0, 0), (2, 7), 8),
        ((4, 4), (0, 9), 6),
        ((2, 0), (2, 4), 5),
        ((6, 3), (1, 3), 6),
    ],
)
def test_line_visits_every_pixel_in_order(start, end, length):
    points = list(bresenham_line(start, end))
    assert points[0] == start
    assert points[-1] == end
    assert len(points) == length
    assert _steps_are_adjacent(points)


def test_degenerate_line_is_single_pixel():
    assert list(bresenham_line((3, 3), (3, 3))) == [(3, 3)]


def test_horizontal_line():
    assert list(bresenham_line((1, 2), (4, 2))) == [(1, 2), (2, 2), (3, 2), (4, 2)]


@pytest.mark.parametrize("width,height", [(4, 4), (64, 48), (160, 90), (30, 60)])
def test_ray_endpoints_stay_on_the_grid(width, height):
    viewport = Viewport(width=width, height=height)
    for theta in np.linspace(0.0, 2.0 * np.pi, 73):
        end = ray_endpoint(viewport, float(theta))
        assert viewport.contains(end)


def test_ray_leaving_the_top_edge_saturates_at_row_zero():
    viewport = Viewport(width=396, height=216)
    # 2 * (cos 1, sin 1) = (1.0806, 1.6829), above the 1.0909 vertical half-extent
    assert ray_endpoint(viewport, 1.0) == (304, 0)

    radius = radius_at(filled_raster(396, 216, 0), 1.0)
    assert radius == pytest.approx(float(abs(viewport.to_complex((304, 0)))))
    assert radius == pytest.approx(1.5286, abs=1e-3)


def test_small_black_raster_reaches_the_edge():
    radius = radius_at(filled_raster(4, 4, 0), 0.0)
    assert 1.0 <= radius <= 2.0


def test_black_raster_radius_is_close_to_ray_length(black_raster):
    assert radius_at(black_raster, 0.0) == pytest.approx(2.0, abs=4.0 / 64 + 1e-6)
    assert radius_at(black_raster, np.pi) == pytest.approx(2.0, abs=1e-6)


def test_white_raster_radius_is_origin(white_raster):
    assert radius_at(white_raster, 0.0) == pytest.approx(0.0, abs=1e-6)
    assert radius_at(filled_raster(4, 4, 255), 0.0) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("theta", np.linspace(0.0, 2.0 * np.pi, 50, endpoint=False))
def test_radius_is_within_chart_range(black_raster, theta):
    assert 0.0 <= radius_at(black_raster, float(theta)) <= 2.0


def _ray_raster(viewport, theta, interior):
    path = list(bresenham_line(viewport.to_pixel(0j), ray_endpoint(viewport, theta)))
    array = np.full((viewport.height, viewport.width, 3), 255, dtype=np.uint8)
    for index in interior:
        x, y = path[index]
        array[y, x] = 0
    return Raster.from_array(array), path


@pytest.mark.parametrize("theta", [0.0, 1.0, 2.5, 4.0])
@pytest.mark.parametrize("k", [1, 5, 12])
def test_radius_stops_at_boundary_transition(wide_viewport, theta, k):
    raster, path = _ray_raster(wide_viewport, theta, range(k))
    expected = float(abs(wide_viewport.to_complex(path[k - 1])))
    assert radius_at(raster, theta) == pytest.approx(expected)


def test_disconnected_interior_reports_first_crossing(wide_viewport):
    raster, path = _ray_raster(wide_viewport, 0.0, [*range(5), *range(6, 20)])
    expected = float(abs(wide_viewport.to_complex(path[4])))
    assert radius_at(raster, 0.0) == pytest.approx(expected)
