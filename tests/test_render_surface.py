import logging

import numpy as np
import pytest

from isorelief.color import RGBA, grayscale_mapper
from isorelief.render.pipeline import SurfaceRequest, build_surface, needs_repaint, render_surface
from isorelief.render.primitives import WIRE_DARK, WIRE_LIGHT, WIRE_WIDTH, FillTriangle, StrokeTriangle
from isorelief.surface.depth import DepthMode


def _request(grid, lo=0.0, hi=1.0, width=100.0, height=100.0, is_dark=False, label="lux"):
    return SurfaceRequest(
        grid=grid, min_value=lo, max_value=hi, metric_label=label,
        width=width, height=height, is_dark=is_dark,
    )


def test_single_quad_scenario():
    tris = build_surface(_request([[0.0, 1.0], [1.0, 0.0]]))
    assert [t.depth for t in tris] == pytest.approx([0.0, 0.2])

    prims = render_surface(_request([[0.0, 1.0], [1.0, 0.0]]), grayscale_mapper)
    assert [p.kind for p in prims] == ["fill", "fill", "stroke", "stroke"]
    fills, strokes = prims[:2], prims[2:]
    assert [f.points for f in fills] == [s.points for s in strokes]
    # mean value 2/3 -> grey 170, darkened by the 0.75 floor
    assert all(f.color == RGBA(127, 127, 127, 255) for f in fills)


def test_missing_corner_scenario():
    prims = render_surface(_request([[float("nan"), 1.0], [1.0, 0.0]]), grayscale_mapper)
    assert len(prims) == 2
    assert isinstance(prims[0], FillTriangle)
    assert isinstance(prims[1], StrokeTriangle)


def test_degenerate_range_scenario():
    req = _request([[5.0, 6.0], [4.0, 5.0]], lo=5.0, hi=5.0)
    prims = render_surface(req, grayscale_mapper)
    assert len(prims) == 4
    for p in prims:
        for x, y in p.points:
            assert np.isfinite(x) and np.isfinite(y)


@pytest.mark.parametrize(
    "grid,width,height",
    [
        ([], 100.0, 100.0),
        ([[], []], 100.0, 100.0),
        ([[1.0, 2.0]], 100.0, 100.0),
        ([[0.0, 1.0], [1.0, 0.0]], 0.0, 100.0),
        ([[0.0, 1.0], [1.0, 0.0]], 100.0, 0.0),
        ([[float("nan"), float("nan")], [float("nan"), float("nan")]], 100.0, 100.0),
    ],
)
def test_empty_inputs_render_nothing(grid, width, height):
    assert render_surface(_request(grid, width=width, height=height), grayscale_mapper) == []


def test_wireframe_color_follows_mode():
    grid = [[0.0, 1.0], [1.0, 0.0]]
    light = [p for p in render_surface(_request(grid), grayscale_mapper) if p.kind == "stroke"]
    dark = [p for p in render_surface(_request(grid, is_dark=True), grayscale_mapper) if p.kind == "stroke"]
    assert all(p.color == WIRE_LIGHT and p.width == WIRE_WIDTH for p in light)
    assert all(p.color == WIRE_DARK for p in dark)


def test_mapper_called_once_per_triangle_with_label_and_range():
    calls = []

    def mapper(value, lo, hi, label):
        calls.append((value, lo, hi, label))
        return RGBA(10, 20, 30, 200)

    grid = np.linspace(0.0, 1.0, 20).reshape(4, 5)
    prims = render_surface(_request(grid, hi=2.0, label="temp"), mapper)
    n_fill = sum(1 for p in prims if p.kind == "fill")
    assert n_fill == 2 * 3 * 4
    assert len(calls) == n_fill
    assert all(c[1:] == (0.0, 2.0, "temp") for c in calls)


def test_output_is_deterministic_and_bounded():
    rng = np.random.default_rng(11)
    grid = rng.normal(size=(12, 9))
    grid[3, 4] = np.nan
    grid[7, 1] = np.inf
    req = _request(grid, lo=-2.0, hi=2.0, width=640.0, height=480.0)
    first = render_surface(req, grayscale_mapper)
    second = render_surface(req, grayscale_mapper)
    assert first == second
    for p in first:
        assert all(isinstance(ch, int) and 0 <= ch <= 255 for ch in p.color)


def test_fill_order_is_back_to_front():
    grid = np.random.default_rng(5).uniform(size=(6, 6))
    tris = build_surface(_request(grid))
    depths = [t.depth for t in tris]
    assert depths == sorted(depths)
    centroid = build_surface(_request(grid), DepthMode.CENTROID)
    assert len(centroid) == len(tris)


def test_needs_repaint():
    grid = [[0.0, 1.0], [1.0, 0.0]]
    base = _request(grid)
    assert not needs_repaint(base, _request(grid))
    assert needs_repaint(base, _request([[0.0, 1.0], [1.0, 0.0]]))
    assert needs_repaint(base, _request(grid, label="other"))
    assert needs_repaint(base, _request(grid, hi=2.0))
    assert needs_repaint(base, _request(grid, lo=-1.0))
    assert needs_repaint(base, _request(grid, is_dark=True))
    assert needs_repaint(base, _request(grid, width=200.0))


def test_render_logs_triangle_counts(caplog):
    with caplog.at_level(logging.DEBUG, logger="isorelief"):
        build_surface(_request([[float("nan"), 1.0], [1.0, 0.0]]))
    assert "1 triangles (1 dropped)" in caplog.text
