"""Tests for sampling curves and their offset contours."""

from __future__ import annotations

import math
import sys
from pathlib import Path

import numpy
import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from focalcurve.curve import Curve
from focalcurve.curve import sample


ARC = [(1, 0), (0, 1), (-1, 0)]
WAVY = [(0, 0), (10, 5), (20, 0), (30, 8), (40, -3)]


def _expected_on_arc(t: float, offset: float) -> tuple[float, float]:
    """Sample the first segment of ARC by hand: its focal is (0, -1), w > 0."""
    fx, fy = 0.0, -1.0
    px, py = 1.0, 0.0
    qx, qy = 0.0, 1.0
    lx, ly = px * (1 - t) + qx * t, py * (1 - t) + qy * t
    norm = math.hypot(lx - fx, ly - fy)
    d = math.hypot(px - fx, py - fy) * (1 - t) + math.hypot(qx - fx, qy - fy) * t + offset
    return fx + (lx - fx) / norm * d, fy + (ly - fy) / norm * d


@pytest.mark.parametrize('t', [0.25, 0.5, 0.9])
def test_general_segment_pivots_around_focal(t: float) -> None:
    curve = Curve(ARC)
    numpy.testing.assert_allclose(curve.generate_point(t), _expected_on_arc(t, 0), atol=1e-12)
    numpy.testing.assert_allclose(curve.generate_point(t, 0.3), _expected_on_arc(t, 0.3), atol=1e-12)


def test_positions_before_the_start_extrapolate_first_segment() -> None:
    curve = Curve(ARC)
    numpy.testing.assert_allclose(curve.generate_point(-0.5), _expected_on_arc(-0.5, 0), atol=1e-12)


def test_positions_past_the_end_stay_on_last_segment() -> None:
    curve = Curve(WAVY)
    last = curve.generate_points([3.5, 4.0, 4.5])
    numpy.testing.assert_allclose(last[1], curve.point(4), atol=1e-9)
    assert not numpy.allclose(last[2], curve.point(4))
    assert numpy.isfinite(last).all()


def test_collinear_points_sample_on_displaced_segment_start() -> None:
    """Straight segments ignore the fractional position and use their start point."""
    curve = Curve([(0, 0), (3, 0), (10, 0)])
    assert (numpy.absolute(curve.focals[:, 2]) <= curve.eps).all()
    for t in [0, 0.3, 0.9]:
        numpy.testing.assert_array_equal(curve.generate_point(t, 2), (0, 2))
    for t in [1, 1.5, 2, 7]:
        numpy.testing.assert_array_equal(curve.generate_point(t, 2), (3, 2))
    numpy.testing.assert_array_equal(curve.generate_point(0.5, -1.5), (0, -1.5))


def test_antiparallel_segments_do_not_fail() -> None:
    curve = Curve([(0, 0), (10, 0), (0, 0)])
    assert len(curve) == 3
    numpy.testing.assert_array_equal(curve.tangent(1), (0, 0))
    numpy.testing.assert_array_equal(curve.generate_point(0.5, 3), (0, 3))
    numpy.testing.assert_array_equal(curve.generate_point(1.5, 3), (10, 0))


@pytest.mark.parametrize('t', [0.2, 1.5, 2.7, 3.4])
def test_offsets_of_opposite_sign_straddle_the_curve(t: float) -> None:
    curve = Curve(WAVY)
    center = curve.generate_point(t)
    plus = curve.generate_point(t, 0.5) - center
    minus = curve.generate_point(t, -0.5) - center
    numpy.testing.assert_allclose(plus, -minus, atol=1e-9)
    assert numpy.linalg.norm(plus) == pytest.approx(0.5)
    assert plus @ minus < 0


def test_offset_moves_along_the_focal_radius() -> None:
    """With w > 0 a positive offset moves away from the focal."""
    curve = Curve(ARC)
    focal = curve.focal_point(0)
    center = curve.generate_point(0.5)
    plus = curve.generate_point(0.5, 0.2)
    assert numpy.linalg.norm(plus - focal) == pytest.approx(numpy.linalg.norm(center - focal) + 0.2)


def test_generate_points_matches_generate_point() -> None:
    curve = Curve(WAVY + [(41, -3), (50, -3), (60, -3)])
    positions = numpy.linspace(-1, len(curve), 97)
    for offset in [0, 1.5, -2]:
        points = curve.generate_points(positions, offset)
        assert points.shape == (97, 2)
        for t, point in zip(positions, points):
            numpy.testing.assert_allclose(point, curve.generate_point(t, offset), rtol=1e-12, atol=1e-12)


def test_generate_points_keeps_input_shape() -> None:
    assert Curve(WAVY).generate_points(numpy.zeros((3, 4))).shape == (3, 4, 2)
    assert Curve([(1, 1)]).generate_points(numpy.zeros((3, 4))).shape == (3, 4, 2)
    assert Curve([]).generate_points([]).shape == (0, 2)


def test_sample_positions() -> None:
    numpy.testing.assert_allclose(sample.sample_positions(3, 4), [0, 0.5, 1, 1.5])
    numpy.testing.assert_allclose(sample.sample_positions(3, 5, endpoint=True), [0, 0.5, 1, 1.5, 2])
    numpy.testing.assert_array_equal(sample.sample_positions(0, 3), [0, 0, 0])


def test_trace() -> None:
    curve = Curve(WAVY)
    polyline = sample.trace(curve)
    assert polyline.shape == (sample.DEFAULT_SAMPLE_COUNT, 2)
    numpy.testing.assert_allclose(polyline[0], curve.point(0), atol=1e-9)
    closed = sample.trace(curve, 50, endpoint=True)
    numpy.testing.assert_allclose(closed[-1], curve.point(len(curve) - 1), atol=1e-9)


def test_centerline_and_contour() -> None:
    curve = Curve(WAVY)
    center, contour = sample.centerline_and_contour(curve, 2, num_samples=200)
    assert center.shape == contour.shape == (200, 2)
    numpy.testing.assert_allclose(numpy.linalg.norm(contour - center, axis=1), 2, atol=1e-9)
