import math

import pytest

from polytopekit.errors import DimensionMismatchError
from polytopekit.point import point
from polytopekit.space import (
    collinear,
    intersect,
    projection_axes,
    same_slope,
    shoelace_area,
)


def test_intersect_crossing():
    p = intersect(point(0, 0), point(1, 1), point(0, 1), point(1, 0))
    assert p is not None
    assert p.isclose(point(0.5, 0.5))


def test_intersect_is_symmetric_in_segment_direction():
    p = intersect(point(1, 1), point(0, 0), point(1, 0), point(0, 1))
    assert p.isclose(point(0.5, 0.5))


def test_intersect_rejects_endpoints():
    # shared vertex
    assert intersect(point(0, 0), point(1, 0), point(1, 0), point(1, 1)) is None
    # T junction
    assert intersect(point(0, 0), point(2, 0), point(1, 0), point(1, 1)) is None


def test_intersect_parallel_and_disjoint():
    assert intersect(point(0, 0), point(1, 0), point(0, 1), point(1, 1)) is None
    assert intersect(point(0, 0), point(1, 0), point(2, 0), point(3, 0)) is None
    assert intersect(point(0, 0), point(1, 1), point(3, 0), point(2, 1)) is None


def test_intersect_in_space():
    p = intersect(point(0, 0, 5), point(1, 1, 5), point(0, 1, 5), point(1, 0, 5))
    assert p.dimensions() == 3
    assert p.isclose(point(0.5, 0.5, 5))


def test_intersect_with_given_axes():
    a, b = point(0, 0, 0), point(2, 0, 2)
    c, d = point(0, 0, 2), point(2, 0, 0)
    assert intersect(a, b, c, d, axes=(0, 1)) is None
    p = intersect(a, b, c, d, axes=(0, 2))
    assert p.isclose(point(1, 0, 1))


def test_intersect_dimension_checks():
    with pytest.raises(DimensionMismatchError):
        intersect(point(0, 0), point(1, 1), point(0, 1, 0), point(1, 0, 0))
    with pytest.raises(ValueError):
        intersect(point(0), point(1), point(2), point(3))


def test_collinear():
    assert collinear(point(0, 0), point(1, 1), point(2, 2))
    assert collinear(point(0, 0), point(1, 1), point(-3, -3))
    assert not collinear(point(0, 0), point(1, 0), point(0, 1))
    # coincident points are collinear with anything
    assert collinear(point(0, 0), point(0, 0), point(5, 7))


def test_same_slope():
    assert same_slope(1, 0, 2, 0)
    assert same_slope(1, 0, -1, 0)
    assert same_slope(1, 1, -2, -2)
    assert not same_slope(1, 0, 0, 1)
    assert not same_slope(1, 0, 1, 1e-3)


def test_shoelace_area():
    assert shoelace_area(point(0, 0), point(1, 0), point(0, 1), 0, 1) == 0.5
    assert shoelace_area(point(0, 0), point(0, 1), point(1, 0), 0, 1) == -0.5
    assert math.isclose(
        shoelace_area(point(0, 0, 0), point(2, 0, 0), point(0, 0, 2), 0, 2), 2.0)


def test_projection_axes():
    assert projection_axes(point(0, 0), point(1, 0), point(0, 1)) == (0, 1)
    assert projection_axes(point(0, 0, 0), point(1, 0, 0), point(0, 0, 1)) == (0, 2)
    assert projection_axes(point(0, 0, 0), point(0, 1, 0), point(0, 0, 1)) == (1, 2)
    with pytest.raises(DimensionMismatchError):
        projection_axes(point(0), point(1), point(2))
