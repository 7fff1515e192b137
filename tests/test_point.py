import pytest

from polytopekit.errors import DimensionMismatchError
from polytopekit.point import Point, centroid, equal, point


def test_point_basics():
    p = point(1, 2, 3)
    assert len(p) == 3
    assert p.dimensions() == 3
    assert p[1] == 2.0
    assert list(p) == [1.0, 2.0, 3.0]
    assert point([4, 5]).tolist() == [4.0, 5.0]
    assert Point().dimensions() == 0


def test_arithmetic():
    a = point(1, 2)
    b = point(3, 5)
    assert (a + b).tolist() == [4.0, 7.0]
    assert (b - a).tolist() == [2.0, 3.0]
    assert (a * 2).tolist() == [2.0, 4.0]
    assert (2 * a).tolist() == [2.0, 4.0]
    assert a.dot(b) == 13.0
    assert point(3, 4).norm() == 5.0
    with pytest.raises(DimensionMismatchError):
        a + point(1, 2, 3)


def test_equality_is_identity():
    a = point(1, 1)
    b = point(1, 1)
    assert a != b
    assert equal(a, b)
    assert equal(a, point(1, 1 + 1e-9))
    assert not equal(a, point(1, 1.1))
    assert not equal(a, point(1, 1, 0))


def test_clone_is_independent():
    a = point(1, 2)
    b = a.clone()
    b.coordinates[0] = 7
    assert a[0] == 1.0


def test_resized():
    assert point(1, 2).resized(4).tolist() == [1.0, 2.0, 0.0, 0.0]
    assert point(1, 2, 3).resized(1).tolist() == [1.0]
    with pytest.raises(ValueError):
        point(1).resized(-1)


def test_centroid():
    c = centroid([point(0, 0), point(2, 0), point(2, 2), point(0, 2)])
    assert c.tolist() == [1.0, 1.0]
    with pytest.raises(ValueError):
        centroid([])
