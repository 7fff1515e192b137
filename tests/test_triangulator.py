import pytest

from polytopekit.errors import DimensionMismatchError
from polytopekit.point import point
from polytopekit.triangulator import best_axes, signed_area, triangulate_cycle


def test_square():
    square = [point(0, 0), point(1, 0), point(1, 1), point(0, 1)]
    triangles = triangulate_cycle(square)
    assert len(triangles) == 2
    used = {i for tri in triangles for i in tri}
    assert used == {0, 1, 2, 3}
    area = sum(abs(signed_area([square[a], square[b], square[c]])) for a, b, c in triangles)
    assert area == pytest.approx(1.0)


def test_concave():
    cycle = [point(0, 0), point(2, 0), point(2, 1), point(1, 1), point(1, 2), point(0, 2)]
    assert len(triangulate_cycle(cycle)) == 4


def test_face_in_space():
    face = [point(0.5, 0, 0), point(0.5, 1, 0), point(0.5, 1, 1), point(0.5, 0, 1)]
    assert best_axes(face) == (1, 2)
    assert len(triangulate_cycle(face)) == 2


def test_short_cycles():
    assert triangulate_cycle([]) == []
    assert triangulate_cycle([point(0, 0), point(1, 1)]) == []


def test_one_dimensional_points():
    with pytest.raises(DimensionMismatchError):
        triangulate_cycle([point(0), point(1), point(2)])


def test_signed_area():
    ccw = [point(0, 0), point(2, 0), point(2, 2), point(0, 2)]
    assert signed_area(ccw) == 4.0
    assert signed_area(list(reversed(ccw))) == -4.0
