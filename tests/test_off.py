import io

import pytest

from polytopekit.io import off_text, write_off
from polytopekit.point import point
from polytopekit.polytope import PolytopeC


def test_cube_off():
    text = off_text(PolytopeC.hypercube(3))
    lines = text.splitlines()
    assert text.startswith('OFF\n8 6 12\n')
    assert len(lines) == 2 + 8 + 6
    assert lines[2] == '0.5 0.5 0.5'
    for face in lines[10:]:
        assert face.split()[0] == '4'
        assert len(face.split()) == 5


def test_tesseract_off():
    lines = off_text(PolytopeC.hypercube(4)).splitlines()
    assert lines[0] == '4OFF'
    assert lines[1] == '16 24 32 8'
    assert len(lines) == 2 + 16 + 24 + 8
    # cells list their faces
    assert lines[-1].split()[0] == '6'


def test_polygon_off():
    lines = off_text(PolytopeC.star(5)).splitlines()
    assert lines[0] == '2OFF'
    assert lines[1] == '5 5'
    assert lines[2] == '1 0'
    assert len(lines) == 7


def test_low_dimensions():
    assert off_text(PolytopeC.hypercube(0)) == '0OFF'
    assert off_text(PolytopeC.hypercube(1)) == '1OFF\n2\n0.5\n-0.5\n'


def test_comments():
    text = off_text(PolytopeC.simplex(3), comments=True)
    assert '# Vertices, Faces, Edges' in text
    assert '# Faces' in text


def test_too_many_coordinates():
    pentagon = PolytopeC.star(5)
    pentagon.set_space_dimensions(3)
    with pytest.raises(ValueError):
        off_text(pentagon)


def test_fewer_coordinates_are_padded():
    square = PolytopeC.hypercube(2)
    square.extrude_to_pyramid(point(0, 0, 1))
    square.set_space_dimensions(2)
    lines = off_text(square).splitlines()
    assert lines[2] == '0.5 0.5 0'


def test_write_off(tmp_path):
    path = tmp_path / 'cube.off'
    write_off(PolytopeC.hypercube(3), path)
    assert path.read_text().startswith('OFF\n8 6 12\n')

    buf = io.StringIO()
    write_off(PolytopeC.hypercube(3), buf)
    assert buf.getvalue() == path.read_text()
