from polytopekit.mesh import polytope_mesh
from polytopekit.point import point
from polytopekit.polytope import PolytopeC


def test_cube_mesh():
    cube = PolytopeC.hypercube(3)
    mesh = polytope_mesh(cube)
    assert len(mesh.vertices) == 8
    assert len(mesh.triangles) == 12
    assert len(mesh.cycles) == 6
    for tri in mesh.triangle_points():
        assert all(p in cube.vertices for p in tri)


def test_bowtie_mesh_shares_crossing():
    vertices = [point(0, 0), point(1, 1), point(1, 0), point(0, 1)]
    edges = [[0, 1], [1, 2], [2, 3], [3, 0]]
    bowtie = PolytopeC([vertices, edges, [[0, 1, 2, 3]]], name='bowtie')
    mesh = polytope_mesh(bowtie)
    assert len(mesh.cycles) == 1
    assert len(mesh.cycles[0]) == 2
    # four corners plus one crossing point
    assert len(mesh.vertices) == 5
    assert len(mesh.triangles) == 2
    assert all(4 in tri for tri in mesh.triangles)


def test_tesseract_mesh():
    mesh = polytope_mesh(PolytopeC.hypercube(4))
    assert len(mesh.vertices) == 16
    assert len(mesh.triangles) == 48
