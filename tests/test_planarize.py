import pytest

from polytopekit.config import KernelConfig
from polytopekit.dll import DLLNode, ring
from polytopekit.errors import SweepLineError, TopologyError
from polytopekit.planarize import (
    Planarizer,
    RedirectTable,
    SLEdge,
    cantor,
    planarize_polygon,
)
from polytopekit.point import equal, point
from polytopekit.space import intersect
from polytopekit.polytope import PolytopeC


def _coords(cycle):
    return sorted(tuple(round(c, 9) for c in p) for p in cycle)


def test_cantor():
    assert cantor(0, 0) == 0
    assert cantor(1, 0) == 1
    assert cantor(0, 1) == 2
    assert cantor(2, 3) == 18
    values = {cantor(x, y) for x in range(20) for y in range(20)}
    assert len(values) == 400


def test_redirect_table():
    table = RedirectTable()
    assert table.resolve(42) == 42
    table.redirect(42, 7)
    assert table.resolve(42) == 7
    assert len(table) == 1


def test_sl_edge():
    table = RedirectTable()
    nodes = ring([point(0, 0), point(1, 0), point(1, 1)])
    forward = SLEdge(nodes[0], 0, table)
    assert forward.right_vertex() is nodes[1]
    assert forward.directed() == (nodes[0], nodes[1])
    assert forward.id == cantor(nodes[0].id, nodes[1].id)

    backward = SLEdge(nodes[1], 1, table)
    assert backward.right_vertex() is nodes[0]
    assert backward.directed() == (nodes[0], nodes[1])


def test_sl_edge_id_survives_relinking():
    table = RedirectTable()
    nodes = ring([point(0, 0), point(2, 0), point(2, 2)])
    edge = SLEdge(nodes[0], 0, table)
    original = edge.id

    middle = DLLNode(point(1, 0))
    nodes[0].link_to_next(middle)
    edge.update_id(table)
    assert SLEdge(nodes[0], 0, table).id == original


def test_square_is_left_alone():
    pts = [point(0, 0), point(1, 0), point(1, 1), point(0, 1)]
    cycles = planarize_polygon(pts)
    assert len(cycles) == 1
    assert all(a is b for a, b in zip(cycles[0], pts))
    assert len(cycles[0]) == 4


def test_concave_polygon():
    pts = [point(0, 0), point(2, 0), point(2, 1), point(1, 1), point(1, 2), point(0, 2)]
    planarizer = Planarizer(pts)
    cycles = planarizer.run()
    assert planarizer.intersections == 0
    assert len(cycles) == 1
    assert cycles[0] == pts


def test_bowtie():
    pts = [point(0, 0), point(1, 1), point(1, 0), point(0, 1)]
    planarizer = Planarizer(pts)
    cycles = planarizer.run()
    assert planarizer.intersections == 1
    assert len(cycles) == 2
    assert _coords(cycles[0]) == [(0.0, 0.0), (0.0, 1.0), (0.5, 0.5)]
    assert _coords(cycles[1]) == [(0.5, 0.5), (1.0, 0.0), (1.0, 1.0)]
    assert cycles[0][0] is pts[0]

    # both halves meet at the very same point
    crossing0 = [p for p in cycles[0] if p not in pts]
    crossing1 = [p for p in cycles[1] if p not in pts]
    assert len(crossing0) == len(crossing1) == 1
    assert crossing0[0] is crossing1[0]


def test_hourglass():
    pts = [point(0, 0), point(2, 0), point(0, 2), point(2, 2)]
    cycles = planarize_polygon(pts)
    assert len(cycles) == 2
    assert _coords(cycles[0]) == [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]
    assert _coords(cycles[1]) == [(0.0, 2.0), (1.0, 1.0), (2.0, 2.0)]


def test_bowtie_in_space():
    pts = [point(0, 0, 5), point(1, 1, 5), point(1, 0, 5), point(0, 1, 5)]
    cycles = planarize_polygon(pts)
    assert len(cycles) == 2
    crossing = [p for p in cycles[0] if p not in pts]
    assert equal(crossing[0], point(0.5, 0.5, 5))


def test_tilted_square():
    pts = [point(0, 0, 0), point(1, 0, 1), point(1, 1, 1), point(0, 1, 0)]
    cycles = planarize_polygon(pts)
    assert len(cycles) == 1
    assert len(cycles[0]) == 4


@pytest.mark.parametrize('pts', [
    [point(1, 1), point(1, 1), point(1, 1)],
    [point(0, 0), point(1, 1), point(2, 2), point(3, 3)],
    [point(0, 0), point(1, 0)],
])
def test_degenerate_faces_are_skipped(pts):
    assert planarize_polygon(pts) == []


def test_run_is_cached():
    planarizer = Planarizer([point(0, 0), point(1, 1), point(1, 0), point(0, 1)])
    assert planarizer.run() is planarizer.run()
    assert planarizer.intersections == 1


def test_cycle_guard():
    pts = [point(0, 0), point(1, 0), point(1, 1), point(0, 1)]
    with pytest.raises(TopologyError):
        planarize_polygon(pts, config=KernelConfig(max_cycle_length=2))


def test_ids_are_per_face():
    first = Planarizer([point(0, 0), point(1, 0), point(0, 1)])
    second = Planarizer([point(0, 0), point(1, 0), point(0, 1)])
    assert [n.id for n in first.nodes] == [n.id for n in second.nodes] == [0, 1, 2]


def test_cube_faces():
    faces = PolytopeC.hypercube(3).planarize()
    assert len(faces) == 6
    for cycles in faces:
        assert len(cycles) == 1
        assert len(cycles[0]) == 4


def test_polygon_planarize():
    pentagon = PolytopeC.star(5)
    faces = pentagon.planarize()
    assert len(faces) == 1
    assert len(faces[0]) == 1
    assert faces[0][0] == pentagon.vertices
    assert PolytopeC.hypercube(1).planarize() == []


def _is_simple(cycle):
    n = len(cycle)
    for k in range(n):
        for m in range(k + 2, n):
            if k == 0 and m == n - 1:
                continue
            if intersect(cycle[k], cycle[(k + 1) % n], cycle[m], cycle[(m + 1) % n]) is not None:
                return False
    return True


def test_crossing_next_to_a_vertex():
    # the crossing cuts A-B 1.5e-7 away from A, closer than epsilon in x
    pts = [point(0, 0), point(0.5, 1), point(1, 1.5e-7), point(-1, 1.5e-7), point(-0.5, -1)]
    planarizer = Planarizer(pts)
    cycles = planarizer.run()
    assert planarizer.intersections == 1
    assert planarizer._sl.is_empty()
    assert sorted(len(c) for c in cycles) == [3, 4]
    assert cycles[0][0] is pts[0]


@pytest.mark.parametrize('n, d, lengths', [
    (5, 2, [5, 10]),
    (7, 3, [7, 14, 14]),
])
def test_star_polygons(n, d, lengths):
    star = PolytopeC.star(n, d)
    planarizer = Planarizer(star.face_points(0))
    cycles = planarizer.run()
    assert sorted(len(c) for c in cycles) == lengths
    assert planarizer._sl.is_empty()
    assert all(_is_simple(c) for c in cycles)
    # every vertex and both nodes of every crossing end up in a cycle
    assert sum(lengths) == n + 2 * planarizer.intersections


def test_edges_left_on_sweep_line_raise(monkeypatch):
    process = Planarizer._process

    def insertions_only(self, event, j):
        if event.value[0] < event.get_node(j).value[0]:
            process(self, event, j)

    monkeypatch.setattr(Planarizer, '_process', insertions_only)
    with pytest.raises(SweepLineError):
        Planarizer([point(0, 0), point(1, 0), point(1, 1), point(0, 1)]).run()
