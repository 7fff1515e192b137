## element-list polytopes for polytopekit
## Copyright (c) 2026 polytopekit contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""element-list polytopes for **polytopekit**

====================
OVERVIEW
====================

A ``PolytopeC`` stores a polytope as a list of elements in ascending
order of dimension, similar to (but not the same as) an OFF file.
Level 0 is a list of ``Point`` vertices; every element of level
``k > 0`` is a list of indices into level ``k - 1``, its facets.
Storing every level, and not just the facets, avoids O(2^n) work when
faces need to be recovered.

``dimensions`` is the combinatorial dimension (number of levels minus
one).  ``space_dimensions`` is the number of coordinates of the
vertices, which need not agree with it: a polygon may live in 3-space.

The generators build the whole face lattice of the regular hypercube,
simplex and cross-polytope from bit patterns, plus Grünbaumian star
polygons.  ``extrude_to_pyramid()`` is the only in-place construction.

The ``planarize()`` method hands each 2-face to the planarizer in
``polytopekit.planarize``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from polytopekit.dll import DLLNode
from polytopekit.errors import TopologyError
from polytopekit.point import Point, centroid

logger = logging.getLogger(__name__)

ElementList = List[list]

## element names, according to http://os2fan2.com/gloss/pglosstu.html
_ELEMENT_NAMES = [
    ('Vertex', 'Vertices'),
    ('Edge', 'Edges'),
    ('Face', 'Faces'),
    ('Cell', 'Cells'),
    ('Teron', 'Tera'),
    ('Peton', 'Peta'),
    ('Exon', 'Exa'),
    ('Zetton', 'Zetta'),
    ('Yotton', 'Yotta'),
    ('Xennon', 'Xenna'),
    ('Dakon', 'Daka'),
    ('Hendakon', 'Hendaka'),
    ('Dokon', 'Doka'),
    ('Tradakon', 'Tradaka'),
    ('Teradakon', 'Teradaka'),
    ('Petadakon', 'Petadaka'),
    ('Exdakon', 'Exdaka'),
    ('Zettadakon', 'Zettadaka'),
    ('Yottadakon', 'Yottadaka'),
    ('Xendakon', 'Xendaka'),
    ('Icon', 'Ica'),
]


def element_name(rank: int, plural: bool = False) -> str:
    """Name of an element of the given rank, e.g. ``element_name(3) == 'Cell'``."""
    if 0 <= rank < len(_ELEMENT_NAMES):
        return _ELEMENT_NAMES[rank][1 if plural else 0]
    return '{}-elements'.format(rank) if plural else '{}-element'.format(rank)


def _lowest_bits(mask: int) -> List[int]:
    """Split ``mask`` into its single-bit components, lowest first."""
    bits = []
    while mask > 0:
        bits.append(mask & -mask)
        mask &= mask - 1
    return bits


def _check_dimension(dimensions) -> None:
    if not isinstance(dimensions, int) or dimensions < 0:
        raise ValueError('bad polytope dimension: {!r}'.format(dimensions))


def _cycle_from_edges(edges: Sequence[Sequence[int]], start: int) -> List[int]:
    """Order the vertex indices of an unordered edge set forming one cycle."""
    nodes: Dict[int, DLLNode] = {}
    for edge in edges:
        for v in edge:
            if v not in nodes:
                nodes[v] = DLLNode(v)
        nodes[edge[0]].link_to(nodes[edge[1]])

    cycle = nodes[start].get_cycle(limit=len(nodes))
    if len(cycle) != len(nodes):
        raise TopologyError('edges do not form a single cycle: {} of {} vertices reached'
                            .format(len(cycle), len(nodes)))
    return cycle


class VertexPolytope:
    """A polytope known only by its vertices, as a convex hull."""

    def __init__(self, vertices: Sequence[Point], dimensions: int):
        self.vertices = list(vertices)
        # not necessarily the number of coordinates of the vertices
        self.dimensions = dimensions

    def __repr__(self):
        return 'VertexPolytope(dimensions={}, vertices={})'.format(
            self.dimensions, len(self.vertices))

    def centroid(self) -> Point:
        return centroid(self.vertices)


class PolytopeC:
    """A polytope as an element list."""

    def __init__(self, element_list: ElementList, name: str = 'Polytope'):
        if not element_list:
            raise ValueError('an element list needs at least the vertex level')
        self.element_list = element_list
        self.dimensions = len(element_list) - 1
        vertices = element_list[0]
        self.space_dimensions = vertices[0].dimensions() if vertices else 0
        self.name = name

    def __repr__(self):
        return 'PolytopeC(name={!r}, dimensions={}, counts={})'.format(
            self.name, self.dimensions, self.element_counts())

    @property
    def vertices(self) -> List[Point]:
        return self.element_list[0]

    def element_counts(self) -> List[int]:
        return [len(level) for level in self.element_list]

    ## generators
    ## ----------

    @staticmethod
    def hypercube(dimensions: int) -> 'PolytopeC':
        """Hypercube in standard orientation with edge length 1.

        Elements are indexed by pairs of disjoint bit masks: ``i`` holds
        the directions along which the element extends and ``j`` picks
        one of its vertices.  Facets of ``(j, i)`` are found by dropping
        one bit of ``i``, both at ``j`` and at ``j ^ bit``.
        """
        _check_dimension(dimensions)
        els: ElementList = [[] for _ in range(dimensions + 1)]
        # (j, i) -> index within its level
        locations: Dict[int, Dict[int, int]] = {}
        n = 2 ** dimensions

        for i in range(n):
            for j in range(n):
                if i == 0:
                    coordinates = [0.5 if j % (2 ** k) < 2 ** (k - 1) else -0.5
                                   for k in range(1, dimensions + 1)]
                    locations[j] = {0: len(els[0])}
                    els[0].append(Point(coordinates))
                    continue
                # only count each element once
                if j & i:
                    continue
                differences = _lowest_bits(i)
                facets = [locations[j][i ^ diff] for diff in differences]
                facets += [locations[j ^ diff][i ^ diff] for diff in differences]
                locations[j][i] = len(els[len(differences)])
                els[len(differences)].append(facets)

        return PolytopeC(els, name='{}-cube'.format(dimensions))

    @staticmethod
    def simplex(dimensions: int) -> 'PolytopeC':
        """Regular simplex with edge length 1, in a space of the same dimension."""
        _check_dimension(dimensions)
        aux = [math.inf] + [1 / math.sqrt(2 * k * (k + 1)) for k in range(1, dimensions + 1)]

        vertices = []
        for i in range(dimensions + 1):
            coordinates = []
            for j in range(1, dimensions + 1):
                if j > i:
                    coordinates.append(-aux[j])
                elif j == i:
                    coordinates.append(j * aux[j])
                else:
                    coordinates.append(0.0)
            vertices.append(Point(coordinates))

        els: ElementList = [vertices] + [[] for _ in range(dimensions)]
        locations = {2 ** i: i for i in range(dimensions + 1)}
        for i in range(1, 2 ** (dimensions + 1)):
            # vertices were generated above
            if not i & (i - 1):
                continue
            elem_vertices = _lowest_bits(i)
            element_dimension = len(elem_vertices) - 1
            facets = [locations[i ^ v] for v in elem_vertices]
            locations[i] = len(els[element_dimension])
            els[element_dimension].append(facets)

        return PolytopeC(els, name='{}-simplex'.format(dimensions))

    @staticmethod
    def cross(dimensions: int) -> 'PolytopeC':
        """Cross-polytope in standard orientation with edge length 1.

        ``i`` is the set of nonzero axes of an element, ``j`` the subset of
        them taken negative.  The full polytope is added separately, as the
        set of all its facets.
        """
        _check_dimension(dimensions)
        if dimensions == 0:
            return PolytopeC([[Point([])]], name='0-orthoplex')

        els: ElementList = [[] for _ in range(dimensions + 1)]
        locations: Dict[int, Dict[int, int]] = {}
        n = 2 ** dimensions

        for i in range(1, n):
            locations[i] = {}
            for j in range(n):
                # no negative zero coordinates
                if i & j != j:
                    continue
                if not i & (i - 1):
                    sign = -1.0 if j else 1.0
                    coordinates = [sign * math.sqrt(0.5) if 2 ** k == i else 0.0
                                   for k in range(dimensions)]
                    locations[i][j] = len(els[0])
                    els[0].append(Point(coordinates))
                    continue
                elem_vertices = _lowest_bits(i)
                element_dimension = len(elem_vertices) - 1
                facets = [locations[i ^ v][j & ~v] for v in elem_vertices]
                locations[i][j] = len(els[element_dimension])
                els[element_dimension].append(facets)

        els[dimensions].append(list(range(len(els[dimensions - 1]))))
        return PolytopeC(els, name='{}-orthoplex'.format(dimensions))

    @staticmethod
    def star(n: int, d: int = 1) -> 'PolytopeC':
        """Grünbaumian ``n/d`` star polygon on the unit circle.

        The ``n`` vertices are visited in steps of ``d`` around the
        circle, so for ``d > 1`` the single face crosses itself.
        """
        if not isinstance(n, int) or n < 3:
            raise ValueError('a star polygon needs at least three vertices, got {!r}'.format(n))
        if not isinstance(d, int) or d < 1:
            raise ValueError('bad star polygon step: {!r}'.format(d))

        vertices = []
        for i in range(n):
            angle = 2 * math.pi * i * d / n
            vertices.append(Point([math.cos(angle), math.sin(angle)]))
        edges = [[i, i + 1] for i in range(n - 1)] + [[n - 1, 0]]
        face = list(range(n))
        name = '{}-gon'.format(n) if d == 1 else '{}/{} star'.format(n, d)
        return PolytopeC([vertices, edges, [face]], name=name)

    ## construction and measurement
    ## ----------------------------

    def centroid(self) -> Point:
        """Average of the vertices."""
        return centroid(self.vertices)

    def set_space_dimensions(self, dim: int) -> None:
        """Give every vertex exactly ``dim`` coordinates, padding with
        zeros or dropping trailing coordinates."""
        self.element_list[0] = [v.resized(dim) for v in self.vertices]
        self.space_dimensions = dim

    def extrude_to_pyramid(self, apex: Point) -> None:
        """Turn the polytope into a pyramid over itself, in place.

        The ``i``-th ``(k-1)``-element of the original polytope becomes the
        base of the ``(old_k + i)``-th ``k``-element of the pyramid, where
        ``old_k`` is the original number of ``k``-elements.
        """
        self.dimensions += 1
        self.element_list.append([])

        old_counts = self.element_counts()

        self.vertices.append(apex)
        self.set_space_dimensions(max(apex.dimensions(), self.space_dimensions))

        apex_index = old_counts[0]
        for i in range(old_counts[0]):
            self.element_list[1].append([i, apex_index])

        for d in range(2, self.dimensions + 1):
            for i in range(old_counts[d - 1]):
                facets = [i] + [f + old_counts[d - 1] for f in self.element_list[d - 1][i]]
                self.element_list[d].append(facets)

        self.name = 'Pyramid over {}'.format(self.name)

    ## faces
    ## -----

    def face_to_vertices(self, i: int) -> List[int]:
        """Ordered cycle of vertex indices of the ``i``-th face."""
        if self.dimensions < 2:
            raise ValueError('polytope has no faces')
        edges = [self.element_list[1][e] for e in self.element_list[2][i]]
        if not edges:
            raise TopologyError('face {} has no edges'.format(i))
        return _cycle_from_edges(edges, edges[0][0])

    def face_to_vertices_2d(self) -> List[int]:
        """Ordered cycle of vertex indices of a polygon, built from all of
        its edges (a 2-polytope has no separate face entries to walk)."""
        if self.dimensions < 1 or not self.element_list[1]:
            raise ValueError('polytope has no edges')
        return _cycle_from_edges(self.element_list[1], 0)

    def face_points(self, i: int) -> List[Point]:
        return [self.vertices[v] for v in self.face_to_vertices(i)]

    def planarize(self, config=None) -> List[List[List[Point]]]:
        """Split every face into simple polygonal cycles.

        Returns one list of cycles per face, in face order.  Degenerate
        faces contribute an empty list.
        """
        from polytopekit.planarize import planarize_polygon

        if self.dimensions < 2:
            return []
        result = []
        for i in range(len(self.element_list[2])):
            cycles = planarize_polygon(self.face_points(i), config=config)
            logger.debug('%s: face %d split into %d cycle(s)', self.name, i, len(cycles))
            result.append(cycles)
        return result


__all__ = ['PolytopeC', 'VertexPolytope', 'element_name']
