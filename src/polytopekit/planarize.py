## Bentley-Ottmann planarization for polytopekit
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

"""Bentley-Ottmann planarization of polygonal faces

A face of a polytope is a closed polygon, possibly self-intersecting,
possibly degenerate, embedded in a space of any dimension.  To render
it, it is split into simple polygonal cycles:

1. degenerate faces (all points equal, or all collinear) are skipped;
2. the face is projected onto the coordinate plane in which it has the
   largest area;
3. a Bentley-Ottmann sweep finds every crossing between edges, based on
   http://geomalgorithms.com/a09-_intersect-3.html;
4. every crossing is resolved on the fly with the simplification
   algorithm of Subramaniam, which "cuts" both edges at the crossing and
   reconnects each half to the other edge's far end, so that the
   polygon falls apart into simple cycles;
5. the cycles are read back from the adjacency nodes.

Edges on the sweep line are ``SLEdge`` objects: a left vertex plus the
index of the neighbour slot holding the right vertex.  An edge on the
sweep line can only be cut to its right, so cutting never has to touch
the ``SLEdge`` objects themselves, only the nodes' links.  An edge's
identity, which breaks ties in the sweep order, is kept stable across
cuts by a ``RedirectTable`` owned by the planarizer of one face.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from polytopekit.avltree import AvlTree
from polytopekit.config import KernelConfig, get_kernel_config
from polytopekit.dll import DLLNode, NodeIds, ring
from polytopekit.errors import SweepLineError
from polytopekit.point import Point, equal
from polytopekit.space import collinear, intersect, projection_axes

logger = logging.getLogger(__name__)

Cycle = List[Point]


def cantor(x: int, y: int) -> int:
    """Cantor pairing of two non-negative integers."""
    return (x + y) * (x + y + 1) // 2 + y


class RedirectTable:
    """Maps the structural key of an edge to its canonical id.

    When an edge gets cut, its right vertex changes and so does the key
    computed from its endpoints.  The new key is redirected to the id
    the edge had before, so that sorting and searching stay consistent.
    """

    def __init__(self):
        self._table: Dict[int, int] = {}

    def __len__(self):
        return len(self._table)

    def resolve(self, key: int) -> int:
        return self._table.get(key, key)

    def redirect(self, key: int, canonical: int) -> None:
        self._table[key] = canonical


class SLEdge:
    """An edge on the sweep line.

    ``right_index`` is 0 if ``left_vertex.node0`` is the right endpoint,
    1 if ``left_vertex.node1`` is.
    """

    __slots__ = ('left_vertex', 'right_index', 'id')

    def __init__(self, left_vertex: DLLNode, right_index: int, redirects: RedirectTable):
        self.left_vertex = left_vertex
        self.right_index = right_index
        self.id = redirects.resolve(self._key())

    def __repr__(self):
        return 'SLEdge({!r}, {!r}, id={})'.format(
            self.left_vertex.value, self.right_vertex().value, self.id)

    def _key(self) -> int:
        return cantor(self.left_vertex.id, self.right_vertex().id)

    def right_vertex(self) -> DLLNode:
        return self.left_vertex.get_node(self.right_index)

    def update_id(self, redirects: RedirectTable) -> None:
        redirects.redirect(self._key(), self.id)

    def directed(self) -> Tuple[DLLNode, DLLNode]:
        """The edge as a ``(start, end)`` pair, following ``node0`` order."""
        if self.right_index == 0:
            return self.left_vertex, self.left_vertex.node0
        return self.left_vertex.node1, self.left_vertex


class Planarizer:
    """Splits one polygon, given as an ordered cycle of points, into
    simple cycles.  An instance handles a single face."""

    def __init__(self, points: Sequence[Point], config: Optional[KernelConfig] = None):
        self.config = config if config is not None else get_kernel_config()
        self.eps = self.config.epsilon
        self.ids = NodeIds()
        self.redirects = RedirectTable()
        # node0 is always the "next" vertex
        self.nodes: List[DLLNode] = ring(points, ids=self.ids)
        self.axes: Optional[Tuple[int, int]] = None
        self.event: Optional[DLLNode] = None
        self.intersections = 0
        self._eq: Optional[AvlTree] = None
        self._sl: Optional[AvlTree] = None
        self._cycles: Optional[List[Cycle]] = None

    ## orderings
    ## ---------

    def _order(self, a: DLLNode, b: DLLNode):
        """Lexicographic order on the projected coordinates, with node
        ids separating coincident vertices."""
        i0, i1 = self.axes
        c = a.value[i0] - b.value[i0]
        if c == 0:
            c = a.value[i1] - b.value[i1]
            if c == 0:
                return a.id - b.id
        return c

    def _sweep_order(self, x: SLEdge, y: SLEdge):
        """Order of two edges along the sweep line at the current event.

        Edges are sorted by the height at which they meet the sweep
        line; at equal heights an edge ending there goes before one
        starting there, edges starting together are sorted by increasing
        slope, edges ending together by decreasing slope, and anything
        still tied by edge id.
        """
        # the only case where the edges are the same
        if x.left_vertex is y.left_vertex and x.right_vertex() is y.right_vertex():
            return 0

        i0, i1 = self.axes
        a = x.left_vertex.value
        b = x.right_vertex().value
        c = y.left_vertex.value
        d = y.right_vertex().value
        k = self.event.value[i0]

        # where along each segment the sweep line crosses
        lambda0 = (k - b[i0]) / (a[i0] - b[i0])
        lambda1 = (k - d[i0]) / (c[i0] - d[i0])

        res = ((a[i1] * lambda0 + b[i1] * (1 - lambda0)) -
               (c[i1] * lambda1 + d[i1] * (1 - lambda1)))

        if res == 0:
            if lambda0 == 1 and lambda1 == 0:
                return 1
            if lambda0 == 0 and lambda1 == 1:
                return -1

            slope_mod = 1 if lambda0 == 1 else -1
            slope0 = (a[i1] - b[i1]) / (a[i0] - b[i0])
            slope1 = (c[i1] - d[i1]) / (c[i0] - d[i0])
            res = slope_mod * (slope0 - slope1)

            if res == 0:
                return x.id - y.id
        return res

    ## screening
    ## ---------

    def _witnesses(self) -> Optional[Tuple[int, int]]:
        """Indices of two points that, with the first one, span a plane.

        ``None`` if every point equals the first one, or if all points
        are collinear.
        """
        values = [node.value for node in self.nodes]
        n = len(values)
        if n < 3:
            return None

        a = 1
        while equal(values[0], values[a], self.eps):
            a += 1
            if a >= n:
                return None

        b = 2 if a == 1 else 1
        while collinear(values[0], values[a], values[b], self.eps):
            b += 1
            if b >= n:
                return None
        return a, b

    ## the sweep
    ## ---------

    def run(self) -> List[Cycle]:
        """Planarize the polygon and return its simple cycles."""
        if self._cycles is not None:
            return self._cycles

        witnesses = self._witnesses()
        if witnesses is None:
            logger.debug('skipping degenerate face with %d vertices', len(self.nodes))
            self._cycles = []
            return self._cycles

        a, b = witnesses
        self.axes = projection_axes(self.nodes[0].value, self.nodes[a].value,
                                    self.nodes[b].value)
        logger.debug('projecting face with %d vertices onto axes %s',
                     len(self.nodes), self.axes)

        self._eq = AvlTree(self._order)
        for node in self.nodes:
            self._eq.insert(node)
        self._sl = AvlTree(self._sweep_order)

        while not self._eq.is_empty():
            self.event = self._eq.pop_minimum()
            for j in (0, 1):
                self._process(self.event, j)

        if not self._sl.is_empty():
            raise SweepLineError('{} edge(s) left on the sweep line: {!r}'
                                 .format(len(self._sl), list(self._sl)))

        limit = self.config.max_cycle_length or len(self.nodes)
        cycles = []
        for node in self.nodes:
            if not node.traversed:
                cycles.append(node.get_cycle(limit=limit))
        logger.debug('%d intersection(s), %d cycle(s)', self.intersections, len(cycles))
        self._cycles = cycles
        return cycles

    def _process(self, event: DLLNode, j: int) -> None:
        """Handle the edge joining ``event`` to its ``j``-th neighbour."""
        i0, i1 = self.axes
        other = event.get_node(j)
        sl = self._sl
        order = event.value[i0] - other.value[i0]
        if 0 < abs(order) <= self.eps:
            # nearly perpendicular to the sweep; an edge already on the
            # sweep line (cut close to its left end) stays a normal edge
            if order < 0 or sl.get_node(SLEdge(other, 1 - j, self.redirects)) is None:
                order = 0.0

        if order < 0:
            # event is the left endpoint
            edge = SLEdge(event, j, self.redirects)
            node = sl.insert(edge)
            if node.key is not edge:
                raise SweepLineError('sweep line insertion collided: {!r} vs {!r}'
                                     .format(edge, node.key))
            prev_node = sl.prev(node)
            next_node = sl.next(node)
            if prev_node:
                self.divide(edge, prev_node.key)
            if next_node:
                self.divide(edge, next_node.key)

        elif order > 0:
            # event is the right endpoint
            edge = SLEdge(other, 1 - j, self.redirects)
            node = sl.get_node(edge)
            if node is None:
                raise SweepLineError('edge missing from the sweep line: {!r}'.format(edge))
            prev_node = sl.prev(node)
            next_node = sl.next(node)
            if prev_node and next_node:
                # they become neighbours
                self.divide(prev_node.key, next_node.key)
            sl.delete(edge)

        elif event.value[i1] > other.value[i1]:
            # perpendicular to the sweep direction, handled once from
            # its upper endpoint
            edge = SLEdge(event, j, self.redirects)
            node = sl.find_minimum_node()
            while node:
                self.divide(edge, node.key)
                node = sl.next(node)

    def divide(self, edge_a: SLEdge, edge_b: SLEdge) -> bool:
        """Cut ``edge_a`` and ``edge_b`` at their crossing, if any.

        Adds two nodes at the crossing, relinks the four endpoints so that
        each edge continues into the other, and queues the new nodes.
        Returns ``True`` if the edges were cut.
        """
        a_left = edge_a.left_vertex.value
        a_right = edge_a.right_vertex().value
        b_left = edge_b.left_vertex.value
        b_right = edge_b.right_vertex().value
        if (a_left is b_left or a_left is b_right or
                a_right is b_left or a_right is b_right):
            return False

        a0, a1 = edge_a.directed()
        b0, b1 = edge_b.directed()

        inter = intersect(a0.value, a1.value, b0.value, b1.value,
                          axes=self.axes, eps=self.eps)
        if inter is None:
            return False

        # both nodes must share the very same point
        node1 = DLLNode(inter, ids=self.ids)
        node2 = DLLNode(inter, ids=self.ids)
        self.nodes.append(node1)
        self.nodes.append(node2)

        a0.link_to_next(node1)
        node1.link_to_next(b1)
        b0.link_to_next(node2)
        node2.link_to_next(a1)

        edge_a.update_id(self.redirects)
        edge_b.update_id(self.redirects)

        self._eq.insert(node1)
        self._eq.insert(node2)
        self.intersections += 1
        logger.debug('edges %r and %r cross at %r', edge_a, edge_b, inter)
        return True


def planarize_polygon(points: Sequence[Point],
                      config: Optional[KernelConfig] = None) -> List[Cycle]:
    """Split the polygon through ``points`` (in cyclic order) into simple
    cycles.  A degenerate polygon yields no cycles."""
    return Planarizer(points, config=config).run()


__all__ = [
    'Planarizer',
    'RedirectTable',
    'SLEdge',
    'cantor',
    'planarize_polygon',
]
