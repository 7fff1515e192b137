## cyclic adjacency nodes for polytopekit
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

"""Doubly linked, two-neighbour nodes

A ``DLLNode`` is linked to exactly two other nodes and linkage is
symmetric.  The nodes do not necessarily have a notion of "previous"
and "next": when building a cycle out of an unordered edge set,
``link_to()`` just fills the first free slot on both sides.  Once a
cycle is ordered, ``node0`` is the next node and ``node1`` the
previous one, which is what ``link_to_next()`` and ``link_to_prev()``
maintain.

Each node gets an id from a ``NodeIds`` source.  Ids are only used to
order coincident nodes consistently, so a source only has to be
monotonic within one planarization pass.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, List, Optional

from polytopekit.errors import LinkOverflowError, TopologyError


class NodeIds:
    """Monotonic id source for ``DLLNode``s."""

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)


_default_ids = NodeIds()


class DLLNode:

    __slots__ = ('value', 'node0', 'node1', 'traversed', 'id')

    def __init__(self, value: Any, node0: Optional[DLLNode] = None,
                 node1: Optional[DLLNode] = None, ids: Optional[NodeIds] = None):
        self.value = value
        self.node0 = node0
        self.node1 = node1
        self.traversed = False
        self.id = (ids or _default_ids)()

    def __repr__(self):
        return 'DLLNode(id={}, value={!r})'.format(self.id, self.value)

    def link_to(self, node: DLLNode) -> None:
        """Symmetrically link ``self`` and ``node`` through free slots."""
        if self.node0 is not None and self.node1 is not None:
            raise LinkOverflowError(f'{self!r} is already linked to two nodes')
        if node.node0 is not None and node.node1 is not None:
            raise LinkOverflowError(f'{node!r} is already linked to two nodes')

        if self.node0 is None:
            self.node0 = node
        else:
            self.node1 = node

        if node.node0 is None:
            node.node0 = self
        else:
            node.node1 = self

    def link_to_next(self, node: DLLNode) -> None:
        self.node0 = node
        node.node1 = self

    def link_to_prev(self, node: DLLNode) -> None:
        self.node1 = node
        node.node0 = self

    def get_node(self, i: int) -> Optional[DLLNode]:
        return self.node0 if i == 0 else self.node1

    def get_cycle(self, limit: Optional[int] = None) -> List[Any]:
        """Walk the cycle through ``self`` without backtracking.

        Returns the values of the nodes in traversal order.  Nodes are
        marked as traversed, so walking the same cycle twice yields a
        partial (or empty) result; callers looking for every cycle of a
        graph should start a walk from each untraversed node.
        """
        return self._walk(_untraversed_neighbour, limit)

    def get_ordered_cycle(self, limit: Optional[int] = None) -> List[Any]:
        """Like ``get_cycle()``, assuming ``node0`` is always the next node."""
        return self._walk(_next_neighbour, limit)

    def _walk(self, step: Callable[[DLLNode], Optional[DLLNode]],
              limit: Optional[int]) -> List[Any]:
        cycle = [self.value]
        self.traversed = True
        node = self.node0
        while True:
            if node is None:
                raise TopologyError(f'{self!r}: cycle walk ran into a missing neighbour')
            if node.traversed:
                return cycle
            if limit is not None and len(cycle) >= limit:
                raise TopologyError(f'{self!r}: cycle longer than {limit} nodes')
            node.traversed = True
            cycle.append(node.value)
            node = step(node)


def _untraversed_neighbour(node: DLLNode) -> Optional[DLLNode]:
    # node0 first
    if node.node0 is not None and not node.node0.traversed:
        return node.node0
    return node.node1


def _next_neighbour(node: DLLNode) -> Optional[DLLNode]:
    return node.node0


def ring(values, ids: Optional[NodeIds] = None) -> List[DLLNode]:
    """Build an ordered ring of nodes, ``node0`` pointing forward."""
    nodes = [DLLNode(v, ids=ids) for v in values]
    for a, b in zip(nodes, nodes[1:] + nodes[:1]):
        a.link_to_next(b)
    return nodes


__all__ = ['DLLNode', 'NodeIds', 'ring']
