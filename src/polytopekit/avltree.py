## AVL tree, the ordered container of the polytopekit kernel
## Copyright (c) 2026 polytopekit contributors
## Based on the AVL tree by Daniel Imms <http://www.growingwiththeweb.com>,
## released under the MIT license.

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

"""AVL tree with a pluggable comparator

The tree is used twice by the planarizer: once as the event queue,
ordered lexicographically by vertex coordinates, and once as the sweep
line status structure, whose comparator reads the current sweep
position.

A comparator is any callable ``compare(a, b)`` returning a negative
number, zero or a positive number.  It may depend on external mutable
state, but the tree only stays correctly ordered while the relative
order of the keys it already holds does not change under that state.
Keeping that promise is the caller's job; the tree never re-sorts
itself.

Nodes keep a back reference to their parent, which gives ``next()``
and ``prev()`` without a stack.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], float]


def _natural_compare(a, b):
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


class BalanceState(Enum):
    """How far a node's subtrees are out of balance."""
    UNBALANCED_RIGHT = 1
    SLIGHTLY_UNBALANCED_RIGHT = 2
    BALANCED = 3
    SLIGHTLY_UNBALANCED_LEFT = 4
    UNBALANCED_LEFT = 5


class AvlNode:
    """A node of an ``AvlTree``."""

    __slots__ = ('key', 'left', 'right', 'parent', 'height')

    def __init__(self, key):
        self.key = key
        self.left: Optional[AvlNode] = None
        self.right: Optional[AvlNode] = None
        self.parent: Optional[AvlNode] = None
        self.height = 0

    def __repr__(self):
        return 'AvlNode(key={!r}, height={})'.format(self.key, self.height)

    def left_height(self) -> int:
        return self.left.height if self.left else -1

    def right_height(self) -> int:
        return self.right.height if self.right else -1

    def update_height(self) -> None:
        self.height = max(self.left_height(), self.right_height()) + 1

    def balance_factor(self) -> int:
        return self.left_height() - self.right_height()

    def link_left(self, node: Optional[AvlNode]) -> None:
        if self.left and self.left.parent is self:
            self.left.parent = None
        self.left = node
        if node:
            node.parent = self

    def link_right(self, node: Optional[AvlNode]) -> None:
        if self.right and self.right.parent is self:
            self.right.parent = None
        self.right = node
        if node:
            node.parent = self

    def rotate_right(self) -> AvlNode:
        """Right rotation, returns the new root of the subtree. ::

                 b                            a
                / \\                          / \\
               a   e  -> b.rotate_right() -> c   b
              / \\                              / \\
             c   d                            d   e
        """
        other = self.left
        self.link_left(other.right)
        other.link_right(self)
        self.update_height()
        other.update_height()
        return other

    def rotate_left(self) -> AvlNode:
        """Left rotation, returns the new root of the subtree. ::

               a                             b
              / \\                           / \\
             c   b   -> a.rotate_left() ->  a   e
                / \\                       / \\
               d   e                     c   d
        """
        other = self.right
        self.link_right(other.left)
        other.link_left(self)
        self.update_height()
        other.update_height()
        return other


def balance_state(node: AvlNode) -> BalanceState:
    diff = node.balance_factor()
    if diff <= -2:
        return BalanceState.UNBALANCED_RIGHT
    if diff == -1:
        return BalanceState.SLIGHTLY_UNBALANCED_RIGHT
    if diff == 1:
        return BalanceState.SLIGHTLY_UNBALANCED_LEFT
    if diff >= 2:
        return BalanceState.UNBALANCED_LEFT
    return BalanceState.BALANCED


def min_value_node(root: AvlNode) -> AvlNode:
    current = root
    while current.left:
        current = current.left
    return current


def max_value_node(root: AvlNode) -> AvlNode:
    current = root
    while current.right:
        current = current.right
    return current


class AvlTree:
    """Self-balancing binary search tree.

    ``compare`` overrides the natural ordering of the keys.  Keys that
    compare equal are considered the same key: inserting one of them a
    second time leaves the tree untouched.
    """

    def __init__(self, compare: Optional[Comparator] = None):
        self._root: Optional[AvlNode] = None
        self._size = 0
        self._compare = compare if compare else _natural_compare
        self._inserted: Optional[AvlNode] = None

    def __repr__(self):
        return 'AvlTree(size={}, keys={!r})'.format(self._size, list(self))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        node = self.find_minimum_node()
        while node is not None:
            yield node.key
            node = self.next(node)

    @property
    def root(self) -> Optional[AvlNode]:
        return self._root

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    ## insertion
    ## ---------

    def insert(self, key) -> AvlNode:
        """Insert ``key`` and return its node.

        If an equal key is already stored, nothing changes and the
        existing node is returned; the size does not grow.
        """
        self._inserted = None
        self._root = self._insert(key, self._root)
        self._root.parent = None
        node = self._inserted
        self._inserted = None
        return node

    def _insert(self, key, root: Optional[AvlNode]) -> AvlNode:
        if root is None:
            self._inserted = AvlNode(key)
            self._size += 1
            return self._inserted

        cmp = self._compare(key, root.key)
        if cmp < 0:
            root.link_left(self._insert(key, root.left))
        elif cmp > 0:
            root.link_right(self._insert(key, root.right))
        else:
            # duplicate
            self._inserted = root
            return root

        root.update_height()
        state = balance_state(root)

        if state is BalanceState.UNBALANCED_LEFT:
            if self._compare(key, root.left.key) < 0:
                # left left
                return root.rotate_right()
            # left right
            root.link_left(root.left.rotate_left())
            return root.rotate_right()

        if state is BalanceState.UNBALANCED_RIGHT:
            if self._compare(key, root.right.key) > 0:
                # right right
                return root.rotate_left()
            # right left
            root.link_right(root.right.rotate_right())
            return root.rotate_left()

        return root

    ## deletion
    ## --------

    def delete(self, key) -> None:
        """Remove ``key`` from the tree, raising ``KeyError`` if absent."""
        if self.get_node(key) is None:
            raise KeyError(key)
        self._root = self._delete(key, self._root)
        if self._root is not None:
            self._root.parent = None
        self._size -= 1

    def _delete(self, key, root: Optional[AvlNode]) -> Optional[AvlNode]:
        if root is None:
            return None

        cmp = self._compare(key, root.key)
        if cmp < 0:
            root.link_left(self._delete(key, root.left))
        elif cmp > 0:
            root.link_right(self._delete(key, root.right))
        else:
            if root.left is None and root.right is None:
                return None
            if root.left is None:
                child = root.right
                root.link_right(None)
                return child
            if root.right is None:
                child = root.left
                root.link_left(None)
                return child
            # two children: take over the in-order successor's key
            successor = min_value_node(root.right)
            root.key = successor.key
            root.link_right(self._delete(successor.key, root.right))

        root.update_height()
        state = balance_state(root)

        if state is BalanceState.UNBALANCED_LEFT:
            child_state = balance_state(root.left)
            if child_state is BalanceState.SLIGHTLY_UNBALANCED_RIGHT:
                # left right
                root.link_left(root.left.rotate_left())
            # left left
            return root.rotate_right()

        if state is BalanceState.UNBALANCED_RIGHT:
            child_state = balance_state(root.right)
            if child_state is BalanceState.SLIGHTLY_UNBALANCED_LEFT:
                # right left
                root.link_right(root.right.rotate_right())
            # right right
            return root.rotate_left()

        return root

    ## lookup
    ## ------

    def get_node(self, key) -> Optional[AvlNode]:
        """Return the node holding ``key``, or ``None``."""
        node = self._root
        while node is not None:
            cmp = self._compare(key, node.key)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def contains(self, key) -> bool:
        return self.get_node(key) is not None

    def find_minimum(self):
        node = self.find_minimum_node()
        return node.key if node else None

    def find_minimum_node(self) -> Optional[AvlNode]:
        if self._root is None:
            return None
        return min_value_node(self._root)

    def find_maximum(self):
        node = self.find_maximum_node()
        return node.key if node else None

    def find_maximum_node(self) -> Optional[AvlNode]:
        if self._root is None:
            return None
        return max_value_node(self._root)

    ## in-order neighbours
    ## -------------------

    def next(self, node: AvlNode) -> Optional[AvlNode]:
        """In-order successor of ``node``, or ``None``."""
        if node.right:
            return min_value_node(node.right)
        while node.parent:
            if node.parent.right is node:
                node = node.parent
            else:
                return node.parent
        return None

    def prev(self, node: AvlNode) -> Optional[AvlNode]:
        """In-order predecessor of ``node``, or ``None``."""
        if node.left:
            return max_value_node(node.left)
        while node.parent:
            if node.parent.left is node:
                node = node.parent
            else:
                return node.parent
        return None

    def pop_minimum(self):
        """Remove and return the smallest key."""
        node = self.find_minimum_node()
        if node is None:
            raise KeyError('pop_minimum from an empty tree')
        key = node.key
        self.delete(key)
        return key

    ## diagnostics
    ## -----------

    def check_sorted(self) -> bool:
        """Return ``True`` if an in-order walk is strictly increasing."""
        node = self.find_minimum_node()
        if node is None:
            return True
        nxt = self.next(node)
        while nxt is not None:
            if not self._compare(node.key, nxt.key) < 0:
                return False
            node = nxt
            nxt = self.next(nxt)
        return True

    def check_balanced(self) -> bool:
        """Return ``True`` if every cached height and balance factor is valid
        and every parent link mirrors its child link."""

        def walk(node: Optional[AvlNode]) -> Optional[int]:
            if node is None:
                return -1
            lh = walk(node.left)
            rh = walk(node.right)
            if lh is None or rh is None:
                return None
            if node.left is not None and node.left.parent is not node:
                return None
            if node.right is not None and node.right.parent is not node:
                return None
            if node.height != max(lh, rh) + 1 or abs(lh - rh) > 1:
                return None
            return node.height

        if self._root is not None and self._root.parent is not None:
            return False
        return walk(self._root) is not None


__all__ = ['AvlTree', 'AvlNode', 'BalanceState', 'balance_state']
