## n-dimensional points for polytopekit
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

"""n-dimensional points for **polytopekit**

Polytope vertices live in a space of arbitrary dimension, so a
``Point`` simply wraps a one dimensional numpy array of floats.  A
0-dimensional point is allowed (it is the single vertex of the
0-dimensional hypercube).

Equality between points is tolerance based, see ``equal()``.  The
``==`` operator is left as object identity: the
planarizer uses the identity of a ``Point`` to recognize that two
adjacency nodes sit at the very same intersection.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

import numpy as np

from polytopekit.config import default_epsilon
from polytopekit.errors import DimensionMismatchError

Number = Union[int, float]


class Point:
    """A point (or vector) with any number of coordinates."""

    __slots__ = ('coordinates',)

    def __init__(self, coordinates: Union[Iterable[Number], np.ndarray] = ()):
        if not isinstance(coordinates, np.ndarray):
            coordinates = list(coordinates)
        self.coordinates = np.array(coordinates, dtype=float).reshape(-1)

    def __repr__(self):
        return 'Point([{}])'.format(', '.join('{:.6g}'.format(c) for c in self.coordinates))

    def __len__(self) -> int:
        return int(self.coordinates.shape[0])

    def __getitem__(self, i: int) -> float:
        return float(self.coordinates[i])

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self.coordinates)

    def dimensions(self) -> int:
        return len(self)

    def clone(self) -> 'Point':
        return Point(self.coordinates.copy())

    def _check(self, other: 'Point') -> None:
        if len(self) != len(other):
            raise DimensionMismatchError(
                f'points have {len(self)} and {len(other)} coordinates')

    def __add__(self, other: 'Point') -> 'Point':
        self._check(other)
        return Point(self.coordinates + other.coordinates)

    def __sub__(self, other: 'Point') -> 'Point':
        self._check(other)
        return Point(self.coordinates - other.coordinates)

    def scale(self, c: Number) -> 'Point':
        return Point(self.coordinates * c)

    def __mul__(self, c: Number) -> 'Point':
        return self.scale(c)

    __rmul__ = __mul__

    def dot(self, other: 'Point') -> float:
        self._check(other)
        return float(np.dot(self.coordinates, other.coordinates))

    def norm(self) -> float:
        return float(np.linalg.norm(self.coordinates))

    def isclose(self, other: 'Point', tol: Optional[float] = None) -> bool:
        """Return ``True`` if ``other`` lies within ``tol`` of this point."""
        if tol is None:
            tol = default_epsilon()
        if len(self) != len(other):
            return False
        return float(np.linalg.norm(self.coordinates - other.coordinates)) < tol

    def resized(self, dim: int) -> 'Point':
        """Return a copy padded with zeros or truncated to ``dim`` coordinates."""
        if dim < 0:
            raise ValueError(f'bad dimension: {dim}')
        n = len(self)
        if n >= dim:
            return Point(self.coordinates[:dim].copy())
        return Point(np.concatenate([self.coordinates, np.zeros(dim - n)]))

    def tolist(self) -> list:
        return [float(c) for c in self.coordinates]


def point(*args: Number) -> Point:
    """Convenience constructor, ``point(1, 2, 3)``."""
    if len(args) == 1 and not isinstance(args[0], (int, float)):
        return Point(args[0])
    return Point(args)


def equal(a: Point, b: Point, tol: Optional[float] = None) -> bool:
    """Tolerance-based equality of two points."""
    return a.isclose(b, tol)


def centroid(points: Sequence[Point]) -> Point:
    """Average of a non-empty sequence of points."""
    if not points:
        raise ValueError('centroid of an empty point list')
    res = points[0].clone()
    for p in points[1:]:
        res = res + p
    return res.scale(1.0 / len(points))


__all__ = ['Point', 'point', 'equal', 'centroid']
