## geometric predicates for polytopekit
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

"""geometric predicates for **polytopekit**

Pure functions over ``Point``s used by the planarizer: segment
intersection, collinearity, near-parallel directions and the choice of
a well conditioned coordinate plane to project a planar face onto.

All of them take an optional tolerance ``eps``; when omitted the
kernel-wide ``epsilon`` from ``polytopekit.config`` is used.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple

from polytopekit.config import default_epsilon
from polytopekit.errors import DimensionMismatchError
from polytopekit.point import Point, equal

Axes = Tuple[int, int]


def _dominant_axes(a: Point, b: Point, c: Point, d: Point) -> Axes:
    """Pick the coordinates in which ``ab`` and ``cd`` change the most,
    so that neither segment gets projected into a point."""
    if a.dimensions() == 2:
        return 0, 1

    ab_max = cd_max = 0.0
    ab_idx, cd_idx = 0, 1
    for i in range(a.dimensions()):
        ab = abs(a[i] - b[i])
        cd = abs(c[i] - d[i])
        if ab > ab_max:
            ab_max, ab_idx = ab, i
        if cd > cd_max:
            cd_max, cd_idx = cd, i

    # any other coordinate will do as the second one
    if ab_idx == cd_idx:
        cd_idx = 1 if cd_idx == 0 else 0
    return ab_idx, cd_idx


def intersect(a: Point, b: Point, c: Point, d: Point,
              axes: Optional[Axes] = None,
              eps: Optional[float] = None) -> Optional[Point]:
    """Intersection of segment ``ab`` with segment ``cd``.

    The four points are assumed to be coplanar.  The segments are
    projected onto the coordinate pair ``axes`` (by default the
    coordinates in which they vary the most), and the parametric system
    ``a + t(b - a) = c + u(d - c)`` is solved there.

    Returns ``None`` if the directions are (nearly) parallel or if the
    crossing is not strictly inside both segments, i.e. unless ``t``
    and ``u`` both lie in the open interval ``(eps, 1 - eps)``; touching
    at or near an endpoint never counts.  Otherwise returns the crossing
    as a point of the full space.
    """
    dim = a.dimensions()
    if b.dimensions() != dim or c.dimensions() != dim or d.dimensions() != dim:
        raise DimensionMismatchError(
            "can't intersect edges with different numbers of dimensions")
    if dim < 2:
        raise DimensionMismatchError('intersect needs points of at least two dimensions')
    if eps is None:
        eps = default_epsilon()

    i, j = axes if axes is not None else _dominant_axes(a, b, c, d)

    p = (a[i], a[j])
    r = (b[i] - a[i], b[j] - a[j])
    q = (c[i], c[j])
    s = (d[i] - c[i], d[j] - c[j])

    if same_slope(r[0], r[1], s[0], s[1], eps):
        return None

    denom = r[1] * s[0] - r[0] * s[1]
    if denom == 0.0:
        return None
    t = ((p[0] - q[0]) * s[1] - (p[1] - q[1]) * s[0]) / denom
    u = ((p[0] - q[0]) * r[1] - (p[1] - q[1]) * r[0]) / denom

    if not (eps < t < 1.0 - eps) or not (eps < u < 1.0 - eps):
        return None

    return Point(a.coordinates + (b.coordinates - a.coordinates) * t)


def collinear(a: Point, b: Point, c: Point, eps: Optional[float] = None) -> bool:
    """Is the angle between ``b - a`` and ``c - a`` straight, up to ``eps``?

    Coincident points are considered collinear with anything.
    """
    if eps is None:
        eps = default_epsilon()
    if equal(a, b, eps) or equal(a, c, eps):
        return True

    sub0 = (b - a).coordinates
    sub1 = (c - a).coordinates
    dot = float(sub0 @ sub1)
    norms = math.sqrt(float(sub0 @ sub0) * float(sub1 @ sub1))
    return 1.0 - abs(dot / norms) <= eps


def same_slope(a: float, b: float, c: float, d: float,
               eps: Optional[float] = None) -> bool:
    """Do the directions ``(a, b)`` and ``(c, d)`` agree modulo pi?"""
    if eps is None:
        eps = default_epsilon()
    s = (math.atan2(b, a) - math.atan2(d, c)) % math.pi
    return s < eps or s > math.pi - eps


def shoelace_area(p: Point, q: Point, r: Point, i: int, j: int) -> float:
    """Signed area of triangle ``pqr`` projected onto coordinates ``i, j``."""
    return 0.5 * (p[i] * (q[j] - r[j]) +
                  q[i] * (r[j] - p[j]) +
                  r[i] * (p[j] - q[j]))


def projection_axes(p: Point, q: Point, r: Point) -> Axes:
    """The coordinate pair onto which triangle ``pqr`` projects with the
    largest area.  Used to flatten a planar face embedded in n-space."""
    dim = p.dimensions()
    if dim < 2:
        raise DimensionMismatchError('projection needs at least two dimensions')
    best = (0, 1)
    max_area = 0.0
    for j in range(dim):
        for k in range(j + 1, dim):
            area = abs(shoelace_area(p, q, r, j, k))
            if area > max_area:
                max_area = area
                best = (j, k)
    return best


__all__ = [
    'intersect',
    'collinear',
    'same_slope',
    'shoelace_area',
    'projection_axes',
]
