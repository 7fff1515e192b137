"""Triangulation of the simple cycles produced by the planarizer.

Ear clipping is done by ``mapbox-earcut``.  A cycle may live in any
number of dimensions; it is flattened onto the coordinate plane in
which it has the largest area, triangulated there, and the triangles
are returned as index triples into the cycle.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate planarized faces"
    ) from exc

from polytopekit.errors import DimensionMismatchError
from polytopekit.point import Point

IndexTriangle = Tuple[int, int, int]


def triangulate_cycle(cycle: Sequence[Point],
                      axes: Optional[Tuple[int, int]] = None) -> List[IndexTriangle]:
    """Return triangles covering the simple polygon ``cycle``.

    Cycles with fewer than three points produce no triangles.  The
    returned triangles index into ``cycle``; winding follows whatever
    earcut produces, downstream code is responsible for orienting them.
    """
    if len(cycle) < 3:
        return []
    if axes is None:
        axes = best_axes(cycle)
    i, j = axes

    vertices = np.asarray([(p[i], p[j]) for p in cycle], dtype=np.float64)
    ring_ends = np.asarray([len(cycle)], dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, ring_ends)

    triangles: List[IndexTriangle] = []
    for k in range(0, len(indices), 3):
        triangles.append((int(indices[k]), int(indices[k + 1]), int(indices[k + 2])))
    return triangles


def best_axes(cycle: Sequence[Point]) -> Tuple[int, int]:
    """Coordinate pair in which the polygon has the largest projected area."""
    dim = cycle[0].dimensions()
    if dim < 2:
        raise DimensionMismatchError('cannot triangulate points with fewer than two coordinates')
    best = (0, 1)
    max_area = -1.0
    for i in range(dim):
        for j in range(i + 1, dim):
            area = abs(signed_area(cycle, i, j))
            if area > max_area:
                max_area = area
                best = (i, j)
    return best


def signed_area(cycle: Sequence[Point], i: int = 0, j: int = 1) -> float:
    """Shoelace area of ``cycle`` projected onto coordinates ``i, j``."""
    total = 0.0
    n = len(cycle)
    for k, p in enumerate(cycle):
        q = cycle[(k + 1) % n]
        total += p[i] * q[j] - q[i] * p[j]
    return total / 2.0


__all__ = ['triangulate_cycle', 'best_axes', 'signed_area']
