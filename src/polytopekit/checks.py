"""Validation helpers for element-list polytopes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List

from polytopekit.errors import TopologyError
from polytopekit.point import Point


def check_element_list(polytope) -> "CheckResult":
    """Check that every index of level ``k`` refers to an element of level
    ``k - 1`` and that all vertices share one number of coordinates."""

    els = polytope.element_list
    warnings: List[str] = []

    if polytope.dimensions != len(els) - 1:
        warnings.append(f'dimensions is {polytope.dimensions} but there are {len(els)} levels')

    dims = {v.dimensions() for v in els[0] if isinstance(v, Point)}
    if len(dims) > 1:
        warnings.append(f'vertices have differing dimensions: {sorted(dims)}')
    if any(not isinstance(v, Point) for v in els[0]):
        warnings.append('level 0 holds something other than points')

    for k in range(1, len(els)):
        below = len(els[k - 1])
        for idx, element in enumerate(els[k]):
            bad = [i for i in element if not isinstance(i, int) or not 0 <= i < below]
            if bad:
                warnings.append(f'level {k} element {idx} has bad indices {bad}')

    return CheckResult(not warnings, warnings)


def check_faces(polytope) -> "CheckResult":
    """Check that every face's edge set forms exactly one cycle."""

    warnings: List[str] = []
    if polytope.dimensions < 2:
        return CheckResult(True, [])

    edges = polytope.element_list[1]
    for idx, face in enumerate(polytope.element_list[2]):
        degree = Counter()
        for e in face:
            a, b = edges[e]
            degree[a] += 1
            degree[b] += 1
        if any(count != 2 for count in degree.values()):
            warnings.append(f'face {idx} is not 2-regular')
            continue
        try:
            polytope.face_to_vertices(idx)
        except TopologyError as exc:
            warnings.append(f'face {idx}: {exc}')

    return CheckResult(not warnings, warnings)


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'check_element_list',
    'check_faces',
]
