"""Triangle meshes of element-list polytopes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from polytopekit.config import KernelConfig
from polytopekit.point import Point
from polytopekit.polytope import PolytopeC
from polytopekit.triangulator import IndexTriangle, triangulate_cycle

logger = logging.getLogger(__name__)


@dataclass
class Mesh:
    """Triangles over a shared vertex list.

    ``vertices`` starts with the polytope's own vertices, in order,
    followed by any crossing points introduced by planarization.
    ``cycles`` keeps the simple cycles of every face, in face order.
    """

    vertices: List[Point] = field(default_factory=list)
    triangles: List[IndexTriangle] = field(default_factory=list)
    cycles: List[List[List[Point]]] = field(default_factory=list)

    def triangle_points(self) -> Iterator[Tuple[Point, Point, Point]]:
        for a, b, c in self.triangles:
            yield self.vertices[a], self.vertices[b], self.vertices[c]


def polytope_mesh(polytope: PolytopeC, config: Optional[KernelConfig] = None) -> Mesh:
    """Planarize every face of ``polytope`` and triangulate the pieces."""

    mesh = Mesh(vertices=list(polytope.vertices))
    # points are matched by identity, crossing points are shared by
    # the two cycles that meet there
    index: Dict[int, int] = {id(v): k for k, v in enumerate(mesh.vertices)}

    for face_cycles in polytope.planarize(config):
        mesh.cycles.append(face_cycles)
        for cycle in face_cycles:
            ids = []
            for p in cycle:
                key = id(p)
                if key not in index:
                    index[key] = len(mesh.vertices)
                    mesh.vertices.append(p)
                ids.append(index[key])
            for a, b, c in triangulate_cycle(cycle):
                mesh.triangles.append((ids[a], ids[b], ids[c]))

    logger.debug('%s: %d vertices, %d triangles', polytope.name,
                 len(mesh.vertices), len(mesh.triangles))
    return mesh


__all__ = ['Mesh', 'polytope_mesh']
