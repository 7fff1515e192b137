"""OFF export for element-list polytopes.

The generalized OFF format starts with a ``nOFF`` header (plain ``OFF``
for polyhedra), followed by the element counts, the vertex coordinates,
the faces as vertex cycles and every higher element as a list of facet
indices.  Polygons (``2OFF``) list their vertices in cycle order and
have no face section.
"""

from __future__ import annotations

import io
from typing import List, Sequence

from polytopekit.polytope import PolytopeC, element_name


def write_off(polytope: PolytopeC, path_or_file, *, comments: bool = False) -> None:
    """Write ``polytope`` as OFF.

    ``path_or_file`` can be a filesystem path or an open text stream.
    """

    text = off_text(polytope, comments=comments)

    close_when_done = False
    if hasattr(path_or_file, 'write'):
        stream = path_or_file
    else:
        stream = open(path_or_file, 'w', encoding='utf-8')
        close_when_done = True

    try:
        stream.write(text)
    finally:
        if close_when_done:
            stream.close()


def off_text(polytope: PolytopeC, *, comments: bool = False) -> str:
    """Return the OFF representation of ``polytope`` as a string."""

    dims = polytope.dimensions
    if polytope.space_dimensions > dims:
        raise ValueError('the OFF format does not support polytopes in spaces '
                         'with more dimensions than themselves')

    els = polytope.element_list
    counts = polytope.element_counts()
    out = io.StringIO()

    # header and element counts
    if dims == 0:
        out.write('0OFF')
        return out.getvalue()
    if dims == 1:
        out.write('1OFF\n')
        if comments:
            out.write('# Vertices\n')
        out.write(f'{counts[0]}\n')
    elif dims == 2:
        out.write('2OFF\n')
        if comments:
            out.write('# Vertices, Edges\n')
        out.write(f'{counts[0]} {counts[1]}\n')
    elif dims == 3:
        out.write('OFF\n')
        if comments:
            out.write('# Vertices, Faces, Edges\n')
        out.write(f'{counts[0]} {counts[2]} {counts[1]}\n')
    else:
        out.write(f'{dims}OFF\n')
        if comments:
            names = ['Vertices', 'Faces', 'Edges', 'Cells']
            names += [element_name(i, True) for i in range(4, dims)]
            out.write('# ' + ', '.join(names) + '\n')
        higher = [str(counts[i]) for i in range(3, dims)]
        out.write(' '.join([str(counts[0]), str(counts[2]), str(counts[1])] + higher) + '\n')

    # vertices, padded with zeros up to the polytope's dimension
    if comments:
        out.write('\n# Vertices\n')
    if dims == 2:
        order = polytope.face_to_vertices_2d()
    else:
        order = range(counts[0])
    for i in order:
        out.write(_coordinates(els[0][i], dims) + '\n')

    if dims >= 3:
        if comments:
            out.write('\n# Faces\n')
        for i in range(counts[2]):
            cycle = polytope.face_to_vertices(i)
            out.write(_element(cycle) + '\n')

    for d in range(3, dims):
        if comments:
            out.write(f'\n# {element_name(d, True)}\n')
        for element in els[d]:
            out.write(_element(element) + '\n')

    return out.getvalue()


def _coordinates(point, dims: int) -> str:
    coords: List[float] = point.tolist()[:dims]
    coords += [0.0] * (dims - len(coords))
    return ' '.join(_number(c) for c in coords)


def _element(indices: Sequence[int]) -> str:
    return ' '.join([str(len(indices))] + [str(i) for i in indices])


def _number(x: float) -> str:
    text = repr(float(x))
    if text.endswith('.0'):
        text = text[:-2]
    return text


__all__ = ['write_off', 'off_text']
