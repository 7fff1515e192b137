#!/usr/bin/env python3
"""
Command line front end for polytopekit.

Usage:
    python -m polytopekit SHAPE N [--step D] [--pyramid COORDS] [--output FILE]

SHAPE is one of hypercube, simplex, cross or star.  For hypercubes,
simplices and cross-polytopes N is the dimension; for star polygons it
is the number of vertices and ``--step`` the density.

Examples:
    # element counts of the tesseract
    python -m polytopekit hypercube 4

    # the pentagram, split into simple pieces, saved as OFF
    python -m polytopekit star 5 --step 2 --output pentagram.off

    # a square pyramid
    python -m polytopekit hypercube 2 --pyramid 0,0,1 --output pyramid.off
"""

import argparse
import logging
import sys
from typing import List, Optional

from polytopekit.errors import PolytopeError
from polytopekit.io.off import write_off
from polytopekit.logging_config import setup_logging, verbosity_to_level
from polytopekit.point import Point
from polytopekit.polytope import PolytopeC, element_name

logger = logging.getLogger("polytopekit.cli")

SHAPES = ('hypercube', 'simplex', 'cross', 'star')


def parse_coordinates(text: str) -> Point:
    """Parse a point like '0,0,1' into a Point."""
    try:
        return Point([float(c) for c in text.split(',') if c.strip()])
    except ValueError:
        raise ValueError(f"Invalid coordinates: {text} (expected comma separated numbers)")


def build(shape: str, n: int, step: int = 1) -> PolytopeC:
    if shape == 'hypercube':
        return PolytopeC.hypercube(n)
    if shape == 'simplex':
        return PolytopeC.simplex(n)
    if shape == 'cross':
        return PolytopeC.cross(n)
    if shape == 'star':
        return PolytopeC.star(n, step)
    raise ValueError(f"Unknown shape: {shape}")


def describe(polytope: PolytopeC) -> List[str]:
    lines = [f"{polytope.name}: dimension {polytope.dimensions}, "
             f"{polytope.space_dimensions} coordinates"]
    for rank, count in enumerate(polytope.element_counts()):
        lines.append(f"  {element_name(rank, plural=True)}: {count}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='polytopekit',
        description='Build polytopes, planarize their faces and export them as OFF.',
    )
    parser.add_argument('shape', choices=SHAPES, help='Polytope family')
    parser.add_argument('n', type=int, help='Dimension, or number of vertices for star')
    parser.add_argument('--step', type=int, default=1, help='Star polygon density')
    parser.add_argument('--pyramid', metavar='COORDS',
                        help='Extrude to a pyramid with this apex, e.g. 0,0,1')
    parser.add_argument('--output', '-o', help='Write the polytope to this OFF file')
    parser.add_argument('--comments', action='store_true', help='Add comments to the OFF file')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='More logging, repeat for debug output')
    args = parser.parse_args(argv)

    setup_logging(verbosity_to_level(args.verbose))

    try:
        polytope = build(args.shape, args.n, args.step)
        if args.pyramid:
            polytope.extrude_to_pyramid(parse_coordinates(args.pyramid))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in describe(polytope):
        print(line)

    try:
        faces = polytope.planarize()
    except PolytopeError as e:
        print(f"Error: planarizing {polytope.name} failed: {e}", file=sys.stderr)
        return 1
    if faces:
        cycles = sum(len(c) for c in faces)
        skipped = sum(1 for c in faces if not c)
        print(f"  planarized: {len(faces)} face(s) -> {cycles} simple cycle(s), "
              f"{skipped} degenerate")

    if args.output:
        try:
            write_off(polytope, args.output, comments=args.comments)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        logger.info("wrote %s", args.output)
        print(f"Wrote {args.output}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
