"""Exceptions raised by the polytopekit geometry kernel."""


class PolytopeError(Exception):
    """Base class for kernel errors."""


class DimensionMismatchError(PolytopeError, ValueError):
    """Points of differing dimension were combined."""


class TopologyError(PolytopeError):
    """An adjacency structure does not have the expected shape."""


class LinkOverflowError(TopologyError):
    """A cyclic adjacency node already has both neighbour slots taken."""


class SweepLineError(PolytopeError):
    """The sweep status structure lost track of an edge.

    Raised when an edge cannot be inserted because the comparator reports
    a collision with a different edge, or when an edge expected to be on
    the sweep line cannot be found.  Either case means the arrangement
    being built can no longer be trusted.
    """


__all__ = [
    'PolytopeError',
    'DimensionMismatchError',
    'TopologyError',
    'LinkOverflowError',
    'SweepLineError',
]
