"""polytopekit: element-list polytopes and face planarization.

The commonly used entry points are re-exported here; everything else
lives in its own module (``avltree``, ``dll``, ``space``, ``mesh``,
``io`` ...).
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from polytopekit.config import KernelConfig, get_kernel_config, set_kernel_config
from polytopekit.planarize import planarize_polygon
from polytopekit.point import Point, point
from polytopekit.polytope import PolytopeC, element_name

try:
    __version__ = version("polytopekit")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'KernelConfig',
    'Point',
    'PolytopeC',
    'element_name',
    'get_kernel_config',
    'planarize_polygon',
    'point',
    'set_kernel_config',
]
