"""
ccsubdiv - Catmull-Clark subdivision for quad meshes.

One call refines a quad mesh into four times as many quads approximating the
smooth limit surface. Callers repeat the call for more levels.
"""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "1.0.0.dev0"

from ccsubdiv.core import (
    DanglingVertex,
    MalformedFace,
    NonManifoldEdge,
    QuadMesh,
    StitchMismatch,
    SubdivisionConfig,
    SubdivisionError,
    make_cube,
    make_grid,
    make_unit_quad,
)
from ccsubdiv.subdivision import SubdivisionData, prepare_subdivision, subdivide

__all__ = [
    "subdivide", "prepare_subdivision", "SubdivisionData",
    "QuadMesh", "SubdivisionConfig",
    "SubdivisionError", "MalformedFace", "NonManifoldEdge", "DanglingVertex", "StitchMismatch",
    "make_unit_quad", "make_grid", "make_cube",
]
