"""Core data types for ccsubdiv."""

from ccsubdiv.core.config import SubdivisionConfig
from ccsubdiv.core.errors import (
    DanglingVertex,
    MalformedFace,
    NonManifoldEdge,
    StitchMismatch,
    SubdivisionError,
)
from ccsubdiv.core.mesh import QuadMesh, validate_quad_mesh
from ccsubdiv.core.primitives import make_cube, make_grid, make_unit_quad

__all__ = [
    "SubdivisionConfig",
    "SubdivisionError", "MalformedFace", "NonManifoldEdge", "DanglingVertex", "StitchMismatch",
    "QuadMesh", "validate_quad_mesh",
    "make_unit_quad", "make_grid", "make_cube",
]
