"""
Quad mesh container and input validation.

A mesh is a flat array of 3D positions plus an array of quads, each quad
holding 4 indices into the position array in cyclic order.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ccsubdiv.core.errors import MalformedFace

logger = logging.getLogger(__name__)


def _check_integral(quads: np.ndarray) -> None:
    """Reject float face indices that would be truncated by the int64 cast."""
    integral = np.isfinite(quads) & (quads == np.round(quads))
    if np.all(integral):
        return
    if quads.ndim != 2:
        raise MalformedFace(None, "vertex index is not an integer")
    face = int(np.flatnonzero(~np.all(integral, axis=1))[0])
    # Keep the raw values; MalformedFace would truncate them to int
    raise MalformedFace(face, f"vertex index is not an integer: {quads[face].tolist()}")


@dataclass
class QuadMesh:
    """Vertex positions and quad faces.

    Attributes:
        vertices: Float array of shape (n_vertices, 3)
        quads: Integer array of shape (n_quads, 4)
    """

    vertices: np.ndarray
    quads: np.ndarray

    def __post_init__(self) -> None:
        vertices = np.asarray(self.vertices, dtype=np.float64)
        if vertices.size == 0:
            vertices = vertices.reshape(0, 3)
        self.vertices = vertices
        quads = np.asarray(self.quads)
        if quads.size == 0:
            quads = quads.reshape(0, 4)
        if quads.dtype.kind == "f":
            _check_integral(quads)
        self.quads = quads.astype(np.int64, copy=False)

    @classmethod
    def from_lists(cls, vertices: Sequence[Sequence[float]], quads: Sequence[Sequence[int]]) -> "QuadMesh":
        """Build a mesh from plain Python sequences."""
        return cls(np.array(vertices, dtype=np.float64), np.array(quads))

    @property
    def n_vertices(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def n_quads(self) -> int:
        return int(self.quads.shape[0])

    def copy(self) -> "QuadMesh":
        return QuadMesh(self.vertices.copy(), self.quads.copy())

    def __repr__(self) -> str:
        return f"QuadMesh(n_vertices={self.n_vertices}, n_quads={self.n_quads})"


def validate_quad_mesh(mesh: QuadMesh) -> None:
    """Check that a mesh can be subdivided.

    Args:
        mesh: Mesh to check

    Raises:
        ValueError: If the vertex array is not (n, 3) or holds non-finite values
        MalformedFace: If a face does not have exactly 4 distinct in-range indices
    """
    vertices = mesh.vertices
    quads = mesh.quads

    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(f"vertices must have shape (n, 3), got {vertices.shape}")

    if not np.all(np.isfinite(vertices)):
        bad = int(np.flatnonzero(~np.all(np.isfinite(vertices), axis=1))[0])
        raise ValueError(f"vertex {bad} has a non-finite coordinate")

    if quads.ndim != 2 or quads.shape[1] != 4:
        raise MalformedFace(None, f"quads must have shape (n, 4), got {quads.shape}")

    if quads.shape[0] == 0:
        return

    n_vertices = vertices.shape[0]
    out_of_range = np.any((quads < 0) | (quads >= n_vertices), axis=1)
    if np.any(out_of_range):
        face = int(np.flatnonzero(out_of_range)[0])
        raise MalformedFace(face, f"vertex index out of range [0, {n_vertices})", quads[face])

    # A repeated corner collapses one of the face's boundary edges
    ordered = np.sort(quads, axis=1)
    repeated = np.any(ordered[:, 1:] == ordered[:, :-1], axis=1)
    if np.any(repeated):
        face = int(np.flatnonzero(repeated)[0])
        raise MalformedFace(face, "face repeats a vertex index", quads[face])

    logger.debug(f"Validated mesh with {n_vertices} vertices and {quads.shape[0]} quads")
