"""
Assembly of the subdivided mesh.

The new vertex array starts with the relocated original vertices. Face points
and edge points are appended as faces are visited; an edge point gets its new
index the first time either adjacent face reaches it and keeps it after that.
The lookup is keyed on edge index, never on point values.

Each original face (v0, v1, v2, v3) emits one child quad per corner:

    a ------- b          a: relocated corner
    |         |          b: edge point of (a, a_next)
    |         |          c: face point
    d ------- c          d: edge point of (a_prev, a)

which keeps the winding of the parent face.
"""

import logging
from typing import Dict, List, Sequence

import numpy as np

from ccsubdiv.core.errors import StitchMismatch
from ccsubdiv.core.mesh import QuadMesh
from ccsubdiv.subdivision.edges import V0, V1

logger = logging.getLogger(__name__)


class TopologyStitcher:
    """Builds the refined vertex array and quad list from the pass outputs.

    The stitcher owns the growing output arrays and the edge -> new vertex
    index map; the inputs are only read.
    """

    def __init__(
        self,
        new_points: np.ndarray,
        face_points: np.ndarray,
        edge_points: np.ndarray,
        edges: np.ndarray,
        vertex_edges: Sequence[Sequence[int]],
    ):
        self.face_points = face_points
        self.edge_points = edge_points
        self.edges = edges
        self._edge_pairs = edges[:, [V0, V1]].tolist()
        self.vertex_edges = vertex_edges

        n_total = len(new_points) + len(face_points) + len(edge_points)
        self._vertices = np.empty((n_total, 3), dtype=np.float64)
        self._vertices[:len(new_points)] = new_points
        self._n_used = len(new_points)
        self._edge_vertex: Dict[int, int] = {}
        self._quads: List[List[int]] = []

    def _append(self, point: np.ndarray) -> int:
        index = self._n_used
        self._vertices[index] = point
        self._n_used += 1
        return index

    def _edge_vertex_index(self, edge_id: int) -> int:
        index = self._edge_vertex.get(edge_id)
        if index is None:
            index = self._append(self.edge_points[edge_id])
            self._edge_vertex[edge_id] = index
        return index

    def _find_edges(self, face_id: int, a: int, a_next: int, a_prev: int):
        """Locate the outgoing (a, a_next) and incoming (a_prev, a) edges of corner a."""
        outgoing = incoming = None
        for edge_id in self.vertex_edges[a]:
            p, q = self._edge_pairs[edge_id]
            other = q if p == a else p
            if other == a_next:
                outgoing = edge_id
            elif other == a_prev:
                incoming = edge_id
        if outgoing is None:
            raise StitchMismatch(face_id, a, a_next)
        if incoming is None:
            raise StitchMismatch(face_id, a, a_prev)
        return outgoing, incoming

    def add_face(self, face_id: int, face: Sequence[int]) -> None:
        """Emit the four child quads of one original face."""
        c = self._append(self.face_points[face_id])
        for j in range(4):
            a = face[j]
            a_next = face[(j + 1) % 4]
            a_prev = face[(j + 3) % 4]
            outgoing, incoming = self._find_edges(face_id, a, a_next, a_prev)
            b = self._edge_vertex_index(outgoing)
            d = self._edge_vertex_index(incoming)
            self._quads.append([a, b, c, d])

    def result(self) -> QuadMesh:
        """Return the assembled mesh."""
        vertices = self._vertices[:self._n_used].copy()
        quads = np.array(self._quads, dtype=np.int64).reshape(-1, 4)
        return QuadMesh(vertices, quads)


def stitch_topology(
    quads: np.ndarray,
    new_points: np.ndarray,
    face_points: np.ndarray,
    edge_points: np.ndarray,
    edges: np.ndarray,
    vertex_edges: Sequence[Sequence[int]],
) -> QuadMesh:
    """Assemble the subdivided mesh.

    Args:
        quads: Original quads with shape (n_quads, 4)
        new_points: Relocated original vertices
        face_points: One point per original quad
        edge_points: One point per edge
        edges: Edge array with rows (v_lo, v_hi, f0, f1)
        vertex_edges: Per-vertex incident-edge lookup

    Returns:
        Mesh with n_vertices + n_quads + n_edges vertices and 4 * n_quads quads

    Raises:
        StitchMismatch: If a face corner has no edge to one of its neighbours
    """
    stitcher = TopologyStitcher(new_points, face_points, edge_points, edges, vertex_edges)
    for face_id, face in enumerate(quads.tolist()):
        stitcher.add_face(face_id, face)
    mesh = stitcher.result()
    logger.debug(f"Stitched {mesh.n_quads} quads over {mesh.n_vertices} vertices")
    return mesh
