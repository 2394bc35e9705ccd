"""
Edge topology of a quad mesh.

Edges are undirected vertex pairs stored in canonical (min, max) order with up
to two incident faces. The result is an int64 array of rows
``(v_lo, v_hi, f0, f1)`` where ``f1`` is ``BOUNDARY`` for edges used by a
single face. Identity is decided on vertex indices only.
"""

import logging
from typing import Dict, List, Tuple

import numpy as np

from ccsubdiv.core.errors import NonManifoldEdge

logger = logging.getLogger(__name__)

BOUNDARY = -1

# Column layout of the edge array
V0, V1, F0, F1 = 0, 1, 2, 3


def canonical_edge(a: int, b: int) -> Tuple[int, int]:
    """Order an edge's endpoints so identity does not depend on traversal direction."""
    return (a, b) if a < b else (b, a)


def extract_edges(quads: np.ndarray) -> np.ndarray:
    """Derive the unique edges of a quad mesh and their incident faces.

    Edges are returned in order of first appearance while scanning faces in
    order, so the output is deterministic for a given input.

    Args:
        quads: Integer array of shape (n_quads, 4)

    Returns:
        Integer array of shape (n_edges, 4) with rows (v_lo, v_hi, f0, f1)

    Raises:
        NonManifoldEdge: If an edge is shared by more than two faces
    """
    edge_index: Dict[Tuple[int, int], int] = {}
    rows: List[List[int]] = []

    for face_id, face in enumerate(quads.tolist()):
        for k in range(4):
            key = canonical_edge(face[k], face[(k + 1) % 4])
            idx = edge_index.get(key)
            if idx is None:
                edge_index[key] = len(rows)
                rows.append([key[0], key[1], face_id, BOUNDARY])
            elif rows[idx][F1] == BOUNDARY:
                rows[idx][F1] = face_id
            else:
                raise NonManifoldEdge(key, [rows[idx][F0], rows[idx][F1], face_id])

    edges = np.array(rows, dtype=np.int64).reshape(-1, 4)
    n_boundary = int(np.count_nonzero(edges[:, F1] == BOUNDARY))
    logger.debug(f"Extracted {len(edges)} edges ({n_boundary} boundary) from {len(quads)} quads")
    return edges


def build_vertex_edges(edges: np.ndarray, n_vertices: int) -> List[List[int]]:
    """Build the per-vertex incident-edge lookup.

    Args:
        edges: Edge array from :func:`extract_edges`
        n_vertices: Number of vertices in the mesh

    Returns:
        List indexed by vertex holding the indices of the edges touching it
    """
    vertex_edges: List[List[int]] = [[] for _ in range(n_vertices)]
    for edge_id, (a, b) in enumerate(edges[:, :2].tolist()):
        vertex_edges[a].append(edge_id)
        vertex_edges[b].append(edge_id)
    return vertex_edges


def vertex_valence(edges: np.ndarray, n_vertices: int) -> np.ndarray:
    """Number of edges incident to each vertex."""
    return np.bincount(edges[:, :2].ravel(), minlength=n_vertices)


def boundary_mask(edges: np.ndarray) -> np.ndarray:
    """Boolean mask of edges used by a single face."""
    return edges[:, F1] == BOUNDARY
