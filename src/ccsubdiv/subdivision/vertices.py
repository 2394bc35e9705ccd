"""
Relocation of the original vertices.

For a vertex P of valence n:

    F = mean of the face points reached through P's incident edges
    R = mean of the midpoints of P's incident edges (original positions)
    P' = (F + 2R + (n - 3) P) / n

F is accumulated per incident edge, so a face reaching P through two of its
edges is summed and counted twice. Sum and count double together and the mean
equals the mean over distinct faces. Boundary vertices use the same formula
with whatever faces and edges touch them.
"""

import logging

import numpy as np

from ccsubdiv.core.errors import DanglingVertex
from ccsubdiv.subdivision.edges import BOUNDARY, F0, F1, V0, V1, vertex_valence

logger = logging.getLogger(__name__)


def relocate_vertices(vertices: np.ndarray, edges: np.ndarray, face_points: np.ndarray) -> np.ndarray:
    """Compute the new position of every original vertex.

    Args:
        vertices: Original positions with shape (n_vertices, 3)
        edges: Edge array with rows (v_lo, v_hi, f0, f1)
        face_points: Face points with shape (n_quads, 3)

    Returns:
        Array of shape (n_vertices, 3), same indexing as ``vertices``

    Raises:
        DanglingVertex: If a vertex is not touched by any edge
    """
    n_vertices = len(vertices)
    if n_vertices == 0:
        return np.empty((0, 3), dtype=np.float64)
    valence = vertex_valence(edges, n_vertices)

    dangling = np.flatnonzero(valence == 0)
    if len(dangling):
        raise DanglingVertex(int(dangling[0]), len(dangling))

    a = edges[:, V0]
    b = edges[:, V1]
    interior = edges[:, F1] != BOUNDARY

    # Face point sum and count, one contribution per (edge, incident face, endpoint)
    face_sum = np.zeros((n_vertices, 3), dtype=np.float64)
    face_count = np.zeros(n_vertices, dtype=np.int64)
    first = face_points[edges[:, F0]]
    np.add.at(face_sum, a, first)
    np.add.at(face_sum, b, first)
    np.add.at(face_count, a, 1)
    np.add.at(face_count, b, 1)

    second = face_points[edges[interior, F1]]
    np.add.at(face_sum, a[interior], second)
    np.add.at(face_sum, b[interior], second)
    np.add.at(face_count, a[interior], 1)
    np.add.at(face_count, b[interior], 1)

    midpoints = (vertices[a] + vertices[b]) / 2.0
    mid_sum = np.zeros((n_vertices, 3), dtype=np.float64)
    np.add.at(mid_sum, a, midpoints)
    np.add.at(mid_sum, b, midpoints)

    n = valence.astype(np.float64)[:, None]
    f_avg = face_sum / face_count[:, None]
    r_avg = mid_sum / n

    new_points = (f_avg + 2.0 * r_avg + (n - 3.0) * vertices) / n
    logger.debug(f"Relocated {n_vertices} vertices (valence range {valence.min()}-{valence.max()})")
    return new_points
