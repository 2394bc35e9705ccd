"""
Face and edge points of a Catmull-Clark pass.

Face point: centroid of the face's four corners.

Edge point:
    interior edge:  (p1 + p2 + fp[f0] + fp[f1]) / 4
    boundary edge:  (p1 + p2 + fp[f0]) / 3

Both stages are independent per element and may be split into chunks when a
``ParallelConfig`` is given.
"""

import logging
from typing import Optional

import numpy as np

from ccsubdiv.subdivision.edges import BOUNDARY, F0, F1, V0, V1
from ccsubdiv.utils.parallel import ParallelConfig, process_array_in_chunks

logger = logging.getLogger(__name__)


def _face_points_chunk(quads: np.ndarray, vertices: np.ndarray) -> np.ndarray:
    return vertices[quads].sum(axis=1) / 4.0


def _edge_points_chunk(edges: np.ndarray, vertices: np.ndarray, face_points: np.ndarray) -> np.ndarray:
    interior = edges[:, F1] != BOUNDARY
    total = vertices[edges[:, V0]] + vertices[edges[:, V1]] + face_points[edges[:, F0]]
    # Boundary rows index face 0 here; the value is masked out below
    second = face_points[np.where(interior, edges[:, F1], 0)]
    total = total + np.where(interior[:, None], second, 0.0)
    weights = np.where(interior, 4.0, 3.0)
    return total / weights[:, None]


def compute_face_points(
    vertices: np.ndarray,
    quads: np.ndarray,
    parallel_config: Optional[ParallelConfig] = None,
) -> np.ndarray:
    """Compute one face point per quad.

    Args:
        vertices: Vertex positions with shape (n_vertices, 3)
        quads: Quad indices with shape (n_quads, 4)
        parallel_config: Optional parallel processing configuration

    Returns:
        Array of shape (n_quads, 3)
    """
    if len(quads) == 0:
        return np.empty((0, 3), dtype=np.float64)
    face_points = process_array_in_chunks(_face_points_chunk, quads, parallel_config, vertices=vertices)
    logger.debug(f"Computed {len(face_points)} face points")
    return face_points


def compute_edge_points(
    vertices: np.ndarray,
    face_points: np.ndarray,
    edges: np.ndarray,
    parallel_config: Optional[ParallelConfig] = None,
) -> np.ndarray:
    """Compute one edge point per edge.

    Args:
        vertices: Vertex positions with shape (n_vertices, 3)
        face_points: Face points with shape (n_quads, 3)
        edges: Edge array with rows (v_lo, v_hi, f0, f1)
        parallel_config: Optional parallel processing configuration

    Returns:
        Array of shape (n_edges, 3)
    """
    if len(edges) == 0:
        return np.empty((0, 3), dtype=np.float64)
    edge_points = process_array_in_chunks(
        _edge_points_chunk, edges, parallel_config, vertices=vertices, face_points=face_points
    )
    logger.debug(f"Computed {len(edge_points)} edge points")
    return edge_points
