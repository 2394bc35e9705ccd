"""
One Catmull-Clark subdivision pass on a quad mesh.

The pass runs strictly forward:

    mesh -> edges -> face points -> edge points -> relocated vertices -> stitch

Each stage reads the outputs of earlier stages and never modifies them. The
input mesh is not mutated and the output shares no storage with it. Looping
over several levels is left to the caller.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from ccsubdiv.core.config import SubdivisionConfig
from ccsubdiv.core.mesh import QuadMesh, validate_quad_mesh
from ccsubdiv.subdivision.edges import build_vertex_edges, extract_edges
from ccsubdiv.subdivision.points import compute_edge_points, compute_face_points
from ccsubdiv.subdivision.stitch import stitch_topology
from ccsubdiv.subdivision.vertices import relocate_vertices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubdivisionData:
    """Intermediate collections of a pass, read-only once built.

    Attributes:
        vertices: Original positions (n_vertices, 3)
        quads: Original quads (n_quads, 4)
        edges: Edge rows (v_lo, v_hi, f0, f1), shape (n_edges, 4)
        face_points: One point per quad (n_quads, 3)
        edge_points: One point per edge (n_edges, 3)
        new_points: Relocated original vertices (n_vertices, 3)
        vertex_edges: Incident edge indices per original vertex
    """

    vertices: np.ndarray
    quads: np.ndarray
    edges: np.ndarray
    face_points: np.ndarray
    edge_points: np.ndarray
    new_points: np.ndarray
    vertex_edges: List[List[int]]

    @property
    def n_edges(self) -> int:
        return int(len(self.edges))

    def expected_counts(self):
        """(n_vertices, n_quads) of the mesh this data stitches into."""
        n_vertices = len(self.vertices) + len(self.quads) + len(self.edges)
        return n_vertices, 4 * len(self.quads)


def _freeze(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


def prepare_subdivision(mesh: QuadMesh, config: Optional[SubdivisionConfig] = None) -> SubdivisionData:
    """Validate a mesh and compute every intermediate collection of a pass.

    Args:
        mesh: Input quad mesh
        config: Optional configuration; only its parallel settings are used

    Returns:
        The read-only intermediate data

    Raises:
        ValueError: If the vertex array is malformed
        MalformedFace: If a face is not a proper quad
        NonManifoldEdge: If an edge is shared by more than two faces
        DanglingVertex: If a vertex is not used by any face
    """
    validate_quad_mesh(mesh)
    parallel_config = config.parallel if config is not None else None

    # Private copies so freezing them leaves the caller's arrays writeable
    vertices = _freeze(mesh.vertices.copy())
    quads = _freeze(mesh.quads.copy())

    edges = _freeze(extract_edges(quads))
    face_points = _freeze(compute_face_points(vertices, quads, parallel_config))
    edge_points = _freeze(compute_edge_points(vertices, face_points, edges, parallel_config))
    new_points = _freeze(relocate_vertices(vertices, edges, face_points))
    vertex_edges = build_vertex_edges(edges, len(vertices))

    return SubdivisionData(
        vertices=vertices,
        quads=quads,
        edges=edges,
        face_points=face_points,
        edge_points=edge_points,
        new_points=new_points,
        vertex_edges=vertex_edges,
    )


def subdivide(mesh: QuadMesh, config: Optional[SubdivisionConfig] = None) -> QuadMesh:
    """Apply one Catmull-Clark subdivision pass.

    Args:
        mesh: Input quad mesh
        config: Optional configuration; only its parallel settings are used

    Returns:
        New mesh with V + F + E vertices and 4F quads

    Raises:
        SubdivisionError: If the input topology cannot be subdivided
    """
    start_time = time.time()
    data = prepare_subdivision(mesh, config)
    result = stitch_topology(
        data.quads, data.new_points, data.face_points, data.edge_points, data.edges, data.vertex_edges
    )
    logger.info(
        f"Subdivided {mesh.n_vertices} vertices / {mesh.n_quads} quads / {data.n_edges} edges "
        f"into {result.n_vertices} vertices / {result.n_quads} quads "
        f"in {time.time() - start_time:.3f} seconds"
    )
    return result
