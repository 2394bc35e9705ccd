"""
Catmull-Clark subdivision of quad meshes.

This package provides the stages of a single subdivision pass:
- Edge extraction with incident faces
- Face point and edge point computation
- Relocation of the original vertices
- Stitching of the refined quad topology
"""

from ccsubdiv.subdivision.catmull_clark import SubdivisionData, prepare_subdivision, subdivide
from ccsubdiv.subdivision.edges import (
    BOUNDARY,
    boundary_mask,
    build_vertex_edges,
    canonical_edge,
    extract_edges,
    vertex_valence,
)
from ccsubdiv.subdivision.points import compute_edge_points, compute_face_points
from ccsubdiv.subdivision.stitch import TopologyStitcher, stitch_topology
from ccsubdiv.subdivision.vertices import relocate_vertices

__all__ = [
    "subdivide",
    "prepare_subdivision",
    "SubdivisionData",
    "BOUNDARY",
    "canonical_edge",
    "extract_edges",
    "build_vertex_edges",
    "vertex_valence",
    "boundary_mask",
    "compute_face_points",
    "compute_edge_points",
    "relocate_vertices",
    "TopologyStitcher",
    "stitch_topology",
]
