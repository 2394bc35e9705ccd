#!/usr/bin/env python
"""
Test suite for topology stitching.
"""

import os
import sys
import unittest
from collections import Counter

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from ccsubdiv.core.errors import StitchMismatch
from ccsubdiv.core.primitives import make_cube, make_grid, make_unit_quad
from ccsubdiv.subdivision.catmull_clark import prepare_subdivision
from ccsubdiv.subdivision.stitch import TopologyStitcher, stitch_topology


def stitch(data, vertex_edges=None):
    return stitch_topology(
        data.quads, data.new_points, data.face_points, data.edge_points, data.edges,
        data.vertex_edges if vertex_edges is None else vertex_edges,
    )


class TestStitchTopology(unittest.TestCase):
    """Test stitch_topology and TopologyStitcher."""

    def test_unit_quad_layout(self):
        """Relocated corners first, then the face point, then edge points on first use."""
        data = prepare_subdivision(make_unit_quad())
        mesh = stitch(data)
        self.assertEqual(mesh.n_vertices, 9)
        self.assertEqual(mesh.n_quads, 4)

        # Edges of the unit quad are (0,1), (1,2), (2,3), (0,3) in that order.
        # Corner 0 reaches (0,1) then (0,3); corner 1 reuses (0,1) and adds (1,2); ...
        expected = np.array([
            [0, 5, 4, 6],
            [1, 7, 4, 5],
            [2, 8, 4, 7],
            [3, 6, 4, 8],
        ])
        np.testing.assert_array_equal(mesh.quads, expected)

        np.testing.assert_allclose(mesh.vertices[:4], data.new_points)
        np.testing.assert_allclose(mesh.vertices[4], data.face_points[0])
        np.testing.assert_allclose(mesh.vertices[5], data.edge_points[0])
        np.testing.assert_allclose(mesh.vertices[6], data.edge_points[3])
        np.testing.assert_allclose(mesh.vertices[7], data.edge_points[1])
        np.testing.assert_allclose(mesh.vertices[8], data.edge_points[2])

    def test_cube_counts(self):
        data = prepare_subdivision(make_cube())
        mesh = stitch(data)
        self.assertEqual((mesh.n_vertices, mesh.n_quads), (26, 24))
        self.assertEqual((mesh.n_vertices, mesh.n_quads), data.expected_counts())

    def test_cube_edge_points_shared_by_both_faces(self):
        """Every edge point is materialized once and used by children of exactly two faces."""
        mesh = stitch(prepare_subdivision(make_cube()))
        face_point_ids = set(mesh.quads[:, 2].tolist())
        self.assertEqual(len(face_point_ids), 6)

        edge_point_ids = set(mesh.quads[:, [1, 3]].ravel().tolist())
        self.assertEqual(len(edge_point_ids), 12)
        self.assertEqual(edge_point_ids, set(range(8, 26)) - face_point_ids)

        parents = {idx: set() for idx in edge_point_ids}
        uses = Counter()
        for quad_id, quad in enumerate(mesh.quads.tolist()):
            for idx in (quad[1], quad[3]):
                parents[idx].add(quad_id // 4)
                uses[idx] += 1
        for idx in edge_point_ids:
            self.assertEqual(len(parents[idx]), 2)
            # One child on each side of the edge, in each of the two faces
            self.assertEqual(uses[idx], 4)

    def test_every_vertex_referenced(self):
        mesh = stitch(prepare_subdivision(make_grid(3, 2)))
        self.assertEqual(set(mesh.quads.ravel().tolist()), set(range(mesh.n_vertices)))

    def test_missing_edge_raises(self):
        data = prepare_subdivision(make_unit_quad())
        vertex_edges = [list(edges) for edges in data.vertex_edges]
        vertex_edges[0] = []
        with self.assertRaises(StitchMismatch) as ctx:
            stitch(data, vertex_edges)
        self.assertEqual(ctx.exception.face_index, 0)
        self.assertEqual(ctx.exception.corner, 0)
        self.assertEqual(ctx.exception.neighbour, 1)

    def test_missing_incoming_edge_raises(self):
        data = prepare_subdivision(make_unit_quad())
        # Vertex 0 only knows its edge to vertex 1, not the one to vertex 3
        vertex_edges = [list(edges) for edges in data.vertex_edges]
        vertex_edges[0] = [0]
        with self.assertRaises(StitchMismatch) as ctx:
            stitch(data, vertex_edges)
        self.assertEqual(ctx.exception.neighbour, 3)

    def test_stitcher_does_not_modify_inputs(self):
        data = prepare_subdivision(make_grid(2, 2))
        before = [list(edges) for edges in data.vertex_edges]
        stitcher = TopologyStitcher(data.new_points, data.face_points, data.edge_points,
                                    data.edges, data.vertex_edges)
        for face_id, face in enumerate(data.quads.tolist()):
            stitcher.add_face(face_id, face)
        stitcher.result()
        self.assertEqual(data.vertex_edges, before)


if __name__ == "__main__":
    unittest.main()
