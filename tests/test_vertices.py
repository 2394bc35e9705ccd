#!/usr/bin/env python
"""
Test suite for vertex relocation.
"""

import os
import sys
import unittest

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from ccsubdiv.core.errors import DanglingVertex
from ccsubdiv.core.primitives import make_cube, make_grid, make_unit_quad
from ccsubdiv.subdivision.edges import extract_edges
from ccsubdiv.subdivision.points import compute_face_points
from ccsubdiv.subdivision.vertices import relocate_vertices


def relocate(mesh):
    edges = extract_edges(mesh.quads)
    face_points = compute_face_points(mesh.vertices, mesh.quads)
    return relocate_vertices(mesh.vertices, edges, face_points)


class TestRelocateVertices(unittest.TestCase):
    """Test relocate_vertices."""

    def test_flat_regular_vertex_is_fixed(self):
        """A valence-4 vertex surrounded by coplanar faces does not move."""
        mesh = make_grid(2, 2)
        new_points = relocate(mesh)
        np.testing.assert_allclose(new_points[4], mesh.vertices[4], atol=1e-12)

    def test_flat_interior_of_larger_grid_is_fixed(self):
        mesh = make_grid(4, 3, size_x=2.0, size_y=1.5)
        new_points = relocate(mesh)
        row = 5
        interior = [j * row + i for j in range(1, 3) for i in range(1, 4)]
        np.testing.assert_allclose(new_points[interior], mesh.vertices[interior], atol=1e-12)

    def test_unit_quad_corner(self):
        """Corner of a lone quad: n = 2, F = face centre, R = mean edge midpoint."""
        mesh = make_unit_quad()
        new_points = relocate(mesh)
        P = mesh.vertices[0]
        F = np.array([0.5, 0.5, 0.0])
        R = (np.array([0.5, 0.0, 0.0]) + np.array([0.0, 0.5, 0.0])) / 2.0
        expected = (F + 2.0 * R + (2 - 3) * P) / 2.0
        np.testing.assert_allclose(new_points[0], expected)

    def test_cube_corner(self):
        """Valence-3 cube corners move inwards along the diagonal."""
        mesh = make_cube(2.0)
        new_points = relocate(mesh)
        # F = (1/3, 1/3, 1/3) * sign, R = (2/3, 2/3, 2/3) * sign, n - 3 = 0
        expected = (np.sign(mesh.vertices) * (1.0 / 3.0) + 2.0 * np.sign(mesh.vertices) * (2.0 / 3.0)) / 3.0
        np.testing.assert_allclose(new_points, expected)

    def test_boundary_vertex_uses_general_formula(self):
        """Boundary mid-edge vertex of a 2x2 grid: n = 3, two faces, three edges."""
        mesh = make_grid(2, 2)
        new_points = relocate(mesh)
        v = mesh.vertices
        P = v[1]
        F = (np.array([0.25, 0.25, 0.0]) + np.array([0.75, 0.25, 0.0])) / 2.0
        R = ((v[1] + v[0]) / 2 + (v[1] + v[2]) / 2 + (v[1] + v[4]) / 2) / 3.0
        expected = (F + 2.0 * R + 0.0 * P) / 3.0
        np.testing.assert_allclose(new_points[1], expected)

    def test_dangling_vertex(self):
        mesh = make_unit_quad()
        vertices = np.vstack([mesh.vertices, [[5.0, 5.0, 5.0], [6.0, 6.0, 6.0]]])
        edges = extract_edges(mesh.quads)
        face_points = compute_face_points(vertices, mesh.quads)
        with self.assertRaises(DanglingVertex) as ctx:
            relocate_vertices(vertices, edges, face_points)
        self.assertEqual(ctx.exception.vertex_index, 4)
        self.assertEqual(ctx.exception.n_dangling, 2)

    def test_same_indexing_as_input(self):
        mesh = make_cube()
        self.assertEqual(relocate(mesh).shape, mesh.vertices.shape)


if __name__ == "__main__":
    unittest.main()
