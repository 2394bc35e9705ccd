#!/usr/bin/env python
"""
Test suite for mesh file I/O and the command-line interface.

These tests need meshio and are skipped when it is not installed.
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path

import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

try:
    import meshio
    MESHIO_AVAILABLE = True
except ImportError:
    MESHIO_AVAILABLE = False

from ccsubdiv.cli.app import build_config, main, parse_arguments, run_subdivision
from ccsubdiv.core.config import SubdivisionConfig
from ccsubdiv.core.errors import MalformedFace
from ccsubdiv.core.primitives import make_cube, make_grid


@unittest.skipUnless(MESHIO_AVAILABLE, "meshio is not available")
class TestMeshIO(unittest.TestCase):
    """Test read_quad_mesh and write_quad_mesh."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_round_trip(self):
        from ccsubdiv.io.mesh_io import read_quad_mesh, write_quad_mesh

        mesh = make_cube()
        path = str(self.test_dir / "cube.vtk")
        write_quad_mesh(mesh, path)
        loaded = read_quad_mesh(path)
        np.testing.assert_allclose(loaded.vertices, mesh.vertices)
        np.testing.assert_array_equal(loaded.quads, mesh.quads)

    def test_creates_output_directory(self):
        from ccsubdiv.io.mesh_io import write_quad_mesh

        path = self.test_dir / "nested" / "dir" / "grid.vtk"
        write_quad_mesh(make_grid(2, 2), str(path))
        self.assertTrue(path.exists())

    def test_rejects_triangles(self):
        from ccsubdiv.io.mesh_io import read_quad_mesh

        path = str(self.test_dir / "tri.vtk")
        points = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
        meshio.Mesh(points, [("triangle", np.array([[0, 1, 2]]))]).write(path)
        with self.assertRaises(MalformedFace):
            read_quad_mesh(path)

    def test_unknown_extension_raises_ioerror(self):
        from ccsubdiv.io.mesh_io import check_output_format, read_quad_mesh, write_quad_mesh

        path = self.test_dir / "cube.unknownext"
        with self.assertRaises(IOError):
            check_output_format(str(path))
        with self.assertRaises(IOError):
            write_quad_mesh(make_cube(), str(path))

        path.write_text("not a mesh")
        with self.assertRaises(IOError):
            read_quad_mesh(str(path))

    def test_extension_case_and_explicit_format_accepted(self):
        from ccsubdiv.io.mesh_io import check_output_format

        check_output_format(str(self.test_dir / "Cube.VTK"))
        check_output_format(str(self.test_dir / "cube.unknownext"), file_format="vtk")

    def test_missing_file(self):
        from ccsubdiv.io.mesh_io import read_quad_mesh

        with self.assertRaises(FileNotFoundError):
            read_quad_mesh(str(self.test_dir / "missing.vtk"))


class TestCommandLine(unittest.TestCase):
    """Test argument handling and the main entry point."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.test_dir = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_build_config(self):
        args = parse_arguments(["in.obj", "-o", "out.vtk", "-l", "3", "--parallel", "--workers", "2",
                                "--view-angle", "30", "45", "--no-edges"])
        config = build_config(args)
        self.assertEqual(config.levels, 3)
        self.assertEqual(config.output_file, "out.vtk")
        self.assertTrue(config.parallel.enabled)
        self.assertEqual(config.parallel.max_workers, 2)
        self.assertEqual(config.visualization_options['view_angle'], (30.0, 45.0))
        self.assertFalse(config.visualization_options['show_edges'])
        self.assertFalse(config.visualize)

    def test_invalid_levels_exit_code(self):
        self.assertEqual(main(["in.obj", "-l", "0"]), 1)

    def test_run_subdivision_levels(self):
        result = run_subdivision(make_cube(), SubdivisionConfig(levels=2))
        self.assertEqual((result.n_vertices, result.n_quads), (98, 96))

    @unittest.skipUnless(MESHIO_AVAILABLE, "meshio is not available")
    def test_main_end_to_end(self):
        from ccsubdiv.io.mesh_io import read_quad_mesh, write_quad_mesh

        source = str(self.test_dir / "cube.vtk")
        target = str(self.test_dir / "cube_l2.vtk")
        write_quad_mesh(make_cube(), source)

        self.assertEqual(main([source, "-o", target, "-l", "2"]), 0)
        result = read_quad_mesh(target)
        self.assertEqual((result.n_vertices, result.n_quads), (98, 96))

    @unittest.skipUnless(MESHIO_AVAILABLE, "meshio is not available")
    def test_main_reports_non_manifold_input(self):
        source = str(self.test_dir / "fan.vtk")
        points = np.random.default_rng(1).random((8, 3))
        quads = np.array([[0, 1, 2, 3], [1, 0, 4, 5], [0, 1, 6, 7]])
        meshio.Mesh(points, [("quad", quads)]).write(source)

        target = self.test_dir / "out.vtk"
        self.assertEqual(main([source, "-o", str(target)]), 1)
        self.assertFalse(target.exists())

    @unittest.skipUnless(MESHIO_AVAILABLE, "meshio is not available")
    def test_main_rejects_unknown_output_extension(self):
        from ccsubdiv.io.mesh_io import write_quad_mesh

        source = str(self.test_dir / "cube.vtk")
        write_quad_mesh(make_cube(), source)
        target = self.test_dir / "cube.unknownext"

        self.assertEqual(main([source, "-o", str(target)]), 1)
        self.assertFalse(target.exists())

    def test_main_missing_input(self):
        self.assertEqual(main([str(self.test_dir / "missing.vtk"), "-o", str(self.test_dir / "o.vtk")]), 1)


if __name__ == "__main__":
    unittest.main()
