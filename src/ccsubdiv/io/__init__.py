"""I/O utilities for quad meshes."""

from ccsubdiv.io.mesh_io import MESHIO_AVAILABLE, check_output_format, read_quad_mesh, write_quad_mesh

__all__ = ["read_quad_mesh", "write_quad_mesh", "check_output_format", "MESHIO_AVAILABLE"]
