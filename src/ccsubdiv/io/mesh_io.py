"""
Reading and writing quad meshes through meshio.

Any format meshio can read (OBJ, OFF, PLY, VTK, VTU, ...) is accepted as long
as its surface cells are quads. Vertex and line cells are ignored; any other
surface or volume cell type is rejected since the subdivision only handles
quads.
"""

import logging
import os
from pathlib import Path

import numpy as np

from ccsubdiv.core.errors import MalformedFace
from ccsubdiv.core.mesh import QuadMesh

logger = logging.getLogger(__name__)

# Check for meshio availability
try:
    import meshio
    MESHIO_AVAILABLE = True
except ImportError:
    MESHIO_AVAILABLE = False
    logger.warning("meshio not available. Install with 'pip install meshio' for mesh file support.")

# Cell types that carry no surface and are skipped on read
_IGNORED_CELL_TYPES = {"vertex", "line", "line3"}


def _require_meshio() -> None:
    if not MESHIO_AVAILABLE:
        raise ImportError("meshio is required to read and write mesh files. Install it with 'pip install meshio'")


def check_output_format(filename: str, file_format: str = None) -> None:
    """Check that meshio can infer a writable format for ``filename``.

    Raises:
        ImportError: If meshio is not available
        IOError: If no known extension matches the path
    """
    _require_meshio()
    if file_format is not None:
        return

    # Compound extensions such as .vtu.gz are matched from the right
    suffixes = [s.lower() for s in Path(filename).suffixes]
    for i in range(len(suffixes)):
        if "".join(suffixes[i:]) in meshio.extension_to_filetypes:
            return
    raise IOError(f"Could not deduce mesh format from path '{filename}'")


def read_quad_mesh(filename: str) -> QuadMesh:
    """Read a quad mesh from a file.

    Args:
        filename: Path to the mesh file

    Returns:
        The loaded mesh; all quad cell blocks are concatenated in file order

    Raises:
        ImportError: If meshio is not available
        FileNotFoundError: If the file does not exist
        IOError: If meshio cannot parse the file
        MalformedFace: If the file holds non-quad surface cells or no quads at all
    """
    _require_meshio()

    if not os.path.exists(filename):
        raise FileNotFoundError(f"Mesh file not found: {filename}")

    logger.info(f"Reading mesh file: {filename}")
    try:
        mesh = meshio.read(filename)
    except meshio.ReadError as e:
        logger.error(f"Failed to read {filename}: {e}")
        raise IOError(f"Failed to read {filename}: {e}") from e

    blocks = []
    for cell_block in mesh.cells:
        if cell_block.type == "quad":
            blocks.append(np.asarray(cell_block.data, dtype=np.int64))
        elif cell_block.type in _IGNORED_CELL_TYPES:
            logger.warning(f"Ignoring {len(cell_block.data)} '{cell_block.type}' cells")
        else:
            raise MalformedFace(None, f"unsupported cell type '{cell_block.type}' in {filename}")

    if not blocks:
        raise MalformedFace(None, f"no quad cells found in {filename}")

    points = np.asarray(mesh.points, dtype=np.float64)
    if points.shape[1] == 2:
        points = np.column_stack([points, np.zeros(len(points))])

    quads = np.vstack(blocks)
    logger.info(f"Read {len(points)} vertices and {len(quads)} quads")
    return QuadMesh(points, quads)


def write_quad_mesh(mesh: QuadMesh, filename: str, file_format: str = None) -> None:
    """Write a quad mesh to a file.

    Args:
        mesh: Mesh to write
        filename: Output path; the format is inferred from the extension
        file_format: Optional explicit meshio format name

    Raises:
        ImportError: If meshio is not available
        IOError: If the output directory cannot be created or meshio
            cannot write the format
    """
    _require_meshio()

    output_dir = os.path.dirname(os.path.abspath(filename))
    if output_dir and not os.path.exists(output_dir):
        try:
            os.makedirs(output_dir, exist_ok=True)
            logger.info(f"Created output directory: {output_dir}")
        except OSError as e:
            logger.error(f"Failed to create output directory: {e}")
            raise IOError(f"Failed to create output directory: {e}")

    out = meshio.Mesh(points=mesh.vertices, cells=[("quad", mesh.quads)])
    try:
        out.write(filename, file_format=file_format)
    except (meshio.ReadError, meshio.WriteError) as e:
        logger.error(f"Failed to write {filename}: {e}")
        raise IOError(f"Failed to write {filename}: {e}") from e
    logger.info(f"Wrote {mesh.n_vertices} vertices and {mesh.n_quads} quads to {filename}")
