"""
Builders for small reference quad meshes.

These are used by the benchmark, the examples and the tests. All faces are
wound counter-clockwise when seen from outside (or from +z for flat meshes).
"""

import logging

import numpy as np

from ccsubdiv.core.mesh import QuadMesh

logger = logging.getLogger(__name__)


def make_unit_quad() -> QuadMesh:
    """Single unit square in the z=0 plane."""
    vertices = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
    ])
    return QuadMesh(vertices, np.array([[0, 1, 2, 3]]))


def make_grid(nx: int, ny: int, size_x: float = 1.0, size_y: float = 1.0) -> QuadMesh:
    """Planar grid of nx by ny quads in the z=0 plane.

    Args:
        nx: Number of quads along x
        ny: Number of quads along y
        size_x: Extent along x
        size_y: Extent along y

    Returns:
        Mesh with (nx+1)*(ny+1) vertices and nx*ny quads

    Raises:
        ValueError: If nx or ny is not positive
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"Grid needs at least one quad per axis, got ({nx}, {ny})")

    xs = np.linspace(0.0, size_x, nx + 1)
    ys = np.linspace(0.0, size_y, ny + 1)
    gx, gy = np.meshgrid(xs, ys, indexing="xy")
    vertices = np.column_stack([gx.ravel(), gy.ravel(), np.zeros(gx.size)])

    row = nx + 1
    quads = []
    for j in range(ny):
        for i in range(nx):
            v0 = j * row + i
            quads.append([v0, v0 + 1, v0 + 1 + row, v0 + row])

    logger.debug(f"Built {nx}x{ny} grid")
    return QuadMesh(vertices, np.array(quads, dtype=np.int64))


def make_cube(size: float = 1.0) -> QuadMesh:
    """Closed axis-aligned cube centred on the origin with outward-facing quads."""
    h = 0.5 * size
    vertices = np.array([
        [-h, -h, -h],
        [h, -h, -h],
        [h, h, -h],
        [-h, h, -h],
        [-h, -h, h],
        [h, -h, h],
        [h, h, h],
        [-h, h, h],
    ])
    quads = np.array([
        [0, 3, 2, 1],  # bottom (-z)
        [4, 5, 6, 7],  # top (+z)
        [0, 1, 5, 4],  # front (-y)
        [2, 3, 7, 6],  # back (+y)
        [1, 2, 6, 5],  # right (+x)
        [0, 4, 7, 3],  # left (-x)
    ])
    return QuadMesh(vertices, quads)
