"""
Quad mesh visualization for ccsubdiv.

This module draws quad meshes with matplotlib, optionally overlaying the
control cage a subdivided mesh was produced from.
"""

import logging
import os
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ccsubdiv.core.mesh import QuadMesh

# Configure logging
logger = logging.getLogger(__name__)


def _set_equal_limits(ax, points: np.ndarray) -> None:
    """Fit the axes to a cube around the points so the mesh is not distorted."""
    mins = points.min(axis=0)
    maxs = points.max(axis=0)
    centre = (mins + maxs) / 2.0
    half = max(float(np.max(maxs - mins)) / 2.0, 1e-12)
    ax.set_xlim(centre[0] - half, centre[0] + half)
    ax.set_ylim(centre[1] - half, centre[1] + half)
    ax.set_zlim(centre[2] - half, centre[2] + half)


def plot_quad_mesh(
    mesh: QuadMesh,
    cage: Optional[QuadMesh] = None,
    title: str = "Subdivided mesh",
    face_color: str = "lightsteelblue",
    edge_color: str = "k",
    alpha: float = 0.8,
    show_edges: bool = True,
    view_angle: Optional[Tuple[float, float]] = None,
    fig_size: Tuple[int, int] = (10, 8),
):
    """Draw a quad mesh on a new 3D figure.

    Args:
        mesh: Mesh to draw
        cage: Optional control cage drawn as a red wireframe
        title: Title for the plot
        face_color: Face fill color
        edge_color: Edge line color
        alpha: Face transparency
        show_edges: Whether to draw face edges
        view_angle: Optional (elevation, azimuth) for the view
        fig_size: Figure size in inches

    Returns:
        Tuple (figure, axes)
    """
    fig = plt.figure(figsize=fig_size)
    ax = fig.add_subplot(111, projection='3d')
    ax.set_title(title)

    polygons = mesh.vertices[mesh.quads]
    collection = Poly3DCollection(
        polygons,
        facecolors=face_color,
        edgecolors=edge_color if show_edges else 'none',
        linewidths=0.5 if show_edges else 0.0,
        alpha=alpha,
    )
    ax.add_collection3d(collection)

    points = mesh.vertices
    if cage is not None:
        cage_lines = Poly3DCollection(
            cage.vertices[cage.quads], facecolors='none', edgecolors='r', linewidths=1.2
        )
        ax.add_collection3d(cage_lines)
        points = np.vstack([points, cage.vertices])

    if len(points):
        _set_equal_limits(ax, points)

    ax.set_box_aspect([1, 1, 1])
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_zlabel('Z')

    if view_angle:
        ax.view_init(elev=view_angle[0], azim=view_angle[1])

    plt.tight_layout()
    return fig, ax


def visualize_subdivision(
    mesh: QuadMesh,
    cage: Optional[QuadMesh] = None,
    save_path: Optional[str] = None,
    show: bool = True,
    dpi: int = 200,
    **plot_options
) -> None:
    """Plot a subdivided mesh, then save and/or show the figure.

    Args:
        mesh: Subdivided mesh
        cage: Optional original control cage
        save_path: Optional path to save the figure
        show: Whether to open an interactive window
        dpi: Resolution of the saved figure
        **plot_options: Forwarded to :func:`plot_quad_mesh`

    Raises:
        IOError: If the figure cannot be saved
    """
    fig, _ = plot_quad_mesh(mesh, cage=cage, **plot_options)

    if save_path:
        save_dir = os.path.dirname(os.path.abspath(save_path))
        try:
            if save_dir and not os.path.exists(save_dir):
                os.makedirs(save_dir, exist_ok=True)
                logger.info(f"Created directory: {save_dir}")
            fig.savefig(save_path, dpi=dpi, bbox_inches='tight')
            logger.info(f"Saved visualization to {save_path}")
        except OSError as e:
            logger.error(f"Error saving visualization: {e}")
            raise IOError(f"Error saving visualization: {e}")

    if show:
        plt.show()
    else:
        plt.close(fig)
