"""Visualization utilities for ccsubdiv."""

from ccsubdiv.visualization.mesh_viz import plot_quad_mesh, visualize_subdivision

__all__ = ["plot_quad_mesh", "visualize_subdivision"]
