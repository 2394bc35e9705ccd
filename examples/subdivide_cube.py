#!/usr/bin/env python3
"""
Example demonstrating repeated Catmull-Clark subdivision of a cube.

This example shows how to:
1. Build a control cage
2. Inspect the intermediate points of one pass
3. Refine the cage over several levels
4. Visualize the result against the cage
"""

import logging
import os

import numpy as np

from ccsubdiv import make_cube, prepare_subdivision, subdivide
from ccsubdiv.visualization.mesh_viz import visualize_subdivision

# Set up logging
logging.basicConfig(level=logging.INFO)


def main():
    """Run the cube subdivision example."""
    output_dir = "./output_subdivision"
    os.makedirs(output_dir, exist_ok=True)

    cage = make_cube(2.0)

    # Intermediate collections of the first pass
    data = prepare_subdivision(cage)
    print(f"Edges: {data.n_edges}")
    print(f"First face point: {data.face_points[0]}")
    print(f"Relocated corner: {data.new_points[0]}")

    mesh = cage
    for level in range(1, 4):
        mesh = subdivide(mesh)
        radii = np.linalg.norm(mesh.vertices, axis=1)
        print(f"Level {level}: {mesh.n_vertices} vertices, {mesh.n_quads} quads, "
              f"radius {radii.min():.4f} - {radii.max():.4f}")

    visualize_subdivision(
        mesh,
        cage=cage,
        save_path=os.path.join(output_dir, "cube_level3.png"),
        show=False,
        title="Cube after 3 levels",
        view_angle=(25.0, 35.0),
    )
    print(f"Saved plot to {output_dir}")


if __name__ == "__main__":
    main()
