"""Command-line interface for ccsubdiv.

This module provides the main entry point for the ccsubdiv command-line
application: read a quad mesh, apply a number of Catmull-Clark passes, write
the result and optionally plot it.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from ccsubdiv.core.config import SubdivisionConfig
from ccsubdiv.core.errors import SubdivisionError
from ccsubdiv.core.mesh import QuadMesh
from ccsubdiv.io.mesh_io import check_output_format, read_quad_mesh, write_quad_mesh
from ccsubdiv.subdivision.catmull_clark import subdivide
from ccsubdiv.utils.parallel import ParallelConfig

logger = logging.getLogger(__name__)


def setup_logging(debug_mode: bool = False) -> None:
    """Configure logging based on debug mode.

    Args:
        debug_mode: If True, set logging level to DEBUG, otherwise INFO
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description='Apply Catmull-Clark subdivision to a quad mesh, optionally visualize it'
    )
    parser.add_argument('mesh_file', help='Path to a quad mesh (OBJ, OFF, PLY, VTK, VTU, ...)')
    parser.add_argument('-l', '--levels', type=int, default=1, help='Number of subdivision passes')

    output_group = parser.add_argument_group('output', 'Control the output file')
    output_group.add_argument('-o', '--output', default='subdivided.obj',
                              help='Output filename; format from the extension')

    viz_group = parser.add_argument_group('visualization', 'Control visualization options')
    viz_group.add_argument('--plot', action='store_true', help='Show the subdivided mesh')
    viz_group.add_argument('--save-plot', type=str, default=None, help='Save visualization to specified file path')
    viz_group.add_argument('--show-cage', action='store_true', help='Overlay the input mesh as a wireframe')
    viz_group.add_argument('--no-edges', action='store_true', help='Do not draw face edges')
    viz_group.add_argument('--face-color', type=str, default='lightsteelblue', help='Face color')
    viz_group.add_argument('--alpha', type=float, default=0.8, help='Face transparency (0.0-1.0)')
    viz_group.add_argument('--view-angle', type=float, nargs=2, help='View angle as elevation azimuth')

    parallel_group = parser.add_argument_group('parallel', 'Control parallel processing')
    parallel_group.add_argument('--parallel', action='store_true', help='Enable parallel processing')
    parallel_group.add_argument('--parallel-method', choices=['thread', 'process'], default='thread',
                                help='Parallelization method')
    parallel_group.add_argument('--workers', type=int, default=None, help='Number of workers')
    parallel_group.add_argument('--parallel-threshold', type=int, default=200000,
                                help='Minimum element count to trigger parallelization')

    parser.add_argument('--debug', action='store_true', help='Enable debug output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SubdivisionConfig:
    """Create a SubdivisionConfig from parsed arguments."""
    parallel = ParallelConfig(
        enabled=args.parallel,
        method=args.parallel_method,
        max_workers=args.workers,
        threshold=args.parallel_threshold,
    )
    return SubdivisionConfig(
        levels=args.levels,
        output_file=args.output,
        visualize=args.plot or args.save_plot is not None,
        visualization_options={
            'show_edges': not args.no_edges,
            'face_color': args.face_color,
            'alpha': args.alpha,
            'view_angle': tuple(args.view_angle) if args.view_angle else None,
        },
        debug=args.debug,
        parallel=parallel,
    )


def run_subdivision(mesh: QuadMesh, config: SubdivisionConfig) -> QuadMesh:
    """Apply ``config.levels`` subdivision passes to a mesh."""
    current = mesh
    for level in range(1, config.levels + 1):
        current = subdivide(current, config)
        logger.info(f"Level {level}: {current.n_vertices} vertices, {current.n_quads} quads")
    return current


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application.

    Returns:
        Exit code (0 on success, non-zero on error)
    """
    args = parse_arguments(argv)
    setup_logging(args.debug)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid arguments: {e}")
        return 1

    start_time = time.time()
    try:
        check_output_format(config.output_file)
        cage = read_quad_mesh(args.mesh_file)
        result = run_subdivision(cage, config)
        write_quad_mesh(result, config.output_file)
    except SubdivisionError as e:
        logger.error(f"Subdivision failed: {e}")
        return 1
    except (ImportError, OSError) as e:
        logger.error(f"I/O error: {e}")
        return 1

    logger.info(f"Completed {config.levels} level(s) in {time.time() - start_time:.2f} seconds")

    if config.visualize:
        from ccsubdiv.visualization.mesh_viz import visualize_subdivision

        options = config.visualization_options
        visualize_subdivision(
            result,
            cage=cage if args.show_cage else None,
            save_path=args.save_plot,
            show=args.plot,
            face_color=options['face_color'],
            edge_color=options['edge_color'],
            alpha=options['alpha'],
            show_edges=options['show_edges'],
            view_angle=options['view_angle'],
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
