"""
Benchmark utilities for ccsubdiv.

This module times repeated subdivision passes on a planar grid, with and
without parallel execution of the per-element stages.
"""

import argparse
import logging
import sys
import time
from typing import Any, Dict, List, Optional

from ccsubdiv.core.config import SubdivisionConfig
from ccsubdiv.core.mesh import QuadMesh
from ccsubdiv.core.primitives import make_grid
from ccsubdiv.subdivision.catmull_clark import subdivide
from ccsubdiv.utils.parallel import ParallelConfig

# Configure logging
logger = logging.getLogger(__name__)


def _time_levels(mesh: QuadMesh, levels: int, config: SubdivisionConfig) -> List[Dict[str, Any]]:
    timings = []
    current = mesh
    for level in range(1, levels + 1):
        start_time = time.time()
        current = subdivide(current, config)
        timings.append({
            "level": level,
            "time": time.time() - start_time,
            "n_vertices": current.n_vertices,
            "n_quads": current.n_quads,
        })
    return timings


def benchmark_subdivision(
    mesh: QuadMesh,
    levels: int = 3,
    parallel_config: Optional[ParallelConfig] = None,
    compare_sequential: bool = True,
) -> Dict[str, Any]:
    """Benchmark repeated subdivision of a mesh.

    Args:
        mesh: Starting control cage
        levels: Number of passes to run
        parallel_config: Parallel processing configuration for the timed run
        compare_sequential: Whether to also run with parallel processing disabled

    Returns:
        Dictionary with per-level timings and, when compared, the speedup
    """
    if parallel_config is None:
        parallel_config = ParallelConfig(enabled=True)

    results: Dict[str, Any] = {
        "levels": levels,
        "input_vertices": mesh.n_vertices,
        "input_quads": mesh.n_quads,
        "parallel_config": {
            "enabled": parallel_config.enabled,
            "method": parallel_config.method,
            "workers": parallel_config.max_workers,
            "chunk_size": parallel_config.chunk_size,
            "threshold": parallel_config.threshold,
        },
    }

    timings = _time_levels(mesh, levels, SubdivisionConfig(levels=levels, parallel=parallel_config))
    results["timings"] = timings
    results["total_time"] = sum(t["time"] for t in timings)

    if compare_sequential:
        sequential = _time_levels(mesh, levels, SubdivisionConfig(levels=levels))
        results["sequential_timings"] = sequential
        results["sequential_time"] = sum(t["time"] for t in sequential)
        total = results["total_time"]
        results["speedup"] = results["sequential_time"] / total if total > 0 else 0.0

    return results


def run_benchmark(args: argparse.Namespace) -> None:
    """Run the benchmark with the given arguments.

    Args:
        args: Command-line arguments
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger.info(f"Generating {args.grid} x {args.grid} grid...")
    mesh = make_grid(args.grid, args.grid)

    parallel_config = ParallelConfig(
        enabled=True,
        method=args.method,
        max_workers=args.workers,
        chunk_size=args.chunk_size,
        threshold=args.threshold
    )

    logger.info("Running benchmark...")
    results = benchmark_subdivision(mesh, args.levels, parallel_config, args.compare)

    logger.info("Benchmark results:")
    logger.info(f"  Input: {results['input_vertices']} vertices, {results['input_quads']} quads")
    for timing in results["timings"]:
        logger.info(f"  Level {timing['level']}: {timing['n_vertices']} vertices, "
                    f"{timing['n_quads']} quads, {timing['time']:.4f} seconds")
    logger.info(f"  Total time: {results['total_time']:.4f} seconds")

    if args.compare:
        logger.info(f"  Sequential time: {results['sequential_time']:.4f} seconds")
        logger.info(f"  Speedup: {results['speedup']:.2f}x")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the benchmark.

    Returns:
        Command-line arguments
    """
    parser = argparse.ArgumentParser(
        description='Benchmark Catmull-Clark subdivision in ccsubdiv'
    )
    parser.add_argument('--grid', type=int, default=64,
                        help='Quads per side of the starting grid (default: 64)')
    parser.add_argument('--levels', type=int, default=3,
                        help='Number of subdivision passes (default: 3)')
    parser.add_argument('--method', choices=['process', 'thread'], default='thread',
                        help='Parallelization method (default: thread)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Number of worker threads/processes (default: auto-detect)')
    parser.add_argument('--chunk-size', type=int, default=None,
                        help='Rows per chunk (default: auto-calculate)')
    parser.add_argument('--threshold', type=int, default=10000,
                        help='Minimum row count to trigger parallelization (default: 10000)')
    parser.add_argument('--compare', action='store_true', default=True,
                        help='Compare with sequential processing (default: True)')
    parser.add_argument('--no-compare', action='store_false', dest='compare',
                        help='Do not compare with sequential processing')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ccsubdiv-benchmark command."""
    run_benchmark(parse_arguments(argv))
    return 0


if __name__ == "__main__":
    sys.exit(main())
