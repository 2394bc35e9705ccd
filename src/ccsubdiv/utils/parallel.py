"""
Parallel processing utilities for ccsubdiv.

This module provides chunked execution of per-element array stages (face
points, edge points) on a thread or process pool. Results are concatenated in
chunk order, so the parallel path returns exactly what the serial path does.
"""

import logging
import multiprocessing as mp
import threading
import time
from concurrent.futures import BrokenExecutor, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Dict, List, Optional

import numpy as np

# Configure logging
logger = logging.getLogger(__name__)

# Thread-local storage to track nested parallelization
_parallel_context = threading.local()

VALID_METHODS = ("thread", "process")


class ParallelConfig:
    """Configuration for parallel processing.

    Parallel execution is off by default: the subdivision stages are cheap
    numpy operations and only very large meshes amortize the pool start-up.
    """

    def __init__(
        self,
        enabled: bool = False,
        method: str = "thread",
        max_workers: Optional[int] = None,
        chunk_size: Optional[int] = None,
        threshold: int = 200000,
    ):
        """Initialize parallel processing configuration.

        Args:
            enabled: Whether parallel processing is enabled
            method: Method for parallelization ('thread' or 'process')
            max_workers: Maximum number of worker threads/processes
            chunk_size: Number of elements per chunk
            threshold: Minimum element count to trigger parallelization

        Raises:
            ValueError: If method is unknown or a size is not positive
        """
        if method not in VALID_METHODS:
            raise ValueError(f"method must be one of {VALID_METHODS}, got '{method}'")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        if chunk_size is not None and chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")

        self.enabled = enabled
        self.method = method
        self.max_workers = max_workers
        self.chunk_size = chunk_size
        self.threshold = threshold

    def __repr__(self) -> str:
        return (f"ParallelConfig(enabled={self.enabled}, method='{self.method}', "
                f"max_workers={self.max_workers}, chunk_size={self.chunk_size}, "
                f"threshold={self.threshold})")


def is_parallelizable(data_size: int, config: Optional[ParallelConfig] = None) -> bool:
    """Determine if a stage should run in parallel.

    Args:
        data_size: Number of elements to process
        config: Parallel processing configuration

    Returns:
        True if the stage should be parallelized, False otherwise
    """
    if config is None or not config.enabled:
        return False

    # Check if we're already in a parallel context to prevent nested parallelization
    if getattr(_parallel_context, "in_parallel", False):
        return False

    return data_size >= config.threshold


def get_optimal_chunk_size(total_size: int, workers: int) -> int:
    """Calculate a chunk size giving each worker a couple of chunks.

    Args:
        total_size: Total number of elements
        workers: Number of workers in the pool

    Returns:
        Chunk size to use for parallel processing
    """
    target_chunks = max(1, 2 * workers)
    return max(1, -(-total_size // target_chunks))


def _default_workers() -> int:
    cpu_count = mp.cpu_count()
    return max(2, min(cpu_count - 1 if cpu_count > 2 else cpu_count, 16))


def _apply_chunk(func: Callable[..., np.ndarray], kwargs: Dict[str, Any], chunk: np.ndarray) -> np.ndarray:
    return func(chunk, **kwargs)


def process_array_in_chunks(
    func: Callable[..., np.ndarray],
    array: np.ndarray,
    config: Optional[ParallelConfig] = None,
    **kwargs
) -> np.ndarray:
    """Apply ``func`` to row chunks of ``array`` and stack the results.

    ``func`` must map an (n, ...) chunk to an (n, ...) result independently
    of the other rows. With method 'process' it must also be picklable, i.e.
    a module-level function.

    Args:
        func: Function applied to each chunk
        array: Array whose first axis is split
        config: Parallel processing configuration
        **kwargs: Extra keyword arguments passed to ``func``

    Returns:
        Row-wise concatenation of the chunk results
    """
    if not is_parallelizable(len(array), config):
        return func(array, **kwargs)

    workers = config.max_workers or _default_workers()
    chunk_size = config.chunk_size or get_optimal_chunk_size(len(array), workers)
    chunks: List[np.ndarray] = [array[i:i + chunk_size] for i in range(0, len(array), chunk_size)]

    # A single chunk gains nothing from a pool
    if len(chunks) <= 1:
        return func(array, **kwargs)

    executor_class = ProcessPoolExecutor if config.method == "process" else ThreadPoolExecutor
    worker = partial(_apply_chunk, func, kwargs)

    start_time = time.time()
    try:
        _parallel_context.in_parallel = True
        with executor_class(max_workers=min(workers, len(chunks))) as executor:
            results = list(executor.map(worker, chunks))
    except (BrokenExecutor, OSError) as e:
        logger.error(f"Error in parallel execution: {e}")
        logger.info("Falling back to sequential execution due to error")
        return func(array, **kwargs)
    finally:
        _parallel_context.in_parallel = False

    logger.debug(f"Processed {len(array)} rows in {len(chunks)} chunks "
                 f"in {time.time() - start_time:.3f} seconds")
    return np.concatenate(results, axis=0)
