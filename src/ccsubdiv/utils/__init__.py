"""Utility functions for ccsubdiv."""

from ccsubdiv.utils.parallel import (
    ParallelConfig,
    get_optimal_chunk_size,
    is_parallelizable,
    process_array_in_chunks,
)

__all__ = [
    "ParallelConfig",
    "get_optimal_chunk_size",
    "is_parallelizable",
    "process_array_in_chunks",
]
