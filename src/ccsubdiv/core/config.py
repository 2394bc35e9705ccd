"""Configuration module for ccsubdiv.

This module provides the configuration class for subdivision runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from ccsubdiv.utils.parallel import ParallelConfig


@dataclass
class SubdivisionConfig:
    """Configuration for a subdivision run.

    Attributes:
        levels: Number of subdivision passes applied by the command-line driver
        output_file: Output filename
        visualize: Whether to plot the result
        visualization_options: Options for visualization
        debug: Whether to enable debug output
        parallel: Parallel processing configuration for the per-element stages
    """

    levels: int = 1
    output_file: str = "subdivided.obj"
    visualize: bool = False
    visualization_options: Dict[str, Any] = field(default_factory=dict)
    debug: bool = False
    parallel: ParallelConfig = field(default_factory=ParallelConfig)

    def __post_init__(self) -> None:
        """Validate the configuration after initialization."""
        if isinstance(self.levels, bool) or not isinstance(self.levels, int) or self.levels < 1:
            raise ValueError(f"levels must be a positive integer, got {self.levels!r}")

        if not self.output_file:
            raise ValueError("output_file must not be empty")

        default_viz_options = {
            'show_edges': True,
            'face_color': 'lightsteelblue',
            'edge_color': 'k',
            'alpha': 0.8,
            'view_angle': None,
        }

        for key, value in default_viz_options.items():
            if key not in self.visualization_options:
                self.visualization_options[key] = value
