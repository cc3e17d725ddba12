"""
pathtween: Draw connected paths whose style is only known at some points.

This package provides:
- interpolate_dataframe: time-proportional filling of placeholder styles per group
- PathInterpolateRenderer: validation and partitioning into segment or polyline primitives
- PlotlyPathBackend: Plotly figure dictionaries from those primitives
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from pathtween.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's configuration.
"""

import logging

from pathtween.utils.logging import configure_logging, get_logger

from pathtween.path_interpolate import (
    Arrow,
    EmptyDraw,
    InconsistentStyling,
    MissingGroupColumn,
    PathInterpolateRenderer,
    PlotlyPathBackend,
    Polyline,
    SegmentList,
    StrokeParams,
    UnresolvableGroup,
    draw_path_interpolate,
    interpolate_dataframe,
)

# Ensure pathtween logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("pathtween")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "Arrow",
    "EmptyDraw",
    "InconsistentStyling",
    "MissingGroupColumn",
    "PathInterpolateRenderer",
    "PlotlyPathBackend",
    "Polyline",
    "SegmentList",
    "StrokeParams",
    "UnresolvableGroup",
    "configure_logging",
    "draw_path_interpolate",
    "get_logger",
    "interpolate_dataframe",
]

__version__ = "0.1.0"
