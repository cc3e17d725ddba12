"""Interpolated path drawing: fill placeholder styles, validate, partition, draw."""

from pathtween.path_interpolate.attribute_interpolator import ColumnPolicy, classify_columns, interpolate_dataframe
from pathtween.path_interpolate.errors import (
    InconsistentStyling,
    MissingGroupColumn,
    PathInterpolateError,
    UnresolvableGroup,
)
from pathtween.path_interpolate.group_validator import RenderStrategy, validate_groups
from pathtween.path_interpolate.plotly_backend import PlotlyPathBackend
from pathtween.path_interpolate.primitives import EmptyDraw, LineStyle, Polyline, Segment, SegmentList
from pathtween.path_interpolate.render_dispatcher import PathInterpolateRenderer, draw_path_interpolate
from pathtween.path_interpolate.stroke_params import Arrow, StrokeParams

__all__ = [
    "Arrow",
    "ColumnPolicy",
    "EmptyDraw",
    "InconsistentStyling",
    "LineStyle",
    "MissingGroupColumn",
    "PathInterpolateError",
    "PathInterpolateRenderer",
    "PlotlyPathBackend",
    "Polyline",
    "RenderStrategy",
    "Segment",
    "SegmentList",
    "StrokeParams",
    "UnresolvableGroup",
    "classify_columns",
    "draw_path_interpolate",
    "interpolate_dataframe",
    "validate_groups",
]
