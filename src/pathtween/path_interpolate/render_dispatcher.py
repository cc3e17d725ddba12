"""Draw pipeline for partially specified paths.

This module provides PathInterpolateRenderer, which runs one batch of points
through interpolation, styling validation and partitioning and returns a
single draw primitive for a rendering backend.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np
import pandas as pd

from pathtween.utils.logging import get_logger
from pathtween.path_interpolate.attribute_interpolator import interpolate_dataframe
from pathtween.path_interpolate.conventions import GROUP_COL, OBSERVED_COL, PT
from pathtween.path_interpolate.errors import MissingGroupColumn
from pathtween.path_interpolate.group_validator import RenderStrategy, validate_groups
from pathtween.path_interpolate.primitives import (
    DrawPrimitive,
    EmptyDraw,
    LineStyle,
    Polyline,
    Segment,
    SegmentList,
)
from pathtween.path_interpolate.segment_partitioner import (
    drop_degenerate_groups,
    polyline_ids,
    segment_pairs,
    sort_by_group,
)
from pathtween.path_interpolate.stroke_params import StrokeParams

logger = get_logger(__name__)

# Maps data coordinates to device coordinates; must keep the group column.
CoordTransform = Callable[[pd.DataFrame], pd.DataFrame]

GROUPING_ADVISORY = (
    "path_interpolate: Each group consists of only one observation. "
    "Do you need to adjust the group column?"
)

# Used when a style column is absent from the data.
DEFAULT_COLOUR = "black"
DEFAULT_ALPHA = 1.0
DEFAULT_SIZE = 0.5
DEFAULT_LINETYPE = 1


class PathInterpolateRenderer:
    """Turns a batch of partially specified points into one draw primitive.

    Stages run strictly in order: sort by group, interpolate placeholders,
    validate styling, transform coordinates, drop degenerate groups, and
    emit either a SegmentList or a Polyline. All fatal checks happen before
    any primitive is built.

    Attributes:
        group_col: Column name containing group identifiers.
        observed_col: Column name of the observed flag.
        stroke: Default stroke geometry when draw_panel() gets none.
    """

    def __init__(
        self,
        *,
        group_col: str = GROUP_COL,
        observed_col: str = OBSERVED_COL,
        stroke: Optional[StrokeParams] = None,
    ) -> None:
        self.group_col = group_col
        self.observed_col = observed_col
        self.stroke = stroke if stroke is not None else StrokeParams()

    def draw_panel(
        self,
        data: pd.DataFrame,
        *,
        stroke: Optional[StrokeParams] = None,
        transform: Optional[CoordTransform] = None,
    ) -> DrawPrimitive:
        """Run the full pipeline on one panel of points.

        Args:
            data: Point table with group, x, y, observed flag and style columns,
                in any row order.
            stroke: Stroke geometry for this call; defaults to self.stroke.
            transform: Coordinate transform applied after validation.

        Returns:
            SegmentList, Polyline or EmptyDraw.

        Raises:
            MissingGroupColumn: If data has no group column.
            UnresolvableGroup: If a group cannot be interpolated.
            InconsistentStyling: If dashed/dotted groups vary in style.
        """
        if self.group_col not in data.columns:
            raise MissingGroupColumn(self.group_col)
        stroke = stroke if stroke is not None else self.stroke

        if not data[self.group_col].duplicated().any():
            logger.info(GROUPING_ADVISORY)

        data = sort_by_group(data, self.group_col)
        data = interpolate_dataframe(data, self.observed_col, self.group_col)
        validation = validate_groups(data, self.group_col)

        munched = transform(data) if transform is not None else data
        munched = drop_degenerate_groups(munched, self.group_col)
        if len(munched) < 2:
            logger.debug(f"draw_panel: {len(munched)} drawable rows, nothing to draw")
            return EmptyDraw()

        if validation.strategy == RenderStrategy.UNIFORM_SOLID_SEGMENTS:
            result = self._draw_segments(munched, stroke)
            logger.info(f"draw_panel: {len(result)} segments from {len(munched)} rows")
        else:
            result = self._draw_polyline(munched, stroke)
            logger.info(f"draw_panel: {result.n_lines} polylines from {len(munched)} rows")
        return result

    def _style_arrays(self, df: pd.DataFrame) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Colour, opacity, width (points) and pattern per row."""
        n = len(df)
        colour = df["colour"].to_numpy(dtype=object) if "colour" in df.columns else np.full(n, DEFAULT_COLOUR, dtype=object)
        if "alpha" in df.columns:
            alpha = pd.to_numeric(df["alpha"], errors="coerce").fillna(DEFAULT_ALPHA).to_numpy(dtype=float)
        else:
            alpha = np.full(n, DEFAULT_ALPHA)
        if "size" in df.columns:
            size = pd.to_numeric(df["size"], errors="coerce").fillna(DEFAULT_SIZE).to_numpy(dtype=float)
        else:
            size = np.full(n, DEFAULT_SIZE)
        linetype = df["linetype"].to_numpy(dtype=object) if "linetype" in df.columns else np.full(n, DEFAULT_LINETYPE, dtype=object)
        return colour, alpha, size * PT, linetype

    def _draw_segments(self, df: pd.DataFrame, stroke: StrokeParams) -> SegmentList:
        start_idx, end_idx = segment_pairs(df, self.group_col)
        x = df["x"].to_numpy(dtype=float)
        y = df["y"].to_numpy(dtype=float)
        colour, alpha, width, linetype = self._style_arrays(df)
        # style always comes from the segment's start row
        segments = [
            Segment(
                x0=float(x[s]), y0=float(y[s]),
                x1=float(x[e]), y1=float(y[e]),
                colour=colour[s],
                opacity=float(alpha[s]),
                width=float(width[s]),
                pattern=linetype[s],
            )
            for s, e in zip(start_idx, end_idx)
        ]
        return SegmentList(segments=segments, stroke=stroke)

    def _draw_polyline(self, df: pd.DataFrame, stroke: StrokeParams) -> Polyline:
        tags, first_rows = polyline_ids(df, self.group_col)
        colour, alpha, width, linetype = self._style_arrays(df)
        styles = {
            tag: LineStyle(
                colour=colour[row],
                opacity=float(alpha[row]),
                width=float(width[row]),
                pattern=linetype[row],
            )
            for tag, row in enumerate(first_rows, start=1)
        }
        return Polyline(
            x=df["x"].to_numpy(dtype=float),
            y=df["y"].to_numpy(dtype=float),
            group_tag=tags,
            styles=styles,
            stroke=stroke,
        )


def draw_path_interpolate(
    data: pd.DataFrame,
    *,
    stroke: Optional[StrokeParams] = None,
    transform: Optional[CoordTransform] = None,
    group_col: str = GROUP_COL,
    observed_col: str = OBSERVED_COL,
) -> DrawPrimitive:
    """One-shot helper around PathInterpolateRenderer.draw_panel()."""
    renderer = PathInterpolateRenderer(group_col=group_col, observed_col=observed_col)
    return renderer.draw_panel(data, stroke=stroke, transform=transform)
