"""Plotly figure generation from draw primitives.

This module provides the PlotlyPathBackend class for turning SegmentList and
Polyline primitives into Plotly figure dictionaries, keeping figure concerns
out of the draw pipeline.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import plotly.graph_objects as go
from matplotlib.colors import to_rgba

from pathtween.utils.logging import get_logger
from pathtween.path_interpolate.primitives import (
    DrawPrimitive,
    EmptyDraw,
    LineStyle,
    Polyline,
    SegmentList,
)
from pathtween.path_interpolate.stroke_params import Arrow, StrokeParams

logger = get_logger(__name__)

# Plotly widths are in CSS pixels; primitive widths are in points.
PX_PER_PT = 96.0 / 72.0

# Linetype (numeric code or name) -> Plotly dash
PLOTLY_DASHES = {
    0: "solid",  # blank is drawn with zero opacity instead
    1: "solid",
    2: "dash",
    3: "dot",
    4: "dashdot",
    5: "longdash",
    6: "longdashdot",
    "blank": "solid",
    "solid": "solid",
    "dashed": "dash",
    "dotted": "dot",
    "dotdash": "dashdot",
    "longdash": "longdash",
    "twodash": "longdashdot",
}


def plotly_dash(pattern: Any) -> str:
    """Plotly dash name for a linetype; unknown patterns draw solid."""
    key = pattern
    if isinstance(pattern, str):
        key = pattern.strip().lower()
        if key.isdigit():
            key = int(key)
    elif isinstance(pattern, (int, float, np.integer, np.floating)) and float(pattern).is_integer():
        key = int(pattern)
    dash = PLOTLY_DASHES.get(key)
    if dash is None:
        logger.debug(f"unknown linetype {pattern!r}, drawing solid")
        return "solid"
    return dash


def _is_blank(pattern: Any) -> bool:
    return pattern in (0, "0", "blank")


def rgba_string(colour: Any, opacity: float) -> str:
    """Combine a colour and an opacity into a Plotly rgba() string."""
    r, g, b, a = to_rgba(colour)
    if opacity is not None and not np.isnan(opacity):
        a = float(opacity)
    return f"rgba({round(r * 255)}, {round(g * 255)}, {round(b * 255)}, {a:g})"


class PlotlyPathBackend:
    """Renders draw primitives as Plotly figure dictionaries.

    Attributes:
        show_legend: Show one legend entry per polyline.
    """

    def __init__(self, *, show_legend: bool = False) -> None:
        self.show_legend = show_legend

    def make_figure(self, primitive: DrawPrimitive) -> dict:
        """Generate a Plotly figure dictionary for one draw primitive.

        Args:
            primitive: Result of PathInterpolateRenderer.draw_panel().

        Returns:
            Plotly figure dictionary.
        """
        if isinstance(primitive, EmptyDraw):
            fig = go.Figure()
        elif isinstance(primitive, SegmentList):
            fig = self._figure_segments(primitive)
        elif isinstance(primitive, Polyline):
            fig = self._figure_polyline(primitive)
        else:
            raise TypeError(f"unsupported draw primitive {type(primitive).__name__}")

        fig.update_layout(
            margin=dict(l=40, r=20, t=40, b=40),
            showlegend=self.show_legend,
            uirevision="keep",
        )
        logger.debug(f"Figure generated: {len(fig.data)} traces")
        return fig.to_dict()

    def _line(self, style: LineStyle) -> dict:
        opacity = 0.0 if _is_blank(style.pattern) else style.opacity
        return dict(
            color=rgba_string(style.colour, opacity),
            width=style.width * PX_PER_PT,
            dash=plotly_dash(style.pattern),
        )

    def _log_unsupported(self, stroke: StrokeParams) -> None:
        # Plotly line traces have no cap/join/mitre settings
        if stroke != StrokeParams(arrow=stroke.arrow):
            logger.debug(
                f"cap_style={stroke.cap_style}, join_style={stroke.join_style}, "
                f"miter_limit={stroke.miter_limit} are not supported by plotly, ignoring"
            )

    def _figure_segments(self, primitive: SegmentList) -> go.Figure:
        self._log_unsupported(primitive.stroke)
        fig = go.Figure()
        for seg in primitive.segments:
            fig.add_trace(go.Scatter(
                x=[seg.x0, seg.x1],
                y=[seg.y0, seg.y1],
                mode="lines",
                line=self._line(seg.style),
                showlegend=False,
                hoverinfo="skip",
            ))
            if primitive.stroke.arrow is not None:
                self._add_arrows(fig, [seg.x0, seg.x1], [seg.y0, seg.y1], seg.style, primitive.stroke.arrow)
        return fig

    def _figure_polyline(self, primitive: Polyline) -> go.Figure:
        self._log_unsupported(primitive.stroke)
        fig = go.Figure()
        for tag, style in primitive.styles.items():
            mask = primitive.group_tag == tag
            xs = primitive.x[mask].tolist()
            ys = primitive.y[mask].tolist()
            fig.add_trace(go.Scatter(
                x=xs,
                y=ys,
                mode="lines",
                name=str(tag),
                line=self._line(style),
            ))
            if primitive.stroke.arrow is not None:
                self._add_arrows(fig, xs, ys, style, primitive.stroke.arrow)
        return fig

    def _add_arrows(self, fig: go.Figure, xs: list, ys: list, style: LineStyle, arrow: Arrow) -> None:
        """Annotate the path ends named by arrow.ends with arrow heads."""
        ends = []
        if arrow.ends in ("last", "both"):
            ends.append((xs[-1], ys[-1], xs[-2], ys[-2]))
        if arrow.ends in ("first", "both"):
            ends.append((xs[0], ys[0], xs[1], ys[1]))
        for x, y, ax, ay in ends:
            fig.add_annotation(
                x=x, y=y, ax=ax, ay=ay,
                xref="x", yref="y", axref="x", ayref="y",
                showarrow=True,
                arrowhead=2 if arrow.type == "closed" else 1,
                arrowwidth=max(style.width * PX_PER_PT, 1.0),
                arrowcolor=rgba_string(style.colour, style.opacity),
                text="",
            )
