"""Draw primitives handed to a rendering backend.

A draw call produces exactly one of SegmentList, Polyline or EmptyDraw.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np

from pathtween.path_interpolate.stroke_params import StrokeParams


@dataclass(frozen=True)
class LineStyle:
    """Resolved style of one stroke. `width` is in points."""
    colour: Any
    opacity: float
    width: float
    pattern: Any


@dataclass(frozen=True)
class Segment:
    """One independent line from (x0, y0) to (x1, y1)."""
    x0: float
    y0: float
    x1: float
    y1: float
    colour: Any
    opacity: float
    width: float
    pattern: Any

    @property
    def style(self) -> LineStyle:
        return LineStyle(self.colour, self.opacity, self.width, self.pattern)


@dataclass
class SegmentList:
    """Segment-wise drawing: every segment carries its own style."""
    segments: list[Segment]
    stroke: StrokeParams = field(default_factory=StrokeParams)

    def __len__(self) -> int:
        return len(self.segments)


@dataclass
class Polyline:
    """Group-wise drawing: one connected stroke per group tag.

    Attributes:
        x: Point x coordinates, grouped contiguously by tag.
        y: Point y coordinates.
        group_tag: 1-based tag per point, in first-occurrence order of groups.
        styles: Tag -> style of that stroke.
        stroke: Shared stroke geometry.
    """
    x: np.ndarray
    y: np.ndarray
    group_tag: np.ndarray
    styles: dict[int, LineStyle]
    stroke: StrokeParams = field(default_factory=StrokeParams)

    @property
    def n_lines(self) -> int:
        return len(self.styles)


@dataclass(frozen=True)
class EmptyDraw:
    """Nothing to draw. A valid result, not an error."""


DrawPrimitive = Union[SegmentList, Polyline, EmptyDraw]
