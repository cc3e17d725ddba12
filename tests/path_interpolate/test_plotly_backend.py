"""Unit tests for PlotlyPathBackend figure generation."""

import numpy as np
import pytest

from pathtween.path_interpolate.plotly_backend import (
    PX_PER_PT,
    PlotlyPathBackend,
    plotly_dash,
    rgba_string,
)
from pathtween.path_interpolate.primitives import (
    EmptyDraw,
    LineStyle,
    Polyline,
    Segment,
    SegmentList,
)
from pathtween.path_interpolate.stroke_params import Arrow, StrokeParams


@pytest.fixture
def backend():
    return PlotlyPathBackend()


@pytest.fixture
def segments():
    return SegmentList(segments=[
        Segment(0.0, 0.0, 1.0, 1.0, colour="red", opacity=1.0, width=1.5, pattern=1),
        Segment(1.0, 1.0, 2.0, 0.0, colour="blue", opacity=0.5, width=3.0, pattern="solid"),
    ])


@pytest.fixture
def polyline():
    return Polyline(
        x=np.array([0.0, 1.0, 2.0, 5.0, 6.0]),
        y=np.array([0.0, 1.0, 0.0, 5.0, 6.0]),
        group_tag=np.array([1, 1, 1, 2, 2]),
        styles={
            1: LineStyle(colour="red", opacity=1.0, width=1.0, pattern="dashed"),
            2: LineStyle(colour="#00ff00", opacity=0.25, width=2.0, pattern=3),
        },
    )


@pytest.mark.parametrize(
    "pattern, expected",
    [
        (1, "solid"),
        (1.0, "solid"),
        ("solid", "solid"),
        (2, "dash"),
        ("2", "dash"),
        ("dotted", "dot"),
        ("dotdash", "dashdot"),
        ("twodash", "longdashdot"),
        ("zigzag", "solid"),
    ],
)
def test_plotly_dash(pattern, expected):
    assert plotly_dash(pattern) == expected


def test_rgba_string():
    assert rgba_string("red", 1.0) == "rgba(255, 0, 0, 1)"
    assert rgba_string("#0000ff", 0.5) == "rgba(0, 0, 255, 0.5)"


def test_empty_draw_has_no_traces(backend):
    fig = backend.make_figure(EmptyDraw())
    assert len(fig["data"]) == 0


def test_segments_one_trace_each(backend, segments):
    fig = backend.make_figure(segments)
    assert len(fig["data"]) == 2
    first, second = fig["data"]
    assert list(first["x"]) == [0.0, 1.0]
    assert list(second["y"]) == [1.0, 0.0]
    assert first["line"]["color"] == "rgba(255, 0, 0, 1)"
    assert second["line"]["color"] == "rgba(0, 0, 255, 0.5)"
    assert first["line"]["width"] == pytest.approx(1.5 * PX_PER_PT)


def test_polyline_one_trace_per_group(backend, polyline):
    fig = backend.make_figure(polyline)
    assert len(fig["data"]) == 2
    first, second = fig["data"]
    assert list(first["x"]) == [0.0, 1.0, 2.0]
    assert list(second["x"]) == [5.0, 6.0]
    assert first["line"]["dash"] == "dash"
    assert second["line"]["dash"] == "dot"
    assert second["line"]["color"] == "rgba(0, 255, 0, 0.25)"


def test_arrow_annotations(backend, polyline):
    polyline.stroke = StrokeParams(arrow=Arrow(ends="both"))
    fig = backend.make_figure(polyline)
    annotations = fig["layout"]["annotations"]
    assert len(annotations) == 4
    assert (annotations[0]["x"], annotations[0]["y"]) == (2.0, 0.0)


def test_unknown_primitive_raises(backend):
    with pytest.raises(TypeError):
        backend.make_figure("not a primitive")
