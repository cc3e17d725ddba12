"""Unit tests for the time-proportional tween kernel."""

import numpy as np
import pandas as pd
import pytest

from pathtween.path_interpolate.algorithms.tween import (
    ValueKind,
    classify_value_kind,
    frame_positions,
    tween_t,
    tween_values,
)


def test_frame_positions_evenly_spaced_anchors():
    """Three anchors over five frames: every other frame lands on an anchor."""
    lo, frac = frame_positions(3, 5)
    assert lo.tolist() == [0, 0, 1, 1, 2]
    np.testing.assert_allclose(frac, [0.0, 0.5, 0.0, 0.5, 0.0])


def test_frame_positions_single_anchor_or_frame():
    lo, frac = frame_positions(1, 4)
    assert lo.tolist() == [0, 0, 0, 0]
    assert frac.tolist() == [0.0] * 4
    lo, frac = frame_positions(3, 1)
    assert lo.tolist() == [0]


def test_frame_positions_no_anchor_raises():
    with pytest.raises(ValueError):
        frame_positions(0, 3)


def test_tween_numeric_linear():
    assert tween_values([0.0, 10.0], 3, ValueKind.NUMERIC) == [0.0, 5.0, 10.0]
    assert tween_values([0, 3, 9], 5, ValueKind.NUMERIC) == [0.0, 1.5, 3.0, 6.0, 9.0]


def test_tween_single_sample_broadcasts():
    """A single anchor is copied to every frame."""
    assert tween_values([7.0], 4, ValueKind.NUMERIC) == [7.0] * 4
    assert tween_values(["red"], 3, ValueKind.COLOUR) == ["red"] * 3
    assert tween_values(["dashed"], 2, ValueKind.CATEGORICAL) == ["dashed"] * 2


def test_tween_colour_midpoint_and_exact_anchors():
    """Anchors are returned as given; frames between them are blended hex colours."""
    assert tween_values(["red", "blue"], 3, ValueKind.COLOUR) == ["red", "#800080", "blue"]


def test_tween_colour_equal_anchors_unchanged():
    assert tween_values(["red", "red"], 3, ValueKind.COLOUR) == ["red", "red", "red"]


def test_tween_colour_keeps_alpha_when_translucent():
    out = tween_values(["#ff000000", "#ff0000ff"], 3, ValueKind.COLOUR)
    assert out[1] == "#ff000080"


def test_tween_categorical_holds_previous_anchor():
    assert tween_values(["a", "b"], 4, ValueKind.CATEGORICAL) == ["a", "a", "a", "b"]


def test_tween_t_per_group():
    out = tween_t([[0.0, 2.0], [5.0]], [3, 2], ValueKind.NUMERIC)
    assert out == [[0.0, 1.0, 2.0], [5.0, 5.0]]


def test_tween_t_misaligned_raises():
    with pytest.raises(ValueError) as exc_info:
        tween_t([[0.0]], [1, 2], ValueKind.NUMERIC)
    assert "align" in str(exc_info.value)


def test_classify_value_kind():
    assert classify_value_kind(pd.Series([1.0, 2.0]), "size") == ValueKind.NUMERIC
    assert classify_value_kind(pd.Series([1, 2]), "alpha") == ValueKind.NUMERIC
    assert classify_value_kind(pd.Series(["red"]), "colour") == ValueKind.COLOUR
    assert classify_value_kind(pd.Series(["solid"]), "linetype") == ValueKind.CATEGORICAL


def test_classify_value_kind_numeric_linetype_is_categorical():
    assert classify_value_kind(pd.Series([1.0, np.nan, 2.0]), "linetype") == ValueKind.CATEGORICAL
    assert classify_value_kind(pd.Series([16, 17]), "shape") == ValueKind.CATEGORICAL
