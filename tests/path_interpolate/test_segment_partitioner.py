"""Unit tests for group boundaries, degenerate-group filtering and partitioning."""

import numpy as np
import pandas as pd

from pathtween.path_interpolate.segment_partitioner import (
    drop_degenerate_groups,
    group_boundaries,
    polyline_ids,
    segment_pairs,
    sort_by_group,
)


def test_group_boundaries():
    start, end = group_boundaries([1, 1, 2, 2, 2, 3])
    assert start.tolist() == [True, False, True, False, False, True]
    assert end.tolist() == [False, True, False, False, True, True]


def test_group_boundaries_strings_and_empty():
    start, end = group_boundaries(["a", "b", "b"])
    assert start.tolist() == [True, True, False]
    assert end.tolist() == [True, False, True]
    start, end = group_boundaries([])
    assert len(start) == 0 and len(end) == 0


def test_sort_by_group_is_stable():
    """Groups come out in first-occurrence order, rows keep their order."""
    df = pd.DataFrame({"group": [2, 1, 2, 1], "x": [0, 1, 2, 3]})
    out = sort_by_group(df)
    assert out["group"].tolist() == [2, 2, 1, 1]
    assert out["x"].tolist() == [0, 2, 1, 3]


def test_sort_by_group_mixed_types_and_missing():
    df = pd.DataFrame({"group": ["a", 1, np.nan, "a", 1, np.nan], "x": range(6)})
    out = sort_by_group(df)
    assert out["x"].tolist() == [0, 3, 1, 4, 2, 5]


def test_drop_degenerate_groups():
    df = pd.DataFrame({"group": [1, 2, 2, 3], "x": [0, 1, 2, 3]})
    out = drop_degenerate_groups(df)
    assert out["group"].tolist() == [2, 2]
    assert out["x"].tolist() == [1, 2]


def test_drop_degenerate_groups_all_single():
    df = pd.DataFrame({"group": [1, 2, 3], "x": [0, 1, 2]})
    assert len(drop_degenerate_groups(df)) == 0


def test_segment_pairs_n_minus_one_per_group():
    df = pd.DataFrame({"group": [1, 1, 1, 2, 2], "x": range(5)})
    start_idx, end_idx = segment_pairs(df)
    assert start_idx.tolist() == [0, 1, 3]
    assert end_idx.tolist() == [1, 2, 4]
    np.testing.assert_array_equal(end_idx - start_idx, 1)


def test_polyline_ids_first_occurrence_order():
    df = pd.DataFrame({"group": ["b", "b", "a", "a", "a"], "x": range(5)})
    tags, first_rows = polyline_ids(df)
    assert tags.tolist() == [1, 1, 2, 2, 2]
    assert first_rows.tolist() == [0, 2]


def test_group_boundaries_missing_group_is_one_run():
    start, end = group_boundaries([1.0, 1.0, np.nan, np.nan])
    assert start.tolist() == [True, False, True, False]
    assert end.tolist() == [False, True, False, True]


def test_polyline_ids_missing_group():
    df = pd.DataFrame({"group": [1.0, 1.0, np.nan, np.nan], "x": range(4)})
    tags, first_rows = polyline_ids(df)
    assert tags.tolist() == [1, 1, 2, 2]
    assert first_rows.tolist() == [0, 2]


def test_segment_pairs_missing_group():
    df = pd.DataFrame({"group": [1.0, 1.0, np.nan, np.nan], "x": range(4)})
    start_idx, end_idx = segment_pairs(df)
    assert start_idx.tolist() == [0, 2]
    assert end_idx.tolist() == [1, 3]
