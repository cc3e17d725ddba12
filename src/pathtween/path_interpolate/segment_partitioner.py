"""Split a group-sorted point table into segment pairs or polyline runs.

Precondition for everything except sort_by_group(): rows are sorted by group
with the original order kept inside each group, so that every group forms
one contiguous run. Boundary detection compares adjacent rows only.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from pathtween.path_interpolate.conventions import GROUP_COL


def sort_by_group(data: pd.DataFrame, group_col: str = GROUP_COL) -> pd.DataFrame:
    """Gather rows of each group into one contiguous run.

    Groups appear in first-occurrence order and row order within a group is
    preserved. Group values are never compared with each other, so mixed
    types and missing values are accepted.
    """
    codes, _ = pd.factorize(data[group_col], use_na_sentinel=False)
    return data.iloc[np.argsort(codes, kind="stable")]


def group_boundaries(groups: Sequence) -> tuple[np.ndarray, np.ndarray]:
    """Mark the first and last row of every run of equal group values.

    Args:
        groups: Group value per row, already sorted.

    Returns:
        (start, end) boolean arrays. start[i] is True on the first row overall
        or where the group differs from the previous row; end[i] on the last
        row overall or where it differs from the next row. Missing values
        count as one group.
    """
    codes, _ = pd.factorize(pd.Series(list(groups), dtype=object), use_na_sentinel=False)
    if len(codes) == 0:
        empty = np.zeros(0, dtype=bool)
        return empty, empty.copy()
    group_diff = codes[1:] != codes[:-1]
    start = np.concatenate(([True], group_diff))
    end = np.concatenate((group_diff, [True]))
    return start, end


def drop_degenerate_groups(data: pd.DataFrame, group_col: str = GROUP_COL) -> pd.DataFrame:
    """Remove groups with fewer than two rows; a path needs two points."""
    sizes = data[group_col].groupby(data[group_col], sort=False, dropna=False).transform("size")
    return data[sizes >= 2]


def segment_pairs(data: pd.DataFrame, group_col: str = GROUP_COL) -> tuple[np.ndarray, np.ndarray]:
    """Positional indices of segment start and end rows.

    Segment i joins row start_idx[i] to row end_idx[i] = start_idx[i] + 1,
    both in the same group, giving N-1 segments for a group of N rows.
    """
    start, end = group_boundaries(data[group_col].to_numpy())
    return np.flatnonzero(~end), np.flatnonzero(~start)


def polyline_ids(data: pd.DataFrame, group_col: str = GROUP_COL) -> tuple[np.ndarray, np.ndarray]:
    """Polyline tag per row and the first row of each tag.

    Returns:
        (tags, first_rows): tags are 1-based, numbered in first-occurrence
        order of the group values; first_rows[t - 1] is the positional index
        of the first row tagged t.
    """
    codes, _ = pd.factorize(data[group_col], use_na_sentinel=False)
    start, _ = group_boundaries(data[group_col].to_numpy())
    return codes + 1, np.flatnonzero(start)
