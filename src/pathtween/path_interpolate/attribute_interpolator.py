"""Reconstruct placeholder style values within each group.

Columns are classified once into a ColumnPolicy before any value is touched;
only INTERPOLATE columns are tweened, group by group, from their observed rows.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
import pandas as pd

from pathtween.utils.logging import get_logger
from pathtween.path_interpolate.algorithms.tween import (
    ValueKind,
    classify_value_kind,
    tween_values,
)
from pathtween.path_interpolate.conventions import (
    GROUP_COL,
    IDENTIFIER_COLS,
    OBSERVED_COL,
    POSITION_COLS,
)
from pathtween.path_interpolate.errors import MissingGroupColumn, UnresolvableGroup

logger = get_logger(__name__)


class ColumnPolicy(Enum):
    """What the interpolator does with a column."""
    POSITION = "position"          # x/y, already resolved
    IDENTIFIER = "identifier"      # group, index, observed flag
    SKIP = "skip"                  # entirely missing
    PINNED = "pinned"              # placeholders fully set, or explicit values
    INTERPOLATE = "interpolate"    # placeholders missing, or one value with gaps


def placeholder_mask(data: pd.DataFrame, observed_col: str = OBSERVED_COL) -> pd.Series:
    """Boolean Series, True on placeholder rows.

    Without an observed column every row is authoritative. Missing flags
    count as observed.
    """
    if observed_col not in data.columns:
        return pd.Series(False, index=data.index)
    observed = data[observed_col]
    observed = observed.where(observed.notna(), True).astype(bool)
    return ~observed


def _placeholders_pinned(placeholders: pd.Series) -> bool:
    """True if placeholder slots need no reconstruction.

    Either every slot holds the same value, or the slots already hold more
    than one distinct value. A partially filled single value still needs
    interpolation.
    """
    if placeholders.dropna().nunique() > 1:
        return True
    return bool(placeholders.notna().all()) and placeholders.nunique() == 1


def classify_columns(
    data: pd.DataFrame,
    observed_col: str = OBSERVED_COL,
    group_col: str = GROUP_COL,
) -> dict[str, ColumnPolicy]:
    """Classify every column of data into a ColumnPolicy.

    Args:
        data: Point table.
        observed_col: Name of the observed-flag column.
        group_col: Name of the group identifier column.

    Returns:
        Dictionary mapping column name to its policy, in column order.
    """
    placeholder = placeholder_mask(data, observed_col)
    has_placeholders = bool(placeholder.any())
    identifiers = set(IDENTIFIER_COLS) | {group_col, observed_col}

    policies: dict[str, ColumnPolicy] = {}
    for col in data.columns:
        if col in POSITION_COLS:
            policy = ColumnPolicy.POSITION
        elif col in identifiers:
            policy = ColumnPolicy.IDENTIFIER
        elif data[col].isna().all():
            policy = ColumnPolicy.SKIP
        elif not has_placeholders or _placeholders_pinned(data[col][placeholder.to_numpy()]):
            policy = ColumnPolicy.PINNED
        else:
            policy = ColumnPolicy.INTERPOLATE
        policies[col] = policy
    return policies


def _interpolate_column(
    data: pd.DataFrame,
    col: str,
    anchor_ok: np.ndarray,
    group_rows: dict,
) -> pd.Series:
    kind = classify_value_kind(data[col], col)
    values = data[col].to_numpy(dtype=object)
    result = np.empty(len(data), dtype=object)

    for group, rows in group_rows.items():
        anchor_rows = rows[anchor_ok[rows]]
        if len(anchor_rows) == 0:
            raise UnresolvableGroup(group, col)
        result[rows] = tween_values(values[anchor_rows], len(rows), kind)

    if kind == ValueKind.NUMERIC:
        return pd.Series(result, index=data.index, dtype=float, name=col)
    out = pd.Series(result, index=data.index, name=col)
    if kind == ValueKind.CATEGORICAL:
        out = out.astype(data[col].dtype)
    return out


def interpolate_dataframe(
    data: pd.DataFrame,
    observed_col: str = OBSERVED_COL,
    group_col: str = GROUP_COL,
) -> pd.DataFrame:
    """Fill placeholder values of every INTERPOLATE column, group by group.

    Each group is tweened independently: its observed values are spread
    evenly over the group's rows (see algorithms.tween). The observed flag
    column is dropped from the result; data itself is left untouched.

    Args:
        data: Point table with a group column and an observed flag.
        observed_col: Name of the observed-flag column.
        group_col: Name of the group identifier column.

    Returns:
        New DataFrame with the same rows and index, observed column removed.

    Raises:
        MissingGroupColumn: If data has no group column.
        UnresolvableGroup: If a group has no observed value for a column
            that needs interpolation.
    """
    if group_col not in data.columns:
        raise MissingGroupColumn(group_col)

    policies = classify_columns(data, observed_col, group_col)
    policy_names = {c: p.value for c, p in policies.items()}
    logger.debug(f"column policies: {policy_names}")

    out = data.copy()
    to_interpolate = [c for c, p in policies.items() if p == ColumnPolicy.INTERPOLATE]
    if to_interpolate:
        observed = ~placeholder_mask(data, observed_col).to_numpy()
        group_rows = data.groupby(group_col, sort=False, dropna=False).indices
        for col in to_interpolate:
            anchor_ok = observed & data[col].notna().to_numpy()
            out[col] = _interpolate_column(data, col, anchor_ok, group_rows)

    if observed_col in out.columns:
        out = out.drop(columns=[observed_col])
    return out
