"""Per-group styling checks and the batch-level render strategy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pandas as pd

from pathtween.utils.logging import get_logger
from pathtween.path_interpolate.conventions import GROUP_COL, STYLE_COLS, is_solid_linetype
from pathtween.path_interpolate.errors import InconsistentStyling

logger = get_logger(__name__)


class RenderStrategy(Enum):
    """How the whole batch is drawn."""
    UNIFORM_SOLID_SEGMENTS = "uniform_solid_segments"    # one segment per point pair
    UNIFORM_CONSTANT_GROUPS = "uniform_constant_groups"  # one polyline per group
    INVALID = "invalid"


@dataclass(frozen=True)
class GroupValidation:
    """Result of validate_groups().

    Attributes:
        summary: One row per group with columns group, solid, constant.
        all_solid: Every group is drawn with a solid linetype.
        all_constant: Every group has uniform styling.
        strategy: Render strategy derived from the two flags.
    """
    summary: pd.DataFrame
    all_solid: bool
    all_constant: bool
    strategy: RenderStrategy


def summarize_groups(data: pd.DataFrame, group_col: str = GROUP_COL) -> pd.DataFrame:
    """Compute the solid and constant flags of every group.

    A missing linetype column counts as solid; style columns that are absent
    are left out of the constant check.

    Returns:
        DataFrame with columns group, solid, constant in first-occurrence order.
    """
    style_cols = [c for c in STYLE_COLS if c in data.columns]
    rows = []
    for group, sub in data.groupby(group_col, sort=False, dropna=False):
        if "linetype" in sub.columns:
            solid = all(is_solid_linetype(v) for v in sub["linetype"])
        else:
            solid = True
        if style_cols:
            constant = len(sub[style_cols].drop_duplicates()) == 1
        else:
            constant = True
        rows.append({"group": group, "solid": solid, "constant": constant})
    return pd.DataFrame(rows, columns=["group", "solid", "constant"])


def resolve_strategy(all_solid: bool, all_constant: bool) -> RenderStrategy:
    """Constant styling wins; otherwise only solid lines may vary per segment."""
    if all_constant:
        return RenderStrategy.UNIFORM_CONSTANT_GROUPS
    if all_solid:
        return RenderStrategy.UNIFORM_SOLID_SEGMENTS
    return RenderStrategy.INVALID


def validate_groups(data: pd.DataFrame, group_col: str = GROUP_COL) -> GroupValidation:
    """Check styling consistency over all groups of an interpolated table.

    Args:
        data: Interpolated point table.
        group_col: Name of the group identifier column.

    Returns:
        GroupValidation with a valid strategy.

    Raises:
        InconsistentStyling: If some group is dashed/dotted and some group's
            styling varies along the line.
    """
    summary = summarize_groups(data, group_col)
    all_solid = bool(summary["solid"].all())
    all_constant = bool(summary["constant"].all())
    strategy = resolve_strategy(all_solid, all_constant)

    if strategy == RenderStrategy.INVALID:
        offending = summary.loc[~summary["constant"].astype(bool), "group"].tolist()
        raise InconsistentStyling(offending)

    logger.debug(
        f"validate_groups: groups={len(summary)}, all_solid={all_solid}, "
        f"all_constant={all_constant}, strategy={strategy.value}"
    )
    return GroupValidation(
        summary=summary,
        all_solid=all_solid,
        all_constant=all_constant,
        strategy=strategy,
    )
