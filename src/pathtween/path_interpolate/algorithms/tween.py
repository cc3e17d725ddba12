"""
Time-proportional tweening — pure numpy/matplotlib reference.

Each group contributes an ordered run of k anchor samples and a frame count n.
The anchors sit at evenly spaced times j/(k-1) on a unit time axis and the
output frames at i/(n-1). Every frame takes the linear blend of the two
anchors around its time:

  1. Frame position p = i * (k - 1) / (n - 1), computed in integers so
     frames that land on an anchor are exact.
  2. lo = floor(p), frac = p - lo.
  3. value = anchor[lo] + (anchor[lo + 1] - anchor[lo]) * frac.

Frames landing exactly on an anchor, or between two equal anchors, return
the anchor unchanged. Colours are blended channel-wise in RGBA, not in Lab
space as tweenr does, so mid-path colours of distant hues come out darker
than a perceptual blend would give. Categorical values, including numeric
linetype codes, cannot be blended and hold the previous anchor until the
next one is reached.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

import numpy as np
import pandas as pd
from matplotlib.colors import to_hex, to_rgba

from pathtween.path_interpolate.conventions import CATEGORICAL_COLS, COLOUR_COLS


class ValueKind(Enum):
    """How values of a column are blended between anchors."""
    NUMERIC = "numeric"
    COLOUR = "colour"
    CATEGORICAL = "categorical"


_NUMERIC_KINDS = {"i", "u", "f"}  # int, unsigned, float (pandas dtype.kind)


def classify_value_kind(series: pd.Series, column: str) -> ValueKind:
    """Pick the blending kind for a column from its name and dtype."""
    if column in COLOUR_COLS:
        return ValueKind.COLOUR
    if column in CATEGORICAL_COLS:
        return ValueKind.CATEGORICAL
    if getattr(series.dtype, "kind", None) in _NUMERIC_KINDS:
        return ValueKind.NUMERIC
    return ValueKind.CATEGORICAL


# -----------------------------------------------------------------------------
# Step 1-2: frame positions on the anchor axis
# -----------------------------------------------------------------------------


def frame_positions(k: int, n: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Map n frames onto k evenly spaced anchors.

    Returns:
        (lo, frac): index of the anchor at or before each frame, and the
        fractional distance (0 <= frac < 1) towards the next anchor.
    """
    if k < 1:
        raise ValueError("at least one anchor sample is required")
    if n < 1:
        return np.zeros(0, dtype=int), np.zeros(0, dtype=float)
    if k == 1 or n == 1:
        return np.zeros(n, dtype=int), np.zeros(n, dtype=float)
    num = np.arange(n, dtype=np.int64) * (k - 1)
    lo = num // (n - 1)
    frac = (num % (n - 1)) / (n - 1)
    return lo.astype(int), frac


# -----------------------------------------------------------------------------
# Step 3: blend per value kind
# -----------------------------------------------------------------------------


def _tween_numeric(anchors: Sequence[Any], lo: np.ndarray, frac: np.ndarray) -> np.ndarray:
    vals = np.asarray(anchors, dtype=float)
    hi = np.minimum(lo + 1, len(vals) - 1)
    out = vals[lo] + (vals[hi] - vals[lo]) * frac
    # keep anchors exact (inf - inf would otherwise give nan)
    on_anchor = frac == 0
    out[on_anchor] = vals[lo[on_anchor]]
    return out


def _tween_colour(anchors: Sequence[Any], lo: np.ndarray, frac: np.ndarray) -> list[Any]:
    rgba = np.array([to_rgba(c) for c in anchors], dtype=float)
    hi = np.minimum(lo + 1, len(rgba) - 1)
    blended = rgba[lo] + (rgba[hi] - rgba[lo]) * frac[:, None]
    out: list[Any] = []
    for i, f in enumerate(frac):
        if f == 0 or np.array_equal(rgba[lo[i]], rgba[hi[i]]):
            out.append(anchors[lo[i]])
        else:
            out.append(to_hex(blended[i], keep_alpha=bool(blended[i, 3] < 1.0)))
    return out


def _tween_categorical(anchors: Sequence[Any], lo: np.ndarray) -> list[Any]:
    return [anchors[i] for i in lo]


def tween_values(anchors: Sequence[Any], n: int, kind: ValueKind) -> list[Any]:
    """Tween one group's anchors onto n frames."""
    anchors = list(anchors)
    lo, frac = frame_positions(len(anchors), n)
    if kind == ValueKind.NUMERIC:
        return _tween_numeric(anchors, lo, frac).tolist()
    if kind == ValueKind.COLOUR:
        return _tween_colour(anchors, lo, frac)
    return _tween_categorical(anchors, lo)


def tween_t(
    samples: Sequence[Sequence[Any]],
    lengths: Sequence[int],
    kind: ValueKind,
) -> list[list[Any]]:
    """
    Tween several groups independently.

    Args:
        samples: Per group, the ordered anchor values.
        lengths: Per group, the number of output frames.
        kind: Blending kind shared by all groups (one column).

    Returns:
        Per group, a list of `lengths[g]` values.

    Raises:
        ValueError: If the two sequences differ in length or a group has no anchors.
    """
    if len(samples) != len(lengths):
        raise ValueError(
            f"samples and lengths must align, got {len(samples)} and {len(lengths)}"
        )
    return [tween_values(s, int(n), kind) for s, n in zip(samples, lengths)]
