"""Column and styling conventions for path interpolation.

Single source of truth for column names, solid-linetype tokens and the device
unit factor, so the interpolator, validator and dispatcher stay consistent.
"""

# Group identifier column. Required on every input table.
GROUP_COL = "group"

# Default name of the observed-flag column (True = authoritative row).
OBSERVED_COL = "observed"

# Never interpolated; supplied already resolved by the caller.
POSITION_COLS = ("x", "y", "xend", "yend")

# Bookkeeping columns passed through untouched.
IDENTIFIER_COLS = (GROUP_COL, "index")

# Style columns that must be uniform over a group for polyline drawing.
STYLE_COLS = ("alpha", "colour", "size", "linetype")

# Columns holding colour specifications (blended in RGBA space).
COLOUR_COLS = ("colour", "color", "fill")

# Columns holding pattern codes; never blended even when numeric.
CATEGORICAL_COLS = ("linetype", "shape")

# Linetype values meaning a continuous stroke.
SOLID_LINETYPES = (1, "1", "solid")

# Points per millimetre; stroke widths are given in mm and drawn in points.
PT = 72.27 / 25.4


def is_solid_linetype(value: object) -> bool:
    """True if value is one of the solid linetype tokens."""
    if isinstance(value, str):
        return value.strip().lower() in SOLID_LINETYPES
    try:
        return float(value) == 1.0
    except (TypeError, ValueError):
        return False
