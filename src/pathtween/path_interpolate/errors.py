"""Errors raised by the path interpolation pipeline.

All fatal conditions subclass ValueError so callers handling invalid input
the usual way keep working. Each error carries the context needed to fix the
input (column name, offending group ids).
"""

from __future__ import annotations

from typing import Hashable, Sequence


class PathInterpolateError(ValueError):
    """Base class for invalid path-interpolation input."""


class MissingGroupColumn(PathInterpolateError):
    """The input table has no group identifier column."""

    def __init__(self, column: str) -> None:
        self.column = column
        super().__init__(f"data must have a group column {column!r}")


class UnresolvableGroup(PathInterpolateError):
    """A group has no observed value for a column that needs interpolation."""

    def __init__(self, group: Hashable, column: str) -> None:
        self.group = group
        self.column = column
        super().__init__(
            f"group {group!r} has no observed values for column {column!r}; "
            "cannot interpolate"
        )


class InconsistentStyling(PathInterpolateError):
    """Dashed/dotted groups whose colour, size or linetype vary along the line."""

    def __init__(self, groups: Sequence[Hashable]) -> None:
        self.groups = list(groups)
        super().__init__(
            "If you are using dotted or dashed lines, colour, size and linetype "
            f"must be constant over the line (offending groups: {self.groups!r})"
        )
