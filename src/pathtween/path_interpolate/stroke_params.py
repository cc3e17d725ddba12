"""Stroke geometry parameters shared by every primitive of one draw call.

This module defines the Arrow and StrokeParams dataclasses passed at call
time, with dict serialization for callers that keep them in JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pathtween.utils.logging import get_logger

logger = get_logger(__name__)

CAP_STYLES = ("butt", "round", "square")
JOIN_STYLES = ("round", "mitre", "bevel")
ARROW_ENDS = ("last", "first", "both")
ARROW_TYPES = ("open", "closed")


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ValueError(f"{name} must be one of {choices}, got {value!r}")
    return value


def _warn_unknown_keys(owner: str, data: dict[str, Any], known: set[str]) -> None:
    for key in data.keys():
        if key not in known:
            logger.warning(f"Unknown key '{key}' in {owner}, ignoring")


@dataclass
class Arrow:
    """Arrow head decoration for path ends."""
    angle: float = 30.0     # half-angle of the head, degrees
    length: float = 0.25    # head length in `units`
    units: str = "inches"
    ends: str = "last"      # "last", "first" or "both"
    type: str = "open"      # "open" or "closed"

    def __post_init__(self) -> None:
        _check_choice("ends", self.ends, ARROW_ENDS)
        _check_choice("type", self.type, ARROW_TYPES)

    def to_dict(self) -> dict[str, Any]:
        return {
            "angle": self.angle,
            "length": self.length,
            "units": self.units,
            "ends": self.ends,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Arrow":
        _warn_unknown_keys("arrow", data, {"angle", "length", "units", "ends", "type"})
        return cls(
            angle=float(data.get("angle", 30.0)),
            length=float(data.get("length", 0.25)),
            units=str(data.get("units", "inches")),
            ends=str(data.get("ends", "last")),
            type=str(data.get("type", "open")),
        )


@dataclass
class StrokeParams:
    """Cap, join and mitre settings plus optional arrow decoration.

    Applies to every segment or polyline emitted by a single draw call.
    """
    cap_style: str = "butt"
    join_style: str = "round"
    miter_limit: float = 1.0
    arrow: Optional[Arrow] = None

    def __post_init__(self) -> None:
        _check_choice("cap_style", self.cap_style, CAP_STYLES)
        _check_choice("join_style", self.join_style, JOIN_STYLES)
        if self.miter_limit < 1.0:
            raise ValueError(f"miter_limit must be >= 1, got {self.miter_limit!r}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize StrokeParams to a JSON-friendly dictionary."""
        return {
            "cap_style": self.cap_style,
            "join_style": self.join_style,
            "miter_limit": self.miter_limit,
            "arrow": self.arrow.to_dict() if self.arrow is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeParams":
        """Tolerant loader.

        - ignores unknown keys (with a warning)
        - missing keys fall back to defaults
        - invalid cap/join/arrow choices raise ValueError

        Raises:
            ValueError: If a style value is not one of the accepted choices.
        """
        _warn_unknown_keys(
            "stroke params", data, {"cap_style", "join_style", "miter_limit", "arrow"}
        )
        arrow_raw = data.get("arrow")
        arrow = None
        if isinstance(arrow_raw, dict):
            arrow = Arrow.from_dict(arrow_raw)
        elif arrow_raw is not None:
            logger.warning(f"arrow is not a dict ({type(arrow_raw).__name__}), ignoring")
        return cls(
            cap_style=str(data.get("cap_style", "butt")),
            join_style=str(data.get("join_style", "round")),
            miter_limit=float(data.get("miter_limit", 1.0)),
            arrow=arrow,
        )
