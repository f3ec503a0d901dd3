"""
Style resolution for node configs.

Maps loosely typed JSON values to style primitives. Every function is
total: unrecognized input resolves to ``UNSET`` and rendering continues
with the presentation layer's defaults.

Usage:
    from sdui.runtime.style_resolver import parse_color, parse_edge_insets

    parse_color("#FF0000")            # Color(0xFFFF0000)
    parse_color("red")                # Color(0xFFFF0000)
    parse_edge_insets(8)              # EdgeInsets(8, 8, 8, 8)
    parse_edge_insets({"left": 1})    # EdgeInsets(1, 0, 0, 0)
    parse_edge_insets(None)           # UNSET
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

from sdui.specs.style import (
    NAMED_COLORS,
    UNSET,
    BorderRadius,
    BoxFit,
    Color,
    CrossAxisAlignment,
    EdgeInsets,
    FontStyle,
    FontWeight,
    MainAxisAlignment,
    Maybe,
    TextAlign,
    TextStyle,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{6})$")

_FONT_WEIGHT_STEPS = frozenset(weight.value for weight in FontWeight)

_FONT_WEIGHT_NAMES: dict[str, FontWeight] = {
    "bold": FontWeight.BOLD,
    "normal": FontWeight.NORMAL,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _match_enum(enum_cls: type[E], value: Any) -> Maybe[E]:
    """Case-insensitive lookup of ``value`` among an enum's values."""
    if not isinstance(value, str):
        if value is not None:
            logger.debug(f"Ignoring non-string {enum_cls.__name__} value: {value!r}")
        return UNSET
    wanted = value.lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    logger.debug(f"Unknown {enum_cls.__name__} value: {value!r}")
    return UNSET


# =============================================================================
# Color
# =============================================================================


def parse_color(value: Any) -> Maybe[Color]:
    """
    Parse a color from ``#RRGGBB`` or a palette name.

    Hex colors are opaque. Names are matched case-insensitively.
    """
    if value is None:
        return UNSET
    if not isinstance(value, str):
        logger.warning(f"Invalid color value: {value!r}")
        return UNSET

    if value.startswith("#"):
        match = _HEX_COLOR_RE.match(value)
        if match is None:
            logger.warning(f"Invalid hex color: {value}")
            return UNSET
        return Color(int(match.group(1), 16) | 0xFF000000)

    color = NAMED_COLORS.get(value.lower())
    if color is None:
        logger.warning(f"Unknown color name: {value}")
        return UNSET
    return color


# =============================================================================
# Alignment
# =============================================================================


def parse_text_align(value: Any) -> Maybe[TextAlign]:
    return _match_enum(TextAlign, value)


def parse_main_axis_alignment(value: Any) -> Maybe[MainAxisAlignment]:
    return _match_enum(MainAxisAlignment, value)


def parse_cross_axis_alignment(value: Any) -> Maybe[CrossAxisAlignment]:
    return _match_enum(CrossAxisAlignment, value)


# =============================================================================
# Boxes
# =============================================================================


def parse_edge_insets(value: Any) -> Maybe[EdgeInsets]:
    """
    Parse padding/margin.

    A number applies to all four sides. An object sets sides independently;
    sides it omits are 0. Absent input is UNSET.
    """
    if value is None:
        return UNSET

    if _is_number(value):
        return EdgeInsets.all(float(value))

    if isinstance(value, Mapping):
        sides: dict[str, float] = {}
        for side in ("left", "top", "right", "bottom"):
            raw = value.get(side)
            if raw is None:
                sides[side] = 0.0
            elif _is_number(raw):
                sides[side] = float(raw)
            else:
                logger.debug(f"Ignoring non-numeric {side} inset: {raw!r}")
                sides[side] = 0.0
        return EdgeInsets(**sides)

    logger.debug(f"Invalid edge insets: {value!r}")
    return UNSET


def parse_border_radius(value: Any) -> Maybe[BorderRadius]:
    """A non-negative number becomes a uniform circular radius."""
    if _is_number(value) and value >= 0:
        return BorderRadius(float(value))
    if value is not None:
        logger.debug(f"Invalid border radius: {value!r}")
    return UNSET


def parse_dimension(value: Any) -> Maybe[float]:
    """Width, height, size, thickness: non-negative numbers only."""
    if _is_number(value) and value >= 0:
        return float(value)
    if value is not None:
        logger.debug(f"Invalid dimension: {value!r}")
    return UNSET


def parse_box_fit(value: Any) -> Maybe[BoxFit]:
    return _match_enum(BoxFit, value)


# =============================================================================
# Typography
# =============================================================================


def parse_font_weight(value: Any) -> Maybe[FontWeight]:
    """
    Parse a font weight.

    Accepts "bold"/"normal" or an integral weight from 100 to 900 in steps
    of 100.
    """
    if isinstance(value, str):
        weight = _FONT_WEIGHT_NAMES.get(value.lower())
        if weight is None:
            logger.debug(f"Unknown font weight: {value!r}")
            return UNSET
        return weight

    if _is_number(value):
        integral = isinstance(value, int) or value.is_integer()
        if integral and int(value) in _FONT_WEIGHT_STEPS:
            return FontWeight(int(value))
        logger.debug(f"Unsupported numeric font weight: {value!r}")
        return UNSET

    return UNSET


def parse_font_style(value: Any) -> Maybe[FontStyle]:
    return _match_enum(FontStyle, value)


def parse_text_style(value: Any) -> Maybe[TextStyle]:
    """Parse a ``style`` object into a TextStyle; each attribute independent."""
    if value is None:
        return UNSET
    if not isinstance(value, Mapping):
        logger.debug(f"Ignoring non-object text style: {value!r}")
        return UNSET

    return TextStyle(
        font_size=parse_dimension(value.get("fontSize")),
        color=parse_color(value.get("color")),
        font_weight=parse_font_weight(value.get("fontWeight")),
        font_style=parse_font_style(value.get("fontStyle")),
    )
