"""
colors.py - smk_stats color family classification.

Converts hex color codes to HSL and sorts them into 13 named color families
(nine hue bands plus Brown and the Black / Gray / White neutrals).

Module: smk_stats.colors
Last updated: 2026-10-19
"""
from __future__ import annotations

__all__ = ['COLOR_FAMILIES', 'hex_to_hsl', 'categorize_color', 'normalize_hex']

import colorsys
import logging
import math
import re
from typing import Tuple

logger = logging.getLogger(__name__)

# Display order: full color wheel, then neutrals
COLOR_FAMILIES: Tuple[str, ...] = (
    'Red', 'Orange', 'Yellow', 'Yellow-Green', 'Green', 'Cyan', 'Blue',
    'Purple', 'Magenta', 'Brown', 'Black', 'Gray', 'White',
)

# (family, lower hue inclusive, upper hue exclusive); Red wraps around 0
HUE_BANDS: Tuple[Tuple[str, int, int], ...] = (
    ('Orange', 15, 35),
    ('Yellow', 35, 65),
    ('Yellow-Green', 65, 95),
    ('Green', 95, 155),
    ('Cyan', 155, 200),
    ('Blue', 200, 260),
    ('Purple', 260, 300),
    ('Magenta', 300, 345),
)

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6})$')


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def hex_to_hsl(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert a hex color code to integer HSL.

    Args:
        hex_color (str): Six hex digits with an optional leading '#'
            (case-insensitive).

    Returns:
        Tuple[int, int, int]: (hue 0-360, saturation 0-100, lightness 0-100).

    Raises:
        ValueError: If hex_color is not a six-digit hex code.
    """
    match = _HEX_RE.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    # colorsys returns hue in [0, 1) and leaves hue/saturation at 0 for greys
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return _round_half_up(h * 360), _round_half_up(s * 100), _round_half_up(l * 100)


def categorize_color(hex_color: str) -> str:
    """
    Classify a hex color into one of COLOR_FAMILIES.

    Rules are applied in priority order: Brown, grayscale, hue bands.
    Values that cannot be parsed resolve to 'Gray'.

    Args:
        hex_color (str): Hex color code, e.g. '#A0522D'.

    Returns:
        str: Color family name.
    """
    try:
        h, s, l = hex_to_hsl(hex_color)
    except ValueError:
        logger.debug(f"Unclassifiable color {hex_color!r}, using Gray")
        return 'Gray'

    if 15 <= s < 40 and 20 <= l <= 60 and 20 <= h <= 60:
        return 'Brown'

    if s < 15:
        if l < 20:
            return 'Black'
        if l > 80:
            return 'White'
        return 'Gray'

    if h >= 345 or h < 15:
        return 'Red'
    for family, lower, upper in HUE_BANDS:
        if lower <= h < upper:
            return family

    return 'Gray'


def normalize_hex(hex_color: str) -> str:
    """Upper-case a hex code for use as a frequency-table key."""
    return hex_color.upper()
