# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
RGB ↔ HSL conversions and hue rotation.

HSL components are integers: hue in degrees [0, 360), saturation and
lightness in [0, 100]. Rounding is half-up, so a round trip
RGB → HSL → RGB reproduces every channel within ±1.

Reference: http://www.easyrgb.com/ (RGB → HSL, HSL → RGB)
"""

from __future__ import annotations

import logging
import math

from colorutils.schema import BLACK, Color, HSLColor, InvalidColorComponent

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert 8-bit RGB to integer HSL.

    Args:
        r, g, b: Channel values [0, 255]

    Returns:
        Tuple (h, s, l) with h in [0, 360) and s, l in [0, 100]
    """
    red = r / 255.0
    green = g / 255.0
    blue = b / 255.0

    lo = min(red, green, blue)
    hi = max(red, green, blue)
    delta = hi - lo

    l = (hi + lo) / 2.0

    if delta == 0:
        # Achromatic
        h = 0.0
        s = 0.0
    else:
        if l < 0.5:
            s = delta / (hi + lo)
        else:
            s = delta / (2.0 - hi - lo)

        delta_r = (((hi - red) / 6.0) + (delta / 2.0)) / delta
        delta_g = (((hi - green) / 6.0) + (delta / 2.0)) / delta
        delta_b = (((hi - blue) / 6.0) + (delta / 2.0)) / delta

        if red == hi:
            h = delta_b - delta_g
        elif green == hi:
            h = (1.0 / 3.0) + delta_r - delta_b
        else:
            h = (2.0 / 3.0) + delta_g - delta_r

        if h < 0:
            h += 1.0
        if h > 1:
            h -= 1.0

    # A hue just below 1.0 rounds up to 360, which is 0 on the wheel
    return _round_half_up(360.0 * h) % 360, _round_half_up(s * 100.0), _round_half_up(l * 100.0)


def hue_to_channel(tmp1: float, tmp2: float, h: float) -> float:
    """
    Evaluate one RGB channel from a hue offset.

    Args:
        tmp1, tmp2: Intermediate lightness bounds from hsl_to_rgb
        h: Hue offset in turns, wrapped into [0, 1]

    Returns:
        Channel value in [0, 1]
    """
    if h < 0:
        h += 1.0
    if h > 1:
        h -= 1.0
    if 6.0 * h < 1:
        return tmp1 + (tmp2 - tmp1) * 6.0 * h
    if 2.0 * h < 1:
        return tmp2
    if 3.0 * h < 2:
        return tmp1 + (tmp2 - tmp1) * ((2.0 / 3.0) - h) * 6.0
    return tmp1


def hsl_to_rgb(h: int, s: int, l: int) -> tuple[int, int, int]:
    """
    Convert integer HSL to 8-bit RGB.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 100]
        l: Lightness [0, 100]

    Returns:
        Tuple (r, g, b) with channels rounded to the nearest integer
    """
    hue = h / 360.0
    saturation = s / 100.0
    lightness = l / 100.0

    if saturation == 0:
        r = g = b = lightness * 255.0
    else:
        if lightness < 0.5:
            tmp2 = lightness * (1.0 + saturation)
        else:
            tmp2 = (lightness + saturation) - (saturation * lightness)
        tmp1 = 2.0 * lightness - tmp2

        r = 255.0 * hue_to_channel(tmp1, tmp2, hue + (1.0 / 3.0))
        g = 255.0 * hue_to_channel(tmp1, tmp2, hue)
        b = 255.0 * hue_to_channel(tmp1, tmp2, hue - (1.0 / 3.0))

    return _round_half_up(r), _round_half_up(g), _round_half_up(b)


# =============================================================================
# Color-level helpers
# =============================================================================


def to_hsl(color: Color) -> HSLColor:
    """HSL form of a color."""
    return HSLColor(*rgb_to_hsl(color.red, color.green, color.blue))


def from_hsl(hsl: HSLColor) -> Color:
    """
    Build a color from an HSL triple.

    Raises:
        InvalidColorComponent: If the conversion lands outside [0, 255]
    """
    return Color(*hsl_to_rgb(hsl.h, hsl.s, hsl.l))


def complement(color: Color) -> Color:
    """
    Rotate a color's hue by 180 degrees.

    Saturation and lightness are kept. If the rotated triple does not
    convert to a valid color, pure black is returned instead.
    """
    h, s, l = rgb_to_hsl(color.red, color.green, color.blue)
    rgb = hsl_to_rgb((h + 180) % 360, s, l)
    try:
        return Color(*rgb)
    except InvalidColorComponent as exc:
        logger.warning("Complement of %s is out of range (%s), using black", color.hex, exc)
        return BLACK
