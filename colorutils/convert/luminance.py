# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Relative luminosity of 8-bit colors.

Weights are ITU-R BT.709 (https://en.wikipedia.org/wiki/Relative_luminance),
applied directly to gamma-encoded 0-255 channels, so the result ranges 0-255.
"""

from __future__ import annotations

from colorutils.schema import Color

# BT.709 channel weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def luminosity(color: Color) -> float:
    """Weighted channel sum in [0, 255]: 0 for black, 255 for white."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * color.red + wg * color.green + wb * color.blue


def luminance(color: Color) -> float:
    """Alias for luminosity()."""
    return luminosity(color)
