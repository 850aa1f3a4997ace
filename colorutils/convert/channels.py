# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Integer channel transforms of 8-bit RGB.

Luma/chroma (YCbCr, YUV) and hue-based (HSV, HSB, HMMD) representations.
Each function is an independent one-shot transform. Integer outputs are
truncated toward zero, so chroma components are signed and centered on 0.

Reference: ImageJ Color Inspector 3D color space formulas
(http://www.f4.fhtw-berlin.de/~barthel/ImageJ/ColorInspector/)
"""

from __future__ import annotations

import colorsys


def _luma(r: int, g: int, b: int) -> int:
    # ITU-R BT.601
    return int(0.299 * r + 0.587 * g + 0.114 * b)


def rgb_to_ycbcr(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert RGB to YCbCr (BT.601, full range, no 128 offset).

    Returns:
        Tuple (y, cb, cr) with y in [0, 255] and cb, cr in [-128, 127]
    """
    y = _luma(r, g, b)
    cb = int(-0.16874 * r - 0.33126 * g + 0.50000 * b)
    cr = int(0.50000 * r - 0.41869 * g - 0.08131 * b)
    return y, cb, cr


def rgb_to_yuv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert RGB to YUV; u and v are scaled blue and red differences."""
    y = _luma(r, g, b)
    u = int((b - y) * 0.492)
    v = int((r - y) * 0.877)
    return y, u, v


def rgb_to_hsb(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB to hue/saturation/brightness via colorsys.

    Returns:
        Tuple (h, s, b) of floats in [0, 1]; hue is a fraction of a turn
    """
    return colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)


def _hue_degrees(r: int, g: int, b: int, hi: int, lo: int) -> float:
    delta = hi - lo
    if delta == 0:
        return 0.0
    if r == hi:
        hue = 60.0 * (g - b) / delta
    elif g == hi:
        hue = 60.0 * (2.0 + (b - r) / delta)
    else:
        hue = 60.0 * (4.0 + (r - g) / delta)
    if hue < 0:
        hue += 360.0
    return hue


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    Convert RGB to integer HSV.

    Returns:
        Tuple (h, s, v) with h in [0, 360) and s, v in [0, 100]
    """
    hi = max(r, g, b)
    lo = min(r, g, b)

    h = _hue_degrees(r, g, b, hi, lo)
    s = (hi - lo) / hi if hi else 0.0
    v = hi / 255.0

    return int(h), int(s * 100), int(v * 100)


def rgb_to_hmmd(r: int, g: int, b: int) -> tuple[int, int, int, int]:
    """
    Convert RGB to HMMD (MPEG-7 hue, max, min, diff).

    Returns:
        Tuple (hue, max, min, diff); hue in [0, 360), the rest in [0, 255]
    """
    hi = max(r, g, b)
    lo = min(r, g, b)
    return int(_hue_degrees(r, g, b, hi, lo)), hi, lo, hi - lo
