# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Foreground/background readability checks.

Three heuristics decide whether two colors can be read against each other:

- W3C: sum of absolute channel differences, >= 500 of a possible 765
  (https://www.w3.org/TR/AERT/#color-contrast)
- Luminosity: ratio of the darker to the lighter luminosity, <= 0.1
- LuminosityContrast: 116 * cbrt(|ΔY| / 255), > 100
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from colorutils.convert.luminance import luminosity
from colorutils.schema import Color


class Method(Enum):
    """Readability heuristic used by is_good_color_mix()."""

    W3C = "w3c"
    LUMINOSITY = "luminosity"
    LUMINOSITY_CONTRAST = "luminosity_contrast"


@dataclass(frozen=True)
class ContrastConfig:
    """Thresholds for readability checks."""

    # W3C: minimum summed channel difference (0-765)
    min_w3c_difference: int = 500

    # Luminosity: maximum darker/lighter ratio
    max_luminosity_ratio: float = 0.1

    # LuminosityContrast: minimum perceptual delta (0-116)
    min_luminosity_contrast: float = 100.0

    # Complement search: base colors darker than this push the complement lighter
    luminosity_pivot: float = 128.0


def w3c_color_difference(a: Color, b: Color) -> int:
    """Sum of absolute per-channel differences (0-765)."""
    return (
        abs(a.red - b.red)
        + abs(a.green - b.green)
        + abs(a.blue - b.blue)
    )


def luminosity_ratio(a: Color, b: Color) -> float:
    """
    Darker luminosity over lighter luminosity (0-1).

    Two black colors have no defined ratio; they count as identical (1.0).
    """
    lum_a = luminosity(a)
    lum_b = luminosity(b)
    hi = max(lum_a, lum_b)
    if hi == 0:
        return 1.0
    return min(lum_a, lum_b) / hi


def luminosity_contrast(a: Color, b: Color) -> float:
    """Perceptual lightness delta 116 * cbrt(|ΔY| / 255), from 0 to 116."""
    delta = abs(luminosity(a) - luminosity(b)) / 255.0
    return 116.0 * delta ** (1.0 / 3.0)


def is_good_color_mix(
    color_a: Color,
    color_b: Color,
    method: Method,
    config: Optional[ContrastConfig] = None,
) -> bool:
    """
    Check whether two colors are readable as foreground and background.

    Args:
        color_a: First color
        color_b: Second color
        method: Heuristic to apply. Anything other than LUMINOSITY or
            LUMINOSITY_CONTRAST is scored with W3C.
        config: Thresholds (uses defaults if None)

    Returns:
        True if the pair passes the method's threshold
    """
    if config is None:
        config = ContrastConfig()

    if method is Method.LUMINOSITY:
        return luminosity_ratio(color_a, color_b) <= config.max_luminosity_ratio
    if method is Method.LUMINOSITY_CONTRAST:
        return luminosity_contrast(color_a, color_b) > config.min_luminosity_contrast
    return w3c_color_difference(color_a, color_b) >= config.min_w3c_difference
