# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Accessibility evaluation for color pairs.

Readability heuristics and a search for readable complementary colors.
"""

from colorutils.a11y.contrast import (
    ContrastConfig,
    Method,
    is_good_color_mix,
    luminosity_contrast,
    luminosity_ratio,
    w3c_color_difference,
)
from colorutils.a11y.readable import get_readable_complement

__all__ = [
    "Method",
    "ContrastConfig",
    "is_good_color_mix",
    "get_readable_complement",
    "w3c_color_difference",
    "luminosity_ratio",
    "luminosity_contrast",
]
