# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Colorutils -- Color conversions and readability checks.

Converts 8-bit RGB colors to HSL, XYZ, Lab, Luv, xyY, YCbCr, YUV, HSV,
HSB and HMMD, computes complements, and decides whether two colors are
readable as foreground and background.

Quick start::

    from colorutils import Color, Method, get_readable_complement, is_good_color_mix

    bg = Color(30, 60, 120)
    fg = get_readable_complement(bg)
    is_good_color_mix(bg, fg, Method.LUMINOSITY_CONTRAST)
    fg.hex
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from colorutils.a11y import (
    ContrastConfig,
    Method,
    get_readable_complement,
    is_good_color_mix,
)
from colorutils.convert import (
    complement,
    hsl_to_rgb,
    luminance,
    luminosity,
    rgb_to_hsl,
)
from colorutils.schema import (
    BLACK,
    WHITE,
    Color,
    HSLColor,
    InvalidColorComponent,
    to_hex,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Color",
    "HSLColor",
    "InvalidColorComponent",
    "BLACK",
    "WHITE",
    # Conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "complement",
    "luminosity",
    "luminance",
    "to_hex",
    # Accessibility
    "Method",
    "ContrastConfig",
    "is_good_color_mix",
    "get_readable_complement",
    # Version
    "__version__",
]
