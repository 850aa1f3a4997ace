# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Color space conversions for 8-bit RGB colors.

All operations are pure functions over three or four scalars (or NumPy
arrays of them for the CIE family).
"""

from colorutils.convert.channels import (
    rgb_to_hmmd,
    rgb_to_hsb,
    rgb_to_hsv,
    rgb_to_ycbcr,
    rgb_to_yuv,
)
from colorutils.convert.colorspace import (
    rgb_to_lab,
    rgb_to_luv,
    rgb_to_xyy,
    rgb_to_xyz,
)
from colorutils.convert.hsl import (
    complement,
    from_hsl,
    hsl_to_rgb,
    rgb_to_hsl,
    to_hsl,
)
from colorutils.convert.luminance import luminance, luminosity

__all__ = [
    # HSL
    "rgb_to_hsl",
    "hsl_to_rgb",
    "to_hsl",
    "from_hsl",
    "complement",
    # Luminosity
    "luminosity",
    "luminance",
    # CIE
    "rgb_to_xyz",
    "rgb_to_lab",
    "rgb_to_luv",
    "rgb_to_xyy",
    # Channel transforms
    "rgb_to_ycbcr",
    "rgb_to_yuv",
    "rgb_to_hsv",
    "rgb_to_hsb",
    "rgb_to_hmmd",
]
