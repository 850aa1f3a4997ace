# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""Readable complementary colors for text on a given background."""

from __future__ import annotations

import logging
from typing import Optional

from colorutils.a11y.contrast import ContrastConfig, Method, is_good_color_mix
from colorutils.convert.hsl import complement, from_hsl, to_hsl
from colorutils.convert.luminance import luminosity
from colorutils.schema import Color

logger = logging.getLogger(__name__)


def get_readable_complement(
    color: Color,
    config: Optional[ContrastConfig] = None,
) -> Color:
    """
    Find a complementary color readable against `color`.

    Starts from the hue-rotated complement and walks its lightness one step
    at a time (up for dark colors, down for light ones) until the pair
    passes the LuminosityContrast check or lightness reaches the bound it
    is walking toward (100 going up, 0 going down). The walk is at most
    100 steps. Readability is not guaranteed: if the bound is hit first,
    the last candidate is returned.

    Args:
        color: Background color
        config: Thresholds (uses defaults if None)

    Returns:
        Complementary color, readable unless the lightness bound was reached

    Example:
        >>> get_readable_complement(Color(0, 0, 0))
        Color(red=166, green=166, blue=166)
    """
    if config is None:
        config = ContrastConfig()

    candidate = complement(color)
    hsl = to_hsl(candidate)
    base = luminosity(color)
    logger.debug("Base color luminosity: %.2f", base)

    if base < config.luminosity_pivot:
        step, bound = 1, 100
    else:
        step, bound = -1, 0

    while (
        not is_good_color_mix(color, candidate, Method.LUMINOSITY_CONTRAST, config)
        and hsl.l != bound
    ):
        hsl = hsl.with_lightness(hsl.l + step)
        logger.debug("Adjusting HSL: h=%3d s=%3d l=%3d", hsl.h, hsl.s, hsl.l)
        candidate = from_hsl(hsl)

    return candidate
