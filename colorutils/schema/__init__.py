# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Value types for colors.

All types in this module are immutable (frozen dataclasses) and validate
their components on construction.
"""

from colorutils.schema.color import (
    BLACK,
    WHITE,
    Color,
    HSLColor,
    InvalidColorComponent,
    to_hex,
)

__all__ = [
    # Core types
    "Color",
    "HSLColor",
    # Errors
    "InvalidColorComponent",
    # Constants
    "BLACK",
    "WHITE",
    # Formatting
    "to_hex",
]
