# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: Out-of-range components are rejected at construction
- Serializable: JSON-ready via to_dict()/from_dict()

RGB channels are 8-bit integers in [0, 255]. No alpha channel is modeled.

HSL components are integers:
- h (Hue): 0-359 degrees
- s (Saturation): 0-100
- l (Lightness): 0-100
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace


# =============================================================================
# Errors
# =============================================================================


class InvalidColorComponent(ValueError):
    """Raised when a color is built from channel values outside [0, 255]."""

    def __init__(self, channel: str, value: object) -> None:
        super().__init__(f"{channel} component must be 0-255, got {value}")
        self.channel = channel
        self.value = value


# =============================================================================
# Parsing Helpers
# =============================================================================

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An 8-bit sRGB color.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
    """
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        """Validate channel values are within [0, 255]."""
        for channel in ("red", "green", "blue"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise InvalidColorComponent(channel.capitalize(), value)

    @property
    def hex(self) -> str:
        """Hex string like "#3941c8" (lowercase, zero-padded)."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return self.red, self.green, self.blue

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"red": self.red, "green": self.green, "blue": self.blue}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(red=data["red"], green=data["green"], blue=data["blue"])

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """
        Parse a hex color string.

        Args:
            hex_color: Hex string like "#3941C8" or "3941c8"

        Raises:
            ValueError: If the string is not a six-digit hex color
        """
        m = _HEX_RE.fullmatch(hex_color.strip())
        if not m:
            raise ValueError(f"Not a hex color: {hex_color!r}")
        digits = m.group(1)
        return cls(
            red=int(digits[0:2], 16),
            green=int(digits[2:4], 16),
            blue=int(digits[4:6], 16),
        )


def to_hex(color: Color) -> str:
    """Format a color as a 7-character "#rrggbb" string."""
    return color.hex


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in integer HSL form.

    Derived from a Color and convertible back to one; never stored on its own.

    Attributes:
        h: Hue in degrees (0-359)
        s: Saturation (0-100)
        l: Lightness (0-100)
    """
    h: int
    s: int
    l: int

    def __post_init__(self) -> None:
        """Validate HSL values are within expected ranges."""
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def with_lightness(self, l: int) -> HSLColor:
        """Copy of this color with a different lightness."""
        return replace(self, l=l)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.h, self.s, self.l

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLColor:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])
