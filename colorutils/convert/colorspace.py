# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""
CIE color space conversions.

Conversion chain: sRGB → Linear RGB → XYZ (D50) → Lab / Luv / xyY

References:
- http://www.brucelindbloom.com (RGB → XYZ matrix, Lab, Luv, xyY)
- sRGB gamma: IEC 61966-2-1

The RGB → XYZ matrix is sRGB Bradford-adapted to the D50 reference white,
so Lab and Luv are normalized against D50 as well.

All conversions are pure NumPy and accept arrays of shape (..., 3).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Constants
# =============================================================================

# Reference white D50
D50_WHITE = np.array([0.964221, 1.0, 0.825211], dtype=np.float64)

# CIE constants: EPSILON = (6/29)^3, KAPPA = (29/3)^3
EPSILON = 216.0 / 24389.0
KAPPA = 24389.0 / 27.0

# Linear sRGB to XYZ (D50)
_RGB_TO_XYZ = np.array([
    [0.436052025, 0.385081593, 0.143087414],
    [0.222491598, 0.716886060, 0.060621486],
    [0.013929122, 0.097097002, 0.714185470],
], dtype=np.float64)


# =============================================================================
# sRGB → Linear RGB → XYZ
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (D50).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values; white is ≈ D50_WHITE
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


# =============================================================================
# XYZ → Lab / Luv / xyY
# =============================================================================


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    # Cube root above (6/29)^3, linear segment below
    return np.where(t > EPSILON, np.cbrt(t), (KAPPA * t + 16.0) / 116.0)


def _lightness(yr: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(yr > EPSILON, 116.0 * np.cbrt(yr) - 16.0, KAPPA * yr)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE L*a*b* against the D50 white.

    Returns:
        Array of shape (..., 3) with (L, a, b); L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / D50_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def _uv_prime(xyz: NDArray[np.float64]) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    X, Y, Z = xyz[..., 0], xyz[..., 1], xyz[..., 2]
    denom = X + 15.0 * Y + 3.0 * Z
    safe = np.where(denom > 0, denom, 1.0)
    return 4.0 * X / safe, 9.0 * Y / safe


def xyz_to_luv(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to CIE L*u*v* against the D50 white.

    Black has no chromaticity; it maps to (0, 0, 0).

    Returns:
        Array of shape (..., 3) with (L, u, v); L in [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    ur, vr = _uv_prime(D50_WHITE)
    u_, v_ = _uv_prime(xyz)

    denom = xyz[..., 0] + 15.0 * xyz[..., 1] + 3.0 * xyz[..., 2]
    u_ = np.where(denom > 0, u_, ur)
    v_ = np.where(denom > 0, v_, vr)

    L = _lightness(xyz[..., 1] / D50_WHITE[1])
    u = 13.0 * L * (u_ - ur)
    v = 13.0 * L * (v_ - vr)

    return np.stack([L, u, v], axis=-1)


def xyz_to_xyy(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert XYZ to xyY chromaticity + luminance.

    Black takes the chromaticity of the D50 white.

    Returns:
        Array of shape (..., 3) with (x, y, Y)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    total = xyz.sum(axis=-1)
    white_total = D50_WHITE.sum()
    safe = np.where(total > 0, total, 1.0)

    x = np.where(total > 0, xyz[..., 0] / safe, D50_WHITE[0] / white_total)
    y = np.where(total > 0, xyz[..., 1] / safe, D50_WHITE[1] / white_total)

    return np.stack([x, y, xyz[..., 1]], axis=-1)


# =============================================================================
# Convenience: uint8 sRGB → XYZ family (full chain)
# =============================================================================


def srgb_uint8_to_xyz(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to XYZ.

    Args:
        pixels: Array of shape (..., 3) with sRGB values [0, 255]
    """
    srgb = np.asarray(pixels).astype(np.float64) / 255.0
    return linear_rgb_to_xyz(srgb_to_linear(srgb))


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels to Lab (D50)."""
    return xyz_to_lab(srgb_uint8_to_xyz(pixels))


def srgb_uint8_to_luv(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels to Luv (D50)."""
    return xyz_to_luv(srgb_uint8_to_xyz(pixels))


def srgb_uint8_to_xyy(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels to xyY."""
    return xyz_to_xyy(srgb_uint8_to_xyz(pixels))


def _scalar(converter, r: int, g: int, b: int) -> tuple[float, float, float]:
    out = converter(np.array([r, g, b], dtype=np.uint8))
    return float(out[0]), float(out[1]), float(out[2])


def rgb_to_xyz(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Single-color XYZ; Y is 1.0 for white."""
    return _scalar(srgb_uint8_to_xyz, r, g, b)


def rgb_to_lab(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Single-color Lab; white is (100, 0, 0)."""
    return _scalar(srgb_uint8_to_lab, r, g, b)


def rgb_to_luv(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Single-color Luv; white is (100, 0, 0)."""
    return _scalar(srgb_uint8_to_luv, r, g, b)


def rgb_to_xyy(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Single-color xyY."""
    return _scalar(srgb_uint8_to_xyy, r, g, b)
