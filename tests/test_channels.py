# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""Tests for integer channel transforms (YCbCr, YUV, HSV, HSB, HMMD)."""

import pytest

from colorutils.convert.channels import (
    rgb_to_hmmd,
    rgb_to_hsb,
    rgb_to_hsv,
    rgb_to_ycbcr,
    rgb_to_yuv,
)


class TestYCbCr:

    def test_black(self):
        assert rgb_to_ycbcr(0, 0, 0) == (0, 0, 0)

    def test_red(self):
        assert rgb_to_ycbcr(255, 0, 0) == (76, -43, 127)

    def test_gray_has_no_chroma(self):
        y, cb, cr = rgb_to_ycbcr(100, 100, 100)
        assert y in (99, 100)
        assert abs(cb) <= 1
        assert abs(cr) <= 1


class TestYUV:

    def test_black(self):
        assert rgb_to_yuv(0, 0, 0) == (0, 0, 0)

    def test_red(self):
        assert rgb_to_yuv(255, 0, 0) == (76, -37, 156)

    def test_blue(self):
        # y = int(29.07) = 29
        assert rgb_to_yuv(0, 0, 255) == (29, 111, -25)


class TestHSV:

    @pytest.mark.parametrize("rgb, expected", [
        ((255, 0, 0), (0, 100, 100)),
        ((0, 255, 0), (120, 100, 100)),
        ((0, 0, 255), (240, 100, 100)),
        ((255, 0, 255), (300, 100, 100)),
        ((0, 0, 0), (0, 0, 0)),
    ])
    def test_known_values(self, rgb, expected):
        assert rgb_to_hsv(*rgb) == expected

    def test_white(self):
        h, s, v = rgb_to_hsv(255, 255, 255)
        assert (h, s) == (0, 0)
        assert v == 100

    def test_hue_never_negative(self):
        h, _, _ = rgb_to_hsv(255, 0, 10)
        assert 0 <= h < 360


class TestHSB:

    def test_red(self):
        assert rgb_to_hsb(255, 0, 0) == pytest.approx((0.0, 1.0, 1.0))

    def test_blue(self):
        assert rgb_to_hsb(0, 0, 255) == pytest.approx((2.0 / 3.0, 1.0, 1.0))

    def test_gray(self):
        h, s, b = rgb_to_hsb(51, 51, 51)
        assert (h, s) == (0.0, 0.0)
        assert b == pytest.approx(0.2)


class TestHMMD:

    def test_orange(self):
        assert rgb_to_hmmd(255, 128, 0) == (30, 255, 0, 255)

    def test_red_hue_is_zero(self):
        assert rgb_to_hmmd(255, 0, 0) == (0, 255, 0, 255)

    def test_gray(self):
        assert rgb_to_hmmd(90, 90, 90) == (0, 90, 90, 0)

    def test_magenta_wraps(self):
        hue, hi, lo, diff = rgb_to_hmmd(255, 0, 255)
        assert hue == 300
        assert (hi, lo, diff) == (255, 0, 255)
