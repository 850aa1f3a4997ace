# Copyright (c) 2026 Colorutils
# SPDX-License-Identifier: MIT

"""Tests for luminosity and readability heuristics."""

import pytest

from colorutils.a11y.contrast import (
    ContrastConfig,
    Method,
    is_good_color_mix,
    luminosity_contrast,
    luminosity_ratio,
    w3c_color_difference,
)
from colorutils.convert.luminance import luminance, luminosity
from colorutils.schema import BLACK, WHITE, Color


class TestLuminosity:

    def test_black_is_zero(self):
        assert luminosity(BLACK) == 0.0

    def test_white_is_255(self):
        assert luminosity(WHITE) == pytest.approx(255.0, abs=1e-9)

    def test_channel_weights(self):
        assert luminosity(Color(255, 0, 0)) == pytest.approx(0.2126 * 255)
        assert luminosity(Color(0, 255, 0)) == pytest.approx(0.7152 * 255)
        assert luminosity(Color(0, 0, 255)) == pytest.approx(0.0722 * 255)

    def test_luminance_alias(self):
        c = Color(12, 200, 99)
        assert luminance(c) == luminosity(c)


class TestW3C:

    def test_black_white_max_difference(self):
        assert w3c_color_difference(BLACK, WHITE) == 765
        assert is_good_color_mix(BLACK, WHITE, Method.W3C)

    def test_near_black_not_readable(self):
        assert w3c_color_difference(BLACK, Color(10, 10, 10)) == 30
        assert not is_good_color_mix(BLACK, Color(10, 10, 10), Method.W3C)

    def test_threshold_inclusive(self):
        a = Color(0, 0, 0)
        b = Color(255, 245, 0)  # difference 500
        assert is_good_color_mix(a, b, Method.W3C)
        assert not is_good_color_mix(a, Color(255, 244, 0), Method.W3C)

    def test_symmetric(self):
        a, b = Color(10, 200, 30), Color(250, 5, 180)
        assert w3c_color_difference(a, b) == w3c_color_difference(b, a)


class TestLuminosityRatio:

    def test_black_white_readable(self):
        assert luminosity_ratio(BLACK, WHITE) == 0.0
        assert is_good_color_mix(BLACK, WHITE, Method.LUMINOSITY)

    def test_identical_not_readable(self):
        c = Color(100, 100, 100)
        assert luminosity_ratio(c, c) == pytest.approx(1.0)
        assert not is_good_color_mix(c, c, Method.LUMINOSITY)

    def test_both_black_not_readable(self):
        """Zero luminosity on both sides must not divide by zero."""
        assert luminosity_ratio(BLACK, BLACK) == 1.0
        assert not is_good_color_mix(BLACK, BLACK, Method.LUMINOSITY)

    def test_order_independent(self):
        a, b = Color(20, 20, 20), Color(220, 220, 220)
        assert luminosity_ratio(a, b) == pytest.approx(luminosity_ratio(b, a))
        assert luminosity_ratio(a, b) == pytest.approx(20 / 220)


class TestLuminosityContrast:

    def test_black_white_max_delta(self):
        assert luminosity_contrast(BLACK, WHITE) == pytest.approx(116.0, abs=1e-6)
        assert is_good_color_mix(BLACK, WHITE, Method.LUMINOSITY_CONTRAST)

    @pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (12, 200, 99)])
    def test_identical_never_readable(self, rgb):
        c = Color(*rgb)
        assert luminosity_contrast(c, c) == 0.0
        assert not is_good_color_mix(c, c, Method.LUMINOSITY_CONTRAST)

    def test_threshold_is_strict(self):
        gray = Color(166, 166, 166)
        assert is_good_color_mix(BLACK, gray, Method.LUMINOSITY_CONTRAST)
        assert not is_good_color_mix(BLACK, Color(163, 163, 163), Method.LUMINOSITY_CONTRAST)


class TestMethodDispatch:

    def test_methods_disagree(self):
        # W3C passes, luminosity contrast does not
        a, b = Color(255, 0, 0), Color(0, 0, 255)
        assert w3c_color_difference(a, b) == 510
        assert is_good_color_mix(a, b, Method.W3C)
        assert not is_good_color_mix(a, b, Method.LUMINOSITY_CONTRAST)

    def test_unknown_method_falls_back_to_w3c(self):
        a, b = Color(255, 0, 0), Color(0, 0, 255)
        assert is_good_color_mix(a, b, "something-else") == is_good_color_mix(a, b, Method.W3C)
        assert is_good_color_mix(BLACK, Color(10, 10, 10), None) is False

    def test_custom_config(self):
        config = ContrastConfig(min_w3c_difference=20)
        assert is_good_color_mix(BLACK, Color(10, 10, 10), Method.W3C, config)

    def test_config_frozen(self):
        config = ContrastConfig()
        with pytest.raises(AttributeError):
            config.min_w3c_difference = 1
