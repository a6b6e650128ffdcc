# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for the non-raising color predicates."""

import math

import numpy as np
import pytest

from chromakit import (
    CMYK,
    HSL,
    RGB,
    is_cmyk_color,
    is_color,
    is_decimal_color,
    is_hex_color,
    is_hsl_color,
    is_rgb_color,
)


class TestIsDecimalColor:

    @pytest.mark.parametrize("value", [0, 0xFFFFFF, 0xFFFFFFFF, 255.0, np.int64(10)])
    def test_valid(self, value):
        assert is_decimal_color(value)

    @pytest.mark.parametrize("value", [-1, 0x100000000, 1.5, math.nan, "0", None, True])
    def test_invalid(self, value):
        assert not is_decimal_color(value)


class TestIsHexColor:

    @pytest.mark.parametrize("value", ["#FFF", "#FFFA", "#ff5733", "#FF5733AA"])
    def test_valid(self, value):
        assert is_hex_color(value)

    @pytest.mark.parametrize("value", ["FFF", "#FFFFF", "#GGG", "#FFF\n", 0xFFF, None])
    def test_invalid(self, value):
        assert not is_hex_color(value)


class TestIsRgbColor:

    def test_valid(self):
        assert is_rgb_color({"r": 0, "g": 128, "b": 255})
        assert is_rgb_color({"r": 0, "g": 128, "b": 255, "a": 0.5})
        assert is_rgb_color(RGB(1, 2, 3))

    @pytest.mark.parametrize("value", [
        {"r": 256, "g": 0, "b": 0},
        {"r": 1.5, "g": 0, "b": 0},
        {"r": 0, "g": 0},
        {"r": 0, "g": 0, "b": 0, "a": 2},
        {"r": 0, "g": 0, "b": 0, "a": "x"},
        {"r": 0, "g": 0, "b": 0, "a": math.nan},
        None,
        (0, 0, 0),
    ])
    def test_invalid(self, value):
        assert not is_rgb_color(value)


class TestIsHslColor:

    def test_valid(self):
        assert is_hsl_color({"h": 360, "s": 100, "l": 0})
        assert is_hsl_color(HSL(h=120, s=50, l=50, a=1))

    @pytest.mark.parametrize("value", [
        {"h": 361, "s": 0, "l": 0},
        {"h": 0, "s": 101, "l": 0},
        {"h": 10.5, "s": 50, "l": 50},
        {"h": 0, "s": 50, "l": 50, "a": -0.1},
        "hsl",
    ])
    def test_invalid(self, value):
        assert not is_hsl_color(value)


class TestIsCmykColor:

    def test_valid(self):
        assert is_cmyk_color({"c": 0, "m": 100, "y": 50, "k": 0})
        assert is_cmyk_color(CMYK(1, 2, 3, 4))

    @pytest.mark.parametrize("value", [
        {"c": 0, "m": 101, "y": 50, "k": 0},
        {"c": 0.5, "m": 0, "y": 0, "k": 0},
        {"c": 0, "m": 0, "y": 0},
        RGB(0, 0, 0),
    ])
    def test_invalid(self, value):
        assert not is_cmyk_color(value)


class TestIsColor:

    @pytest.mark.parametrize("value", [
        0xFF5733,
        "#FF5733",
        {"r": 1, "g": 2, "b": 3},
        {"h": 1, "s": 2, "l": 3},
        {"c": 1, "m": 2, "y": 3, "k": 4},
    ])
    def test_any_representation(self, value):
        assert is_color(value)

    @pytest.mark.parametrize("value", ["red", -1, {}, [255, 0, 0], None])
    def test_rejects(self, value):
        assert not is_color(value)
