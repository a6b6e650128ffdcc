# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Tests for the vectorised conversion math (packed ↔ bytes, HSL, CMYK)."""

import numpy as np
import pytest

from chromakit import Channel, Color
from chromakit.convert.colorspace import (
    cmyk_to_rgb,
    hsl_to_rgb,
    hue_to_channel,
    mix_byte,
    pack_channels,
    reorder_channels,
    rgb_to_cmyk,
    rgb_to_hsl,
    round_half_up,
    unpack_channels,
)


class TestRoundHalfUp:

    def test_ties_go_up(self):
        np.testing.assert_array_equal(
            round_half_up([0.5, 126.5, 127.5, 254.5]), [1, 127, 128, 255]
        )

    def test_non_ties(self):
        assert int(round_half_up(127.49)) == 127
        assert int(round_half_up(127.51)) == 128


class TestHueToChannel:

    def test_rising_edge(self):
        assert float(hue_to_channel(0.0, 1.0, 1 / 12)) == pytest.approx(0.5)

    def test_plateau(self):
        assert float(hue_to_channel(0.2, 0.8, 0.3)) == pytest.approx(0.8)

    def test_falling_edge(self):
        assert float(hue_to_channel(0.0, 1.0, 7 / 12)) == pytest.approx(0.5)

    def test_floor(self):
        assert float(hue_to_channel(0.2, 0.8, 0.9)) == pytest.approx(0.2)

    def test_wraps_fraction(self):
        assert float(hue_to_channel(0.0, 1.0, 1.25)) == pytest.approx(1.0)
        assert float(hue_to_channel(0.0, 1.0, -0.25)) == pytest.approx(0.0)
        assert float(hue_to_channel(0.0, 1.0, -11 / 12)) == pytest.approx(0.5)

    def test_vectorised(self):
        t = np.array([1 / 12, 0.3, 7 / 12, 0.9])
        np.testing.assert_allclose(hue_to_channel(0.0, 1.0, t), [0.5, 1.0, 0.5, 0.0])


class TestMixByte:

    def test_endpoints(self):
        assert int(mix_byte(10, 200, 0)) == 10
        assert int(mix_byte(10, 200, 1)) == 200

    def test_halfway_rounds_up(self):
        assert int(mix_byte(0, 255, 0.5)) == 128

    def test_descending(self):
        assert int(mix_byte(200, 100, 0.25)) == 175

    def test_vectorised(self):
        np.testing.assert_array_equal(
            mix_byte([0, 100, 255], [255, 100, 0], 0.5), [128, 100, 128]
        )


class TestPacking:

    def test_unpack(self):
        np.testing.assert_array_equal(unpack_channels(0xAAFF5733), [0xAA, 0xFF, 0x57, 0x33])

    def test_unpack_without_alpha(self):
        np.testing.assert_array_equal(unpack_channels(0xFF5733), [0, 0xFF, 0x57, 0x33])

    def test_pack_three(self):
        assert int(pack_channels([0xFF, 0x57, 0x33])) == 0xFF5733

    def test_pack_four_is_unsigned(self):
        assert int(pack_channels([0xFF, 0xFF, 0x57, 0x33])) == 0xFFFF5733

    def test_pack_wrong_width(self):
        with pytest.raises(ValueError, match="3 or 4 channels"):
            pack_channels([1, 2])

    def test_batch_roundtrip(self):
        packed = np.random.RandomState(42).randint(0, 2**32, size=100, dtype=np.int64)
        recovered = pack_channels(unpack_channels(packed))
        np.testing.assert_array_equal(recovered.astype(np.int64), packed)

    def test_unpack_shape(self):
        assert unpack_channels(np.zeros((4, 5), dtype=np.int64)).shape == (4, 5, 4)


class TestReorder:

    def test_bgr(self):
        order = [Channel.BLUE, Channel.GREEN, Channel.RED]
        assert int(reorder_channels(0xFF5733, order)) == 0x3357FF

    def test_rgba(self):
        order = [Channel.RED, Channel.GREEN, Channel.BLUE, Channel.ALPHA]
        assert int(reorder_channels(0x80FF5733, order)) == 0xFF573380

    def test_identity(self):
        order = [Channel.ALPHA, Channel.RED, Channel.GREEN, Channel.BLUE]
        assert int(reorder_channels(0x80FF5733, order)) == 0x80FF5733

    def test_batch(self):
        order = [Channel.BLUE, Channel.GREEN, Channel.RED]
        result = reorder_channels(np.array([0xFF0000, 0x00FF00, 0x0000FF]), order)
        np.testing.assert_array_equal(result, [0x0000FF, 0x00FF00, 0xFF0000])


class TestHslToRgb:

    def test_primaries(self):
        hsl = np.array([[0, 100, 50], [120, 100, 50], [240, 100, 50]])
        np.testing.assert_array_equal(
            hsl_to_rgb(hsl), [[255, 0, 0], [0, 255, 0], [0, 0, 255]]
        )

    def test_hue_360_equals_0(self):
        np.testing.assert_array_equal(hsl_to_rgb([360, 100, 50]), hsl_to_rgb([0, 100, 50]))

    def test_achromatic(self):
        np.testing.assert_array_equal(hsl_to_rgb([77, 0, 50]), [128, 128, 128])

    def test_matches_color_constructor(self):
        rng = np.random.RandomState(7)
        hsl = np.column_stack([
            rng.uniform(0, 360, 50),
            rng.uniform(0, 100, 50),
            rng.uniform(0, 100, 50),
        ])
        batch = hsl_to_rgb(hsl)
        for row, rgb in zip(hsl, batch):
            c = Color.from_hsl({"h": row[0], "s": row[1], "l": row[2]}).to_rgb()
            assert (c.r, c.g, c.b) == tuple(int(v) for v in rgb)


class TestRgbToHsl:

    def test_red(self):
        np.testing.assert_allclose(rgb_to_hsl([255, 0, 0]), [0, 100, 50])

    def test_gray(self):
        h, s, l = rgb_to_hsl([128, 128, 128])  # noqa: E741
        assert h == 0 and s == 0
        assert l == pytest.approx(50.196, abs=0.001)

    def test_hue_range(self):
        hsl = rgb_to_hsl(np.random.RandomState(3).randint(0, 256, size=(200, 3)))
        assert np.all(hsl[:, 0] >= 0) and np.all(hsl[:, 0] < 360)
        assert np.all(hsl[:, 1] >= 0) and np.all(hsl[:, 1] <= 100 + 1e-9)

    def test_roundtrip(self):
        rgb = np.random.RandomState(11).randint(0, 256, size=(100, 3))
        np.testing.assert_array_equal(hsl_to_rgb(rgb_to_hsl(rgb)), rgb)


class TestCmyk:

    def test_black(self):
        np.testing.assert_allclose(rgb_to_cmyk([0, 0, 0]), [0, 0, 0, 100])

    def test_white(self):
        np.testing.assert_allclose(rgb_to_cmyk([255, 255, 255]), [0, 0, 0, 0], atol=1e-12)

    def test_k_100_is_black(self):
        np.testing.assert_array_equal(cmyk_to_rgb([37, 80, 12, 100]), [0, 0, 0])

    def test_zero_is_white(self):
        np.testing.assert_array_equal(cmyk_to_rgb([0, 0, 0, 0]), [255, 255, 255])

    def test_batch_roundtrip(self):
        rgb = np.random.RandomState(5).randint(0, 256, size=(100, 3))
        np.testing.assert_array_equal(cmyk_to_rgb(rgb_to_cmyk(rgb)), rgb)
