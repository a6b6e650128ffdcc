# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""Vectorised conversion math and color predicates."""

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
from chromakit.convert.predicates import (
    is_cmyk_color,
    is_color,
    is_decimal_color,
    is_hex_color,
    is_hsl_color,
    is_rgb_color,
)

__all__ = [
    # Helpers
    "hue_to_channel",
    "mix_byte",
    "round_half_up",
    # Packed integers
    "pack_channels",
    "unpack_channels",
    "reorder_channels",
    # Color spaces
    "hsl_to_rgb",
    "rgb_to_hsl",
    "cmyk_to_rgb",
    "rgb_to_cmyk",
    # Predicates
    "is_decimal_color",
    "is_hex_color",
    "is_rgb_color",
    "is_hsl_color",
    "is_cmyk_color",
    "is_color",
]
