# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Chromakit -- a color value type with exact conversions.

One color, five representations: packed 32-bit integer, hex string,
RGB, HSL, and CMYK, with an optional alpha channel.

Quick start::

    from chromakit import Color

    c = Color.from_hex("#FF5733")
    c.to_rgb()      # RGB(r=255, g=87, b=51, a=None)
    c.to_hsl()      # HSL(h=10.58..., s=100.0, l=60.0, a=None)
    c.to_dict()     # every representation, JSON-ready
"""

from __future__ import annotations

__version__ = "1.0.0"

from chromakit.color import Color, ColorValue
from chromakit.convert import (
    hue_to_channel,
    is_cmyk_color,
    is_color,
    is_decimal_color,
    is_hex_color,
    is_hsl_color,
    is_rgb_color,
    mix_byte,
)
from chromakit.errors import (
    ColorError,
    HexSyntaxError,
    InvalidTypeError,
    OutOfRangeError,
)
from chromakit.schema import CMYK, HSL, RGB, Channel, RgbByte

__all__ = [
    # Core API
    "Color",
    "ColorValue",
    # Types (commonly needed)
    "RGB",
    "HSL",
    "CMYK",
    "Channel",
    "RgbByte",
    # Errors
    "ColorError",
    "InvalidTypeError",
    "OutOfRangeError",
    "HexSyntaxError",
    # Helpers
    "hue_to_channel",
    "mix_byte",
    # Predicates
    "is_color",
    "is_decimal_color",
    "is_hex_color",
    "is_rgb_color",
    "is_hsl_color",
    "is_cmyk_color",
    # Version
    "__version__",
]
