# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Record types for color representations.

All records are immutable (frozen dataclasses). They are produced by
``Color.to_*`` accessors and accepted by ``Color.from_*`` constructors,
alongside plain mappings with the same keys.
"""

from chromakit.schema.color_types import (
    CMYK,
    HEX_PATTERN,
    HSL,
    MAX_DECIMAL,
    RGB,
    Channel,
)

# Alias matching the "byte order" terminology used by to_decimal()
RgbByte = Channel

__all__ = [
    # Constants
    "HEX_PATTERN",
    "MAX_DECIMAL",
    # Byte-order tags
    "Channel",
    "RgbByte",
    # Representation records
    "RGB",
    "HSL",
    "CMYK",
]
