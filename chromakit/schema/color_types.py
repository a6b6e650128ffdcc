# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Record types for the color representations chromakit renders to.

Coordinate conventions:
- RGB: r, g, b are bytes (0-255), a is an opacity in [0, 1]
- HSL: h in degrees [0, 360], s and l are percentages [0, 100]
- CMYK: c, m, y, k are percentages [0, 100]

``a`` is ``None`` when the color carries no alpha channel at all. That is
not the same as ``a == 0.0``, which is a fully transparent color.

These records are plain values. Range checks live in the ``Color``
constructors, which raise the precise error for each field.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping, Optional


# =============================================================================
# Constants
# =============================================================================

HEX_PATTERN = re.compile(
    r"^#(?:[A-Fa-f0-9]{3}|[A-Fa-f0-9]{4}|[A-Fa-f0-9]{6}|[A-Fa-f0-9]{8})$"
)

MAX_DECIMAL = 0xFFFFFFFF


class Channel(IntEnum):
    """
    Channel tags used to describe a byte order for packed integers.

    The numeric values are stable and may be passed in place of the members.
    """
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


# =============================================================================
# Representation Records
# =============================================================================


def _alpha_dict(d: dict, a: Optional[float]) -> dict:
    if a is not None:
        d["a"] = a
    return d


@dataclass(frozen=True, slots=True)
class RGB:
    """
    A color as red/green/blue bytes with optional opacity.

    Attributes:
        r: Red byte (0-255)
        g: Green byte (0-255)
        b: Blue byte (0-255)
        a: Opacity (0.0-1.0), or None when there is no alpha channel
    """
    r: int
    g: int
    b: int
    a: Optional[float] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary (``a`` omitted when absent)."""
        return _alpha_dict({"r": self.r, "g": self.g, "b": self.b}, self.a)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a"))


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in hue/saturation/lightness form.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation percentage (0-100)
        l: Lightness percentage (0-100)
        a: Opacity (0.0-1.0), or None when there is no alpha channel
    """
    h: float
    s: float
    l: float  # noqa: E741
    a: Optional[float] = None

    def to_dict(self) -> dict:
        """Serialize to dictionary (``a`` omitted when absent)."""
        return _alpha_dict({"h": self.h, "s": self.s, "l": self.l}, self.a)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"], a=data.get("a"))


@dataclass(frozen=True, slots=True)
class CMYK:
    """
    A color in subtractive cyan/magenta/yellow/black form.

    CMYK has no alpha slot; opacity is dropped when rendering to it.
    """
    c: float
    m: float
    y: float
    k: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"c": self.c, "m": self.m, "y": self.y, "k": self.k}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CMYK:
        """Deserialize from dictionary."""
        return cls(c=data["c"], m=data["m"], y=data["y"], k=data["k"])
