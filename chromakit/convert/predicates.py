# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Non-raising checks for color-shaped values.

Each predicate answers "would this value describe a valid color?" without
constructing one. HSL and CMYK predicates are stricter than the ``Color``
constructors: they only accept integer components.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from typing import Any, Optional

from chromakit.schema.color_types import CMYK, HEX_PATTERN, HSL, MAX_DECIMAL, RGB


def is_integral(value: Any) -> bool:
    """True for whole numbers (``5``, ``5.0``); False for bools, NaN and inf."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


def is_real(value: Any) -> bool:
    """True for any real number except bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def record_fields(value: Any, record_type: type, keys: tuple[str, ...]) -> Optional[tuple]:
    """
    Read ``keys`` from a record instance or a mapping.

    Missing mapping keys read as None. Returns None if ``value`` is
    neither a ``record_type`` nor a mapping.
    """
    if isinstance(value, record_type):
        return tuple(getattr(value, key) for key in keys)
    if isinstance(value, Mapping):
        return tuple(value.get(key) for key in keys)
    return None


def _in_range(value: Any, lo: float, hi: float) -> bool:
    return lo <= value <= hi


def _valid_alpha(a: Any) -> bool:
    return a is None or (is_real(a) and not math.isnan(a) and 0 <= a <= 1)


def is_decimal_color(value: Any) -> bool:
    """True for integers in [0, 0xFFFFFFFF]."""
    return is_integral(value) and 0 <= value <= MAX_DECIMAL


def is_hex_color(value: Any) -> bool:
    """True for ``#`` followed by 3, 4, 6, or 8 hex digits."""
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value) is not None


def is_rgb_color(value: Any) -> bool:
    fields = record_fields(value, RGB, ("r", "g", "b", "a"))
    if fields is None:
        return False
    *rgb, a = fields
    return (
        all(is_integral(c) and _in_range(c, 0, 255) for c in rgb)
        and _valid_alpha(a)
    )


def is_hsl_color(value: Any) -> bool:
    fields = record_fields(value, HSL, ("h", "s", "l", "a"))
    if fields is None:
        return False
    h, s, l, a = fields  # noqa: E741
    return (
        is_integral(h) and _in_range(h, 0, 360)
        and all(is_integral(c) and _in_range(c, 0, 100) for c in (s, l))
        and _valid_alpha(a)
    )


def is_cmyk_color(value: Any) -> bool:
    fields = record_fields(value, CMYK, ("c", "m", "y", "k"))
    if fields is None:
        return False
    return all(is_integral(c) and _in_range(c, 0, 100) for c in fields)


def is_color(value: Any) -> bool:
    """True if any of the decimal/hex/RGB/HSL/CMYK predicates accepts ``value``."""
    return (
        is_decimal_color(value)
        or is_hex_color(value)
        or is_rgb_color(value)
        or is_hsl_color(value)
        or is_cmyk_color(value)
    )
