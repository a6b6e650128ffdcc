# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
The Color value type.

A Color stores exactly two things:
- packed: an unsigned 32-bit integer, layout AA RR GG BB
- has_alpha: whether the alpha byte means anything

The flag is needed because a zero top byte is ambiguous: it is either
"no alpha channel" or "alpha channel, fully transparent". Whenever
``has_alpha`` is False the top byte is zero.

Every ``from_*`` constructor funnels into ``from_decimal``. Every ``to_*``
accessor derives its result from the packed integer on demand.

Usage::

    from chromakit import Color, Channel

    c = Color.from_hex("#FF5733")
    c.to_rgb()                      # RGB(r=255, g=87, b=51, a=None)
    c.to_decimal([Channel.BLUE, Channel.GREEN, Channel.RED])  # 0x3357FF
    c.lighten(10).to_hex()          # mutates c and returns it
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Sequence, Union

from chromakit.convert.colorspace import (
    cmyk_to_rgb,
    hsl_to_rgb,
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
    is_decimal_color,
    is_hex_color,
    is_hsl_color,
    is_integral,
    is_real,
    is_rgb_color,
    record_fields,
)
from chromakit.errors import HexSyntaxError, InvalidTypeError, OutOfRangeError
from chromakit.schema.color_types import CMYK, HEX_PATTERN, HSL, MAX_DECIMAL, RGB, Channel

logger = logging.getLogger(__name__)


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_LIGHTEN_AMOUNT = 20
DEFAULT_DARKEN_AMOUNT = 20
DEFAULT_MIX_AMOUNT = 50
LIGHTNESS_THRESHOLD = 50

HEX_DIGITS = (3, 4, 6, 8)
_CHANNEL_VALUES = frozenset(tag.value for tag in Channel)


# =============================================================================
# Validation Helpers
# =============================================================================


def _round1(value: float) -> float:
    """Round to one decimal place, ties up, on the exact value of the float."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _check_alpha(a: Any, name: str) -> None:
    if not is_real(a):
        raise InvalidTypeError(f"`a` property of `{name}` must be a number")
    if not 0 <= a <= 1:
        raise OutOfRangeError(f"`a` property of `{name}` must be between 0 and 1, inclusive")


def _check_amount(amount: Any) -> None:
    if not is_real(amount):
        raise InvalidTypeError("`amount` must be a number")
    if not 0 <= amount <= 100:
        raise OutOfRangeError("`amount` must be between 0 and 100, inclusive")


def _check_byte_order(byte_order: Any) -> list[Channel]:
    if not isinstance(byte_order, (list, tuple)):
        raise InvalidTypeError("`byte_order` must be a list of Channel values")
    if not 3 <= len(byte_order) <= 4:
        raise OutOfRangeError("`byte_order` must have 3 or 4 elements")

    for tag in byte_order:
        if not is_integral(tag) or int(tag) not in _CHANNEL_VALUES:
            raise InvalidTypeError("`byte_order` must contain only Channel values")

    order = [Channel(int(tag)) for tag in byte_order]
    if len(set(order)) != len(order):
        raise OutOfRangeError("`byte_order` must not contain duplicate Channel values")
    return order


# =============================================================================
# Color
# =============================================================================


class Color:
    """
    A mutable color value with an optional alpha channel.

    Build instances through the ``from_*`` class methods. ``lighten``,
    ``darken`` and ``mix`` modify the instance in place and return it, so
    calls can be chained. Use ``clone`` to branch off a copy first.
    """

    __slots__ = ("_packed", "_has_alpha")

    def __init__(self, decimal: int, has_alpha: bool = False) -> None:
        if not is_integral(decimal):
            raise InvalidTypeError("`decimal` must be an integer")
        if not 0 <= decimal <= MAX_DECIMAL:
            raise OutOfRangeError(
                "`decimal` must be between 0 and 4294967295 (0xFFFFFFFF), inclusive"
            )
        decimal = int(decimal)
        self._packed = decimal
        self._has_alpha = bool(has_alpha) or (decimal & 0xFF000000) != 0

    def _update(self, other: Color) -> None:
        self._packed, self._has_alpha = other._packed, other._has_alpha

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_decimal(cls, decimal: int, has_alpha: bool = False) -> Color:
        """
        Build from a packed integer (AA RR GG BB).

        A non-zero top byte turns alpha on even if ``has_alpha`` is False.
        Pass ``has_alpha=True`` to keep a zero top byte as "fully transparent".

        Raises:
            InvalidTypeError: ``decimal`` is not an integer
            OutOfRangeError: ``decimal`` is outside [0, 0xFFFFFFFF]
        """
        return cls(decimal, has_alpha)

    @classmethod
    def from_hex(cls, hex: str) -> Color:
        """
        Build from ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``.

        Short forms repeat each digit (``F`` → ``FF``). In the 8-digit form
        the alpha pair is trailing.

        Raises:
            InvalidTypeError: ``hex`` is not a string
            HexSyntaxError: ``hex`` does not match the grammar
        """
        if not isinstance(hex, str):
            raise InvalidTypeError("`hex` must be a string")
        if not HEX_PATTERN.fullmatch(hex):
            raise HexSyntaxError(
                "`hex` must be a valid hexadecimal color code (e.g. `#FFFFFF`)"
            )

        digits = hex[1:]

        if len(digits) in (3, 4):
            r, g, b, *rest = (int(d * 2, 16) for d in digits)
            a = rest[0] / 255 if rest else None
            return cls.from_rgb(RGB(r=r, g=g, b=b, a=a))
        if len(digits) == 6:
            return cls.from_decimal(int(digits, 16))
        # RRGGBBAA → AARRGGBB
        return cls.from_decimal(int(digits[6:] + digits[:6], 16), True)

    @classmethod
    def from_rgb(cls, rgb: Union[RGB, Mapping[str, Any]]) -> Color:
        """
        Build from red/green/blue bytes and an optional 0-1 opacity.

        Accepts an ``RGB`` record or a mapping with ``r``, ``g``, ``b``
        and optionally ``a``.
        """
        fields = record_fields(rgb, RGB, ("r", "g", "b", "a"))
        if fields is None:
            raise InvalidTypeError("`rgb` must be an RGB object")
        r, g, b, a = fields

        if not all(is_integral(c) for c in (r, g, b)):
            raise InvalidTypeError(
                "`rgb` must have `r`, `g`, and `b` properties that are integers"
            )
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise OutOfRangeError(
                "`rgb` must have `r`, `g`, and `b` properties that are between 0 and 255, inclusive"
            )

        channels = [int(r), int(g), int(b)]
        if a is not None:
            _check_alpha(a, "rgb")
            channels.insert(0, int(round_half_up(a * 255)))

        return cls.from_decimal(int(pack_channels(channels)), a is not None)

    @classmethod
    def from_hsl(cls, hsl: Union[HSL, Mapping[str, Any]]) -> Color:
        """
        Build from hue (degrees), saturation and lightness (percentages).

        Hue 360 is the same as hue 0. Components need not be integers.
        """
        fields = record_fields(hsl, HSL, ("h", "s", "l", "a"))
        if fields is None:
            raise InvalidTypeError("`hsl` must be an HSL object")
        h, s, l, a = fields  # noqa: E741

        if not all(is_real(c) for c in (h, s, l)):
            raise InvalidTypeError(
                "`hsl` must have `h`, `s`, and `l` properties that are numbers"
            )
        if not 0 <= h <= 360:
            raise OutOfRangeError("`h` property of `hsl` must be between 0 and 360, inclusive")
        if not (0 <= s <= 100 and 0 <= l <= 100):
            raise OutOfRangeError(
                "`s` and `l` properties of `hsl` must be between 0 and 100, inclusive"
            )
        if a is not None:
            _check_alpha(a, "hsl")

        r, g, b = (int(c) for c in hsl_to_rgb([h, s, l]))
        return cls.from_rgb(RGB(r=r, g=g, b=b, a=a))

    @classmethod
    def from_cmyk(cls, cmyk: Union[CMYK, Mapping[str, Any]]) -> Color:
        """Build from cyan/magenta/yellow/black percentages. Never has alpha."""
        fields = record_fields(cmyk, CMYK, ("c", "m", "y", "k"))
        if fields is None:
            raise InvalidTypeError("`cmyk` must be a CMYK object")

        if not all(is_real(c) for c in fields):
            raise InvalidTypeError(
                "`cmyk` must have `c`, `m`, `y`, and `k` properties that are numbers"
            )
        if not all(0 <= c <= 100 for c in fields):
            raise OutOfRangeError(
                "`c`, `m`, `y`, and `k` properties of `cmyk` must be between 0 and 100, inclusive"
            )

        r, g, b = (int(c) for c in cmyk_to_rgb(list(fields)))
        return cls.from_rgb(RGB(r=r, g=g, b=b))

    @classmethod
    def from_any(cls, value: Any) -> Color:
        """
        Build from whichever representation ``value`` looks like.

        Tried in order: Color (cloned), decimal, hex, RGB, HSL, CMYK.
        HSL and CMYK are only recognised with integer components; call
        ``from_hsl``/``from_cmyk`` directly for fractional values.
        """
        if isinstance(value, Color):
            return value.clone()
        for predicate, factory in (
            (is_decimal_color, cls.from_decimal),
            (is_hex_color, cls.from_hex),
            (is_rgb_color, cls.from_rgb),
            (is_hsl_color, cls.from_hsl),
            (is_cmyk_color, cls.from_cmyk),
        ):
            if predicate(value):
                logger.debug("[from_any] %r matched %s", value, predicate.__name__)
                return factory(value)
        raise InvalidTypeError(
            "`value` must be a decimal, hexadecimal, RGB, HSL, or CMYK color"
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Color:
        """
        Deserialize from a ``to_dict()`` payload.

        ``decimal`` carries the bytes; an ``a`` key under ``rgb`` marks the
        alpha channel as present, which a zero top byte alone cannot.
        """
        if not isinstance(data, Mapping):
            raise InvalidTypeError("`data` must be a mapping")
        if "decimal" not in data:
            raise InvalidTypeError("`data` must contain a `decimal` key")
        rgb = data.get("rgb")
        if rgb is None:
            rgb = {}
        elif not isinstance(rgb, Mapping):
            raise InvalidTypeError("`data.rgb` must be a mapping")
        return cls.from_decimal(data["decimal"], "a" in rgb)

    @classmethod
    def from_json(cls, json_str: str) -> Color:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def to_decimal(self, byte_order: Optional[Sequence[Channel]] = None) -> int:
        """
        Packed integer, optionally with bytes re-ordered.

        Args:
            byte_order: 3 or 4 distinct ``Channel`` tags, most significant
                first. Alpha reads as 0 when there is no alpha channel.

        Example:
            >>> Color.from_hex("#FF5733").to_decimal([Channel.BLUE, Channel.GREEN, Channel.RED])
            3364863
        """
        if byte_order is None:
            return self._packed
        order = _check_byte_order(byte_order)
        return int(reorder_channels(self._packed, order))

    def to_hex(self, digits: Optional[int] = None) -> str:
        """
        Uppercase ``#`` hex string of the packed value.

        The 8-digit form is the packed layout, alpha first (``#AARRGGBB``).
        ``from_hex`` reads 8 digits alpha last, so the two are not inverses
        when alpha is present.

        Args:
            digits: 3, 4, 6 or 8. Defaults to 8 with alpha, 6 without.
                The short forms keep the first digit of each byte pair,
                so they are lossy (``#FF5733`` → ``#F53``).
        """
        if digits is not None:
            if not is_real(digits):
                raise InvalidTypeError("`digits` must be a number")
            if digits not in HEX_DIGITS:
                raise OutOfRangeError("`digits` must be 3, 4, 6, or 8")

        width = int(digits) if digits is not None else (8 if self._has_alpha else 6)

        n = self._packed
        if width in (3, 6):
            n &= 0x00FFFFFF
        full = f"{n:0{8 if width in (4, 8) else 6}X}"

        if width in (3, 4):
            full = full[::2]
        return f"#{full}"

    def to_rgb(self) -> RGB:
        """
        RGB bytes plus opacity.

        ``a`` is None when the color has no alpha channel, 0.0 when it is
        fully transparent, and ``alpha_byte / 255`` otherwise.
        """
        alpha, r, g, b = (int(c) for c in unpack_channels(self._packed))
        if self._packed > 0xFFFFFF:
            a: Optional[float] = alpha / 255
        elif self._has_alpha:
            a = 0.0
        else:
            a = None
        return RGB(r=r, g=g, b=b, a=a)

    def to_hsl(self) -> HSL:
        """HSL with hue in degrees and s/l as percentages rounded to 0.1."""
        rgb = self.to_rgb()
        a = rgb.a
        if self._has_alpha and a is None:
            a = 0.0

        h, s, l = (float(c) for c in rgb_to_hsl([rgb.r, rgb.g, rgb.b]))  # noqa: E741
        return HSL(h=h, s=_round1(s), l=_round1(l), a=a)

    def to_cmyk(self) -> CMYK:
        """CMYK percentages rounded to 0.1. Alpha is dropped."""
        rgb = self.to_rgb()
        c, m, y, k = (_round1(float(v)) for v in rgb_to_cmyk([rgb.r, rgb.g, rgb.b]))
        return CMYK(c=c, m=m, y=y, k=k)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def lighten(self, amount: float = DEFAULT_LIGHTEN_AMOUNT) -> Color:
        """Raise HSL lightness by ``amount`` points (capped at 100), in place."""
        _check_amount(amount)
        before = self._packed
        hsl = self.to_hsl()
        self._update(Color.from_hsl(replace(hsl, l=min(hsl.l + amount, 100))))
        logger.debug("[lighten] %08X +%s -> %08X", before, amount, self._packed)
        return self

    def darken(self, amount: float = DEFAULT_DARKEN_AMOUNT) -> Color:
        """Lower HSL lightness by ``amount`` points (floored at 0), in place."""
        _check_amount(amount)
        before = self._packed
        hsl = self.to_hsl()
        self._update(Color.from_hsl(replace(hsl, l=max(hsl.l - amount, 0))))
        logger.debug("[darken] %08X -%s -> %08X", before, amount, self._packed)
        return self

    def mix(self, other: Color, amount: float = DEFAULT_MIX_AMOUNT) -> Color:
        """
        Blend toward ``other`` by ``amount`` percent, in place.

        amount 0 keeps this color, 100 takes ``other``'s channels. If either
        side has alpha, the result has alpha; a side without alpha counts
        as fully opaque.
        """
        if not isinstance(other, Color):
            raise InvalidTypeError("`other` must be an instance of Color")
        _check_amount(amount)

        ratio = amount / 100
        mine, theirs = self.to_rgb(), other.to_rgb()

        r, g, b = (int(c) for c in mix_byte(
            [mine.r, mine.g, mine.b], [theirs.r, theirs.g, theirs.b], ratio,
        ))

        a: Optional[float] = None
        if self._has_alpha or other._has_alpha:
            a = int(mix_byte(
                mine.a * 255 if self._has_alpha else 255,
                theirs.a * 255 if other._has_alpha else 255,
                ratio,
            )) / 255

        before = self._packed
        self._update(Color.from_rgb(RGB(r=r, g=g, b=b, a=a)))
        logger.debug("[mix] %08X + %08X @%s%% -> %08X", before, other._packed, amount, self._packed)
        return self

    def clone(self) -> Color:
        """Independent copy with the same packed value and alpha flag."""
        return Color(self._packed, self._has_alpha)

    __copy__ = clone

    def __deepcopy__(self, memo: dict) -> Color:
        return self.clone()

    # -------------------------------------------------------------------------
    # Derived properties
    # -------------------------------------------------------------------------

    @property
    def has_alpha_channel(self) -> bool:
        return self._has_alpha

    @property
    def lightness(self) -> float:
        """HSL lightness percentage (0-100)."""
        return self.to_hsl().l

    @property
    def is_light(self) -> bool:
        return self.lightness >= LIGHTNESS_THRESHOLD

    @property
    def is_dark(self) -> bool:
        return not self.is_light

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Every representation at once, JSON-ready."""
        return {
            "decimal": self._packed,
            "hex": self.to_hex(),
            "rgb": self.to_rgb().to_dict(),
            "hsl": self.to_hsl().to_dict(),
            "cmyk": self.to_cmyk().to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __int__(self) -> int:
        return self._packed

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_decimal(0x{self._packed:08X}, has_alpha={self._has_alpha})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self._packed, self._has_alpha) == (other._packed, other._has_alpha)

    __hash__ = None  # mutable


# Alias for the name used in the data model description
ColorValue = Color
