# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion paths (all through RGB bytes):
    packed uint32 ↔ (A, R, G, B) bytes
    HSL → RGB, RGB → HSL
    CMYK → RGB, RGB → CMYK

Every function accepts a scalar or an array of any leading shape, so the
same code converts a single color or a whole batch. ``Color`` calls these
with one color at a time.

Rounding is round-half-up (``floor(x + 0.5)``) everywhere a byte is
produced. NumPy's ``round`` rounds half to even, which would turn 127.5
into 128 but 126.5 into 126.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from chromakit.schema.color_types import Channel


# Position of each channel tag inside an (A, R, G, B) byte array
_ARGB_INDEX = {
    Channel.ALPHA: 0,
    Channel.RED: 1,
    Channel.GREEN: 2,
    Channel.BLUE: 3,
}


# =============================================================================
# Scalar helpers (vectorised)
# =============================================================================


def round_half_up(x: ArrayLike) -> NDArray[np.int64]:
    """Round to the nearest integer, ties going up (127.5 → 128)."""
    return np.floor(np.asarray(x, dtype=np.float64) + 0.5).astype(np.int64)


def hue_to_channel(p: ArrayLike, q: ArrayLike, t: ArrayLike) -> NDArray[np.float64]:
    """
    Channel intensity [0,1] for a hue fraction, given the HSL p/q terms.

    ``t`` is wrapped into [0, 1) first, then the standard piecewise curve
    is applied:
    - t < 1/6: rising edge  p + (q - p) * 6t
    - t < 1/2: plateau      q
    - t < 2/3: falling edge p + (q - p) * (2/3 - t) * 6
    - else:                 p
    """
    p = np.asarray(p, dtype=np.float64)
    q = np.asarray(q, dtype=np.float64)
    t = np.mod(np.asarray(t, dtype=np.float64), 1.0)

    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def mix_byte(a: ArrayLike, b: ArrayLike, ratio: ArrayLike) -> NDArray[np.int64]:
    """
    Blend two byte values: ``round(a + (b - a) * ratio)``.

    ratio 0 returns ``a``, ratio 1 returns ``b``.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return round_half_up(a + (b - a) * np.asarray(ratio, dtype=np.float64))


# =============================================================================
# Packed integer ↔ channel bytes
# =============================================================================


def unpack_channels(packed: ArrayLike) -> NDArray[np.uint8]:
    """
    Split packed integers into bytes.

    Args:
        packed: Integer(s) in [0, 0xFFFFFFFF], layout AA RR GG BB

    Returns:
        Array of shape (..., 4) with (A, R, G, B) bytes
    """
    packed = np.asarray(packed, dtype=np.int64)
    shifts = np.array([24, 16, 8, 0], dtype=np.int64)
    return ((packed[..., np.newaxis] >> shifts) & 0xFF).astype(np.uint8)


def pack_channels(channels: ArrayLike) -> NDArray[np.uint32]:
    """
    Combine bytes into unsigned integers, most significant byte first.

    Args:
        channels: Array of shape (..., 3) or (..., 4) with byte values

    Returns:
        Array of shape (...) with uint32 values. Three bytes fill the low
        24 bits; four bytes fill all 32.
    """
    channels = np.asarray(channels, dtype=np.int64)
    n = channels.shape[-1]
    if n not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels, got {n}")
    shifts = np.arange(n - 1, -1, -1, dtype=np.int64) * 8
    packed = np.bitwise_or.reduce((channels & 0xFF) << shifts, axis=-1)
    return packed.astype(np.uint32)


def reorder_channels(packed: ArrayLike, order: Sequence[Channel]) -> NDArray[np.uint32]:
    """
    Re-pack integers with their bytes in a caller-chosen order.

    The alpha byte is whatever sits in the top byte (0 when there is none).

    Example:
        >>> int(reorder_channels(0xFF5733, [Channel.BLUE, Channel.GREEN, Channel.RED]))
        3364863
    """
    argb = unpack_channels(packed)
    index = [_ARGB_INDEX[Channel(tag)] for tag in order]
    return pack_channels(argb[..., index])


# =============================================================================
# HSL ↔ RGB
# =============================================================================


def hsl_to_rgb(hsl: ArrayLike) -> NDArray[np.int64]:
    """
    Convert HSL to RGB bytes.

    Args:
        hsl: Array of shape (..., 3) with h in degrees [0, 360] and
             s, l as percentages [0, 100]

    Returns:
        Array of shape (..., 3) with rounded R, G, B bytes
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    # 360° and 0° are the same hue
    h = np.mod(np.mod(hsl[..., 0], 360.0) + 360.0, 360.0) / 360.0
    s = hsl[..., 1] / 100.0
    l = hsl[..., 2] / 100.0  # noqa: E741

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    rgb = np.stack([
        hue_to_channel(p, q, h + 1 / 3),
        hue_to_channel(p, q, h),
        hue_to_channel(p, q, h - 1 / 3),
    ], axis=-1)

    # Achromatic: no hue influence
    rgb = np.where(np.expand_dims(s == 0, -1), np.expand_dims(l, -1), rgb)

    return round_half_up(rgb * 255)


def rgb_to_hsl(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB bytes to HSL.

    Args:
        rgb: Array of shape (..., 3) with R, G, B bytes [0, 255]

    Returns:
        Array of shape (..., 3) with h in degrees [0, 360) and s, l as
        unrounded percentages [0, 100]
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    mx = np.max(rgb, axis=-1)
    mn = np.min(rgb, axis=-1)
    d = mx - mn
    l = (mx + mn) / 2  # noqa: E741

    achromatic = d == 0
    safe_d = np.where(achromatic, 1.0, d)

    h = np.select(
        [achromatic, mx == r, mx == g],
        [0.0, np.fmod((g - b) / safe_d, 6), (b - r) / safe_d + 2],
        default=(r - g) / safe_d + 4,
    ) * 60
    h = np.where(h < 0, h + 360, h)

    denom = 1 - np.abs(2 * l - 1)
    s = np.where(achromatic, 0.0, d / np.where(achromatic, 1.0, denom))

    return np.stack([h, s * 100, l * 100], axis=-1)


# =============================================================================
# CMYK ↔ RGB
# =============================================================================


def cmyk_to_rgb(cmyk: ArrayLike) -> NDArray[np.int64]:
    """
    Convert CMYK percentages to RGB bytes.

    k = 100 forces black regardless of c, m, y.

    Args:
        cmyk: Array of shape (..., 4) with c, m, y, k in [0, 100]

    Returns:
        Array of shape (..., 3) with rounded R, G, B bytes
    """
    cmyk = np.asarray(cmyk, dtype=np.float64) / 100.0
    cmy = cmyk[..., :3]
    k = cmyk[..., 3:]
    return round_half_up(255 * (1 - cmy) * (1 - k))


def rgb_to_cmyk(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert RGB bytes to CMYK.

    Args:
        rgb: Array of shape (..., 3) with R, G, B bytes [0, 255]

    Returns:
        Array of shape (..., 4) with unrounded c, m, y, k percentages
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    k = 1 - np.max(rgb, axis=-1, keepdims=True)

    black = k == 1
    # Pure black: c = m = y = 0 (avoid 0/0)
    cmy = np.where(black, 0.0, (1 - rgb - k) / np.where(black, 1.0, 1 - k))

    return np.concatenate([cmy, k], axis=-1) * 100
