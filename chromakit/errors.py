# Copyright (c) 2026 Chromakit
# SPDX-License-Identifier: MIT

"""
Exception types raised by chromakit.

Every validation site raises one of the three concrete kinds below.
They subclass the matching builtin, so ``except ValueError`` and
``except TypeError`` keep working for callers that don't care about
chromakit specifics.
"""

from __future__ import annotations


class ColorError(Exception):
    """Base class for all chromakit errors."""


class InvalidTypeError(ColorError, TypeError):
    """Argument has the wrong shape or type."""


class OutOfRangeError(ColorError, ValueError):
    """Argument has the right type but an out-of-bounds value."""


class HexSyntaxError(ColorError, ValueError):
    """String does not follow the ``#RGB[A]`` / ``#RRGGBB[AA]`` grammar."""
