# Rationals SDK - Integer Helpers
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Fixed-width integer helpers used by the Rational type.

Python integers never overflow, so the configured width is enforced here:
every product and sum that feeds a numerator or denominator goes through
``checked`` before it is used.
"""

from __future__ import annotations
import logging

from .config import Config
from .exceptions import RationalOverflowError


logger = logging.getLogger(__name__)


def gcd(x: int, y: int) -> int:
    """
    Euclidean greatest common divisor.

    gcd(x, 0) = x; gcd(x, y) = gcd(y, x mod y). Callers pass magnitudes,
    so the result is non-negative.
    """
    while y != 0:
        x, y = y, x % y
    return x


def sign(x: int) -> int:
    """Return -1, 0 or 1."""
    return (x > 0) - (x < 0)


def checked(value: int, config: Config) -> int:
    """
    Return value unchanged if it fits the configured width.

    Raises:
        RationalOverflowError: If value is outside [min_int, max_int].
    """
    if not config.fits(value):
        logger.debug("integer %d overflows %d-bit range", value, config.int_bits)
        raise RationalOverflowError(value, config.int_bits)
    return value


def checked_mul(a: int, b: int, config: Config) -> int:
    """Multiply, raising on overflow."""
    return checked(a * b, config)


def checked_add(a: int, b: int, config: Config) -> int:
    """Add, raising on overflow."""
    return checked(a + b, config)
