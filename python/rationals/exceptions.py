# Rationals SDK - Exceptions
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""Exception hierarchy for Rationals."""

from __future__ import annotations
from typing import Optional


class RationalError(Exception):
    """Base class for all Rationals exceptions."""
    pass


class ZeroDenominatorError(RationalError, ZeroDivisionError):
    """Raised when a value would be built with a zero denominator."""

    def __init__(self, message: str = "Rationals may not have a zero denominator"):
        super().__init__(message)


class RationalParseError(RationalError, ValueError):
    """Raised when text is not of the form '<int>/<int>'."""

    def __init__(self, text: str, reason: Optional[str] = None):
        message = f"Invalid rational literal: {text!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.text = text
        self.reason = reason


class RationalOverflowError(RationalError, OverflowError):
    """Raised when an integer does not fit the configured width."""

    def __init__(self, value: int, bits: int):
        super().__init__(f"Integer {value} does not fit in {bits}-bit signed range")
        self.value = value
        self.bits = bits


class FloatConversionError(RationalError, ValueError):
    """Raised when a float has no exact rational form within the configured bounds."""

    def __init__(self, value: float, reason: str):
        super().__init__(f"Cannot convert {value!r} to Rational: {reason}")
        self.value = value
        self.reason = reason
