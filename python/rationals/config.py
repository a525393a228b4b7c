# Rationals SDK - Configuration
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""Configuration settings for Rational arithmetic."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class OverflowPolicy(Enum):
    """
    What happens when a numerator or denominator leaves the integer range.

    CHECKED raises RationalOverflowError. UNBOUNDED lets Python integers
    grow without limit.
    """
    CHECKED = "checked"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Config:
    """
    Integer-width configuration for Rational values.

    Attributes:
        int_bits: Width of the signed integers holding numerator and
                  denominator. Ignored under OverflowPolicy.UNBOUNDED.
        overflow: Overflow policy (enum or its string value).
        max_float_digits: Maximum number of decimal scaling steps used when
                          converting a float. Floats needing more digits
                          are rejected.
    """
    int_bits: int = 64
    overflow: OverflowPolicy = OverflowPolicy.CHECKED
    max_float_digits: int = 18

    def __post_init__(self):
        # Accept the policy by its string value
        if isinstance(self.overflow, str):
            object.__setattr__(self, 'overflow', OverflowPolicy(self.overflow))
        if self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")
        if self.max_float_digits < 0:
            raise ValueError(
                f"max_float_digits must be non-negative, got {self.max_float_digits}"
            )

    @classmethod
    def int64(cls) -> Config:
        """64-bit checked arithmetic (default)."""
        return cls()

    @classmethod
    def int32(cls) -> Config:
        """32-bit checked arithmetic."""
        return cls(int_bits=32, max_float_digits=9)

    @classmethod
    def unbounded(cls) -> Config:
        """Arbitrary-precision integers, overflow never raised."""
        return cls(overflow=OverflowPolicy.UNBOUNDED)

    @property
    def min_int(self) -> int:
        """Smallest representable integer."""
        return -(1 << (self.int_bits - 1))

    @property
    def max_int(self) -> int:
        """Largest representable integer."""
        return (1 << (self.int_bits - 1)) - 1

    def fits(self, value: int) -> bool:
        """Check whether value is representable under this configuration."""
        if self.overflow is OverflowPolicy.UNBOUNDED:
            return True
        return self.min_int <= value <= self.max_int

    def __repr__(self) -> str:
        return (
            f"Config(int_bits={self.int_bits}, "
            f"overflow={self.overflow.value!r}, "
            f"max_float_digits={self.max_float_digits})"
        )


DEFAULT_CONFIG = Config()
