# Rationals SDK
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Rationals Python SDK - Exact Rational Arithmetic.

Canonical-form fractions over fixed-width integers: construction reduces to
lowest terms, arithmetic is exact, and overflow is reported instead of
silently wrapping.

Example:
    >>> import rationals as rt
    >>> a = rt.Rational(1, 5)
    >>> b = rt.from_float(0.0248)
    >>> a > b
    True
    >>> print(a + b)
    281//1250

Key Features:
    - Unique canonical representation (hashable, usable as dict keys)
    - Checked 64-bit arithmetic by default, configurable width
    - Parsing of '<int>/<int>' text and exact float conversion
    - Rational-valued ranges via stride()
"""

__version__ = "0.1.0"

# Core value type and factories
from .rational import (
    Rational,
    ZERO,
    ONE,
    make_rational,
    from_int,
    from_float,
    parse_rational,
)

# Stepping
from .stride import stride, stride_through

# Configuration
from .config import Config, OverflowPolicy, DEFAULT_CONFIG

# Exceptions
from .exceptions import (
    RationalError,
    ZeroDenominatorError,
    RationalParseError,
    RationalOverflowError,
    FloatConversionError,
)


__all__ = [
    # Version
    '__version__',
    # Core
    'Rational',
    'ZERO',
    'ONE',
    'make_rational',
    'from_int',
    'from_float',
    'parse_rational',
    # Stepping
    'stride',
    'stride_through',
    # Config
    'Config',
    'OverflowPolicy',
    'DEFAULT_CONFIG',
    # Exceptions
    'RationalError',
    'ZeroDenominatorError',
    'RationalParseError',
    'RationalOverflowError',
    'FloatConversionError',
]
