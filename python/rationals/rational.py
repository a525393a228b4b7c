# Rationals SDK - Rational Value Type
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Exact rational numbers over fixed-width integers.

Every Rational is kept in canonical form: lowest terms, positive
denominator, sign carried by the numerator, zero stored as 0/1. All
arithmetic goes through the same canonicalizing constructor, so results
never need a separate normalization step.

Example:
    >>> from rationals import Rational
    >>> Rational(-10, -20) * Rational(4, 5)
    Rational(2, 5)
    >>> str(Rational.parse("9/8"))
    '9//8'
    >>> Rational.from_float(0.0248)
    Rational(31, 1250)
"""

from __future__ import annotations
from fractions import Fraction
from functools import total_ordering
from typing import Any, Optional, Union
import logging
import math
import numbers
import operator
import re

from .config import Config, DEFAULT_CONFIG
from .exceptions import (
    FloatConversionError,
    RationalParseError,
    ZeroDenominatorError,
)
from .intmath import gcd, sign, checked, checked_add, checked_mul


logger = logging.getLogger(__name__)

# Things that combine with a Rational in arithmetic
RationalLike = Union['Rational', int]

# Text separators: input uses one slash, display uses two
PARSE_SEPARATOR = '/'
DISPLAY_SEPARATOR = '//'

_INT_LITERAL = re.compile(r'[+-]?[0-9]+')


def _canonicalize(numerator: Any, denominator: Any, config: Config) -> tuple[int, int, int]:
    """Reduce a pair to lowest terms with a positive denominator."""
    try:
        n = operator.index(numerator)
        d = operator.index(denominator)
    except TypeError:
        raise TypeError(
            "Rational numerator and denominator must be integers, got "
            f"{type(numerator).__name__} and {type(denominator).__name__}"
        ) from None

    if d == 0:
        raise ZeroDenominatorError()
    checked(n, config)
    checked(d, config)

    g = gcd(abs(n), abs(d))
    s = sign(d)
    return checked(n * s // g, config), checked(abs(d) // g, config), s * g


def _split_fields(text: str, max_splits: int = 2) -> list[str]:
    """
    Split on PARSE_SEPARATOR, dropping empty pieces.

    Only non-empty pieces use up a split; whatever follows the last split
    is kept whole, so '1//2' gives ['1', '2'] and '1/2/3' gives three pieces.
    """
    pieces = []
    start = 0
    i = 0
    while i < len(text) and len(pieces) < max_splits:
        if text[i] == PARSE_SEPARATOR:
            if i > start:
                pieces.append(text[start:i])
            start = i + 1
        i += 1
    if start < len(text):
        pieces.append(text[start:])
    return pieces


@total_ordering
class Rational:
    """
    An exact fraction numerator/denominator.

    Rationals are immutable and hashable. Equality and hashing use the
    canonical (numerator, denominator) pair only.

    Attributes:
        numerator: Signed numerator, carries the sign of the value.
        denominator: Always strictly positive.
        divisor: Signed GCD that reduced the constructor arguments.
        config: Integer-width configuration inherited by arithmetic results.
    """
    __slots__ = ('_num', '_den', '_divisor', '_config')

    def __init__(
        self,
        numerator: Optional[int] = None,
        denominator: Optional[int] = None,
        config: Optional[Config] = None,
    ):
        """
        Create a canonical rational.

        Rational() is zero, Rational(n) is n/1, Rational(n, d) is n/d reduced.

        Raises:
            ZeroDenominatorError: If denominator is 0.
            RationalOverflowError: If a component does not fit the configured width.
            TypeError: If an argument is not an integer.
        """
        cfg = config if config is not None else DEFAULT_CONFIG
        if numerator is None:
            if denominator is not None:
                raise TypeError("Rational() got a denominator without a numerator")
            num, den, divisor = 0, 1, 1
        else:
            num, den, divisor = _canonicalize(
                numerator, 1 if denominator is None else denominator, cfg
            )

        # Bypass the immutability guard
        object.__setattr__(self, '_num', num)
        object.__setattr__(self, '_den', den)
        object.__setattr__(self, '_divisor', divisor)
        object.__setattr__(self, '_config', cfg)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def make(cls, numerator: int, denominator: int, config: Optional[Config] = None) -> Rational:
        """The canonicalizing constructor, spelled out."""
        return cls(numerator, denominator, config)

    @classmethod
    def from_int(cls, value: int, config: Optional[Config] = None) -> Rational:
        """Embed an int as value/1."""
        if not isinstance(value, int):
            raise TypeError(f"from_int() expects an int, got {type(value).__name__}")
        return cls(value, 1, config)

    @classmethod
    def exactly(cls, source: Any, config: Optional[Config] = None) -> Rational:
        """
        Embed any integral value (anything with __index__) as source/1.

        Raises:
            RationalOverflowError: If source does not fit the configured width.
            TypeError: If source is not integral.
        """
        cfg = config if config is not None else DEFAULT_CONFIG
        value = operator.index(source)
        return cls(checked(value, cfg), 1, cfg)

    @classmethod
    def from_float(cls, value: float, config: Optional[Config] = None) -> Rational:
        """
        Convert a float through its shortest decimal representation.

        The float is scaled by powers of ten until it is integral, so 0.1
        becomes 1/10 rather than its binary expansion. The number of scaling
        steps is capped by config.max_float_digits.

        Raises:
            FloatConversionError: For NaN, infinities, floats needing too many
                decimal digits, or results outside the integer width.
            TypeError: If value is not a real number, or is a Fraction
                (use from_fraction).
        """
        if not isinstance(value, numbers.Real) or isinstance(value, Fraction):
            raise TypeError(f"from_float() expects a float, got {type(value).__name__}")
        cfg = config if config is not None else DEFAULT_CONFIG
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise FloatConversionError(value, "not a finite number")

        # repr() gives the shortest string that round-trips, e.g. 0.1 -> '0.1'
        s = repr(value)
        negative = s.startswith('-')
        mantissa, _, exp = s.lstrip('-').partition('e')
        int_part, _, frac_part = mantissa.partition('.')
        frac_part = frac_part.rstrip('0')

        digits = int(int_part + frac_part)
        scale = len(frac_part) - (int(exp) if exp else 0)
        logger.debug("from_float(%r): %d decimal scaling steps", value, scale)

        if scale > cfg.max_float_digits:
            raise FloatConversionError(
                value, f"needs {scale} decimal digits, limit is {cfg.max_float_digits}"
            )
        if scale >= 0:
            numerator, denominator = digits, 10 ** scale
        else:
            numerator, denominator = digits * 10 ** -scale, 1
        if negative:
            numerator = -numerator

        if not (cfg.fits(numerator) and cfg.fits(denominator)):
            raise FloatConversionError(value, f"out of {cfg.int_bits}-bit range")
        return cls(numerator, denominator, cfg)

    @classmethod
    def from_fraction(cls, value: Fraction, config: Optional[Config] = None) -> Rational:
        """Convert a fractions.Fraction."""
        return cls(value.numerator, value.denominator, config)

    @classmethod
    def parse(cls, text: str, config: Optional[Config] = None) -> Rational:
        """
        Parse '<int>/<int>'.

        The text is split on '/' at most twice. Empty pieces are dropped and
        do not count as splits, so the display form '9//8' is accepted as
        well as '9/8', and so is '1///2'. Whitespace is not trimmed.

        Raises:
            RationalParseError: If the text does not hold exactly two integers.
            ZeroDenominatorError: If the denominator is 0.
        """
        if not isinstance(text, str):
            raise TypeError(f"parse() expects a str, got {type(text).__name__}")
        cfg = config if config is not None else DEFAULT_CONFIG

        pieces = _split_fields(text)
        if len(pieces) != 2:
            raise RationalParseError(text, f"expected 2 integer fields, found {len(pieces)}")

        values = []
        for piece in pieces:
            if not _INT_LITERAL.fullmatch(piece):
                raise RationalParseError(text, f"{piece!r} is not an integer")
            v = int(piece)
            if not cfg.fits(v):
                raise RationalParseError(text, f"{piece} is out of {cfg.int_bits}-bit range")
            values.append(v)

        return cls(values[0], values[1], cfg)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @property
    def divisor(self) -> int:
        return self._divisor

    @property
    def config(self) -> Config:
        return self._config

    @property
    def magnitude(self) -> Rational:
        """Absolute value."""
        return Rational(abs(self._num), self._den, self._config)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Rational, (self._num, self._den, self._config))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> Rational:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other, 1, self._config)
        return NotImplemented

    def __add__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        cfg = self._config
        num = checked_add(
            checked_mul(self._num, other._den, cfg),
            checked_mul(other._num, self._den, cfg),
            cfg,
        )
        return Rational(num, checked_mul(self._den, other._den, cfg), cfg)

    def __radd__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other + self

    def __sub__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self + -other

    def __rsub__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        cfg = self._config
        return Rational(
            checked_mul(self._num, other._num, cfg),
            checked_mul(self._den, other._den, cfg),
            cfg,
        )

    def __rmul__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self

    def __truediv__(self, other: RationalLike) -> Rational:
        """Divide; dividing by zero raises ZeroDenominatorError."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        cfg = self._config
        return Rational(
            checked_mul(self._num, other._den, cfg),
            checked_mul(self._den, other._num, cfg),
            cfg,
        )

    def __rtruediv__(self, other: RationalLike) -> Rational:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den, self._config)

    def __pos__(self) -> Rational:
        return self

    def __abs__(self) -> Rational:
        return self.magnitude

    def negate(self) -> Rational:
        """Return -self. Rationals are immutable, so rebind: x = x.negate()."""
        return -self

    def inverse(self) -> Rational:
        """
        Reciprocal denominator/numerator.

        Raises:
            ZeroDenominatorError: If self is zero.
        """
        return Rational(self._den, self._num, self._config)

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def advanced(self, by: RationalLike) -> Rational:
        """Return self + by."""
        return self + self._coerce_strict(by)

    def distance_to(self, other: RationalLike) -> Rational:
        """Return other - self."""
        return self._coerce_strict(other) - self

    def _coerce_strict(self, other: Any) -> Rational:
        result = self._coerce(other)
        if result is NotImplemented:
            raise TypeError(f"Cannot convert {type(other).__name__} to Rational")
        return result

    # -------------------------------------------------------------------------
    # Comparison and hashing
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self._num == other._num and self._den == other._den

    def __lt__(self, other: Rational) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        cfg = self._config
        return checked_mul(self._num, other._den, cfg) < checked_mul(self._den, other._num, cfg)

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def __bool__(self) -> bool:
        return self._num != 0

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """numerator / denominator in floating point (may round)."""
        return self._num / self._den

    def __float__(self) -> float:
        return self.to_float()

    def to_fraction(self) -> Fraction:
        """Convert to fractions.Fraction."""
        return Fraction(self._num, self._den)

    def __str__(self) -> str:
        return f"{self._num}{DISPLAY_SEPARATOR}{self._den}"

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"


ZERO = Rational()
ONE = Rational(1)


def make_rational(numerator: int, denominator: int, config: Optional[Config] = None) -> Rational:
    """Create a canonical Rational numerator/denominator."""
    return Rational.make(numerator, denominator, config)


def from_int(value: int, config: Optional[Config] = None) -> Rational:
    """Create value/1."""
    return Rational.from_int(value, config)


def from_float(value: float, config: Optional[Config] = None) -> Rational:
    """Create a Rational from a float's decimal representation."""
    return Rational.from_float(value, config)


def parse_rational(text: str, config: Optional[Config] = None) -> Rational:
    """Parse '<int>/<int>' into a Rational."""
    return Rational.parse(text, config)
