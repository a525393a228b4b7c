# Rationals SDK - Stepping
# Copyright (c) 2024 Rationals Contributors. All rights reserved.

"""
Ranges with rational steps.

Example:
    >>> from rationals import Rational, stride
    >>> [str(r) for r in stride(0, 1, Rational(1, 4))]
    ['0//1', '1//4', '1//2', '3//4']
"""

from __future__ import annotations
from typing import Iterator

from .rational import Rational, RationalLike


def _as_rational(x: RationalLike, name: str) -> Rational:
    if isinstance(x, Rational):
        return x
    if isinstance(x, int):
        return Rational.from_int(x)
    raise TypeError(f"{name} must be a Rational or int, got {type(x).__name__}")


def _walk(
    start: RationalLike,
    end: RationalLike,
    step: RationalLike,
    inclusive: bool,
) -> Iterator[Rational]:
    start_r = _as_rational(start, 'start')
    end_r = _as_rational(end, 'end')
    step_r = _as_rational(step, 'step')

    ascending = step_r > Rational()
    current = start_r
    while True:
        if ascending:
            within = current <= end_r if inclusive else current < end_r
        else:
            within = current >= end_r if inclusive else current > end_r
        if not within:
            return
        yield current
        current = current.advanced(step_r)


def stride(start: RationalLike, end: RationalLike, step: RationalLike) -> Iterator[Rational]:
    """
    Yield start, start + step, ... up to but excluding end.

    Raises:
        ValueError: If step is zero.
    """
    _check_step(step)
    return _walk(start, end, step, inclusive=False)


def stride_through(start: RationalLike, end: RationalLike, step: RationalLike) -> Iterator[Rational]:
    """
    Yield start, start + step, ... up to and including end if it is reached.

    Raises:
        ValueError: If step is zero.
    """
    _check_step(step)
    return _walk(start, end, step, inclusive=True)


def _check_step(step: RationalLike) -> None:
    # Raised at call time, before the generator starts
    if not _as_rational(step, 'step'):
        raise ValueError("stride step must not be zero")
