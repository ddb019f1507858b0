# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Approximation of floating point numbers by integer ratios.

A float is converted by searching the smallest multiplier which turns it into
an integer (within `EPSILON`). The search is bounded by a context-local limit;
if it is exhausted, the multiplier giving the smallest residual is used and
the resulting magnitude is rounded according to the default rounding mode.
"""

from __future__ import annotations

import logging
import math
from contextvars import ContextVar, Token
from numbers import Integral
from typing import Tuple

from .rounding import round_magnitude


__all__ = ['EPSILON', 'DEFAULT_SEARCH_LIMIT', 'get_dflt_search_limit',
           'set_dflt_search_limit', 'approximate']


logger = logging.getLogger(__name__)

# max. distance of a float from an integer to be regarded as integral
EPSILON = 1e-7

# upper bound for the denominator searched when converting a float
DEFAULT_SEARCH_LIMIT = 2 ** 18

# (sign, numerator, denominator)
SignedRatio = Tuple[bool, int, int]

_ZERO = (True, 0, 1)
_NAN = (True, 0, 0)

_dflt_search_limit: ContextVar[int] = \
    ContextVar("dflt_search_limit", default=DEFAULT_SEARCH_LIMIT)


def get_dflt_search_limit() -> int:
    """Return default limit for the denominator search."""
    return _dflt_search_limit.get()


def set_dflt_search_limit(limit: int) -> Token:
    """Set default limit for the denominator search.

    Args:
        limit (int): max. denominator tried when converting a float

    Raises:
        TypeError: given `limit` is not an integer
        ValueError: given `limit` is less than 1
    """
    if not isinstance(limit, Integral) or isinstance(limit, bool):
        raise TypeError(f"Illegal search limit: {limit!r}")
    if limit < 1:
        raise ValueError(f"Search limit must be >= 1: {limit!r}")
    return _dflt_search_limit.set(int(limit))


def _residual(magnitude: float) -> float:
    frac = math.modf(magnitude)[0]
    return min(frac, 1.0 - frac)


def _integral(magnitude: float) -> bool:
    return _residual(magnitude) <= EPSILON


def _round_integral(magnitude: float) -> int:
    # biased, so that k - ε gives k
    return int(magnitude + EPSILON)


def approximate(value: float, limit: int | None = None) -> SignedRatio:
    """Return sign, numerator and denominator approximating `value`.

    Zero, NaN and infinity give the corresponding sentinel ratios (0/1, 0/0
    and 1/0). The numerator and denominator returned are not necessarily
    reduced.
    """
    if limit is None:
        limit = get_dflt_search_limit()
    if value == 0.0:
        return _ZERO
    if math.isnan(value):
        return _NAN
    sign = value > 0.0
    if math.isinf(value):
        return sign, 1, 0
    magnitude = abs(value)
    if _integral(magnitude):
        return sign, _round_integral(magnitude), 1
    best_mult, best_res = 1, _residual(magnitude)
    for mult in range(1, limit + 1):
        scaled = magnitude * mult
        res = _residual(scaled)
        if res <= EPSILON:
            return sign, _round_integral(scaled), mult
        if res < best_res:
            best_mult, best_res = mult, res
    logger.debug("No exact ratio for %r with denominator <= %i, using "
                 "denominator %i (residual %g).", value, limit, best_mult,
                 best_res)
    return (sign, round_magnitude(magnitude * best_mult, not sign),
            best_mult)
