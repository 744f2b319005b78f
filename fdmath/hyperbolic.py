"""Hyperbolic functions and their inverses for IEEE doubles."""

from __future__ import annotations

import math

from fdmath.exact import high_word, low_word, sqrt, with_high
from fdmath.explog import exp, log

__all__ = ["acosh", "atanh", "cosh", "sinh"]

_HUGE = 1.0e300
_SHUGE = 1.0e307
_LN2 = 6.93147180559945286227e-01


def _invalid(x: float) -> float:
    return x if math.isnan(x) else math.nan


def acosh(x: float) -> float:
    """Return the inverse hyperbolic cosine of ``x``; NaN if ``x < 1``."""
    x = float(x)
    hx = high_word(x)
    if hx < 0x3FF00000:
        return _invalid(x)
    if hx >= 0x41B00000:
        if hx >= 0x7FF00000:
            return x + x
        return log(x) + _LN2
    if ((hx - 0x3FF00000) | low_word(x)) == 0:
        return 0.0
    if hx > 0x40000000:
        t = x * x
        return log(2.0 * x - 1.0 / (x + sqrt(t - 1.0)))
    t = x - 1.0
    return math.log1p(t + sqrt(2.0 * t + t * t))


def atanh(x: float) -> float:
    """Return the inverse hyperbolic tangent of ``x``.

    ``atanh(+-1)`` is ``+-inf`` and ``|x| > 1`` gives NaN.
    """
    x = float(x)
    hx = high_word(x)
    lx = low_word(x)
    ix = hx & 0x7FFFFFFF
    if (ix | (1 if lx else 0)) > 0x3FF00000:
        return _invalid(x)
    if ix == 0x3FF00000:
        return math.copysign(math.inf, x)
    if ix < 0x3E300000:
        return x
    x = with_high(x, ix)
    if ix < 0x3FE00000:
        t = x + x
        t = 0.5 * math.log1p(t + t * x / (1.0 - x))
    else:
        t = 0.5 * math.log1p((x + x) / (1.0 - x))
    return t if hx >= 0 else -t


def _below_overflow(ix: int, lx: int) -> bool:
    return ix < 0x408633CE or (ix == 0x408633CE and lx <= 0x8FB9F87D)


def cosh(x: float) -> float:
    """Return the hyperbolic cosine of ``x``; overflow gives ``inf``."""
    x = float(x)
    ix = high_word(x) & 0x7FFFFFFF
    if ix >= 0x7FF00000:
        return x * x
    ax = abs(x)
    if ix < 0x3FD62E43:
        t = math.expm1(ax)
        w = 1.0 + t
        if ix < 0x3C800000:
            return w
        return 1.0 + (t * t) / (w + w)
    if ix < 0x40360000:
        t = exp(ax)
        return 0.5 * t + 0.5 / t
    if ix < 0x40862E42:
        return 0.5 * exp(ax)
    if _below_overflow(ix, low_word(x)):
        w = exp(0.5 * ax)
        t = 0.5 * w
        return t * w
    return _HUGE * _HUGE


def sinh(x: float) -> float:
    """Return the hyperbolic sine of ``x``; overflow gives a signed infinity."""
    x = float(x)
    jx = high_word(x)
    ix = jx & 0x7FFFFFFF
    if ix >= 0x7FF00000:
        return x + x
    h = -0.5 if jx < 0 else 0.5
    ax = abs(x)
    if ix < 0x40360000:
        if ix < 0x3E300000:
            return x
        t = math.expm1(ax)
        if ix < 0x3FF00000:
            return h * (2.0 * t - t * t / (t + 1.0))
        return h * (t + t / (t + 1.0))
    if ix < 0x40862E42:
        return h * exp(ax)
    if _below_overflow(ix, low_word(x)):
        w = exp(0.5 * ax)
        t = h * w
        return t * w
    return x * _SHUGE