"""Correctly rounded and exact IEEE double operations.

Also holds helpers for reading and replacing the two 32-bit halves of a
double. The high word is returned as a signed 32-bit integer and the low
word as an unsigned one.
"""

from __future__ import annotations

import math
import struct

__all__ = [
    "high_word",
    "low_word",
    "from_words",
    "with_high",
    "with_low",
    "sqrt",
    "fmod",
    "remainder",
    "scalb",
]

_MASK32 = 0xFFFFFFFF
_FRAC_BITS = 52
_FRAC_MASK = (1 << _FRAC_BITS) - 1
_SCALB_LIMIT = 65000


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def _from_bits(bits: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", bits & 0xFFFFFFFFFFFFFFFF))[0]


def high_word(x: float) -> int:
    """Return the sign, exponent and top fraction bits as a signed 32-bit int."""
    high = _bits(x) >> 32
    return high - (1 << 32) if high & 0x80000000 else high


def low_word(x: float) -> int:
    """Return the low 32 fraction bits as an unsigned int."""
    return _bits(x) & _MASK32


def from_words(high: int, low: int) -> float:
    """Build a double from its high and low 32-bit words."""
    return _from_bits(((high & _MASK32) << 32) | (low & _MASK32))


def with_high(x: float, high: int) -> float:
    """Return ``x`` with its high word replaced."""
    return from_words(high, low_word(x))


def with_low(x: float, low: int) -> float:
    """Return ``x`` with its low word replaced."""
    return from_words(high_word(x), low)


def _decompose(x: float) -> tuple[int, int]:
    """Split a finite, non-negative ``x`` into integers ``(m, e)`` with x == m * 2**e."""
    bits = _bits(x)
    biased = (bits >> _FRAC_BITS) & 0x7FF
    frac = bits & _FRAC_MASK
    if biased == 0:
        return frac, -1074
    return frac | (1 << _FRAC_BITS), biased - 1075


def sqrt(x: float) -> float:
    """Correctly rounded square root.

    ``sqrt(+-0)`` is ``+-0``, ``sqrt(inf)`` is ``inf``, and the square root
    of NaN, ``-inf`` or any negative number is NaN.
    """
    if math.isnan(x):
        return x
    if x == 0.0:
        return x
    if x < 0.0:
        return math.nan
    if math.isinf(x):
        return x

    mant, exp = _decompose(x)
    # Give the integer root at least 56 significant bits and keep the
    # exponent even so it halves exactly.
    shift = max(0, 112 - mant.bit_length())
    if (exp - shift) % 2:
        shift += 1
    scaled = mant << shift
    root = math.isqrt(scaled)
    sticky = 1 if root * root != scaled else 0
    # The sticky bit lies below the rounding position, so converting to
    # float rounds to nearest exactly as the infinitely precise root would.
    return math.ldexp(float((root << 1) | sticky), (exp - shift) // 2 - 1)


def fmod(x: float, y: float) -> float:
    """Return ``x - trunc(x/y)*y`` computed exactly, with the sign of ``x``.

    NaN when ``y`` is zero, ``x`` is not finite, or either is NaN.
    """
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0.0:
        return math.nan
    ax, ay = abs(x), abs(y)
    if ax < ay:
        return x
    if ax == ay:
        return math.copysign(0.0, x)

    mx, ex = _decompose(ax)
    my, ey = _decompose(ay)
    base = min(ex, ey)
    rest = (mx << (ex - base)) % (my << (ey - base))
    if rest == 0:
        return math.copysign(0.0, x)
    return math.copysign(math.ldexp(float(rest), base), x)


def remainder(x: float, p: float) -> float:
    """IEEE remainder: ``x - n*p`` where ``n`` is ``x/p`` rounded to nearest even.

    NaN when ``p`` is zero, ``x`` is not finite, or either is NaN.
    """
    if math.isnan(p) or p == 0.0 or math.isnan(x) or math.isinf(x):
        return math.nan

    negative = math.copysign(1.0, x) < 0.0
    same_magnitude = abs(x) == abs(p)
    if abs(p) < 2.0**1023:
        x = fmod(x, p + p)  # now |x| < 2|p|
    if same_magnitude:
        return 0.0 * x

    x = abs(x)
    p = abs(p)
    if p < 2.0**-1021:
        if x + x > p:
            x -= p
            if x + x >= p:
                x -= p
    else:
        p_half = 0.5 * p
        if x > p_half:
            x -= p
            if x >= p_half:
                x -= p
    return -x if negative else x


def _scalbn(x: float, n: int) -> float:
    try:
        return math.ldexp(x, n)
    except OverflowError:
        return math.copysign(math.inf, x)


def scalb(x: float, fn: float) -> float:
    """Return ``x * 2**fn`` for an integral ``fn``.

    NaN if ``fn`` is finite but not an integer; overflow gives a signed
    infinity and underflow a signed zero.
    """
    fn = float(fn)
    if math.isnan(x) or math.isnan(fn):
        return x * fn
    if math.isinf(fn):
        if fn > 0.0:
            return x * fn
        return x / (-fn)
    if not fn.is_integer():
        return math.nan
    if fn > _SCALB_LIMIT:
        return _scalbn(x, _SCALB_LIMIT)
    if -fn > _SCALB_LIMIT:
        return _scalbn(x, -_SCALB_LIMIT)
    return _scalbn(x, int(fn))