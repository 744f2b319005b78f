"""Reduction of an argument modulo pi/2 and the cosine kernel on [-pi/4, pi/4]."""

from __future__ import annotations

import math
from fractions import Fraction

from fdmath.exact import from_words, high_word, low_word

__all__ = ["rem_pio2", "kernel_cos"]

# 396 hex digits of 2/pi, 24 bits per entry.
_TWO_OVER_PI_WORDS = (
    0xA2F983, 0x6E4E44, 0x1529FC, 0x2757D1, 0xF534DD, 0xC0DB62,
    0x95993C, 0x439041, 0xFE5163, 0xABDEBB, 0xC561B7, 0x246E3A,
    0x424DD2, 0xE00649, 0x2EEA09, 0xD1921C, 0xFE1DEB, 0x1CB129,
    0xA73EE8, 0x8235F5, 0x2EBB44, 0x84E99C, 0x7026B4, 0x5F7E41,
    0x3991D6, 0x398353, 0x39F49C, 0x845F8B, 0xBDF928, 0x3B1FF8,
    0x97FFDE, 0x05980F, 0xEF2F11, 0x8B5A0A, 0x6D1F6D, 0x367ECF,
    0x27CB09, 0xB74F46, 0x3F669E, 0x5FEA2D, 0x7527BA, 0xC7EBE5,
    0xF17B3D, 0x0739F7, 0x8A5292, 0xEA6BFB, 0x5FB11F, 0x8D5D08,
    0x560330, 0x46FC7B, 0x6BABF0, 0xCFBC20, 0x9AF436, 0x1DA9E3,
    0x91615E, 0xE61B08, 0x659985, 0x5F14A0, 0x68408D, 0xFFD880,
    0x4D7327, 0x310606, 0x1556CA, 0x73A8C9, 0x60E27B, 0xC08C6B,
)
_TWO_OVER_PI_BITS = 24 * len(_TWO_OVER_PI_WORDS)
_TWO_OVER_PI = int.from_bytes(
    b"".join(word.to_bytes(3, "big") for word in _TWO_OVER_PI_WORDS), "big"
)

# High words of n*pi/2 for n = 1..32.
_NPIO2_HW = (
    0x3FF921FB, 0x400921FB, 0x4012D97C, 0x401921FB, 0x401F6A7A, 0x4022D97C,
    0x4025FDBB, 0x402921FB, 0x402C463A, 0x402F6A7A, 0x4031475C, 0x4032D97C,
    0x40346B9C, 0x4035FDBB, 0x40378FDB, 0x403921FB, 0x403AB41B, 0x403C463A,
    0x403DD85A, 0x403F6A7A, 0x40407E4C, 0x4041475C, 0x4042106C, 0x4042D97C,
    0x4043A28C, 0x40446B9C, 0x404534AC, 0x4045FDBB, 0x4046C6CB, 0x40478FDB,
    0x404858EB, 0x404921FB,
)

_HALF = 0.5
_INVPIO2 = 6.36619772367581382433e-01
_PIO2_1 = 1.57079632673412561417e00
_PIO2_1T = 6.07710050650619224932e-11
_PIO2_2 = 6.07710050630396597660e-11
_PIO2_2T = 2.02226624879595063154e-21
_PIO2_3 = 2.02226624871116645580e-21
_PIO2_3T = 8.47842766036889956997e-32

# pi/2 to about 150 bits, held exactly.
_PIO2_EXACT = (
    Fraction(_PIO2_1) + Fraction(_PIO2_2) + Fraction(_PIO2_3) + Fraction(_PIO2_3T)
)
_FRACTION_BITS = 256

_C1 = 4.16666666666666019037e-02
_C2 = -1.38888888888741095749e-03
_C3 = 2.48015872894767294178e-05
_C4 = -2.75573143513906633035e-07
_C5 = 2.08757232129817482790e-09
_C6 = -1.13596475577881948265e-11


def _reduce_large(ax: float) -> tuple[int, float, float]:
    """Reduce a large finite positive ``ax`` using exact integer arithmetic."""
    hx = high_word(ax)
    mant = (((hx & 0x000FFFFF) | 0x00100000) << 32) | low_word(ax)
    exponent = ((hx >> 20) & 0x7FF) - 1075
    product = mant * _TWO_OVER_PI
    shift = _TWO_OVER_PI_BITS - exponent
    n = product >> shift
    frac = product - (n << shift)
    if 2 * frac >= (1 << shift):
        n += 1
        frac -= 1 << shift
    if shift > _FRACTION_BITS:
        frac >>= shift - _FRACTION_BITS
        shift = _FRACTION_BITS
    r = Fraction(frac, 1 << shift) * _PIO2_EXACT
    y0 = float(r)
    y1 = float(r - Fraction(y0))
    return n & 7, y0, y1


def rem_pio2(x: float) -> tuple[int, float, float]:
    """Return ``(n, y0, y1)`` with ``x = n*pi/2 + y0 + y1`` and ``|y0+y1| <= pi/4``.

    For very large arguments only ``n`` modulo 8 is returned. Infinities and
    NaN give ``(0, nan, nan)``.
    """
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix <= 0x3FE921FB:
        return 0, x, 0.0
    if ix < 0x4002D97C:
        if hx > 0:
            z = x - _PIO2_1
            if ix != 0x3FF921FB:
                y0 = z - _PIO2_1T
                y1 = (z - y0) - _PIO2_1T
            else:
                z -= _PIO2_2
                y0 = z - _PIO2_2T
                y1 = (z - y0) - _PIO2_2T
            return 1, y0, y1
        z = x + _PIO2_1
        if ix != 0x3FF921FB:
            y0 = z + _PIO2_1T
            y1 = (z - y0) + _PIO2_1T
        else:
            z += _PIO2_2
            y0 = z + _PIO2_2T
            y1 = (z - y0) + _PIO2_2T
        return -1, y0, y1
    if ix <= 0x413921FB:
        t = abs(x)
        n = int(t * _INVPIO2 + _HALF)
        fn = float(n)
        r = t - fn * _PIO2_1
        w = fn * _PIO2_1T
        if n < 32 and ix != _NPIO2_HW[n - 1]:
            y0 = r - w
        else:
            j = ix >> 20
            y0 = r - w
            i = j - ((high_word(y0) >> 20) & 0x7FF)
            if i > 16:
                t = r
                w = fn * _PIO2_2
                r = t - w
                w = fn * _PIO2_2T - ((t - r) - w)
                y0 = r - w
                i = j - ((high_word(y0) >> 20) & 0x7FF)
                if i > 49:
                    t = r
                    w = fn * _PIO2_3
                    r = t - w
                    w = fn * _PIO2_3T - ((t - r) - w)
                    y0 = r - w
        y1 = (r - y0) - w
        if hx < 0:
            return -n, -y0, -y1
        return n, y0, y1
    if ix >= 0x7FF00000:
        return 0, x - x, x - x
    n, y0, y1 = _reduce_large(abs(x))
    if hx < 0:
        return -n, -y0, -y1
    return n, y0, y1


def kernel_cos(x: float, y: float) -> float:
    """Return ``cos(x + y)`` for ``|x| <= pi/4``, with ``y`` the tail of ``x``."""
    x = float(x)
    y = float(y)
    ix = high_word(x) & 0x7FFFFFFF
    if ix < 0x3E400000 and int(x) == 0:
        return 1.0
    z = x * x
    r = z * (_C1 + z * (_C2 + z * (_C3 + z * (_C4 + z * (_C5 + z * _C6)))))
    if ix < 0x3FD33333:
        return 1.0 - (0.5 * z - (z * r - x * y))
    if ix > 0x3FE90000:
        qx = 0.28125
    else:
        qx = from_words(ix - 0x00200000, 0)
    hz = 0.5 * z - qx
    a = 1.0 - qx
    return a - (hz - (z * r - x * y))