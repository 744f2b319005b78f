"""Inverse trigonometric functions and the Euclidean norm for IEEE doubles.

Domain errors give NaN; NaN arguments propagate.
"""

from __future__ import annotations

import math

from fdmath.exact import from_words, high_word, low_word, sqrt, with_high, with_low

__all__ = ["acos", "asin", "atan2", "hypot"]

_HUGE = 1.0e300
_TINY = 1.0e-300
_PI = 3.14159265358979311600e00
_PIO2_HI = 1.57079632679489655800e00
_PIO2_LO = 6.12323399573676603587e-17
_PIO4_HI = 7.85398163397448278999e-01
_PI_O_4 = 7.8539816339744827900e-01
_PI_O_2 = 1.5707963267948965580e00
_PI_LO = 1.2246467991473531772e-16

# Coefficients of R(z) ~ (asin(x) - x) / x**3 with z = x*x.
_PS0 = 1.66666666666666657415e-01
_PS1 = -3.25565818622400915405e-01
_PS2 = 2.01212532134862925881e-01
_PS3 = -4.00555345006794114027e-02
_PS4 = 7.91534994289814532176e-04
_PS5 = 3.47933107596021167570e-05
_QS1 = -2.40339491173441421878e00
_QS2 = 2.02094576023350569471e00
_QS3 = -6.88283971605453293030e-01
_QS4 = 7.70381505559019352791e-02


def _invalid(x: float) -> float:
    return x if math.isnan(x) else math.nan


def _num_den(z: float) -> tuple[float, float]:
    p = z * (_PS0 + z * (_PS1 + z * (_PS2 + z * (_PS3 + z * (_PS4 + z * _PS5)))))
    q = 1.0 + z * (_QS1 + z * (_QS2 + z * (_QS3 + z * _QS4)))
    return p, q


def acos(x: float) -> float:
    """Return the arc cosine of ``x`` in ``[0, pi]``; NaN if ``|x| > 1``."""
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x3FF00000:
        if ((ix - 0x3FF00000) | low_word(x)) == 0:
            if hx > 0:
                return 0.0
            return _PI + 2.0 * _PIO2_LO
        return _invalid(x)
    if ix < 0x3FE00000:
        if ix <= 0x3C600000:
            return _PIO2_HI + _PIO2_LO
        p, q = _num_den(x * x)
        r = p / q
        return _PIO2_HI - (x - (_PIO2_LO - x * r))
    if hx < 0:
        z = (1.0 + x) * 0.5
        p, q = _num_den(z)
        s = sqrt(z)
        r = p / q
        w = r * s - _PIO2_LO
        return _PI - 2.0 * (s + w)
    z = (1.0 - x) * 0.5
    s = sqrt(z)
    df = with_low(s, 0)
    c = (z - df * df) / (s + df)
    p, q = _num_den(z)
    r = p / q
    w = r * s + c
    return 2.0 * (df + w)


def asin(x: float) -> float:
    """Return the arc sine of ``x`` in ``[-pi/2, pi/2]``; NaN if ``|x| > 1``."""
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x3FF00000:
        if ((ix - 0x3FF00000) | low_word(x)) == 0:
            return x * _PIO2_HI + x * _PIO2_LO
        return _invalid(x)
    if ix < 0x3FE00000:
        if ix < 0x3E400000:
            return x
        p, q = _num_den(x * x)
        return x + x * (p / q)

    t = (1.0 - abs(x)) * 0.5
    p, q = _num_den(t)
    s = sqrt(t)
    if ix >= 0x3FEF3333:
        t = _PIO2_HI - (2.0 * (s + s * (p / q)) - _PIO2_LO)
    else:
        w = with_low(s, 0)
        c = (t - w * w) / (s + w)
        r = p / q
        p = 2.0 * s * r - (_PIO2_LO - 2.0 * c)
        q = _PIO4_HI - 2.0 * w
        t = _PIO4_HI - (p - q)
    return t if hx > 0 else -t


def atan2(y: float, x: float) -> float:
    """Return the argument of the point ``(x, y)`` in ``[-pi, pi]``."""
    y = float(y)
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    lx = low_word(x)
    hy = high_word(y)
    iy = hy & 0x7FFFFFFF
    ly = low_word(y)

    if math.isnan(x) or math.isnan(y):
        return x + y
    if x == 1.0:
        return math.atan(y)
    m = ((hy >> 31) & 1) | ((hx >> 30) & 2)

    if (iy | ly) == 0:
        if m in (0, 1):
            return y
        return _PI + _TINY if m == 2 else -_PI - _TINY
    if (ix | lx) == 0:
        return -_PI_O_2 - _TINY if hy < 0 else _PI_O_2 + _TINY

    if ix == 0x7FF00000:
        if iy == 0x7FF00000:
            return (
                _PI_O_4 + _TINY,
                -_PI_O_4 - _TINY,
                3.0 * _PI_O_4 + _TINY,
                -3.0 * _PI_O_4 - _TINY,
            )[m]
        return (0.0, -0.0, _PI + _TINY, -_PI - _TINY)[m]
    if iy == 0x7FF00000:
        return -_PI_O_2 - _TINY if hy < 0 else _PI_O_2 + _TINY

    k = (iy - ix) >> 20
    if k > 60:
        z = _PI_O_2 + 0.5 * _PI_LO
    elif hx < 0 and k < -60:
        z = 0.0
    else:
        z = math.atan(abs(y / x))
    if m == 0:
        return z
    if m == 1:
        return -z
    if m == 2:
        return _PI - (z - _PI_LO)
    return (z - _PI_LO) - _PI


def hypot(x: float, y: float) -> float:
    """Return ``sqrt(x*x + y*y)`` without spurious overflow or underflow.

    Infinite if either argument is infinite, even when the other is NaN.
    """
    x = float(x)
    y = float(y)
    ha = high_word(x) & 0x7FFFFFFF
    hb = high_word(y) & 0x7FFFFFFF
    if hb > ha:
        a, b = y, x
        ha, hb = hb, ha
    else:
        a, b = x, y
    a = with_high(a, ha)
    b = with_high(b, hb)
    if (ha - hb) > 0x3C00000:
        return a + b

    k = 0
    if ha > 0x5F300000:
        if ha >= 0x7FF00000:
            w = a + b
            if ((ha & 0xFFFFF) | low_word(a)) == 0:
                w = a
            if ((hb ^ 0x7FF00000) | low_word(b)) == 0:
                w = b
            return w
        ha -= 0x25800000
        hb -= 0x25800000
        k += 600
        a = with_high(a, ha)
        b = with_high(b, hb)
    if hb < 0x20B00000:
        if hb <= 0x000FFFFF:
            if (hb | low_word(b)) == 0:
                return a
            scale = from_words(0x7FD00000, 0)
            b *= scale
            a *= scale
            k -= 1022
        else:
            ha += 0x25800000
            hb += 0x25800000
            k -= 600
            a = with_high(a, ha)
            b = with_high(b, hb)

    w = a - b
    if w > b:
        t1 = from_words(ha, 0)
        t2 = a - t1
        w = sqrt(t1 * t1 - (b * (-b) - t2 * (a + t1)))
    else:
        a = a + a
        y1 = from_words(hb, 0)
        y2 = b - y1
        t1 = from_words(ha + 0x00100000, 0)
        t2 = a - t1
        w = sqrt(t1 * y1 - (w * (-w) - (t1 * y2 + t2 * b)))
    if k != 0:
        return with_high(1.0, high_word(1.0) + (k << 20)) * w
    return w