"""Bessel functions of the first and second kinds of integer order n."""

from __future__ import annotations

import math

from fdmath.bessel_one import j1, y1
from fdmath.bessel_zero import j0, y0
from fdmath.exact import high_word, low_word, sqrt
from fdmath.explog import log

__all__ = ["jn", "yn"]

_INVSQRTPI = 5.64189583547756279280e-01
_OVERFLOW_LOG = 7.09782712893383973096e02
_RESCALE = 1e100


def _asymptotic_j(n: int, x: float) -> float:
    s = math.sin(x)
    c = math.cos(x)
    temp = (c + s, -c + s, -c - s, c - s)[n & 3]
    return _INVSQRTPI * temp / sqrt(x)


def _asymptotic_y(n: int, x: float) -> float:
    s = math.sin(x)
    c = math.cos(x)
    temp = (s - c, -s - c, -s + c, s + c)[n & 3]
    return _INVSQRTPI * temp / sqrt(x)


def _backward(n: int, x: float) -> float:
    """Return ``J(n, x)`` for ``0 < x < n`` by backward recurrence."""
    w = (n + n) / x
    h = 2.0 / x
    q0 = w
    z = w + h
    q1 = w * z - 1.0
    k = 1
    while q1 < 1.0e9:
        k += 1
        z += h
        q0, q1 = q1, z * q1 - q0

    t = 0.0
    for i in range(2 * (n + k), n + n - 1, -2):
        t = 1.0 / (i / x - t)
    a = t
    b = 1.0

    rescale = n * log(abs(2.0 / x * n)) >= _OVERFLOW_LOG
    di = float(2 * (n - 1))
    for _ in range(n - 1, 0, -1):
        temp = b
        b *= di
        b = b / x - a
        a = temp
        di -= 2.0
        if rescale and b > _RESCALE:
            a /= b
            t /= b
            b = 1.0
    return t * j0(x) / b


def jn(n: int, x: float) -> float:
    """Return the Bessel function of the first kind of order ``n``."""
    n = int(n)
    x = float(x)
    if math.isnan(x):
        return x + x
    if n < 0:
        n = -n
        x = -x
    if n == 0:
        return j0(x)
    if n == 1:
        return j1(x)
    negate = (n & 1) == 1 and high_word(x) < 0
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    lx = low_word(x)
    x = abs(x)

    if (ix | lx) == 0 or ix >= 0x7FF00000:
        b = 0.0
    elif float(n) <= x:
        if ix >= 0x52D00000:
            b = _asymptotic_j(n, x)
        else:
            a = j0(x)
            b = j1(x)
            for i in range(1, n):
                a, b = b, b * (float(i + i) / x) - a
    elif ix < 0x3E100000:
        if n > 33:
            b = 0.0
        else:
            half = x * 0.5
            b = half
            a = 1.0
            for i in range(2, n + 1):
                a *= float(i)
                b *= half
            b = b / a
    else:
        b = _backward(n, x)
    return -b if negate else b


def yn(n: int, x: float) -> float:
    """Return the Bessel function of the second kind of order ``n``.

    ``yn(n, 0)`` is ``-inf`` and a negative argument gives NaN.
    """
    n = int(n)
    x = float(x)
    if math.isnan(x):
        return x + x
    if x == 0.0:
        return -math.inf
    if high_word(x) < 0:
        return math.nan
    sign = 1
    if n < 0:
        n = -n
        sign = 1 - ((n & 1) << 1)
    if n == 0:
        return y0(x)
    if n == 1:
        return sign * y1(x)
    if math.isinf(x):
        return 0.0
    ix = high_word(x) & 0x7FFFFFFF
    if ix >= 0x52D00000:
        b = _asymptotic_y(n, x)
    else:
        a = y0(x)
        b = y1(x)
        i = 1
        while i < n and b != -math.inf:
            a, b = b, (float(i + i) / x) * b - a
            i += 1
    return b if sign > 0 else -b