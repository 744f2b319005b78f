"""Logarithm of the absolute value of the Gamma function, with its sign."""

from __future__ import annotations

import math

from fdmath.exact import high_word, low_word
from fdmath.explog import log
from fdmath.reduction import kernel_cos

__all__ = ["lgamma_r", "lgamma", "gamma_r", "gamma"]

_TWO52 = 4.50359962737049600000e15
_HALF = 5.00000000000000000000e-01
_PI = 3.14159265358979311600e00
_A0 = 7.72156649015328655494e-02
_A1 = 3.22467033424113591611e-01
_A2 = 6.73523010531292681824e-02
_A3 = 2.05808084325167332806e-02
_A4 = 7.38555086081402883957e-03
_A5 = 2.89051383673415629091e-03
_A6 = 1.19270763183362067845e-03
_A7 = 5.10069792153511336608e-04
_A8 = 2.20862790713908385557e-04
_A9 = 1.08011567247583939954e-04
_A10 = 2.52144565451257326939e-05
_A11 = 4.48640949618915160150e-05
_TC = 1.46163214496836224576e00
_TF = -1.21486290535849611461e-01
_TT = -3.63867699703950536541e-18
_T0 = 4.83836122723810047042e-01
_T1 = -1.47587722994593911752e-01
_T2 = 6.46249402391333854778e-02
_T3 = -3.27885410759859649565e-02
_T4 = 1.79706750811820387126e-02
_T5 = -1.03142241298341437450e-02
_T6 = 6.10053870246291332635e-03
_T7 = -3.68452016781138256760e-03
_T8 = 2.25964780900612472250e-03
_T9 = -1.40346469989232843813e-03
_T10 = 8.81081882437654011382e-04
_T11 = -5.38595305356740546715e-04
_T12 = 3.15632070903625950361e-04
_T13 = -3.12754168375120860518e-04
_T14 = 3.35529192635519073543e-04
_U0 = -7.72156649015328655494e-02
_U1 = 6.32827064025093366517e-01
_U2 = 1.45492250137234768737e00
_U3 = 9.77717527963372745603e-01
_U4 = 2.28963728064692451092e-01
_U5 = 1.33810918536787660377e-02
_V1 = 2.45597793713041134822e00
_V2 = 2.12848976379893395361e00
_V3 = 7.69285150456672783825e-01
_V4 = 1.04222645593369134254e-01
_V5 = 3.21709242282423911810e-03
_S0 = -7.72156649015328655494e-02
_S1 = 2.14982415960608852501e-01
_S2 = 3.25778796408930981787e-01
_S3 = 1.46350472652464452805e-01
_S4 = 2.66422703033638609560e-02
_S5 = 1.84028451407337715652e-03
_S6 = 3.19475326584100867617e-05
_R1 = 1.39200533467621045958e00
_R2 = 7.21935547567138069525e-01
_R3 = 1.71933865632803078993e-01
_R4 = 1.86459191715652901344e-02
_R5 = 7.77942496381893596434e-04
_R6 = 7.32668430744625636189e-06
_W0 = 4.18938533204672725052e-01
_W1 = 8.33333333333329678849e-02
_W2 = -2.77777777728775536470e-03
_W3 = 7.93650558643019558500e-04
_W4 = -5.95187557450339963135e-04
_W5 = 8.36339918996282139126e-04
_W6 = -1.63092934096575273989e-03


def _sin_pi(x: float) -> float:
    """Return ``sin(pi*x)`` for negative ``x``, exactly zero at integers."""
    ix = high_word(x) & 0x7FFFFFFF
    if ix < 0x3FD00000:
        return math.sin(_PI * x)
    y = -x
    z = float(math.floor(y))
    if z != y:
        y *= 0.5
        y = 2.0 * (y - float(math.floor(y)))
        n = int(y * 4.0)
    elif ix >= 0x43400000:
        y = 0.0
        n = 0
    else:
        if ix < 0x43300000:
            z = y + _TWO52
        n = low_word(z) & 1
        y = float(n)
        n <<= 2
    if n == 0:
        y = math.sin(_PI * y)
    elif n in (1, 2):
        y = kernel_cos(_PI * (0.5 - y), 0.0)
    elif n in (3, 4):
        y = math.sin(_PI * (1.0 - y))
    elif n in (5, 6):
        y = -kernel_cos(_PI * (y - 1.5), 0.0)
    else:
        y = math.sin(_PI * (y - 2.0))
    return -y


def _below_two(x: float, ix: int) -> float:
    if ix <= 0x3FECCCCC:
        r = -log(x)
        if ix >= 0x3FE76944:
            y, case = 1.0 - x, 0
        elif ix >= 0x3FCDA661:
            y, case = x - (_TC - 1.0), 1
        else:
            y, case = x, 2
    else:
        r = 0.0
        if ix >= 0x3FFBB4C3:
            y, case = 2.0 - x, 0
        elif ix >= 0x3FF3B4C4:
            y, case = x - _TC, 1
        else:
            y, case = x - 1.0, 2
    if case == 0:
        z = y * y
        p1 = _A0 + z * (_A2 + z * (_A4 + z * (_A6 + z * (_A8 + z * _A10))))
        p2 = z * (_A1 + z * (_A3 + z * (_A5 + z * (_A7 + z * (_A9 + z * _A11)))))
        p = y * p1 + p2
        r += p - 0.5 * y
    elif case == 1:
        z = y * y
        w = z * y
        p1 = _T0 + w * (_T3 + w * (_T6 + w * (_T9 + w * _T12)))
        p2 = _T1 + w * (_T4 + w * (_T7 + w * (_T10 + w * _T13)))
        p3 = _T2 + w * (_T5 + w * (_T8 + w * (_T11 + w * _T14)))
        p = z * p1 - (_TT - w * (p2 + y * p3))
        r += _TF + p
    else:
        p1 = y * (_U0 + y * (_U1 + y * (_U2 + y * (_U3 + y * (_U4 + y * _U5)))))
        p2 = 1.0 + y * (_V1 + y * (_V2 + y * (_V3 + y * (_V4 + y * _V5))))
        r += -0.5 * y + p1 / p2
    return r


def _below_eight(x: float) -> float:
    i = int(x)
    y = x - float(i)
    p = y * (_S0 + y * (_S1 + y * (_S2 + y * (_S3 + y * (_S4 + y * (_S5 + y * _S6))))))
    q = 1.0 + y * (_R1 + y * (_R2 + y * (_R3 + y * (_R4 + y * (_R5 + y * _R6)))))
    r = _HALF * y + p / q
    if i >= 3:
        z = 1.0
        for shift in range(i - 1, 1, -1):
            z *= y + float(shift)
        r += log(z)
    return r


def lgamma_r(x: float) -> tuple[float, int]:
    """Return ``(log|Gamma(x)|, sign of Gamma(x))``.

    Zero, negative integers and infinities give ``+inf``.
    """
    x = float(x)
    hx = high_word(x)
    lx = low_word(x)
    sign = 1
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000:
        return x * x, sign
    if (ix | lx) == 0:
        return math.inf, sign
    if ix < 0x3B900000:
        if hx < 0:
            return -log(-x), -1
        return -log(x), sign

    nadj = 0.0
    if hx < 0:
        if ix >= 0x43300000:
            return math.inf, sign
        t = _sin_pi(x)
        if t == 0.0:
            return math.inf, sign
        nadj = log(_PI / abs(t * x))
        if t < 0.0:
            sign = -1
        x = -x

    if (ix == 0x3FF00000 or ix == 0x40000000) and lx == 0:
        r = 0.0
    elif ix < 0x40000000:
        r = _below_two(x, ix)
    elif ix < 0x40200000:
        r = _below_eight(x)
    elif ix < 0x43900000:
        t = log(x)
        z = 1.0 / x
        y = z * z
        w = _W0 + z * (_W1 + y * (_W2 + y * (_W3 + y * (_W4 + y * (_W5 + y * _W6)))))
        r = (x - _HALF) * (t - 1.0) + w
    else:
        r = x * (log(x) - 1.0)
    if hx < 0:
        r = nadj - r
    return r, sign


def lgamma(x: float) -> float:
    """Return ``log|Gamma(x)|``."""
    return lgamma_r(x)[0]


def gamma_r(x: float) -> tuple[float, int]:
    """Return ``(log|Gamma(x)|, sign of Gamma(x))``; the same as :func:`lgamma_r`."""
    return lgamma_r(x)


def gamma(x: float) -> float:
    """Return ``log|Gamma(x)|``; the same as :func:`lgamma`."""
    return lgamma_r(x)[0]