"""Bessel functions of the first and second kinds of order zero."""

from __future__ import annotations

import math

from fdmath.exact import high_word, low_word, sqrt
from fdmath.explog import log

__all__ = ["j0", "y0"]

_INVSQRTPI = 5.64189583547756279280e-01
_TPI = 6.36619772367581382433e-01

# R0/S0 on [0, 2]
_R02 = 1.56249999999999947958e-02
_R03 = -1.89979294238854721751e-04
_R04 = 1.82954049532700665670e-06
_R05 = -4.61832688532103189199e-09
_S01 = 1.56191029464890010492e-02
_S02 = 1.16926784663337450260e-04
_S03 = 5.13546550207318111446e-07
_S04 = 1.16614003333790000205e-09

# U/V for y0 on [0, 2]
_U00 = -7.38042951086872317523e-02
_U01 = 1.76666452509181115538e-01
_U02 = -1.38185671945596898896e-02
_U03 = 3.47453432093683650238e-04
_U04 = -3.81407053724364161125e-06
_U05 = 1.95590137035022920206e-08
_U06 = -3.98205194132103398453e-11
_V01 = 1.27304834834123699328e-02
_V02 = 7.60068627350353253702e-05
_V03 = 2.59150851840457805467e-07
_V04 = 4.41110311332675467403e-10

# pzero(x) = 1 + R/S, per interval of x.
_PR8 = (
    0.00000000000000000000e00,
    -7.03124999999900357484e-02,
    -8.08167041275349795626e00,
    -2.57063105679704847262e02,
    -2.48521641009428822144e03,
    -5.25304380490729545272e03,
)
_PS8 = (
    1.16534364619668181717e02,
    3.83374475364121826715e03,
    4.05978572648472545552e04,
    1.16752972564375915681e05,
    4.76277284146730962675e04,
)
_PR5 = (
    -1.14125464691894502584e-11,
    -7.03124940873599280078e-02,
    -4.15961064470587782438e00,
    -6.76747652265167261021e01,
    -3.31231299649172967747e02,
    -3.46433388365604912451e02,
)
_PS5 = (
    6.07539382692300335975e01,
    1.05125230595704579173e03,
    5.97897094333855784498e03,
    9.62544514357774460223e03,
    2.40605815922939109441e03,
)
_PR3 = (
    -2.54704601771951915620e-09,
    -7.03119616381481654654e-02,
    -2.40903221549529611423e00,
    -2.19659774734883086467e01,
    -5.80791704701737572236e01,
    -3.14479470594888503854e01,
)
_PS3 = (
    3.58560338055209726349e01,
    3.61513983050303863820e02,
    1.19360783792111533330e03,
    1.12799679856907414432e03,
    1.73580930813335754692e02,
)
_PR2 = (
    -8.87534333032526411254e-08,
    -7.03030995483624743247e-02,
    -1.45073846780952986357e00,
    -7.63569613823527770791e00,
    -1.11931668860356747786e01,
    -3.23364579351335335033e00,
)
_PS2 = (
    2.22202997532088808441e01,
    1.36206794218215208048e02,
    2.70470278658083486789e02,
    1.53875394208320329881e02,
    1.46576176948256193810e01,
)

# qzero(x) = (-1/8 + R/S) / x, per interval of x.
_QR8 = (
    0.00000000000000000000e00,
    7.32421874999935051953e-02,
    1.17682064682252693899e01,
    5.57673380256401856059e02,
    8.85919720756468632317e03,
    3.70146267776887834771e04,
)
_QS8 = (
    1.63776026895689824414e02,
    8.09834494656449805916e03,
    1.42538291419120476348e05,
    8.03309257119514397345e05,
    8.40501579819060512818e05,
    -3.43899293537866615225e05,
)
_QR5 = (
    1.84085963594515531381e-11,
    7.32421766612684765896e-02,
    5.83563508962056953777e00,
    1.35111577286449829671e02,
    1.02724376596164097464e03,
    1.98997785864605384631e03,
)
_QS5 = (
    8.27766102236537761883e01,
    2.07781416421392987104e03,
    1.88472887785718085070e04,
    5.67511122894947329769e04,
    3.59767538425114471465e04,
    -5.35434275601944773371e03,
)
_QR3 = (
    4.37741014089738620906e-09,
    7.32411180042911447163e-02,
    3.34423137516170720929e00,
    4.26218440745412650017e01,
    1.70808091340565596283e02,
    1.66733948696651168575e02,
)
_QS3 = (
    4.87588729724587182091e01,
    7.09689221056606015736e02,
    3.70414822620111362994e03,
    6.46042516752568917582e03,
    2.51633368920368957333e03,
    -1.49247451836156386662e02,
)
_QR2 = (
    1.50444444886983272379e-07,
    7.32234265963079278272e-02,
    1.99819174093815998816e00,
    1.44956029347885735348e01,
    3.16662317504781540833e01,
    1.62527075710929267416e01,
)
_QS2 = (
    3.03655848355219184498e01,
    2.69348118608049844624e02,
    8.44783757595320139444e02,
    8.82935845112488550512e02,
    2.12666388511798828631e02,
    -5.31095493882666946917e00,
)


def _horner(z: float, coeffs: tuple[float, ...]) -> float:
    """Evaluate ``c0 + z*(c1 + z*(... + z*cn))``."""
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = c + z * acc
    return acc


def _select(x: float, tables: tuple[tuple[tuple[float, ...], tuple[float, ...]], ...]):
    ix = high_word(x) & 0x7FFFFFFF
    if ix >= 0x40200000:
        return tables[0]
    if ix >= 0x40122E8B:
        return tables[1]
    if ix >= 0x4006DB6D:
        return tables[2]
    return tables[3]


_P_TABLES = ((_PR8, _PS8), (_PR5, _PS5), (_PR3, _PS3), (_PR2, _PS2))
_Q_TABLES = ((_QR8, _QS8), (_QR5, _QS5), (_QR3, _QS3), (_QR2, _QS2))


def _pzero(x: float) -> float:
    p, q = _select(x, _P_TABLES)
    z = 1.0 / (x * x)
    r = _horner(z, p)
    s = 1.0 + z * _horner(z, q)
    return 1.0 + r / s


def _qzero(x: float) -> float:
    p, q = _select(x, _Q_TABLES)
    z = 1.0 / (x * x)
    r = _horner(z, p)
    s = 1.0 + z * _horner(z, q)
    return (-0.125 + r / s) / x


def _phase_terms(x: float, ix: int) -> tuple[float, float]:
    """Return ``(sin x - cos x, sin x + cos x)`` avoiding cancellation."""
    s = math.sin(x)
    c = math.cos(x)
    ss = s - c
    cc = s + c
    if ix < 0x7FE00000:
        z = -math.cos(x + x)
        if s * c < 0.0:
            cc = z / ss
        else:
            ss = z / cc
    return ss, cc


def j0(x: float) -> float:
    """Return the Bessel function of the first kind of order zero.

    ``j0(nan)`` is NaN, ``j0(0)`` is 1 and ``j0(+-inf)`` is 0.
    """
    x = float(x)
    ix = high_word(x) & 0x7FFFFFFF
    if ix >= 0x7FF00000:
        return 1.0 / (x * x)
    x = abs(x)
    if ix >= 0x40000000:
        ss, cc = _phase_terms(x, ix)
        if ix > 0x48000000:
            return (_INVSQRTPI * cc) / sqrt(x)
        u = _pzero(x)
        v = _qzero(x)
        return _INVSQRTPI * (u * cc - v * ss) / sqrt(x)
    if ix < 0x3F200000:
        if ix < 0x3E400000:
            return 1.0
        return 1.0 - 0.25 * x * x
    z = x * x
    r = z * (_R02 + z * (_R03 + z * (_R04 + z * _R05)))
    s = 1.0 + z * (_S01 + z * (_S02 + z * (_S03 + z * _S04)))
    if ix < 0x3FF00000:
        return 1.0 + z * (-0.25 + (r / s))
    u = 0.5 * x
    return (1.0 + u) * (1.0 - u) + z * (r / s)


def y0(x: float) -> float:
    """Return the Bessel function of the second kind of order zero.

    ``y0(0)`` is ``-inf``, ``y0`` of a negative number or ``-inf`` is NaN,
    and ``y0(inf)`` is 0.
    """
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    lx = low_word(x)
    if ix >= 0x7FF00000:
        return 1.0 / (x + x * x)
    if (ix | lx) == 0:
        return -math.inf
    if hx < 0:
        return math.nan
    if ix >= 0x40000000:
        ss, cc = _phase_terms(x, ix)
        if ix > 0x48000000:
            return (_INVSQRTPI * ss) / sqrt(x)
        u = _pzero(x)
        v = _qzero(x)
        return _INVSQRTPI * (u * ss + v * cc) / sqrt(x)
    if ix <= 0x3E400000:
        return _U00 + _TPI * log(x)
    z = x * x
    u = _U00 + z * (_U01 + z * (_U02 + z * (_U03 + z * (_U04 + z * (_U05 + z * _U06)))))
    v = 1.0 + z * (_V01 + z * (_V02 + z * (_V03 + z * _V04)))
    return u / v + _TPI * (j0(x) * log(x))