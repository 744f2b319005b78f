"""Bessel functions of the first and second kinds of order one."""

from __future__ import annotations

import math

from fdmath.exact import high_word, low_word, sqrt
from fdmath.explog import log

__all__ = ["j1", "y1"]

_INVSQRTPI = 5.64189583547756279280e-01
_TPI = 6.36619772367581382433e-01

# R0/S0 on [0, 2]
_R00 = -6.25000000000000000000e-02
_R01 = 1.40705666955189706048e-03
_R02 = -1.59955631084035597520e-05
_R03 = 4.96727999609584448412e-08
_S01 = 1.91537599538363460805e-02
_S02 = 1.85946785588630915560e-04
_S03 = 1.17718464042623683263e-06
_S04 = 5.04636257076217042715e-09
_S05 = 1.23542274426137913908e-11

# U/V for y1 on [0, 2]
_U0 = (
    -1.96057090646238940668e-01,
    5.04438716639811282616e-02,
    -1.91256895875763547298e-03,
    2.35252600561610495928e-05,
    -9.19099158039878874504e-08,
)
_V0 = (
    1.99167318236649903973e-02,
    2.02552581025135171496e-04,
    1.35608801097516229404e-06,
    6.22741452364621501295e-09,
    1.66559246207992079114e-11,
)

# pone(x) = 1 + R/S, per interval of x.
_PR8 = (
    0.00000000000000000000e00,
    1.17187499999988647970e-01,
    1.32394806593073575129e01,
    4.12051854307378562225e02,
    3.87474538913960532227e03,
    7.91447954031891731574e03,
)
_PS8 = (
    1.14207370375678408436e02,
    3.65093083420853463394e03,
    3.69562060269033463555e04,
    9.76027935934950801311e04,
    3.08042720627888811578e04,
)
_PR5 = (
    1.31990519556243522749e-11,
    1.17187493190614097638e-01,
    6.80275127868432871736e00,
    1.08308182990189109773e02,
    5.17636139533199752805e02,
    5.28715201363337541807e02,
)
_PS5 = (
    5.92805987221131331921e01,
    9.91401418733614377743e02,
    5.35326695291487976647e03,
    7.84469031749551231769e03,
    1.50404688810361062679e03,
)
_PR3 = (
    3.02503916137373618024e-09,
    1.17186865567253592491e-01,
    3.93297750033315640650e00,
    3.51194035591636932736e01,
    9.10550110750781271918e01,
    4.85590685197364919645e01,
)
_PS3 = (
    3.47913095001251519989e01,
    3.36762458747825746741e02,
    1.04687139975775130551e03,
    8.90811346398256432622e02,
    1.03787932439639277504e02,
)
_PR2 = (
    1.07710830106873743082e-07,
    1.17176219462683348094e-01,
    2.36851496667608785174e00,
    1.22426109148261232917e01,
    1.76939711271687727390e01,
    5.07352312588818499250e00,
)
_PS2 = (
    2.14364859363821409488e01,
    1.25290227168402751090e02,
    2.32276469057162813669e02,
    1.17679373287147100768e02,
    8.36463893371618283368e00,
)

# qone(x) = (3/8 + R/S) / x, per interval of x.
_QR8 = (
    0.00000000000000000000e00,
    -1.02539062499992714161e-01,
    -1.62717534544589987888e01,
    -7.59601722513950107896e02,
    -1.18498066702429587167e04,
    -4.84385124285750353010e04,
)
_QS8 = (
    1.61395369700722909556e02,
    7.82538599923348465381e03,
    1.33875336287249578163e05,
    7.19657723683240939863e05,
    6.66601232617776375264e05,
    -2.94490264303834643215e05,
)
_QR5 = (
    -2.08979931141764104297e-11,
    -1.02539050241375426231e-01,
    -8.05644828123936029840e00,
    -1.83669607474888380239e02,
    -1.37319376065508163265e03,
    -2.61244440453215656817e03,
)
_QS5 = (
    8.12765501384335777857e01,
    1.99179873460485964642e03,
    1.74684851924908907677e04,
    4.98514270910352279316e04,
    2.79480751638918118260e04,
    -4.71918354795128470869e03,
)
_QR3 = (
    -5.07831226461766561369e-09,
    -1.02537829820837089745e-01,
    -4.61011581139473403113e00,
    -5.78472216562783643212e01,
    -2.28244540737631695038e02,
    -2.19210128478909325622e02,
)
_QS3 = (
    4.76651550323729509273e01,
    6.73865112676699709482e02,
    3.38015286679526343505e03,
    5.54772909720722782367e03,
    1.90311919338810798763e03,
    -1.35201191444307340817e02,
)
_QR2 = (
    -1.78381727510958865572e-07,
    -1.02517042607985553460e-01,
    -2.75220568278187460720e00,
    -1.96636162643703720221e01,
    -4.23253133372830490089e01,
    -2.13719211703704061733e01,
)
_QS2 = (
    2.95333629060523854548e01,
    2.52981549982190529136e02,
    7.57502834868645436472e02,
    7.39393205320467245656e02,
    1.55949003336666123687e02,
    -4.95949898822628210127e00,
)

_P_TABLES = ((_PR8, _PS8), (_PR5, _PS5), (_PR3, _PS3), (_PR2, _PS2))
_Q_TABLES = ((_QR8, _QS8), (_QR5, _QS5), (_QR3, _QS3), (_QR2, _QS2))


def _horner(z: float, coeffs: tuple[float, ...]) -> float:
    """Evaluate ``c0 + z*(c1 + z*(... + z*cn))``."""
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = c + z * acc
    return acc


def _select(x: float, tables):
    ix = high_word(x) & 0x7FFFFFFF
    if ix >= 0x40200000:
        return tables[0]
    if ix >= 0x40122E8B:
        return tables[1]
    if ix >= 0x4006DB6D:
        return tables[2]
    return tables[3]


def _pone(x: float) -> float:
    p, q = _select(x, _P_TABLES)
    z = 1.0 / (x * x)
    r = _horner(z, p)
    s = 1.0 + z * _horner(z, q)
    return 1.0 + r / s


def _qone(x: float) -> float:
    p, q = _select(x, _Q_TABLES)
    z = 1.0 / (x * x)
    r = _horner(z, p)
    s = 1.0 + z * _horner(z, q)
    return (0.375 + r / s) / x


def _phase_terms(x: float, ix: int) -> tuple[float, float]:
    """Return ``(-sin x - cos x, sin x - cos x)`` avoiding cancellation."""
    s = math.sin(x)
    c = math.cos(x)
    ss = -s - c
    cc = s - c
    if ix < 0x7FE00000:
        z = math.cos(x + x)
        if s * c > 0.0:
            cc = z / ss
        else:
            ss = z / cc
    return ss, cc


def j1(x: float) -> float:
    """Return the Bessel function of the first kind of order one.

    ``j1(nan)`` is NaN, ``j1(0)`` is 0 and ``j1(+-inf)`` is 0.
    """
    x = float(x)
    hx = high_word(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x7FF00000:
        return 1.0 / x
    y = abs(x)
    if ix >= 0x40000000:
        ss, cc = _phase_terms(y, ix)
        if ix > 0x48000000:
            z = (_INVSQRTPI * cc) / sqrt(y)
        else:
            u = _pone(y)
            v = _qone(y)
            z = _INVSQRTPI * (u * cc - v * ss) / sqrt(y)
        return -z if hx < 0 else z
    if ix < 0x3E400000:
        return 0.5 * x
    z = x * x
    r = z * (_R00 + z * (_R01 + z * (_R02 + z * _R03)))
    s = 1.0 + z * (_S01 + z * (_S02 + z * (_S03 + z * (_S04 + z * _S05))))
    r *= x
    return x * 0.5 + r / s


def y1(x: float) -> float:
    """Return the Bessel function of the second kind of order one.

    ``y1(0)`` is ``-inf``, ``y1`` of a negative number or ``-inf`` is NaN,
    and ``y1(inf)`` is 0.
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
        u = _pone(x)
        v = _qone(x)
        return _INVSQRTPI * (u * ss + v * cc) / sqrt(x)
    if ix <= 0x3C900000:
        return -_TPI / x
    z = x * x
    u = _horner(z, _U0)
    v = 1.0 + z * _horner(z, _V0)
    return x * (u / v) + _TPI * (j1(x) * log(x) - 1.0 / x)