import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fdmath.bessel_n import jn, yn
from fdmath.bessel_one import j1, y1
from fdmath.bessel_zero import j0, y0


@pytest.mark.parametrize("x", [0.3, 1.0, 2.5, 17.0, -4.0])
def test_low_orders_delegate(x):
    assert jn(0, x) == j0(x)
    assert jn(1, x) == j1(x)


@pytest.mark.parametrize("x", [0.3, 1.0, 2.5, 17.0])
def test_low_orders_delegate_second_kind(x):
    assert yn(0, x) == y0(x)
    assert yn(1, x) == y1(x)
    assert yn(-1, x) == -y1(x)


def test_jn_special_values():
    assert jn(3, 0.0) == 0.0
    assert jn(5, math.inf) == 0.0
    assert math.isnan(jn(4, math.nan))
    assert jn(34, 1e-10) == 0.0


def test_yn_special_values():
    assert yn(3, 0.0) == -math.inf
    assert math.isnan(yn(3, -1.0))
    assert math.isnan(yn(2, math.nan))
    assert yn(4, math.inf) == 0.0


def test_yn_overflow_stops_at_negative_infinity():
    assert yn(300, 1e-5) == -math.inf
    assert yn(-301, 1e-5) == math.inf


def test_known_values():
    assert jn(2, 1.0) == pytest.approx(0.11490348493190048, rel=1e-12)
    assert yn(2, 1.0) == pytest.approx(-1.6506826068162546, rel=1e-12)


def test_tiny_argument_taylor_term():
    x = 1e-10
    assert jn(2, x) == pytest.approx((x / 2) ** 2 / 2, rel=1e-15)


def test_deep_underflow_order():
    value = jn(200, 1.0)
    assert 0.0 <= value < 1e-300


@given(st.integers(min_value=2, max_value=30), st.floats(min_value=-50.0, max_value=50.0))
def test_jn_symmetries(n, x):
    expected = jn(n, x) * (-1) ** n
    assert jn(-n, x) == expected
    assert jn(n, -x) == expected


@given(st.integers(min_value=2, max_value=10), st.floats(min_value=0.5, max_value=50.0))
def test_yn_negative_order(n, x):
    assert yn(-n, x) == yn(n, x) * (-1) ** n


@given(st.integers(min_value=1, max_value=20), st.floats(min_value=0.5, max_value=50.0))
def test_jn_recurrence(n, x):
    lhs = jn(n - 1, x) + jn(n + 1, x)
    rhs = 2.0 * n / x * jn(n, x)
    assert math.isclose(lhs, rhs, rel_tol=1e-8, abs_tol=1e-12)


@given(st.integers(min_value=1, max_value=10), st.floats(min_value=1.0, max_value=50.0))
def test_yn_recurrence(n, x):
    lhs = yn(n - 1, x) + yn(n + 1, x)
    rhs = 2.0 * n / x * yn(n, x)
    assert math.isclose(lhs, rhs, rel_tol=1e-8, abs_tol=1e-12)


@given(st.integers(min_value=0, max_value=5), st.floats(min_value=1.0, max_value=30.0))
def test_wronskian(n, x):
    lhs = jn(n + 1, x) * yn(n, x) - jn(n, x) * yn(n + 1, x)
    assert math.isclose(lhs, 2.0 / (math.pi * x), rel_tol=1e-8)