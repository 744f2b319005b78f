import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fdmath.explog import exp, log, log10, pow


# exp


def test_exp_zero_is_exact():
    assert exp(0.0) == 1.0
    assert exp(-0.0) == 1.0


def test_exp_infinities():
    assert exp(math.inf) == math.inf
    assert exp(-math.inf) == 0.0


def test_exp_nan():
    assert str(exp(math.nan)) == "nan"


def test_exp_overflow_and_underflow_thresholds():
    assert exp(7.09782712893383973096e02) < math.inf
    assert exp(710.0) == math.inf
    assert exp(-7.45133219101941108420e02) >= 0.0
    assert exp(-746.0) == 0.0


def test_exp_tiny_argument():
    x = 1e-20
    assert exp(x) == 1.0 + x


@pytest.mark.parametrize("x", [0.3, 0.5, 1.0, -1.0, 2.5, 10.0, -20.0, 300.0, 709.0, -708.0])
def test_exp_matches_reference(x):
    expected = math.exp(x)
    assert abs(exp(x) - expected) <= 2 * math.ulp(expected)


def test_exp_subnormal_result():
    assert abs(exp(-740.0) - math.exp(-740.0)) <= 2 * math.ulp(0.0)


@given(st.floats(min_value=-700.0, max_value=700.0))
def test_exp_close_to_reference(x):
    expected = math.exp(x)
    assert abs(exp(x) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=-300.0, max_value=300.0), st.floats(min_value=-300.0, max_value=300.0))
def test_exp_of_sum_is_product(a, b):
    assert math.isclose(exp(a + b), exp(a) * exp(b), rel_tol=1e-12)


# log


def test_log_one_is_zero():
    assert log(1.0) == 0.0


def test_log_special_cases():
    assert log(0.0) == -math.inf
    assert log(-0.0) == -math.inf
    assert log(math.inf) == math.inf
    assert str(log(-1.0)) == "nan"
    assert str(log(-math.inf)) == "nan"
    assert str(log(math.nan)) == "nan"


@pytest.mark.parametrize("k", [-1074, -1022, -1, 1, 2, 100, 1023])
def test_log_powers_of_two(k):
    expected = k * math.log(2.0)
    assert abs(log(math.ldexp(1.0, k)) - expected) <= 2 * math.ulp(expected)


@pytest.mark.parametrize("x", [1.0000001, 0.9999999, 1.5, 2.0, 10.0, 1e-300, 5e-324, 1.7e308])
def test_log_matches_reference(x):
    expected = math.log(x)
    assert abs(log(x) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=5e-324, max_value=1.7e308))
def test_log_close_to_reference(x):
    expected = math.log(x)
    assert abs(log(x) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=-700.0, max_value=700.0))
def test_log_inverts_exp(x):
    assert math.isclose(log(exp(x)), x, rel_tol=1e-14, abs_tol=1e-15)


# log10


@pytest.mark.parametrize("n", range(23))
def test_log10_of_powers_of_ten_is_exact(n):
    assert log10(float(10**n)) == float(n)


def test_log10_special_cases():
    assert log10(0.0) == -math.inf
    assert log10(math.inf) == math.inf
    assert str(log10(-2.0)) == "nan"
    assert str(log10(math.nan)) == "nan"


@pytest.mark.parametrize("x", [0.5, 3.0, 1e-10, 5e-324, 1e300, 0.001])
def test_log10_matches_reference(x):
    expected = math.log10(x)
    assert abs(log10(x) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=5e-324, max_value=1.7e308))
def test_log10_close_to_reference(x):
    expected = math.log10(x)
    assert abs(log10(x) - expected) <= 2 * math.ulp(expected)


# pow


@pytest.mark.parametrize("x", [0.0, -0.0, 3.0, -2.5, math.inf, -math.inf, math.nan])
def test_pow_zero_exponent_is_one(x):
    assert pow(x, 0.0) == 1.0
    assert pow(x, -0.0) == 1.0


@pytest.mark.parametrize("x", [3.5, -2.0, 0.1])
def test_pow_one_exponent_is_identity(x):
    assert pow(x, 1.0) == x


def test_pow_nan_propagates():
    assert str(pow(2.0, math.nan)) == "nan"
    assert str(pow(math.nan, 2.0)) == "nan"


def test_pow_infinite_exponent():
    assert pow(2.0, math.inf) == math.inf
    assert pow(-2.0, -math.inf) == 0.0
    assert pow(0.5, math.inf) == 0.0
    assert pow(-0.5, -math.inf) == math.inf
    assert str(pow(1.0, math.inf)) == "nan"
    assert str(pow(-1.0, -math.inf)) == "nan"


def test_pow_zero_base():
    assert pow(0.0, 2.5) == 0.0
    r = pow(-0.0, 2.0)
    assert r == 0.0 and math.copysign(1.0, r) == 1.0
    assert pow(0.0, -2.5) == math.inf
    assert pow(-0.0, -2.0) == math.inf
    r = pow(-0.0, 3.0)
    assert r == 0.0 and math.copysign(1.0, r) == -1.0
    assert pow(-0.0, -3.0) == -math.inf
    assert pow(0.0, -1.0) == math.inf
    assert pow(-0.0, -1.0) == -math.inf


def test_pow_infinite_base():
    assert pow(math.inf, 0.5) == math.inf
    assert pow(math.inf, -0.5) == 0.0
    assert pow(-math.inf, 3.0) == -math.inf
    assert pow(-math.inf, 2.0) == math.inf
    r = pow(-math.inf, -3.0)
    assert r == 0.0 and math.copysign(1.0, r) == -1.0


def test_pow_negative_base_non_integer_exponent_is_nan():
    assert str(pow(-2.0, 0.5)) == "nan"
    assert str(pow(-1.0, 1.5)) == "nan"
    assert str(pow(-8.0, 1.0 / 3.0)) == "nan"


def test_pow_negative_base_integer_exponent_sign():
    assert pow(-2.0, 3.0) == -pow(2.0, 3.0)
    assert pow(-2.0, 4.0) == pow(2.0, 4.0)
    assert pow(-1.0, 1e20) == 1.0


@pytest.mark.parametrize("a,b", [(2, 10), (3, 20), (7, 18), (10, 22), (5, 5), (2, 52), (-3, 7), (-6, 11)])
def test_pow_integer_powers_are_exact(a, b):
    assert pow(float(a), float(b)) == float(a**b)


def test_pow_reciprocal_integer_exponent():
    assert pow(2.0, -3.0) == 0.125
    assert pow(2.0, -1074.0) == 5e-324


def test_pow_half_is_sqrt():
    assert pow(2.0, 0.5) == math.sqrt(2.0)


def test_pow_overflow_and_underflow():
    assert pow(10.0, 400.0) == math.inf
    assert pow(-10.0, 401.0) == -math.inf
    assert pow(10.0, -400.0) == 0.0
    assert pow(2.0, 1e10) == math.inf
    assert pow(2.0, -1e10) == 0.0
    assert pow(0.5, 1e30) == 0.0
    assert pow(0.5, -1e30) == math.inf


def test_pow_near_one_with_huge_exponent():
    x = 1.0 + 2.0**-40
    y = 2.0**33
    assert math.isclose(pow(x, y), math.exp(y * math.log1p(2.0**-40)), rel_tol=1e-9)


def test_pow_subnormal_base():
    x = 5e-320
    expected = math.pow(x, 0.25)
    assert abs(pow(x, 0.25) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=0.01, max_value=100.0), st.floats(min_value=-50.0, max_value=50.0))
def test_pow_close_to_reference(x, y):
    expected = math.pow(x, y)
    assert abs(pow(x, y) - expected) <= 2 * math.ulp(expected)


@given(st.floats(min_value=0.1, max_value=10.0), st.integers(min_value=-30, max_value=30))
def test_pow_integer_exponent_recurrence(x, n):
    assert math.isclose(pow(x, float(n + 1)), pow(x, float(n)) * x, rel_tol=1e-14)