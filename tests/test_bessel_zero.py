import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fdmath.bessel_zero import j0, y0


def _j0_by_integral(x: float, points: int = 512) -> float:
    # J0(x) = 1/(2 pi) * integral over a full period of cos(x sin t)
    total = math.fsum(
        math.cos(x * math.sin(2.0 * math.pi * k / points)) for k in range(points)
    )
    return total / points


def _ode_residual(f, x: float, h: float = 1e-3) -> float:
    fp = (f(x + h) - f(x - h)) / (2.0 * h)
    fpp = (f(x + h) - 2.0 * f(x) + f(x - h)) / (h * h)
    return x * x * fpp + x * fp + x * x * f(x)


def test_j0_special_values():
    assert j0(0.0) == 1.0
    assert j0(-0.0) == 1.0
    assert j0(math.inf) == 0.0
    assert j0(-math.inf) == 0.0
    assert math.isnan(j0(math.nan))


def test_j0_tiny_argument_is_one():
    assert j0(1e-10) == 1.0
    assert j0(-1e-10) == 1.0


def test_j0_known_value_at_one():
    assert j0(1.0) == pytest.approx(0.7651976865579666, rel=1e-15)


def test_y0_special_values():
    assert y0(0.0) == -math.inf
    assert y0(-0.0) == -math.inf
    assert y0(math.inf) == 0.0
    assert math.isnan(y0(-math.inf))
    assert math.isnan(y0(-1.0))
    assert math.isnan(y0(math.nan))


def test_y0_known_value_at_one():
    assert y0(1.0) == pytest.approx(0.08825696421567696, rel=1e-14)


def test_y0_small_argument_is_logarithmic():
    x = 1e-12
    expected = (2.0 / math.pi) * (math.log(x / 2.0) + 0.5772156649015329)
    assert y0(x) == pytest.approx(expected, rel=1e-12)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_j0_is_even(x):
    assert j0(x) == j0(-x)


@given(st.floats(min_value=0.0, max_value=1e300, allow_nan=False))
def test_j0_is_bounded(x):
    assert abs(j0(x)) <= 1.0


@settings(max_examples=60)
@given(st.floats(min_value=0.0, max_value=40.0, allow_nan=False))
def test_j0_matches_integral_representation(x):
    assert j0(x) == pytest.approx(_j0_by_integral(x), abs=1e-13)


@pytest.mark.parametrize("x", [0.7, 1.5, 2.5, 3.3, 5.0, 7.9, 12.0, 30.0])
def test_j0_satisfies_bessel_equation(x):
    assert abs(_ode_residual(j0, x)) < 1e-5 * x * x


@pytest.mark.parametrize("x", [0.7, 1.5, 2.5, 3.3, 5.0, 7.9, 12.0, 30.0])
def test_y0_satisfies_bessel_equation(x):
    assert abs(_ode_residual(y0, x)) < 1e-5 * x * x


@pytest.mark.parametrize("edge", [1.0, 2.0, 2.857142857142857, 4.545454545454545, 8.0])
def test_functions_are_continuous_across_interval_edges(edge):
    below = edge - edge * 2.0**-50
    assert j0(below) == pytest.approx(j0(edge), abs=1e-13)
    assert y0(below) == pytest.approx(y0(edge), abs=1e-13)


@settings(max_examples=60)
@given(st.floats(min_value=1e4, max_value=1e300, allow_nan=False))
def test_large_argument_modulus(x):
    modulus = j0(x) ** 2 + y0(x) ** 2
    assert modulus * math.pi * x / 2.0 == pytest.approx(1.0, rel=1e-6)


@given(st.floats(min_value=0.0, max_value=2.0, exclude_min=True))
def test_y0_is_increasing_below_first_extremum(x):
    assert y0(x) <= y0(min(x * 1.01, 2.19))