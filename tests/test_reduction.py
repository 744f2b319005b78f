import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fdmath.reduction import kernel_cos, rem_pio2


def _check_quadrant(x, n, y0, y1):
    r = y0 + y1
    sines = [math.sin(r), math.cos(r), -math.sin(r), -math.cos(r)]
    cosines = [math.cos(r), -math.sin(r), -math.cos(r), math.sin(r)]
    assert math.isclose(math.sin(x), sines[n % 4], abs_tol=1e-12)
    assert math.isclose(math.cos(x), cosines[n % 4], abs_tol=1e-12)


@pytest.mark.parametrize("x", [0.0, 0.5, -0.7, 1e-300])
def test_small_arguments_are_unchanged(x):
    assert rem_pio2(x) == (0, x, 0.0)


def test_near_half_pi():
    n, y0, y1 = rem_pio2(math.pi / 2)
    assert n == 1
    assert abs(y0 + y1) < 1e-15


def test_nan_and_infinity():
    for value in (math.nan, math.inf, -math.inf):
        n, y0, y1 = rem_pio2(value)
        assert n == 0
        assert math.isnan(y0) and math.isnan(y1)


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_medium_reduction_matches_trig(x):
    n, y0, y1 = rem_pio2(x)
    assert abs(y0) <= math.pi / 4 * (1 + 1e-9)
    _check_quadrant(x, n, y0, y1)


@pytest.mark.parametrize("x", [1e22, 1e300, 1.7e308, 123456789.0, 2.0**60])
def test_large_reduction_matches_trig(x):
    n, y0, y1 = rem_pio2(x)
    assert abs(y0) <= math.pi / 4 * (1 + 1e-9)
    _check_quadrant(x, n, y0, y1)


@given(st.floats(min_value=1.0, max_value=1e300, allow_nan=False))
def test_reduction_is_odd(x):
    n, y0, y1 = rem_pio2(x)
    assert rem_pio2(-x) == (-n, -y0, -y1)


def test_kernel_cos_of_zero():
    assert kernel_cos(0.0, 0.0) == 1.0


@given(st.floats(min_value=-math.pi / 4, max_value=math.pi / 4))
def test_kernel_cos_matches_cos(x):
    assert math.isclose(kernel_cos(x, 0.0), math.cos(x), rel_tol=1e-15)


def test_kernel_cos_uses_tail():
    x = 0.75
    tail = 1e-17
    assert math.isclose(kernel_cos(x, tail), math.cos(x) - math.sin(x) * tail, rel_tol=1e-15)
    assert math.isclose(kernel_cos(-0.5, 0.0), kernel_cos(0.5, 0.0), rel_tol=0.0)