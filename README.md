# fdmath

IEEE 754 double-precision math functions written in Python. Each function
works through a fixed sequence of floating-point and integer steps on the
bits of its argument, so results do not depend on the C library the
interpreter was built with, except where a function calls into Python's
`math` module (see below).

## Installation

```
pip install fdmath
```

To run the tests:

```
pip install "fdmath[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `fdmath.exact` | `sqrt`, `fmod`, `remainder`, `scalb`, and the word helpers `high_word`, `low_word`, `from_words`, `with_high`, `with_low` |
| `fdmath.explog` | `exp`, `log`, `log10`, `pow` |
| `fdmath.inverse` | `acos`, `asin`, `atan2`, `hypot` |
| `fdmath.hyperbolic` | `acosh`, `atanh`, `cosh`, `sinh` |
| `fdmath.reduction` | `rem_pio2`, `kernel_cos` |
| `fdmath.gamma` | `lgamma`, `lgamma_r`, `gamma`, `gamma_r` |
| `fdmath.bessel_zero` | `j0`, `y0` |
| `fdmath.bessel_one` | `j1`, `y1` |
| `fdmath.bessel_n` | `jn`, `yn` |

## Usage

```python
from fdmath.exact import sqrt, fmod, remainder
from fdmath.explog import exp, log, pow
from fdmath.gamma import lgamma_r
from fdmath.bessel_n import jn

sqrt(2.0)             # 1.4142135623730951, correctly rounded
fmod(7.0, 3.0)        # 1.0, computed exactly
remainder(7.0, 4.0)   # -1.0  (quotient rounded to nearest, ties to even)
pow(2.0, 10.0)        # 1024.0
value, sign = lgamma_r(-0.5)   # log|Gamma(-0.5)| and the sign of Gamma(-0.5)
jn(2, 1.0)            # Bessel function of the first kind, order 2
```

### Word helpers

`high_word(x)` returns the upper 32 bits of a double as a signed integer and
`low_word(x)` the lower 32 bits as an unsigned one. `from_words(high, low)`
builds a double from two words; `with_high` and `with_low` replace one word
of an existing double.

### Argument reduction

`rem_pio2(x)` returns a tuple `(n, y0, y1)` with `x = n*pi/2 + y0 + y1` and
`|y0 + y1| <= pi/4`. For very large arguments only `n` modulo 8 is given.
`kernel_cos(x, y)` returns `cos(x + y)` for `|x| <= pi/4`, where `y` is the
tail of `x`.

## Special values

Special values follow IEEE 754 and are returned, not raised. Where the
mathematical result is undefined the functions return `nan`, for example
`sqrt(-1.0)` or `acos(2.0)`. Poles return a signed infinity, for example
`log(0.0)` is `-inf` and `atanh(1.0)` is `inf`. Results that overflow return
an infinity and results that underflow return zero.

`lgamma_r` and `gamma_r` return a pair `(value, sign)`, where `sign` is the
sign of Gamma(x). `lgamma` and `gamma` return only the value.

## What this package does not provide

The package has no `sin`, `cos`, `tan`, `atan`, `asinh`, `tanh`, `expm1`,
`log1p`, `cbrt`, `erf` or similar functions of its own, and no command-line
tool. Where the functions above need one of these, they call Python's
`math` module: `atan2` uses `math.atan`; `cosh`, `sinh`, `acosh` and
`atanh` use `math.expm1` or `math.log1p`; the Bessel and gamma functions use
`math.sin` and `math.cos`. Results of those functions can therefore depend
on the platform's C library in their last bits.