"""IEEE 754 double-precision elementary, gamma and Bessel functions."""

__version__ = "0.1.0"