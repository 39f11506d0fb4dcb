"""Small functions exercised by the demo tests."""

import math


def total(*args):
    """Sum numbers, accepting numeric strings."""
    return sum(float(a) for a in args)


def power(base, exponent):
    """Integer power; NaN for negative or fractional exponents."""
    if exponent < 0 or exponent != int(exponent):
        return math.nan
    result = 1
    for _ in range(int(exponent)):
        result *= base
    return result
