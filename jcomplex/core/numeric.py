"""
Scalar helpers shared by the complex layers.

Tolerances, rounding, closeness and the minimal-coefficient formatter used
when rendering a Complex. Also hosts ``ieee``, which evaluates a NumPy ufunc
on float64 scalars so that overflow, division by zero and domain errors come
back as inf/NaN instead of Python exceptions.
"""

import math
from typing import Callable

import numpy as np

# How close is "close enough"
EPSILON: float = 1.0e-10
# Close enough when one side was produced in single precision
EPSILON_FLOAT: float = 1.0e-6
# Tolerance for the is_zero / is_real / is_imaginary classifications
EPSILON_STRICT: float = EPSILON / 1000.0

# Symbol for sqrt(-1)
J_CHAR: str = "j"


def ieee(func: Callable, *args: float) -> float:
    """
    Evaluate ``func`` on float64 scalars with IEEE special values instead of errors.

    Args:
        func: NumPy ufunc (``np.exp``, ``np.divide``, ``np.power``, ...)
        *args: Real operands

    Returns:
        Python float, possibly ±inf or NaN
    """
    with np.errstate(all="ignore"):
        return float(func(*(np.float64(a) for a in args)))


def ieee_div(numerator: float, denominator: float) -> float:
    """Float division that yields ±inf/NaN for a zero denominator."""
    if denominator != 0.0:
        return numerator / denominator
    return ieee(np.divide, numerator, denominator)


def round_to(value: float, decimals: int) -> float:
    """
    Round to ``decimals`` fractional digits, halves away from zero.

    A negative ``decimals`` rounds to a power of ten, so ``round_to(x, -2)``
    rounds to the nearest hundred.
    """
    if not math.isfinite(value):
        return value
    multiplier = ieee(np.power, 10.0, decimals)
    if multiplier == 0.0:
        return math.copysign(0.0, value)
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return value
    magnitude = abs(scaled)
    # Doubles at or above 2**52 have no fractional bits
    if magnitude >= 2.0 ** 52:
        rounded = magnitude
    else:
        rounded = math.floor(magnitude)
        if magnitude - rounded >= 0.5:
            rounded += 1.0
    return math.copysign(rounded / multiplier, value)


def close(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """True if ``a`` and ``b`` are within ``epsilon``; never true for NaN."""
    if math.isnan(a) or math.isnan(b):
        return False
    return abs(a - b) < epsilon


def square(x: float) -> float:
    return x * x


def fmt(value: float, suffix: str = "") -> str:
    """
    Render a finite real with as few characters as possible.

    Trailing fractional zeros are dropped, and a bare coefficient of one is
    dropped in front of ``suffix``, so ``fmt(-1.0, "j")`` gives ``"-j"``.
    """
    negative = value < 0.0
    positive = abs(value)
    int_part = int(positive + EPSILON)
    fraction = positive - int_part
    print_fraction = not close(fraction, 0.0)

    parts = []
    if negative:
        parts.append("-")
    if print_fraction:
        parts.append(np.format_float_positional(positive, trim="-"))
    elif int_part != 1 or not suffix:
        parts.append(str(int_part))
    parts.append(suffix)
    return "".join(parts)
