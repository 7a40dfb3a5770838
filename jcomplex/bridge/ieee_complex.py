"""Conversions between Complex and Python's builtin IEEE numbers."""

import numbers

from ..core import Complex


def from_ieee(x) -> Complex:
    """
    Convert a Python int, float or complex to Complex.

    Signed zeros, infinities and NaN are carried over component by component.

    Raises:
        TypeError: If ``x`` is not a number
    """
    if isinstance(x, Complex):
        return x
    if isinstance(x, numbers.Real):
        return Complex(float(x), 0.0)
    if isinstance(x, numbers.Complex):
        return Complex(float(x.real), float(x.imag))
    raise TypeError(f"Expected a number, got {type(x).__name__}")


def to_ieee(z: Complex) -> complex:
    """Convert a Complex to the builtin complex, parts unchanged."""
    if not isinstance(z, Complex):
        raise TypeError(f"Expected Complex, got {type(z).__name__}")
    return complex(z.re, z.im)
