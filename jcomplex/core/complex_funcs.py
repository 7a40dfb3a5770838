"""
Transcendental, trigonometric and hyperbolic functions of a Complex.

Everything here is built from exp, ln, sqrt and the four arithmetic
operators. All functions are total: singular points come back as
``INFINITY`` or as NaN parts, never as exceptions. Functions that take a
reciprocal of a zero argument return ``INFINITY`` directly.
"""

import math
import numbers

import numpy as np

from .complex_scalar import (
    INFINITY,
    J,
    Complex,
    ComplexLike,
    as_complex,
    c_sqrt,
    exp_i_theta,
)
from .numeric import ieee

HALF_PI = math.pi / 2.0


# ============================================================================
# Exponential, logarithm, power
# ============================================================================

def c_exp(z: ComplexLike) -> Complex:
    """e^(a + bj) = e^a · e^(bj)"""
    z = as_complex(z)
    scale = ieee(np.exp, z.re)
    unit = exp_i_theta(z.im)
    return Complex(scale * unit.re, scale * unit.im)


def c_ln(z: ComplexLike) -> Complex:
    """
    Principal natural logarithm, the inverse of ``c_exp``.

    ln(ρ·e^(jθ)) = ln ρ + jθ, with θ in (-π, π]. The logarithm of zero is
    ``INFINITY``.
    """
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    rho, theta = z.polar()
    return Complex(math.log(rho), theta)


def c_pow(z: ComplexLike, exponent: ComplexLike) -> Complex:
    """
    ``z`` raised to ``exponent``.

    A real exponent takes the polar shortcut ρ^p · e^(jpθ); anything else is
    z^w = e^(w·ln z).
    """
    z = as_complex(z)
    if isinstance(exponent, numbers.Real):
        return _pow_real(z, float(exponent))
    w_ln_z = as_complex(exponent) * c_ln(z)
    return c_exp(w_ln_z)


def _pow_real(z: Complex, exponent: float) -> Complex:
    rho, theta = z.polar()
    magnitude = ieee(np.power, rho, exponent)
    unit = exp_i_theta(exponent * theta)
    return Complex(magnitude * unit.re, magnitude * unit.im)


# ============================================================================
# Circular functions
# ============================================================================

def c_sin(z: ComplexLike) -> Complex:
    z = as_complex(z)
    return Complex(
        ieee(np.sin, z.re) * ieee(np.cosh, z.im),
        ieee(np.cos, z.re) * ieee(np.sinh, z.im),
    )


def c_cos(z: ComplexLike) -> Complex:
    z = as_complex(z)
    return Complex(
        ieee(np.cos, z.re) * ieee(np.cosh, z.im),
        -ieee(np.sin, z.re) * ieee(np.sinh, z.im),
    )


def c_tan(z: ComplexLike) -> Complex:
    z = as_complex(z)
    tan_re = ieee(np.tan, z.re)
    tanh_im = math.tanh(z.im)
    numerator = Complex(tan_re, tanh_im)
    denominator = Complex(1.0, -tan_re * tanh_im)
    return numerator / denominator


def c_sec(z: ComplexLike) -> Complex:
    cos = c_cos(z)
    if cos.is_zero:
        return INFINITY
    return cos.reciprocal()


def c_csc(z: ComplexLike) -> Complex:
    sin = c_sin(z)
    if sin.is_zero:
        return INFINITY
    return sin.reciprocal()


def c_cot(z: ComplexLike) -> Complex:
    sin = c_sin(z)
    if sin.is_zero:
        return INFINITY
    return c_cos(z) / sin


# ============================================================================
# Inverse circular functions (principal values)
# ============================================================================

def c_asin(z: ComplexLike) -> Complex:
    """asin(z) = j·ln(sqrt(1 - z²) - zj)"""
    z = as_complex(z)
    return c_ln(c_sqrt(1.0 - z * z) - z * J) * J


def c_acos(z: ComplexLike) -> Complex:
    return HALF_PI - c_asin(z)


def c_atan(z: ComplexLike) -> Complex:
    """atan(z) = (-j/2)·ln((j - z)/(j + z))"""
    z = as_complex(z)
    return c_ln((J - z) / (J + z)) * -J / 2.0


def c_acot(z: ComplexLike) -> Complex:
    """acot(z) = (-j/2)·ln((z + j)/(z - j))"""
    z = as_complex(z)
    return c_ln((z + J) / (z - J)) * -J / 2.0


def c_acsc(z: ComplexLike) -> Complex:
    """acsc(z) = j·ln(sqrt(1 - 1/z²) - j/z)"""
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    inverse = z.reciprocal()
    return c_ln(c_sqrt(1.0 - inverse * inverse) - J / z) * J


def c_asec(z: ComplexLike) -> Complex:
    return HALF_PI - c_acsc(z)


# ============================================================================
# Hyperbolic functions
# ============================================================================

def c_cosh(z: ComplexLike) -> Complex:
    z = as_complex(z)
    return (c_exp(z) + c_exp(-z)) / 2.0


def c_sinh(z: ComplexLike) -> Complex:
    z = as_complex(z)
    return (c_exp(z) - c_exp(-z)) / 2.0


def c_tanh(z: ComplexLike) -> Complex:
    exp_2z = c_exp(as_complex(z) * 2.0)
    return (exp_2z - 1.0) / (exp_2z + 1.0)


def c_coth(z: ComplexLike) -> Complex:
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    exp_2z = c_exp(z * 2.0)
    return (exp_2z + 1.0) / (exp_2z - 1.0)


def c_sech(z: ComplexLike) -> Complex:
    return c_cosh(z).reciprocal()


def c_csch(z: ComplexLike) -> Complex:
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    return 2.0 / (c_exp(z) - c_exp(-z))


# ============================================================================
# Inverse hyperbolic functions (principal values)
# ============================================================================

def c_asinh(z: ComplexLike) -> Complex:
    """asinh(z) = ln(z + sqrt(z² + 1))"""
    z = as_complex(z)
    return c_ln(z + c_sqrt(z * z + 1.0))


def c_acosh(z: ComplexLike) -> Complex:
    """acosh(z) = ln(z + sqrt(z + 1)·sqrt(z - 1))"""
    z = as_complex(z)
    return c_ln(z + c_sqrt(z + 1.0) * c_sqrt(z - 1.0))


def c_atanh(z: ComplexLike) -> Complex:
    """atanh(z) = (ln(1 + z) - ln(1 - z)) / 2"""
    z = as_complex(z)
    return (c_ln(z + 1.0) - c_ln(1.0 - z)) / 2.0


def c_acoth(z: ComplexLike) -> Complex:
    """acoth(z) = (ln(1 + 1/z) - ln(1 - 1/z)) / 2"""
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    inverse = z.reciprocal()
    return (c_ln(1.0 + inverse) - c_ln(1.0 - inverse)) / 2.0


def c_asech(z: ComplexLike) -> Complex:
    """asech(z) = ln(1/z + sqrt(1/z + 1)·sqrt(1/z - 1))"""
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    inverse = z.reciprocal()
    return c_ln(inverse + c_sqrt(inverse + 1.0) * c_sqrt(inverse - 1.0))


def c_acsch(z: ComplexLike) -> Complex:
    """acsch(z) = ln(1/z + sqrt(1/z² + 1))"""
    z = as_complex(z)
    if z.is_zero:
        return INFINITY
    return c_ln(z.reciprocal() + c_sqrt((z * z).reciprocal() + 1.0))
