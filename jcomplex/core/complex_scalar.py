"""
Complex value type and its algebra.

A Complex is an immutable pair of doubles ``re + im·j`` (j, not i, is the
symbol for sqrt(-1) here). Arithmetic accepts Complex, any ``numbers.Real``
and the builtin ``complex`` on either side of an operator; scalars are
promoted to Complex before the operation.

Equality is tolerant: two values are equal when both components are within
EPSILON. NaN is never equal to anything, itself included, and every infinite
value is the same point, so any two infinite values are equal.
"""

import math
import numbers
from typing import ClassVar, NamedTuple, Optional, Union

from .errors import ComplexDomainError
from .numeric import (
    EPSILON,
    EPSILON_STRICT,
    J_CHAR,
    close as _close,
    fmt,
    ieee_div,
    round_to,
    square,
)

ComplexLike = Union["Complex", numbers.Number]


class Polar(NamedTuple):
    """Polar coordinates: magnitude ``rho`` and angle ``theta`` (radians)."""
    rho: float
    theta: float

    def to_complex(self) -> "Complex":
        """Rectangular form of these coordinates."""
        unit = exp_i_theta(self.theta)
        return Complex(self.rho * unit.re, self.rho * unit.im)


class Complex:
    """
    Immutable complex number with tolerant equality.

    Args:
        re: Real part, any real number (widened to float)
        im: Imaginary part, defaults to 0.0

    Raises:
        TypeError: If either part is not a real number
    """

    __slots__ = ("_re", "_im")

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    J: ClassVar["Complex"]
    PI_C: ClassVar["Complex"]
    PI_J: ClassVar["Complex"]
    INFINITY: ClassVar["Complex"]

    def __init__(self, re: numbers.Real, im: numbers.Real = 0.0):
        for name, part in (("re", re), ("im", im)):
            if not isinstance(part, numbers.Real):
                raise TypeError(
                    f"Complex {name} must be a real number, got {type(part).__name__}"
                )
        object.__setattr__(self, "_re", float(re))
        object.__setattr__(self, "_im", float(im))

    def __setattr__(self, name, value):
        raise AttributeError(f"Complex is immutable; cannot set '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Complex is immutable; cannot delete '{name}'")

    def __reduce__(self):
        return (Complex, (self._re, self._im))

    # ------------------------------------------------------------------
    # Components and classification
    # ------------------------------------------------------------------

    @property
    def re(self) -> float:
        """Real part."""
        return self._re

    @property
    def im(self) -> float:
        """Imaginary part."""
        return self._im

    # Same names as the builtin complex, for duck typing
    real = re
    imag = im

    @property
    def is_nan(self) -> bool:
        """Either part is NaN."""
        return math.isnan(self._re) or math.isnan(self._im)

    @property
    def is_infinite(self) -> bool:
        """Either part is infinite, and neither is NaN."""
        return not self.is_nan and (math.isinf(self._re) or math.isinf(self._im))

    @property
    def is_zero(self) -> bool:
        """Both parts are within EPSILON/1000 of zero."""
        return abs(self._re) <= EPSILON_STRICT and abs(self._im) <= EPSILON_STRICT

    @property
    def is_real(self) -> bool:
        """The imaginary part is within EPSILON/1000 of zero."""
        return _close(self._im, 0.0, EPSILON_STRICT)

    @property
    def is_imaginary(self) -> bool:
        """The real part is within EPSILON/1000 of zero."""
        return _close(self._re, 0.0, EPSILON_STRICT)

    # ------------------------------------------------------------------
    # Comparison and hashing
    # ------------------------------------------------------------------

    def close(self, other: ComplexLike, epsilon: float = EPSILON) -> bool:
        """
        True if both parts of ``other`` are within ``epsilon`` of ours.

        NaN is never close to anything; two infinite values are always close.
        """
        other = as_complex(other)
        if self.is_nan or other.is_nan:
            return False
        if self.is_infinite and other.is_infinite:
            return True
        return _close(self._re, other._re, epsilon) and _close(self._im, other._im, epsilon)

    def __eq__(self, other) -> bool:
        if isinstance(other, numbers.Real):
            try:
                other = float(other)
            except OverflowError:
                # Finite but beyond the double range, like 10**400
                return False
            if self.is_infinite and math.isinf(other):
                return True
            return self.is_real and _close(self._re, other)
        other = _coerce(other)
        if other is None:
            return NotImplemented
        # NaN is unequal to everything, including itself
        if self.is_nan or other.is_nan:
            return False
        # There is a single infinity on the complex plane
        if self.is_infinite and other.is_infinite:
            return True
        return self.close(other)

    def __hash__(self) -> int:
        if self.is_nan:
            return object.__hash__(self)
        if self.is_infinite:
            return hash(math.inf)
        # Matches hash(x) for an exactly real value x
        return hash(complex(self._re, self._im))

    def __bool__(self) -> bool:
        return not self.is_zero

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def __complex__(self) -> complex:
        return complex(self._re, self._im)

    def __float__(self) -> float:
        if not _close(self._im, 0.0):
            raise ComplexDomainError(self, "float")
        return self._re

    def __int__(self) -> int:
        if not _close(self._im, 0.0):
            raise ComplexDomainError(self, "int")
        return int(self._re)

    def __str__(self) -> str:
        if self.is_nan:
            return "NaN"
        if self.is_infinite:
            return "Infinity"
        if _close(self._im, 0.0):
            return fmt(self._re)
        if _close(self._re, 0.0):
            return fmt(self._im, J_CHAR)
        if self._im < 0.0:
            return f"{fmt(self._re)} - {fmt(-self._im, J_CHAR)}"
        return f"{fmt(self._re)} + {fmt(self._im, J_CHAR)}"

    def __repr__(self) -> str:
        return f"Complex(re={self._re!r}, im={self._im!r})"

    def round(self, decimals: int) -> "Complex":
        """
        Round both parts to ``decimals`` places.

        Negative ``decimals`` rounds to a power of ten, so ``round(-2)``
        rounds to the nearest hundred.
        """
        return Complex(round_to(self._re, decimals), round_to(self._im, decimals))

    def __round__(self, ndigits: Optional[int] = None) -> "Complex":
        return self.round(0 if ndigits is None else ndigits)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __pos__(self) -> "Complex":
        return Complex(self._re, self._im)

    def __neg__(self) -> "Complex":
        return c_neg(self)

    def __abs__(self) -> float:
        return self.abs()

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_add(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_add(other, self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_sub(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_sub(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_mul(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_mul(other, self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_div(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return c_div(other, self)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        if isinstance(exponent, numbers.Real):
            return _funcs.c_pow(self, exponent)
        exponent = _coerce(exponent)
        if exponent is None:
            return NotImplemented
        return _funcs.c_pow(self, exponent)

    def __rpow__(self, base):
        base = _coerce(base)
        if base is None:
            return NotImplemented
        return _funcs.c_pow(base, self)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        return Complex(self._re, -self._im)

    def abs(self) -> float:
        """Magnitude, sqrt(re² + im²)."""
        return math.sqrt(square(self._re) + square(self._im))

    def arg(self) -> float:
        """Angle in (-π, π]."""
        return math.atan2(self._im, self._re)

    def polar(self) -> Polar:
        """Rectangular to polar coordinates."""
        return Polar(self.abs(), self.arg())

    @classmethod
    def from_polar(cls, rho: Union[Polar, float], theta: Optional[float] = None) -> "Complex":
        """
        Build a Complex from polar coordinates.

        Accepts either a ``Polar`` (as returned by ``polar()``) or the
        magnitude and angle as two numbers.
        """
        if isinstance(rho, Polar):
            return rho.to_complex()
        if theta is None:
            raise TypeError("from_polar() needs a Polar or both rho and theta")
        return Polar(float(rho), float(theta)).to_complex()

    def reciprocal(self) -> "Complex":
        """1 / self, or INFINITY when self is zero."""
        return c_reciprocal(self)

    def sqrt(self) -> "Complex":
        """
        Principal square root.

        With an imaginary part of exactly zero this is ``real_sqrt(re)``, so
        negative reals give a pure imaginary root.
        """
        if self._im == 0.0:
            return real_sqrt(self._re)
        magnitude = self.abs()
        im_sign = 1.0 if self._im >= 0.0 else -1.0
        return Complex(
            math.sqrt(max((magnitude + self._re) / 2.0, 0.0)),
            im_sign * math.sqrt(max((magnitude - self._re) / 2.0, 0.0)),
        )

    # ------------------------------------------------------------------
    # Transcendental functions (see complex_funcs)
    # ------------------------------------------------------------------

    def exp(self) -> "Complex":
        """e to the power of self."""
        return _funcs.c_exp(self)

    def ln(self) -> "Complex":
        """Principal natural logarithm; INFINITY at zero."""
        return _funcs.c_ln(self)

    def pow(self, exponent: ComplexLike) -> "Complex":
        """self to the power ``exponent``, real or complex."""
        return _funcs.c_pow(self, exponent)

    def sin(self) -> "Complex":
        return _funcs.c_sin(self)

    def cos(self) -> "Complex":
        return _funcs.c_cos(self)

    def tan(self) -> "Complex":
        return _funcs.c_tan(self)

    def sec(self) -> "Complex":
        return _funcs.c_sec(self)

    def csc(self) -> "Complex":
        return _funcs.c_csc(self)

    def cot(self) -> "Complex":
        return _funcs.c_cot(self)

    def asin(self) -> "Complex":
        return _funcs.c_asin(self)

    def acos(self) -> "Complex":
        return _funcs.c_acos(self)

    def atan(self) -> "Complex":
        return _funcs.c_atan(self)

    def acot(self) -> "Complex":
        return _funcs.c_acot(self)

    def asec(self) -> "Complex":
        return _funcs.c_asec(self)

    def acsc(self) -> "Complex":
        return _funcs.c_acsc(self)

    def sinh(self) -> "Complex":
        return _funcs.c_sinh(self)

    def cosh(self) -> "Complex":
        return _funcs.c_cosh(self)

    def tanh(self) -> "Complex":
        return _funcs.c_tanh(self)

    def coth(self) -> "Complex":
        return _funcs.c_coth(self)

    def sech(self) -> "Complex":
        return _funcs.c_sech(self)

    def csch(self) -> "Complex":
        return _funcs.c_csch(self)

    def asinh(self) -> "Complex":
        return _funcs.c_asinh(self)

    def acosh(self) -> "Complex":
        return _funcs.c_acosh(self)

    def atanh(self) -> "Complex":
        return _funcs.c_atanh(self)

    def acoth(self) -> "Complex":
        return _funcs.c_acoth(self)

    def asech(self) -> "Complex":
        return _funcs.c_asech(self)

    def acsch(self) -> "Complex":
        return _funcs.c_acsch(self)


# ============================================================================
# Factories and coercion
# ============================================================================

def _coerce(value) -> Optional[Complex]:
    """Promote a number to Complex, or return None for anything else."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(value)
    if isinstance(value, numbers.Complex):
        return Complex(value.real, value.imag)
    return None


def as_complex(value: ComplexLike) -> Complex:
    """
    Coerce a number into a Complex.

    Complex values are returned as is; reals become pure-real values and
    builtin complex numbers keep both parts.

    Raises:
        TypeError: If ``value`` is not a number
    """
    result = _coerce(value)
    if result is None:
        raise TypeError(f"Cannot convert {type(value).__name__} to Complex")
    return result


def imag(value: numbers.Real) -> Complex:
    """The pure imaginary number ``value·j``."""
    return Complex(0.0, value)


def exp_i_theta(theta: float) -> Complex:
    """
    Unit-magnitude Complex at angle ``theta`` (radians).

    Euler: e^(jθ) = cos θ + j sin θ.
    """
    if math.isinf(theta):
        return Complex(math.nan, math.nan)
    return Complex(math.cos(theta), math.sin(theta))


def real_sqrt(value: float) -> Complex:
    """Square root of a real, as a Complex; negative input gives a pure imaginary root."""
    if value >= 0.0:
        return Complex(math.sqrt(value), 0.0)
    return Complex(0.0, math.sqrt(-value))


# ============================================================================
# Arithmetic
# ============================================================================

def c_neg(z: ComplexLike) -> Complex:
    z = as_complex(z)
    return Complex(-z.re, -z.im)


def c_add(a: ComplexLike, b: ComplexLike) -> Complex:
    a, b = as_complex(a), as_complex(b)
    return Complex(a.re + b.re, a.im + b.im)


def c_sub(a: ComplexLike, b: ComplexLike) -> Complex:
    a, b = as_complex(a), as_complex(b)
    return Complex(a.re - b.re, a.im - b.im)


def c_mul(a: ComplexLike, b: ComplexLike) -> Complex:
    """(a + bj)(c + dj) = (ac - bd) + (ad + bc)j"""
    a, b = as_complex(a), as_complex(b)
    real = a.re * b.re - a.im * b.im
    imag_part = a.re * b.im + a.im * b.re
    return Complex(real, imag_part)


def c_div(a: ComplexLike, b: ComplexLike) -> Complex:
    """
    Complex division.

    A zero divisor is not special-cased: the parts come out as ±inf or NaN
    exactly as IEEE float division by zero would give them.
    """
    a, b = as_complex(a), as_complex(b)
    denominator = square(b.re) + square(b.im)
    real = ieee_div(a.re * b.re + a.im * b.im, denominator)
    imag_part = ieee_div(a.im * b.re - a.re * b.im, denominator)
    return Complex(real, imag_part)


def c_abs(z: ComplexLike) -> float:
    return as_complex(z).abs()


def c_arg(z: ComplexLike) -> float:
    return as_complex(z).arg()


def c_sqrt(z: ComplexLike) -> Complex:
    return as_complex(z).sqrt()


def c_reciprocal(z: ComplexLike) -> Complex:
    z = as_complex(z)
    if z.is_zero:
        return Complex.INFINITY
    return c_div(Complex.ONE, z)


# ============================================================================
# Constants
# ============================================================================

Complex.ZERO = ZERO = Complex(0.0)
Complex.ONE = ONE = Complex(1.0)
Complex.J = J = imag(1.0)
Complex.PI_C = PI_C = Complex(math.pi)
Complex.PI_J = PI_J = imag(math.pi)
# A single point at infinity, not a direction
Complex.INFINITY = INFINITY = Complex(math.inf)


from . import complex_funcs as _funcs  # noqa: E402
