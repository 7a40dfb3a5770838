"""
jcomplex: complex numbers with tolerant equality and a single point at infinity.

Provides an immutable ``Complex`` value type (written ``re + im j``), its
arithmetic with plain Python numbers, polar conversion, and the full family of
exponential, logarithmic, circular and hyperbolic functions and their
inverses. All functions are total: singularities come back as values
(``INFINITY`` or NaN parts) rather than exceptions.
"""

__version__ = "0.1.0"

from .core import (
    Complex,
    ComplexDomainError,
    ComplexLike,
    EPSILON,
    EPSILON_FLOAT,
    INFINITY,
    J,
    ONE,
    PI_C,
    PI_J,
    Polar,
    PrecisionConfig,
    PrecisionMode,
    ZERO,
    as_complex,
    c_abs,
    c_acos,
    c_acosh,
    c_acot,
    c_acoth,
    c_acsc,
    c_acsch,
    c_add,
    c_arg,
    c_asec,
    c_asech,
    c_asin,
    c_asinh,
    c_atan,
    c_atanh,
    c_cos,
    c_cosh,
    c_cot,
    c_coth,
    c_csc,
    c_csch,
    c_div,
    c_exp,
    c_ln,
    c_mul,
    c_neg,
    c_pow,
    c_reciprocal,
    c_sec,
    c_sech,
    c_sin,
    c_sinh,
    c_sqrt,
    c_sub,
    c_tan,
    c_tanh,
    exp_i_theta,
    imag,
    precision_context,
    real_sqrt,
)

from .bridge import from_ieee, to_ieee, from_numpy, to_numpy

__all__ = [
    # Version info
    "__version__",
    # Types
    "Complex",
    "Polar",
    "ComplexLike",
    "ComplexDomainError",
    # Constants
    "EPSILON",
    "EPSILON_FLOAT",
    "ZERO",
    "ONE",
    "J",
    "PI_C",
    "PI_J",
    "INFINITY",
    # Factories
    "as_complex",
    "imag",
    "exp_i_theta",
    "real_sqrt",
    # Arithmetic
    "c_neg",
    "c_add",
    "c_sub",
    "c_mul",
    "c_div",
    "c_abs",
    "c_arg",
    "c_sqrt",
    "c_reciprocal",
    # Transcendental
    "c_exp",
    "c_ln",
    "c_pow",
    "c_sin",
    "c_cos",
    "c_tan",
    "c_sec",
    "c_csc",
    "c_cot",
    "c_asin",
    "c_acos",
    "c_atan",
    "c_acot",
    "c_asec",
    "c_acsc",
    "c_sinh",
    "c_cosh",
    "c_tanh",
    "c_coth",
    "c_sech",
    "c_csch",
    "c_asinh",
    "c_acosh",
    "c_atanh",
    "c_acoth",
    "c_asech",
    "c_acsch",
    # Precision
    "PrecisionConfig",
    "PrecisionMode",
    "precision_context",
    # Bridges
    "from_ieee",
    "to_ieee",
    "from_numpy",
    "to_numpy",
]
