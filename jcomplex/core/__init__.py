"""Core complex value type, algebra and transcendental functions."""

from .numeric import (
    EPSILON,
    EPSILON_FLOAT,
    EPSILON_STRICT,
    J_CHAR,
    round_to,
    close,
    square,
    fmt,
    ieee,
    ieee_div,
)

from .errors import ComplexDomainError

from .complex_scalar import (
    Complex,
    Polar,
    ComplexLike,
    ZERO,
    ONE,
    J,
    PI_C,
    PI_J,
    INFINITY,
    as_complex,
    imag,
    exp_i_theta,
    real_sqrt,
    c_neg,
    c_add,
    c_sub,
    c_mul,
    c_div,
    c_abs,
    c_arg,
    c_sqrt,
    c_reciprocal,
)

from .complex_funcs import (
    c_exp,
    c_ln,
    c_pow,
    c_sin,
    c_cos,
    c_tan,
    c_sec,
    c_csc,
    c_cot,
    c_asin,
    c_acos,
    c_atan,
    c_acot,
    c_asec,
    c_acsc,
    c_sinh,
    c_cosh,
    c_tanh,
    c_coth,
    c_sech,
    c_csch,
    c_asinh,
    c_acosh,
    c_atanh,
    c_acoth,
    c_asech,
    c_acsch,
)

from .precision_config import PrecisionConfig, PrecisionMode, precision_context

__all__ = [
    # Types
    "Complex",
    "Polar",
    "ComplexLike",
    "ComplexDomainError",
    "PrecisionConfig",
    "PrecisionMode",
    "precision_context",

    # Constants
    "EPSILON",
    "EPSILON_FLOAT",
    "EPSILON_STRICT",
    "J_CHAR",
    "ZERO",
    "ONE",
    "J",
    "PI_C",
    "PI_J",
    "INFINITY",

    # Scalar helpers
    "round_to",
    "close",
    "square",
    "fmt",
    "ieee",
    "ieee_div",

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

    # Exponential and logarithm
    "c_exp",
    "c_ln",
    "c_pow",

    # Circular
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

    # Hyperbolic
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
]
