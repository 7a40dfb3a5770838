"""
NumPy bridge for Complex values.

Converts between Complex and NumPy complex scalars/arrays, and provides
vectorised versions of the Complex classification and closeness rules so
that array results can be checked the same way single values are.
"""

from typing import Any, Dict, Iterable, Optional, Union
import warnings

import numpy as np

from ..core import Complex, EPSILON_STRICT, PrecisionConfig, as_complex
from .ieee_complex import from_ieee


def _as_complex_array(arr: Any) -> np.ndarray:
    """
    View any supported input as a complex128 ndarray.

    Accepts numeric arrays, scalars, Complex values and (nested) sequences or
    object arrays of Complex/numbers.
    """
    if isinstance(arr, Complex):
        return np.asarray(complex(arr), dtype=np.complex128)
    array = np.asarray(arr) if isinstance(arr, np.ndarray) else np.asarray(arr, dtype=object)
    if array.dtype.kind in "biufc":
        return array.astype(np.complex128)
    if array.dtype.kind != "O":
        raise TypeError(f"Unsupported array dtype: {array.dtype}")
    out = np.empty(array.shape, dtype=np.complex128)
    for idx, item in np.ndenumerate(array):
        out[idx] = complex(as_complex(item))
    return out


def to_numpy(obj: Union[Complex, Iterable[Any], np.ndarray]) -> Union[np.complexfloating, np.ndarray]:
    """
    Convert a Complex, or a collection of them, to NumPy.

    The dtype follows ``PrecisionConfig`` (complex128 by default). A finite
    value too large for a complex64 component is converted to infinity with a
    RuntimeWarning.

    Args:
        obj: Complex, sequence (possibly nested) of Complex/numbers, or ndarray

    Returns:
        NumPy complex scalar for a single Complex, ndarray otherwise
    """
    dtype = PrecisionConfig.get_dtype()
    values = _as_complex_array(obj)
    overflow = (
        PrecisionConfig.check_overflow(values.real)
        | PrecisionConfig.check_overflow(values.imag)
    )
    if np.any(overflow):
        warnings.warn(
            f"{int(np.count_nonzero(overflow))} value(s) exceed the {np.dtype(dtype).name} "
            "range and overflowed",
            category=RuntimeWarning,
        )

    with np.errstate(over="ignore"):
        narrowed = values.astype(dtype)

    if isinstance(obj, Complex):
        return narrowed[()]
    return narrowed


def from_numpy(arr: Union[np.ndarray, np.number, complex, float]) -> Union[Complex, np.ndarray]:
    """
    Convert a NumPy scalar or array to Complex.

    Args:
        arr: NumPy scalar/array of real or complex dtype

    Returns:
        Complex for scalars, object ndarray of Complex (same shape) for arrays
    """
    if np.isscalar(arr):
        return from_ieee(arr)

    values = _as_complex_array(arr)
    out = np.empty(values.shape, dtype=object)
    for idx, value in np.ndenumerate(values):
        out[idx] = Complex(float(value.real), float(value.imag))
    return out


def nan_mask(arr: Any) -> np.ndarray:
    """Boolean mask of NaN elements (either part NaN)."""
    values = _as_complex_array(arr)
    return np.isnan(values.real) | np.isnan(values.imag)


def infinite_mask(arr: Any) -> np.ndarray:
    """Boolean mask of infinite elements (either part infinite, neither NaN)."""
    values = _as_complex_array(arr)
    infinite = np.isinf(values.real) | np.isinf(values.imag)
    return infinite & ~nan_mask(values)


def zero_mask(arr: Any) -> np.ndarray:
    """Boolean mask of elements that ``Complex.is_zero`` would accept."""
    values = _as_complex_array(arr)
    return (np.abs(values.real) <= EPSILON_STRICT) & (np.abs(values.imag) <= EPSILON_STRICT)


def count_classes(arr: Any) -> Dict[str, int]:
    """
    Count finite, infinite and NaN elements.

    Returns:
        Dictionary with keys 'finite', 'infinite' and 'nan'
    """
    values = _as_complex_array(arr)
    nan = nan_mask(values)
    infinite = infinite_mask(values)
    return {
        'finite': int(values.size - np.count_nonzero(nan) - np.count_nonzero(infinite)),
        'infinite': int(np.count_nonzero(infinite)),
        'nan': int(np.count_nonzero(nan)),
    }


def close_arrays(a: Any, b: Any, epsilon: Optional[float] = None) -> np.ndarray:
    """
    Elementwise ``Complex.close`` over two broadcastable arrays.

    Args:
        a: First array-like
        b: Second array-like
        epsilon: Tolerance; defaults to the current precision's tolerance

    Returns:
        Boolean ndarray
    """
    if epsilon is None:
        epsilon = PrecisionConfig.get_tolerance()
    left = _as_complex_array(a)
    right = _as_complex_array(b)

    either_nan = nan_mask(left) | nan_mask(right)
    both_infinite = infinite_mask(left) & infinite_mask(right)
    with np.errstate(invalid="ignore"):
        near = (np.abs(left.real - right.real) < epsilon) & (np.abs(left.imag - right.imag) < epsilon)
    return ~either_nan & (both_infinite | near)
