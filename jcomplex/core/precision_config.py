"""
Global precision configuration for jcomplex array conversions.

Complex values themselves are always double precision. This module selects
the NumPy dtype used when they are exported to arrays, and the comparison
tolerance that matches that dtype. By default, complex128 is used.
"""

import numpy as np
from typing import Type, Union
from enum import Enum

from .numeric import EPSILON, EPSILON_FLOAT


class PrecisionMode(Enum):
    """Supported precision modes."""
    COMPLEX64 = np.complex64
    COMPLEX128 = np.complex128

    @property
    def numpy_dtype(self):
        """Get the numpy dtype for this precision."""
        return self.value

    @property
    def bits(self) -> int:
        """Get the number of bits for this precision (both components)."""
        return np.dtype(self.value).itemsize * 8

    @property
    def component_dtype(self):
        """Float dtype of a single component."""
        return np.float32 if self is PrecisionMode.COMPLEX64 else np.float64

    @property
    def tolerance(self) -> float:
        """Closeness tolerance appropriate for values stored in this precision."""
        return EPSILON_FLOAT if self is PrecisionMode.COMPLEX64 else EPSILON


class PrecisionConfig:
    """
    Global precision configuration.

    By default, jcomplex exports to complex128 so that no precision is lost
    between a Complex and its array form.
    """

    _default_mode: PrecisionMode = PrecisionMode.COMPLEX128

    @classmethod
    def set_precision(cls, mode: Union[PrecisionMode, str]) -> None:
        """
        Set the default precision mode.

        Args:
            mode: PrecisionMode enum or string ('complex64', 'complex128')

        Raises:
            ValueError: If mode is not supported
        """
        if isinstance(mode, str):
            mode_map = {
                'complex64': PrecisionMode.COMPLEX64,
                'complex128': PrecisionMode.COMPLEX128,
            }
            if mode not in mode_map:
                raise ValueError(f"Unsupported precision mode: {mode}")
            mode = mode_map[mode]

        if not isinstance(mode, PrecisionMode):
            raise ValueError(f"Invalid precision mode: {mode}")

        cls._default_mode = mode

    @classmethod
    def get_precision(cls) -> PrecisionMode:
        """Get the current default precision mode."""
        return cls._default_mode

    @classmethod
    def get_dtype(cls) -> Type[np.complexfloating]:
        """Get the numpy dtype for the current precision."""
        return cls._default_mode.numpy_dtype

    @classmethod
    def get_tolerance(cls) -> float:
        """Get the closeness tolerance for the current precision."""
        return cls._default_mode.tolerance

    @classmethod
    def check_overflow(cls, value: Union[float, np.ndarray]) -> Union[bool, np.ndarray]:
        """
        Check if finite components would overflow in the current precision.

        Args:
            value: Component value, or array of component values

        Returns:
            True where value is finite but larger than the dtype can hold;
            a bool for a scalar, a boolean array otherwise
        """
        values = np.asarray(value)
        with np.errstate(invalid="ignore"):
            overflow = np.isfinite(values) & (np.abs(values) > cls.get_max())
        if overflow.ndim == 0:
            return bool(overflow)
        return overflow

    @classmethod
    def get_max(cls) -> float:
        """Get maximum representable component for current precision."""
        return float(np.finfo(cls._default_mode.component_dtype).max)


# Context manager for temporary precision changes
class precision_context:
    """
    Context manager for temporary precision changes.

    Example:
        with precision_context('complex64'):
            arr = to_numpy([Complex(1, 2)])   # complex64 array
        # Back to previous precision
    """

    def __init__(self, mode: Union[PrecisionMode, str]):
        self.new_mode = mode
        self.old_mode = None

    def __enter__(self):
        self.old_mode = PrecisionConfig.get_precision()
        PrecisionConfig.set_precision(self.new_mode)
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        PrecisionConfig.set_precision(self.old_mode)
