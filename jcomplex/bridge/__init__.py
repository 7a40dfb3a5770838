"""Bridges between Complex and Python/NumPy numeric types."""

# Core IEEE bridge
from .ieee_complex import from_ieee, to_ieee

# NumPy bridge
from .numpy_bridge import (
    from_numpy,
    to_numpy,
    nan_mask,
    infinite_mask,
    zero_mask,
    count_classes,
    close_arrays,
)

__all__ = [
    # Core IEEE
    "from_ieee",
    "to_ieee",

    # NumPy bridge
    "from_numpy",
    "to_numpy",
    "nan_mask",
    "infinite_mask",
    "zero_mask",
    "count_classes",
    "close_arrays",
]
