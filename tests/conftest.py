"""Global test configuration and lightweight fixtures.

Seeds RNGs for more deterministic behavior, auto-marks property tests and
provides a component-wise assertion helper for Complex results.
"""

import os
import random
from typing import Callable
from pathlib import Path

import numpy as np
import pytest

from jcomplex import EPSILON, as_complex


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("JCX_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


def _assert_complex_close(expected, actual, epsilon: float = EPSILON) -> None:
    """Assert two values match part by part; any two infinities match."""
    expected = as_complex(expected)
    actual = as_complex(actual)
    if expected.is_infinite:
        assert actual.is_infinite, f"expected Infinity, got {actual!r}"
        return
    assert abs(expected.re - actual.re) < epsilon, f"re: expected {expected!r}, got {actual!r}"
    assert abs(expected.im - actual.im) < epsilon, f"im: expected {expected!r}, got {actual!r}"


@pytest.fixture
def assert_complex_close() -> Callable[..., None]:
    """Component-wise closeness assertion for Complex results."""
    return _assert_complex_close


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if any(part == "property" for part in p.parts) and "tests" in p.parts:
            item.add_marker(pytest.mark.property)  # type: ignore[attr-defined]
