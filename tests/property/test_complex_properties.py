"""
Property-based tests for Complex arithmetic.

Tests algebraic identities, inverse operations and the NaN/infinity
equality model.
"""

import math

from hypothesis import assume, given, strategies as st
from hypothesis.strategies import composite

from jcomplex import EPSILON, INFINITY, ONE, ZERO, Complex


# ============================================================================
# Hypothesis Strategies
# ============================================================================

def grid_reals(limit: int = 1000, scale: float = 100.0):
    """Reals on a 1/scale grid in [-limit/scale, limit/scale]."""
    return st.integers(min_value=-limit, max_value=limit).map(lambda n: n / scale)


@composite
def finite_complexes(draw):
    """Generate finite Complex values with moderate magnitude."""
    return Complex(draw(grid_reals()), draw(grid_reals()))


@composite
def nonzero_complexes(draw):
    z = draw(finite_complexes())
    assume(z.abs() >= 1e-2)
    return z


@composite
def axis_complexes(draw):
    """Negative reals and pure imaginaries, where square roots need care."""
    value = draw(grid_reals())
    assume(value != 0.0)
    return draw(st.sampled_from([Complex(-abs(value), 0.0), Complex(0.0, value)]))


@composite
def infinite_complexes(draw):
    infinity = draw(st.sampled_from([math.inf, -math.inf]))
    finite = draw(st.floats(allow_nan=False, allow_infinity=False))
    other = draw(st.sampled_from([finite, infinity, -infinity]))
    if draw(st.booleans()):
        return Complex(infinity, other)
    return Complex(other, infinity)


@composite
def nan_complexes(draw):
    other = draw(st.floats(allow_nan=True, allow_infinity=True))
    if draw(st.booleans()):
        return Complex(math.nan, other)
    return Complex(other, math.nan)


# ============================================================================
# Algebraic properties
# ============================================================================

class TestAlgebra:
    """Field identities for finite values."""

    @given(finite_complexes(), finite_complexes())
    def test_addition_commutative(self, a, b):
        assert a + b == b + a

    @given(finite_complexes(), finite_complexes())
    def test_multiplication_commutative(self, a, b):
        assert a * b == b * a

    @given(finite_complexes())
    def test_identities(self, a):
        assert a + ZERO == a
        assert a * ONE == a
        assert a + 0 == a
        assert 1 * a == a

    @given(finite_complexes())
    def test_additive_inverse(self, a):
        assert a + (-a) == ZERO

    @given(finite_complexes(), nonzero_complexes())
    def test_division_inverts_multiplication(self, a, b):
        assert (a * b) / b == a

    @given(finite_complexes(), grid_reals())
    def test_scalar_promotion(self, a, x):
        assert a + x == a + Complex(x)
        assert x - a == Complex(x) - a
        assert a * x == a * Complex(x)


# ============================================================================
# Inverse operations
# ============================================================================

class TestInverses:
    """Round trips through square root, logarithm and polar form."""

    @given(finite_complexes())
    def test_sqrt_squared(self, a):
        root = a.sqrt()
        assert root * root == a

    @given(axis_complexes())
    def test_sqrt_squared_on_axes(self, a):
        root = a.sqrt()
        assert root * root == a
        assert root.re >= 0.0

    @given(nonzero_complexes())
    def test_exp_inverts_ln(self, a):
        assert a.ln().exp() == a

    @given(nonzero_complexes())
    def test_ln_principal_range(self, a):
        assert -math.pi <= a.ln().im <= math.pi

    @given(finite_complexes())
    def test_polar_round_trip(self, a):
        assert Complex.from_polar(a.polar()) == a

    @given(nonzero_complexes(), st.sampled_from([-2.0, -1.0, 0.5, 2.0, 3.0]))
    def test_real_power_matches_complex_power(self, a, p):
        assert a ** p == a ** Complex(p)


# ============================================================================
# Equality model
# ============================================================================

class TestEqualityModel:
    """NaN, infinity and hashing."""

    @given(nan_complexes())
    def test_nan_never_equal(self, z):
        assert z != z
        assert not z.close(z)
        assert z != ZERO
        assert z != INFINITY

    @given(infinite_complexes(), infinite_complexes())
    def test_infinities_equal(self, a, b):
        assert a == b
        assert a.close(b)
        assert b.close(a)
        assert hash(a) == hash(b)

    @given(finite_complexes(), finite_complexes())
    def test_close_symmetric(self, a, b):
        assert a.close(b) == b.close(a)
        assert a.close(b, 0.5) == b.close(a, 0.5)

    @given(finite_complexes())
    def test_equal_copies_hash_alike(self, a):
        copy = Complex(a.re, a.im)
        assert copy == a
        assert hash(copy) == hash(a)

    @given(grid_reals())
    def test_real_values_hash_like_floats(self, x):
        assert Complex(x) == x
        assert hash(Complex(x)) == hash(x)

    @given(st.floats(min_value=EPSILON / 500, max_value=EPSILON / 2))
    def test_near_zero_is_not_zero(self, tiny):
        z = Complex(tiny, 0.0)
        assert z == ZERO
        assert not z.is_zero
        assert not Complex(1.0, tiny).is_real
