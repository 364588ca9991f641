import numpy as np
import pytest

from custom_bgv import (
    CoefficientRangeError,
    LengthMismatchError,
    ModulusMismatchError,
    Polynomial,
    PolynomialRing,
    SeededRandomSource,
)
from custom_bgv.polynomial import add, multiply, subtract

Q = 97


def test_encode_decode_integers():
    data = [1, 2, 3, 4, 5]
    poly = Polynomial.encode(data, Q)
    assert poly.decode() == data
    assert Polynomial.from_integers(data, Q).to_integers() == data


def test_encode_reduces_into_canonical_range():
    poly = Polynomial.encode([100, -1, 97], Q)
    assert poly.coefficients == (3, 96, 0)


def test_decode_rejects_coefficients_wider_than_u64():
    poly = Polynomial.encode([1, 2 ** 65], 2 ** 70)
    with pytest.raises(CoefficientRangeError) as info:
        poly.decode()
    assert info.value.index == 1
    assert info.value.value == 2 ** 65


def test_decode_respects_requested_dtype():
    poly = Polynomial.encode([255, 300], 1000)
    with pytest.raises(CoefficientRangeError):
        poly.decode(dtype=np.uint8)
    assert poly.decode(dtype=np.uint16) == [255, 300]


def test_encode_decode_real():
    data = 3.14159
    poly = Polynomial.encode_real(data, 5, 10 ** 7)
    assert len(poly) == 1
    assert abs(poly.decode_real(5) - data) < 1e-5


def test_encode_real_discards_sign():
    poly = Polynomial.encode_real(-2.5, 1, Q)
    assert poly.coefficients == (25,)
    assert poly.decode_real(1) == 2.5


def test_encode_real_rounds_half_away_from_zero():
    assert Polynomial.encode_real(0.25, 1, Q).coefficients == (3,)
    assert Polynomial.encode_real(-0.25, 1, Q).coefficients == (3,)


def test_decode_real_of_empty_polynomial():
    assert Polynomial([], Q).decode_real(3) == 0.0


def test_decode_real_range_error():
    with pytest.raises(CoefficientRangeError):
        Polynomial([2 ** 64], 2 ** 70).decode_real(2)


def test_add_pads_shorter_operand():
    a = Polynomial([1, 2, 3], Q)
    b = Polynomial([96, 96], Q)
    assert (a + b).coefficients == (0, 1, 3)
    assert add(b, a) == a + b


def test_subtract_wraps_without_negatives():
    a = Polynomial([1, 0], Q)
    b = Polynomial([2, 5, 1], Q)
    assert (a - b).coefficients == (96, 92, 96)
    assert subtract(a, b) == a - b


def test_multiply_is_cyclic_not_negacyclic():
    # (1 + 2x) * x^3 = x^3 + 2x^4 = 2 + x^3 in Z_q[x]/(x^4 - 1)
    a = Polynomial([1, 2, 0, 0], Q)
    b = Polynomial([0, 0, 0, 1], Q)
    assert (a * b).coefficients == (2, 0, 0, 1)


def test_multiply_wraps_every_index():
    a = Polynomial([4, 1, 4, 1], Q)
    b = Polynomial([3, 3, 1, 4], Q)
    assert multiply(a, b).coefficients == (23, 32, 23, 32)


def test_multiply_length_mismatch():
    a = Polynomial([1, 2, 3, 4], Q)
    b = Polynomial([1, 2, 3], Q)
    with pytest.raises(LengthMismatchError) as info:
        a * b
    assert (info.value.left, info.value.right) == (4, 3)


def test_multiply_handles_coefficients_beyond_int64():
    q = 2 ** 89
    a = Polynomial([2 ** 79, 0], q)
    b = Polynomial([3, 0], q)
    assert (a * b).coefficients == (3 * 2 ** 79, 0)


def test_modulus_mismatch():
    with pytest.raises(ModulusMismatchError):
        Polynomial([1], 97) + Polynomial([1], 101)


def test_negate_and_scale():
    p = Polynomial([0, 1, 50], Q)
    assert (-p).coefficients == (0, 96, 47)
    assert p.scale(2).coefficients == (0, 2, 3)
    assert p + (-p) == Polynomial.zero(3, Q)


def test_operations_return_new_values():
    a = Polynomial([1, 2, 3, 4], Q)
    b = Polynomial([5, 6, 7, 8], Q)
    before = a.coefficients
    _ = a + b
    _ = a - b
    _ = a * b
    assert a.coefficients == before
    with pytest.raises(ValueError):
        a._coeffs[0] = 9


def test_ring_laws():
    rng = SeededRandomSource(7)
    n = 8
    x, y, z = (Polynomial.random_uniform(n, Q, rng) for _ in range(3))
    zero = Polynomial.zero(n, Q)

    assert x + y == y + x
    assert (x + y) + z == x + (y + z)
    assert x + zero == x
    assert x * y == y * x
    assert x - x == zero
    assert all(0 <= c < Q for c in (x * y - z).coefficients)


def test_polynomial_ring_encode_pads_to_degree():
    ring = PolynomialRing(4, Q)
    assert ring.encode([1, 2]).coefficients == (1, 2, 0, 0)
    assert ring.zero() == Polynomial.zero(4, Q)
    with pytest.raises(LengthMismatchError):
        ring.encode([1, 2, 3, 4, 5])


def test_polynomial_ring_rejects_bad_parameters():
    with pytest.raises(ValueError):
        PolynomialRing(0, Q)
    with pytest.raises(ValueError):
        PolynomialRing(4, 1)


def test_random_small_maps_negative_support():
    rng = SeededRandomSource(3)
    poly = Polynomial.random_small(16, Q, (-1, 0, 1), rng)
    assert set(poly.coefficients) <= {0, 1, 96}
