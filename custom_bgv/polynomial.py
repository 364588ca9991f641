"""
Polynomial Ring Operations
Implements arithmetic in R_q = Z_q[X]/(X^n - 1) (cyclic wraparound).
"""

import logging

import numpy as np

from .errors import (
    CoefficientRangeError,
    LengthMismatchError,
    ModulusMismatchError,
    RandomnessError,
)

logger = logging.getLogger(__name__)


def _draw(sample, *args):
    try:
        return sample(*args)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessError("Randomness source failed while sampling") from exc


def _padded(coeffs, length):
    out = np.zeros(length, dtype=object)
    out[:len(coeffs)] = coeffs
    return out


def _check_modulus(a, b):
    if a.q != b.q:
        raise ModulusMismatchError(a.q, b.q)


class Polynomial:
    """Immutable ring element with canonical coefficients in [0, q).

    Coefficients are held as Python ints inside a read-only numpy object
    array, so products never overflow before reduction.
    """

    __slots__ = ("_coeffs", "_q")

    def __init__(self, coefficients, q):
        q = int(q)
        if q <= 0:
            raise ValueError("Coefficient modulus q must be positive")
        coeffs = np.array([int(c) % q for c in coefficients], dtype=object)
        coeffs.setflags(write=False)
        self._coeffs = coeffs
        self._q = q

    @classmethod
    def _wrap(cls, reduced, q):
        # `reduced` must already be an object array of values in [0, q)
        poly = cls.__new__(cls)
        reduced.setflags(write=False)
        poly._coeffs = reduced
        poly._q = q
        return poly

    # -- constructors -----------------------------------------------------

    @classmethod
    def zero(cls, n, q):
        return cls._wrap(np.zeros(n, dtype=object), int(q))

    @classmethod
    def random_uniform(cls, n, q, rng):
        """Coefficients sampled uniformly from [0, q)."""
        return cls(_draw(rng.uniform, n, int(q)), q)

    @classmethod
    def random_small(cls, n, q, support, rng):
        """Coefficients drawn from a small support set, stored mod q."""
        return cls(_draw(rng.choice, tuple(support), n), q)

    @classmethod
    def encode(cls, integers, q):
        """One coefficient per integer, each reduced mod q."""
        return cls(integers, q)

    from_integers = encode

    @classmethod
    def encode_real(cls, value, precision, q):
        """Fixed-point encoding into a single coefficient.

        Stores round(|value| * 10^precision) mod q, rounding half away
        from zero. The sign of `value` is lost.
        """
        scaled = abs(float(value)) * 10 ** precision
        return cls([int(np.floor(scaled + 0.5))], q)

    # -- decoders ---------------------------------------------------------

    def decode(self, dtype=np.uint64):
        """Return the coefficients as ints checked against `dtype`'s range."""
        info = np.iinfo(dtype)
        values = []
        for i, c in enumerate(self._coeffs):
            if c < info.min or c > info.max:
                raise CoefficientRangeError(i, c, np.dtype(dtype).name)
            values.append(int(c))
        return values

    to_integers = decode

    def decode_real(self, precision, dtype=np.uint64):
        """Magnitude stored by encode_real; 0.0 for an empty polynomial."""
        if len(self._coeffs) == 0:
            return 0.0
        info = np.iinfo(dtype)
        c = self._coeffs[0]
        if c > info.max:
            raise CoefficientRangeError(0, c, np.dtype(dtype).name)
        return int(c) / 10 ** precision

    # -- accessors --------------------------------------------------------

    @property
    def q(self):
        return self._q

    modulus = q

    @property
    def coefficients(self):
        return tuple(int(c) for c in self._coeffs)

    @property
    def degree(self):
        """Ring degree n (the coefficient count)."""
        return len(self._coeffs)

    def __len__(self):
        return len(self._coeffs)

    def __getitem__(self, idx):
        return int(self._coeffs[idx])

    def __iter__(self):
        return iter(self.coefficients)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._q == other._q and self.coefficients == other.coefficients

    def __hash__(self):
        return hash((self._q, self.coefficients))

    def __repr__(self):
        return f"Polynomial({list(self.coefficients)}, q={self._q})"

    # -- arithmetic -------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return multiply(self, other)

    def __neg__(self):
        return self.negate()

    def negate(self):
        return Polynomial._wrap((self._q - self._coeffs) % self._q, self._q)

    def scale(self, scalar):
        """Multiply every coefficient by an integer scalar, mod q."""
        return Polynomial._wrap((self._coeffs * int(scalar)) % self._q, self._q)

    def reduce(self, modulus):
        """Reduce each coefficient mod `modulus`; the ring modulus is kept."""
        return Polynomial._wrap(self._coeffs % int(modulus), self._q)


def add(a, b):
    _check_modulus(a, b)
    length = max(len(a), len(b))
    result = (_padded(a._coeffs, length) + _padded(b._coeffs, length)) % a.q
    return Polynomial._wrap(result, a.q)


def subtract(a, b):
    _check_modulus(a, b)
    length = max(len(a), len(b))
    # add q before subtracting so no intermediate goes negative
    result = (_padded(a._coeffs, length) + a.q - _padded(b._coeffs, length)) % a.q
    return Polynomial._wrap(result, a.q)


def multiply(a, b):
    """Cyclic convolution in Z_q[X]/(X^n - 1).

    Index (i + j) wraps to (i + j) mod n with no sign flip. This is not
    the negacyclic X^n + 1 ring used by production schemes.
    """
    _check_modulus(a, b)
    n = len(a)
    if len(b) != n:
        raise LengthMismatchError(n, len(b))
    if n == 0:
        return Polynomial.zero(0, a.q)

    conv = np.convolve(a._coeffs, b._coeffs)

    # Cyclic Reduction (X^n = 1)
    result = np.zeros(n, dtype=object)
    for i in range(len(conv)):
        result[i % n] += conv[i]

    return Polynomial._wrap(result % a.q, a.q)


class PolynomialRing:
    """Fixed (n, q) context that builds and samples ring elements."""

    def __init__(self, n, q):
        if n <= 0:
            raise ValueError("Ring degree n must be positive")
        if q <= 1:
            raise ValueError("Coefficient modulus q must exceed 1")
        self.n = n
        self.q = q

    def __repr__(self):
        return f"PolynomialRing(n={self.n}, q={self.q})"

    def zero(self):
        return Polynomial.zero(self.n, self.q)

    def encode(self, values):
        """Encode integers, zero padded up to n coefficients."""
        values = list(values)
        if len(values) > self.n:
            raise LengthMismatchError(self.n, len(values))
        return Polynomial.encode(values + [0] * (self.n - len(values)), self.q)

    def random_uniform(self, rng):
        return Polynomial.random_uniform(self.n, self.q, rng)

    def random_small(self, support, rng):
        return Polynomial.random_small(self.n, self.q, support, rng)

    def add(self, a, b):
        return add(a, b)

    def sub(self, a, b):
        return subtract(a, b)

    def mul(self, a, b):
        return multiply(a, b)

    def neg(self, a):
        return a.negate()

    def mul_scalar(self, a, scalar):
        return a.scale(scalar)
