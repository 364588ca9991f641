"""
Key generation: secret s from a small support, public (a, b) with
b = -a*s + t*e (mod q).
"""

import logging
from dataclasses import dataclass

from .params import BINARY_SUPPORT, SchemeParameters
from .polynomial import Polynomial, PolynomialRing
from .randomness import SystemRandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecretKey:
    s: Polynomial
    q: int
    t: int

    def get_polynomial(self):
        return self.s


@dataclass(frozen=True)
class PublicKey:
    a: Polynomial
    b: Polynomial
    q: int
    t: int

    @property
    def n(self):
        return len(self.a)

    def get_components(self):
        return self.a, self.b


class KeyGenerator:
    def __init__(self, params=None, rng=None):
        self.params = params or SchemeParameters()
        self.rng = rng or SystemRandomSource()
        self.poly_ring = PolynomialRing(self.params.n, self.params.q)

    def generate(self):
        """Return (PublicKey, SecretKey).

        Raises RandomnessError if the source fails; nothing is retried.
        """
        p = self.params
        s = self.poly_ring.random_small(p.small_support, self.rng)
        a = self.poly_ring.random_uniform(self.rng)
        e = self.poly_ring.random_small(p.small_support, self.rng)

        # b = -(a*s) + t*e
        a_s = self.poly_ring.mul(a, s)
        b = self.poly_ring.add(self.poly_ring.neg(a_s), self.poly_ring.mul_scalar(e, p.t))

        logger.info("Generated key pair (n=%d, q=%d, t=%d)", p.n, p.q, p.t)
        return PublicKey(a, b, p.q, p.t), SecretKey(s, p.q, p.t)


def generate_keys(n=4, q=97, t=2, rng=None, small_support=BINARY_SUPPORT):
    params = SchemeParameters(n=n, q=q, t=t, small_support=small_support)
    return KeyGenerator(params, rng).generate()
