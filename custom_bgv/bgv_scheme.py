"""
BGV-style Encryption Scheme (demo grade)
Encryption, decryption and homomorphic evaluation over Z_q[X]/(X^n - 1).

Known approximations kept on purpose:
  * ring wraparound is cyclic, not negacyclic
  * multiply drops the c1*d1 term and never relinearizes
  * decryption does not track or check noise
"""

import logging
from functools import reduce

from .ciphertext import Ciphertext
from .errors import LengthMismatchError
from .keys import KeyGenerator
from .params import BINARY_SUPPORT, SchemeParameters
from .polynomial import PolynomialRing
from .randomness import SystemRandomSource

logger = logging.getLogger(__name__)


class Encryptor:
    def __init__(self, public_key, rng=None):
        self.public_key = public_key
        self.rng = rng or SystemRandomSource()
        self.poly_ring = PolynomialRing(public_key.n, public_key.q)

    def encrypt(self, plaintext):
        pk_a, pk_b = self.public_key.get_components()
        if len(plaintext) != self.public_key.n:
            raise LengthMismatchError(self.public_key.n, len(plaintext))

        # fresh r on every call
        r = self.poly_ring.random_uniform(self.rng)

        # c0 = a*r + m
        c0 = self.poly_ring.add(self.poly_ring.mul(pk_a, r), plaintext)
        # c1 = b*r
        c1 = self.poly_ring.mul(pk_b, r)

        logger.debug("Encrypted plaintext of degree %d", len(plaintext))
        return Ciphertext(c0, c1)


class Decryptor:
    def __init__(self, secret_key):
        self.secret_key = secret_key

    def decrypt(self, ciphertext):
        """Return c0 + c1*s with each coefficient reduced mod t.

        If accumulated noise exceeds q/(2t) the result is wrong and
        nothing signals it.
        """
        c0, c1 = ciphertext.components
        s = self.secret_key.get_polynomial()

        # noisy_m = c0 + c1*s
        noisy_m = c0 + c1 * s

        logger.debug("Decrypted ciphertext of degree %d", ciphertext.degree)
        return noisy_m.reduce(self.secret_key.t)


class HomomorphicEvaluator:
    """Ciphertext arithmetic without the secret key."""

    @staticmethod
    def add(ct1, ct2):
        c1_0, c1_1 = ct1.components
        c2_0, c2_1 = ct2.components
        logger.debug("Homomorphic add")
        return Ciphertext(c1_0 + c2_0, c1_1 + c2_1)

    @staticmethod
    def multiply(ct1, ct2):
        """(c0*d0, c0*d1 + c1*d0).

        The c1*d1 term is dropped, so the result stays two components.
        """
        c1_0, c1_1 = ct1.components
        c2_0, c2_1 = ct2.components
        d0 = c1_0 * c2_0
        d1 = c1_0 * c2_1 + c1_1 * c2_0
        logger.debug("Homomorphic multiply")
        return Ciphertext(d0, d1)

    def add_many(self, ciphertexts):
        ciphertexts = list(ciphertexts)
        if not ciphertexts:
            raise ValueError("Need at least one ciphertext")
        return reduce(self.add, ciphertexts)

    def multiply_many(self, ciphertexts):
        ciphertexts = list(ciphertexts)
        if not ciphertexts:
            raise ValueError("Need at least one ciphertext")
        return reduce(self.multiply, ciphertexts)


def encrypt(plaintext, public_key, rng=None):
    return Encryptor(public_key, rng).encrypt(plaintext)


def decrypt(ciphertext, secret_key):
    return Decryptor(secret_key).decrypt(ciphertext)


def homomorphic_add(ct1, ct2):
    return HomomorphicEvaluator.add(ct1, ct2)


def homomorphic_multiply(ct1, ct2):
    return HomomorphicEvaluator.multiply(ct1, ct2)


class BGVScheme:
    def __init__(self, n=4, q=97, t=2, small_support=BINARY_SUPPORT, rng=None):
        self.params = SchemeParameters(n=n, q=q, t=t, small_support=small_support)
        self.n = n
        self.q = q
        self.t = t
        self.rng = rng or SystemRandomSource()
        self.poly_ring = PolynomialRing(n, q)
        self.evaluator = HomomorphicEvaluator()

        self.secret_key = None
        self.public_key = None

        logger.info("BGV Parameters: n=%d, q=%d, t=%d, support=%s",
                    n, q, t, self.params.small_support)

    @classmethod
    def from_parameters(cls, params, rng=None):
        return cls(params.n, params.q, params.t, params.small_support, rng)

    def key_generation(self):
        self.public_key, self.secret_key = KeyGenerator(self.params, self.rng).generate()
        return self.secret_key, self.public_key

    def encrypt(self, plaintext):
        if self.public_key is None:
            raise ValueError("No Public Key")
        return Encryptor(self.public_key, self.rng).encrypt(plaintext)

    def decrypt(self, ciphertext):
        if self.secret_key is None:
            raise ValueError("No Secret Key")
        return Decryptor(self.secret_key).decrypt(ciphertext)

    def add(self, ct1, ct2):
        return self.evaluator.add(ct1, ct2)

    def multiply(self, ct1, ct2):
        return self.evaluator.multiply(ct1, ct2)

    def encode(self, values):
        if isinstance(values, int):
            values = [values]
        return self.poly_ring.encode(values)

    def decode(self, plaintext):
        return plaintext.decode()
