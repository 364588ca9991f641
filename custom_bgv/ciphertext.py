from dataclasses import dataclass

from .errors import LengthMismatchError, ModulusMismatchError
from .polynomial import Polynomial


@dataclass(frozen=True)
class Ciphertext:
    """Two-component ciphertext (c0, c1), degree 1 in the secret key."""

    c0: Polynomial
    c1: Polynomial

    def __post_init__(self):
        if len(self.c0) != len(self.c1):
            raise LengthMismatchError(len(self.c0), len(self.c1))
        if self.c0.q != self.c1.q:
            raise ModulusMismatchError(self.c0.q, self.c1.q)

    @property
    def components(self):
        return self.c0, self.c1

    @property
    def degree(self):
        return len(self.c0)

    @property
    def modulus(self):
        return self.c0.q
