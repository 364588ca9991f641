from .bgv_scheme import (
    BGVScheme,
    Decryptor,
    Encryptor,
    HomomorphicEvaluator,
    decrypt,
    encrypt,
    homomorphic_add,
    homomorphic_multiply,
)
from .ciphertext import Ciphertext
from .errors import (
    BGVError,
    CoefficientRangeError,
    LengthMismatchError,
    ModulusMismatchError,
    RandomnessError,
)
from .keys import KeyGenerator, PublicKey, SecretKey, generate_keys
from .params import BINARY_SUPPORT, TERNARY_SUPPORT, SchemeParameters
from .polynomial import Polynomial, PolynomialRing
from .randomness import RandomSource, SeededRandomSource, SystemRandomSource

__all__ = [
    "BGVScheme",
    "Decryptor",
    "Encryptor",
    "HomomorphicEvaluator",
    "decrypt",
    "encrypt",
    "homomorphic_add",
    "homomorphic_multiply",
    "Ciphertext",
    "BGVError",
    "CoefficientRangeError",
    "LengthMismatchError",
    "ModulusMismatchError",
    "RandomnessError",
    "KeyGenerator",
    "PublicKey",
    "SecretKey",
    "generate_keys",
    "BINARY_SUPPORT",
    "TERNARY_SUPPORT",
    "SchemeParameters",
    "Polynomial",
    "PolynomialRing",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
]
