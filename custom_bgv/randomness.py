"""
Randomness Providers
Sampling capability passed explicitly into key generation and encryption.
"""

import secrets

import numpy as np

from .errors import RandomnessError

# numpy's integer sampler works in int64
_INT64_LIMIT = 1 << 63


class RandomSource:
    """Interface every randomness provider implements."""

    def uniform(self, count, bound):
        """Return `count` integers uniform in [0, bound)."""
        raise NotImplementedError

    def choice(self, support, count):
        """Return `count` integers drawn uniformly from `support`."""
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    """OS entropy pool. Never falls back to a weaker generator."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def uniform(self, count, bound):
        try:
            return [self._rng.randrange(bound) for _ in range(count)]
        except (OSError, NotImplementedError) as exc:
            raise RandomnessError("System entropy source unavailable") from exc

    def choice(self, support, count):
        support = list(support)
        try:
            return [self._rng.choice(support) for _ in range(count)]
        except (OSError, NotImplementedError) as exc:
            raise RandomnessError("System entropy source unavailable") from exc


class SeededRandomSource(RandomSource):
    """Deterministic numpy generator for reproducible runs and tests."""

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, count, bound):
        if bound <= _INT64_LIMIT:
            samples = self._rng.integers(0, bound, size=count, dtype=np.int64)
            return [int(x) for x in samples]
        return [self._big_below(bound) for _ in range(count)]

    def choice(self, support, count):
        support = np.array(list(support), dtype=object)
        idx = self._rng.integers(0, len(support), size=count)
        return [int(support[i]) for i in idx]

    def _big_below(self, bound):
        # Rejection sampling over raw generator bytes
        bits = (bound - 1).bit_length()
        n_bytes = (bits + 7) // 8
        excess = n_bytes * 8 - bits
        while True:
            value = int.from_bytes(self._rng.bytes(n_bytes), "big") >> excess
            if value < bound:
                return value
