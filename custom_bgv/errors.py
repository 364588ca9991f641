"""
Exceptions raised by the BGV core.
"""


class BGVError(Exception):
    """Base class for every error raised by custom_bgv."""


class RandomnessError(BGVError):
    """The randomness source could not supply samples."""


class CoefficientRangeError(BGVError, OverflowError):
    """A coefficient does not fit the requested output integer width."""

    def __init__(self, index, value, dtype):
        self.index = index
        self.value = value
        self.dtype = dtype
        super().__init__(
            f"Coefficient {index} = {value} exceeds {dtype} range"
        )


class LengthMismatchError(BGVError, ValueError):
    """Operands of a ring operation have different degrees."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"Ring degree mismatch: {left} != {right}")


class ModulusMismatchError(BGVError, ValueError):
    """Operands of a ring operation live under different moduli."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"Coefficient modulus mismatch: {left} != {right}")
