"""
Scheme parameters.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Secret and error coefficient supports
BINARY_SUPPORT = (0, 1)
TERNARY_SUPPORT = (-1, 0, 1)


class SchemeParameters(BaseModel):
    """Ring degree, moduli and small-coefficient support for one key set.

    Defaults reproduce the small demo configuration (n=4, q=97, t=2,
    secrets and errors drawn from {0, 1}).
    """

    model_config = ConfigDict(frozen=True)

    n: int = Field(4, gt=0, description="Ring degree")
    q: int = Field(97, gt=1, description="Coefficient modulus")
    t: int = Field(2, gt=1, description="Plaintext modulus")
    small_support: Tuple[int, ...] = Field(
        BINARY_SUPPORT, description="Values secret and error coefficients are drawn from"
    )

    @field_validator("small_support")
    @classmethod
    def _check_support(cls, support):
        if not support:
            raise ValueError("small_support must not be empty")
        if len(set(support)) != len(support):
            raise ValueError("small_support values must be distinct")
        return support

    @model_validator(mode="after")
    def _check_moduli(self):
        if self.t >= self.q:
            raise ValueError(f"Plaintext modulus t={self.t} must be below q={self.q}")
        if any(abs(v) >= self.q for v in self.small_support):
            raise ValueError("small_support values must be smaller than q in magnitude")
        return self

    @property
    def noise_bound(self):
        """q // (2t): decryption is only correct while noise stays below this."""
        return self.q // (2 * self.t)
