"""
Keysmith Core Data Models
==========================

Pydantic models for the Keysmith toolkit. These models represent the
structured results of password strength analysis and iterative password
hashing, together with the options accepted by the hash engine.

Results are immutable once returned; callers that need an adjusted copy
(e.g. the dictionary-augmented analysis) use ``model_copy(update=...)``.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and library callers.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PasswordStrength(str, enum.Enum):
    """Qualitative password strength rating derived from the 0-100 score."""

    VERY_WEAK = "very_weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @classmethod
    def from_score(cls, score: int) -> PasswordStrength:
        """Map a 0-100 score onto a strength band.

        Bands:
          - 80-100 : VERY_STRONG
          - 60-79  : STRONG
          - 40-59  : FAIR
          - 20-39  : WEAK
          - 0-19   : VERY_WEAK
        """
        if score >= 80:
            return cls.VERY_STRONG
        if score >= 60:
            return cls.STRONG
        if score >= 40:
            return cls.FAIR
        if score >= 20:
            return cls.WEAK
        return cls.VERY_WEAK


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class AnalysisResult(BaseModel):
    """Result of a password strength analysis.

    Attributes:
        number_count: Number of ASCII digits in the password.
        uppercase_count: Number of ASCII uppercase letters.
        lowercase_count: Number of ASCII lowercase letters.
        special_char_count: Number of characters outside ``[A-Za-z0-9]``.
        length: Length of the password as supplied.
        keyword_occurrences: Occurrences of each supplied keyword.
        total_keyword_matches: Sum of all keyword occurrences.
        unique_keyword_matches: Number of keywords found at least once.
        score: Strength score in [0, 100].
        in_dictionary: Whether the password was found in the weak-password
            dictionary (always ``False`` for a plain analysis).
    """

    model_config = ConfigDict(frozen=True)

    number_count: int = 0
    uppercase_count: int = 0
    lowercase_count: int = 0
    special_char_count: int = 0
    length: int = 0
    keyword_occurrences: dict[str, int] = Field(default_factory=dict)
    total_keyword_matches: int = 0
    unique_keyword_matches: int = 0
    score: int = Field(default=0, ge=0, le=100)
    in_dictionary: bool = False

    @property
    def strength(self) -> PasswordStrength:
        """Qualitative band for :attr:`score`."""
        return PasswordStrength.from_score(self.score)


# ===================================================================== #
#  Hashing Models
# ===================================================================== #


DEFAULT_ALGORITHM = "sha512"


class HashRecord(BaseModel):
    """Everything needed to verify a password against an iterative hash.

    Attributes:
        salt: Random prefix mixed into the password (may be empty).
        pepper: Random suffix mixed into the password (may be empty).
        iteration_count: Number of digest passes applied.
        digest: Hex digest after the final pass.
        algorithm: :mod:`hashlib` algorithm name.
    """

    model_config = ConfigDict(frozen=True)

    salt: str = ""
    pepper: str = ""
    iteration_count: int = Field(default=1, ge=1)
    digest: str = Field(..., min_length=1)
    algorithm: str = DEFAULT_ALGORITHM


class HashOptions(BaseModel):
    """Options accepted by :meth:`keysmith.hashing.HashEngine.create`.

    Lengths outside [1, 256] are clamped rather than rejected. When
    *iterations* is unset the iteration count is drawn uniformly from
    [*min_iterations*, *max_iterations*].
    """

    algorithm: str = DEFAULT_ALGORITHM
    salt_length: int = 32
    pepper_length: int = 32
    use_salt: bool = True
    use_pepper: bool = True
    iterations: Optional[int] = None
    min_iterations: int = 1
    max_iterations: int = 256

    @field_validator("algorithm", mode="before")
    @classmethod
    def _default_algorithm(cls, v: object) -> object:
        if v is None or v == "":
            return DEFAULT_ALGORITHM
        return v

    @field_validator("salt_length", "pepper_length")
    @classmethod
    def _clamp_length(cls, v: int) -> int:
        return max(1, min(256, v))

    @field_validator("iterations")
    @classmethod
    def _positive_iterations(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            return 1
        return v

    @model_validator(mode="after")
    def _order_iteration_range(self) -> HashOptions:
        if self.min_iterations < 1:
            self.min_iterations = 1
        if self.min_iterations > self.max_iterations:
            self.max_iterations = self.min_iterations + 1
        return self
