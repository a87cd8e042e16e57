"""
Keysmith Core Module
=====================

Contains the data models, dictionary cache and error hierarchy for the
Keysmith toolkit. The engine lives in :mod:`keysmith.core.engine`.
"""

from keysmith.core.dictionary import DictionaryCache
from keysmith.core.errors import (
    DictionaryNotConfiguredError,
    DictionaryReadError,
    KeysmithError,
    RangeExhaustedError,
    UnsupportedAlgorithmError,
    ValidationError,
    WordNotFoundError,
)
from keysmith.core.models import (
    AnalysisResult,
    HashOptions,
    HashRecord,
    PasswordStrength,
)

__all__ = [
    "AnalysisResult",
    "DictionaryCache",
    "DictionaryNotConfiguredError",
    "DictionaryReadError",
    "HashOptions",
    "HashRecord",
    "KeysmithError",
    "PasswordStrength",
    "RangeExhaustedError",
    "UnsupportedAlgorithmError",
    "ValidationError",
    "WordNotFoundError",
]
