"""
Keysmith Exceptions
====================

Exception hierarchy shared by every Keysmith component. Validation and
algorithm errors are raised synchronously by the offending call; dictionary
I/O errors are raised from the awaited coroutine that performed the read.
"""

from __future__ import annotations


class KeysmithError(Exception):
    """Base class for all Keysmith errors."""

    pass


class ValidationError(KeysmithError, ValueError):
    """Invalid input shape, type or range. Never retried."""

    pass


class RangeExhaustedError(ValidationError):
    """A random range wider than six random bytes can represent.

    Also raised when the upper bound exceeds the largest integer that a
    double can represent exactly (``2**53 - 1``).
    """

    pass


class DictionaryNotConfiguredError(ValidationError):
    """An operation needs a dictionary file but no path has been set."""

    pass


class UnsupportedAlgorithmError(KeysmithError, ValueError):
    """The requested digest is not available from :mod:`hashlib`."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")
        self.algorithm = algorithm


class DictionaryReadError(KeysmithError):
    """A dictionary file could not be opened, read or decoded.

    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read dictionary {path!r}: {reason}")
        self.path = path


class WordNotFoundError(KeysmithError):
    """The word sampler gave up without finding a word of the target length."""

    pass
