"""
Iterative Password Hashing
===========================

Salted and peppered password hashing with a configurable (optionally
random) number of digest passes, plus a single-pass convenience hash.

The iterative digest is computed as::

    value = salt + password + pepper
    repeat iteration_count times:
        value = hex(H(value))

where *H* is any fixed-length :mod:`hashlib` algorithm. Verification
recomputes the value from the stored :class:`HashRecord` and compares it
with :func:`hmac.compare_digest`.

These are general-purpose digests, not a key-derivation function; prefer
``hashlib.scrypt`` or ``hashlib.pbkdf2_hmac`` for new password storage.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2 -- Memorized Secret Verifiers.
    - Python ``hashlib`` and ``hmac`` documentation.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as ModelValidationError

from keysmith.core.errors import UnsupportedAlgorithmError, ValidationError
from keysmith.core.models import DEFAULT_ALGORITHM, HashOptions, HashRecord
from keysmith.generators.random_source import RandomSource


def _resolve_algorithm(algorithm: Optional[str]) -> str:
    """Return a usable algorithm name or raise :class:`UnsupportedAlgorithmError`.

    Variable-length digests (``shake_128``, ``shake_256``) are rejected
    because they cannot produce a hex digest without an explicit length.
    """
    if not isinstance(algorithm, str) or algorithm == "":
        return DEFAULT_ALGORITHM
    try:
        hashlib.new(algorithm).hexdigest()
    except (ValueError, TypeError) as exc:
        raise UnsupportedAlgorithmError(algorithm) from exc
    return algorithm


def _iterate(value: str, algorithm: str, iterations: int) -> str:
    for _ in range(iterations):
        value = hashlib.new(algorithm, value.encode("utf-8")).hexdigest()
    return value


def _digests_equal(left: str, right: str) -> bool:
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


class HashEngine:
    """Creates and verifies password hashes.

    Usage::

        engine = HashEngine()
        record = engine.create("correct horse", HashOptions(iterations=100))
        engine.verify("correct horse", record)      # True

        digest = engine.create_simple_hash("secret", "sha256")
        engine.compare_simple_hash("secret", digest, "sha256")   # True

    Args:
        random_source: Source for salt, pepper and iteration counts.
    """

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self._random = random_source or RandomSource()

    # ------------------------------------------------------------------ #
    #  Iterative salted / peppered hash
    # ------------------------------------------------------------------ #

    def create(
        self,
        password: str,
        options: Optional[Union[HashOptions, Mapping[str, Any]]] = None,
    ) -> HashRecord:
        """Hash *password* and return everything needed to verify it.

        Args:
            password: Non-empty password.
            options: :class:`HashOptions` or a mapping of its fields.

        Raises:
            ValidationError: If *password* is empty or not a string, or the
                options are malformed.
            UnsupportedAlgorithmError: If the algorithm is unavailable.
        """
        if not isinstance(password, str) or password == "":
            raise ValidationError("Invalid password.")
        opts = self._coerce_options(options)
        algorithm = _resolve_algorithm(opts.algorithm)

        if opts.iterations is not None:
            iterations = opts.iterations
        else:
            iterations = self._random.random_int(
                opts.min_iterations, opts.max_iterations
            )

        salt = self._random.random_token(opts.salt_length) if opts.use_salt else ""
        pepper = (
            self._random.random_token(opts.pepper_length) if opts.use_pepper else ""
        )

        digest = _iterate(salt + password + pepper, algorithm, iterations)
        return HashRecord(
            salt=salt,
            pepper=pepper,
            iteration_count=iterations,
            digest=digest,
            algorithm=algorithm,
        )

    def verify(
        self,
        password: str,
        record: Union[HashRecord, Mapping[str, Any], None],
    ) -> bool:
        """Check *password* against a record produced by :meth:`create`.

        Structurally invalid input yields ``False``.

        Raises:
            UnsupportedAlgorithmError: If the record names an unavailable
                algorithm.
        """
        if not isinstance(password, str) or password == "":
            return False
        if isinstance(record, Mapping):
            try:
                record = HashRecord.model_validate(record)
            except ModelValidationError:
                return False
        if not isinstance(record, HashRecord):
            return False

        algorithm = _resolve_algorithm(record.algorithm)
        computed = _iterate(
            record.salt + password + record.pepper,
            algorithm,
            record.iteration_count,
        )
        return _digests_equal(computed, record.digest)

    # ------------------------------------------------------------------ #
    #  Single-pass hash
    # ------------------------------------------------------------------ #

    def create_simple_hash(
        self,
        password: str,
        algorithm: Optional[str] = None,
    ) -> str:
        """Hex digest of one pass of *algorithm* (default sha512)."""
        if not isinstance(password, str) or password == "":
            raise ValidationError("Invalid password.")
        return _iterate(password, _resolve_algorithm(algorithm), 1)

    def compare_simple_hash(
        self,
        password: str,
        digest: str,
        algorithm: Optional[str] = None,
    ) -> bool:
        """Constant-time check of *password* against a single-pass digest."""
        if not isinstance(password, str) or password == "":
            return False
        if not isinstance(digest, str) or digest == "":
            return False
        return _digests_equal(self.create_simple_hash(password, algorithm), digest)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce_options(
        options: Optional[Union[HashOptions, Mapping[str, Any]]],
    ) -> HashOptions:
        if options is None:
            return HashOptions()
        if isinstance(options, HashOptions):
            return options
        try:
            return HashOptions.model_validate(dict(options))
        except (ModelValidationError, TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid hash options: {exc}") from exc
