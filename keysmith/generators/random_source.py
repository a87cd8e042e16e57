"""
Cryptographic Random Source
============================

Bounded integers and random tokens built on a cryptographically secure
byte source (:func:`secrets.token_bytes` by default).

Integers are produced by drawing the smallest number of bytes (1-6) whose
capacity covers the requested span, reading them as a big-endian unsigned
integer and scaling into the span. Draws that land in the tail above the
largest multiple of the span are redrawn, so every value in the range is
exactly equally likely.

Tokens index the alphabet with ``byte % len(alphabet)``. For alphabets whose
size does not divide 256 this carries a small modulo bias (for the default
62-symbol alphabet the first 8 symbols are 5/4 as likely as the rest); the
behaviour is kept for compatibility with existing tokens.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
      Seminumerical Algorithms (3rd ed.), Section 3.4.1.
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
"""

from __future__ import annotations

import secrets
import string
from typing import Callable, Optional, Sequence, TypeVar

from keysmith.core.errors import RangeExhaustedError, ValidationError

T = TypeVar("T")

DEFAULT_ALPHABET: str = string.ascii_letters + string.digits
DIGITS: str = string.digits

MAX_BYTES = 6
MAX_RANGE = 256 ** MAX_BYTES - 1   # 2**48 - 1
MAX_SAFE_INTEGER = 2 ** 53 - 1


def is_integer(value: object) -> bool:
    """``True`` for ints, excluding ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


class RandomSource:
    """Unbiased bounded integers and random tokens.

    Usage::

        rng = RandomSource()
        rng.random_int(1, 6)
        rng.random_token(16)
        rng.random_token(4, "0123456789")

    Args:
        bytes_source: Callable returning *n* random bytes. Defaults to
            :func:`secrets.token_bytes`; tests inject deterministic sources.
    """

    def __init__(
        self,
        bytes_source: Optional[Callable[[int], bytes]] = None,
    ) -> None:
        self._bytes = bytes_source or secrets.token_bytes

    # ------------------------------------------------------------------ #
    #  Integers
    # ------------------------------------------------------------------ #

    def random_int(self, min_value: int, max_value: int) -> int:
        """Return a uniformly distributed integer in ``[min_value, max_value]``.

        A degenerate range (``min_value == max_value``) is widened to
        ``[min_value, min_value + 1]``.

        Raises:
            ValidationError: If a bound is not an integer or
                ``min_value > max_value``.
            RangeExhaustedError: If the range exceeds ``2**48 - 1`` or the
                upper bound exceeds ``2**53 - 1``.
        """
        if not is_integer(min_value) or not is_integer(max_value):
            raise ValidationError("Range bounds must be integers.")
        if min_value > max_value:
            raise ValidationError(
                f"Invalid range: min ({min_value}) is greater than max ({max_value})."
            )

        distance = max_value - min_value
        if distance > MAX_RANGE:
            raise RangeExhaustedError(
                "Cannot draw uniformly from a range wider than 256^6 - 1."
            )
        if min_value == max_value:
            max_value = min_value + 1
        if max_value > MAX_SAFE_INTEGER:
            raise RangeExhaustedError(
                "Maximum value must not exceed the safe integer limit (2^53 - 1)."
            )

        span = max_value - min_value + 1
        width, capacity = self._byte_width(distance)
        bucket = capacity // span
        limit = bucket * span

        while True:
            raw = int.from_bytes(self._bytes(width), "big")
            if raw < limit:
                return min_value + raw // bucket

    @staticmethod
    def _byte_width(distance: int) -> tuple[int, int]:
        """Smallest byte count whose capacity exceeds *distance*."""
        width = 1
        capacity = 256
        while distance >= capacity and width < MAX_BYTES:
            width += 1
            capacity *= 256
        return width, capacity

    # ------------------------------------------------------------------ #
    #  Tokens
    # ------------------------------------------------------------------ #

    def random_token(self, length: int, alphabet: Optional[str] = None) -> str:
        """Return *length* characters drawn from *alphabet*.

        Args:
            length: Number of characters. Anything other than a positive
                integer yields an empty string.
            alphabet: Candidate characters; empty or ``None`` selects
                ``A-Za-z0-9``.
        """
        if not is_integer(length) or length <= 0:
            return ""
        if not isinstance(alphabet, str) or alphabet == "":
            alphabet = DEFAULT_ALPHABET

        size = len(alphabet)
        return "".join(alphabet[byte % size] for byte in self._bytes(length))

    def choice(self, items: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not items:
            raise ValidationError("Cannot choose from an empty sequence.")
        if len(items) == 1:
            return items[0]
        return items[self.random_int(0, len(items) - 1)]


# ===================================================================== #
#  Module-level convenience
# ===================================================================== #

_default_source = RandomSource()


def random_int(min_value: int, max_value: int) -> int:
    """:meth:`RandomSource.random_int` on the shared default source."""
    return _default_source.random_int(min_value, max_value)


def random_token(length: int, alphabet: Optional[str] = None) -> str:
    """:meth:`RandomSource.random_token` on the shared default source."""
    return _default_source.random_token(length, alphabet)
