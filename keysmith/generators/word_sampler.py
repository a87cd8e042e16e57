"""
Dictionary Word Sampler
========================

Picks a random word of a given length from dictionary text without
splitting the whole text into lines.

Each attempt draws a random offset, slices ``chunk_size`` characters,
discards the partial lines at both edges of the slice and picks uniformly
among the remaining lines of the requested length. A slice without such a
line is thrown away and another offset is drawn. Once ``max_attempts``
slices have come up empty the whole text is scanned, so a rare length is
still found whenever the dictionary holds at least one such word.
"""

from __future__ import annotations

from typing import Optional

from keysmith.core.errors import WordNotFoundError
from keysmith.generators.random_source import RandomSource

DEFAULT_MAX_ATTEMPTS = 1000


class WordSampler:
    """Rejection sampler over random slices of dictionary text.

    Args:
        random_source: Source of offsets and line choices.
        max_attempts: Random slices to try before scanning the whole text.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self._random = random_source or RandomSource()
        self.max_attempts = max(1, max_attempts)

    def pick_word(self, text: str, target_length: int, chunk_size: int) -> str:
        """Return a line of *text* exactly *target_length* characters long.

        Args:
            text: Full dictionary content, one word per line.
            target_length: Required word length.
            chunk_size: Characters examined per attempt.

        Raises:
            WordNotFoundError: If *text* is empty or holds no word of
                *target_length*.
        """
        if not text:
            raise WordNotFoundError("The dictionary is empty.")

        for _ in range(self.max_attempts):
            candidates = [
                line
                for line in self._slice_lines(text, chunk_size)
                if len(line) == target_length
            ]
            if candidates:
                return self._random.choice(candidates)

        candidates = [
            line for line in self._all_lines(text) if len(line) == target_length
        ]
        if candidates:
            return self._random.choice(candidates)

        raise WordNotFoundError(
            f"The dictionary has no word of length {target_length}."
        )

    @staticmethod
    def _all_lines(text: str) -> list[str]:
        """Every non-empty line of *text*, carriage returns stripped."""
        return [line.rstrip("\r") for line in text.split("\n") if line.strip("\r")]

    def _slice_lines(self, text: str, chunk_size: int) -> list[str]:
        """Complete, non-empty lines inside one randomly placed slice."""
        last_offset = len(text) - chunk_size
        offset = self._random.random_int(0, last_offset) if last_offset > 0 else 0
        end = offset + chunk_size
        portion = text[offset:end]

        if offset > 0 and text[offset - 1] != "\n":
            first_break = portion.find("\n")
            if first_break < 0:
                return []
            portion = portion[first_break + 1:]

        if end < len(text) and text[end] != "\n" and not portion.endswith("\n"):
            last_break = portion.rfind("\n")
            if last_break < 0:
                return []
            portion = portion[:last_break + 1]

        return [line.rstrip("\r") for line in portion.split("\n") if line.strip("\r")]
