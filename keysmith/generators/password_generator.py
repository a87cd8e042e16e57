"""
Password Generator
===================

Random passwords drawn from an alphabet, and human-readable passwords made
of a dictionary word plus an optional numeric suffix.

Usage::

    generator = PasswordGenerator().set_dictionary_path("words.txt")
    generator.generate(16)
    await generator.generate_human_readable(12, 2)   # e.g. "sunflower42"
"""

from __future__ import annotations

import asyncio
from typing import Optional

from keysmith.core.dictionary import DEFAULT_CHUNK_SIZE, DictionaryCache, PathLike
from keysmith.core.errors import DictionaryNotConfiguredError, ValidationError
from keysmith.generators.random_source import DIGITS, RandomSource, is_integer
from keysmith.generators.word_sampler import DEFAULT_MAX_ATTEMPTS, WordSampler


class PasswordGenerator:
    """Random and dictionary-based password generation.

    Args:
        dictionary_path: Word source, one word per line.
        dictionary_cache: Keep the word list in memory after the first read.
        chunk_size: Default slice size used when sampling words.
        max_attempts: Random slices the word sampler tries before scanning
            the whole dictionary.
        random_source: Shared source of randomness.
    """

    def __init__(
        self,
        dictionary_path: Optional[PathLike] = None,
        dictionary_cache: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self._random = random_source or RandomSource()
        self._cache = DictionaryCache(dictionary_path or None, dictionary_cache)
        self._sampler = WordSampler(self._random, max_attempts=max_attempts)
        self.chunk_size = (
            chunk_size
            if is_integer(chunk_size) and chunk_size > 1
            else DEFAULT_CHUNK_SIZE
        )

    # ------------------------------------------------------------------ #
    #  Settings
    # ------------------------------------------------------------------ #

    def set_dictionary_path(self, path: PathLike) -> PasswordGenerator:
        self._cache.set_path(path)
        return self

    @property
    def dictionary_path(self) -> Optional[str]:
        return self._cache.path

    def set_dictionary_cache(self, enabled: bool) -> PasswordGenerator:
        self._cache.set_cache_enabled(enabled)
        return self

    @property
    def dictionary_cache(self) -> bool:
        return self._cache.cache_enabled

    def invalidate_dictionary_cache(self) -> PasswordGenerator:
        self._cache.invalidate()
        return self

    @property
    def cache(self) -> DictionaryCache:
        return self._cache

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, length: int, alphabet: Optional[str] = None) -> str:
        """Random password of *length* characters from *alphabet*.

        Returns an empty string when *length* is not a positive integer.
        """
        return self._random.random_token(length, alphabet)

    async def generate_human_readable(
        self,
        length: int,
        numeric_suffix_length: int = 0,
        chunk_size: Optional[int] = None,
    ) -> str:
        """Dictionary word, optionally joined with random digits.

        The digits are appended or prepended with equal probability. If
        *numeric_suffix_length* is at least *length* the result is digits
        only, *numeric_suffix_length* long.

        Args:
            length: Total password length.
            numeric_suffix_length: Number of random digits to add.
            chunk_size: Slice size for word sampling; values <= 1 or
                ``None`` use the generator default.

        Raises:
            ValidationError: If *length* is not a positive integer.
            DictionaryNotConfiguredError: If no dictionary path is set.
            DictionaryReadError: If the dictionary cannot be read.
            WordNotFoundError: If the dictionary file is empty or holds no
                word of the needed length. An empty file is an error rather
                than an empty password.
        """
        if not is_integer(length) or length <= 0:
            raise ValidationError("Length must be a positive integer.")
        if self._cache.path is None:
            raise DictionaryNotConfiguredError("No word dictionary configured.")

        suffix_length = (
            numeric_suffix_length
            if is_integer(numeric_suffix_length) and numeric_suffix_length > 0
            else 0
        )
        number = ""
        if suffix_length:
            length = max(length, suffix_length)
            number = self._random.random_token(suffix_length, DIGITS)
            if suffix_length == length:
                return number

        if not is_integer(chunk_size) or chunk_size <= 1:
            chunk_size = self.chunk_size

        loop = asyncio.get_running_loop()
        word = await loop.run_in_executor(
            None, self._sample_word, length - suffix_length, chunk_size
        )
        if self._random.random_int(0, 1) == 1:
            return word + number
        return number + word

    def _sample_word(self, length: int, chunk_size: int) -> str:
        text = self._cache.cached_content if self._cache.cache_enabled else None
        if not text:
            text = self._cache.load()
        return self._sampler.pick_word(text, length, chunk_size)
