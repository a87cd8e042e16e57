"""
Password Analyzer
==================

Combines the heuristic :class:`PasswordScorer` with a weak-password
dictionary lookup. A password found in the dictionary loses 25 points when
its heuristic score is above 50, otherwise 10, and the result is clamped
back into [0, 100].

Dictionary settings (path, caching) and case sensitivity are configured
through chainable setters:

    analyzer = (
        PasswordAnalyzer()
        .set_dictionary_path("rockyou.txt")
        .set_dictionary_cache(True)
    )
    result = await analyzer.complete_analysis("letmein", ["john"])
"""

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from keysmith.analyzers.dictionary_scanner import DictionaryScanner
from keysmith.analyzers.scorer import PasswordScorer, clamp_score
from keysmith.core.dictionary import DEFAULT_CHUNK_SIZE, DictionaryCache, PathLike
from keysmith.core.models import AnalysisResult

_HIGH_SCORE_THRESHOLD = 50
_HIGH_SCORE_PENALTY = 25
_LOW_SCORE_PENALTY = 10


class PasswordAnalyzer:
    """Strength analysis with optional dictionary augmentation.

    Args:
        dictionary_path: Weak-password list, one entry per line.
        dictionary_cache: Keep the list in memory after the first lookup.
        case_insensitive: Fold passwords and keywords to lower case.
        chunk_size: Characters per chunk when streaming the dictionary.
    """

    def __init__(
        self,
        dictionary_path: Optional[PathLike] = None,
        dictionary_cache: bool = False,
        case_insensitive: bool = True,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._cache = DictionaryCache(dictionary_path or None, dictionary_cache)
        self._scorer = PasswordScorer(case_insensitive=case_insensitive)
        self._scanner = DictionaryScanner(self._cache, chunk_size=chunk_size)

    # ------------------------------------------------------------------ #
    #  Settings
    # ------------------------------------------------------------------ #

    def set_dictionary_path(self, path: PathLike) -> PasswordAnalyzer:
        self._cache.set_path(path)
        return self

    @property
    def dictionary_path(self) -> Optional[str]:
        return self._cache.path

    def set_dictionary_cache(self, enabled: bool) -> PasswordAnalyzer:
        self._cache.set_cache_enabled(enabled)
        return self

    @property
    def dictionary_cache(self) -> bool:
        return self._cache.cache_enabled

    def invalidate_dictionary_cache(self) -> PasswordAnalyzer:
        self._cache.invalidate()
        return self

    def set_case_insensitive(self, value: bool) -> PasswordAnalyzer:
        """Anything other than an explicit ``False`` enables folding."""
        self._scorer.case_insensitive = value is not False
        return self

    @property
    def case_insensitive(self) -> bool:
        return self._scorer.case_insensitive

    @property
    def cache(self) -> DictionaryCache:
        return self._cache

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(
        self,
        password: str,
        keywords: Optional[Sequence[str]] = None,
    ) -> AnalysisResult:
        """Heuristic analysis only; see :class:`PasswordScorer`."""
        return self._scorer.analyze(password, keywords)

    async def complete_analysis(
        self,
        password: str,
        keywords: Optional[Sequence[str]] = None,
    ) -> AnalysisResult:
        """Heuristic analysis adjusted by a dictionary lookup.

        The dictionary is read off the event loop. Without a configured
        dictionary the plain heuristic result is returned.

        Raises:
            DictionaryReadError: If the dictionary cannot be read.
        """
        analysis = self.analyze(password, keywords)
        if self._cache.path is None or analysis.length == 0:
            return analysis

        target = password.lower() if self.case_insensitive else password
        loop = asyncio.get_running_loop()
        found = await loop.run_in_executor(
            None, self._scanner.contains_line, target
        )
        if not found:
            return analysis

        penalty = (
            _HIGH_SCORE_PENALTY
            if analysis.score > _HIGH_SCORE_THRESHOLD
            else _LOW_SCORE_PENALTY
        )
        return analysis.model_copy(
            update={
                "score": clamp_score(analysis.score - penalty),
                "in_dictionary": True,
            }
        )
