"""
Password Strength Scorer
=========================

Deterministic heuristic scoring of a password on a 0-100 scale.

The score starts at 100 and is reduced by:

1. Length: passwords shorter than 15 characters lose
   ``(15 - length) * 100 // 15`` points.
2. Missing character classes: -10 each for no digit, no uppercase and
   no lowercase letter; -5 for no special character.
3. Repetition: for every distinct character, ``extra * 100 // (length * 5)``
   where *extra* counts the occurrences beyond the first.
4. Keywords (names, e-mail addresses, ...): -5 per non-overlapping
   occurrence of each supplied keyword.

The result is clamped to [0, 100]. Character-class counts always use the
password as typed; length, repetition and keyword matching use the
case-folded password when the scorer is case-insensitive.

This is intentionally simple; it is not an entropy estimator.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Optional, Sequence

from keysmith.core.models import AnalysisResult

_DIGITS = re.compile(r"[0-9]")
_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

# Length at which the length penalty disappears
_TARGET_LENGTH = 15

_MISSING_DIGIT_PENALTY = 10
_MISSING_UPPER_PENALTY = 10
_MISSING_LOWER_PENALTY = 10
_MISSING_SPECIAL_PENALTY = 5
_KEYWORD_PENALTY = 5


class PasswordScorer:
    """Computes character statistics and a strength score for a password.

    Usage::

        scorer = PasswordScorer()
        result = scorer.analyze("Password123!", ["password"])
        print(result.score, result.keyword_occurrences)

    Args:
        case_insensitive: Fold the password and keywords to lower case
            before length, repetition and keyword scoring.
    """

    def __init__(self, case_insensitive: bool = True) -> None:
        self.case_insensitive = case_insensitive

    def analyze(
        self,
        password: str,
        keywords: Optional[Sequence[str]] = None,
    ) -> AnalysisResult:
        """Analyse *password*, optionally penalising embedded *keywords*.

        Args:
            password: The password to analyse. Empty or non-string input
                yields a zero-valued result.
            keywords: Strings that should not appear in the password.
                Empty and non-string entries are ignored.

        Returns:
            A freshly constructed :class:`AnalysisResult`.
        """
        if not isinstance(password, str) or password == "":
            return AnalysisResult()

        numbers = len(_DIGITS.findall(password))
        uppercase = len(_UPPER.findall(password))
        lowercase = len(_LOWER.findall(password))
        special = len(_SPECIAL.findall(password))

        folded = self._fold(password)
        length = len(folded)

        delta = 0
        if length < _TARGET_LENGTH:
            delta -= ((_TARGET_LENGTH - length) * 100) // _TARGET_LENGTH

        if numbers == 0:
            delta -= _MISSING_DIGIT_PENALTY
        if uppercase == 0:
            delta -= _MISSING_UPPER_PENALTY
        if lowercase == 0:
            delta -= _MISSING_LOWER_PENALTY
        if special == 0:
            delta -= _MISSING_SPECIAL_PENALTY

        delta -= self._repetition_penalty(folded)

        occurrences: dict[str, int] = {}
        total_matches = 0
        unique_matches = 0
        for keyword in keywords or ():
            if not isinstance(keyword, str) or keyword == "":
                continue
            keyword = self._fold(keyword)
            count = folded.count(keyword)
            occurrences[keyword] = count
            if count:
                total_matches += count
                unique_matches += 1
                delta -= count * _KEYWORD_PENALTY

        return AnalysisResult(
            number_count=numbers,
            uppercase_count=uppercase,
            lowercase_count=lowercase,
            special_char_count=special,
            length=len(password),
            keyword_occurrences=occurrences,
            total_keyword_matches=total_matches,
            unique_keyword_matches=unique_matches,
            score=clamp_score(100 + delta),
        )

    def _fold(self, value: str) -> str:
        return value.lower() if self.case_insensitive else value

    @staticmethod
    def _repetition_penalty(password: str) -> int:
        """Penalty for characters that repeat; single occurrences are free."""
        length = len(password)
        penalty = 0
        # Counter preserves first-seen order
        for occurrences in Counter(password).values():
            extra = occurrences - 1
            if extra:
                penalty += (extra * 100) // (length * 5)
        return penalty


def clamp_score(score: int) -> int:
    """Clamp *score* into [0, 100]."""
    return max(0, min(100, score))
