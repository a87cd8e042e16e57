"""
Keysmith Analyzers
===================

Password strength scoring and weak-password dictionary lookups.
"""

from keysmith.analyzers.scorer import PasswordScorer
from keysmith.analyzers.dictionary_scanner import DictionaryScanner
from keysmith.analyzers.password_analyzer import PasswordAnalyzer

__all__ = [
    "PasswordScorer",
    "DictionaryScanner",
    "PasswordAnalyzer",
]
