"""
Keysmith -- Password Analysis, Generation and Hashing Toolkit
==============================================================

Scores password strength (optionally against a weak-password dictionary),
generates random and human-readable passwords, and produces salted and
peppered iterative password hashes with constant-time verification.

Modules:
    - keysmith.core.engine: Facade over analyzer, generator and hasher
    - keysmith.core.models: Pydantic data models
    - keysmith.core.dictionary: Wordlist path and cache management
    - keysmith.analyzers: Strength scoring and dictionary lookups
    - keysmith.generators: Random source, word sampler, generators
    - keysmith.hashing: Iterative salted/peppered hashing
    - keysmith.output: Console output
    - keysmith.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Python ``secrets`` module documentation.
"""

__version__ = "1.0.0"
__tool_name__ = "keysmith"
