"""
Keysmith Hashing
=================

Salted, peppered, iterative password hashing and verification.
"""

from keysmith.hashing.hash_engine import HashEngine

__all__ = ["HashEngine"]
