"""
Keysmith Generators
====================

Cryptographic random source, dictionary word sampler and the password
generators built on them.
"""

from keysmith.generators.random_source import RandomSource
from keysmith.generators.word_sampler import WordSampler
from keysmith.generators.password_generator import PasswordGenerator

__all__ = [
    "RandomSource",
    "WordSampler",
    "PasswordGenerator",
]
