"""
Keysmith Output
================

Rich console formatters for analysis results, hash records and generated
passwords.
"""

from keysmith.output.console import KeysmithConsoleOutput

__all__ = ["KeysmithConsoleOutput"]
