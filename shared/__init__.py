"""
Keysmith Shared Module
=======================

Configuration, logging and console utilities shared by the Keysmith
engine, CLI and output layers.
"""

from shared.config import KeysmithConfig, get_config

__all__ = ["KeysmithConfig", "get_config"]
