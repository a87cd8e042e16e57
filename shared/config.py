"""
Keysmith Configuration Management
==================================

Centralized configuration for the Keysmith toolkit using Python
dataclasses and TOML-based persistence.

Example ``config.toml``::

    [global]
    log_level = "DEBUG"

    [analyzer]
    dictionary_path = "/usr/share/wordlists/rockyou.txt"
    dictionary_cache = false

    [generator]
    dictionary_path = "words.txt"
    dictionary_cache = true

    [hashing]
    algorithm = "sha256"
    max_iterations = 1024

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Component Configs ==============================


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Configuration for the password strength analyzer.

    ``dictionary_path`` points at a weak-password list (one entry per
    line); an empty string disables dictionary-augmented scoring.
    """

    dictionary_path: str = ""
    dictionary_cache: bool = False
    case_insensitive: bool = True
    chunk_size: int = 4096


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Configuration for the password generators.

    ``dictionary_path`` points at the word source used for human-readable
    passwords. ``max_attempts`` is the number of random slices the word
    sampler tries before scanning the whole dictionary.
    """

    dictionary_path: str = ""
    dictionary_cache: bool = False
    chunk_size: int = 4096
    max_attempts: int = 1000
    default_length: int = 16
    alphabet: str = ""


@dataclass(frozen=False, slots=True)
class HashConfig:
    """Defaults for salted/peppered iterative hashing."""

    algorithm: str = "sha512"
    salt_length: int = 32
    pepper_length: int = 32
    use_salt: bool = True
    use_pepper: bool = True
    min_iterations: int = 1
    max_iterations: int = 256


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and destinations."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class KeysmithConfig:
    """Master configuration aggregating all component and global settings.

    Usage:
        >>> config = KeysmithConfig.load()                  # from default path
        >>> config = KeysmithConfig.load("custom.toml")     # from custom path
        >>> print(config.hashing.algorithm)
        'sha512'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    hashing: HashConfig = field(default_factory=HashConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeysmithConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`KeysmithConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            # Fall back to pure defaults when the default file is absent.
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            hashing=cls._build_section(HashConfig, raw.get("hashing", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> KeysmithConfig:
    """Module-level convenience wrapper around :meth:`KeysmithConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = KeysmithConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
