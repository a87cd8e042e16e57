"""
Keysmith Engine
================

Central orchestrator for the Keysmith toolkit. :class:`KeysmithEngine`
wires one password analyzer, one password generator and one hash engine
from a :class:`~shared.config.KeysmithConfig` and exposes them behind a
single surface used by the CLI and by library callers.

The analyzer and the generator keep independent dictionary settings; use
:attr:`KeysmithEngine.analyzer` and :attr:`KeysmithEngine.generator` for
the chainable setters.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - NIST SP 800-63B (2017), Section 5.1.1.2 -- Memorized Secret Verifiers.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from shared.config import KeysmithConfig
from shared.logger import KeysmithLogger

from keysmith.analyzers.password_analyzer import PasswordAnalyzer
from keysmith.core.models import AnalysisResult, HashOptions, HashRecord
from keysmith.generators.password_generator import PasswordGenerator
from keysmith.generators.random_source import RandomSource
from keysmith.hashing.hash_engine import HashEngine


class KeysmithEngine:
    """Orchestrates analysis, generation and hashing.

    Usage::

        engine = KeysmithEngine(KeysmithConfig.load("config.toml"))
        result = await engine.complete_analysis("letmein", ["john"])
        password = engine.generate()
        record = engine.create_hash_record("correct horse")
        engine.compare_hash_record("correct horse", record)   # True

    Passwords, salts and digests are never logged.

    Attributes:
        config: Keysmith configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[KeysmithConfig] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or KeysmithConfig()
        settings = self.config.global_settings
        self.logger = KeysmithLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

        self._random = random_source or RandomSource()

        analyzer_cfg = self.config.analyzer
        self._analyzer = PasswordAnalyzer(
            dictionary_path=analyzer_cfg.dictionary_path or None,
            dictionary_cache=analyzer_cfg.dictionary_cache,
            case_insensitive=analyzer_cfg.case_insensitive,
            chunk_size=analyzer_cfg.chunk_size,
        )

        generator_cfg = self.config.generator
        self._generator = PasswordGenerator(
            dictionary_path=generator_cfg.dictionary_path or None,
            dictionary_cache=generator_cfg.dictionary_cache,
            chunk_size=generator_cfg.chunk_size,
            max_attempts=generator_cfg.max_attempts,
            random_source=self._random,
        )

        self._hasher = HashEngine(self._random)

    # ------------------------------------------------------------------ #
    #  Components
    # ------------------------------------------------------------------ #

    @property
    def analyzer(self) -> PasswordAnalyzer:
        return self._analyzer

    @property
    def generator(self) -> PasswordGenerator:
        return self._generator

    @property
    def hasher(self) -> HashEngine:
        return self._hasher

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(
        self,
        password: str,
        keywords: Optional[Sequence[str]] = None,
    ) -> AnalysisResult:
        """Heuristic strength analysis without dictionary lookup."""
        with self.logger.operation("analyze"):
            result = self._analyzer.analyze(password, keywords)
            self.logger.debug(
                "Scored password", length=result.length, score=result.score
            )
            return result

    async def complete_analysis(
        self,
        password: str,
        keywords: Optional[Sequence[str]] = None,
    ) -> AnalysisResult:
        """Heuristic analysis adjusted by the weak-password dictionary."""
        with self.logger.operation("complete_analysis"):
            with self.logger.timed("dictionary-augmented analysis"):
                result = await self._analyzer.complete_analysis(password, keywords)
            if result.in_dictionary:
                self.logger.info(
                    "Password found in dictionary", score=result.score
                )
            return result

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(
        self,
        length: Optional[int] = None,
        alphabet: Optional[str] = None,
    ) -> str:
        """Random password; defaults come from the generator config."""
        if length is None:
            length = self.config.generator.default_length
        if alphabet is None:
            alphabet = self.config.generator.alphabet or None
        with self.logger.operation("generate"):
            password = self._generator.generate(length, alphabet)
            self.logger.debug("Generated random password", length=len(password))
            return password

    async def generate_human_readable(
        self,
        length: int,
        numeric_suffix_length: int = 0,
        chunk_size: Optional[int] = None,
    ) -> str:
        """Dictionary word with an optional numeric suffix."""
        with self.logger.operation("generate_human_readable"):
            with self.logger.timed("word sampling"):
                password = await self._generator.generate_human_readable(
                    length, numeric_suffix_length, chunk_size
                )
            self.logger.debug(
                "Generated human-readable password", length=len(password)
            )
            return password

    # ------------------------------------------------------------------ #
    #  Hashing
    # ------------------------------------------------------------------ #

    def create_hash(self, password: str, algorithm: Optional[str] = None) -> str:
        """Single-pass hex digest; default algorithm comes from the config."""
        algorithm = algorithm or self.config.hashing.algorithm
        with self.logger.operation("create_hash"):
            digest = self._hasher.create_simple_hash(password, algorithm)
            self.logger.debug("Created simple hash", algorithm=algorithm)
            return digest

    def compare_simple_hash(
        self,
        password: str,
        digest: str,
        algorithm: Optional[str] = None,
    ) -> bool:
        algorithm = algorithm or self.config.hashing.algorithm
        with self.logger.operation("compare_simple_hash"):
            matched = self._hasher.compare_simple_hash(password, digest, algorithm)
            self.logger.debug("Compared simple hash", matched=matched)
            return matched

    def create_hash_record(
        self,
        password: str,
        options: Optional[Union[HashOptions, Mapping[str, Any]]] = None,
    ) -> HashRecord:
        """Salted / peppered iterative hash.

        A mapping of options is layered over the configured defaults; a
        :class:`HashOptions` instance is used as given.
        """
        with self.logger.operation("create_hash_record"):
            record = self._hasher.create(password, self._hash_options(options))
            self.logger.debug(
                "Created hash record",
                algorithm=record.algorithm,
                iterations=record.iteration_count,
            )
            return record

    def compare_hash_record(
        self,
        password: str,
        record: Union[HashRecord, Mapping[str, Any], None],
    ) -> bool:
        with self.logger.operation("compare_hash_record"):
            matched = self._hasher.verify(password, record)
            self.logger.debug("Compared hash record", matched=matched)
            return matched

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    def _hash_options(
        self,
        options: Optional[Union[HashOptions, Mapping[str, Any]]],
    ) -> Union[HashOptions, dict[str, Any]]:
        if isinstance(options, HashOptions):
            return options
        cfg = self.config.hashing
        merged: dict[str, Any] = {
            "algorithm": cfg.algorithm,
            "salt_length": cfg.salt_length,
            "pepper_length": cfg.pepper_length,
            "use_salt": cfg.use_salt,
            "use_pepper": cfg.use_pepper,
            "min_iterations": cfg.min_iterations,
            "max_iterations": cfg.max_iterations,
        }
        if options:
            merged.update(options)
        return merged
