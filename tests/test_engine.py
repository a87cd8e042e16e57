import asyncio
import json

import pytest

from shared.config import KeysmithConfig
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import DictionaryNotConfiguredError
from keysmith.core.models import HashOptions


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def config(write_dictionary):
    cfg = KeysmithConfig()
    cfg.analyzer.dictionary_path = str(
        write_dictionary("letmein\npassword123!\n", "weak.txt")
    )
    cfg.generator.dictionary_path = str(
        write_dictionary("cat\ndog\nbird\n", "words.txt")
    )
    cfg.hashing.algorithm = "sha256"
    cfg.hashing.min_iterations = 2
    cfg.hashing.max_iterations = 4
    return cfg


def test_components_use_config(config):
    engine = KeysmithEngine(config)
    assert engine.analyzer.dictionary_path == config.analyzer.dictionary_path
    assert engine.generator.dictionary_path == config.generator.dictionary_path
    assert engine.analyzer.dictionary_cache is False


def test_default_engine_has_no_dictionaries():
    engine = KeysmithEngine()
    assert engine.analyzer.dictionary_path is None
    with pytest.raises(DictionaryNotConfiguredError):
        run(engine.generate_human_readable(3))


def test_analyze_and_complete_analysis(config):
    engine = KeysmithEngine(config)
    assert engine.analyze("Password123!").score == 79
    result = run(engine.complete_analysis("Password123!"))
    assert result.in_dictionary is True
    assert result.score == 54


def test_analyzer_settings_are_independent(config):
    engine = KeysmithEngine(config)
    engine.analyzer.set_dictionary_cache(True)
    assert engine.generator.dictionary_cache is False


def test_generate_defaults(config):
    config.generator.default_length = 20
    config.generator.alphabet = "ab"
    engine = KeysmithEngine(config)
    password = engine.generate()
    assert len(password) == 20
    assert set(password) <= {"a", "b"}
    assert len(engine.generate(5, "xyz")) == 5


def test_generate_human_readable(config):
    engine = KeysmithEngine(config)
    password = run(engine.generate_human_readable(6, 2))
    assert password[:4] == "bird" or password[2:] == "bird"
    assert len(password) == 6


def test_simple_hash_uses_configured_algorithm(config):
    engine = KeysmithEngine(config)
    digest = engine.create_hash("secret")
    assert len(digest) == 64
    assert engine.compare_simple_hash("secret", digest)
    assert not engine.compare_simple_hash("secret", digest, "sha512")


def test_hash_record_uses_config_defaults(config):
    engine = KeysmithEngine(config)
    record = engine.create_hash_record("secret")
    assert record.algorithm == "sha256"
    assert 2 <= record.iteration_count <= 4
    assert engine.compare_hash_record("secret", record)
    assert not engine.compare_hash_record("wrong", record)


def test_hash_record_overrides(config):
    engine = KeysmithEngine(config)
    record = engine.create_hash_record("secret", {"iterations": 7, "use_pepper": False})
    assert record.algorithm == "sha256"
    assert record.iteration_count == 7
    assert record.pepper == ""

    record = engine.create_hash_record("secret", HashOptions(iterations=1))
    assert record.algorithm == "sha512"


def test_logs_never_contain_passwords(config, tmp_path):
    log_file = tmp_path / "keysmith.log"
    config.global_settings.log_level = "DEBUG"
    config.global_settings.log_file = str(log_file)
    config.global_settings.log_json = True
    engine = KeysmithEngine(config)

    engine.analyze("Hunter2Secret!")
    run(engine.complete_analysis("password123!"))
    engine.create_hash_record("Hunter2Secret!")

    for handler in engine.logger.underlying.handlers:
        handler.flush()
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines
    entries = [json.loads(line) for line in lines]
    assert all(entry["logger"] == "keysmith.engine" for entry in entries)
    assert {"analyze", "complete_analysis", "create_hash_record"} <= {
        entry.get("operation") for entry in entries
    }
    text = log_file.read_text(encoding="utf-8")
    assert "Hunter2Secret!" not in text
    assert "password123!" not in text
