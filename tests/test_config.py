import pytest

from shared.config import KeysmithConfig, get_config

SAMPLE = """
[global]
log_level = "DEBUG"
unknown_global = 1

[analyzer]
dictionary_path = "weak.txt"
dictionary_cache = true
chunk_size = 128

[generator]
dictionary_path = "words.txt"
default_length = 24
alphabet = "abc123"

[hashing]
algorithm = "sha256"
max_iterations = 1024
pepper = "ignored"

[unknown_section]
value = "x"
"""


def test_defaults():
    config = KeysmithConfig()
    assert config.global_settings.log_level == "WARNING"
    assert config.analyzer.dictionary_path == ""
    assert config.analyzer.case_insensitive is True
    assert config.generator.default_length == 16
    assert config.generator.max_attempts == 1000
    assert config.hashing.algorithm == "sha512"
    assert (config.hashing.min_iterations, config.hashing.max_iterations) == (1, 256)


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE, encoding="utf-8")
    config = KeysmithConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.analyzer.dictionary_path == "weak.txt"
    assert config.analyzer.dictionary_cache is True
    assert config.analyzer.chunk_size == 128
    assert config.generator.dictionary_path == "words.txt"
    assert config.generator.default_length == 24
    assert config.generator.alphabet == "abc123"
    assert config.hashing.algorithm == "sha256"
    assert config.hashing.max_iterations == 1024
    # untouched keys keep their defaults
    assert config.hashing.salt_length == 32
    assert config.generator.chunk_size == 4096


def test_missing_explicit_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        KeysmithConfig.load(tmp_path / "nope.toml")


def test_to_dict():
    data = KeysmithConfig().to_dict()
    assert set(data) == {"global_settings", "analyzer", "generator", "hashing"}
    assert data["hashing"]["algorithm"] == "sha512"


def test_get_config_caches_explicit_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE, encoding="utf-8")
    first = get_config(path)
    assert get_config() is first
    assert first.hashing.algorithm == "sha256"
