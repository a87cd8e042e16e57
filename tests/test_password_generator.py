import asyncio

import pytest

from keysmith.core.errors import (
    DictionaryNotConfiguredError,
    DictionaryReadError,
    ValidationError,
    WordNotFoundError,
)
from keysmith.generators.password_generator import PasswordGenerator
from keysmith.generators.random_source import DEFAULT_ALPHABET

WORDS = "cat\ndog\nbird\n"


def run(coro):
    return asyncio.run(coro)


def test_generate_uses_alphabet():
    generator = PasswordGenerator()
    password = generator.generate(24)
    assert len(password) == 24
    assert set(password) <= set(DEFAULT_ALPHABET)
    assert set(generator.generate(30, "xyz")) <= {"x", "y", "z"}


@pytest.mark.parametrize("length", [0, -1, "8"])
def test_generate_invalid_length_is_empty(length):
    assert PasswordGenerator().generate(length) == ""


def test_settings_chain(tmp_path):
    generator = PasswordGenerator()
    assert generator.set_dictionary_path(tmp_path / "w.txt") is generator
    assert generator.set_dictionary_cache(True) is generator
    assert generator.invalidate_dictionary_cache() is generator
    assert generator.dictionary_path == str(tmp_path / "w.txt")
    assert generator.dictionary_cache is True


def test_human_readable_requires_dictionary():
    with pytest.raises(DictionaryNotConfiguredError):
        run(PasswordGenerator().generate_human_readable(8))


@pytest.mark.parametrize("length", [0, -4, "6", None])
def test_human_readable_rejects_bad_length(length):
    with pytest.raises(ValidationError):
        run(PasswordGenerator().generate_human_readable(length))


def test_word_without_suffix(scripted, write_dictionary):
    # choice between cat/dog -> cat, then the order draw
    rng, _ = scripted([0, 0])
    generator = PasswordGenerator(write_dictionary(WORDS), random_source=rng)
    assert run(generator.generate_human_readable(3)) == "cat"

    rng, _ = scripted([200, 200])
    generator = PasswordGenerator(write_dictionary(WORDS), random_source=rng)
    assert run(generator.generate_human_readable(3)) == "dog"


def test_word_with_suffix_appended(scripted, write_dictionary):
    rng, source = scripted([1, 2, 200])
    generator = PasswordGenerator(write_dictionary(WORDS), random_source=rng)
    assert run(generator.generate_human_readable(6, 2)) == "bird12"
    assert source.remaining == 0


def test_word_with_suffix_prepended(scripted, write_dictionary):
    rng, _ = scripted([1, 2, 0])
    generator = PasswordGenerator(write_dictionary(WORDS), random_source=rng)
    assert run(generator.generate_human_readable(6, 2)) == "12bird"


def test_suffix_at_least_length_is_digits_only(write_dictionary):
    generator = PasswordGenerator(write_dictionary(WORDS))
    password = run(generator.generate_human_readable(3, 5))
    assert len(password) == 5
    assert password.isdigit()


def test_human_readable_caches_dictionary(write_dictionary):
    generator = PasswordGenerator(write_dictionary(WORDS), dictionary_cache=True)
    assert run(generator.generate_human_readable(4)) == "bird"
    assert generator.cache.cached_content == WORDS


def test_no_word_of_length(write_dictionary):
    generator = PasswordGenerator(write_dictionary(WORDS), max_attempts=3)
    with pytest.raises(WordNotFoundError):
        run(generator.generate_human_readable(7))


def test_missing_dictionary_file(tmp_path):
    generator = PasswordGenerator(tmp_path / "missing.txt")
    with pytest.raises(DictionaryReadError):
        run(generator.generate_human_readable(5))


def test_small_chunk_size_falls_back_to_default(write_dictionary):
    generator = PasswordGenerator(write_dictionary(WORDS))
    assert run(generator.generate_human_readable(4, 0, chunk_size=1)) == "bird"


def test_rare_length_word_is_found(write_dictionary):
    path = write_dictionary("abcd\n" * 200_000 + "sunflower\n")
    generator = PasswordGenerator(path, max_attempts=5)
    assert run(generator.generate_human_readable(9)) == "sunflower"


def test_empty_dictionary_raises(write_dictionary):
    generator = PasswordGenerator(write_dictionary(""))
    with pytest.raises(WordNotFoundError):
        run(generator.generate_human_readable(5))


@pytest.mark.parametrize("chunk_size", ["4096", None, 1.5])
def test_non_integer_default_chunk_size(chunk_size):
    assert PasswordGenerator(chunk_size=chunk_size).chunk_size == 4096
