import sys
from pathlib import Path

import pytest

# Make the flat-layout packages ('shared', 'keysmith') importable without
# an editable install.
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from keysmith.generators.random_source import RandomSource  # noqa: E402


class ScriptedBytes:
    """Byte source that hands out a fixed script and fails when it runs dry."""

    def __init__(self, values):
        self._values = list(values)

    def __call__(self, n):
        if len(self._values) < n:
            raise AssertionError("byte script exhausted")
        out = bytes(self._values[:n])
        del self._values[:n]
        return out

    @property
    def remaining(self):
        return len(self._values)


@pytest.fixture
def scripted():
    """Factory: ``scripted([0, 200])`` -> (RandomSource, ScriptedBytes)."""

    def make(values):
        source = ScriptedBytes(values)
        return RandomSource(source), source

    return make


@pytest.fixture
def write_dictionary(tmp_path):
    """Write *content* to a UTF-8 file under tmp_path and return its path."""

    def write(content, name="dictionary.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write
