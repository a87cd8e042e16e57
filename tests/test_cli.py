import hashlib
import json

import pytest
from click.testing import CliRunner

from keysmith.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke_json(runner, *args):
    result = runner.invoke(cli, ["-q", "-o", "json", *args])
    return result, (json.loads(result.stdout) if result.exit_code == 0 else None)


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_analyze_json(runner):
    result, data = invoke_json(runner, "analyze", "Password123!", "-k", "pass")
    assert result.exit_code == 0
    assert data["length"] == 12
    assert data["keyword_occurrences"] == {"pass": 1}
    assert data["score"] == 74
    assert data["strength"] == "strong"
    assert data["in_dictionary"] is False


def test_analyze_with_dictionary(runner, write_dictionary):
    path = write_dictionary("letmein\npassword123!\n")
    result, data = invoke_json(
        runner, "analyze", "Password123!", "--dictionary", str(path), "--cache"
    )
    assert result.exit_code == 0
    assert data["in_dictionary"] is True
    assert data["score"] == 54


def test_analyze_case_sensitive(runner, write_dictionary):
    path = write_dictionary("password123!\n")
    result, data = invoke_json(
        runner, "analyze", "Password123!", "-d", str(path), "--case-sensitive"
    )
    assert result.exit_code == 0
    assert data["in_dictionary"] is False


def test_analyze_console_output(runner):
    result = runner.invoke(cli, ["analyze", "Password123!"])
    assert result.exit_code == 0
    assert "79/100" in result.output
    assert "STRONG" in result.output


def test_generate(runner):
    result, data = invoke_json(runner, "generate", "--length", "10", "--alphabet", "01")
    assert result.exit_code == 0
    assert len(data["password"]) == 10
    assert set(data["password"]) <= {"0", "1"}


def test_generate_invalid_length(runner):
    result = runner.invoke(cli, ["-q", "generate", "--length", "0"])
    assert result.exit_code == 1
    assert "positive integer" in result.output


def test_words(runner, write_dictionary):
    path = write_dictionary("cat\ndog\nbird\n")
    result, data = invoke_json(
        runner, "words", "--length", "6", "--digits", "2", "--dictionary", str(path)
    )
    assert result.exit_code == 0
    assert len(data["password"]) == 6
    assert "bird" in data["password"]


def test_words_without_dictionary(runner):
    result = runner.invoke(cli, ["-q", "words"])
    assert result.exit_code == 1
    assert "No word dictionary configured" in result.output


def test_simple_hash(runner):
    result, data = invoke_json(runner, "hash", "secret", "--simple")
    assert result.exit_code == 0
    assert data == {
        "algorithm": "sha512",
        "digest": hashlib.sha512(b"secret").hexdigest(),
    }


def test_hash_record_and_verify(runner, tmp_path):
    result, data = invoke_json(
        runner, "hash", "secret", "--algorithm", "sha256", "--iterations", "5",
        "--no-pepper",
    )
    assert result.exit_code == 0
    assert data["algorithm"] == "sha256"
    assert data["iteration_count"] == 5
    assert data["pepper"] == ""

    record = tmp_path / "record.json"
    record.write_text(json.dumps(data), encoding="utf-8")

    result, data = invoke_json(runner, "verify", "secret", "--record", str(record))
    assert result.exit_code == 0
    assert data == {"matched": True}

    result = runner.invoke(cli, ["-q", "verify", "wrong", "--record", str(record)])
    assert result.exit_code == 1


def test_verify_digest(runner):
    digest = hashlib.sha256(b"secret").hexdigest()
    result = runner.invoke(
        cli, ["verify", "secret", "--digest", digest, "-a", "sha256"]
    )
    assert result.exit_code == 0
    assert "matches" in result.output


def test_verify_requires_one_source(runner):
    result = runner.invoke(cli, ["-q", "verify", "secret"])
    assert result.exit_code == 2


def test_verify_invalid_record_file(runner, tmp_path):
    record = tmp_path / "record.json"
    record.write_text("{not json", encoding="utf-8")
    result = runner.invoke(cli, ["-q", "verify", "secret", "--record", str(record)])
    assert result.exit_code == 1
    assert "Invalid hash record file" in result.output


def test_unsupported_algorithm(runner):
    result = runner.invoke(cli, ["-q", "hash", "secret", "--simple", "-a", "md17"])
    assert result.exit_code == 1
    assert "Unsupported hash algorithm" in result.output


def test_config_file(runner, tmp_path):
    config = tmp_path / "config.toml"
    config.write_text('[hashing]\nalgorithm = "sha1"\n', encoding="utf-8")
    result = runner.invoke(cli, ["-q", "-c", str(config), "-o", "json", "hash", "x", "--simple"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["algorithm"] == "sha1"


def test_analyze_bracketed_keywords_print_literally(runner):
    result = runner.invoke(cli, ["analyze", "Passw0rd!x", "-k", "[/bold]", "-k", "[red]"])
    assert result.exit_code == 0, result.output
    assert "[/bold]" in result.output
    assert "[red]" in result.output
