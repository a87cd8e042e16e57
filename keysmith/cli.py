"""
Keysmith CLI
=============

Click-based command-line interface for the Keysmith toolkit. Provides
subcommands for password strength analysis, random and human-readable
password generation, and password hashing and verification.

Usage::

    python -m keysmith analyze "P@ssw0rd" -k pass --dictionary rockyou.txt
    python -m keysmith generate --length 20
    python -m keysmith words --length 12 --digits 2 --dictionary words.txt
    python -m keysmith hash "secret" --iterations 1000
    python -m keysmith verify "secret" --record record.json

Keysmith errors are printed through the console and exit with status 1.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from contextlib import contextmanager, nullcontext
from pathlib import Path
from typing import Any, Generator, Optional

import click

from shared.config import KeysmithConfig
from shared.console import KeysmithConsole

from keysmith import __version__
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import KeysmithError, ValidationError
from keysmith.output.console import KeysmithConsoleOutput


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _run_async(coro):
    """Run an async coroutine from synchronous Click handlers."""
    return asyncio.run(coro)


@contextmanager
def _handle_errors(ctx: click.Context) -> Generator[None, None, None]:
    """Report Keysmith errors on the console and exit with status 1."""
    try:
        yield
    except KeysmithError as exc:
        ctx.obj["console"].error(str(exc))
        ctx.exit(1)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _is_json(ctx: click.Context) -> bool:
    return ctx.obj["output_format"] == "json"


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="keysmith")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Keysmith configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """Keysmith -- password analysis, generation and hashing."""
    ctx.ensure_object(dict)

    keysmith_config = KeysmithConfig.load(config) if config else KeysmithConfig()
    ctx.obj["config"] = keysmith_config
    ctx.obj["output_format"] = output

    console = KeysmithConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["engine"] = KeysmithEngine(keysmith_config)
    ctx.obj["display"] = KeysmithConsoleOutput(console)

    if output == "console":
        console.banner(version=keysmith_config.global_settings.version)


# ===================================================================== #
#  Analysis
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.option(
    "--keyword", "-k", "keywords",
    multiple=True,
    help="Keyword that should not appear in the password (repeatable).",
)
@click.option(
    "--dictionary", "-d",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Weak-password list, one entry per line.",
)
@click.option("--cache", is_flag=True, default=False,
              help="Keep the dictionary in memory.")
@click.option("--case-sensitive", is_flag=True, default=False,
              help="Do not fold case before matching.")
@click.pass_context
def analyze(
    ctx: click.Context,
    password: str,
    keywords: tuple[str, ...],
    dictionary: Optional[str],
    cache: bool,
    case_sensitive: bool,
) -> None:
    """Score password strength, optionally against a dictionary.

    The score starts at 100 and loses points for short length, missing
    character classes, repeated characters, keyword occurrences and
    presence in the dictionary.
    """
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    with _handle_errors(ctx):
        analyzer = engine.analyzer
        if dictionary:
            analyzer.set_dictionary_path(dictionary)
        if cache:
            analyzer.set_dictionary_cache(True)
        if case_sensitive:
            analyzer.set_case_insensitive(False)
        if analyzer.dictionary_path is None and not _is_json(ctx):
            ctx.obj["console"].info("No dictionary configured; heuristic score only.")

        result = _run_async(engine.complete_analysis(password, list(keywords)))

    if _is_json(ctx):
        data = result.model_dump()
        data["strength"] = result.strength.value
        _echo_json(data)
    else:
        display.display_analysis(result)


# ===================================================================== #
#  Generation
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=int, default=None,
              help="Password length (default from config).")
@click.option("--alphabet", "-a", default=None,
              help="Characters to draw from (default A-Za-z0-9).")
@click.pass_context
def generate(ctx: click.Context, length: Optional[int], alphabet: Optional[str]) -> None:
    """Generate a random password from an alphabet."""
    engine: KeysmithEngine = ctx.obj["engine"]

    with _handle_errors(ctx):
        password = engine.generate(length, alphabet)
        if not password:
            raise ValidationError("Length must be a positive integer.")

    if _is_json(ctx):
        _echo_json({"password": password})
    else:
        ctx.obj["display"].display_password(password)


@cli.command()
@click.option("--length", "-l", type=int, default=12, show_default=True,
              help="Total password length.")
@click.option("--digits", "-n", type=int, default=0, show_default=True,
              help="Number of random digits to add.")
@click.option(
    "--dictionary", "-d",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Word list, one word per line (default from config).",
)
@click.option("--chunk-size", type=int, default=None,
              help="Characters per sampled slice of the word list.")
@click.pass_context
def words(
    ctx: click.Context,
    length: int,
    digits: int,
    dictionary: Optional[str],
    chunk_size: Optional[int],
) -> None:
    """Generate a human-readable password from a word list."""
    engine: KeysmithEngine = ctx.obj["engine"]
    console: KeysmithConsole = ctx.obj["console"]

    with _handle_errors(ctx):
        if dictionary:
            engine.generator.set_dictionary_path(dictionary)
        if digits >= length > 0 and not _is_json(ctx):
            console.warning("Digit count covers the whole length; no word is used.")
        spinner = (
            nullcontext() if _is_json(ctx)
            else console.status("Sampling word list...")
        )
        with spinner:
            password = _run_async(
                engine.generate_human_readable(length, digits, chunk_size)
            )

    if _is_json(ctx):
        _echo_json({"password": password})
    else:
        ctx.obj["display"].display_password(password, title="Human-Readable Password")


# ===================================================================== #
#  Hashing
# ===================================================================== #

@cli.command("hash")
@click.argument("password")
@click.option("--algorithm", "-a", default=None,
              help="hashlib algorithm (default from config).")
@click.option("--simple", is_flag=True, default=False,
              help="Single unsalted digest pass.")
@click.option("--iterations", "-i", type=int, default=None,
              help="Fixed iteration count (default: random in the configured range).")
@click.option("--no-salt", is_flag=True, default=False, help="Do not add a salt.")
@click.option("--no-pepper", is_flag=True, default=False, help="Do not add a pepper.")
@click.pass_context
def hash_password(
    ctx: click.Context,
    password: str,
    algorithm: Optional[str],
    simple: bool,
    iterations: Optional[int],
    no_salt: bool,
    no_pepper: bool,
) -> None:
    """Hash a password.

    By default produces a salted, peppered iterative hash record; save the
    JSON output to verify the password later with ``verify --record``.
    """
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    with _handle_errors(ctx):
        if simple:
            algorithm = algorithm or engine.config.hashing.algorithm
            digest = engine.create_hash(password, algorithm)
        else:
            overrides: dict[str, Any] = {}
            if algorithm:
                overrides["algorithm"] = algorithm
            if iterations is not None:
                overrides["iterations"] = iterations
            if no_salt:
                overrides["use_salt"] = False
            if no_pepper:
                overrides["use_pepper"] = False
            record = engine.create_hash_record(password, overrides)

    if simple:
        if _is_json(ctx):
            _echo_json({"algorithm": algorithm, "digest": digest})
        else:
            display.display_digest(digest, algorithm)
    elif _is_json(ctx):
        _echo_json(record.model_dump())
    else:
        display.display_hash_record(record)


@cli.command()
@click.argument("password")
@click.option(
    "--record", "-r", "record_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON hash record written by 'hash -o json'.",
)
@click.option("--digest", default=None, help="Hex digest from 'hash --simple'.")
@click.option("--algorithm", "-a", default=None,
              help="Algorithm of --digest (default from config).")
@click.pass_context
def verify(
    ctx: click.Context,
    password: str,
    record_file: Optional[str],
    digest: Optional[str],
    algorithm: Optional[str],
) -> None:
    """Check a password against a hash record or a simple digest.

    Exits with status 1 when the password does not match.
    """
    if (record_file is None) == (digest is None):
        raise click.UsageError("Pass exactly one of --record or --digest.")

    engine: KeysmithEngine = ctx.obj["engine"]

    with _handle_errors(ctx):
        if digest is not None:
            matched = engine.compare_simple_hash(password, digest, algorithm)
        else:
            try:
                record = json.loads(Path(record_file).read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise ValidationError(f"Invalid hash record file: {exc}") from exc
            matched = engine.compare_hash_record(password, record)

    if _is_json(ctx):
        _echo_json({"matched": matched})
    else:
        ctx.obj["display"].display_verification(matched)
    if not matched:
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keysmith CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
