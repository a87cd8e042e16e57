"""
Keysmith Console Output
========================

Rich-based console formatters for the Keysmith toolkit: a colour-coded
strength meter with character statistics for analyses, a field table for
hash records and a panel for generated passwords.

Uses the shared :class:`~shared.console.KeysmithConsole` for consistent
styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import KeysmithConsole
from keysmith.core.models import AnalysisResult, HashRecord


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very_weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}

_METER_WIDTH = 40


class KeysmithConsoleOutput:
    """Console formatter for Keysmith results.

    Args:
        console: Shared console; a fresh one is created when omitted.
    """

    def __init__(self, console: KeysmithConsole | None = None) -> None:
        self.console = console or KeysmithConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: AnalysisResult) -> None:
        """Display a strength meter followed by character statistics."""
        self.console.section("Password Analysis")
        self._rich.print(Panel(
            self._strength_meter(result),
            title="Strength Meter",
            border_style="cyan",
        ))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value", justify="right")

        tbl.add_row("Length", str(result.length))
        tbl.add_row("Lowercase", str(result.lowercase_count))
        tbl.add_row("Uppercase", str(result.uppercase_count))
        tbl.add_row("Digits", str(result.number_count))
        tbl.add_row("Special", str(result.special_char_count))
        tbl.add_row("In Dictionary", "Yes" if result.in_dictionary else "No")
        self._rich.print(tbl)

        if result.keyword_occurrences:
            kw_tbl = Table(
                title="Keyword Matches",
                caption=(
                    f"{result.unique_keyword_matches} unique, "
                    f"{result.total_keyword_matches} total"
                ),
                border_style="bright_cyan",
                header_style="bold bright_magenta",
            )
            kw_tbl.add_column("Keyword", style="bold")
            kw_tbl.add_column("Occurrences", justify="right")
            for keyword, count in result.keyword_occurrences.items():
                style = "yellow" if count else "dim"
                kw_tbl.add_row(escape(keyword), f"[{style}]{count}[/{style}]")
            self._rich.print(kw_tbl)

    @staticmethod
    def _strength_meter(result: AnalysisResult) -> Text:
        strength = result.strength.value
        colour = _STRENGTH_COLOURS.get(strength, "white")
        filled = max(0, min(_METER_WIDTH, int(result.score / 100 * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.25:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.50:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.75:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]", style="dim")
        meter.append("  ")
        meter.append(strength.replace("_", " ").upper(), style=colour)
        return meter

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def display_password(self, password: str, title: str = "Generated Password") -> None:
        """Show a generated password in a panel."""
        self.console.section(title)
        self._rich.print(Panel(
            Text(password, style="bold bright_white"),
            subtitle=f"{len(password)} characters",
            border_style="green",
        ))

    # ------------------------------------------------------------------ #
    #  Hashing
    # ------------------------------------------------------------------ #

    def display_digest(self, digest: str, algorithm: str) -> None:
        self.console.section("Hash")
        self.console.table(
            title="",
            columns=["Algorithm", "Digest"],
            rows=[(algorithm, digest)],
            styles=["bold", "bright_white"],
        )

    def display_hash_record(self, record: HashRecord) -> None:
        """Show every field needed to verify the password later."""
        self.console.section("Hash Record")
        self.console.table(
            title="",
            columns=["Field", "Value"],
            rows=[
                ("Algorithm", record.algorithm),
                ("Iterations", record.iteration_count),
                ("Salt", record.salt or "-"),
                ("Pepper", record.pepper or "-"),
                ("Digest", record.digest),
            ],
            styles=["bold", ""],
        )

    def display_verification(self, matched: bool) -> None:
        if matched:
            self.console.success("Password matches.")
        else:
            self.console.error("Password does not match.")
