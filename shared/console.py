"""
Keysmith Console Interface
===========================

Rich-powered console abstraction providing one presentation layer for the
Keysmith CLI and output modules.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, severity-coloured messages, status spinners
and tables, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Keysmith output
# ---------------------------------------------------------------------------
_KEYSMITH_THEME = Theme(
    {
        "keysmith.banner": "bold bright_cyan",
        "keysmith.section": "bold bright_magenta",
        "keysmith.success": "bold green",
        "keysmith.warning": "bold yellow",
        "keysmith.error": "bold red",
        "keysmith.info": "bold bright_blue",
        "keysmith.dim": "dim white",
    }
)

_TAGLINE = "Password analysis, generation and hashing"


class KeysmithConsole:
    """Unified console interface for the Keysmith toolkit.

    Usage::

        con = KeysmithConsole()
        con.banner()
        con.section("Analysis")
        con.success("Password generated")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress banner, sections and informational messages.
                    Errors are still printed.
        """
        self._quiet = quiet
        self._console = Console(
            theme=_KEYSMITH_THEME,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    @property
    def quiet(self) -> bool:
        return self._quiet

    # ------------------------------------------------------------------ #
    #  Banner / section header
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Keysmith title panel."""
        if self._quiet:
            return
        title = Text.from_markup(
            f"[keysmith.banner]KEYSMITH[/keysmith.banner]\n"
            f"[keysmith.dim]{_TAGLINE}  |  v{version}[/keysmith.dim]",
            justify="center",
        )
        self._console.print(Panel(title, border_style="bright_cyan"))

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        if self._quiet:
            return
        self._console.rule(
            f"  {title}  ",
            style="keysmith.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(
            f"[keysmith.success][✔] SUCCESS:[/keysmith.success] {escape(message)}"
        )

    def warning(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(
            f"[keysmith.warning][⚠] WARNING:[/keysmith.warning] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message. Never suppressed by ``quiet``."""
        self._console.print(
            f"[keysmith.error][✘] ERROR:[/keysmith.error] {escape(message)}"
        )

    def info(self, message: str) -> None:
        if self._quiet:
            return
        self._console.print(
            f"[keysmith.info][ℹ] INFO:[/keysmith.info] {escape(message)}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style, overflow="fold")

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Sampling dictionary..."):
                word = await engine.generate_human_readable(12)
        """
        if self._quiet:
            yield None
            return
        with self._console.status(
            f"[keysmith.info]{message}[/keysmith.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj
