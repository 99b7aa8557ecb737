"""
ElfHead Console Interface
==========================

Rich-powered console abstraction providing a unified presentation layer
for every ElfHead command.

The class wraps :class:`rich.console.Console` and adds convenience methods
for section headers, severity-coloured messages, and tables, all with
consistent styling.  A console built with ``stderr=True`` is used for
diagnostics so that standard output only ever carries results.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all ElfHead output
# ---------------------------------------------------------------------------
_ELFHEAD_THEME = Theme(
    {
        "elfhead.section": "bold bright_magenta",
        "elfhead.warning": "bold yellow",
        "elfhead.error": "bold red",
        "elfhead.known": "bold bright_green",
        "elfhead.unknown": "bold yellow",
    }
)


class ElfHeadConsole:
    """Unified console interface for ElfHead commands.

    Usage::

        con = ElfHeadConsole()
        con.section("ELF Header")
        con.table("ELF Header", ["Field", "Value"], rows)

        err = ElfHeadConsole(stderr=True)
        err.error("Bad ELF magic")
    """

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text export.
            stderr: Write to standard error instead of standard output.
        """
        self._console = Console(
            theme=_ELFHEAD_THEME,
            quiet=quiet,
            record=record,
            stderr=stderr,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="elfhead.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[elfhead.warning][⚠] WARNING:[/elfhead.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[elfhead.error][✘] ERROR:[/elfhead.error] {escape(message)}"
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
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def divider(self, style: str = "dim") -> None:
        """Print a thin horizontal rule."""
        self._console.rule(style=style)

