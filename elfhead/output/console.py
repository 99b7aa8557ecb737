"""
ElfHead Console Output
=======================

Rich-powered terminal display of a decoded ELF header, laid out after
``readelf -h``: a file panel, the identification block, and the header
body.

References:
    - Rich library: https://github.com/Textualize/rich
    - GNU Binutils ``readelf(1)``.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from shared.console import ElfHeadConsole

from elfhead.core.models import ElfHeader, IdentificationBlock, InspectionReport
from elfhead.parsers.codes import machine_name, osabi_name, type_name


def _code_cell(label: str, known: bool) -> str:
    """Colour a mapped code by whether it was recognised."""
    style = "elfhead.known" if known else "elfhead.unknown"
    return f"[{style}]{label}[/{style}]"


def _hex(value: int, width: int) -> str:
    return f"0x{value:0{width // 4}x}"


class ElfHeadConsoleOutput:
    """Rich terminal display for :class:`InspectionReport` values.

    Usage::

        output = ElfHeadConsoleOutput()
        output.display(report)
    """

    def __init__(self, console: ElfHeadConsole | None = None) -> None:
        self._console: ElfHeadConsole = console or ElfHeadConsole()

    def display(self, report: InspectionReport) -> None:
        """Display the complete inspection report."""
        self._console.section("ELF Header")
        self.display_file(report)
        self.display_ident(report.header.ident)
        self.display_body(report.header)
        self._console.divider()

    def display_file(self, report: InspectionReport) -> None:
        """Display path, size and hash of the inspected file."""
        lines: list[str] = [
            f"[bold]File:[/bold]    {report.path}",
            f"[bold]Size:[/bold]    {report.size:,} bytes",
        ]
        if report.sha256:
            lines.append(f"[bold]SHA-256:[/bold] {report.sha256}")

        panel = Panel(
            "\n".join(lines),
            title="[bold bright_cyan]Object File[/bold bright_cyan]",
            border_style="bright_cyan",
            padding=(0, 2),
        )
        self._console.rich.print(panel)
        self._console.blank()

    def display_ident(self, ident: IdentificationBlock) -> None:
        """Display the ``e_ident`` fields."""
        version = f"{ident.version}" + (" (current)" if ident.is_current else "")
        rows: list[tuple[str, str]] = [
            ("Magic", ident.magic.hex(" ")),
            ("Class", f"ELF{ident.elf_class.bits}"),
            ("Data", f"2's complement, {ident.byte_order.label}"),
            ("Version", version),
            ("OS/ABI", _code_cell(osabi_name(ident.osabi), ident.osabi.is_known)),
            ("ABI Version", str(ident.abi_version)),
            ("Padding", ident.padding.hex(" ")),
        ]
        self._console.table(
            "Identification",
            ["Field", "Value"],
            rows,
            styles=["bold", ""],
        )
        self._console.blank()

    def display_body(self, header: ElfHeader) -> None:
        """Display the width-dependent header body."""
        body = header.body
        word = body.width

        tbl = Table(
            title="Header",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        tbl.add_column("Field", style="bold")
        tbl.add_column("Value")
        tbl.add_column("Raw", justify="right", style="dim")

        tbl.add_row(
            "Type",
            _code_cell(type_name(body.object_type), body.object_type.is_known),
            _hex(body.object_type.code, 16),
        )
        tbl.add_row(
            "Machine",
            _code_cell(machine_name(body.machine), body.machine.is_known),
            _hex(body.machine.code, 16),
        )
        tbl.add_row("Version", str(body.version), _hex(body.version, 32))
        tbl.add_row("Entry point address", _hex(body.entry, word), "")
        tbl.add_row("Start of program headers", f"{body.phoff} (bytes into file)", "")
        tbl.add_row("Start of section headers", f"{body.shoff} (bytes into file)", "")
        tbl.add_row("Flags", _hex(body.flags, 32), "")
        tbl.add_row("Size of this header", f"{body.ehsize} (bytes)", "")
        tbl.add_row("Size of program headers", f"{body.phentsize} (bytes)", "")
        tbl.add_row("Number of program headers", str(body.phnum), "")
        tbl.add_row("Size of section headers", f"{body.shentsize} (bytes)", "")
        tbl.add_row("Number of section headers", str(body.shnum), "")
        tbl.add_row("Section header string table index", str(body.shstrndx), "")

        self._console.rich.print(tbl)
        self._console.blank()
