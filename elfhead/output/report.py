"""
ElfHead Report Generator
=========================

Serialises an :class:`InspectionReport` to JSON, either as a string for
standard output or as a report file on disk.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from elfhead.core.models import InspectionReport
from elfhead.parsers.codes import machine_name, osabi_name, type_name


class ElfHeadReportGenerator:
    """Builds JSON documents from inspection results.

    Usage::

        gen = ElfHeadReportGenerator()
        text = gen.to_json(report)
        gen.generate_json(report, "main.o.json")
    """

    def __init__(self, indent: int = 2, version: str = "0.1.0") -> None:
        self._indent = indent
        self._version = version

    def build(self, report: InspectionReport) -> dict[str, Any]:
        """Return the report as a JSON-compatible dictionary."""
        header = report.header
        return {
            "report_type": "elfhead_header",
            "version": self._version,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "file": {
                "path": report.path,
                "size": report.size,
                "sha256": report.sha256,
            },
            "summary": {
                "class": f"ELF{header.elf_class.bits}",
                "byte_order": header.byte_order.label,
                "osabi": osabi_name(header.ident.osabi),
                "type": type_name(header.object_type),
                "machine": machine_name(header.machine),
                "entry_point": f"0x{header.entry:x}",
            },
            "header": header.model_dump(mode="json"),
        }

    def to_json(self, report: InspectionReport) -> str:
        """Render the report as a JSON string."""
        return json.dumps(self.build(report), indent=self._indent, ensure_ascii=False)

    def generate_json(self, report: InspectionReport, output_path: str | Path) -> str:
        """Write the report to *output_path*.

        Returns:
            The absolute path of the generated report.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(report) + "\n", encoding="utf-8")
        return str(path.resolve())
