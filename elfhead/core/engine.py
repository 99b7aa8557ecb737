"""
ElfHead Inspection Engine
==========================

Reads an object file into memory and runs the header decoder over it.

The engine owns all file I/O so the decoder in :mod:`elfhead.parsers`
stays a pure function of its input bytes.

Pipeline:
    1. Stat the file and enforce the configured size limit
    2. Read the complete contents
    3. Compute the SHA-256 of the contents
    4. Decode the ELF header
    5. Wrap everything in an :class:`InspectionReport`
"""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from shared.config import ElfHeadConfig
from shared.logger import ElfHeadLogger

from elfhead.core.errors import DecodeError, IoError
from elfhead.core.models import ElfHeader, InspectionReport
from elfhead.parsers.header import decode_elf_header


class ElfHeadEngine:
    """Reads object files and decodes their ELF headers.

    Usage::

        engine = ElfHeadEngine()
        report = engine.inspect("main.o")
        print(report.header.machine)
    """

    def __init__(
        self,
        config: ElfHeadConfig | None = None,
        logger: ElfHeadLogger | None = None,
    ) -> None:
        """Initialise the engine.

        Args:
            config: ElfHead configuration.  Defaults are used if not provided.
            logger: Logger instance.  A console-less one is created if not provided.
        """
        self._config: ElfHeadConfig = config or ElfHeadConfig()
        self._logger: ElfHeadLogger = logger or ElfHeadLogger(
            "engine", console_output=False
        )

    # ------------------------------------------------------------------ #
    #  File loading
    # ------------------------------------------------------------------ #

    def read_object(self, path: str | Path) -> bytes:
        """Read the full contents of *path*.

        Raises:
            IoError: The file cannot be opened or read, is larger than
                ``inspect.max_file_size``, was only partially read, or is
                empty.
        """
        file_path = Path(path)
        max_size = self._config.inspect.max_file_size

        try:
            with open(file_path, "rb") as fh:
                expected = os.fstat(fh.fileno()).st_size
                if expected > max_size:
                    raise IoError(
                        f"File too large: {expected:,} bytes (max: {max_size:,} bytes)",
                        str(file_path),
                    )
                data = fh.read()
        except OSError as exc:
            raise IoError(
                f"Cannot read {file_path}: {exc.strerror or exc}", str(file_path)
            ) from exc

        if len(data) < expected:
            raise IoError(
                f"Short read on {file_path}: got {len(data):,} of {expected:,} bytes",
                str(file_path),
            )
        if not data:
            raise IoError(f"File is empty: {file_path}", str(file_path))

        self._logger.debug("Read %d bytes from %s", len(data), file_path)
        return data

    # ------------------------------------------------------------------ #
    #  Decoding
    # ------------------------------------------------------------------ #

    def decode(self, data: bytes) -> ElfHeader:
        """Decode an already-loaded buffer, logging the outcome."""
        with self._logger.operation("decode"):
            with self._logger.timed("ELF header decode"):
                try:
                    header = decode_elf_header(data)
                except DecodeError as exc:
                    self._logger.warning(
                        "Decode failed: %s", exc, error=type(exc).__name__
                    )
                    raise
        self._logger.info(
            "Decoded ELF%d %s header for %s",
            header.body.width,
            header.byte_order.label,
            header.machine,
        )
        return header

    def inspect(self, path: str | Path) -> InspectionReport:
        """Read *path* and decode its ELF header.

        Returns:
            An :class:`InspectionReport` for the file.

        Raises:
            IoError: See :meth:`read_object`.
            DecodeError: Any decode-stage failure.
        """
        file_path = Path(path)
        self._logger.info("Inspecting %s", file_path)

        data = self.read_object(file_path)
        header = self.decode(data)

        return InspectionReport(
            path=str(file_path.resolve()),
            size=len(data),
            sha256=hashlib.sha256(data).hexdigest(),
            header=header,
        )
