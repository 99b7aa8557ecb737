"""
ElfHead Error Hierarchy
========================

Typed exceptions raised by the ElfHead decoder and its I/O collaborators.

Decoding failures are permanent for the buffer that produced them: the
decoder keeps no partial state, so a caller must fix the input and start
again.  Only :mod:`elfhead.cli` turns these exceptions into an exit code.

Hierarchy::

    ElfHeadError
     |-- UsageError
     |-- IoError
     `-- DecodeError
          |-- MalformedHeader
          |-- UnsupportedClass
          |-- UnsupportedByteOrder
          `-- TruncatedInput
"""

from __future__ import annotations


class ElfHeadError(Exception):
    """Base class for every error ElfHead raises on purpose."""


class UsageError(ElfHeadError):
    """The command line did not name exactly one relocatable object."""


class IoError(ElfHeadError):
    """The object file could not be opened, read completely, or was empty."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


# ---------------------------------------------------------------------------
# Decode-stage errors
# ---------------------------------------------------------------------------

class DecodeError(ElfHeadError):
    """Base class for failures detected while decoding header bytes."""


class MalformedHeader(DecodeError):
    """The buffer does not start with the ``\\x7fELF`` magic."""

    def __init__(self, found: bytes) -> None:
        super().__init__(
            f"Bad ELF magic: expected 7f 45 4c 46, found {found.hex(' ')}"
        )
        self.found = bytes(found)


class UnsupportedClass(DecodeError):
    """The EI_CLASS byte is neither ELFCLASS32 (1) nor ELFCLASS64 (2)."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Unsupported ELF class byte: {value}")
        self.value = value


class UnsupportedByteOrder(DecodeError):
    """The EI_DATA byte is unknown, or names an encoding we do not decode."""

    def __init__(self, value: int, reason: str = "unknown data encoding") -> None:
        super().__init__(f"Unsupported ELF byte order {value}: {reason}")
        self.value = value


class TruncatedInput(DecodeError):
    """The buffer ends before a field the declared layout requires."""

    def __init__(self, required: int, actual: int, what: str = "ELF header") -> None:
        super().__init__(
            f"Truncated {what}: need {required} bytes, got {actual}"
        )
        self.required = required
        self.actual = actual
