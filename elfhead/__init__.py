"""
ElfHead -- ELF Header Decoder
==============================

Decodes the identification block and the class-dependent file header of
ELF objects into immutable, typed models.

Capabilities:
    - Magic and length validation of raw buffers
    - EI_CLASS / EI_DATA / EI_OSABI decoding
    - ELF32 and ELF64 header bodies with bounds-checked reads
    - Lossless mapping of type, machine and OS/ABI codes
    - Rich console and JSON rendering of the result

Usage::

    from elfhead import decode_elf_header

    header = decode_elf_header(data)
    if header.body.width == 64:
        print(hex(header.entry))

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2.
"""

from elfhead.core.errors import (
    DecodeError,
    ElfHeadError,
    IoError,
    MalformedHeader,
    TruncatedInput,
    UnsupportedByteOrder,
    UnsupportedClass,
    UsageError,
)
from elfhead.core.models import ElfHeader, HeaderBody32, HeaderBody64, IdentificationBlock
from elfhead.parsers.header import decode_elf_header

__version__ = "0.1.0"
__all__ = [
    "decode_elf_header",
    "ElfHeader",
    "HeaderBody32",
    "HeaderBody64",
    "IdentificationBlock",
    "ElfHeadError",
    "DecodeError",
    "UsageError",
    "IoError",
    "MalformedHeader",
    "UnsupportedClass",
    "UnsupportedByteOrder",
    "TruncatedInput",
]
