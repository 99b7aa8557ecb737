"""
ELF Identification Decoding
============================

Validates the leading bytes of a buffer and decodes the 16-byte
``e_ident`` array.

Layout of ``e_ident``::

    offset  size  field
    0       4     EI_MAG0..EI_MAG3   0x7f 'E' 'L' 'F'
    4       1     EI_CLASS           1 = ELF32, 2 = ELF64
    5       1     EI_DATA            1 = little-endian, 2 = big-endian
    6       1     EI_VERSION         1 = current
    7       1     EI_OSABI
    8       1     EI_ABIVERSION
    9       7     EI_PAD             reserved, zero

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2, Figure 1-4.
"""

from __future__ import annotations

import logging

from elfhead.core.errors import MalformedHeader, TruncatedInput, UnsupportedByteOrder, UnsupportedClass
from elfhead.core.models import ELF_MAGIC, ByteOrder, ElfClass, IdentificationBlock
from elfhead.parsers.codes import map_osabi
from elfhead.parsers.reader import FieldReader

logger = logging.getLogger("elfhead.parsers")


# ---------------------------------------------------------------------------
# e_ident offsets
# ---------------------------------------------------------------------------

EI_MAG0: int = 0
EI_CLASS: int = 4
EI_DATA: int = 5
EI_VERSION: int = 6
EI_OSABI: int = 7
EI_ABIVERSION: int = 8
EI_PAD: int = 9
EI_NIDENT: int = 16

EI_PAD_SIZE: int = EI_NIDENT - EI_PAD


def validate_buffer(data: bytes) -> None:
    """Check that *data* can hold an ELF identification block.

    The magic is compared as soon as four bytes exist, so a wrong magic
    is reported as such even when the buffer is also short.

    Raises:
        TruncatedInput: Fewer than 4 bytes, or a valid magic followed by
            fewer than :data:`EI_NIDENT` bytes in total.
        MalformedHeader: The first four bytes are not ``\\x7fELF``.
    """
    size = len(data)
    if size < len(ELF_MAGIC):
        raise TruncatedInput(len(ELF_MAGIC), size, "ELF magic")
    magic = bytes(data[EI_MAG0:EI_MAG0 + len(ELF_MAGIC)])
    if magic != ELF_MAGIC:
        raise MalformedHeader(magic)
    if size < EI_NIDENT:
        raise TruncatedInput(EI_NIDENT, size, "ELF identification")


def decode_identification(data: bytes) -> IdentificationBlock:
    """Validate *data* and decode its identification block.

    Args:
        data: Raw bytes starting at the beginning of the object file.

    Returns:
        The decoded :class:`IdentificationBlock`.

    Raises:
        TruncatedInput, MalformedHeader: See :func:`validate_buffer`.
        UnsupportedClass: EI_CLASS is not 1 or 2.
        UnsupportedByteOrder: EI_DATA is not 1 or 2.
    """
    validate_buffer(data)
    reader = FieldReader(data, limit=EI_NIDENT)

    raw_class = reader.u8(EI_CLASS)
    try:
        elf_class = ElfClass(raw_class)
    except ValueError:
        raise UnsupportedClass(raw_class) from None

    raw_data = reader.u8(EI_DATA)
    try:
        byte_order = ByteOrder(raw_data)
    except ValueError:
        raise UnsupportedByteOrder(raw_data) from None

    ident = IdentificationBlock(
        magic=reader.raw(EI_MAG0, len(ELF_MAGIC)),
        elf_class=elf_class,
        byte_order=byte_order,
        version=reader.u8(EI_VERSION),
        osabi=map_osabi(reader.u8(EI_OSABI)),
        abi_version=reader.u8(EI_ABIVERSION),
        padding=reader.raw(EI_PAD, EI_PAD_SIZE),
    )
    logger.debug(
        "e_ident: class=%s data=%s version=%d osabi=%s",
        elf_class.name, byte_order.name, ident.version, ident.osabi,
    )
    return ident
