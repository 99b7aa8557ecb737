"""
ELF Header Decoding
====================

Class dispatch and header-body decoding for ELF32 and ELF64 objects.

The decode pipeline is linear and keeps no state between calls::

    validate magic -> decode e_ident -> dispatch on EI_CLASS
        -> decode body -> map codes -> ElfHeader

Body layout, relative to the start of the file (``W`` is the address
width in bytes, 4 for ELF32 and 8 for ELF64)::

    16          e_type       u16
    18          e_machine    u16
    20          e_version    u32
    24          e_entry      W
    24 + W      e_phoff      W
    24 + 2W     e_shoff      W
    24 + 3W     e_flags      u32
    28 + 3W     e_ehsize     u16
    30 + 3W     e_phentsize  u16
    32 + 3W     e_phnum      u16
    34 + 3W     e_shentsize  u16
    36 + 3W     e_shnum      u16
    38 + 3W     e_shstrndx   u16

which gives a 52-byte ELF32 header and a 64-byte ELF64 header.

Decoding is pure: the input buffer is never modified and identical input
always yields an identical :class:`ElfHeader` or an identical error.

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2, Figure 1-3.
    - System V ABI, "ELF-64 Object File Format", Version 1.5.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from elfhead.core.errors import TruncatedInput, UnsupportedByteOrder
from elfhead.core.models import (
    ByteOrder,
    ElfClass,
    ElfHeader,
    HeaderBody32,
    HeaderBody64,
    IdentificationBlock,
)
from elfhead.parsers.codes import map_machine, map_type
from elfhead.parsers.ident import EI_NIDENT, decode_identification
from elfhead.parsers.reader import FieldReader

logger = logging.getLogger("elfhead.parsers")


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HeaderLayout:
    """Width-dependent shape of the header body.

    Attributes:
        width: Address width in bits (32 or 64).
        word_size: Size in bytes of ``e_entry``, ``e_phoff`` and ``e_shoff``.
        endian: :mod:`struct` byte-order prefix used for every body field.
    """
    width: int
    word_size: int
    endian: str = "<"

    @property
    def body_size(self) -> int:
        # 2+2+4 fixed, three words, 4 flags, six u16 fields
        return 8 + 3 * self.word_size + 4 + 6 * 2

    @property
    def header_size(self) -> int:
        return EI_NIDENT + self.body_size


ELF32_LAYOUT = HeaderLayout(width=32, word_size=4)
ELF64_LAYOUT = HeaderLayout(width=64, word_size=8)

_LAYOUTS: dict[ElfClass, HeaderLayout] = {
    ElfClass.ELF32: ELF32_LAYOUT,
    ElfClass.ELF64: ELF64_LAYOUT,
}

_ENDIAN_PREFIX: dict[ByteOrder, str] = {
    ByteOrder.LITTLE: "<",
}


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def dispatch_class(ident: IdentificationBlock, data: bytes) -> HeaderLayout:
    """Select the body layout for *ident* and check *data* is long enough.

    Raises:
        UnsupportedByteOrder: The identification declares an encoding this
            decoder does not handle (big-endian).
        TruncatedInput: *data* is shorter than the full header for the
            declared class.
    """
    endian = _ENDIAN_PREFIX.get(ident.byte_order)
    if endian is None:
        raise UnsupportedByteOrder(
            int(ident.byte_order), f"{ident.byte_order.label} decoding is not supported"
        )

    base = _LAYOUTS[ident.elf_class]
    layout = HeaderLayout(width=base.width, word_size=base.word_size, endian=endian)
    if len(data) < layout.header_size:
        raise TruncatedInput(
            layout.header_size, len(data), f"ELF{layout.width} header"
        )
    return layout


def decode_body(data: bytes, layout: HeaderLayout) -> Union[HeaderBody32, HeaderBody64]:
    """Decode the header body that follows ``e_ident``.

    Every field is read through a :class:`FieldReader` bounded by
    ``layout.header_size``.

    Args:
        data: The full input buffer (identification block included).
        layout: Layout returned by :func:`dispatch_class`.

    Returns:
        A :class:`HeaderBody32` or :class:`HeaderBody64`.
    """
    r = FieldReader(data, endian=layout.endian, limit=layout.header_size)
    w = layout.word_size

    off = EI_NIDENT
    e_type = r.u16(off)
    e_machine = r.u16(off + 2)
    e_version = r.u32(off + 4)
    off += 8

    e_entry = r.uint(off, w)
    e_phoff = r.uint(off + w, w)
    e_shoff = r.uint(off + 2 * w, w)
    off += 3 * w

    e_flags = r.u32(off)
    off += 4

    e_ehsize, e_phentsize, e_phnum, e_shentsize, e_shnum, e_shstrndx = (
        r.u16(off + 2 * i) for i in range(6)
    )

    body_cls = HeaderBody64 if layout.width == 64 else HeaderBody32
    return body_cls(
        object_type=map_type(e_type),
        machine=map_machine(e_machine),
        version=e_version,
        entry=e_entry,
        phoff=e_phoff,
        shoff=e_shoff,
        flags=e_flags,
        ehsize=e_ehsize,
        phentsize=e_phentsize,
        phnum=e_phnum,
        shentsize=e_shentsize,
        shnum=e_shnum,
        shstrndx=e_shstrndx,
    )


def decode_elf_header(data: bytes) -> ElfHeader:
    """Decode the ELF file header at the start of *data*.

    Args:
        data: Raw bytes of the object file (at least its first 52 or 64
              bytes).  Any bytes-like object is accepted; it is not copied
              beyond the fields that are decoded.

    Returns:
        The decoded :class:`ElfHeader`.

    Raises:
        MalformedHeader: Wrong magic.
        UnsupportedClass: EI_CLASS outside {1, 2}.
        UnsupportedByteOrder: EI_DATA unknown, or big-endian.
        TruncatedInput: Buffer too short for the declared class.
    """
    ident = decode_identification(data)
    layout = dispatch_class(ident, data)
    body = decode_body(data, layout)
    logger.debug(
        "ELF%d header: type=%s machine=%s entry=0x%x",
        layout.width, body.object_type, body.machine, body.entry,
    )
    return ElfHeader(ident=ident, body=body)
