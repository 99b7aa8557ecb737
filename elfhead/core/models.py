"""
ElfHead Data Models
====================

Pydantic-based, immutable models for a decoded ELF file header.

An :class:`ElfHeader` aggregates the 16-byte identification block and a
width-tagged header body.  The body is a discriminated union on its
``width`` field (``32`` or ``64``) so callers branch on the address width
exactly once.

Open-ended numeric classifications (object type, machine, OS/ABI) are
modelled as tagged values: a ``kind`` enumeration with an explicit
passthrough member plus the raw ``code``, so an unrecognised value is
carried losslessly instead of being rejected.

References:
    - TIS Committee. (1995). Tool Interface Standard (TIS) Executable and
      Linkable Format (ELF) Specification, Version 1.2.
    - System V Application Binary Interface, generic ABI, chapter 4.
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


ELF_MAGIC: bytes = b"\x7fELF"

U16_MAX: int = 0xFFFF
U32_MAX: int = 0xFFFF_FFFF
U64_MAX: int = 0xFFFF_FFFF_FFFF_FFFF


# ---------------------------------------------------------------------------
# Identification enumerations
# ---------------------------------------------------------------------------

class ElfClass(enum.IntEnum):
    """EI_CLASS: address width of the object."""
    ELF32 = 1
    ELF64 = 2

    @property
    def bits(self) -> int:
        return 32 if self is ElfClass.ELF32 else 64


class ByteOrder(enum.IntEnum):
    """EI_DATA: data encoding of multi-byte fields."""
    LITTLE = 1
    BIG = 2

    @property
    def label(self) -> str:
        return "little-endian" if self is ByteOrder.LITTLE else "big-endian"


EV_CURRENT: int = 1


# ---------------------------------------------------------------------------
# Tagged code values
# ---------------------------------------------------------------------------

class ObjectTypeKind(str, enum.Enum):
    """Named categories for ``e_type``."""
    NONE = "none"
    RELOCATABLE = "relocatable"
    EXECUTABLE = "executable"
    SHARED_OBJECT = "shared_object"
    CORE = "core"
    PROCESSOR_SPECIFIC = "processor_specific"


class MachineKind(str, enum.Enum):
    """Named architectures for ``e_machine``."""
    NONE = "none"
    M32 = "we32100"
    SPARC = "sparc"
    X86 = "x86"
    M68K = "m68k"
    M88K = "m88k"
    I860 = "i860"
    MIPS = "mips"
    S370 = "s370"
    MIPS_RS3_LE = "mips_rs3_le"
    PARISC = "parisc"
    SPARC32PLUS = "sparc32plus"
    PPC = "powerpc"
    PPC64 = "powerpc64"
    S390 = "s390"
    ARM = "arm"
    SUPERH = "superh"
    SPARCV9 = "sparcv9"
    IA_64 = "ia64"
    X86_64 = "x86_64"
    AVR = "avr"
    MSP430 = "msp430"
    AARCH64 = "aarch64"
    RISCV = "riscv"
    BPF = "bpf"
    LOONGARCH = "loongarch"
    UNKNOWN = "unknown"


class OsAbiKind(str, enum.Enum):
    """Named values for EI_OSABI."""
    SYSV = "sysv"
    HPUX = "hpux"
    NETBSD = "netbsd"
    LINUX = "linux"
    HURD = "hurd"
    SOLARIS = "solaris"
    AIX = "aix"
    IRIX = "irix"
    FREEBSD = "freebsd"
    TRU64 = "tru64"
    MODESTO = "modesto"
    OPENBSD = "openbsd"
    OPENVMS = "openvms"
    NSK = "nsk"
    AROS = "aros"
    FENIXOS = "fenixos"
    CLOUDABI = "cloudabi"
    OPENVOS = "openvos"
    ARM_AEABI = "arm_aeabi"
    ARM = "arm"
    STANDALONE = "standalone"
    UNKNOWN = "unknown"


class _CodeValue(BaseModel):
    """A decoded numeric code together with its named category."""
    model_config = ConfigDict(frozen=True)

    code: int = Field(..., ge=0)

    @property
    def is_known(self) -> bool:
        return self.kind.value not in ("unknown", "processor_specific")  # type: ignore[attr-defined]

    def __str__(self) -> str:
        kind = self.kind  # type: ignore[attr-defined]
        if self.is_known:
            return kind.value
        return f"{kind.value}(0x{self.code:x})"


class ObjectType(_CodeValue):
    """``e_type``; unknown codes map to ``PROCESSOR_SPECIFIC``."""
    kind: ObjectTypeKind
    code: int = Field(..., ge=0, le=U16_MAX)


class Machine(_CodeValue):
    """``e_machine``; unknown codes map to ``UNKNOWN``."""
    kind: MachineKind
    code: int = Field(..., ge=0, le=U16_MAX)


class OsAbi(_CodeValue):
    """EI_OSABI; unknown codes map to ``UNKNOWN``."""
    kind: OsAbiKind
    code: int = Field(..., ge=0, le=0xFF)


# ---------------------------------------------------------------------------
# Identification block
# ---------------------------------------------------------------------------

class IdentificationBlock(BaseModel):
    """The 16-byte ``e_ident`` array.

    Attributes:
        magic: The four magic bytes, always ``b"\\x7fELF"``.
        elf_class: Address width selector.
        byte_order: Data encoding of the header body.
        version: Raw EI_VERSION byte (``1`` is the current version).
        osabi: Target OS/ABI.
        abi_version: ABI version byte.
        padding: The seven reserved bytes, kept verbatim.
    """
    model_config = ConfigDict(frozen=True)

    magic: bytes = ELF_MAGIC
    elf_class: ElfClass
    byte_order: ByteOrder
    version: int = Field(default=EV_CURRENT, ge=0, le=0xFF)
    osabi: OsAbi
    abi_version: int = Field(default=0, ge=0, le=0xFF)
    padding: bytes = b"\x00" * 7

    @field_validator("magic", "padding", mode="before")
    @classmethod
    def _from_hex(cls, v: Any) -> Any:
        """Accept the hex strings produced by JSON serialisation."""
        if isinstance(v, str):
            return bytes.fromhex(v)
        return v

    @field_validator("magic")
    @classmethod
    def _check_magic(cls, v: bytes) -> bytes:
        if v != ELF_MAGIC:
            raise ValueError(f"magic must be {ELF_MAGIC!r}, got {v!r}")
        return v

    @field_validator("padding")
    @classmethod
    def _check_padding(cls, v: bytes) -> bytes:
        if len(v) != 7:
            raise ValueError(f"padding must be 7 bytes, got {len(v)}")
        return v

    @field_serializer("magic", "padding", when_used="json")
    def _hex_bytes(self, v: bytes) -> str:
        return v.hex()

    @property
    def is_current(self) -> bool:
        return self.version == EV_CURRENT


# ---------------------------------------------------------------------------
# Header bodies
# ---------------------------------------------------------------------------

class _HeaderBodyBase(BaseModel):
    """Fields shared by the 32-bit and 64-bit header bodies.

    Attributes:
        object_type: ``e_type``.
        machine: ``e_machine``.
        version: ``e_version``.
        entry: ``e_entry``, the entry point virtual address.
        phoff: ``e_phoff``, program-header table file offset.
        shoff: ``e_shoff``, section-header table file offset.
        flags: ``e_flags``, processor-specific flags.
        ehsize: ``e_ehsize``, size of the ELF header in bytes.
        phentsize: ``e_phentsize``.
        phnum: ``e_phnum``.
        shentsize: ``e_shentsize``.
        shnum: ``e_shnum``.
        shstrndx: ``e_shstrndx``.
    """
    model_config = ConfigDict(frozen=True)

    object_type: ObjectType
    machine: Machine
    version: int = Field(..., ge=0, le=U32_MAX)
    flags: int = Field(..., ge=0, le=U32_MAX)
    ehsize: int = Field(..., ge=0, le=U16_MAX)
    phentsize: int = Field(..., ge=0, le=U16_MAX)
    phnum: int = Field(..., ge=0, le=U16_MAX)
    shentsize: int = Field(..., ge=0, le=U16_MAX)
    shnum: int = Field(..., ge=0, le=U16_MAX)
    shstrndx: int = Field(..., ge=0, le=U16_MAX)


class HeaderBody32(_HeaderBodyBase):
    """ELF32 header body (36 bytes after ``e_ident``)."""
    width: Literal[32] = 32
    entry: int = Field(..., ge=0, le=U32_MAX)
    phoff: int = Field(..., ge=0, le=U32_MAX)
    shoff: int = Field(..., ge=0, le=U32_MAX)


class HeaderBody64(_HeaderBodyBase):
    """ELF64 header body (48 bytes after ``e_ident``)."""
    width: Literal[64] = 64
    entry: int = Field(..., ge=0, le=U64_MAX)
    phoff: int = Field(..., ge=0, le=U64_MAX)
    shoff: int = Field(..., ge=0, le=U64_MAX)


HeaderBody = Annotated[Union[HeaderBody32, HeaderBody64], Field(discriminator="width")]


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

class ElfHeader(BaseModel):
    """A fully decoded ELF file header."""
    model_config = ConfigDict(frozen=True)

    ident: IdentificationBlock
    body: HeaderBody

    @property
    def elf_class(self) -> ElfClass:
        return self.ident.elf_class

    @property
    def byte_order(self) -> ByteOrder:
        return self.ident.byte_order

    @property
    def object_type(self) -> ObjectType:
        return self.body.object_type

    @property
    def machine(self) -> Machine:
        return self.body.machine

    @property
    def entry(self) -> int:
        return self.body.entry


class InspectionReport(BaseModel):
    """Decoded header plus metadata about the file it came from.

    Attributes:
        path: Resolved filesystem path of the object file.
        size: File size in bytes.
        sha256: SHA-256 of the file contents.
        header: The decoded ELF header.
    """
    model_config = ConfigDict(frozen=True)

    path: str = ""
    size: int = Field(default=0, ge=0)
    sha256: str = ""
    header: ElfHeader
