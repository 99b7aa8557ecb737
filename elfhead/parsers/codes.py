"""
ELF Code Mappers
=================

Translate raw ``e_type``, ``e_machine`` and EI_OSABI codes into the tagged
values defined in :mod:`elfhead.core.models`.

All three mappers are total: a code missing from the tables is returned
under the passthrough kind with its raw value intact.

References:
    - TIS Committee. (1995). ELF Specification, Version 1.2, Figure 1-3.
    - System V ABI generic draft, "ELF Header" (e_machine registry).
"""

from __future__ import annotations

from elfhead.core.models import (
    Machine,
    MachineKind,
    ObjectType,
    ObjectTypeKind,
    OsAbi,
    OsAbiKind,
)


# ---------------------------------------------------------------------------
# ELF type
# ---------------------------------------------------------------------------

ET_NONE: int = 0
ET_REL: int = 1   # Relocatable
ET_EXEC: int = 2  # Executable
ET_DYN: int = 3   # Shared object / PIE
ET_CORE: int = 4  # Core dump

_ET_KINDS: dict[int, ObjectTypeKind] = {
    ET_NONE: ObjectTypeKind.NONE,
    ET_REL: ObjectTypeKind.RELOCATABLE,
    ET_EXEC: ObjectTypeKind.EXECUTABLE,
    ET_DYN: ObjectTypeKind.SHARED_OBJECT,
    ET_CORE: ObjectTypeKind.CORE,
}

_ET_NAMES: dict[ObjectTypeKind, str] = {
    ObjectTypeKind.NONE: "NONE",
    ObjectTypeKind.RELOCATABLE: "REL (Relocatable)",
    ObjectTypeKind.EXECUTABLE: "EXEC (Executable)",
    ObjectTypeKind.SHARED_OBJECT: "DYN (Shared object)",
    ObjectTypeKind.CORE: "CORE (Core dump)",
}


# ---------------------------------------------------------------------------
# Machine architectures
# ---------------------------------------------------------------------------

EM_NONE: int = 0
EM_M32: int = 1
EM_SPARC: int = 2
EM_386: int = 3
EM_68K: int = 4
EM_88K: int = 5
EM_860: int = 7
EM_MIPS: int = 8
EM_S370: int = 9
EM_MIPS_RS3_LE: int = 10
EM_PARISC: int = 15
EM_SPARC32PLUS: int = 18
EM_PPC: int = 20
EM_PPC64: int = 21
EM_S390: int = 22
EM_ARM: int = 40
EM_SH: int = 42
EM_SPARCV9: int = 43
EM_IA_64: int = 50
EM_X86_64: int = 62
EM_AVR: int = 83
EM_MSP430: int = 105
EM_AARCH64: int = 183
EM_RISCV: int = 243
EM_BPF: int = 247
EM_LOONGARCH: int = 258

_EM_KINDS: dict[int, MachineKind] = {
    EM_NONE: MachineKind.NONE,
    EM_M32: MachineKind.M32,
    EM_SPARC: MachineKind.SPARC,
    EM_386: MachineKind.X86,
    EM_68K: MachineKind.M68K,
    EM_88K: MachineKind.M88K,
    EM_860: MachineKind.I860,
    EM_MIPS: MachineKind.MIPS,
    EM_S370: MachineKind.S370,
    EM_MIPS_RS3_LE: MachineKind.MIPS_RS3_LE,
    EM_PARISC: MachineKind.PARISC,
    EM_SPARC32PLUS: MachineKind.SPARC32PLUS,
    EM_PPC: MachineKind.PPC,
    EM_PPC64: MachineKind.PPC64,
    EM_S390: MachineKind.S390,
    EM_ARM: MachineKind.ARM,
    EM_SH: MachineKind.SUPERH,
    EM_SPARCV9: MachineKind.SPARCV9,
    EM_IA_64: MachineKind.IA_64,
    EM_X86_64: MachineKind.X86_64,
    EM_AVR: MachineKind.AVR,
    EM_MSP430: MachineKind.MSP430,
    EM_AARCH64: MachineKind.AARCH64,
    EM_RISCV: MachineKind.RISCV,
    EM_BPF: MachineKind.BPF,
    EM_LOONGARCH: MachineKind.LOONGARCH,
}

_EM_NAMES: dict[MachineKind, str] = {
    MachineKind.NONE: "None",
    MachineKind.M32: "AT&T WE 32100",
    MachineKind.SPARC: "SPARC",
    MachineKind.X86: "x86",
    MachineKind.M68K: "Motorola 68000",
    MachineKind.M88K: "Motorola 88000",
    MachineKind.I860: "Intel 80860",
    MachineKind.MIPS: "MIPS",
    MachineKind.S370: "IBM System/370",
    MachineKind.MIPS_RS3_LE: "MIPS RS3000 (little-endian)",
    MachineKind.PARISC: "HP PA-RISC",
    MachineKind.SPARC32PLUS: "SPARC v8+",
    MachineKind.PPC: "PowerPC",
    MachineKind.PPC64: "PowerPC64",
    MachineKind.S390: "IBM S/390",
    MachineKind.ARM: "ARM",
    MachineKind.SUPERH: "SuperH",
    MachineKind.SPARCV9: "SPARC v9",
    MachineKind.IA_64: "IA-64",
    MachineKind.X86_64: "x86-64",
    MachineKind.AVR: "Atmel AVR",
    MachineKind.MSP430: "TI MSP430",
    MachineKind.AARCH64: "AArch64",
    MachineKind.RISCV: "RISC-V",
    MachineKind.BPF: "Linux BPF",
    MachineKind.LOONGARCH: "LoongArch",
}


# ---------------------------------------------------------------------------
# OS/ABI
# ---------------------------------------------------------------------------

ELFOSABI_SYSV: int = 0
ELFOSABI_HPUX: int = 1
ELFOSABI_NETBSD: int = 2
ELFOSABI_LINUX: int = 3
ELFOSABI_HURD: int = 4
ELFOSABI_SOLARIS: int = 6
ELFOSABI_AIX: int = 7
ELFOSABI_IRIX: int = 8
ELFOSABI_FREEBSD: int = 9
ELFOSABI_TRU64: int = 10
ELFOSABI_MODESTO: int = 11
ELFOSABI_OPENBSD: int = 12
ELFOSABI_OPENVMS: int = 13
ELFOSABI_NSK: int = 14
ELFOSABI_AROS: int = 15
ELFOSABI_FENIXOS: int = 16
ELFOSABI_CLOUDABI: int = 17
ELFOSABI_OPENVOS: int = 18
ELFOSABI_ARM_AEABI: int = 64
ELFOSABI_ARM: int = 97
ELFOSABI_STANDALONE: int = 255

_OSABI_KINDS: dict[int, OsAbiKind] = {
    ELFOSABI_SYSV: OsAbiKind.SYSV,
    ELFOSABI_HPUX: OsAbiKind.HPUX,
    ELFOSABI_NETBSD: OsAbiKind.NETBSD,
    ELFOSABI_LINUX: OsAbiKind.LINUX,
    ELFOSABI_HURD: OsAbiKind.HURD,
    ELFOSABI_SOLARIS: OsAbiKind.SOLARIS,
    ELFOSABI_AIX: OsAbiKind.AIX,
    ELFOSABI_IRIX: OsAbiKind.IRIX,
    ELFOSABI_FREEBSD: OsAbiKind.FREEBSD,
    ELFOSABI_TRU64: OsAbiKind.TRU64,
    ELFOSABI_MODESTO: OsAbiKind.MODESTO,
    ELFOSABI_OPENBSD: OsAbiKind.OPENBSD,
    ELFOSABI_OPENVMS: OsAbiKind.OPENVMS,
    ELFOSABI_NSK: OsAbiKind.NSK,
    ELFOSABI_AROS: OsAbiKind.AROS,
    ELFOSABI_FENIXOS: OsAbiKind.FENIXOS,
    ELFOSABI_CLOUDABI: OsAbiKind.CLOUDABI,
    ELFOSABI_OPENVOS: OsAbiKind.OPENVOS,
    ELFOSABI_ARM_AEABI: OsAbiKind.ARM_AEABI,
    ELFOSABI_ARM: OsAbiKind.ARM,
    ELFOSABI_STANDALONE: OsAbiKind.STANDALONE,
}

_OSABI_NAMES: dict[OsAbiKind, str] = {
    OsAbiKind.SYSV: "UNIX - System V",
    OsAbiKind.HPUX: "UNIX - HP-UX",
    OsAbiKind.NETBSD: "UNIX - NetBSD",
    OsAbiKind.LINUX: "UNIX - GNU/Linux",
    OsAbiKind.HURD: "GNU/Hurd",
    OsAbiKind.SOLARIS: "UNIX - Solaris",
    OsAbiKind.AIX: "UNIX - AIX",
    OsAbiKind.IRIX: "UNIX - IRIX",
    OsAbiKind.FREEBSD: "UNIX - FreeBSD",
    OsAbiKind.TRU64: "UNIX - TRU64",
    OsAbiKind.MODESTO: "Novell - Modesto",
    OsAbiKind.OPENBSD: "UNIX - OpenBSD",
    OsAbiKind.OPENVMS: "VMS - OpenVMS",
    OsAbiKind.NSK: "HP - Non-Stop Kernel",
    OsAbiKind.AROS: "AROS",
    OsAbiKind.FENIXOS: "FenixOS",
    OsAbiKind.CLOUDABI: "Nuxi CloudABI",
    OsAbiKind.OPENVOS: "Stratus Technologies OpenVOS",
    OsAbiKind.ARM_AEABI: "ARM EABI",
    OsAbiKind.ARM: "ARM",
    OsAbiKind.STANDALONE: "Standalone App",
}


# ---------------------------------------------------------------------------
# Mappers
# ---------------------------------------------------------------------------

def map_type(code: int) -> ObjectType:
    """Classify an ``e_type`` value."""
    kind = _ET_KINDS.get(code, ObjectTypeKind.PROCESSOR_SPECIFIC)
    return ObjectType(kind=kind, code=code)


def map_machine(code: int) -> Machine:
    """Classify an ``e_machine`` value."""
    kind = _EM_KINDS.get(code, MachineKind.UNKNOWN)
    return Machine(kind=kind, code=code)


def map_osabi(code: int) -> OsAbi:
    """Classify an EI_OSABI byte."""
    kind = _OSABI_KINDS.get(code, OsAbiKind.UNKNOWN)
    return OsAbi(kind=kind, code=code)


def type_name(value: ObjectType) -> str:
    """Human-readable label, e.g. ``"EXEC (Executable)"``."""
    name = _ET_NAMES.get(value.kind)
    if name is None:
        return f"<processor specific>: 0x{value.code:04x}"
    return name


def machine_name(value: Machine) -> str:
    """Human-readable label, e.g. ``"x86-64"``."""
    name = _EM_NAMES.get(value.kind)
    if name is None:
        return f"<unknown>: 0x{value.code:x}"
    return name


def osabi_name(value: OsAbi) -> str:
    """Human-readable label, e.g. ``"UNIX - System V"``."""
    name = _OSABI_NAMES.get(value.kind)
    if name is None:
        return f"<unknown: {value.code:x}>"
    return name
