"""
Shared pytest fixtures for ElfHead tests.

Headers are synthesised with :mod:`struct` so every test controls each
field exactly; no compiler or system object files are needed.
"""
import struct
from pathlib import Path

import pytest

ELF_MAGIC = b"\x7fELF"

# Field values used when a test does not override them.
DEFAULT_FIELDS = {
    "e_type": 2,
    "e_machine": 0x3E,
    "e_version": 1,
    "e_entry": 0x401000,
    "e_phoff": 64,
    "e_shoff": 0x3A28,
    "e_flags": 0,
    "e_ehsize": 64,
    "e_phentsize": 56,
    "e_phnum": 13,
    "e_shentsize": 64,
    "e_shnum": 31,
    "e_shstrndx": 30,
}


def build_ident(
    elf_class=2,
    byte_order=1,
    version=1,
    osabi=0,
    abi_version=0,
    padding=b"\x00" * 7,
    magic=ELF_MAGIC,
):
    """Return a 16-byte e_ident array."""
    return magic + bytes([elf_class, byte_order, version, osabi, abi_version]) + padding


def build_header(elf_class=2, byte_order=1, osabi=0, abi_version=0, **fields):
    """Return a complete little-endian ELF32 or ELF64 file header."""
    values = dict(DEFAULT_FIELDS)
    values.update(fields)
    word = "Q" if elf_class == 2 else "I"
    body = struct.pack(
        f"<HHI{word}{word}{word}IHHHHHH",
        values["e_type"],
        values["e_machine"],
        values["e_version"],
        values["e_entry"],
        values["e_phoff"],
        values["e_shoff"],
        values["e_flags"],
        values["e_ehsize"],
        values["e_phentsize"],
        values["e_phnum"],
        values["e_shentsize"],
        values["e_shnum"],
        values["e_shstrndx"],
    )
    ident = build_ident(
        elf_class=elf_class,
        byte_order=byte_order,
        osabi=osabi,
        abi_version=abi_version,
    )
    return ident + body


@pytest.fixture
def make_header():
    """Factory fixture: ``make_header(elf_class=1, e_machine=40, ...)``."""
    return build_header


@pytest.fixture
def make_ident():
    """Factory fixture for bare identification blocks."""
    return build_ident


@pytest.fixture
def elf64_exec():
    """Example 1: an ELF64 little-endian x86-64 executable header."""
    return build_header()


@pytest.fixture
def elf32_rel():
    """A 32-bit ARM relocatable object header."""
    return build_header(
        elf_class=1,
        e_type=1,
        e_machine=40,
        e_entry=0,
        e_phoff=0,
        e_shoff=0x2F4,
        e_flags=0x05000000,
        e_ehsize=52,
        e_phentsize=0,
        e_phnum=0,
        e_shentsize=40,
        e_shnum=11,
        e_shstrndx=10,
    )


@pytest.fixture
def object_file(tmp_path: Path, elf64_exec) -> Path:
    """An on-disk ``.o`` file holding a full 64-bit header plus payload."""
    path = tmp_path / "hello.o"
    path.write_bytes(elf64_exec + b"\x00" * 128)
    return path
