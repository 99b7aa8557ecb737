"""
test_codes -- type, machine and OS/ABI mappers.
"""
import pytest

from elfhead.core.models import MachineKind, ObjectTypeKind, OsAbiKind
from elfhead.parsers.codes import (
    machine_name,
    map_machine,
    map_osabi,
    map_type,
    osabi_name,
    type_name,
)


class TestMapType:

    @pytest.mark.parametrize("code,kind", [
        (0, ObjectTypeKind.NONE),
        (1, ObjectTypeKind.RELOCATABLE),
        (2, ObjectTypeKind.EXECUTABLE),
        (3, ObjectTypeKind.SHARED_OBJECT),
        (4, ObjectTypeKind.CORE),
    ])
    def test_known(self, code, kind):
        value = map_type(code)
        assert value.kind is kind
        assert value.code == code
        assert value.is_known

    def test_unknown_keeps_code(self):
        value = map_type(0xFF01)
        assert value.kind is ObjectTypeKind.PROCESSOR_SPECIFIC
        assert value.code == 0xFF01
        assert not value.is_known
        assert str(value) == "processor_specific(0xff01)"

    def test_names(self):
        assert type_name(map_type(2)) == "EXEC (Executable)"
        assert type_name(map_type(0xFF01)) == "<processor specific>: 0xff01"


class TestMapMachine:

    @pytest.mark.parametrize("code,kind", [
        (0, MachineKind.NONE),
        (2, MachineKind.SPARC),
        (3, MachineKind.X86),
        (8, MachineKind.MIPS),
        (20, MachineKind.PPC),
        (40, MachineKind.ARM),
        (42, MachineKind.SUPERH),
        (50, MachineKind.IA_64),
        (62, MachineKind.X86_64),
        (183, MachineKind.AARCH64),
        (243, MachineKind.RISCV),
    ])
    def test_known(self, code, kind):
        value = map_machine(code)
        assert value.kind is kind
        assert value.code == code

    def test_unknown_keeps_code(self):
        value = map_machine(0x1234)
        assert value.kind is MachineKind.UNKNOWN
        assert value.code == 0x1234
        assert str(value) == "unknown(0x1234)"

    def test_names(self):
        assert machine_name(map_machine(62)) == "x86-64"
        assert machine_name(map_machine(0x1234)) == "<unknown>: 0x1234"


class TestMapOsAbi:

    def test_known(self):
        assert map_osabi(0).kind is OsAbiKind.SYSV
        assert map_osabi(3).kind is OsAbiKind.LINUX
        assert map_osabi(9).kind is OsAbiKind.FREEBSD
        assert map_osabi(255).kind is OsAbiKind.STANDALONE

    def test_unknown_keeps_code(self):
        value = map_osabi(5)
        assert value.kind is OsAbiKind.UNKNOWN
        assert value.code == 5
        assert osabi_name(value) == "<unknown: 5>"

    def test_names(self):
        assert osabi_name(map_osabi(0)) == "UNIX - System V"


def test_mappers_are_total():
    """Every 16-bit type/machine and 8-bit OS/ABI value maps without error."""
    for code in range(0x10000):
        assert map_type(code).code == code
        assert map_machine(code).code == code
    for code in range(0x100):
        assert map_osabi(code).code == code
