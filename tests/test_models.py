"""
test_models -- immutability, validation and serialisation of header models.
"""
import pytest
from pydantic import ValidationError

from elfhead.core.models import (
    ByteOrder,
    ElfClass,
    ElfHeader,
    HeaderBody32,
    HeaderBody64,
    IdentificationBlock,
)
from elfhead.parsers.codes import map_machine, map_osabi, map_type
from elfhead.parsers.header import decode_elf_header


def _ident(**overrides):
    values = dict(elf_class=ElfClass.ELF64, byte_order=ByteOrder.LITTLE, osabi=map_osabi(0))
    values.update(overrides)
    return IdentificationBlock(**values)


def _body_fields(**overrides):
    values = dict(
        object_type=map_type(1),
        machine=map_machine(62),
        version=1,
        entry=0,
        phoff=0,
        shoff=0,
        flags=0,
        ehsize=64,
        phentsize=0,
        phnum=0,
        shentsize=64,
        shnum=0,
        shstrndx=0,
    )
    values.update(overrides)
    return values


class TestIdentificationBlock:

    def test_rejects_wrong_magic(self):
        with pytest.raises(ValidationError):
            _ident(magic=b"\x7fELG")

    def test_rejects_short_padding(self):
        with pytest.raises(ValidationError):
            _ident(padding=b"\x00" * 6)

    def test_frozen(self):
        ident = _ident()
        with pytest.raises(ValidationError):
            ident.abi_version = 3


class TestHeaderBodies:

    def test_elf32_word_range(self):
        HeaderBody32(**_body_fields(entry=0xFFFF_FFFF))
        with pytest.raises(ValidationError):
            HeaderBody32(**_body_fields(entry=0x1_0000_0000))

    def test_elf64_word_range(self):
        body = HeaderBody64(**_body_fields(entry=0x1_0000_0000))
        assert body.width == 64

    def test_u16_range(self):
        with pytest.raises(ValidationError):
            HeaderBody64(**_body_fields(shnum=0x10000))

    def test_discriminated_union(self):
        header = ElfHeader.model_validate({
            "ident": _ident().model_dump(),
            "body": {"width": 32, **_body_fields()},
        })
        assert isinstance(header.body, HeaderBody32)


class TestSerialisation:

    def test_json_dump(self, elf64_exec):
        dumped = decode_elf_header(elf64_exec).model_dump(mode="json")

        assert dumped["ident"]["magic"] == "7f454c46"
        assert dumped["ident"]["padding"] == "00000000000000"
        assert dumped["ident"]["elf_class"] == 2
        assert dumped["body"]["width"] == 64
        assert dumped["body"]["machine"] == {"code": 62, "kind": "x86_64"}
        assert dumped["body"]["object_type"]["kind"] == "executable"

    def test_json_round_trip(self, elf32_rel):
        header = decode_elf_header(elf32_rel)
        restored = ElfHeader.model_validate_json(header.model_dump_json())
        assert isinstance(restored.body, HeaderBody32)
        assert restored.body == header.body
