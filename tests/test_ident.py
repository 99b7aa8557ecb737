"""
test_ident -- buffer validation and e_ident decoding.
"""
import pytest

from elfhead.core.errors import MalformedHeader, TruncatedInput, UnsupportedByteOrder, UnsupportedClass
from elfhead.core.models import ByteOrder, ElfClass, OsAbiKind
from elfhead.parsers.ident import EI_NIDENT, decode_identification, validate_buffer


class TestValidateBuffer:
    """Magic and minimum-length checks."""

    def test_accepts_full_ident(self, make_ident):
        validate_buffer(make_ident())

    @pytest.mark.parametrize("size", [0, 1, 3])
    def test_too_short_for_magic(self, size):
        with pytest.raises(TruncatedInput) as info:
            validate_buffer(b"\x7fELF"[:size])
        assert info.value.actual == size

    @pytest.mark.parametrize("size", [4, 5, 15])
    def test_valid_magic_short_ident(self, make_ident, size):
        with pytest.raises(TruncatedInput) as info:
            validate_buffer(make_ident()[:size])
        assert info.value.required == EI_NIDENT
        assert info.value.actual == size

    @pytest.mark.parametrize("magic", [b"\x00ELF", b"\x7fELG", b"MZ\x90\x00", b"\x7felf"])
    def test_wrong_magic(self, make_ident, magic):
        with pytest.raises(MalformedHeader) as info:
            validate_buffer(make_ident(magic=magic))
        assert info.value.found == magic

    def test_wrong_magic_wins_over_short_buffer(self):
        """A bad magic is reported even when the ident is incomplete."""
        with pytest.raises(MalformedHeader):
            validate_buffer(b"\x00ELF\x02")


class TestDecodeIdentification:
    """Field extraction at fixed e_ident offsets."""

    def test_fields(self, make_ident):
        ident = decode_identification(
            make_ident(elf_class=1, byte_order=1, version=1, osabi=3, abi_version=7,
                       padding=b"\x01\x02\x03\x04\x05\x06\x07")
        )

        assert ident.magic == b"\x7fELF"
        assert ident.elf_class is ElfClass.ELF32
        assert ident.byte_order is ByteOrder.LITTLE
        assert ident.version == 1
        assert ident.is_current
        assert ident.osabi.kind is OsAbiKind.LINUX
        assert ident.osabi.code == 3
        assert ident.abi_version == 7
        assert ident.padding == b"\x01\x02\x03\x04\x05\x06\x07"

    def test_big_endian_is_recognised(self, make_ident):
        ident = decode_identification(make_ident(byte_order=2))
        assert ident.byte_order is ByteOrder.BIG

    @pytest.mark.parametrize("value", [0, 3, 0x7F, 0xFF])
    def test_unsupported_class(self, make_ident, value):
        with pytest.raises(UnsupportedClass) as info:
            decode_identification(make_ident(elf_class=value))
        assert info.value.value == value

    @pytest.mark.parametrize("value", [0, 3, 0xFF])
    def test_unsupported_byte_order(self, make_ident, value):
        with pytest.raises(UnsupportedByteOrder) as info:
            decode_identification(make_ident(byte_order=value))
        assert info.value.value == value

    def test_class_checked_before_byte_order(self, make_ident):
        with pytest.raises(UnsupportedClass):
            decode_identification(make_ident(elf_class=9, byte_order=9))

    def test_unknown_osabi_passes_through(self, make_ident):
        ident = decode_identification(make_ident(osabi=0x42))
        assert ident.osabi.kind is OsAbiKind.UNKNOWN
        assert ident.osabi.code == 0x42

    def test_non_current_version_is_kept(self, make_ident):
        ident = decode_identification(make_ident(version=0))
        assert ident.version == 0
        assert not ident.is_current

    def test_only_ident_bytes_needed(self, make_ident):
        """Exactly 16 bytes decode; the body is not this stage's concern."""
        assert len(make_ident()) == EI_NIDENT
        decode_identification(make_ident())
