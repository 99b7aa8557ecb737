"""
test_engine -- file loading and inspection reports.
"""
import hashlib

import pytest

from shared.config import ElfHeadConfig, InspectConfig

from elfhead.core.engine import ElfHeadEngine
from elfhead.core.errors import IoError, MalformedHeader, TruncatedInput
from elfhead.core.models import MachineKind


class TestReadObject:

    def test_reads_whole_file(self, object_file):
        data = ElfHeadEngine().read_object(object_file)
        assert data == object_file.read_bytes()

    def test_missing_file(self, tmp_path):
        with pytest.raises(IoError) as info:
            ElfHeadEngine().read_object(tmp_path / "missing.o")
        assert info.value.path.endswith("missing.o")

    def test_directory(self, tmp_path):
        target = tmp_path / "dir.o"
        target.mkdir()
        with pytest.raises(IoError):
            ElfHeadEngine().read_object(target)

    def test_empty_file(self, tmp_path):
        target = tmp_path / "empty.o"
        target.write_bytes(b"")
        with pytest.raises(IoError, match="empty"):
            ElfHeadEngine().read_object(target)

    def test_size_limit(self, object_file):
        config = ElfHeadConfig(inspect=InspectConfig(max_file_size=16))
        with pytest.raises(IoError, match="too large"):
            ElfHeadEngine(config=config).read_object(object_file)


class TestInspect:

    def test_report(self, object_file):
        report = ElfHeadEngine().inspect(object_file)
        raw = object_file.read_bytes()

        assert report.path == str(object_file.resolve())
        assert report.size == len(raw)
        assert report.sha256 == hashlib.sha256(raw).hexdigest()
        assert report.header.machine.kind is MachineKind.X86_64

    def test_decode_errors_propagate(self, tmp_path):
        target = tmp_path / "bad.o"
        target.write_bytes(b"not an elf file at all")
        with pytest.raises(MalformedHeader):
            ElfHeadEngine().inspect(target)

    def test_truncated_file(self, tmp_path, elf64_exec):
        target = tmp_path / "short.o"
        target.write_bytes(elf64_exec[:40])
        with pytest.raises(TruncatedInput):
            ElfHeadEngine().inspect(target)
