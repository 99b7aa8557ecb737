"""
test_logger -- file logging, JSON records and operation context.
"""
import json
import logging

from shared.logger import ElfHeadLogger


def test_json_file_records(tmp_path):
    log_path = tmp_path / "logs" / "elfhead.log"
    log = ElfHeadLogger(
        "test_json", log_level="DEBUG", log_file=log_path, json_logs=True, console_output=False
    )
    with log.operation("decode"):
        log.info("Decoded %s", "hello.o", width=64)
    log.warning("outside")
    for handler in log.underlying.handlers:
        handler.flush()

    records = [json.loads(line) for line in log_path.read_text().splitlines()]
    assert records[0]["message"] == "Decoded hello.o"
    assert records[0]["operation"] == "decode"
    assert records[0]["extra"] == {"width": 64}
    assert records[0]["tool_name"] == "test_json"
    assert "operation" not in records[1]


def test_capture_routes_library_logger(tmp_path):
    log_path = tmp_path / "capture.log"
    ElfHeadLogger(
        "test_capture",
        log_level="DEBUG",
        log_file=log_path,
        console_output=False,
        capture=("elfhead.test_library",),
    )
    lib = logging.getLogger("elfhead.test_library")
    lib.debug("from library")
    for handler in lib.handlers:
        handler.flush()

    assert "from library" in log_path.read_text()


def test_no_handlers_is_silent(capsys):
    log = ElfHeadLogger("test_silent", console_output=False)
    log.warning("nobody hears this")
    captured = capsys.readouterr()
    assert "nobody hears this" not in captured.err
