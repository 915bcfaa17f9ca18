import logging

import pytest
from pydantic import ValidationError

from fnkit import LogConfig, LoggerLines, fn_error, fn_log
from fakes import FakeLines


def test_fn_log_is_deferred() -> None:
    lines = FakeLines()
    thunk = fn_log("loaded", 3, "items", lines=lines)
    assert lines.lines == []
    thunk()
    assert lines.lines == [("loaded", 3, "items")]


def test_fn_error_writes_error_line() -> None:
    lines = FakeLines()
    fn_error("failed", {"id": 1}, lines=lines)()
    assert lines.errors == [("failed", {"id": 1})]
    assert lines.lines == []


def test_missing_message_becomes_empty_string() -> None:
    lines = FakeLines()
    fn_log(lines=lines)()
    fn_log(None, "x", lines=lines)()
    assert lines.lines == [("",), ("", "x")]


def test_default_port_uses_logger(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="fnkit"):
        fn_log("hello", "world")()
        fn_error("bad", 1)()
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.INFO, "hello world"),
        (logging.ERROR, "bad 1"),
    ]


def test_logger_lines_from_config(caplog) -> None:
    config = LogConfig(logger_name="fnkit.custom", line_level="debug", error_level="warning")
    lines = LoggerLines.from_config(config)
    with caplog.at_level(logging.DEBUG, logger="fnkit.custom"):
        fn_log("trace", lines=lines)()
        fn_error("careful", lines=lines)()
    assert [(r.name, r.levelno) for r in caplog.records] == [
        ("fnkit.custom", logging.DEBUG),
        ("fnkit.custom", logging.WARNING),
    ]


def test_config_normalises_and_validates_levels() -> None:
    assert LogConfig(line_level="info").line_level == "INFO"
    with pytest.raises(ValidationError):
        LogConfig(error_level="loud")
    with pytest.raises(ValidationError):
        LogConfig(logger_name="")


def test_falsy_non_none_message_is_kept() -> None:
    lines = FakeLines()
    fn_log(0, "x", lines=lines)()
    fn_error(False, lines=lines)()
    assert lines.lines == [(0, "x")]
    assert lines.errors == [(False,)]
