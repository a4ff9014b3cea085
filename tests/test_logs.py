"""Tests for logging setup."""

import logging
from io import StringIO

import pytest

from adjgraph.logs import ColorFormatter, fatal, setup_logging


class TTYStream(StringIO):
    def isatty(self) -> bool:
        return True


def test_color_on_tty() -> None:
    stream = TTYStream()
    setup_logging(stream, logging.INFO, logging.FATAL)
    logging.warning("careful")
    logging.info("hello")
    out = stream.getvalue()
    assert "\x1b[33;1mWARNING:\x1b[0m careful\n" in out
    assert "\x1b[32;1mINFO:\x1b[0m hello\n" in out


def test_plain_when_not_tty() -> None:
    stream = StringIO()
    setup_logging(stream, logging.WARNING, logging.FATAL)
    logging.warning("careful")
    logging.info("hidden")
    assert stream.getvalue() == "WARNING: careful\n"


def test_unknown_level_uses_default_format() -> None:
    formatter = ColorFormatter(use_color=True)
    record = logging.LogRecord("x", 25, __file__, 1, "custom", None, None)
    record.levelname = "NOTICE"
    assert formatter.format(record) == "NOTICE: custom"


def test_exit_level() -> None:
    stream = StringIO()
    setup_logging(stream, logging.WARNING, logging.ERROR)
    logging.warning("still running")
    with pytest.raises(SystemExit) as info:
        logging.error("stop")
    assert info.value.code == 1
    assert stream.getvalue() == "WARNING: still running\nERROR: stop\n"


def test_fatal_exits() -> None:
    stream = TTYStream()
    setup_logging(stream, logging.WARNING, logging.FATAL)
    with pytest.raises(SystemExit):
        fatal("%s is gone", "graph.yml")
    assert "\x1b[31;1mFATAL:\x1b[0m graph.yml is gone\n" in stream.getvalue()
