"""Logging configuration."""

import logging
from logging import Formatter, LogRecord, StreamHandler
import sys
from typing import Dict, NoReturn, Optional, TextIO


class ColorFormatter(Formatter):

    """Log formatter that prints bold, colorized level names."""

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    FORMAT = "%(message)s"

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.default = Formatter(f"%(levelname)s: {self.FORMAT}")
        self.formatters: Dict[int, Formatter] = {}
        if use_color:
            for level, code in self.COLORS.items():
                fmt = f"\x1b[{code};1m%(levelname)s:\x1b[0m {self.FORMAT}"
                self.formatters[level] = Formatter(fmt)

    def format(self, record: LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.default)
        return formatter.format(record)


class ExitStreamHandler(StreamHandler):

    """Stream handler that exits the program after severe logs.

    Exits with status 1 after emitting a record at exit_level or higher
    (FATAL by default).
    """

    def __init__(
        self, stream: Optional[TextIO] = None, exit_level: int = logging.FATAL
    ):
        super().__init__(stream)
        self.exit_level = exit_level

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno >= self.exit_level:
            sys.exit(1)


def setup_logging(stream: TextIO, log_level: int, exit_level: int):
    """Set up the root logger to write to stream.

    Uses color if the stream is a TTY. The log_level must not be higher than
    exit_level, and the exit_level must not be higher than FATAL.
    """
    assert log_level <= exit_level
    assert exit_level <= logging.FATAL
    logger = logging.getLogger()
    logger.setLevel(log_level)
    handler = ExitStreamHandler(stream, exit_level)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)
    # FATAL and CRITICAL are the same. I prefer the label FATAL.
    logging.addLevelName(logging.FATAL, "FATAL")


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """A wrapper around logging.fatal.

    Fatal logs always exit once setup_logging has run. The NoReturn typing
    tells tools that code following a fatal log is unreachable. Without a
    configured handler, this exits directly.
    """
    logging.fatal(msg, *args, **kwargs)
    sys.exit(1)
