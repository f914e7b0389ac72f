"""Colored logging formatter for console output."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


class ColoredFormatter(logging.Formatter):
    """Logging formatter that applies ANSI color codes to the levelname field.

    Colors are disabled when the ``NO_COLOR`` environment variable is set or
    when the output stream is not a TTY (e.g. redirected to a file).
    ``FORCE_COLOR`` turns them on regardless of the stream.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[2;37m",   # dim
        logging.INFO: "\033[34m",      # blue
        logging.WARNING: "\033[33m",   # yellow
        logging.ERROR: "\033[31m",     # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        if os.environ.get("FORCE_COLOR") is not None:
            return True
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self._use_color():
            return super().format(record)
        color = self.COLORS.get(record.levelno, "")
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
