"""Console logging formatter with ANSI level colors."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

_LEVEL_COLORS: dict[int, str] = {
    logging.DEBUG: "\033[2;37m",  # dim grey
    logging.INFO: "\033[34m",  # blue
    logging.WARNING: "\033[33m",  # yellow
    logging.ERROR: "\033[31m",  # red
    logging.CRITICAL: "\033[1;41m",  # bold on red
}
_RESET = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors ``levelname`` for terminal output.

    Color is off when ``NO_COLOR`` is set, when ``use_color=False`` is passed,
    or when stderr is not a TTY. The original record is never mutated, so
    other handlers still see plain level names.
    """

    def __init__(self, *args: Any, use_color: bool | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._use_color_override = use_color

    def use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        if self._use_color_override is not None:
            return self._use_color_override
        return sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color():
            return super().format(record)

        colored = logging.makeLogRecord(record.__dict__)
        color = _LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname}{_RESET}"
        return super().format(colored)
