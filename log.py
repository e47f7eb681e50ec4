"""Hestenes logging.

Loggers live under the ``hestenes`` hierarchy and are handed out by
:func:`get_logger`. The first call configures the hierarchy from the
environment; :func:`configure` can be called again (the CLI does, with the
Hydra ``log_level``) and replaces the handlers it installed before.

Environment variables:
    HESTENES_LOG_LEVEL  — DEBUG / INFO (default) / WARNING / ERROR
    HESTENES_LOG_FILE   — optional path; appends plain-text log lines
"""

from __future__ import annotations

import logging
import os
import sys

ROOT = "hestenes"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED = False
_HANDLERS: list[logging.Handler] = []

_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
_RESET = "\033[0m"


class _ColorFormatter(logging.Formatter):
    """Colours the leading level name of a console line.

    Works on the formatted string; the record is shared with the other
    handlers and stays untouched.
    """

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = _COLORS.get(record.levelno)
        if not self.use_color or color is None or not line.startswith(record.levelname):
            return line
        return f"{color}{record.levelname}{_RESET}{line[len(record.levelname):]}"


def _resolve_level(level: str | None) -> int:
    name = (level or os.environ.get("HESTENES_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def configure(level: str | None = None, log_file: str | None = None) -> logging.Logger:
    """(Re)configure the ``hestenes`` root logger.

    Args:
        level: Level name; falls back to ``HESTENES_LOG_LEVEL``, then INFO.
        log_file: Append-mode file sink; falls back to ``HESTENES_LOG_FILE``.

    Returns:
        The ``hestenes`` root logger.
    """
    global _CONFIGURED
    _CONFIGURED = True

    root = logging.getLogger(ROOT)
    for handler in _HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _HANDLERS.clear()

    root.setLevel(_resolve_level(level))

    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_ColorFormatter(CONSOLE_FORMAT, use_color=use_color))
    _HANDLERS.append(console)

    log_file = log_file or os.environ.get("HESTENES_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        _HANDLERS.append(fh)

    for handler in _HANDLERS:
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``hestenes`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.

    Returns:
        A :class:`logging.Logger` instance.
    """
    if not _CONFIGURED:
        configure()
    return logging.getLogger(f"{ROOT}.{name}")
