"""Console and file logging for conversion runs."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT_LOGGER = "mdjavadoc"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Prints progress lines bare and tags warnings and errors.

    ``Updated: <path>`` is the line users grep for, so INFO records carry no
    decoration. Everything else is prefixed with ``[mdjavadoc] LEVEL``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return message
        return f"[{_ROOT_LOGGER}] {record.levelname} {message}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``mdjavadoc.<name>``, or the package logger itself."""
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}" if name else _ROOT_LOGGER)


def configure_logging(*, verbose: bool = False, log_file: Path | None = None) -> logging.Logger:
    """Route mdjavadoc records to stderr and, optionally, to ``log_file``.

    Calling it again replaces the handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(ConsoleFormatter())
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger
