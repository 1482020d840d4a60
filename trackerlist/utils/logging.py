"""Process-wide logging setup.

``configure_logging`` is called once from the CLI entrypoint; later calls
are ignored unless ``force`` is given. Modules only ever call
``get_logger``.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Literal

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

DEFAULT_LOG_FILE = "logs/trackerlist.log"

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)

_configured = False


def _build_handlers(output: str, file_path: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if output in ("stdout", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(RotatingFileHandler(file_path, maxBytes=10 * 1024 * 1024, backupCount=5))
    return handlers


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    *,
    force: bool = False,
) -> None:
    """Install root handlers for the process.

    Unset arguments fall back to ``LOG_LEVEL``, ``LOG_OUTPUT``,
    ``LOG_FILE_PATH`` and ``LOG_FORMAT``, read at call time so a ``.env``
    loaded by the entrypoint is honoured.
    """
    global _configured
    if _configured and not force:
        return

    if level is None:
        level = os.environ.get("LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        level = level.upper()
    output = output or (os.environ.get("LOG_OUTPUT") or "stdout").lower()
    file_path = file_path or os.environ.get("LOG_FILE_PATH") or DEFAULT_LOG_FILE
    log_format = log_format or (os.environ.get("LOG_FORMAT") or "text").lower()

    formatter = logging.Formatter(_JSON_FORMAT if log_format == "json" else _TEXT_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in _build_handlers(output, file_path):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
