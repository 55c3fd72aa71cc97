"""Logging helpers for mdhtml.

Standard output carries only converted HTML, so every handler attached here
writes to stderr or to an explicitly configured file.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

__all__ = [
    "JsonLogFormatter",
    "configure_logger",
]


class JsonLogFormatter(logging.Formatter):
    """Emit log records as structured JSON lines."""

    _RESERVED = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extras = {
            key: _coerce_value(value)
            for key, value in record.__dict__.items()
            if key not in self._RESERVED
        }
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info
        return json.dumps(payload, ensure_ascii=True)


def configure_logger(
    name: str,
    *,
    level: str = "WARNING",
    verbose: bool = False,
    log_file: Path | None = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure and return a namespaced logger.

    The console handler (stderr) is attached only when ``verbose`` is set; a
    JSON file handler is attached only when ``log_file`` is given. Without
    either the logger stays silent.
    """

    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    file_level = _coerce_level(level)
    if verbose:
        file_level = logging.DEBUG

    if log_file is not None:
        handler = _ensure_file_handler(
            logger=logger,
            path=log_file,
            max_bytes=max_bytes,
            backup_count=backup_count,
        )
        handler.setLevel(file_level)
    else:
        _remove_managed(logger, "_mdhtml_file")

    if verbose:
        _enable_console_handler(logger)
    else:
        _remove_managed(logger, "_mdhtml_console")

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def _coerce_level(level: str) -> int:
    name = level.upper()
    numeric = logging.getLevelName(name)
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING


def _ensure_file_handler(
    *,
    logger: logging.Logger,
    path: Path,
    max_bytes: int,
    backup_count: int,
) -> RotatingFileHandler:
    target = path.expanduser().resolve()
    for handler in list(logger.handlers):
        if getattr(handler, "_mdhtml_file", False):
            if Path(handler.baseFilename) == target:  # type: ignore[attr-defined]
                return handler  # type: ignore[return-value]
            logger.removeHandler(handler)
            handler.close()
    target.parent.mkdir(parents=True, exist_ok=True)
    managed = RotatingFileHandler(
        target,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    managed.setFormatter(JsonLogFormatter())
    managed._mdhtml_file = True  # type: ignore[attr-defined]
    _drop_null_handlers(logger)
    logger.addHandler(managed)
    return managed


def _enable_console_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        if getattr(handler, "_mdhtml_console", False):
            handler.setLevel(logging.DEBUG)
            return
    console = logging.StreamHandler(stream=sys.stderr)
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    console._mdhtml_console = True  # type: ignore[attr-defined]
    _drop_null_handlers(logger)
    logger.addHandler(console)


def _remove_managed(logger: logging.Logger, marker: str) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, marker, False):
            logger.removeHandler(handler)
            handler.close()


def _drop_null_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)


def _coerce_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, dict):
        return {str(key): _coerce_value(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_coerce_value(item) for item in value]
    return repr(value)
