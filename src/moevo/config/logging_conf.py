"""Root logger setup: plain text or one JSON object per record."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Mapping

from .settings import Settings, get_settings

__all__ = ["JSONFormatter", "configure_logging", "LOG_FILE_NAME"]

LOG_FILE_NAME = "moevo.log"

_RESERVED = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """Serialise a ``LogRecord`` as JSON, keeping ``extra=`` fields."""

    def __init__(self, *, default_context: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self._default_context = dict(default_context or {})

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info

        payload.update(self._default_context)

        for key, value in record.__dict__.items():
            if key in _RESERVED:
                continue
            payload.setdefault(key, value)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(
    *,
    settings: Settings | None = None,
    level: int | str | None = None,
    structured: bool | None = None,
    module_levels: Mapping[str, int | str] | None = None,
    stream: IO[str] | None = None,
    context: Mapping[str, Any] | None = None,
    log_file: Path | None = None,
) -> None:
    """Install stream and file handlers on the root logger.

    Parameters
    ----------
    settings:
        Source of defaults; :func:`get_settings` when ``None``.
    level:
        Handler level; defaults to ``settings.log_level``.
    structured:
        Use :class:`JSONFormatter`; defaults to ``settings.structured_logging``.
    module_levels:
        Per-logger level overrides, e.g. ``{"moevo.operators": "DEBUG"}``.
    stream:
        Target of the stream handler; ``sys.stderr`` by default.
    context:
        Fields added to every structured record (e.g. ``{"seed": 7}``).
    log_file:
        File receiving a copy of the logs; ``settings.logs_dir / 'moevo.log'``
        when ``None``.
    """

    settings = settings or get_settings()
    structured = settings.structured_logging if structured is None else structured
    level = settings.log_level if level is None else level

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    formatter: logging.Formatter
    if structured:
        formatter = JSONFormatter(default_context=context)
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    file_target = log_file or (settings.logs_dir / LOG_FILE_NAME)
    try:
        file_target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_target, encoding="utf-8")
    except OSError:  # pragma: no cover - read-only filesystems
        logging.getLogger(__name__).warning("cannot write log file %s", file_target)
    else:
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for logger_name, logger_level in (module_levels or {}).items():
        logging.getLogger(logger_name).setLevel(logger_level)
