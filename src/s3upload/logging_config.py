from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# Attributes every LogRecord carries; anything else arrived through extra=.
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


class _UploadFormatter(logging.Formatter):
    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    @staticmethod
    def _utc_now() -> str:
        return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S%z")


class JsonFormatter(_UploadFormatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self._utc_now(),
            "level": record.levelname,
            "service": self.service,
            "logger": record.name,
            "thread": record.threadName,
            "message": record.getMessage(),
        }
        context = record_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class TextFormatter(_UploadFormatter):
    def format(self, record: logging.LogRecord) -> str:
        line = f"{self._utc_now()} {record.levelname} {self.service} {record.name} [{record.threadName}] {record.getMessage()}"
        context = record_context(record)
        if context:
            line += " " + " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(level: str | None = None, service: str = "s3upload", stream: TextIO | None = None) -> None:
    """
    Send diagnostics to stderr (or stream); stdout carries only outcome lines.

    LOG_LEVEL picks the level when none is given, LOG_JSON=1 switches to
    one JSON object per line.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    resolved_level = logging.getLevelName(level_name)
    if not isinstance(resolved_level, int):
        resolved_level = logging.WARNING
    use_json = (os.getenv("LOG_JSON") or "").strip().lower() in {"1", "true", "yes", "on"}

    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(JsonFormatter(service) if use_json else TextFormatter(service))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(resolved_level)
    # botocore is chatty at DEBUG; keep it one notch quieter than ours.
    logging.getLogger("botocore").setLevel(max(resolved_level, logging.INFO))
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
